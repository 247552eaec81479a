"""Create an app together with its storage directory and subdomain.

Creation runs four steps in order:

1. create the app record (the server dedupes the name),
2. create a directory under ``/<username>/AppData/<app uid>``,
3. bind a new subdomain to that directory,
4. point the app's ``index_url`` at its site.

A failing step stops the run. Steps that already succeeded are not rolled
back, so the printed messages tell the operator what was left behind.
"""

import uuid
from typing import Optional

import typer

from ....config import settings
from ....core.api_client import UnauthenticatedError
from ....core.constants import DEFAULT_APP_URL, ENV_API_BASE_URL, ENV_API_KEY, site_url
from ....core.utils import run_async
from ....puter_app.api_client import App, PuterClient
from ....utils.ux import console, print_error, print_info, print_success
from ...utils import exit_on_failure, handle_api_errors, setup_authenticated_client


async def create_app_async(
    client: PuterClient,
    name: str,
    description: str = "",
    url: str = DEFAULT_APP_URL,
) -> bool:
    """Run the app creation workflow.

    Returns:
        bool: True when every step succeeded
    """
    if not name:
        print_error("App name must be a non-empty string.", log=False)
        return False

    print_info(f'Creating app: "{name}"...')
    try:
        # Step 1: app record
        created = await client.create_app(name=name, index_url=url, description=description)
        if not created.ok or not created.result:
            print_error(f'Failed to create app "{name}": {created.error_message}')
            return False
        app = App.model_validate(created.result)
        app_name = app.name
        app_uid = app.uid
        username = app.owner.username if app.owner else None
        if not app_uid or not username:
            print_error(f'App "{name}" was created but the response lacks its uid or owner.')
            return False
        print_success(f'App "{name}" created successfully!')
        console.print(
            f"[dim]AppName: {app_name}\nUID: {app_uid}\nUsername: {username}[/dim]"
        )

        # Step 2: storage directory
        dir_id = str(uuid.uuid4())
        parent = f"/{username}/AppData/{app_uid}"
        print_info(f'Creating directory for app "{name}" with UID: "{dir_id}"...')
        directory = await client.mkdir(parent=parent, path=f"app-{dir_id}")
        if not directory.uid:
            print_error(f'Failed to create directory for app "{name}"')
            return False
        print_success("Directory created successfully!")
        console.print(f"[dim]Directory UID: {directory.uid}[/dim]")

        # Step 3: subdomain bound to the directory
        subdomain = f"{name}-{dir_id.split('-')[0]}"
        print_info(f'Creating subdomain: "{subdomain}"...')
        bound = await client.create_subdomain(
            subdomain=subdomain,
            root_dir=f"{parent}/{directory.name or f'app-{dir_id}'}",
        )
        if not bound.ok:
            print_error(f'Failed to create subdomain: "{subdomain}": {bound.error_message}')
            return False
        print_success("Subdomain created successfully!")
        console.print(f"[dim]Subdomain: {subdomain}[/dim]")

        # Step 4: point the app at its site
        print_info(f'Set "{subdomain}" as a subdomain for app: "{app_name}"...')
        updated = await client.update_app(
            name=app_name, index_url=site_url(app_name), title=name
        )
        if not updated.ok:
            print_error(f'Failed to update app "{name}" with new subdomain')
            return False

        print_success(f"App deployed successfully at: {site_url(subdomain)}")
        return True
    except UnauthenticatedError:
        raise
    except Exception as e:
        print_error(f'Failed to create app "{name}".\nError: {str(e)}')
        return False


@handle_api_errors
def create_app(
    name: str = typer.Argument(..., help="Name of the app, also used as its title."),
    description: Optional[str] = typer.Argument("", help="Description of the app."),
    url: Optional[str] = typer.Argument(
        DEFAULT_APP_URL, help="Initial index URL shown until the site is deployed."
    ),
    api_url: Optional[str] = typer.Option(
        settings.API_BASE_URL,
        "--api-url",
        help="API base URL. Defaults to PUTER_API_BASE_URL environment variable.",
        envvar=ENV_API_BASE_URL,
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Auth token. Defaults to PUTER_API_KEY environment variable or stored credentials.",
        envvar=ENV_API_KEY,
    ),
) -> None:
    """Create a new app with its own directory and subdomain."""
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(
        run_async(create_app_async(client, name, description or "", url or DEFAULT_APP_URL))
    )
