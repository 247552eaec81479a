"""Delete an app by its name."""

from typing import Optional

import typer

from ....config import settings
from ....core.api_client import UnauthenticatedError
from ....core.constants import ENV_API_BASE_URL, ENV_API_KEY
from ....core.utils import format_date, run_async
from ....puter_app.api_client import App, PuterClient
from ....utils.ux import print_details, print_error, print_info, print_success
from ...utils import exit_on_failure, handle_api_errors, setup_authenticated_client


async def delete_app_async(client: PuterClient, name: str) -> bool:
    """Read the app, show its details, then delete it.

    Args:
        client: Puter API client
        name: The app's name (not its title)

    Returns:
        bool: True if the app was deleted
    """
    print_info(f'Checking app "{name}"...')
    try:
        read = await client.read_app(name)
        if not read.ok or not read.result:
            print_error(f'App "{name}" not found.', log=False)
            return False

        app = App.model_validate(read.result)
        print_details(
            "App Details",
            {
                "Name": app.name,
                "Title": app.title,
                "Created": format_date(app.created_at),
                "URL": app.index_url,
            },
        )

        print_info(f'Deleting app "{name}"...')
        deleted = await client.delete_app(name)
        if deleted.ok:
            print_success(f'App "{name}" deleted successfully!')
            return True

        print_error(
            f"Failed to delete app \"{name}\".\nP.S. You may need to provide the 'name' not the 'title'."
        )
        return False
    except UnauthenticatedError:
        raise
    except Exception as e:
        print_error(f'Failed to delete app "{name}".\nError: {str(e)}')
        return False


@handle_api_errors
def delete_app(
    name: str = typer.Argument(..., help="Name of the app to delete (not its title)."),
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
    """Delete an app by its name."""
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(run_async(delete_app_async(client, name)))
