"""Deploy command for the Puter CLI.

Binds a subdomain to a remote directory so the directory is served as a
static site at ``https://<subdomain>.puter.site``.
"""

from typing import Optional

import typer

from ...config import settings
from ...core.api_client import UnauthenticatedError
from ...core.constants import ENV_API_BASE_URL, ENV_API_KEY, site_url
from ...core.utils import generate_app_name, resolve_path, run_async
from ...exceptions import PuterAPIError
from ...puter_app.api_client import PuterClient, Subdomain
from ...utils.ux import print_error, print_info, print_success, print_warning
from ..domain.delete import delete_subdomains_async
from ..domains.list import fetch_subdomains
from ..utils import (
    exit_on_failure,
    handle_api_errors,
    require_current_directory,
    require_username,
    setup_authenticated_client,
)


def resolve_remote_dir(current_dir: str, directory: Optional[str] = None) -> str:
    """Directory to serve: ``directory`` relative to ``current_dir``, or ``current_dir``."""
    if directory and not directory.startswith("--"):
        return resolve_path(current_dir, directory)
    return resolve_path(current_dir, ".")


async def deploy_site_async(
    client: PuterClient,
    app_name: str,
    username: str,
    current_dir: str,
    directory: Optional[str] = None,
    subdomain: Optional[str] = None,
) -> bool:
    """Host ``directory`` under ``subdomain`` (defaults to ``app_name``).

    When the subdomain is already yours but serves another directory it is
    released and the operator is asked to deploy again. When it belongs to
    someone else a random unused name is generated instead.

    Returns:
        bool: True when the site is deployed (or already was)
    """
    remote_dir = resolve_remote_dir(current_dir, directory)
    print_info(f'Deploying app "{app_name}" from "{remote_dir}"...')

    try:
        target = subdomain or app_name

        subdomains = await fetch_subdomains(client)
        existing: Optional[Subdomain] = next(
            (sd for sd in subdomains if sd.subdomain == target), None
        )

        if existing is not None:
            owner = existing.owner_username
            print_info(
                f'The subdomain "{target}" is already in use and owned by: "{owner}"'
            )
            if owner == username:
                bound_dir = existing.root_dir_path
                if bound_dir and resolve_path("/", bound_dir) == remote_dir:
                    print_success(
                        f"It's already linked to the selected directory, and deployed at: {site_url(target)}"
                    )
                    return True

                print_warning(
                    f"It's yours, but linked to a different directory: {existing.root_dir_path}"
                )
                print_info("Trying to unlink this subdomain from that directory...")
                if await delete_subdomains_async(client, [existing.subdomain]):
                    print_success(
                        "Looks like this subdomain is free again, please run deploy again."
                    )
                else:
                    print_error("Could not release this subdomain.")
                return False

            target = generate_app_name(taken=(sd.subdomain for sd in subdomains))
            print_warning(f'New generated subdomain: "{target}" will be used.')

        print_info(f'Hosting app "{app_name}" under subdomain "{target}"...')
        hosted = await client.create_subdomain(subdomain=target, root_dir=remote_dir)
        if not hosted.ok:
            raise PuterAPIError(
                f"Failed to host directory: {hosted.error_message}",
                code=hosted.error.code if hosted.error else None,
            )
        hosted_subdomain = target
        if isinstance(hosted.result, dict) and hosted.result.get("subdomain"):
            hosted_subdomain = Subdomain.model_validate(hosted.result).subdomain

        print_success(f'App "{app_name}" deployed successfully!')
        print_success(f"Website hosted at: {site_url(hosted_subdomain)}")
        return True
    except UnauthenticatedError:
        raise
    except Exception as e:
        print_error(f"Failed to deploy app.\nError: {str(e)}")
        return False


@handle_api_errors
def deploy_site(
    app_name: str = typer.Argument(..., help="Name of the app to deploy."),
    directory: Optional[str] = typer.Argument(
        None,
        help="Remote directory to serve, relative to your remote working directory. Defaults to it.",
    ),
    subdomain: Optional[str] = typer.Option(
        None,
        "--subdomain",
        "-s",
        help="Subdomain to host the site under. Defaults to the app name.",
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
    """Deploy a remote directory as a static site.

    Examples:

        puter deploy myapp

        puter deploy myapp ./myapp

        puter deploy myapp --subdomain=myapp
    """
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(
        run_async(
            deploy_site_async(
                client,
                app_name,
                username=require_username(),
                current_dir=require_current_directory(),
                directory=directory,
                subdomain=subdomain,
            )
        )
    )
