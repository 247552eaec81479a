"""Delete subdomain bindings."""

from typing import List, Optional, Sequence

import typer

from ....config import settings
from ....core.api_client import UnauthenticatedError
from ....core.constants import ENV_API_BASE_URL, ENV_API_KEY
from ....core.utils import run_async
from ....puter_app.api_client import PuterClient
from ....utils.ux import print_error, print_success
from ...utils import exit_on_failure, handle_api_errors, setup_authenticated_client


async def delete_subdomains_async(
    client: PuterClient, identifiers: Sequence[str]
) -> bool:
    """Delete each subdomain in order, stopping at the first failure.

    Returns:
        bool: True if every identifier was deleted
    """
    if not identifiers:
        print_error("Usage: domain delete <subdomain_id>...")
        return False

    for identifier in identifiers:
        try:
            response = await client.delete_subdomain(identifier)
        except UnauthenticatedError:
            raise
        except Exception as e:
            print_error(f"Error deleting subdomain: {str(e)}")
            return False

        if not response.ok:
            if response.not_found:
                print_error(f'Subdomain ID: "{identifier}" not found', log=False)
                return False
            print_error(f"Failed to delete subdomain: {response.error_message}")
            return False
        print_success(f'Subdomain "{identifier}" deleted successfully')

    return True


@handle_api_errors
def delete_subdomain(
    identifiers: List[str] = typer.Argument(
        ..., help="One or more subdomains to delete."
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
    """Delete one or more subdomains, stopping at the first failure."""
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(run_async(delete_subdomains_async(client, identifiers)))
