"""Delete hosted sites and release their subdomains."""

from typing import List, Optional, Sequence

import typer

from ....config import settings
from ....core.api_client import UnauthenticatedError
from ....core.constants import ENV_API_BASE_URL, ENV_API_KEY
from ....core.utils import run_async
from ....puter_app.api_client import PuterClient
from ....utils.ux import print_error, print_success, print_warning
from ...domain.delete import delete_subdomains_async
from ...utils import exit_on_failure, handle_api_errors, setup_authenticated_client


async def delete_sites_async(client: PuterClient, site_uuids: Sequence[str]) -> bool:
    """Delete each site, then try to release the subdomain with the same id.

    The API answers an empty object when the site was removed; anything else
    is reported as "may already be deleted" since the API does not say which.

    Returns:
        bool: False if a delete-site request failed
    """
    if not site_uuids:
        print_error("Usage: site delete <site_uuid>...")
        return False

    all_requests_ok = True
    for site_uuid in site_uuids:
        try:
            # Site uuids are prefixed with 'subdomainObj-' by the API
            data = await client.delete_site(site_uuid)
            released = await delete_subdomains_async(client, [site_uuid])
            if released and data == {}:
                print_success(f'Site ID: "{site_uuid}" should be deleted.')
            else:
                print_warning(f'Site ID: "{site_uuid}" may already be deleted!')
        except UnauthenticatedError:
            raise
        except Exception as e:
            print_error(f"Error deleting site: {str(e)}")
            all_requests_ok = False

    return all_requests_ok


@handle_api_errors
def delete_site(
    site_uuids: List[str] = typer.Argument(..., help="One or more site UUIDs."),
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
    """Delete hosted sites by UUID."""
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(run_async(delete_sites_async(client, site_uuids)))
