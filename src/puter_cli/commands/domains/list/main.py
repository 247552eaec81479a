"""List the subdomains owned by the current user."""

from typing import Any, Dict, List, Optional

import typer
from rich.table import Table

from ....config import settings
from ....core.constants import ENV_API_BASE_URL, ENV_API_KEY, SITE_DOMAIN
from ....core.utils import format_date, run_async
from ....exceptions import PuterAPIError
from ....puter_app.api_client import PuterClient, Subdomain, parse_subdomains
from ....utils.ux import console, print_error, print_info
from ...utils import (
    handle_api_errors,
    print_structured,
    setup_authenticated_client,
    validate_output_format,
)


async def fetch_subdomains(
    client: PuterClient, args: Optional[Dict[str, Any]] = None
) -> List[Subdomain]:
    """Select subdomains, failing unless the driver returns a list.

    Raises:
        PuterAPIError: If the driver call is unsuccessful
    """
    response = await client.select_subdomains(args)
    if not response.ok or not isinstance(response.result, list):
        raise PuterAPIError(
            "Failed to fetch subdomains",
            code=response.error.code if response.error else None,
        )
    return parse_subdomains(response)


async def list_subdomains_async(
    client: PuterClient,
    args: Optional[Dict[str, Any]] = None,
    format: str = "text",
) -> List[Subdomain]:
    """Render the subdomains matching ``args``.

    Unlike the other commands, errors are reported and then re-raised.
    """
    try:
        subdomains = await fetch_subdomains(client, args)
    except Exception as e:
        print_error(f"Error listing subdomains: {str(e)}")
        raise

    if format != "text":
        print_structured("subdomains", subdomains, format)
    elif not subdomains:
        print_info("No subdomains found")
    else:
        print_subdomains(subdomains)
        console.print(f"[dim]Total subdomains: {len(subdomains)}[/dim]")
    return subdomains


def print_subdomains(subdomains: List[Subdomain]) -> None:
    """Print a summary table of the subdomain bindings."""
    table = Table(title="Your Subdomains", expand=False, border_style="blue")

    table.add_column("UID", style="cyan", no_wrap=True)
    table.add_column("Subdomain", style="green")
    table.add_column("Created", no_wrap=True)
    table.add_column("Protected", justify="center")
    table.add_column("Directory", style="bright_blue")

    for domain in subdomains:
        path = domain.root_dir_path
        table.add_row(
            domain.uid or "",
            f"{domain.subdomain}.{SITE_DOMAIN}",
            format_date(domain.created_at, with_time=False),
            "[red]Yes[/red]" if domain.protected else "[green]No[/green]",
            path.rstrip("/").split("/")[-1] if path else "",
        )

    console.print(table)


@handle_api_errors
def list_subdomains(
    format: Optional[str] = typer.Option(
        "text", "--format", help="Output format (text|json|yaml)"
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
    """List your subdomains and the directories they serve."""
    validate_output_format(format)
    client = setup_authenticated_client(api_url, api_key)
    try:
        run_async(list_subdomains_async(client, format=format))
    except PuterAPIError as e:
        raise typer.Exit(1) from e
