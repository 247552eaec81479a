"""List the apps the current user can edit."""

from typing import List, Optional

import typer
from rich.table import Table

from ....config import settings
from ....core.api_client import UnauthenticatedError
from ....core.constants import (
    DEFAULT_ICON_SIZE,
    ENV_API_BASE_URL,
    ENV_API_KEY,
    ICON_SIZES,
    StatsPeriod,
)
from ....core.utils import format_date, run_async, subdomain_from_url
from ....exceptions import CLIError
from ....puter_app.api_client import App, PuterClient, parse_apps
from ....utils.ux import console, print_error, print_info, print_success
from ...utils import (
    exit_on_failure,
    handle_api_errors,
    print_structured,
    setup_authenticated_client,
    validate_output_format,
)


def validate_icon_size(icon_size: int) -> int:
    if icon_size not in ICON_SIZES:
        raise CLIError(
            f"Invalid icon size {icon_size}. Valid sizes are: {', '.join(str(s) for s in ICON_SIZES)}"
        )
    return icon_size


async def list_apps_async(
    client: PuterClient,
    stats_period: StatsPeriod = StatsPeriod.ALL,
    icon_size: int = DEFAULT_ICON_SIZE,
    format: str = "text",
) -> bool:
    """Query and render the apps the user can edit.

    Returns:
        bool: True when the apps could be listed
    """
    stats_period = StatsPeriod(stats_period)
    print_info(
        f'Listing of apps during period "{stats_period.value}":',
        console_output=format == "text",
    )
    try:
        response = await client.select_apps(stats_period, icon_size)
        if response.result is None:
            print_error("Unable to list your apps. Please check your credentials.")
            return False

        apps = parse_apps(response)
        if format != "text":
            print_structured("apps", apps, format)
            return True

        print_apps(apps)
        print_success(f"You have in total: {len(apps)} application(s).")
        return True
    except UnauthenticatedError:
        raise
    except Exception as e:
        print_error(f"Failed to list apps. Error: {str(e)}")
        return False


def print_apps(apps: List[App]) -> None:
    """Print a summary table of the app information."""
    table = Table(title="Your Apps", expand=False, border_style="blue")

    table.add_column("Title", style="cyan", max_width=20)
    table.add_column("Name", style="bright_blue", max_width=30)
    table.add_column("Created", style="cyan", no_wrap=True)
    table.add_column("Subdomain", style="bright_blue", max_width=35)
    table.add_column("#Open", justify="right")
    table.add_column("#User", justify="right")

    for app in apps:
        table.add_row(
            app.title or "",
            app.name,
            format_date(app.created_at),
            subdomain_from_url(app.index_url),
            str(app.stats.open_count if app.stats else 0),
            str(app.stats.user_count if app.stats else 0),
        )

    console.print(table)


@handle_api_errors
def list_apps(
    stats_period: StatsPeriod = typer.Argument(
        StatsPeriod.ALL, help="Period used to aggregate the app statistics."
    ),
    icon_size: int = typer.Argument(
        DEFAULT_ICON_SIZE, help="Icon size in pixels (16, 32, 64, 128, 256 or 512)."
    ),
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
    """List the apps you can edit, with usage statistics."""
    validate_output_format(format)
    validate_icon_size(icon_size)
    client = setup_authenticated_client(api_url, api_key)
    exit_on_failure(run_async(list_apps_async(client, stats_period, icon_size, format)))
