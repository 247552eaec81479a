from typing import Optional

import typer
from rich.prompt import Prompt

from ...auth import (
    UserCredentials,
    clear_credentials,
    get_current_directory,
    get_current_username,
    load_credentials,
    save_credentials,
)
from ...config import settings
from ...core.api_client import UnauthenticatedError
from ...core.constants import ENV_API_BASE_URL
from ...core.utils import run_async
from ...exceptions import CLIError
from ...puter_app.api_client import PuterClient, UserInfo
from ...utils.ux import print_error, print_info, print_success, print_warning
from ..utils import handle_api_errors


async def _verify_api_key(api_url: str, api_key: str) -> Optional[UserInfo]:
    """Return the user behind ``api_key``, or None if the token is rejected."""
    try:
        return await PuterClient(api_url=api_url, api_key=api_key).whoami()
    except UnauthenticatedError:
        return None


def _store(api_url: str, api_key: str) -> bool:
    user = run_async(_verify_api_key(api_url, api_key))
    if user is None:
        print_warning("Invalid auth token provided.")
        return False
    path = save_credentials(
        UserCredentials(api_key=api_key, username=user.username, cwd=f"/{user.username}")
    )
    print_success(f'Logged in as "{user.username}". Credentials saved to {path}')
    return True


@handle_api_errors
def login(
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        help="Optionally set an existing auth token, bypassing the prompt.",
        envvar="PUTER_API_KEY",
    ),
    api_url: Optional[str] = typer.Option(
        settings.API_BASE_URL,
        "--api-url",
        help="API base URL. Defaults to PUTER_API_BASE_URL environment variable.",
        envvar=ENV_API_BASE_URL,
    ),
    force: bool = typer.Option(
        False,
        "--force",
        help="Force login to obtain new credentials even if credentials already exist.",
    ),
) -> None:
    """Authenticate to the Puter API and store the credentials locally.

    Args:
        api_key: Optionally set an existing auth token, bypassing the prompt.
        api_url: Override the default base API url.
        force: Force login to obtain new credentials even if credentials already exist.
    """
    effective_api_url = api_url or settings.API_BASE_URL

    if not force:
        if api_key:
            print_info("Using provided auth token for authentication.")
            if not _store(effective_api_url, api_key):
                raise typer.Exit(1)
            return

        stored = load_credentials()
        if stored:
            print_info(
                f'Already logged in as "{stored.username}". Run with --force to re-authenticate.'
            )
            return
    else:
        print_info("Forcing login to obtain new credentials.")

    attempts = 3
    while attempts > 0:
        attempts -= 1
        input_api_key = Prompt.ask("Please enter your Puter auth token", password=True)

        if not input_api_key:
            print_warning("No auth token provided.")
            continue

        if _store(effective_api_url, input_api_key):
            return

    print_error("Failed to set a valid auth token", log=False)
    raise typer.Exit(1)


def logout() -> None:
    """Remove the stored credentials."""
    if clear_credentials():
        print_success("Logged out.")
    else:
        print_info("No stored credentials found.")


@handle_api_errors
def whoami() -> None:
    """Show the logged-in user and remote working directory."""
    username = get_current_username()
    if not username:
        raise CLIError("Not logged in. Run 'puter login'.")
    print_info(f"Username: {username}")
    print_info(f"Working directory: {get_current_directory()}")
