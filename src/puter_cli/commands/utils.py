"""Helpers shared by the command implementations."""

import functools
import json
from typing import Any, Callable, List, Optional, TypeVar

import typer
import yaml

from ..auth import get_current_directory, get_current_username, load_api_key_credentials
from ..config import settings
from ..core.api_client import UnauthenticatedError
from ..core.constants import OUTPUT_FORMATS
from ..exceptions import CLIError
from ..puter_app.api_client import PuterClient
from ..utils.ux import print_error

F = TypeVar("F", bound=Callable[..., Any])


def setup_authenticated_client(
    api_url: Optional[str] = None, api_key: Optional[str] = None
) -> PuterClient:
    """Build a PuterClient from options, environment or stored credentials."""
    effective_api_url = api_url or settings.API_BASE_URL
    effective_api_key = api_key or settings.API_KEY or load_api_key_credentials()

    if not effective_api_key:
        raise CLIError(
            "Must be logged in. Run 'puter login', set PUTER_API_KEY environment variable or specify --api-key option."
        )
    return PuterClient(api_url=effective_api_url, api_key=effective_api_key)


def require_username() -> str:
    username = get_current_username()
    if not username:
        raise CLIError(
            "Unknown Puter username. Run 'puter login' or set PUTER_USERNAME."
        )
    return username


def require_current_directory() -> str:
    cwd = get_current_directory()
    if not cwd:
        raise CLIError(
            "Unknown remote working directory. Run 'puter login' or set PUTER_CWD."
        )
    return cwd


def validate_output_format(format: str) -> None:
    if format not in OUTPUT_FORMATS:
        raise CLIError(
            f"Invalid format '{format}'. Valid options are: {', '.join(OUTPUT_FORMATS)}"
        )


def print_structured(key: str, items: List[Any], format: str) -> None:
    """Print pydantic models as JSON or YAML under a top-level ``key``."""
    data = {key: [item.model_dump(mode="json") for item in items]}
    if format == "json":
        print(json.dumps(data, indent=2, default=str))
    else:
        print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False))


def exit_on_failure(ok: bool) -> None:
    """Translate an operation's boolean outcome into the process exit status."""
    if not ok:
        raise typer.Exit(1)


def handle_api_errors(func: F) -> F:
    """Turn authentication and usage errors into printed messages and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except UnauthenticatedError as e:
            print_error(
                "Invalid auth token. Run 'puter login --force' or set PUTER_API_KEY environment variable with a new token."
            )
            raise typer.Exit(1) from e
        except CLIError as e:
            print_error(str(e))
            raise typer.Exit(e.exit_code) from e
        except Exception as e:
            print_error(f"Unexpected error: {str(e)}")
            raise typer.Exit(1) from e

    return wrapper  # type: ignore[return-value]
