"""Local credential storage for the Puter CLI."""

from .main import (
    UserCredentials,
    clear_credentials,
    get_current_directory,
    get_current_username,
    load_api_key_credentials,
    load_credentials,
    save_credentials,
)

__all__ = [
    "UserCredentials",
    "clear_credentials",
    "get_current_directory",
    "get_current_username",
    "load_api_key_credentials",
    "load_credentials",
    "save_credentials",
]
