"""Persisted login state: auth token, username and remote working directory."""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError

from ..core.constants import (
    CREDENTIALS_FILENAME,
    DEFAULT_CONFIG_DIR,
    ENV_CREDENTIALS_FILE,
    ENV_CWD,
    ENV_USERNAME,
)

logger = logging.getLogger("puter-cli")


class UserCredentials(BaseModel):
    """Credentials saved by ``puter login``."""

    api_key: str
    username: Optional[str] = None
    cwd: Optional[str] = None


def get_credentials_path() -> Path:
    override = os.environ.get(ENV_CREDENTIALS_FILE)
    if override:
        return Path(override).expanduser()
    return Path(DEFAULT_CONFIG_DIR).expanduser() / CREDENTIALS_FILENAME


def load_credentials() -> Optional[UserCredentials]:
    """Load the stored credentials, or None when missing or unreadable."""
    path = get_credentials_path()
    if not path.exists():
        return None
    try:
        return UserCredentials.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable credentials file {path}: {e}")
        return None


def save_credentials(credentials: UserCredentials) -> Path:
    """Write credentials to disk, readable by the current user only."""
    path = get_credentials_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(credentials.model_dump_json(indent=2), encoding="utf-8")
    os.chmod(path, 0o600)
    return path


def clear_credentials() -> bool:
    path = get_credentials_path()
    if not path.exists():
        return False
    path.unlink()
    return True


def load_api_key_credentials() -> Optional[str]:
    credentials = load_credentials()
    return credentials.api_key if credentials else None


def get_current_username() -> Optional[str]:
    """Username of the logged-in user (``PUTER_USERNAME`` wins)."""
    username = os.environ.get(ENV_USERNAME)
    if username:
        return username
    credentials = load_credentials()
    return credentials.username if credentials else None


def get_current_directory() -> Optional[str]:
    """Remote working directory; defaults to the user's home folder."""
    cwd = os.environ.get(ENV_CWD)
    if cwd:
        return cwd
    credentials = load_credentials()
    if credentials and credentials.cwd:
        return credentials.cwd
    username = get_current_username()
    return f"/{username}" if username else None
