"""Exceptions raised by the Puter CLI."""

from typing import Optional


class CLIError(Exception):
    """A user-facing error that should terminate the current command."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class PuterAPIError(Exception):
    """Raised when a driver call answers with ``success: false``."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class EntityNotFoundError(PuterAPIError):
    """Raised when the driver reports ``entity_not_found``."""

    pass
