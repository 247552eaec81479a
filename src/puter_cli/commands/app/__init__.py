"""Puter CLI app command."""

from .create import create_app
from .delete import delete_app

__all__ = ["create_app", "delete_app"]
