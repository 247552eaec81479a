"""Puter CLI site command."""

from .delete import delete_site

__all__ = ["delete_site"]
