"""Puter CLI domain command."""

from .delete import delete_subdomain

__all__ = ["delete_subdomain"]
