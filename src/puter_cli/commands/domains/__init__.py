"""Puter CLI domains command."""

from .list import list_subdomains

__all__ = ["list_subdomains"]
