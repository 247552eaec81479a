"""Puter CLI login commands."""

from .main import login, logout, whoami

__all__ = ["login", "logout", "whoami"]
