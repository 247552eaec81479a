"""Puter CLI commands."""

from .app import create_app, delete_app
from .apps import list_apps
from .deploy import deploy_site
from .domain import delete_subdomain
from .domains import list_subdomains
from .login import login, logout, whoami
from .site import delete_site

__all__ = [
    "create_app",
    "delete_app",
    "delete_site",
    "delete_subdomain",
    "deploy_site",
    "list_apps",
    "list_subdomains",
    "login",
    "logout",
    "whoami",
]
