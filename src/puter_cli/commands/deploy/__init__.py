"""Puter CLI deploy command."""

from .main import deploy_site, deploy_site_async

__all__ = ["deploy_site", "deploy_site_async"]
