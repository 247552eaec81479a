from .main import delete_site, delete_sites_async

__all__ = ["delete_site", "delete_sites_async"]
