from .main import delete_subdomain, delete_subdomains_async

__all__ = ["delete_subdomain", "delete_subdomains_async"]
