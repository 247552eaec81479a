from .main import fetch_subdomains, list_subdomains, list_subdomains_async

__all__ = ["fetch_subdomains", "list_subdomains", "list_subdomains_async"]
