from .main import list_apps, list_apps_async

__all__ = ["list_apps", "list_apps_async"]
