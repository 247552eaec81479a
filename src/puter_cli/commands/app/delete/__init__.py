from .main import delete_app, delete_app_async

__all__ = ["delete_app", "delete_app_async"]
