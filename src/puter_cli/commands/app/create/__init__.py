from .main import create_app, create_app_async

__all__ = ["create_app", "create_app_async"]
