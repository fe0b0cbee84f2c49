from .auth_api import AuthAPI

__all__ = ["AuthAPI"]
