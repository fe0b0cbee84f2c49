from .auth_state import AuthState

__all__ = ["AuthState"]
