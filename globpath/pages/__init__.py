"""Pages for the Reflex app."""

from .auth import auth_page

__all__ = ["auth_page"]
