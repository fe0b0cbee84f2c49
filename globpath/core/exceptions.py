from typing import Optional


class GlobPathError(Exception):
    """Base exception for portal errors."""
    pass


class AuthAPIError(GlobPathError):
    """A call to the authentication backend failed.

    ``message`` is the backend's own explanation when it sent one, otherwise empty,
    so callers can fall back to their own wording.
    """

    def __init__(self, message: str = "", status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidResponseError(AuthAPIError):
    """The backend answered with a body that is not an auth result."""
    pass
