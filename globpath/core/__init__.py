from globpath.core.exceptions import AuthAPIError, GlobPathError, InvalidResponseError
from globpath.core.logger import get_logger, setup_logger

__all__ = [
    "AuthAPIError",
    "GlobPathError",
    "InvalidResponseError",
    "get_logger",
    "setup_logger",
]
