"""Configuration for the GlobPathology auth portal.

Environment variables use the GLOBPATH__ prefix (e.g., GLOBPATH__API_URL=http://api:3000/api).
"""

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GlobPathSettings(BaseSettings):
    """Portal configuration settings."""

    # Authentication backend
    API_URL: str = "http://localhost:3000/api"
    API_TIMEOUT: float = 30.0
    SESSION_ENDPOINT: str = "/auth/me"
    LOGIN_ENDPOINT: str = "/auth/login"
    REGISTER_ENDPOINT: str = "/auth/register"

    # Post-auth destinations
    LAB_SETUP_ROUTE: str = "/lab-setup"
    LAB_MANAGEMENT_ROUTE: str = "/lab-management"

    # Seconds before the page flips back to login after a registration
    REGISTRATION_REDIRECT_DELAY: float = 2.0

    # Logging
    LOG_DIR: str = "~/.cache/globpath"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    USE_STRUCTLOG: bool = False

    # Reflex ports
    FRONTEND_PORT: int = 3000
    BACKEND_PORT: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="GLOBPATH__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


# Module-level config cache
_config: Optional[GlobPathSettings] = None


def get_globpath_config() -> GlobPathSettings:
    """Get the portal configuration singleton.

    Configuration is loaded once and cached. Supports environment variable
    overrides using the GLOBPATH__ prefix.

    Examples:
        ```bash
        export GLOBPATH__API_URL=http://backend:3000/api
        export GLOBPATH__REGISTRATION_REDIRECT_DELAY=3
        ```

        ```python
        config = get_globpath_config()
        print(config.LAB_SETUP_ROUTE)  # /lab-setup
        ```
    """
    global _config
    if _config is None:
        _config = GlobPathSettings()
    return _config


def reset_globpath_config() -> None:
    """Reset the config cache. Useful for testing."""
    global _config
    _config = None
