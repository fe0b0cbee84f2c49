"""Client for the authentication backend."""

from typing import Any, Dict, Optional

import httpx

from globpath.config import get_globpath_config
from globpath.core.exceptions import AuthAPIError, InvalidResponseError
from globpath.core.logger import get_logger
from globpath.schemas.auth import LoginPayload, RegisterPayload

logger = get_logger("services.auth_api")


def _error_message(response: httpx.Response) -> str:
    """Pull the backend's own explanation out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return ""
    if not isinstance(body, dict):
        return ""
    for key in ("message", "error", "detail"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


class AuthAPI:
    """Authentication backend client: session lookup, login and registration."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        config = get_globpath_config()
        self.base_url = (base_url or config.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.API_TIMEOUT
        self.transport = transport
        self.session_endpoint = config.SESSION_ENDPOINT
        self.login_endpoint = config.LOGIN_ENDPOINT
        self.register_endpoint = config.REGISTER_ENDPOINT

    async def _make_request(
        self, method: str, endpoint: str, cookie: Optional[str] = None, **kwargs
    ) -> Dict[str, Any]:
        """Make HTTP request to the auth backend and return the decoded body."""
        url = f"{self.base_url}{endpoint}"
        # The backend resolves the session from the browser's cookies
        headers = {"cookie": cookie} if cookie else {}

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.request(method, url, headers=headers, **kwargs)
                response.raise_for_status()
        except httpx.TimeoutException:
            logger.error(f"Timeout error connecting to {url}")
            raise AuthAPIError("The server took too long to respond. Please try again.")
        except httpx.ConnectError:
            logger.error(f"Connection error to {url}")
            raise AuthAPIError("Cannot reach the server. Please check your connection.")
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"HTTP error {status_code} for {method} {url}")
            raise AuthAPIError(_error_message(e.response), status_code)
        except httpx.HTTPError as e:
            logger.error(f"Unexpected HTTP error for {url}: {e}")
            raise AuthAPIError()

        try:
            body = response.json()
        except ValueError:
            logger.error(f"Non-JSON body from {url}")
            raise InvalidResponseError("Malformed response from server.", response.status_code)
        if not isinstance(body, dict):
            logger.error(f"Unexpected body type {type(body).__name__} from {url}")
            raise InvalidResponseError("Malformed response from server.", response.status_code)
        return body

    async def get_current_user(self, cookie: Optional[str] = None) -> Dict[str, Any]:
        """Look up the session belonging to ``cookie``."""
        return await self._make_request("GET", self.session_endpoint, cookie=cookie)

    async def login_user(self, payload: LoginPayload, cookie: Optional[str] = None) -> Dict[str, Any]:
        """Sign in with email and password."""
        logger.info(f"Logging in {payload.email}")
        return await self._make_request("POST", self.login_endpoint, cookie=cookie, json=payload.model_dump())

    async def register_user(self, payload: RegisterPayload, cookie: Optional[str] = None) -> Dict[str, Any]:
        """Create a new account."""
        logger.info(f"Registering {payload.email}")
        return await self._make_request("POST", self.register_endpoint, cookie=cookie, json=payload.to_request())
