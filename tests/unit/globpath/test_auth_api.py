"""Unit tests for the authentication backend client."""

import json

import httpx
import pytest

from globpath.core.exceptions import AuthAPIError, InvalidResponseError
from globpath.schemas.auth import LoginPayload, RegisterPayload
from globpath.services.auth_api import AuthAPI


def _client(handler, base_url="http://auth.test/api/") -> AuthAPI:
    return AuthAPI(base_url=base_url, timeout=5.0, transport=httpx.MockTransport(handler))


class TestAuthAPIRequests:
    """Requests sent to the backend."""

    @pytest.mark.asyncio
    async def test_get_current_user_forwards_cookie(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(200, json={"success": True, "user": {"hasCompletedSetup": True, "labId": "L1"}})

        body = await _client(handler).get_current_user(cookie="sid=abc")

        assert seen == {"method": "GET", "url": "http://auth.test/api/auth/me", "cookie": "sid=abc"}
        assert body["user"]["labId"] == "L1"

    @pytest.mark.asyncio
    async def test_no_cookie_header_without_cookie(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["cookie"] = request.headers.get("cookie")
            return httpx.Response(200, json={"success": False})

        await _client(handler).get_current_user()

        assert seen["cookie"] is None

    @pytest.mark.asyncio
    async def test_login_posts_credentials(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True})

        body = await _client(handler).login_user(LoginPayload(email="tech@lab.com", password="secret"))

        assert seen == {
            "method": "POST",
            "path": "/api/auth/login",
            "body": {"email": "tech@lab.com", "password": "secret"},
        }
        assert body == {"success": True}

    @pytest.mark.asyncio
    async def test_register_posts_backend_field_names(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"success": True, "message": "Created"})

        payload = RegisterPayload(
            name="Jane Doe", email="jane@lab.com", password="Abcdef1!", confirm_password="Abcdef1!"
        )
        body = await _client(handler).register_user(payload)

        assert seen["path"] == "/api/auth/register"
        assert seen["body"] == {
            "name": "Jane Doe",
            "email": "jane@lab.com",
            "password": "Abcdef1!",
            "confirmPassword": "Abcdef1!",
        }
        assert body["message"] == "Created"

    def test_defaults_come_from_config(self, monkeypatch):
        monkeypatch.setenv("GLOBPATH__API_URL", "http://backend:4000/api/")
        monkeypatch.setenv("GLOBPATH__API_TIMEOUT", "7.5")

        api = AuthAPI()

        assert api.base_url == "http://backend:4000/api"
        assert api.timeout == 7.5


class TestAuthAPIErrors:
    """Transport and HTTP failures surface as AuthAPIError."""

    @pytest.mark.asyncio
    async def test_http_error_carries_backend_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"success": False, "message": "Invalid credentials"})

        with pytest.raises(AuthAPIError) as exc_info:
            await _client(handler).login_user(LoginPayload(email="a@b.co", password="x"))

        assert exc_info.value.message == "Invalid credentials"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_http_error_reads_error_key(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"error": "Email already registered"})

        with pytest.raises(AuthAPIError) as exc_info:
            await _client(handler).get_current_user()

        assert exc_info.value.message == "Email already registered"

    @pytest.mark.asyncio
    async def test_http_error_without_message_is_blank(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        with pytest.raises(AuthAPIError) as exc_info:
            await _client(handler).get_current_user()

        assert exc_info.value.message == ""
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(AuthAPIError) as exc_info:
            await _client(handler).get_current_user()

        assert exc_info.value.message == "Cannot reach the server. Please check your connection."
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(AuthAPIError) as exc_info:
            await _client(handler).get_current_user()

        assert exc_info.value.message == "The server took too long to respond. Please try again."

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>ok</html>")

        with pytest.raises(InvalidResponseError) as exc_info:
            await _client(handler).get_current_user()

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=["success"])

        with pytest.raises(InvalidResponseError):
            await _client(handler).get_current_user()
