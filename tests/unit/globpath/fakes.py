"""In-memory fakes for the auth backend, browser navigation and delays."""

from typing import Any, List, Optional, Tuple

from globpath.core.navigation import Navigator


class FakeAuthAPI:
    """In-memory stand-in for the authentication backend client.

    Each response may be a dict, an ``httpx.Response`` or an exception to raise.
    """

    def __init__(self, session: Any = None, login: Any = None, register: Any = None) -> None:
        self.session = session if session is not None else {"success": False}
        self.login = login if login is not None else {"success": True, "user": {"hasCompletedSetup": True, "labId": "L1"}}
        self.register = register if register is not None else {"success": True}
        self.calls: List[Tuple[str, Any, Optional[str]]] = []

    @staticmethod
    def _resolve(value: Any) -> Any:
        if isinstance(value, BaseException):
            raise value
        return value

    async def get_current_user(self, cookie: Optional[str] = None):
        self.calls.append(("get_current_user", None, cookie))
        return self._resolve(self.session)

    async def login_user(self, payload, cookie: Optional[str] = None):
        self.calls.append(("login_user", payload, cookie))
        return self._resolve(self.login)

    async def register_user(self, payload, cookie: Optional[str] = None):
        self.calls.append(("register_user", payload, cookie))
        return self._resolve(self.register)

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


class RecordingNavigator(Navigator):
    """Navigator that remembers where it was asked to go."""

    def __init__(self) -> None:
        self.visits: List[Tuple[str, str]] = []

    def hard_navigate(self, path: str):
        self.visits.append(("hard", path))
        return ("hard", path)

    def route_navigate(self, path: str):
        self.visits.append(("route", path))
        return ("route", path)


class RecordingSleep:
    """Replacement for ``asyncio.sleep`` that returns immediately."""

    def __init__(self, on_sleep=None) -> None:
        self.delays: List[float] = []
        self.on_sleep = on_sleep

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        if self.on_sleep is not None:
            self.on_sleep()
