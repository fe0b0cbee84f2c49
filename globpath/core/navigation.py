"""Browser navigation used by the auth flow.

The flow never touches the browser directly; it asks a ``Navigator`` for an
event and hands that event back to the UI runtime.
"""

import json
from abc import ABC, abstractmethod
from typing import Any

import reflex as rx
from reflex.event import EventSpec


class Navigator(ABC):
    """Navigation capability injected into the auth flow."""

    @abstractmethod
    def hard_navigate(self, path: str) -> Any:
        """Full page load of ``path``, dropping all client-side state."""

    @abstractmethod
    def route_navigate(self, path: str) -> Any:
        """In-app route change to ``path``."""


class ReflexNavigator(Navigator):
    """Navigator producing Reflex event specs."""

    def hard_navigate(self, path: str) -> EventSpec:
        return rx.call_script(f"window.location.href = {json.dumps(path)}")

    def route_navigate(self, path: str) -> EventSpec:
        return rx.redirect(path)
