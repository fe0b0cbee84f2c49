"""Auth page state.

Mirrors ``AuthView`` field for field. Every handler loads the view, lets an
``AuthFlow`` act on it and writes it back, so all page behaviour lives in the
flow and this class only adapts it to Reflex.
"""

import asyncio
from dataclasses import fields
from typing import Dict

import reflex as rx

from globpath.core.auth_flow import (
    LOGIN_FIELDS,
    REGISTER_FIELDS,
    AuthFlow,
    AuthMode,
    AuthView,
)
from globpath.core.navigation import ReflexNavigator
from globpath.services.auth_api import AuthAPI

# Shared backend client and navigator
_auth_api = AuthAPI()
_navigator = ReflexNavigator()

_VIEW_FIELDS = tuple(f.name for f in fields(AuthView))


class AuthState(rx.State):
    """State for the combined login/registration page."""

    mode: str = AuthMode.LOGIN.value
    password_visible: bool = False
    confirm_password_visible: bool = False

    # Top-level banners
    error_message: str = ""
    success_message: str = ""

    # Form values and per-field errors
    login_values: Dict[str, str] = {name: "" for name in LOGIN_FIELDS}
    register_values: Dict[str, str] = {name: "" for name in REGISTER_FIELDS}
    login_errors: Dict[str, str] = {}
    register_errors: Dict[str, str] = {}
    login_attempted: bool = False
    register_attempted: bool = False

    # Submit controls are disabled while these are set
    login_submitting: bool = False
    register_submitting: bool = False

    # The page stays blank until the session check has run
    session_checked: bool = False

    @rx.var
    def is_login(self) -> bool:
        return self.mode == AuthMode.LOGIN.value

    def _flow(self) -> AuthFlow:
        view = AuthView.from_dict({name: getattr(self, name) for name in _VIEW_FIELDS})
        return AuthFlow(_auth_api, _navigator, view=view)

    def _store(self, flow: AuthFlow):
        for name, value in flow.view.to_dict().items():
            setattr(self, name, value)

    def _cookie(self) -> str:
        return self.router.headers.cookie

    async def check_session(self):
        """Route already signed-in users away before the page is shown."""
        # Send the cleared view to the browser before the lookup starts
        self._store(AuthFlow(_auth_api, _navigator))
        yield

        flow = self._flow()
        event = await flow.check_session(cookie=self._cookie())
        self._store(flow)
        if event is not None:
            yield event

    def switch_mode(self):
        flow = self._flow()
        flow.switch_mode()
        self._store(flow)

    def toggle_password_visibility(self):
        flow = self._flow()
        flow.toggle_password_visibility()
        self._store(flow)

    def toggle_confirm_password_visibility(self):
        flow = self._flow()
        flow.toggle_confirm_password_visibility()
        self._store(flow)

    def set_login_field(self, name: str, value: str):
        flow = self._flow()
        flow.set_login_field(name, value)
        self._store(flow)

    def set_register_field(self, name: str, value: str):
        flow = self._flow()
        flow.set_register_field(name, value)
        self._store(flow)

    @rx.event(background=True)
    async def submit_login(self, form_data: dict):
        """Validate, call the backend without holding the state, then apply the result."""
        async with self:
            flow = self._flow()
            payload = flow.prepare_login(form_data)
            self._store(flow)
            cookie = self._cookie()
        if payload is None:
            return

        outcome = await flow.call_login(payload, cookie=cookie)

        # Applied to the state as it is now, even if the user switched mode meanwhile
        async with self:
            flow = self._flow()
            event = flow.apply_login_outcome(outcome)
            self._store(flow)
        if event is not None:
            yield event

    @rx.event(background=True)
    async def submit_register(self, form_data: dict):
        async with self:
            flow = self._flow()
            payload = flow.prepare_register(form_data)
            self._store(flow)
            cookie = self._cookie()
        if payload is None:
            return

        outcome = await flow.call_register(payload, cookie=cookie)

        async with self:
            flow = self._flow()
            revert = flow.apply_register_outcome(outcome)
            self._store(flow)
        if not revert:
            return

        await asyncio.sleep(flow.settings.REGISTRATION_REDIRECT_DELAY)
        async with self:
            flow = self._flow()
            flow.revert_after_registration()
            self._store(flow)
