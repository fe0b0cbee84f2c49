"""Login/registration workflow behind the auth page.

``AuthFlow`` owns every transition of the page: the session check that runs
before the page renders, switching between login and registration, field edits,
and the two submissions. It works on a plain ``AuthView`` so it can run inside
a Reflex state or on its own.

Submissions are split in three steps so the UI can release the page while the
backend call is in flight:

    payload = flow.prepare_login(form_data)       # validate, mark pending
    outcome = await flow.call_login(payload)      # backend call, no view changes
    event = flow.apply_login_outcome(outcome)     # update view, pick destination

``submit_login`` and ``submit_register`` run the steps back to back.
"""

import asyncio
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional

from globpath.config import GlobPathSettings, get_globpath_config
from globpath.core.exceptions import AuthAPIError
from globpath.core.logger import get_logger
from globpath.core.navigation import Navigator
from globpath.core.validators import LOGIN_VALIDATOR, REGISTER_VALIDATOR
from globpath.schemas.auth import (
    AuthResult,
    LoginPayload,
    RegisterPayload,
    SessionUser,
    normalize_phone_number,
    normalize_result,
)

logger = get_logger("core.auth_flow")

LOGIN_FIELDS = ("email", "password")
REGISTER_FIELDS = ("name", "email", "phone_number", "password", "confirm_password")

LOGIN_FALLBACK_ERROR = "Login failed. Please try again."
REGISTER_FALLBACK_ERROR = "Registration failed. Please try again."
REGISTRATION_SUCCESS_MESSAGE = "Registration successful! Please login to complete lab setup."


class AuthMode(str, Enum):
    LOGIN = "login"
    REGISTER = "register"


def _empty(names) -> Dict[str, str]:
    return {name: "" for name in names}


@dataclass
class AuthView:
    """Everything the auth page shows."""

    mode: AuthMode = AuthMode.LOGIN
    password_visible: bool = False
    confirm_password_visible: bool = False
    error_message: str = ""
    success_message: str = ""
    login_values: Dict[str, str] = field(default_factory=lambda: _empty(LOGIN_FIELDS))
    register_values: Dict[str, str] = field(default_factory=lambda: _empty(REGISTER_FIELDS))
    login_errors: Dict[str, str] = field(default_factory=dict)
    register_errors: Dict[str, str] = field(default_factory=dict)
    login_attempted: bool = False
    register_attempted: bool = False
    login_submitting: bool = False
    register_submitting: bool = False
    session_checked: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AuthView":
        values = {f.name: data[f.name] for f in fields(cls) if f.name in data}
        if "mode" in values:
            values["mode"] = AuthMode(values["mode"])
        for name in ("login_values", "register_values", "login_errors", "register_errors"):
            if name in values:
                values[name] = dict(values[name])
        return cls(**values)


@dataclass
class SubmitOutcome:
    """What came back from a login or registration call."""

    success: bool
    result: Optional[AuthResult] = None
    error: str = ""


def failure_message(error: Exception, fallback: str) -> str:
    """The failure's own message, or ``fallback`` when it carries none."""
    message = error.message if isinstance(error, AuthAPIError) else str(error)
    return message or fallback


class AuthFlow:
    """Drives the auth page: session gate, mode switching and submissions."""

    def __init__(
        self,
        api,
        navigator: Navigator,
        settings: Optional[GlobPathSettings] = None,
        view: Optional[AuthView] = None,
    ):
        self.api = api
        self.navigator = navigator
        self.settings = settings or get_globpath_config()
        self.view = view or AuthView()

    def destination_for(self, user: SessionUser) -> str:
        """Where a signed-in user belongs, based on how far their account setup got."""
        if user.needs_lab_setup:
            return self.settings.LAB_SETUP_ROUTE
        return self.settings.LAB_MANAGEMENT_ROUTE

    # ------------------------------------------------------------------ gate

    async def check_session(self, cookie: Optional[str] = None) -> Any:
        """Route signed-in users away before the page renders.

        Returns a navigation event when the user already has a session. Otherwise
        marks the page as ready to render and returns None. A failed lookup counts
        as no session.

        Every page load starts from a clean view, so nothing from an earlier
        visit shows while the lookup is pending.
        """
        self.view = AuthView()
        try:
            result = normalize_result(await self.api.get_current_user(cookie=cookie))
        except Exception as e:
            logger.warning(f"Session check failed, showing auth page: {e}")
            self.view.session_checked = True
            return None

        if result.success and result.user:
            destination = self.destination_for(result.user)
            logger.info(f"Existing session found, routing to {destination}")
            return self.navigator.route_navigate(destination)

        self.view.session_checked = True
        return None

    # ------------------------------------------------------------ mode/fields

    def switch_mode(self) -> None:
        """Flip between login and registration, starting both forms over."""
        view = self.view
        view.mode = AuthMode.REGISTER if view.mode == AuthMode.LOGIN else AuthMode.LOGIN
        view.error_message = ""
        view.success_message = ""
        view.password_visible = False
        view.confirm_password_visible = False
        self._reset_login_form()
        self._reset_register_form()

    def toggle_password_visibility(self) -> None:
        self.view.password_visible = not self.view.password_visible

    def toggle_confirm_password_visibility(self) -> None:
        self.view.confirm_password_visible = not self.view.confirm_password_visible

    def set_login_field(self, name: str, value: str) -> None:
        if name not in LOGIN_FIELDS:
            raise ValueError(f"Unknown login field: {name}")
        self.view.login_values[name] = value
        if self.view.login_attempted:
            self.view.login_errors = LOGIN_VALIDATOR.validate(self.view.login_values).errors

    def set_register_field(self, name: str, value: str) -> None:
        if name not in REGISTER_FIELDS:
            raise ValueError(f"Unknown register field: {name}")
        self.view.register_values[name] = value
        # After a failed attempt every edit re-validates, so confirm_password follows password
        if self.view.register_attempted:
            self.view.register_errors = REGISTER_VALIDATOR.validate(self.view.register_values).errors

    def _reset_login_form(self) -> None:
        self.view.login_values = _empty(LOGIN_FIELDS)
        self.view.login_errors = {}
        self.view.login_attempted = False

    def _reset_register_form(self) -> None:
        self.view.register_values = _empty(REGISTER_FIELDS)
        self.view.register_errors = {}
        self.view.register_attempted = False

    @staticmethod
    def _merge(current: Dict[str, str], form_data: Optional[Mapping[str, Any]], names) -> Dict[str, str]:
        if not form_data:
            return current
        return {name: str(form_data.get(name, current.get(name, "")) or "") for name in names}

    # ----------------------------------------------------------------- login

    def prepare_login(self, form_data: Optional[Mapping[str, Any]] = None) -> Optional[LoginPayload]:
        """Validate the login form and mark it pending.

        Returns the payload to send, or None when the form is invalid or a login
        is already in flight.
        """
        view = self.view
        if view.login_submitting:
            return None

        view.login_values = self._merge(view.login_values, form_data, LOGIN_FIELDS)
        view.login_attempted = True
        validation = LOGIN_VALIDATOR.validate(view.login_values)
        view.login_errors = validation.errors
        if not validation.is_valid:
            logger.debug(f"Login form rejected with {len(validation.errors)} field error(s)")
            return None

        view.error_message = ""
        view.login_submitting = True
        return LoginPayload(email=view.login_values["email"], password=view.login_values["password"])

    async def call_login(self, payload: LoginPayload, cookie: Optional[str] = None) -> SubmitOutcome:
        try:
            result = normalize_result(await self.api.login_user(payload, cookie=cookie))
        except Exception as e:
            logger.warning(f"Login failed for {payload.email}: {e}")
            return SubmitOutcome(success=False, error=failure_message(e, LOGIN_FALLBACK_ERROR))

        if not result.success:
            logger.info(f"Login refused for {payload.email}")
            return SubmitOutcome(success=False, result=result, error=result.message or LOGIN_FALLBACK_ERROR)
        return SubmitOutcome(success=True, result=result)

    def apply_login_outcome(self, outcome: SubmitOutcome) -> Any:
        """Show the failure, or return the full-page navigation for the signed-in user."""
        self.view.login_submitting = False
        if not outcome.success:
            self.view.error_message = outcome.error
            return None

        # A successful login without user flags still has to go through setup
        user = outcome.result.user or SessionUser()
        destination = self.destination_for(user)
        logger.info(f"Login succeeded, navigating to {destination}")
        return self.navigator.hard_navigate(destination)

    async def submit_login(
        self, form_data: Optional[Mapping[str, Any]] = None, cookie: Optional[str] = None
    ) -> Any:
        payload = self.prepare_login(form_data)
        if payload is None:
            return None
        outcome = await self.call_login(payload, cookie=cookie)
        return self.apply_login_outcome(outcome)

    # -------------------------------------------------------------- register

    def prepare_register(self, form_data: Optional[Mapping[str, Any]] = None) -> Optional[RegisterPayload]:
        """Validate the registration form and mark it pending.

        Returns the payload to send, with the phone number normalized, or None
        when the form is invalid or a registration is already in flight.
        """
        view = self.view
        if view.register_submitting:
            return None

        view.register_values = self._merge(view.register_values, form_data, REGISTER_FIELDS)
        view.register_attempted = True
        validation = REGISTER_VALIDATOR.validate(view.register_values)
        view.register_errors = validation.errors
        if not validation.is_valid:
            logger.debug(f"Registration form rejected with {len(validation.errors)} field error(s)")
            return None

        view.error_message = ""
        view.success_message = ""
        view.register_submitting = True
        values = view.register_values
        return RegisterPayload(
            name=values["name"],
            email=values["email"],
            password=values["password"],
            confirm_password=values["confirm_password"],
            phone_number=normalize_phone_number(values.get("phone_number")),
        )

    async def call_register(self, payload: RegisterPayload, cookie: Optional[str] = None) -> SubmitOutcome:
        try:
            result = normalize_result(await self.api.register_user(payload, cookie=cookie))
        except Exception as e:
            logger.warning(f"Registration failed for {payload.email}: {e}")
            return SubmitOutcome(success=False, error=failure_message(e, REGISTER_FALLBACK_ERROR))

        if not result.success:
            logger.info(f"Registration refused for {payload.email}")
            return SubmitOutcome(success=False, result=result, error=result.message or REGISTER_FALLBACK_ERROR)
        return SubmitOutcome(success=True, result=result)

    def apply_register_outcome(self, outcome: SubmitOutcome) -> bool:
        """Show the outcome. Returns True when the page should fall back to login after the delay."""
        view = self.view
        view.register_submitting = False
        if not outcome.success:
            # Fields and mode stay as they are so the user can resubmit
            view.error_message = outcome.error
            return False

        logger.info("Registration succeeded")
        view.success_message = REGISTRATION_SUCCESS_MESSAGE
        self._reset_register_form()
        view.password_visible = False
        view.confirm_password_visible = False
        return True

    def revert_after_registration(self) -> None:
        self.view.mode = AuthMode.LOGIN
        self.view.success_message = ""

    async def submit_register(
        self,
        form_data: Optional[Mapping[str, Any]] = None,
        cookie: Optional[str] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> bool:
        payload = self.prepare_register(form_data)
        if payload is None:
            return False
        outcome = await self.call_register(payload, cookie=cookie)
        if not self.apply_register_outcome(outcome):
            return False
        await sleep(self.settings.REGISTRATION_REDIRECT_DELAY)
        self.revert_after_registration()
        return True
