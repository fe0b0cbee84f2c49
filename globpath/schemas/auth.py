"""Request and result shapes exchanged with the authentication backend."""

import re
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from globpath.core.exceptions import InvalidResponseError


class SessionUser(BaseModel):
    """Account-setup flags for the signed-in user."""

    # Some backends send labId as a number
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    has_completed_setup: bool = Field(False, alias="hasCompletedSetup")
    lab_id: Optional[str] = Field(None, alias="labId")

    @property
    def needs_lab_setup(self) -> bool:
        return not self.has_completed_setup or not self.lab_id


class AuthResult(BaseModel):
    """Result of a session check, login or registration call."""

    model_config = ConfigDict(extra="allow")

    success: bool = False
    user: Optional[SessionUser] = None
    message: Optional[str] = None


class LoginPayload(BaseModel):
    email: str
    password: str


class RegisterPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    password: str
    confirm_password: str = Field(..., alias="confirmPassword")
    phone_number: Optional[int] = Field(None, alias="phoneNumber")

    def to_request(self) -> Dict[str, Any]:
        """Serialize with backend field names, leaving out a missing phone number."""
        return self.model_dump(by_alias=True, exclude_none=True)


class ValidationResult(BaseModel):
    """Result of validating one form."""

    is_valid: bool = Field(..., description="Whether every field passed")
    errors: Dict[str, str] = Field(default_factory=dict, description="First failing message per field")


def normalize_phone_number(raw: Optional[str]) -> Optional[int]:
    """Strip everything but digits and parse what is left.

    Returns None for a blank input or one with no digits at all.
    """
    if not raw:
        return None
    digits = re.sub(r"\D", "", raw)
    if not digits:
        return None
    return int(digits)


def normalize_result(response: Any) -> AuthResult:
    """Turn whatever the backend client handed back into an ``AuthResult``.

    Accepts an already parsed ``AuthResult``, a mapping, or an undecoded
    ``httpx.Response``. This is the only place the two shapes are reconciled.
    """
    if isinstance(response, AuthResult):
        return response

    if isinstance(response, httpx.Response):
        try:
            response = response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Malformed response from server: {e}", response.status_code)

    if not isinstance(response, Mapping):
        raise InvalidResponseError(f"Unexpected response type: {type(response).__name__}")

    try:
        return AuthResult.model_validate(dict(response))
    except ValidationError as e:
        raise InvalidResponseError(f"Unexpected response shape: {e.error_count()} invalid field(s)")
