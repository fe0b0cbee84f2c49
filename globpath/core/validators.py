"""Field validation for the login and registration forms.

Each field owns an ordered list of checks. A check takes the field's value and
the whole form's values and returns an error message, or None when it passes.
Forms are validated as a whole: every field is checked and every failing field
reports its first failing check.
"""

import re
from typing import Callable, Dict, List, Mapping, Optional

from globpath.schemas.auth import ValidationResult

Check = Callable[[str, Mapping[str, str]], Optional[str]]

EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE | re.ASCII)

# Special characters: @$!%*?&#. Lookaheads cover the whole value; only the leading character is restricted to the allowed set
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&#])[A-Za-z\d@$!%*?&#]",
    re.ASCII,
)


def required(message: str) -> Check:
    def _check(value: str, values: Mapping[str, str]) -> Optional[str]:
        return None if value else message

    return _check


def min_length(length: int, message: str) -> Check:
    def _check(value: str, values: Mapping[str, str]) -> Optional[str]:
        return message if len(value) < length else None

    return _check


def full_match(pattern: re.Pattern, message: str) -> Check:
    def _check(value: str, values: Mapping[str, str]) -> Optional[str]:
        return None if pattern.fullmatch(value) else message

    return _check


def prefix_match(pattern: re.Pattern, message: str) -> Check:
    def _check(value: str, values: Mapping[str, str]) -> Optional[str]:
        return None if pattern.match(value) else message

    return _check


def equals_field(other: str, message: str) -> Check:
    """Value must equal another field's current value."""

    def _check(value: str, values: Mapping[str, str]) -> Optional[str]:
        return None if value == values.get(other, "") else message

    return _check


class FormValidator:
    """Validates a form's values against per-field checks."""

    def __init__(self, fields: Dict[str, List[Check]]):
        self.fields = fields

    def validate_field(self, name: str, values: Mapping[str, str]) -> Optional[str]:
        value = values.get(name) or ""
        for check in self.fields.get(name, []):
            error = check(value, values)
            if error:
                return error
        return None

    def validate(self, values: Mapping[str, str]) -> ValidationResult:
        errors: Dict[str, str] = {}
        for name in self.fields:
            error = self.validate_field(name, values)
            if error:
                errors[name] = error
        return ValidationResult(is_valid=not errors, errors=errors)


EMAIL_CHECKS: List[Check] = [
    required("Email is required"),
    full_match(EMAIL_PATTERN, "Invalid email address"),
]

LOGIN_VALIDATOR = FormValidator(
    {
        "email": EMAIL_CHECKS,
        "password": [required("Password is required")],
    }
)

REGISTER_VALIDATOR = FormValidator(
    {
        "name": [
            required("Name is required"),
            min_length(2, "Name must be at least 2 characters"),
        ],
        "email": EMAIL_CHECKS,
        "password": [
            required("Password is required"),
            min_length(8, "Password must be at least 8 characters"),
            prefix_match(
                PASSWORD_PATTERN,
                "Password must contain uppercase, lowercase, number, and special character",
            ),
        ],
        "confirm_password": [
            required("Please confirm your password"),
            equals_field("password", "Passwords do not match"),
        ],
        # phone_number is optional and free-form
    }
)
