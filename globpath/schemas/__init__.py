from .auth import (
    AuthResult,
    LoginPayload,
    RegisterPayload,
    SessionUser,
    ValidationResult,
    normalize_phone_number,
    normalize_result,
)

__all__ = [
    "AuthResult",
    "LoginPayload",
    "RegisterPayload",
    "SessionUser",
    "ValidationResult",
    "normalize_phone_number",
    "normalize_result",
]
