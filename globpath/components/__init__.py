from .auth_forms import login_form, mode_switch, register_form
from .form_fields import field_error, icon_input, password_input
from .status_banner import status_banners

__all__ = [
    "field_error",
    "icon_input",
    "login_form",
    "mode_switch",
    "password_input",
    "register_form",
    "status_banners",
]
