"""Login and registration forms."""

import reflex as rx

from ..state.auth_state import AuthState
from ..styles.theme import colors, css_spacing, radius, submit_button_style
from .form_fields import icon_input, password_input


def _submit_button(label: str, pending_label: str, submitting) -> rx.Component:
    return rx.button(
        rx.cond(submitting, pending_label, label),
        type="submit",
        disabled=submitting,
        size="3",
        style=submit_button_style,
    )


def login_form() -> rx.Component:
    forgot_password = rx.button(
        "Forgot password?",
        type="button",
        variant="ghost",
        color_scheme="gray",
        size="1",
    )
    return rx.form(
        rx.vstack(
            icon_input(
                "Email Address",
                "mail",
                "email",
                AuthState.login_values["email"],
                lambda value: AuthState.set_login_field("email", value),
                errors=AuthState.login_errors,
                input_type="email",
                placeholder="admin@lab.com",
            ),
            password_input(
                "Password",
                "password",
                AuthState.login_values["password"],
                lambda value: AuthState.set_login_field("password", value),
                AuthState.login_errors,
                AuthState.password_visible,
                AuthState.toggle_password_visibility,
                header_extra=forgot_password,
            ),
            _submit_button("Sign In", "Signing in...", AuthState.login_submitting),
            spacing="5",
            width="100%",
        ),
        on_submit=AuthState.submit_login,
        reset_on_submit=False,
        width="100%",
    )


def register_form() -> rx.Component:
    return rx.form(
        rx.vstack(
            icon_input(
                "Full Name",
                "user",
                "name",
                AuthState.register_values["name"],
                lambda value: AuthState.set_register_field("name", value),
                errors=AuthState.register_errors,
                placeholder="John Doe",
            ),
            icon_input(
                "Email Address",
                "mail",
                "email",
                AuthState.register_values["email"],
                lambda value: AuthState.set_register_field("email", value),
                errors=AuthState.register_errors,
                input_type="email",
                placeholder="your.email@example.com",
            ),
            icon_input(
                "Phone Number",
                "phone",
                "phone_number",
                AuthState.register_values["phone_number"],
                lambda value: AuthState.set_register_field("phone_number", value),
                input_type="tel",
                placeholder="1234567890",
            ),
            password_input(
                "Password",
                "password",
                AuthState.register_values["password"],
                lambda value: AuthState.set_register_field("password", value),
                AuthState.register_errors,
                AuthState.password_visible,
                AuthState.toggle_password_visibility,
            ),
            password_input(
                "Confirm Password",
                "confirm_password",
                AuthState.register_values["confirm_password"],
                lambda value: AuthState.set_register_field("confirm_password", value),
                AuthState.register_errors,
                AuthState.confirm_password_visible,
                AuthState.toggle_confirm_password_visibility,
            ),
            rx.box(
                rx.text(
                    rx.text.strong("Note: "),
                    "After registration, you'll be prompted to complete your lab setup "
                    "with details like registration number, address, etc.",
                    font_size="0.75rem",
                    color=colors["gray_700"],
                ),
                background=colors["info_bg"],
                border=f"1px solid {colors['info_border']}",
                border_radius=radius["lg"],
                padding=css_spacing["sm"],
                width="100%",
            ),
            _submit_button("Create Account", "Creating Account...", AuthState.register_submitting),
            spacing="4",
            width="100%",
        ),
        on_submit=AuthState.submit_register,
        reset_on_submit=False,
        width="100%",
    )


def mode_switch() -> rx.Component:
    return rx.center(
        rx.text(
            rx.cond(AuthState.is_login, "New to GlobPathology?", "Already have an account?"),
            rx.button(
                rx.cond(AuthState.is_login, "Create an account", "Sign in"),
                type="button",
                variant="ghost",
                color_scheme="gray",
                font_weight="600",
                margin_left="0.25rem",
                on_click=AuthState.switch_mode,
            ),
            font_size="0.875rem",
            color=colors["gray_600"],
        ),
        margin_top=css_spacing["lg"],
        width="100%",
    )
