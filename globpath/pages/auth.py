"""Combined login/registration page."""

import reflex as rx

from ..components import login_form, mode_switch, register_form, status_banners
from ..state.auth_state import AuthState
from ..styles.theme import colors, css_spacing, page_background, radius, shadows


def _header() -> rx.Component:
    return rx.vstack(
        rx.center(
            rx.icon("test_tubes", size=32, color=colors["gray_800"]),
            width="4rem",
            height="4rem",
            background=colors["gray_300"],
            border_radius=radius["2xl"],
            margin_bottom=css_spacing["md"],
        ),
        rx.heading(
            rx.cond(AuthState.is_login, "Welcome Back", "Get Started"),
            size="6",
            weight="bold",
            color=colors["gray_900"],
        ),
        rx.text(
            rx.cond(AuthState.is_login, "Sign in to your lab dashboard", "Create your lab account"),
            font_size="0.875rem",
            color=colors["gray_600"],
        ),
        align="center",
        spacing="2",
        margin_bottom=css_spacing["xl"],
        width="100%",
    )


def _card() -> rx.Component:
    return rx.box(
        _header(),
        status_banners(),
        rx.cond(AuthState.is_login, login_form(), register_form()),
        mode_switch(),
        background=colors["gray_100"],
        border_radius=radius["xl"],
        box_shadow=shadows["2xl"],
        padding=css_spacing["xl"],
        width="100%",
        max_width="28rem",
    )


def auth_page() -> rx.Component:
    """Auth page; blank until the session check decides the user should see it."""
    return rx.center(
        rx.cond(
            AuthState.session_checked,
            _card(),
            rx.spinner(size="3"),
        ),
        min_height="100vh",
        width="100%",
        padding=css_spacing["md"],
        background=page_background,
    )
