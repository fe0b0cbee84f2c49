"""Top-level success and error banners."""

import reflex as rx

from ..state.auth_state import AuthState
from ..styles.theme import colors, css_spacing, radius


def _banner(message, text_color: str, background: str, border_color: str) -> rx.Component:
    return rx.box(
        rx.text(message, font_size="0.875rem", color=text_color),
        background=background,
        border=f"1px solid {border_color}",
        border_radius=radius["md"],
        padding=css_spacing["md"],
        margin_bottom=css_spacing["lg"],
        width="100%",
    )


def status_banners() -> rx.Component:
    """Success banner above the error banner; each only when it has text."""
    return rx.fragment(
        rx.cond(
            AuthState.success_message != "",
            _banner(AuthState.success_message, colors["success"], colors["success_bg"], colors["success_border"]),
        ),
        rx.cond(
            AuthState.error_message != "",
            _banner(AuthState.error_message, colors["error"], colors["error_bg"], colors["error_border"]),
        ),
    )
