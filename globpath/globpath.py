"""Main GlobPathology auth portal Reflex application.

Serves the combined login/registration page. Signed-in users are sent on to
lab setup or lab management before the page renders.
"""

import reflex as rx

from .pages.auth import auth_page
from .state.auth_state import AuthState
from .styles.theme import theme_config

# Create the main Reflex app
app = rx.App(
    theme=theme_config,
    stylesheets=[
        "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"
    ],
    style={
        "font_family": "Inter, -apple-system, BlinkMacSystemFont, Segoe UI, Roboto, sans-serif",
        "*": {
            "box_sizing": "border-box",
        },
    },
)

# Add routes
app.add_page(
    auth_page,
    route="/",
    title="GlobPathology - Sign In",
    description="Sign in or create a GlobPathology lab account",
    on_load=AuthState.check_session,
)
