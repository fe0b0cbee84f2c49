"""Theme and styling configuration for the auth portal."""

import reflex as rx

# Color palette
colors = {
    # Primary colors
    "primary": "#111827",
    "primary_hover": "#1f2937",

    # Status colors
    "success": "#166534",
    "success_bg": "#f0fdf4",
    "success_border": "#bbf7d0",
    "error": "#991b1b",
    "error_bg": "#fef2f2",
    "error_border": "#fecaca",
    "error_text": "#ef4444",
    "info_bg": "#eff6ff",
    "info_border": "#bfdbfe",

    # Neutral colors
    "white": "#ffffff",
    "gray_100": "#f3f4f6",
    "gray_300": "#d1d5db",
    "gray_400": "#9ca3af",
    "gray_600": "#4b5563",
    "gray_700": "#374151",
    "gray_800": "#1f2937",
    "gray_900": "#111827",
}

# CSS spacing values for direct styling
css_spacing = {
    "xs": "0.25rem",  # 4px
    "sm": "0.5rem",   # 8px
    "md": "1rem",     # 16px
    "lg": "1.5rem",   # 24px
    "xl": "2rem",     # 32px
}

# Border radius
radius = {
    "md": "0.5rem",   # 8px
    "lg": "0.75rem",  # 12px
    "xl": "1rem",     # 16px
    "2xl": "1rem",
}

shadows = {
    "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
}

page_background = "linear-gradient(135deg, #eff6ff 0%, #ffffff 50%, #faf5ff 100%)"

# Reflex theme configuration
theme_config = rx.theme(
    appearance="light",
    has_background=True,
    radius="medium",
    accent_color="gray",
)

input_style = {
    "width": "100%",
    "height": "3rem",
    "background": colors["white"],
    "border_radius": radius["lg"],
    "color": colors["gray_900"],
}

submit_button_style = {
    "width": "100%",
    "height": "3rem",
    "background": colors["primary"],
    "color": colors["white"],
    "font_weight": "500",
    "border_radius": radius["lg"],
    "cursor": "pointer",
    "transition": "all 0.2s ease",
    "_hover": {"background": colors["primary_hover"]},
}
