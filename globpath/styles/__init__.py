from .theme import colors, css_spacing, input_style, page_background, radius, shadows, submit_button_style, theme_config

__all__ = [
    "colors",
    "css_spacing",
    "input_style",
    "page_background",
    "radius",
    "shadows",
    "submit_button_style",
    "theme_config",
]
