"""Labelled inputs with leading icons, password visibility toggles and inline errors."""

import reflex as rx

from ..styles.theme import colors, input_style


def field_label(text: str) -> rx.Component:
    return rx.text(
        text,
        as_="label",
        font_size="0.875rem",
        font_weight="500",
        color=colors["gray_700"],
        margin_bottom="0.5rem",
    )


def field_error(errors, name: str) -> rx.Component:
    """Inline error text for ``name`` when ``errors`` has one."""
    return rx.cond(
        errors.contains(name),
        rx.text(errors[name], color=colors["error_text"], font_size="0.75rem", margin_top="0.25rem"),
    )


def icon_input(
    label: str,
    icon: str,
    name: str,
    value,
    on_change,
    errors=None,
    input_type: str = "text",
    placeholder: str = "",
) -> rx.Component:
    return rx.box(
        field_label(label),
        rx.input(
            rx.input.slot(rx.icon(icon, size=18, color=colors["gray_400"])),
            name=name,
            type=input_type,
            value=value,
            on_change=on_change,
            placeholder=placeholder,
            size="3",
            style=input_style,
        ),
        field_error(errors, name) if errors is not None else rx.fragment(),
        width="100%",
    )


def password_input(
    label: str,
    name: str,
    value,
    on_change,
    errors,
    visible,
    on_toggle,
    header_extra=None,
) -> rx.Component:
    """Password input whose masking follows ``visible``; the eye button calls ``on_toggle``."""
    label_row = (
        rx.hstack(field_label(label), rx.spacer(), header_extra, width="100%", align="center")
        if header_extra is not None
        else field_label(label)
    )
    return rx.box(
        label_row,
        rx.input(
            rx.input.slot(rx.icon("lock", size=18, color=colors["gray_400"])),
            rx.input.slot(
                rx.icon_button(
                    rx.cond(visible, rx.icon("eye_off", size=18), rx.icon("eye", size=18)),
                    type="button",
                    variant="ghost",
                    color_scheme="gray",
                    size="1",
                    on_click=on_toggle,
                ),
                side="right",
            ),
            name=name,
            type=rx.cond(visible, "text", "password"),
            value=value,
            on_change=on_change,
            placeholder="••••••••",
            size="3",
            style=input_style,
        ),
        field_error(errors, name),
        width="100%",
    )
