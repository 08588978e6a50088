#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "status.done": "#9ad974 bold",
        "status.open": "#e5c07b",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.done": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.done": "bg:#3b3b3b #9ad974 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "mode": "bg:#4b525a #ffffff bold",
        "message": "#e5c07b",
        "input.prompt": "#ffb347 bold",
        "input": "#ffffff",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "status.done": "#b8f171 bold",
        "status.open": "#f0c674",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.done": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.done": "bg:#3d4047 #b8f171 bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "mode": "bg:#5a6169 #ffffff bold",
        "message": "#f0c674",
        "input.prompt": "#ffb347 bold",
        "input": "#ffffff",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))
