"""Card theme and font defaults."""

from __future__ import annotations

from .models import CardTheme

DEFAULT_WIDTH = 1200
DEFAULT_HEIGHT = 630
DEFAULT_FONT_FAMILY = "Arial"

THEME_FONTS: tuple[str, ...] = (
    "Ubuntu",
    "-apple-system",
    "BlinkMacSystemFont",
    "Segoe UI",
    "Roboto",
    "Helvetica Neue",
    "Arial",
    "sans-serif",
    "Apple Color Emoji",
    "Segoe UI Emoji",
    "Segoe UI Symbol",
)

# Bootstrap "United" palette.
DEFAULT_THEME = CardTheme(
    name="United",
    gradient_start="#E95420",
    gradient_end="#F7C873",
    text_color="#FFFFFF",
    brand_text="MoreSpeakers.com",
    label_text="Speaker Profile",
)
