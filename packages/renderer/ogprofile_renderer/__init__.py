"""Renderer package for speaker profile card composition."""

from .composer import ProfileComposer, compute_layout, preview_data_url, to_png_bytes, wrap_text
from .fonts import FontCatalog, FontResolver, read_font_faces, system_font_dirs
from .gradient import linear_gradient
from .models import CardLayout, CardTheme, FontFace, FontFamily, FontFile, FontNames, FontSelector
from .themes import DEFAULT_FONT_FAMILY, DEFAULT_HEIGHT, DEFAULT_THEME, DEFAULT_WIDTH, THEME_FONTS

__all__ = [
    "CardLayout",
    "CardTheme",
    "DEFAULT_FONT_FAMILY",
    "DEFAULT_HEIGHT",
    "DEFAULT_THEME",
    "DEFAULT_WIDTH",
    "FontCatalog",
    "FontFace",
    "FontFamily",
    "FontFile",
    "FontNames",
    "FontResolver",
    "FontSelector",
    "ProfileComposer",
    "THEME_FONTS",
    "compute_layout",
    "linear_gradient",
    "preview_data_url",
    "read_font_faces",
    "system_font_dirs",
    "to_png_bytes",
    "wrap_text",
]
