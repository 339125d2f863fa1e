"""Image sources (URL and file) and the profile generator facade."""

from .generator import SpeakerProfileGenerator
from .loaders import (
    coerce_font_selector,
    decode_image,
    is_absolute_url,
    load_image_from_file,
    load_image_from_url,
    require_absolute_url,
    require_existing_file,
    require_font_selector,
    require_text,
)
from .transport import fetch_bytes

__all__ = [
    "SpeakerProfileGenerator",
    "coerce_font_selector",
    "decode_image",
    "fetch_bytes",
    "is_absolute_url",
    "load_image_from_file",
    "load_image_from_url",
    "require_absolute_url",
    "require_existing_file",
    "require_font_selector",
    "require_text",
]
