"""Argument validation and image loading for URL and file sources."""

from __future__ import annotations

from collections.abc import Sequence
from io import BytesIO
from pathlib import Path
from urllib.parse import urlsplit

from PIL import Image, UnidentifiedImageError

from ogprofile_core.errors import ContractViolation, ImageDecodeError, MissingResourceError
from ogprofile_renderer.models import FontFamily, FontFile, FontNames, FontSelector
from ogprofile_renderer.themes import DEFAULT_FONT_FAMILY

from .transport import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT, fetch_bytes


def _is_blank(value: object) -> bool:
    # str(Path("")) is "."
    if isinstance(value, Path):
        return not value.parts
    return value is None or not str(value)


def require_text(value: str | None, parameter: str) -> str:
    if _is_blank(value):
        raise ContractViolation(parameter)
    return str(value)


def is_absolute_url(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def require_absolute_url(value: str, parameter: str) -> str:
    if not is_absolute_url(value):
        raise ContractViolation(parameter, f"{parameter} is not a well-formed absolute URL: {value!r}")
    return value


def require_existing_file(value: str | Path, parameter: str) -> Path:
    path = Path(value)
    if not path.is_file():
        raise MissingResourceError(path, f"{parameter} file not found: {path}")
    return path


def coerce_font_selector(value: object, default_name: str = DEFAULT_FONT_FAMILY) -> FontSelector:
    """Map plain values onto the selector variants: sequences of names, a path, or a handle."""
    if isinstance(value, (FontNames, FontFile, FontFamily)):
        return value
    if isinstance(value, (str, Path)):
        return FontFile(Path(value))
    if isinstance(value, Sequence):
        return FontNames(names=tuple(str(v) for v in value), default=default_name)
    raise ContractViolation("font_selector", f"Unsupported font selector: {type(value).__name__}")


def require_font_selector(value: object, default_name: str = DEFAULT_FONT_FAMILY) -> FontSelector:
    if value is None:
        raise ContractViolation("font_selector")
    if isinstance(value, (str, Path)) and _is_blank(value):
        raise ContractViolation("font_file")

    selector = coerce_font_selector(value, default_name)
    if isinstance(selector, FontNames) and not selector.names:
        raise ContractViolation("font_family_names")
    if isinstance(selector, FontFile):
        require_existing_file(selector.path, "font_file")
    return selector


def decode_image(data: bytes, source: str) -> Image.Image:
    try:
        image = Image.open(BytesIO(data))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(source, str(exc)) from exc
    return image


def load_image_from_url(
    url: str,
    timeout_s: int = DEFAULT_TIMEOUT_S,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Image.Image:
    return decode_image(fetch_bytes(url, timeout_s=timeout_s, user_agent=user_agent), url)


def load_image_from_file(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.is_file():
        raise MissingResourceError(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageDecodeError(str(path), str(exc)) from exc
