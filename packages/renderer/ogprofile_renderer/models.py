"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from PIL import ImageFont

_REGULAR_RANK = {"": 0, "regular": 0, "book": 0, "normal": 0, "roman": 0, "medium": 1}
_BOLD_RANK = {"bold": 0, "semibold": 1, "demibold": 1, "extrabold": 2, "ultrabold": 2, "black": 3, "heavy": 3}
_THIN_WORDS = ("thin", "hairline", "extralight", "ultralight")


@dataclass(frozen=True)
class CardTheme:
    name: str
    gradient_start: str
    gradient_end: str
    text_color: str
    brand_text: str
    label_text: str


@dataclass(frozen=True)
class CardLayout:
    width: int
    height: int
    speaker_size: tuple[int, int]
    logo_size: tuple[int, int]
    logo_origin: tuple[int, int]
    text_left: float
    brand_top: float
    label_top: float
    name_top: float
    name_wrap_width: float


@dataclass(frozen=True)
class FontFace:
    family: str
    style: str
    path: Path | None
    index: int = 0

    @property
    def bold(self) -> bool:
        lower = self.style.lower()
        return "bold" in lower or "black" in lower or "heavy" in lower

    @property
    def italic(self) -> bool:
        lower = self.style.lower()
        return "italic" in lower or "oblique" in lower

    def weight_rank(self, bold: bool) -> int:
        """Distance from plain Regular (or Bold); 0 is an exact match."""
        key = self.style.casefold()
        for token in ("italic", "oblique", " ", "-", "_"):
            key = key.replace(token, "")
        if bold:
            return _BOLD_RANK.get(key, 4)
        if key in _REGULAR_RANK:
            return _REGULAR_RANK[key]
        if any(word in key for word in _THIN_WORDS):
            return 4
        if "light" in key:
            return 3
        return 2

    def load(self, size: int):
        if self.path is None:
            return ImageFont.load_default(size=size)
        return ImageFont.truetype(str(self.path), size, index=self.index)


@dataclass(frozen=True)
class FontFamily:
    """A resolved typeface family that can produce fonts at any size."""

    name: str
    faces: tuple[FontFace, ...]

    @classmethod
    def builtin(cls, name: str = "Pillow Default") -> "FontFamily":
        """Family backed by the scalable font bundled with Pillow."""
        return cls(name=name, faces=(FontFace(family=name, style="Regular", path=None),))

    def face_for(self, bold: bool = False, italic: bool = False) -> FontFace:
        """Best face for the requested style.

        Weight class matters most, then slant, then how close the weight is
        to plain Regular/Bold. Ties keep catalog order.
        """

        def score(face: FontFace) -> tuple[bool, bool, int]:
            return (face.bold != bold, face.italic != italic, face.weight_rank(bold))

        return min(self.faces, key=score)

    def create_font(self, size: int, bold: bool = False, italic: bool = False):
        return self.face_for(bold=bold, italic=italic).load(size)


@dataclass(frozen=True)
class FontNames:
    names: tuple[str, ...]
    default: str = "Arial"


@dataclass(frozen=True)
class FontFile:
    path: Path


FontSelector = Union[FontNames, FontFile, FontFamily]
