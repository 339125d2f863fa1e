"""System font catalog and font family resolution."""

from __future__ import annotations

import os
import platform
from collections.abc import Iterable, Sequence
from pathlib import Path

from PIL import ImageFont

from ogprofile_core.errors import ContractViolation, MissingResourceError
from ogprofile_core.logging_setup import get_logger

from .models import FontFace, FontFamily, FontFile, FontNames, FontSelector
from .themes import DEFAULT_FONT_FAMILY

FONT_SUFFIXES = (".ttf", ".otf", ".ttc", ".otc")
_COLLECTION_SUFFIXES = (".ttc", ".otc")
_MAX_COLLECTION_FACES = 64

logger = get_logger("fonts")


def system_font_dirs() -> list[Path]:
    system = platform.system()
    if system == "Windows":
        windir = Path(os.environ.get("WINDIR", "C:\\Windows"))
        dirs = [windir / "Fonts"]
        local = os.environ.get("LOCALAPPDATA")
        if local:
            dirs.append(Path(local) / "Microsoft" / "Windows" / "Fonts")
        return dirs
    if system == "Darwin":
        return [
            Path("/System/Library/Fonts"),
            Path("/Library/Fonts"),
            Path.home() / "Library" / "Fonts",
        ]
    return [
        Path("/usr/share/fonts"),
        Path("/usr/local/share/fonts"),
        Path.home() / ".local" / "share" / "fonts",
        Path.home() / ".fonts",
    ]


def read_font_faces(path: Path) -> list[FontFace]:
    """Parse every face in a font file. Raises ``OSError`` if it is not a font."""
    faces: list[FontFace] = []
    limit = _MAX_COLLECTION_FACES if path.suffix.lower() in _COLLECTION_SUFFIXES else 1
    for index in range(limit):
        try:
            font = ImageFont.truetype(str(path), 12, index=index)
        except OSError:
            if index == 0:
                raise
            break
        family, style = font.getname()
        faces.append(FontFace(family=family or path.stem, style=style or "Regular", path=path, index=index))
    return faces


class FontCatalog:
    """Installed font families keyed by case-insensitive family name."""

    def __init__(self, families: Iterable[FontFamily] = ()) -> None:
        self._families: dict[str, FontFamily] = {}
        for family in families:
            self._families.setdefault(family.name.casefold(), family)

    def __len__(self) -> int:
        return len(self._families)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.casefold() in self._families

    @classmethod
    def from_directories(cls, directories: Iterable[Path]) -> "FontCatalog":
        catalog = cls()
        for directory in directories:
            directory = Path(directory)
            if not directory.is_dir():
                continue
            files = sorted(p for p in directory.rglob("*") if p.suffix.lower() in FONT_SUFFIXES and p.is_file())
            for path in files:
                try:
                    catalog._add_faces(read_font_faces(path))
                except OSError as exc:
                    logger.debug(f"skipping unreadable font {path}: {exc}")
        logger.info(f"font catalog built with {len(catalog)} families")
        return catalog

    @classmethod
    def from_system(cls, extra_dirs: Sequence[str | Path] = ()) -> "FontCatalog":
        return cls.from_directories([*system_font_dirs(), *(Path(d).expanduser() for d in extra_dirs)])

    def _add_faces(self, faces: list[FontFace]) -> list[FontFamily]:
        keys: list[str] = []
        for face in faces:
            key = face.family.casefold()
            existing = self._families.get(key)
            if existing is None:
                self._families[key] = FontFamily(name=face.family, faces=(face,))
            elif all(f.style.casefold() != face.style.casefold() for f in existing.faces):
                self._families[key] = FontFamily(name=existing.name, faces=existing.faces + (face,))
            if key not in keys:
                keys.append(key)
        return [self._families[k] for k in keys]

    def add_file(self, path: str | Path) -> FontFamily:
        """Add a font file and return the (first) family it defines."""
        families = self._add_faces(read_font_faces(Path(path)))
        return families[0]

    def get(self, name: str) -> FontFamily | None:
        if not name:
            return None
        return self._families.get(name.casefold())

    def families(self) -> list[str]:
        return sorted((f.name for f in self._families.values()), key=str.casefold)


class FontResolver:
    """Turns font names, font files or handles into a usable ``FontFamily``."""

    def __init__(self, catalog: FontCatalog | None = None, extra_dirs: Sequence[str | Path] = ()) -> None:
        self._catalog = catalog
        self._extra_dirs = tuple(extra_dirs)

    @property
    def catalog(self) -> FontCatalog:
        if self._catalog is None:
            self._catalog = FontCatalog.from_system(self._extra_dirs)
        return self._catalog

    def resolve_from_names(self, names: Sequence[str], default_name: str = DEFAULT_FONT_FAMILY) -> FontFamily | None:
        """Return the first installed family in ``names``, else ``default_name``.

        Returns ``None`` and logs an error when neither is installed.
        """
        if names is None:
            raise ContractViolation("names", "Font family names cannot be None")
        if isinstance(names, str):
            raise ContractViolation("names", "Font family names must be a sequence of names, not a single string")

        catalog = self.catalog
        for name in names:
            family = catalog.get(name)
            if family is not None:
                logger.debug(f"resolved font family {family.name!r} from {name!r}")
                return family

        family = catalog.get(default_name)
        if family is None:
            logger.error(
                f"Error loading fonts: none of {list(names)!r} or the default {default_name!r} is installed",
                extra={"event": "font_resolution_failed", "family": default_name},
            )
        return family

    def resolve_from_file(self, path: str | Path) -> FontFamily | None:
        """Load the family defined in a font file.

        Returns ``None`` and logs an error when the file cannot be parsed.
        """
        if path is None or not str(path) or (isinstance(path, Path) and not path.parts):
            raise ContractViolation("path", "Font file path must not be empty")
        font_path = Path(path)
        if not font_path.is_file():
            raise MissingResourceError(font_path, f"Font file not found: {font_path}")

        try:
            return FontCatalog().add_file(font_path)
        except OSError as exc:
            logger.error(
                f"Error loading fonts from file '{font_path}': {exc}",
                extra={"event": "font_file_unreadable", "path": str(font_path)},
            )
            return None

    def resolve(self, selector: FontSelector) -> FontFamily | None:
        if isinstance(selector, FontFamily):
            return selector
        if isinstance(selector, FontNames):
            return self.resolve_from_names(selector.names, selector.default)
        if isinstance(selector, FontFile):
            return self.resolve_from_file(selector.path)
        raise ContractViolation("font_selector", f"Unsupported font selector: {type(selector).__name__}")
