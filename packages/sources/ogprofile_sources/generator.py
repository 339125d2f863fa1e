"""Speaker profile generation from remote URLs or local files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PIL import Image

from ogprofile_core.config import AppConfig
from ogprofile_core.errors import FontResolutionError
from ogprofile_core.logging_setup import get_logger
from ogprofile_renderer.composer import ProfileComposer
from ogprofile_renderer.fonts import FontResolver
from ogprofile_renderer.models import FontFamily
from ogprofile_renderer.themes import DEFAULT_FONT_FAMILY, DEFAULT_HEIGHT, DEFAULT_WIDTH, THEME_FONTS

from .loaders import (
    load_image_from_file,
    load_image_from_url,
    require_absolute_url,
    require_existing_file,
    require_font_selector,
    require_text,
)
from .transport import DEFAULT_TIMEOUT_S, DEFAULT_USER_AGENT

logger = get_logger("generator")


class SpeakerProfileGenerator:
    """Validates inputs, loads both images, resolves the font and composes the card.

    ``font_selector`` is a sequence of family names, a font file path, or a
    ``FontFamily`` that was already resolved. Generation returns ``None`` when
    no usable font could be resolved; every other failure raises.
    """

    def __init__(
        self,
        resolver: FontResolver | None = None,
        composer: ProfileComposer | None = None,
        timeout_s: int = DEFAULT_TIMEOUT_S,
        user_agent: str = DEFAULT_USER_AGENT,
        theme_fonts: Sequence[str] = THEME_FONTS,
        default_font: str = DEFAULT_FONT_FAMILY,
    ) -> None:
        self.resolver = resolver or FontResolver()
        self.composer = composer or ProfileComposer()
        self.timeout_s = timeout_s
        self.user_agent = user_agent
        self.default_font = default_font
        self._theme_fonts = tuple(theme_fonts)

    @classmethod
    def from_config(cls, cfg: AppConfig, resolver: FontResolver | None = None) -> "SpeakerProfileGenerator":
        return cls(
            resolver=resolver or FontResolver(extra_dirs=cfg.fonts.extra_dirs),
            timeout_s=cfg.http.timeout_s,
            user_agent=cfg.http.user_agent,
            theme_fonts=cfg.fonts.candidates or THEME_FONTS,
            default_font=cfg.fonts.default_family,
        )

    @property
    def theme_fonts(self) -> tuple[str, ...]:
        return self._theme_fonts

    def generate_from_urls(
        self,
        speaker_url: str,
        logo_url: str,
        speaker_name: str,
        font_selector,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> Image.Image | None:
        require_text(speaker_url, "speaker_url")
        require_text(logo_url, "logo_url")
        require_text(speaker_name, "speaker_name")
        require_absolute_url(speaker_url, "speaker_url")
        require_absolute_url(logo_url, "logo_url")
        selector = require_font_selector(font_selector, self.default_font)

        speaker = load_image_from_url(speaker_url, timeout_s=self.timeout_s, user_agent=self.user_agent)
        logo = load_image_from_url(logo_url, timeout_s=self.timeout_s, user_agent=self.user_agent)
        return self._compose_with(speaker, logo, speaker_name, selector, width, height)

    def generate_from_files(
        self,
        speaker_path: str | Path,
        logo_path: str | Path,
        speaker_name: str,
        font_selector,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> Image.Image | None:
        require_text(speaker_path, "speaker_path")
        require_text(logo_path, "logo_path")
        require_text(speaker_name, "speaker_name")
        speaker_file = require_existing_file(speaker_path, "speaker_path")
        logo_file = require_existing_file(logo_path, "logo_path")
        selector = require_font_selector(font_selector, self.default_font)

        speaker = load_image_from_file(speaker_file)
        logo = load_image_from_file(logo_file)
        return self._compose_with(speaker, logo, speaker_name, selector, width, height)

    def compose(
        self,
        speaker_image: Image.Image,
        logo_image: Image.Image,
        speaker_name: str,
        font_selector,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> Image.Image:
        """Compose already-decoded images.

        Unlike the ``generate_*`` entry points this raises
        ``FontResolutionError`` when the selector resolves to no family.
        """
        if isinstance(font_selector, FontFamily):
            family = font_selector
        else:
            selector = require_font_selector(font_selector, self.default_font)
            family = self.resolver.resolve(selector)
            if family is None:
                raise FontResolutionError(f"No fonts found for {selector!r}")
        return self.composer.compose(speaker_image, logo_image, speaker_name, family, width, height)

    def resolve_font_from_list(self, names: Sequence[str], default_name: str | None = None) -> FontFamily | None:
        return self.resolver.resolve_from_names(names, default_name or self.default_font)

    def resolve_font_from_file(self, path: str | Path) -> FontFamily | None:
        return self.resolver.resolve_from_file(path)

    def _compose_with(self, speaker, logo, speaker_name, selector, width, height) -> Image.Image | None:
        family = self.resolver.resolve(selector)
        if family is None:
            logger.error("no usable font resolved; profile image not generated", extra={"event": "generate_no_font"})
            return None
        image = self.compose(speaker, logo, speaker_name, family, width, height)
        logger.info(
            f"generated profile image {image.width}x{image.height} font={family.name!r}",
            extra={"event": "generated", "family": family.name, "width": image.width, "height": image.height},
        )
        return image
