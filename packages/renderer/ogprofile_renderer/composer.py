"""Speaker profile card composer for Open Graph sized output."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image, ImageDraw, ImageOps

from .gradient import linear_gradient
from .models import CardLayout, CardTheme, FontFamily
from .themes import DEFAULT_HEIGHT, DEFAULT_THEME, DEFAULT_WIDTH

LOGO_WIDTH = 110
LOGO_HEIGHT = 110
LOGO_TOP = 40

BRAND_FONT_SIZE = 58
LABEL_FONT_SIZE = 40
NAME_FONT_SIZE = 48

TEXT_INSET = 40
BRAND_TOP = 200
LABEL_OFFSET = 70
NAME_OFFSET = 90
NAME_WRAP_INSET = 80


def compute_layout(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> CardLayout:
    half = width // 2
    brand_top = float(BRAND_TOP)
    label_top = brand_top + LABEL_OFFSET
    return CardLayout(
        width=width,
        height=height,
        speaker_size=(half, height),
        logo_size=(LOGO_WIDTH, LOGO_HEIGHT),
        # Centred in the right half: half / 2 - logo / 2 + half.
        logo_origin=((width // 2 // 2 - LOGO_WIDTH // 2) + width // 2, LOGO_TOP),
        text_left=width / 2 + TEXT_INSET,
        brand_top=brand_top,
        label_top=label_top,
        name_top=label_top + NAME_OFFSET,
        name_wrap_width=width / 2 - NAME_WRAP_INSET,
    )


def wrap_text(draw: ImageDraw.ImageDraw, text: str, font, max_width: float) -> str:
    """Greedy word wrap. Words wider than ``max_width`` keep a line of their own."""
    out: list[str] = []
    for paragraph in text.splitlines() or [""]:
        cur: list[str] = []
        for word in paragraph.split():
            trial = " ".join(cur + [word])
            if not cur or draw.textlength(trial, font=font) <= max_width:
                cur.append(word)
            else:
                out.append(" ".join(cur))
                cur = [word]
        out.append(" ".join(cur))
    return "\n".join(out)


class ProfileComposer:
    """Lays out the speaker photo, logo and text on a gradient canvas."""

    def __init__(self, theme: CardTheme = DEFAULT_THEME) -> None:
        self.theme = theme

    def compose(
        self,
        speaker_image: Image.Image,
        logo_image: Image.Image,
        speaker_name: str,
        font_family: FontFamily,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ) -> Image.Image:
        layout = compute_layout(width, height)
        theme = self.theme

        canvas = linear_gradient(width, height, theme.gradient_start, theme.gradient_end)

        # Resized copies; caller images stay untouched.
        speaker = ImageOps.fit(speaker_image.convert("RGBA"), layout.speaker_size, method=Image.Resampling.BICUBIC)
        canvas.alpha_composite(speaker, dest=(0, 0))

        logo = logo_image.convert("RGBA").resize(layout.logo_size, Image.Resampling.BICUBIC)
        canvas.alpha_composite(logo, dest=layout.logo_origin)

        brand_font = font_family.create_font(BRAND_FONT_SIZE, bold=True)
        label_font = font_family.create_font(LABEL_FONT_SIZE)
        name_font = font_family.create_font(NAME_FONT_SIZE, bold=True)

        draw = ImageDraw.Draw(canvas)
        draw.text((layout.text_left, layout.brand_top), theme.brand_text, font=brand_font, fill=theme.text_color)
        draw.text((layout.text_left, layout.label_top), theme.label_text, font=label_font, fill=theme.text_color)
        name = wrap_text(draw, speaker_name, name_font, layout.name_wrap_width)
        draw.multiline_text((layout.text_left, layout.name_top), name, font=name_font, fill=theme.text_color, align="left")
        return canvas


def to_png_bytes(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def preview_data_url(image: Image.Image) -> str:
    b64 = base64.b64encode(to_png_bytes(image)).decode("ascii")
    return f"data:image/png;base64,{b64}"
