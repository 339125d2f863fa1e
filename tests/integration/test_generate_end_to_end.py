from __future__ import annotations

import urllib.error
from io import BytesIO

import pytest
from PIL import Image

import ogprofile_sources.transport as transport
from ogprofile_core.errors import ImageDecodeError, RemoteFetchError
from ogprofile_renderer import FontCatalog, FontFamily, FontResolver
from ogprofile_sources import SpeakerProfileGenerator


def _png_bytes(color: tuple[int, int, int]) -> bytes:
    buf = BytesIO()
    Image.new("RGB", (100, 100), color).save(buf, format="PNG")
    return buf.getvalue()


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200) -> None:
        self._body = body
        self.status = status

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        return None


@pytest.fixture
def routes(monkeypatch):
    table: dict[str, object] = {}

    def fake_urlopen(url, timeout, **_kwargs):
        handler = table.get(url)
        if handler is None:
            raise urllib.error.HTTPError(url, 404, "Not Found", None, None)
        if isinstance(handler, Exception):
            raise handler
        return FakeResponse(handler)

    monkeypatch.setattr(transport, "_urlopen", fake_urlopen)
    return table


@pytest.fixture
def generator() -> SpeakerProfileGenerator:
    catalog = FontCatalog([FontFamily.builtin("Arial")])
    return SpeakerProfileGenerator(resolver=FontResolver(catalog=catalog))


def test_generate_from_urls_success(routes, generator) -> None:
    routes["https://speaker.com/i.png"] = _png_bytes((255, 0, 0))
    routes["https://logo.com/i.png"] = _png_bytes((0, 0, 255))

    result = generator.generate_from_urls("https://speaker.com/i.png", "https://logo.com/i.png", "John Doe", ["Arial"])
    assert result is not None
    assert result.size == (1200, 630)
    assert result.getpixel((10, 10)) == (255, 0, 0, 255)
    assert result.getpixel((900, 95)) == (0, 0, 255, 255)


def test_generate_from_urls_with_font_family(routes, generator) -> None:
    routes["https://speaker.com/i.png"] = _png_bytes((255, 0, 0))
    routes["https://logo.com/i.png"] = _png_bytes((0, 0, 255))

    result = generator.generate_from_urls(
        "https://speaker.com/i.png", "https://logo.com/i.png", "John Doe", FontFamily.builtin()
    )
    assert result is not None


def test_generate_from_urls_http_error(routes, generator) -> None:
    routes["https://logo.com/i.png"] = _png_bytes((0, 0, 255))

    with pytest.raises(RemoteFetchError) as info:
        generator.generate_from_urls("https://error.com/i.png", "https://logo.com/i.png", "Name", ["Arial"])
    assert info.value.status == 404


def test_generate_from_urls_not_an_image(routes, generator) -> None:
    routes["https://speaker.com/i.png"] = b"<html>oops</html>"
    routes["https://logo.com/i.png"] = _png_bytes((0, 0, 255))

    with pytest.raises(ImageDecodeError):
        generator.generate_from_urls("https://speaker.com/i.png", "https://logo.com/i.png", "Name", ["Arial"])


def test_generate_from_urls_no_font(routes) -> None:
    routes["https://speaker.com/i.png"] = _png_bytes((255, 0, 0))
    routes["https://logo.com/i.png"] = _png_bytes((0, 0, 255))
    generator = SpeakerProfileGenerator(resolver=FontResolver(catalog=FontCatalog()))

    assert generator.generate_from_urls("https://speaker.com/i.png", "https://logo.com/i.png", "Name", ["Nope"]) is None


def test_generate_from_files_end_to_end(tmp_path, generator) -> None:
    speaker = tmp_path / "speaker.png"
    logo = tmp_path / "logo.png"
    Image.new("RGB", (100, 100), (255, 0, 0)).save(speaker)
    Image.new("RGB", (100, 100), (0, 0, 255)).save(logo)

    result = generator.generate_from_files(speaker, logo, "John Doe", ["Arial"])
    assert result is not None
    assert result.size == (1200, 630)

    out = tmp_path / "out.png"
    result.save(out, format="PNG")
    with Image.open(out) as reloaded:
        assert reloaded.size == (1200, 630)
