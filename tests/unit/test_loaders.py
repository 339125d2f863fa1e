import sys
import tempfile
import unittest
from io import BytesIO
from pathlib import Path

from PIL import Image

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "sources"))

from ogprofile_core.errors import ContractViolation, ImageDecodeError, MissingResourceError
from ogprofile_renderer.models import FontFamily, FontFile, FontNames
from ogprofile_sources.loaders import (
    coerce_font_selector,
    decode_image,
    is_absolute_url,
    load_image_from_file,
    require_absolute_url,
    require_font_selector,
    require_text,
)


class ValidationTests(unittest.TestCase):
    def test_require_text(self):
        self.assertEqual(require_text("Jane", "speaker_name"), "Jane")
        for bad in (None, ""):
            with self.assertRaises(ContractViolation) as ctx:
                require_text(bad, "speaker_name")
            self.assertEqual(ctx.exception.parameter, "speaker_name")

    def test_require_text_rejects_empty_path(self):
        with self.assertRaises(ContractViolation) as ctx:
            require_text(Path(""), "speaker_path")
        self.assertEqual(ctx.exception.parameter, "speaker_path")
        self.assertEqual(require_text(Path("a.png"), "speaker_path"), "a.png")

    def test_absolute_urls(self):
        self.assertTrue(is_absolute_url("https://morespeakers.com/images/logo.png"))
        self.assertTrue(is_absolute_url("http://localhost:8080/a.png?x=1"))
        for bad in ("invalid-url", "/images/a.png", "https://", "https://exa mple.com/a.png", ""):
            self.assertFalse(is_absolute_url(bad), bad)

    def test_require_absolute_url_names_parameter(self):
        with self.assertRaises(ContractViolation) as ctx:
            require_absolute_url("invalid-url", "logo_url")
        self.assertEqual(ctx.exception.parameter, "logo_url")
        self.assertIsInstance(ctx.exception, ValueError)


class FontSelectorTests(unittest.TestCase):
    def test_coercion(self):
        self.assertEqual(coerce_font_selector(["Arial"]), FontNames(names=("Arial",), default="Arial"))
        self.assertEqual(coerce_font_selector(("Ubuntu",), "Roboto"), FontNames(names=("Ubuntu",), default="Roboto"))
        self.assertEqual(coerce_font_selector("fonts/Ubuntu-R.ttf"), FontFile(Path("fonts/Ubuntu-R.ttf")))
        family = FontFamily.builtin()
        self.assertIs(coerce_font_selector(family), family)

    def test_invalid_selectors(self):
        with self.assertRaises(ContractViolation):
            require_font_selector(None)
        with self.assertRaises(ContractViolation):
            require_font_selector([])
        with self.assertRaises(ContractViolation):
            require_font_selector("")
        with self.assertRaises(ContractViolation):
            require_font_selector(3.5)
        with self.assertRaises(ContractViolation) as ctx:
            require_font_selector(Path(""))
        self.assertEqual(ctx.exception.parameter, "font_file")

    def test_missing_font_file(self):
        with self.assertRaises(MissingResourceError):
            require_font_selector("nonexistent.ttf")

    def test_existing_font_file_is_accepted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "font.ttf"
            path.write_bytes(b"x")
            self.assertEqual(require_font_selector(str(path)), FontFile(path))


class DecodeTests(unittest.TestCase):
    def test_decode_png_bytes(self):
        buf = BytesIO()
        Image.new("RGB", (12, 8), (1, 2, 3)).save(buf, format="PNG")
        img = decode_image(buf.getvalue(), "memory")
        self.assertEqual(img.size, (12, 8))

    def test_decode_garbage(self):
        with self.assertRaises(ImageDecodeError) as ctx:
            decode_image(b"<html>not found</html>", "https://example.com/a.png")
        self.assertEqual(ctx.exception.source, "https://example.com/a.png")

    def test_load_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "speaker.png"
            Image.new("RGB", (20, 30), (9, 9, 9)).save(path)
            img = load_image_from_file(path)
            self.assertEqual(img.size, (20, 30))
            self.assertEqual(img.getpixel((0, 0)), (9, 9, 9))

    def test_load_missing_file(self):
        with self.assertRaises(MissingResourceError) as ctx:
            load_image_from_file("nonexistent.png")
        self.assertIsInstance(ctx.exception, FileNotFoundError)

    def test_load_non_image_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "speaker.png"
            path.write_text("not an image", encoding="utf-8")
            with self.assertRaises(ImageDecodeError):
                load_image_from_file(path)


if __name__ == "__main__":
    unittest.main()
