"""CLI entrypoints for generating speaker profile cards and inspecting fonts."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from ogprofile_core import ProfileImageError, config_path, load_config, save_config
from ogprofile_core.logging_setup import configure_logging, get_logger
from ogprofile_renderer import FontFile, FontNames, FontResolver
from ogprofile_sources import SpeakerProfileGenerator

EXIT_FAILED = 1
EXIT_NO_FONT = 2


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _font_selector(args: argparse.Namespace, generator: SpeakerProfileGenerator, cfg):
    if args.font_file:
        return FontFile(Path(args.font_file))
    if args.font:
        return FontNames(names=tuple(args.font), default=generator.default_font)
    if cfg.fonts.font_file:
        return FontFile(Path(cfg.fonts.font_file))
    return FontNames(names=generator.theme_fonts, default=generator.default_font)


def _generate(args: argparse.Namespace, from_urls: bool) -> int:
    cfg = load_config()
    generator = SpeakerProfileGenerator.from_config(cfg)
    selector = _font_selector(args, generator, cfg)
    width = args.width or cfg.canvas.width
    height = args.height or cfg.canvas.height

    produce = generator.generate_from_urls if from_urls else generator.generate_from_files
    image = produce(args.speaker, args.logo, args.name, selector, width=width, height=height)
    if image is None:
        _print_json({"success": False, "error": "no usable font found"})
        return EXIT_NO_FONT

    out = Path(args.out).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    image.save(out, format="PNG")
    _print_json({"success": True, "path": str(out), "width": image.width, "height": image.height})
    return 0


def cmd_from_urls(args: argparse.Namespace) -> int:
    return _generate(args, from_urls=True)


def cmd_from_files(args: argparse.Namespace) -> int:
    return _generate(args, from_urls=False)


def cmd_fonts(args: argparse.Namespace) -> int:
    cfg = load_config()
    catalog = FontResolver(extra_dirs=cfg.fonts.extra_dirs).catalog
    names = catalog.families()
    if args.match:
        needle = args.match.casefold()
        names = [n for n in names if needle in n.casefold()]
    _print_json(names)
    return 0


def cmd_resolve_font(args: argparse.Namespace) -> int:
    cfg = load_config()
    resolver = FontResolver(extra_dirs=cfg.fonts.extra_dirs)
    family = resolver.resolve_from_names(args.names, args.default or cfg.fonts.default_family)
    if family is None:
        _print_json({"success": False, "requested": args.names})
        return EXIT_NO_FONT
    _print_json(
        {
            "success": True,
            "family": family.name,
            "faces": [{"style": f.style, "path": f.path, "index": f.index} for f in family.faces],
        }
    )
    return 0


def cmd_config_show(_args: argparse.Namespace) -> int:
    _print_json({"path": config_path(), "config": asdict(load_config())})
    return 0


def cmd_config_init(args: argparse.Namespace) -> int:
    path = Path(args.path).expanduser() if args.path else None
    saved = save_config(load_config(path), path)
    _print_json({"path": saved})
    return 0


def _add_generate_args(cmd: argparse.ArgumentParser, source: str) -> None:
    cmd.add_argument("--speaker", required=True, help=f"Speaker headshot {source}")
    cmd.add_argument("--logo", required=True, help=f"Logo {source}")
    cmd.add_argument("--name", required=True, help="Speaker name")
    fonts = cmd.add_mutually_exclusive_group()
    fonts.add_argument("--font", action="append", default=None, help="Font family name (repeatable, first match wins)")
    fonts.add_argument("--font-file", default=None, help="Path to a .ttf/.otf font file")
    cmd.add_argument("--width", type=int, default=None)
    cmd.add_argument("--height", type=int, default=None)
    cmd.add_argument("--out", default="speaker-profile.png", help="Output PNG path")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ogprofile", description="Open Graph speaker profile image generator")
    sub = parser.add_subparsers(dest="command", required=True)

    urls_cmd = sub.add_parser("from-urls", help="Generate a card from image URLs")
    _add_generate_args(urls_cmd, "URL")
    urls_cmd.set_defaults(func=cmd_from_urls)

    files_cmd = sub.add_parser("from-files", help="Generate a card from local image files")
    _add_generate_args(files_cmd, "file")
    files_cmd.set_defaults(func=cmd_from_files)

    fonts_cmd = sub.add_parser("fonts", help="List installed font families")
    fonts_cmd.add_argument("--match", default=None, help="Case-insensitive substring filter")
    fonts_cmd.set_defaults(func=cmd_fonts)

    resolve_cmd = sub.add_parser("resolve-font", help="Show which family a candidate list resolves to")
    resolve_cmd.add_argument("names", nargs="+")
    resolve_cmd.add_argument("--default", default=None, help="Fallback family name")
    resolve_cmd.set_defaults(func=cmd_resolve_font)

    config_cmd = sub.add_parser("config", help="Inspect or create the settings file")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective settings")
    show_cmd.set_defaults(func=cmd_config_show)
    init_cmd = config_sub.add_parser("init", help="Write settings file with defaults")
    init_cmd.add_argument("--path", default=None)
    init_cmd.set_defaults(func=cmd_config_init)

    return parser


def main(argv: list[str] | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.logging.keep_files, console=cfg.logging.console)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except ProfileImageError as exc:
        get_logger().error(f"{args.command} failed: {exc}", extra={"event": "command_failed"})
        _print_json({"success": False, "error": str(exc), "type": type(exc).__name__})
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
