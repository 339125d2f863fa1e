"""Persistent generator settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any


CONFIG_VERSION = 1


@dataclass
class CanvasConfig:
    width: int = 1200
    height: int = 630


@dataclass
class FontsConfig:
    # Empty means the built-in theme font list.
    candidates: list[str] = field(default_factory=list)
    default_family: str = "Arial"
    font_file: str | None = None
    extra_dirs: list[str] = field(default_factory=list)


@dataclass
class HttpConfig:
    timeout_s: int = 30
    user_agent: str = "OgProfile/0.1 (+https://morespeakers.com)"


@dataclass
class LoggingConfig:
    keep_files: int = 7
    console: bool = False


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    fonts: FontsConfig = field(default_factory=FontsConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()


def config_path() -> Path:
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "OgProfile" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "OgProfile" / "config.json"
    return Path.home() / ".config" / "ogprofile" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_canvas(cfg: AppConfig) -> None:
    cfg.canvas.width = max(16, int(cfg.canvas.width))
    cfg.canvas.height = max(16, int(cfg.canvas.height))


def _normalize_fonts(cfg: AppConfig) -> None:
    cfg.fonts.candidates = [str(n) for n in (cfg.fonts.candidates or []) if str(n).strip()]
    cfg.fonts.extra_dirs = [str(d) for d in (cfg.fonts.extra_dirs or []) if str(d).strip()]
    if not str(cfg.fonts.default_family or "").strip():
        cfg.fonts.default_family = "Arial"
    if cfg.fonts.font_file is not None and not str(cfg.fonts.font_file).strip():
        cfg.fonts.font_file = None


def _normalize_http(cfg: AppConfig) -> None:
    cfg.http.timeout_s = max(1, min(300, int(cfg.http.timeout_s)))


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_files = max(2, int(cfg.logging.keep_files))
    cfg.logging.console = bool(cfg.logging.console)


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        canvas=_merge(CanvasConfig, data.get("canvas", {})),
        fonts=_merge(FontsConfig, data.get("fonts", {})),
        http=_merge(HttpConfig, data.get("http", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
    )

    _normalize_canvas(cfg)
    _normalize_fonts(cfg)
    _normalize_http(cfg)
    _normalize_logging(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
