"""Structured local logging for the profile card tooling."""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "ogprofile"


def _config_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "OgProfile"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "OgProfile"
    return Path.home() / ".config" / "ogprofile"


def log_dir() -> Path:
    path = _config_root() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# Extras passed by fetch, font and generation events.
CONTEXT_FIELDS = ("event", "url", "status", "path", "family", "width", "height")


class JsonFormatter(logging.Formatter):
    """One JSON object per line; known context extras become top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value if isinstance(value, (int, float, bool)) else str(value)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Attach the rotating JSON file handler (and a stderr handler) once per process."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    path = (directory or log_dir()) / "ogprofile.log"
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured", "path": str(path)})
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when ``name`` is given."""
    if not name:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
