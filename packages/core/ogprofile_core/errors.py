"""Error types shared by the loaders, the font resolver and the CLI."""

from __future__ import annotations

from pathlib import Path


class ProfileImageError(Exception):
    """Base class for every failure raised while producing a profile card."""


class ContractViolation(ProfileImageError, ValueError):
    """A required argument was missing, empty or malformed."""

    def __init__(self, parameter: str, message: str | None = None) -> None:
        self.parameter = parameter
        super().__init__(message or f"{parameter} must not be empty")


class MissingResourceError(ProfileImageError, FileNotFoundError):
    def __init__(self, path: str | Path, message: str | None = None) -> None:
        self.path = str(path)
        super().__init__(message or f"File not found: {self.path}")


class RemoteFetchError(ProfileImageError):
    def __init__(self, url: str, status: int | None = None, reason: str | None = None) -> None:
        self.url = url
        self.status = status
        detail = f"HTTP {status}" if status is not None else (reason or "connection failed")
        super().__init__(f"Fetching {url} failed: {detail}")


class ImageDecodeError(ProfileImageError):
    def __init__(self, source: str, reason: str | None = None) -> None:
        self.source = source
        super().__init__(f"Could not decode image from {source}" + (f": {reason}" if reason else ""))


class FontResolutionError(ProfileImageError):
    """No font family could be resolved for an operation that requires one."""
