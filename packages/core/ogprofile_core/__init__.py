"""Core services: settings, logging and the shared error hierarchy."""

from .config import AppConfig, config_path, load_config, save_config
from .errors import (
    ContractViolation,
    FontResolutionError,
    ImageDecodeError,
    MissingResourceError,
    ProfileImageError,
    RemoteFetchError,
)
from .logging_setup import configure_logging, get_logger

__all__ = [
    "AppConfig",
    "ContractViolation",
    "FontResolutionError",
    "ImageDecodeError",
    "MissingResourceError",
    "ProfileImageError",
    "RemoteFetchError",
    "config_path",
    "configure_logging",
    "get_logger",
    "load_config",
    "save_config",
]
