"""Core utilities for configuration and logging."""

from .config import AppSettings, get_env, load_settings
from .logging_config import get_logger, setup_logging

__all__ = [
    "AppSettings",
    "get_env",
    "load_settings",
    "get_logger",
    "setup_logging",
]
