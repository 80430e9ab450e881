"""Configuration loading utilities for YAML-based application settings."""

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .logging_config import get_logger


logger = get_logger(__name__)
_BASE_DIR = Path(__file__).resolve().parent.parent
_CONFIG_PATH = _BASE_DIR / "config.yml"


@dataclass(frozen=True)
class AppSettings:
    """Application settings loaded from YAML configuration file."""

    app_name: str
    debug: bool
    host: str
    port: int
    log_level: int


def _to_bool(value: Any, default: bool = False) -> bool:
    """Convert value to bool with a default fallback."""
    try:
        if isinstance(value, bool):
            return value
        return value.strip().lower() in {"1", "true", "yes", "on"}
    except (AttributeError, ValueError):
        logger.warning("Invalid boolean value '%s'. Using default=%s", value, default)
        return default


def _to_int(value: Any, default: int) -> int:
    """Convert value to int with a default fallback."""
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid integer value '%s'. Using default=%s", value, default)
        return default


def _to_log_level(value: Any, default: int = logging.INFO) -> int:
    """Resolve a level name such as ``"debug"`` or a numeric level."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if isinstance(level, int):
        return level
    logger.warning("Invalid log level '%s'. Using default=%s", value, logging.getLevelName(default))
    return default


def _read_config(path: Optional[Union[str, Path]] = None) -> dict:
    """Read and parse YAML configuration."""
    config_path = Path(path) if path is not None else _CONFIG_PATH
    try:
        with config_path.open("r", encoding="utf-8") as config_file:
            config_data = yaml.safe_load(config_file) or {}
        if not isinstance(config_data, dict):
            logger.warning("Config file %s is not a mapping. Falling back to defaults.", config_path)
            return {}
        logger.info("Configuration loaded from %s", config_path)
        return config_data
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Falling back to defaults.", config_path)
        return {}
    except (OSError, yaml.YAMLError):
        logger.exception("Failed to load config file from %s", config_path)
        return {}


def _section(config: dict, name: str) -> dict:
    """Return a config section, or an empty one when it is absent or not a mapping."""
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        logger.warning("Config section '%s' is not a mapping. Using defaults.", name)
        return {}
    return section


def get_env(key: str, default: Optional[str] = None, path: Optional[Union[str, Path]] = None) -> Optional[str]:
    """Read a single config value using dot-notation keys, e.g. ``app.port``."""
    current: Any = _read_config(path)
    for part in key.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    if current is None:
        return default
    return str(current)


def load_settings(path: Optional[Union[str, Path]] = None) -> AppSettings:
    """Load and validate application settings from `config.yml`."""
    config = _read_config(path)
    app_cfg = _section(config, "app")
    logging_cfg = _section(config, "logging")

    return AppSettings(
        app_name=str(app_cfg.get("name", "Propagation Demo API")),
        debug=_to_bool(app_cfg.get("debug", False), False),
        host=str(app_cfg.get("host", "127.0.0.1")),
        port=_to_int(app_cfg.get("port", 8000), 8000),
        log_level=_to_log_level(logging_cfg.get("level", "INFO")),
    )
