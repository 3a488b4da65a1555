"""Navigator settings: built-in defaults overlaid with an optional JSON file."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RINGFOCUS_CONFIG"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass(frozen=True)
class NavigatorConfig:
    """Settings for the window navigator and its demo front end."""

    log_level: str = "INFO"
    next_keys: tuple[str, ...] = ("Tab", "J")
    previous_keys: tuple[str, ...] = ("Shift+Tab", "K")
    swap_next_keys: tuple[str, ...] = ("Shift+J",)
    swap_previous_keys: tuple[str, ...] = ("Shift+K",)
    windows: tuple[str, ...] = ("emacs", "firefox", "mu4e", "wezterm", "eat")


_KEY_FIELDS = ("next_keys", "previous_keys", "swap_next_keys", "swap_previous_keys", "windows")


def _defaults() -> dict[str, Any]:
    defaults = NavigatorConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(NavigatorConfig)}


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def _validate(data: dict[str, Any]) -> NavigatorConfig:
    known = {field.name for field in fields(NavigatorConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    level = data["log_level"]
    if not isinstance(level, str) or level.upper() not in _LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")
    data["log_level"] = level.upper()

    for name in _KEY_FIELDS:
        value = data[name]
        if isinstance(value, str) or not isinstance(value, (list, tuple)):
            raise ConfigError(f"{name} must be a list of strings.")
        if not all(isinstance(item, str) for item in value):
            raise ConfigError(f"{name} must be a list of strings.")
        data[name] = tuple(value)

    return NavigatorConfig(**data)


def load_config(path: Optional[Union[str, Path]] = None) -> NavigatorConfig:
    """Load settings from ``path`` or ``$RINGFOCUS_CONFIG``.

    A missing file is not an error; the defaults are used instead.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    data: dict[str, Any] = {}
    if path:
        cfg_path = Path(path)
        if cfg_path.is_file():
            try:
                data = json.loads(cfg_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                raise ConfigError(f"Invalid JSON in {cfg_path}: {exc}") from exc
            if not isinstance(data, dict):
                raise ConfigError(f"{cfg_path} must contain a JSON object.")
            logger.debug("Loaded configuration from %s", cfg_path)
        else:
            logger.debug("No configuration at %s, using defaults", cfg_path)

    return _validate(_merge(_defaults(), data))


def configure_logging(level: str) -> None:
    if not logging.getLogger().handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        logging.getLogger().setLevel(level)
