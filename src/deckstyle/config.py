"""
Engine configuration for deckstyle.

Configuration is read from TOML text containing a ``[deckstyle]`` table::

    [deckstyle]
    default_source = "system"
    default_priority = 0
    theme_priority = 50
    deck_priority = 100
    register_system_layouts = true
    register_builtin_components = true
    log_level = "INFO"

The embedding application owns the file; this module only parses text.
``DECKSTYLE_LOG_LEVEL`` in the environment overrides ``log_level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from typing import Any

from deckstyle.errors import ConfigError
from deckstyle.layouts.models import LayoutSource

logger = logging.getLogger(__name__)

CONFIG_TABLE = "deckstyle"
LOG_LEVEL_ENV = "DECKSTYLE_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class EngineConfig:
    """Resolution defaults and bootstrap switches for a DesignContext."""

    default_source: LayoutSource = LayoutSource.SYSTEM  # unannotated layouts
    default_priority: int = 0
    theme_priority: int = 50
    deck_priority: int = 100
    register_system_layouts: bool = True
    register_builtin_components: bool = True
    log_level: str = "WARNING"


def load_config(text: str | None = None, environ: dict[str, str] | None = None) -> EngineConfig:
    """
    Parse engine configuration from TOML text.

    Args:
        text: TOML document; ``None`` or empty yields defaults
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        EngineConfig with file values and environment overrides applied

    Raises:
        ConfigError: If the TOML is malformed or a value is invalid
    """
    data: dict[str, Any] = {}
    if text:
        try:
            document = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in deckstyle config: {e}") from e
        table = document.get(CONFIG_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"[{CONFIG_TABLE}] must be a table")
        data = dict(table)

    env = os.environ if environ is None else environ
    if env.get(LOG_LEVEL_ENV):
        data["log_level"] = env[LOG_LEVEL_ENV]

    return _build_config(data)


def _build_config(data: dict[str, Any]) -> EngineConfig:
    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown [{CONFIG_TABLE}] keys: {', '.join(unknown)}")

    config = EngineConfig()

    if "default_source" in data:
        try:
            config.default_source = LayoutSource(data["default_source"])
        except ValueError as e:
            allowed = ", ".join(s.value for s in LayoutSource)
            raise ConfigError(
                f"default_source must be one of {allowed}, got {data['default_source']!r}"
            ) from e

    for name in ("default_priority", "theme_priority", "deck_priority"):
        if name in data:
            value = data[name]
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            setattr(config, name, value)

    for name in ("register_system_layouts", "register_builtin_components"):
        if name in data:
            if not isinstance(data[name], bool):
                raise ConfigError(f"{name} must be a boolean, got {data[name]!r}")
            setattr(config, name, data[name])

    if "log_level" in data:
        level = str(data["log_level"]).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        config.log_level = level

    return config


def configure_logging(level: str | int) -> None:
    """Apply a log level to the ``deckstyle`` logger hierarchy only."""
    logging.getLogger("deckstyle").setLevel(level)
    logger.debug("deckstyle log level set to %s", level)
