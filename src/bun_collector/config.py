"""Configuration loader for the node_modules collector.

Settings come from an optional JSON file. Its path is taken from the explicit
argument, then the ``BUN_COLLECTOR_CONFIG`` environment variable; without
either, built-in defaults are used. ``BUN_COLLECTOR_LOG_LEVEL`` overrides the
configured log level.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any


CONFIG_PATH_ENV_VAR = "BUN_COLLECTOR_CONFIG"
LOG_LEVEL_ENV_VAR = "BUN_COLLECTOR_LOG_LEVEL"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    manifest_name: str = "package.json"
    modules_dir: str = "node_modules"
    include_optional: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a dictionary, validating every field."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        defaults = cls()
        names: dict[str, str] = {}
        for key in ("manifest_name", "modules_dir"):
            value = data.get(key, getattr(defaults, key))
            if not isinstance(value, str) or not value:
                raise ConfigError(f"'{key}' must be a non-empty string")
            if "/" in value or "\\" in value:
                raise ConfigError(f"'{key}' must be a plain file or directory name")
            names[key] = value

        include_optional = data.get("include_optional", defaults.include_optional)
        if not isinstance(include_optional, bool):
            raise ConfigError("'include_optional' must be a boolean")

        return cls(
            manifest_name=names["manifest_name"],
            modules_dir=names["modules_dir"],
            include_optional=include_optional,
            log_level=_validate_log_level(data.get("log_level", defaults.log_level)),
        )


def _validate_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in _LOG_LEVELS:
        known = ", ".join(sorted(_LOG_LEVELS))
        raise ConfigError(f"Invalid log level {value!r}; expected one of: {known}")
    return value.upper()


def _resolve_config_path(path: Path | str | None = None) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. BUN_COLLECTOR_CONFIG environment variable
    3. None (use defaults)
    """
    if path is not None:
        return Path(path)

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(path: Path | str | None = None) -> Settings:
    """Load and validate settings.

    Raises:
        ConfigError: If a configured file cannot be read or contains invalid data.
    """
    config_path = _resolve_config_path(path)

    if config_path is None:
        settings = Settings()
    else:
        if not config_path.exists():
            raise ConfigError(f"Configuration file not found: {config_path}")

        try:
            content = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        settings = Settings.from_dict(data)

    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        settings = replace(settings, log_level=_validate_log_level(env_level))

    return settings
