"""Config handler for the task list application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from tabulate import tabulate_formats

from task_list.exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        table_format: tabulate ``tablefmt`` used to render the task list.
        log_level: Logging level name.
        log_dir: Directory for the daily log file (None disables file logging).
    """

    table_format: str = "simple"
    log_level: str = "WARNING"
    log_dir: Path | None = None

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


class ConfigManager:
    """Config Manager

    This class handles the YAML Config.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize Config Manager."""
        self.path = Path(path)

    def load_config(self) -> dict[str, Any]:
        """Load YAML Config. An empty file loads as an empty mapping."""
        try:
            with self.path.open(encoding="utf-8") as fp:
                config = yaml.safe_load(fp)
        except OSError as e:
            raise ConfigError(f"cannot read config: {e.strerror}", str(self.path)) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", str(self.path)) from e

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigError("top level must be a mapping", str(self.path))
        return dict(config)


_SECTIONS: dict[str, tuple[str, ...]] = {
    "display": ("table_format",),
    "logging": ("level", "log_dir"),
}


def _section(config: dict[str, Any], name: str) -> dict[str, Any]:
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"section '{name}' must be a mapping")
    unknown = set(section) - set(_SECTIONS[name])
    if unknown:
        raise ConfigError(f"unknown keys in '{name}': {', '.join(sorted(unknown))}")
    return section


def settings_from_dict(config: dict[str, Any]) -> Settings:
    """Validate a loaded config mapping and build Settings from it."""
    unknown = set(config) - set(_SECTIONS)
    if unknown:
        raise ConfigError(f"unknown sections: {', '.join(sorted(unknown))}")

    display = _section(config, "display")
    log_cfg = _section(config, "logging")
    defaults = Settings()

    table_format = display.get("table_format", defaults.table_format)
    if table_format not in tabulate_formats:
        raise ConfigError(f"unknown table_format '{table_format}'")

    level = str(log_cfg.get("level", defaults.log_level)).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"unknown logging level '{level}'. Must be one of: {', '.join(LOG_LEVELS)}")

    log_dir = log_cfg.get("log_dir")
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError("log_dir must be a path string")
    return Settings(
        table_format=table_format,
        log_level=level,
        log_dir=Path(log_dir) if log_dir else None,
    )


def load_settings(path: str | Path | None = None) -> Settings:
    """Load Settings from a YAML file, or return defaults when no path is given."""
    if path is None:
        return Settings()

    config = ConfigManager(path).load_config()
    try:
        return settings_from_dict(config)
    except ConfigError as e:
        raise ConfigError(str(e), str(path)) from e
