"""YAML persistence for application settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from cloudnav.constants.values import (
    APP_CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    SESSION_DIR_NAME,
)
from cloudnav.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


def config_dir() -> Path:
    """Per-user configuration directory, honouring ``XDG_CONFIG_HOME``."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_CONFIG_DIR_NAME


def default_session_dir() -> Path:
    return config_dir() / SESSION_DIR_NAME


class ConfigManager:
    """Loads, saves and resets ``AppSettings`` as YAML."""

    @staticmethod
    def config_path() -> Path:
        return config_dir() / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings, returning defaults when no file exists.

        Args:
            path: Settings file; defaults to the per-user config file.

        Returns:
            The loaded settings.

        Raises:
            ConfigLoadError: If the file cannot be read, parsed or validated.
        """
        target = path or cls.config_path()
        if not target.exists():
            logger.debug("No settings file at %s, using defaults", target)
            return AppSettings()
        try:
            raw = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read settings from {target}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"Settings file {target} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadError(f"Invalid settings in {target}: {e}") from e

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> None:
        """Write settings to disk.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        target = path or cls.config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(
                yaml.safe_dump(settings.model_dump(), sort_keys=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigSaveError(f"Cannot write settings to {target}: {e}") from e
        logger.debug("Saved settings to %s", target)

    @classmethod
    def reset(cls, path: Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults and return them."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
    "config_dir",
    "default_session_dir",
]
