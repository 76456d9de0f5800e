"""Credential profile discovery from the shared AWS config files."""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from cloudnav.constants.values import (
    AWS_CONFIG_FILE_ENV_VAR,
    AWS_CREDENTIALS_FILE_ENV_VAR,
)
from cloudnav.models.core.resources import ProfileInfo

logger = logging.getLogger(__name__)

_PROFILE_SECTION_PREFIX = "profile "


def default_config_path() -> Path:
    override = os.environ.get(AWS_CONFIG_FILE_ENV_VAR)
    return Path(override) if override else Path.home() / ".aws" / "config"


def default_credentials_path() -> Path:
    override = os.environ.get(AWS_CREDENTIALS_FILE_ENV_VAR)
    return Path(override) if override else Path.home() / ".aws" / "credentials"


def _read_ini(path: Path) -> configparser.ConfigParser | None:
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(path, encoding="utf-8")
    except (OSError, configparser.Error) as e:
        logger.warning("Cannot parse %s: %s", path, e)
        return None
    return parser


def load_profiles(
    config_path: Path | None = None, credentials_path: Path | None = None
) -> list[ProfileInfo]:
    """Profiles from the config file plus credential-only profiles, by name.

    Config sections are ``[profile NAME]`` (or ``[default]``); credentials
    sections are bare names. Profiles in both files keep the config values.
    """
    profiles: dict[str, ProfileInfo] = {}

    config = _read_ini(config_path or default_config_path())
    if config is not None:
        for section in config.sections():
            if section.startswith(_PROFILE_SECTION_PREFIX):
                name = section[len(_PROFILE_SECTION_PREFIX) :].strip()
            elif section == "default":
                name = section
            else:
                continue
            values = config[section]
            profiles[name] = ProfileInfo(
                name=name,
                region=values.get("region"),
                role_arn=values.get("role_arn"),
                source_profile=values.get("source_profile"),
                sso_session=values.get("sso_session"),
            )

    credentials = _read_ini(credentials_path or default_credentials_path())
    if credentials is not None:
        for section in credentials.sections():
            profiles.setdefault(section, ProfileInfo(name=section))

    return sorted(profiles.values(), key=lambda profile: profile.name)


def profile_matches(profile: ProfileInfo, text: str) -> bool:
    """Case-insensitive match on any profile field."""
    needle = text.lower()
    fields = (profile.name, profile.region, profile.role_arn, profile.source_profile)
    return any(value and needle in value.lower() for value in fields)


__all__ = ["load_profiles", "profile_matches"]
