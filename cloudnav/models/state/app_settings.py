"""Application settings models."""

from pydantic import BaseModel, ConfigDict, field_validator

from cloudnav.constants.defaults import (
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REGION_DEFAULT,
    RESTORE_LAST_SESSION_DEFAULT,
)
from cloudnav.constants.enums import PageSize
from cloudnav.constants.limits import (
    PROBE_MAX_WORKERS,
    PROBE_MAX_WORKERS_MAX,
    PROBE_MAX_WORKERS_MIN,
    QUERY_POLL_MAX_ATTEMPTS,
    QUERY_POLL_MAX_ATTEMPTS_MIN,
)
from cloudnav.constants.timeouts import (
    PROBE_TIMEOUT_SECONDS,
    QUERY_POLL_INTERVAL_SECONDS,
)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Connection
    default_region: str = REGION_DEFAULT

    # UI preferences
    page_size: int = PAGE_SIZE_DEFAULT
    restore_last_session: bool = RESTORE_LAST_SESSION_DEFAULT

    # Paths (empty means the per-user default under the config directory)
    session_dir: str = ""

    # Region latency probing
    probe_max_workers: int = PROBE_MAX_WORKERS
    probe_timeout_seconds: float = PROBE_TIMEOUT_SECONDS

    # Long-running query polling
    query_poll_max_attempts: int = QUERY_POLL_MAX_ATTEMPTS
    query_poll_interval_seconds: float = QUERY_POLL_INTERVAL_SECONDS

    # Logging
    log_level: str = LOG_LEVEL_DEFAULT
    log_file: str = LOG_FILE_DEFAULT

    @field_validator("page_size")
    @classmethod
    def _check_page_size(cls, value: int) -> int:
        if value not in {size.value for size in PageSize}:
            raise ValueError(f"page_size must be one of {[s.value for s in PageSize]}")
        return value

    @field_validator("probe_max_workers")
    @classmethod
    def _check_probe_workers(cls, value: int) -> int:
        if not PROBE_MAX_WORKERS_MIN <= value <= PROBE_MAX_WORKERS_MAX:
            raise ValueError(
                f"probe_max_workers must be between {PROBE_MAX_WORKERS_MIN} "
                f"and {PROBE_MAX_WORKERS_MAX}"
            )
        return value

    @field_validator("query_poll_max_attempts")
    @classmethod
    def _check_poll_attempts(cls, value: int) -> int:
        if value < QUERY_POLL_MAX_ATTEMPTS_MIN:
            raise ValueError("query_poll_max_attempts must be positive")
        return value

    @field_validator("probe_timeout_seconds", "query_poll_interval_seconds")
    @classmethod
    def _check_non_negative(cls, value: float) -> float:
        if value < 0:
            raise ValueError("durations must not be negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
