"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "CloudNav"
APP_CONFIG_DIR_NAME: Final = "cloudnav"
CONFIG_FILE_NAME: Final = "config.yaml"
LOG_FILE_NAME: Final = "cloudnav.log"
SESSION_DIR_NAME: Final = "sessions"
SESSION_FILE_SUFFIX: Final = ".json"
SESSION_ID_FORMAT: Final = "%Y%m%d_%H%M%S_%f"

# ============================================================================
# Display
# ============================================================================

BREADCRUMB_SEPARATOR: Final = " > "
PREFIX_DELIMITER: Final = "/"
LOADING_LABEL: Final = "Loading..."
EMPTY_LABEL: Final = "No items"
NOT_AVAILABLE: Final = "-"

# ============================================================================
# Filter controls
# ============================================================================

FOCUS_FILTER: Final = "filter"
FOCUS_PAGINATION: Final = "pagination"
FOCUS_STATE: Final = "status"
FOCUS_EXACT: Final = "exact"
FOCUS_SHOW_EXPIRED: Final = "show_expired"
FOCUS_QUERY: Final = "query"
FOCUS_LOG_GROUPS: Final = "log_groups"
FOCUS_TIME_RANGE: Final = "time_range"
FOCUS_START_DATE: Final = "start_date"
FOCUS_END_DATE: Final = "end_date"

ALL_OPTION: Final = "All"

# ============================================================================
# Environment
# ============================================================================

PROFILE_ENV_VAR: Final = "AWS_PROFILE"
REGION_ENV_VAR: Final = "AWS_REGION"
AWS_CONFIG_FILE_ENV_VAR: Final = "AWS_CONFIG_FILE"
AWS_CREDENTIALS_FILE_ENV_VAR: Final = "AWS_SHARED_CREDENTIALS_FILE"

__all__ = [
    "ALL_OPTION",
    "APP_CONFIG_DIR_NAME",
    "APP_TITLE",
    "AWS_CONFIG_FILE_ENV_VAR",
    "AWS_CREDENTIALS_FILE_ENV_VAR",
    "BREADCRUMB_SEPARATOR",
    "CONFIG_FILE_NAME",
    "EMPTY_LABEL",
    "FOCUS_END_DATE",
    "FOCUS_EXACT",
    "FOCUS_FILTER",
    "FOCUS_LOG_GROUPS",
    "FOCUS_PAGINATION",
    "FOCUS_QUERY",
    "FOCUS_SHOW_EXPIRED",
    "FOCUS_START_DATE",
    "FOCUS_STATE",
    "FOCUS_TIME_RANGE",
    "LOADING_LABEL",
    "LOG_FILE_NAME",
    "NOT_AVAILABLE",
    "PREFIX_DELIMITER",
    "PROFILE_ENV_VAR",
    "REGION_ENV_VAR",
    "SESSION_DIR_NAME",
    "SESSION_FILE_SUFFIX",
    "SESSION_ID_FORMAT",
]
