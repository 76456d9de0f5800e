"""Constants module for CloudNav TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, numbers with Final)
- timeouts.py: Timeout and polling intervals (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings
- regions.py: Region catalog

Note: Keyboard bindings and key maps are defined in cloudnav.keyboard module.
"""

from cloudnav.constants.defaults import (
    LOG_LEVEL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REGION_DEFAULT,
)
from cloudnav.constants.enums import (
    EffectKind,
    ErrorKind,
    FocusKind,
    Mode,
    PageSize,
    PreferencesSection,
    ResourceKind,
    SelectBehavior,
    SortDirection,
)
from cloudnav.constants.limits import (
    MAX_PAGE_INPUT_DIGITS,
    PROBE_MAX_WORKERS,
    QUERY_POLL_MAX_ATTEMPTS,
)
from cloudnav.constants.regions import REGION_CODES, REGIONS
from cloudnav.constants.timeouts import (
    PROBE_TIMEOUT_SECONDS,
    QUERY_POLL_INTERVAL_SECONDS,
)
from cloudnav.constants.values import (
    APP_TITLE,
    BREADCRUMB_SEPARATOR,
    PREFIX_DELIMITER,
)

__all__ = [
    "APP_TITLE",
    "BREADCRUMB_SEPARATOR",
    "LOG_LEVEL_DEFAULT",
    "MAX_PAGE_INPUT_DIGITS",
    "PAGE_SIZE_DEFAULT",
    "PREFIX_DELIMITER",
    "PROBE_MAX_WORKERS",
    "PROBE_TIMEOUT_SECONDS",
    "QUERY_POLL_INTERVAL_SECONDS",
    "QUERY_POLL_MAX_ATTEMPTS",
    "REGIONS",
    "REGION_CODES",
    "REGION_DEFAULT",
    # Enums
    "EffectKind",
    "ErrorKind",
    "FocusKind",
    "Mode",
    "PageSize",
    "PreferencesSection",
    "ResourceKind",
    "SelectBehavior",
    "SortDirection",
]
