"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Connection defaults
# ============================================================================

REGION_DEFAULT: Final = "us-east-1"

# ============================================================================
# UI defaults
# ============================================================================

PAGE_SIZE_DEFAULT: Final = 50
RESTORE_LAST_SESSION_DEFAULT: Final = False

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = ""

__all__ = [
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PAGE_SIZE_DEFAULT",
    "REGION_DEFAULT",
    "RESTORE_LAST_SESSION_DEFAULT",
]
