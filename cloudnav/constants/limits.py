"""Limit and threshold constants for the TUI.

All limit values, thresholds, and validation ranges.
"""

from typing import Final

# ============================================================================
# Input limits
# ============================================================================

# Longest page number the pagination buffer accepts.
MAX_PAGE_INPUT_DIGITS: Final = 6

# ============================================================================
# Controller limits
# ============================================================================

PROBE_MAX_WORKERS: Final = 8
PROBE_MAX_WORKERS_MIN: Final = 1
PROBE_MAX_WORKERS_MAX: Final = 32
QUERY_POLL_MAX_ATTEMPTS: Final = 30
QUERY_POLL_MAX_ATTEMPTS_MIN: Final = 1

__all__ = [
    "MAX_PAGE_INPUT_DIGITS",
    "PROBE_MAX_WORKERS",
    "PROBE_MAX_WORKERS_MAX",
    "PROBE_MAX_WORKERS_MIN",
    "QUERY_POLL_MAX_ATTEMPTS",
    "QUERY_POLL_MAX_ATTEMPTS_MIN",
]
