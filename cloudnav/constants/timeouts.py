"""Timeout constants for the TUI.

All timeout and interval values for probes and polling (float, in seconds).
"""

from typing import Final

# ============================================================================
# Region probing
# ============================================================================

PROBE_TIMEOUT_SECONDS: Final = 2.0

# ============================================================================
# Query polling
# ============================================================================

QUERY_POLL_INTERVAL_SECONDS: Final = 1.0

__all__ = [
    "PROBE_TIMEOUT_SECONDS",
    "QUERY_POLL_INTERVAL_SECONDS",
]
