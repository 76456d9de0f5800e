"""Data access boundary for CloudNav.

Data sources, the fetch coordinator, the Insights query poller, region
latency probing and credential profile discovery.
"""

from __future__ import annotations

# Base classes
from cloudnav.controllers.base import (
    CredentialError,
    DataSource,
    FetchError,
    FetchResult,
    QueryStatus,
)

__all__ = [
    "CredentialError",
    "DataSource",
    "FetchError",
    "FetchResult",
    "QueryStatus",
]
