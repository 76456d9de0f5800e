"""Data source boundary for CloudNav TUI.

This module defines the contract resource fetchers implement. Fetchers run
inside Textual Workers and always return complete replacement collections,
never diffs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cloudnav.constants.enums import ResourceKind
from cloudnav.models.core.resources import ResourceItem

if TYPE_CHECKING:
    from cloudnav.navigation.effects import FetchScope

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when a listing fails (network, throttling, access denied)."""


class CredentialError(FetchError):
    """Raised when the active profile has no usable credentials."""


@dataclass
class FetchResult:
    """Result wrapper for fetch operations."""

    items: list[ResourceItem] = field(default_factory=list)
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class QueryStatus:
    """Progress of a long-running query."""

    complete: bool
    items: list[ResourceItem] = field(default_factory=list)
    failed: bool = False
    message: str | None = None


class DataSource(ABC):
    """Async source of resource collections.

    Subclasses implement the listing methods; query support is optional.
    """

    @abstractmethod
    async def list(self, kind: ResourceKind, scope: FetchScope) -> FetchResult:
        """List the collection a view shows.

        Args:
            kind: Resource kind of the view.
            scope: Drill scope, prefix and server-side parameters.

        Returns:
            Complete collection or an error.
        """
        ...

    @abstractmethod
    async def list_children(
        self, kind: ResourceKind, scope: FetchScope, path: str
    ) -> FetchResult:
        """List the direct children of a branch in a hierarchical view.

        Args:
            kind: Resource kind of the view.
            scope: Drill scope of the view.
            path: Key of the branch being expanded.

        Returns:
            Complete child collection or an error.
        """
        ...

    async def start_query(self, scope: FetchScope, query: str) -> str:
        """Start a long-running query and return its id."""
        raise FetchError("Queries are not supported by this data source")

    async def query_status(self, scope: FetchScope, query_id: str) -> QueryStatus:
        """Check a started query."""
        raise FetchError("Queries are not supported by this data source")


__all__ = [
    "CredentialError",
    "DataSource",
    "FetchError",
    "FetchResult",
    "QueryStatus",
]
