"""In-memory data source.

Backs the demo catalog and the tests. Collections are registered per
``(kind, parents, sub_tab, prefix)``; child listings per ``(kind, parents,
path)``. A prefix listing with no explicit entry falls back to the children
registered for that path, so one registration serves both tree expansion
and prefix drill-in.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from dataclasses import dataclass

from cloudnav.constants.enums import ResourceKind
from cloudnav.controllers.base.base_controller import (
    CredentialError,
    DataSource,
    FetchError,
    FetchResult,
    QueryStatus,
)
from cloudnav.models.core.resources import ResourceItem
from cloudnav.navigation.effects import FetchScope

logger = logging.getLogger(__name__)

ListKey = tuple[ResourceKind, tuple[str, ...], "str | None", str]
ChildKey = tuple[ResourceKind, tuple[str, ...], str]


@dataclass(frozen=True)
class _Failure:
    message: str
    credential: bool = False


class StaticDataSource(DataSource):
    """Serves pre-registered collections."""

    def __init__(self, delay_seconds: float = 0.0) -> None:
        self.delay_seconds = delay_seconds
        self._lists: dict[ListKey, list[ResourceItem]] = {}
        self._children: dict[ChildKey, list[ResourceItem]] = {}
        self._failures: dict[ResourceKind, _Failure] = {}
        self._child_failures: dict[str, _Failure] = {}
        self._query_results: list[ResourceItem] = []
        self._query_polls_needed = 1
        self._query_polls: dict[str, int] = {}
        self._query_ids = itertools.count(1)
        self.calls: list[tuple[str, ResourceKind, FetchScope, str | None]] = []

    # =========================================================================
    # Registration
    # =========================================================================

    def add_list(
        self,
        kind: ResourceKind,
        items: list[ResourceItem],
        parents: tuple[str, ...] = (),
        sub_tab: str | None = None,
        prefix: str = "",
    ) -> None:
        self._lists[(kind, parents, sub_tab, prefix)] = list(items)

    def add_children(
        self,
        kind: ResourceKind,
        path: str,
        items: list[ResourceItem],
        parents: tuple[str, ...] = (),
    ) -> None:
        self._children[(kind, parents, path)] = list(items)

    def fail(self, kind: ResourceKind, message: str, credential: bool = False) -> None:
        """Make every listing of ``kind`` fail."""
        self._failures[kind] = _Failure(message, credential)

    def fail_children(self, path: str, message: str) -> None:
        self._child_failures[path] = _Failure(message)

    def recover(self) -> None:
        self._failures.clear()
        self._child_failures.clear()

    def set_query_results(self, items: list[ResourceItem], polls_needed: int = 1) -> None:
        self._query_results = list(items)
        self._query_polls_needed = max(1, polls_needed)

    # =========================================================================
    # DataSource
    # =========================================================================

    async def _pause(self) -> None:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

    def _raise_failure(self, failure: _Failure | None) -> None:
        if failure is None:
            return
        if failure.credential:
            raise CredentialError(failure.message)
        raise FetchError(failure.message)

    async def list(self, kind: ResourceKind, scope: FetchScope) -> FetchResult:
        self.calls.append(("list", kind, scope, None))
        await self._pause()
        self._raise_failure(self._failures.get(kind))
        key = (kind, scope.parents, scope.sub_tab, scope.prefix)
        if key in self._lists:
            return FetchResult(items=list(self._lists[key]))
        if scope.prefix:
            children = self._children.get((kind, scope.parents, scope.prefix))
            if children is not None:
                return FetchResult(items=list(children))
        logger.debug("No static data for %s %s", kind.value, key[1:])
        return FetchResult(items=[])

    async def list_children(
        self, kind: ResourceKind, scope: FetchScope, path: str
    ) -> FetchResult:
        self.calls.append(("children", kind, scope, path))
        await self._pause()
        self._raise_failure(self._failures.get(kind))
        self._raise_failure(self._child_failures.get(path))
        return FetchResult(items=list(self._children.get((kind, scope.parents, path), [])))

    async def start_query(self, scope: FetchScope, query: str) -> str:
        self.calls.append(("query", ResourceKind.INSIGHTS, scope, query))
        self._raise_failure(self._failures.get(ResourceKind.INSIGHTS))
        query_id = f"query-{next(self._query_ids)}"
        self._query_polls[query_id] = 0
        return query_id

    async def query_status(self, scope: FetchScope, query_id: str) -> QueryStatus:
        polls = self._query_polls.get(query_id, 0) + 1
        self._query_polls[query_id] = polls
        if polls < self._query_polls_needed:
            return QueryStatus(complete=False)
        return QueryStatus(complete=True, items=list(self._query_results))


__all__ = ["StaticDataSource"]
