"""Bounded polling for long-running queries."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from cloudnav.constants.limits import QUERY_POLL_MAX_ATTEMPTS
from cloudnav.constants.timeouts import QUERY_POLL_INTERVAL_SECONDS
from cloudnav.controllers.base.base_controller import FetchError, QueryStatus

logger = logging.getLogger(__name__)


class QueryTimeoutError(FetchError):
    """Raised when a query is still running after the last poll."""


class QueryPoller:
    """Poll, sleep, repeat up to a fixed number of checks."""

    def __init__(
        self,
        max_attempts: int = QUERY_POLL_MAX_ATTEMPTS,
        interval_seconds: float = QUERY_POLL_INTERVAL_SECONDS,
    ) -> None:
        self.max_attempts = max(1, max_attempts)
        self.interval_seconds = interval_seconds

    async def poll(self, check: Callable[[], Awaitable[QueryStatus]]) -> QueryStatus:
        """Call ``check`` until it reports completion.

        Args:
            check: Coroutine factory returning the current query status.

        Returns:
            The first complete status.

        Raises:
            FetchError: If the query reports failure.
            QueryTimeoutError: If ``max_attempts`` checks pass without completion.
        """
        for attempt in range(1, self.max_attempts + 1):
            status = await check()
            if status.failed:
                raise FetchError(status.message or "Query failed")
            if status.complete:
                logger.debug("Query complete after %d checks", attempt)
                return status
            if attempt < self.max_attempts:
                await asyncio.sleep(self.interval_seconds)
        raise QueryTimeoutError(
            f"Query did not complete after {self.max_attempts} checks"
        )


__all__ = ["QueryPoller", "QueryTimeoutError"]
