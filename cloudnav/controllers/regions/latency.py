"""Region latency probing.

One probe per region runs on a semaphore-bounded pool; the prober waits for
every probe before returning the complete map, so callers publish it in one
step. Probes that fail or exceed the timeout report ``None``.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable

from cloudnav.constants.limits import PROBE_MAX_WORKERS
from cloudnav.constants.regions import PROBE_HOST_TEMPLATE, PROBE_PORT
from cloudnav.constants.timeouts import PROBE_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

Probe = Callable[[str], Awaitable[None]]


async def tcp_connect_probe(region: str) -> None:
    """Open and close a TCP connection to the region's storage endpoint."""
    host = PROBE_HOST_TEMPLATE.format(region=region)
    _, writer = await asyncio.open_connection(host, PROBE_PORT)
    writer.close()
    await writer.wait_closed()


class RegionLatencyProber:
    """Measures round-trip latency to many regions with bounded concurrency."""

    def __init__(
        self,
        probe: Probe = tcp_connect_probe,
        max_workers: int = PROBE_MAX_WORKERS,
        timeout_seconds: float = PROBE_TIMEOUT_SECONDS,
    ) -> None:
        self._probe = probe
        self.max_workers = max(1, max_workers)
        self.timeout_seconds = timeout_seconds

    async def _measure_one(
        self, region: str, semaphore: asyncio.Semaphore
    ) -> tuple[str, float | None]:
        async with semaphore:
            start = time.perf_counter()
            try:
                await asyncio.wait_for(self._probe(region), timeout=self.timeout_seconds)
            except asyncio.TimeoutError:
                logger.debug("Latency probe for %s timed out", region)
                return region, None
            except OSError as e:
                logger.debug("Latency probe for %s failed: %s", region, e)
                return region, None
            return region, (time.perf_counter() - start) * 1000.0

    async def measure(self, regions: Iterable[str]) -> dict[str, float | None]:
        """Probe every region and return the complete latency map in ms."""
        semaphore = asyncio.Semaphore(self.max_workers)
        results = await asyncio.gather(
            *(self._measure_one(region, semaphore) for region in regions)
        )
        latencies = dict(results)
        reachable = sum(1 for value in latencies.values() if value is not None)
        logger.info("Measured latency for %d/%d regions", reachable, len(latencies))
        return latencies


def fastest(latencies: dict[str, float | None]) -> str | None:
    """Region with the lowest measured latency, None when none responded."""
    reachable = [(value, region) for region, value in latencies.items() if value is not None]
    if not reachable:
        return None
    return min(reachable)[1]


__all__ = ["RegionLatencyProber", "fastest", "tcp_connect_probe"]
