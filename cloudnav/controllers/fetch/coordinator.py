"""Fetch boundary between the navigation core and a data source.

Requests are tagged with the tab, drill level, slot, sequence number and
connection context they were issued for. Results are applied only when all
tags still match (last request wins); anything else is discarded.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from cloudnav.constants.enums import EffectKind, ErrorKind, Mode
from cloudnav.controllers.base.base_controller import (
    CredentialError,
    DataSource,
    FetchError,
    FetchResult,
)
from cloudnav.controllers.insights.poller import QueryPoller
from cloudnav.models.core.resources import ResourceItem
from cloudnav.models.state.app_state import AppState, ErrorInfo
from cloudnav.navigation.effects import Effect, FetchRequest
from cloudnav.navigation.presenter import ViewPresenter
from cloudnav.navigation.resource_view import ViewSlot
from cloudnav.navigation.views import ViewRegistry

logger = logging.getLogger(__name__)


@dataclass
class FetchOutcome:
    """Result of executing one request."""

    request: FetchRequest
    items: list[ResourceItem] = field(default_factory=list)
    error: str | None = None
    credential_error: bool = False
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.error is None


class FetchCoordinator:
    """Executes fetch requests and routes their results."""

    def __init__(
        self,
        source: DataSource,
        registry: ViewRegistry,
        poller: QueryPoller | None = None,
    ) -> None:
        self.source = source
        self.registry = registry
        self.poller = poller or QueryPoller()
        self.presenter = ViewPresenter()
        self.discarded = 0

    # =========================================================================
    # Execution
    # =========================================================================

    async def execute(self, request: FetchRequest) -> FetchOutcome:
        """Run a request against the data source; failures come back as outcomes."""
        start = time.perf_counter()
        try:
            if request.query is not None:
                items = await self._run_query(request)
                result = FetchResult(items=items)
            elif request.child_path is not None:
                result = await self.source.list_children(
                    request.kind, request.scope, request.child_path
                )
            else:
                result = await self.source.list(request.kind, request.scope)
        except CredentialError as e:
            logger.warning("Credential error for %s: %s", request.kind.value, e)
            return FetchOutcome(request, error=str(e), credential_error=True)
        except FetchError as e:
            logger.warning("Fetch failed for %s: %s", request.kind.value, e)
            return FetchOutcome(request, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error fetching %s", request.kind.value)
            return FetchOutcome(request, error=f"{type(e).__name__}: {e}")

        duration_ms = (time.perf_counter() - start) * 1000.0
        logger.debug(
            "Fetched %d items for %s in %.1fms",
            len(result.items),
            request.kind.value,
            duration_ms,
        )
        return FetchOutcome(
            request, items=result.items, error=result.error, duration_ms=duration_ms
        )

    async def _run_query(self, request: FetchRequest) -> list[ResourceItem]:
        query_id = await self.source.start_query(request.scope, request.query or "")
        status = await self.poller.poll(
            lambda: self.source.query_status(request.scope, query_id)
        )
        return status.items

    # =========================================================================
    # Delivery
    # =========================================================================

    def _target_slot(self, state: AppState, request: FetchRequest) -> ViewSlot | None:
        if request.context_key != state.context.key:
            return None
        view = state.views.get(request.tab_id)
        if view is None:
            return None
        level = view.find_level(request.level_id)
        if level is None:
            return None
        slot = level.slots.get(request.sub_tab)
        if slot is None:
            return None
        if request.child_path is not None:
            if slot.child_requests.get(request.child_path) != request.seq:
                return None
        elif slot.request_seq != request.seq:
            return None
        return slot

    def deliver(self, state: AppState, outcome: FetchOutcome) -> list[Effect]:
        """Apply an outcome to the state, or discard it when stale.

        Returns:
            Follow-up effects (profile loading after credential errors).
        """
        request = outcome.request
        slot = self._target_slot(state, request)
        if slot is None:
            self.discarded += 1
            logger.debug(
                "Discarding stale result for tab %d (%s seq %d)",
                request.tab_id,
                request.kind.value,
                request.seq,
            )
            return []

        if not outcome.success:
            if request.child_path is None:
                slot.list_state.loading = False
                slot.needs_reload = True
            return self._surface_error(state, outcome)

        if request.child_path is not None:
            slot.tree.set_preview(request.child_path, outcome.items)
            return []

        view = state.views[request.tab_id]
        level = view.find_level(request.level_id)
        spec = self.registry.lookup(request.kind, level.depth if level else 0, request.sub_tab)
        slot.list_state.items = list(outcome.items)
        slot.list_state.set_items(outcome.items, self.presenter.row_count(spec, slot))
        slot.needs_reload = False
        return []

    def _surface_error(self, state: AppState, outcome: FetchOutcome) -> list[Effect]:
        message = outcome.error or "Unknown error"
        if outcome.credential_error:
            state.error = ErrorInfo(ErrorKind.CREDENTIALS, message, outcome.request)
            state.mode = Mode.PROFILE_PICKER
            state.profile_picker.filter_clear()
            return [Effect(EffectKind.LOAD_PROFILES)]

        kind = ErrorKind.QUERY if outcome.request.query is not None else ErrorKind.FETCH
        state.error = ErrorInfo(kind, message, outcome.request)
        if state.mode is not Mode.ERROR_MODAL:
            state.return_mode = state.mode
        state.mode = Mode.ERROR_MODAL
        return []


__all__ = ["FetchCoordinator", "FetchOutcome"]
