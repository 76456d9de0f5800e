"""Shared fixtures for CloudNav tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cloudnav.constants.enums import EffectKind, PageSize, ResourceKind
from cloudnav.controllers.demo import build_demo_source
from cloudnav.controllers.fetch import FetchCoordinator
from cloudnav.controllers.insights import QueryPoller
from cloudnav.controllers.static_source import StaticDataSource
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.core.resources import ConnectionContext
from cloudnav.models.state.app_state import AppState
from cloudnav.navigation.dispatcher import ActionDispatcher
from cloudnav.navigation.effects import Effect
from cloudnav.navigation.view_config import build_registry
from cloudnav.utils.session_store import FileSessionBackend, SessionStore

_FETCH_KINDS = (EffectKind.FETCH, EffectKind.RUN_QUERY)


class NavigationHarness:
    """Dispatcher wired to a static source, with fetches run on demand.

    ``press`` queues fetch effects instead of running them so tests control
    when results arrive; ``settle`` drains the queue in order. Other effects
    are collected in ``effects``.
    """

    def __init__(
        self,
        source: StaticDataSource,
        session_store: SessionStore | None = None,
        page_size: PageSize = PageSize.TEN,
    ) -> None:
        self.source = source
        self.registry = build_registry()
        self.state = AppState(context=ConnectionContext(profile="dev", region="us-east-1"))
        self.dispatcher = ActionDispatcher(
            self.state, self.registry, session_store=session_store, page_size=page_size
        )
        self.coordinator = FetchCoordinator(
            source, self.registry, poller=QueryPoller(max_attempts=5, interval_seconds=0)
        )
        self.pending: list[Effect] = []
        self.effects: list[Effect] = []

    def _queue(self, effects: list[Effect]) -> list[Effect]:
        for effect in effects:
            if effect.kind in _FETCH_KINDS:
                self.pending.append(effect)
            else:
                self.effects.append(effect)
        return effects

    def press(self, action: Action, char: str | None = None) -> list[Effect]:
        return self._queue(self.dispatcher.dispatch(ActionEvent(action, char)))

    def type(self, text: str) -> None:
        for char in text:
            self.press(Action.FILTER_INPUT, char)

    def drain(self) -> list[Effect]:
        return self._queue(self.dispatcher.drain_effects())

    async def settle(self) -> None:
        while self.pending:
            effect = self.pending.pop(0)
            assert effect.request is not None
            outcome = await self.coordinator.execute(effect.request)
            self._queue(self.coordinator.deliver(self.state, outcome))

    async def open(self, kind: ResourceKind) -> None:
        self.dispatcher.open_service(kind)
        self.drain()
        await self.settle()

    def effect_kinds(self) -> list[EffectKind]:
        return [effect.kind for effect in self.effects]

    def selected_key(self) -> str | None:
        target = self.dispatcher.target()
        if target is None:
            return None
        item = self.dispatcher.presenter.selected_item(target.spec, target.slot)
        return item.key if item is not None else None


@pytest.fixture
def source() -> StaticDataSource:
    return build_demo_source(delay_seconds=0)


@pytest.fixture
def session_store(tmp_path: Path) -> SessionStore:
    return SessionStore(FileSessionBackend(tmp_path / "sessions"))


@pytest.fixture
def harness(source: StaticDataSource) -> NavigationHarness:
    return NavigationHarness(source)


@pytest.fixture
def persisted_harness(source: StaticDataSource, session_store: SessionStore) -> NavigationHarness:
    return NavigationHarness(source, session_store=session_store)
