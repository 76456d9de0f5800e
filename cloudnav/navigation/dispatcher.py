"""Mode/action state machine.

``ActionDispatcher.dispatch`` consumes one ``ActionEvent``, mutates the
``AppState`` it was built with and returns the side effects the shell must
run. Actions are routed through per-mode handler tables built by the mixins;
the view an action targets is resolved once through the view registry.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from cloudnav.constants.enums import EffectKind, FocusKind, Mode, PageSize, ResourceKind
from cloudnav.constants.limits import MAX_PAGE_INPUT_DIGITS
from cloudnav.constants.values import FOCUS_QUERY
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.core.resources import ConnectionContext, ProfileInfo
from cloudnav.models.session.session import Session
from cloudnav.models.state.app_state import AppState
from cloudnav.navigation.effects import Effect, FetchRequest, FetchScope
from cloudnav.navigation.mixins.filters import FilterMixin
from cloudnav.navigation.mixins.modals import ModalMixin
from cloudnav.navigation.mixins.navigation import NavigationMixin
from cloudnav.navigation.mixins.pickers import PickerMixin
from cloudnav.navigation.presenter import ViewPresenter
from cloudnav.navigation.resource_view import ResourceView, ViewLevel, ViewSlot
from cloudnav.navigation.tabs import Tab
from cloudnav.navigation.views import ViewRegistry, ViewSpec
from cloudnav.utils.session_store import SessionStore, serialize_tabs

logger = logging.getLogger(__name__)

Handler = Callable[[ActionEvent], None]

# Modes whose focus ring may sit on a pagination target.
_FILTER_MODES = frozenset({Mode.FILTER_INPUT, Mode.EVENT_FILTER_INPUT, Mode.INSIGHTS_INPUT})


@dataclass
class ViewTarget:
    """The tab, drill level, slot and spec an action operates on."""

    tab: Tab
    view: ResourceView
    level: ViewLevel
    slot: ViewSlot
    spec: ViewSpec


class ActionDispatcher(NavigationMixin, FilterMixin, PickerMixin, ModalMixin):
    """Resolves actions against the current mode and view."""

    def __init__(
        self,
        state: AppState,
        registry: ViewRegistry,
        session_store: SessionStore | None = None,
        page_size: PageSize | int = PageSize.FIFTY,
    ) -> None:
        self.state = state
        self.registry = registry
        self.session_store = session_store
        self.page_size = PageSize(page_size)
        self.presenter = ViewPresenter()
        self._effects: list[Effect] = []
        self._session_signature = self._signature()
        self._handlers: dict[Mode, dict[Action, Handler]] = {
            Mode.NORMAL: self._normal_handlers(),
            Mode.SPACE_MENU: self._space_menu_handlers(),
            Mode.SERVICE_PICKER: self._picker_handlers(),
            Mode.TAB_PICKER: self._picker_handlers(),
            Mode.REGION_PICKER: self._picker_handlers(),
            Mode.PROFILE_PICKER: self._picker_handlers(),
            Mode.SESSION_PICKER: self._picker_handlers(),
            Mode.FILTER_INPUT: self._filter_handlers(),
            Mode.EVENT_FILTER_INPUT: self._filter_handlers(),
            Mode.INSIGHTS_INPUT: self._insights_handlers(),
            Mode.COLUMN_SELECTOR: self._column_selector_handlers(),
            Mode.ERROR_MODAL: self._error_handlers(),
            Mode.HELP_MODAL: self._help_handlers(),
            Mode.CALENDAR_PICKER: self._calendar_handlers(),
            Mode.POLICY_VIEW: self._policy_view_handlers(),
        }

    # =========================================================================
    # Dispatch
    # =========================================================================

    def dispatch(self, event: ActionEvent) -> list[Effect]:
        """Process one action to completion.

        Args:
            event: The action and its optional character.

        Returns:
            Effects for the shell, in the order they were requested.
        """
        consumed = False
        if self.state.pending_page and not self._is_page_digit(event):
            self._commit_page_buffer()
            consumed = self.state.mode is Mode.NORMAL and event.action is Action.SELECT

        if not consumed:
            handler = self._handlers.get(self.state.mode, {}).get(event.action)
            if handler is None:
                logger.debug(
                    "Ignoring %s in mode %s", event.action.value, self.state.mode.value
                )
            else:
                handler(event)

        self._persist_session()
        return self.drain_effects()

    def drain_effects(self) -> list[Effect]:
        """Take effects requested so far, including those from direct calls."""
        effects, self._effects = self._effects, []
        return effects

    def _emit(self, kind: EffectKind, request: FetchRequest | None = None, payload: Any = None) -> None:
        self._effects.append(Effect(kind, request, payload))

    # =========================================================================
    # Target resolution
    # =========================================================================

    def target(self) -> ViewTarget | None:
        """Resolve the active tab's innermost view."""
        tab = self.state.tabs.active
        if tab is None:
            return None
        view = self.state.views.get(tab.tab_id)
        if view is None:
            return None
        level = view.level
        spec = self.registry.lookup(view.kind, level.depth, level.sub_tab)
        return ViewTarget(tab, view, level, level.slot, spec)

    def target_for(self, request: FetchRequest) -> ViewTarget | None:
        """Resolve the slot a request was issued for, active or not."""
        tab = self.state.tabs.get(request.tab_id)
        view = self.state.views.get(request.tab_id)
        if tab is None or view is None:
            return None
        level = view.find_level(request.level_id)
        if level is None:
            return None
        slot = level.slots.get(request.sub_tab)
        if slot is None:
            return None
        spec = self.registry.lookup(view.kind, level.depth, slot.sub_tab)
        return ViewTarget(tab, view, level, slot, spec)

    def row_count(self, target: ViewTarget) -> int:
        return self.presenter.row_count(target.spec, target.slot)

    def roots(self, target: ViewTarget) -> list[Any]:
        return self.presenter.visible_items(target.spec, target.slot)

    # =========================================================================
    # Page number buffer
    # =========================================================================

    def _is_page_digit(self, event: ActionEvent) -> bool:
        if event.action is not Action.FILTER_INPUT or not event.char or not event.char.isdigit():
            return False
        if self.state.mode is Mode.NORMAL:
            return True
        if self.state.mode in _FILTER_MODES:
            target = self.target()
            return target is not None and self.ring(target).current_kind is FocusKind.PAGINATION
        return False

    def _buffer_page_digit(self, char: str) -> None:
        if len(self.state.pending_page) >= MAX_PAGE_INPUT_DIGITS:
            return
        self.state.pending_page += char

    def _commit_page_buffer(self) -> None:
        buffer, self.state.pending_page = self.state.pending_page, ""
        if not buffer.isdigit():
            return
        page = int(buffer)
        target = self.target()
        if page == 0 or target is None:
            return
        target.slot.list_state.goto_page(page, self.row_count(target))

    # =========================================================================
    # Fetch requests
    # =========================================================================

    def _scope(self, view: ResourceView, level: ViewLevel, slot: ViewSlot, spec: ViewSpec) -> FetchScope:
        params = {
            name: str(value)
            for name, value in slot.controls.items()
            if name in spec.server_controls and value not in ("", False)
        }
        return FetchScope(
            context=self.state.context,
            depth=level.depth,
            sub_tab=slot.sub_tab,
            parents=view.parent_keys(level),
            prefix=slot.prefix,
            params=params,
        )

    def request_reload(self, tab: Tab, view: ResourceView, level: ViewLevel, slot: ViewSlot) -> None:
        """Issue a fresh list fetch for a slot; earlier results become stale."""
        spec = self.registry.lookup(view.kind, level.depth, slot.sub_tab)
        slot.loaded = True
        slot.needs_reload = False

        query = None
        kind = EffectKind.FETCH
        if spec.filter_mode is Mode.INSIGHTS_INPUT:
            query = str(slot.controls.get(FOCUS_QUERY, "")).strip()
            if not query:
                slot.list_state.loading = False
                return
            kind = EffectKind.RUN_QUERY

        slot.list_state.loading = True
        request = FetchRequest(
            tab_id=tab.tab_id,
            level_id=level.level_id,
            sub_tab=slot.sub_tab,
            seq=slot.next_request_seq(),
            context_key=self.state.context.key,
            kind=view.kind,
            scope=self._scope(view, level, slot, spec),
            query=query,
        )
        self._emit(kind, request)

        if spec.tree:
            for key in slot.tree.pending_keys():
                self.request_children(tab, view, level, slot, key)

    def request_children(
        self, tab: Tab, view: ResourceView, level: ViewLevel, slot: ViewSlot, path: str
    ) -> None:
        spec = self.registry.lookup(view.kind, level.depth, slot.sub_tab)
        request = FetchRequest(
            tab_id=tab.tab_id,
            level_id=level.level_id,
            sub_tab=slot.sub_tab,
            seq=slot.next_child_seq(path),
            context_key=self.state.context.key,
            kind=view.kind,
            scope=self._scope(view, level, slot, spec),
            child_path=path,
        )
        self._emit(EffectKind.FETCH, request)

    def reload_target(self, target: ViewTarget) -> None:
        self.request_reload(target.tab, target.view, target.level, target.slot)

    def ensure_loaded(self) -> None:
        """Fetch the active view when it was never loaded or is stale."""
        target = self.target()
        if target is None:
            return
        if not target.slot.loaded or target.slot.needs_reload:
            self.reload_target(target)

    # =========================================================================
    # Tabs
    # =========================================================================

    def refresh_breadcrumb(self, tab: Tab, view: ResourceView) -> None:
        self.state.tabs.refresh_breadcrumb(tab, view.breadcrumb_parts())

    def open_service(self, kind: ResourceKind) -> Tab:
        """Open a new tab on a resource kind's list view and load it."""
        tab = self.state.tabs.open(kind, self.registry.service_title(kind))
        view = ResourceView(kind, self.registry, self.page_size)
        self.state.views[tab.tab_id] = view
        self.refresh_breadcrumb(tab, view)
        self.state.mode = Mode.NORMAL
        self.ensure_loaded()
        return tab

    def close_active_tab(self) -> None:
        tab = self.state.tabs.active
        if tab is None:
            self.open_service_picker()
            return
        remaining = self.state.tabs.close_active()
        self.state.views.pop(tab.tab_id, None)
        if not remaining:
            self.open_service_picker()
            return
        self.state.mode = Mode.NORMAL
        self.ensure_loaded()

    # =========================================================================
    # Connection context
    # =========================================================================

    def change_context(
        self,
        profile: str | None = None,
        region: str | None = None,
        role_arn: str | None = None,
    ) -> None:
        """Switch profile and/or region, marking every open view stale."""
        current = self.state.context
        updated = ConnectionContext(
            profile=profile or current.profile,
            region=region or current.region,
            account_id=current.account_id if profile in (None, current.profile) else "",
            role_arn=role_arn if role_arn is not None else current.role_arn,
        )
        if updated == current:
            return
        logger.info("Switching context %s -> %s", current.key, updated.key)
        self.state.context = updated
        for view in self.state.views.values():
            view.mark_stale()
        self.ensure_loaded()

    def apply_latencies(self, latencies: dict[str, float | None]) -> None:
        """Publish a complete latency map and re-sort the region picker."""
        self.state.latencies = dict(latencies)
        self.refresh_region_items()

    def apply_profiles(self, profiles: list[ProfileInfo]) -> None:
        self.state.profiles = list(profiles)
        picker = self.state.profile_picker
        picker.items = list(profiles)
        picker.clamp(len(self.picker_rows(Mode.PROFILE_PICKER)))

    # =========================================================================
    # Sessions
    # =========================================================================

    def restore_session(self, session: Session) -> None:
        """Replace context and tabs with a saved session, first tab active."""
        self.state.context = ConnectionContext(
            profile=session.profile,
            region=session.region,
            account_id=session.account_id,
            role_arn=session.role_arn,
        )
        self.state.tabs.clear()
        self.state.views.clear()
        for saved in session.tabs:
            try:
                kind = ResourceKind(saved.kind)
            except ValueError:
                logger.warning("Skipping saved tab with unknown kind %s", saved.kind)
                continue
            tab = self.state.tabs.open(kind, saved.title)
            view = ResourceView(kind, self.registry, self.page_size)
            if saved.filter:
                view.root_slot.list_state.filter = saved.filter
            self.state.views[tab.tab_id] = view
            self.refresh_breadcrumb(tab, view)

        self.state.tabs.activate(0)
        if self.session_store is not None:
            self.session_store.track(session)
        self._session_signature = self._signature()
        if self.state.tabs.is_empty():
            self.open_service_picker()
            return
        self.state.mode = Mode.NORMAL
        self.ensure_loaded()

    def _signature(self) -> tuple[str, list[dict[str, Any]]]:
        saved = serialize_tabs(self.state.tabs.tabs, self.state.views)
        return (self.state.context.key, [tab.model_dump() for tab in saved])

    def _persist_session(self) -> None:
        if self.session_store is None:
            return
        signature = self._signature()
        if signature == self._session_signature:
            return
        self._session_signature = signature
        self.session_store.save(self.state.tabs.tabs, self.state.views, self.state.context)


__all__ = ["ActionDispatcher", "ViewTarget"]
