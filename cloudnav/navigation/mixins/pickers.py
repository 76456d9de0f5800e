"""Leader menu and list pickers (service, tab, region, profile, session)."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from cloudnav.constants.enums import EffectKind, Mode, ResourceKind
from cloudnav.constants.regions import REGION_CODES, REGIONS
from cloudnav.controllers.profiles.loader import profile_matches
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.core.resources import ProfileInfo, RegionInfo
from cloudnav.models.session.session import Session
from cloudnav.models.state.list_state import ListState, delete_last_word
from cloudnav.navigation.mixins.base import DispatcherMixinBase
from cloudnav.navigation.tabs import Tab
from cloudnav.navigation.views import ViewRegistry

logger = logging.getLogger(__name__)

Handler = Callable[[ActionEvent], None]


def picker_label(registry: ViewRegistry, mode: Mode, row: Any) -> str:
    """Display label of a picker row."""
    if mode is Mode.SERVICE_PICKER:
        return registry.service_title(row)
    if mode is Mode.TAB_PICKER:
        return row.breadcrumb
    return row.label


def filter_picker_rows(registry: ViewRegistry, mode: Mode, picker: ListState[Any]) -> list[Any]:
    """Picker items matching the picker's filter text, case-insensitively."""
    text = picker.filter.strip().lower()
    if not text:
        return list(picker.items)
    if mode is Mode.PROFILE_PICKER:
        return [row for row in picker.items if profile_matches(row, text)]
    if mode is Mode.REGION_PICKER:
        return [
            row for row in picker.items if text in row.code.lower() or text in row.label.lower()
        ]
    return [row for row in picker.items if text in picker_label(registry, mode, row).lower()]


class PickerMixin(DispatcherMixinBase):
    """Handlers for SPACE_MENU and the five picker modes.

    Every picker is a ``ListState`` on ``AppState`` whose filter narrows the
    rows returned by ``picker_rows``.
    """

    def _space_menu_handlers(self) -> dict[Action, Handler]:
        return {
            Action.CLOSE_MENU: self._close_picker,
            Action.OPEN_SERVICE_PICKER: self._open_service_picker,
            Action.OPEN_REGION_PICKER: self._open_region_picker,
            Action.OPEN_PROFILE_PICKER: self._open_profile_picker,
            Action.OPEN_CLOUDWATCH_ALARMS: self._open_alarms,
            Action.CLOSE_TAB: self._close_tab,
            Action.OPEN_TAB_PICKER: self._open_tab_picker,
            Action.OPEN_SESSION_PICKER: self._open_session_picker,
            Action.SHOW_HELP: self._show_help,
        }

    def _picker_handlers(self) -> dict[Action, Handler]:
        return {
            Action.NEXT_ITEM: self._picker_next,
            Action.PREV_ITEM: self._picker_prev,
            Action.PAGE_DOWN: self._picker_page_down,
            Action.PAGE_UP: self._picker_page_up,
            Action.FILTER_INPUT: self._picker_type,
            Action.FILTER_BACKSPACE: self._picker_backspace,
            Action.DELETE_WORD: self._picker_delete_word,
            Action.CLOSE_MENU: self._close_picker,
            Action.SELECT: self._picker_commit,
            Action.LOAD_SESSION: self._picker_commit,
            Action.REFRESH: self._picker_refresh,
        }

    # =========================================================================
    # Rows
    # =========================================================================

    def picker_state(self, mode: Mode) -> ListState[Any] | None:
        """The ``ListState`` backing a picker mode."""
        return {
            Mode.SERVICE_PICKER: self.state.service_picker,
            Mode.TAB_PICKER: self.state.tab_picker,
            Mode.REGION_PICKER: self.state.region_picker,
            Mode.PROFILE_PICKER: self.state.profile_picker,
            Mode.SESSION_PICKER: self.state.session_picker,
        }.get(mode)

    def picker_rows(self, mode: Mode) -> list[Any]:
        """Rows of a picker after its filter text."""
        picker = self.picker_state(mode)
        if picker is None:
            return []
        return filter_picker_rows(self.registry, mode, picker)

    def refresh_region_items(self) -> None:
        """Rebuild region rows from the catalog, fastest first, unmeasured last."""
        picker = self.state.region_picker
        current = self.picker_rows(Mode.REGION_PICKER)
        selected_code = None
        if 0 <= picker.selected < len(current):
            selected_code = current[picker.selected].code

        rows = [
            RegionInfo(
                name=name,
                code=code,
                group=group,
                opt_in=opt_in,
                latency_ms=self.state.latencies.get(code),
            )
            for name, code, group, opt_in in REGIONS
        ]
        rows.sort(key=lambda row: (row.latency_ms is None, row.latency_ms or 0.0))
        picker.items = rows
        self._select_row(Mode.REGION_PICKER, lambda row: row.code == selected_code)

    def _select_row(self, mode: Mode, predicate: Callable[[Any], bool]) -> None:
        picker = self.picker_state(mode)
        if picker is None:
            return
        rows = self.picker_rows(mode)
        for index, row in enumerate(rows):
            if predicate(row):
                picker.selected = index
                picker.snap_to_page()
                return
        picker.clamp(len(rows))

    # =========================================================================
    # Openers
    # =========================================================================

    def _enter_picker(self, mode: Mode, picker: ListState[Any]) -> ListState[Any]:
        picker.filter = ""
        picker.reset()
        self.state.mode = mode
        return picker

    def _open_space_menu(self, event: ActionEvent) -> None:
        self.state.mode = Mode.SPACE_MENU

    def open_service_picker(self) -> None:
        picker = self._enter_picker(Mode.SERVICE_PICKER, self.state.service_picker)
        picker.items = self.registry.services()

    def _open_service_picker(self, event: ActionEvent) -> None:
        self.open_service_picker()

    def _open_tab_picker(self, event: ActionEvent) -> None:
        if self.state.tabs.is_empty():
            return
        picker = self._enter_picker(Mode.TAB_PICKER, self.state.tab_picker)
        picker.items = list(self.state.tabs.tabs)
        active = self.state.tabs.active
        self._select_row(Mode.TAB_PICKER, lambda tab: tab is active)

    def _open_region_picker(self, event: ActionEvent) -> None:
        self._enter_picker(Mode.REGION_PICKER, self.state.region_picker)
        self.refresh_region_items()
        region = self.state.context.region
        self._select_row(Mode.REGION_PICKER, lambda row: row.code == region)
        self._emit(EffectKind.PROBE_REGIONS, payload=list(REGION_CODES))

    def _open_profile_picker(self, event: ActionEvent) -> None:
        picker = self._enter_picker(Mode.PROFILE_PICKER, self.state.profile_picker)
        picker.items = list(self.state.profiles)
        profile = self.state.context.profile
        self._select_row(Mode.PROFILE_PICKER, lambda row: row.name == profile)
        self._emit(EffectKind.LOAD_PROFILES)

    def _open_session_picker(self, event: ActionEvent) -> None:
        picker = self._enter_picker(Mode.SESSION_PICKER, self.state.session_picker)
        picker.items = self.session_store.list_all() if self.session_store is not None else []

    def _open_alarms(self, event: ActionEvent) -> None:
        self.open_service(ResourceKind.ALARMS)

    def _close_picker(self, event: ActionEvent) -> None:
        if self.state.tabs.is_empty() and self.state.mode is Mode.SERVICE_PICKER:
            return
        self.state.mode = Mode.NORMAL

    # =========================================================================
    # Movement and filter text
    # =========================================================================

    def _current_picker(self) -> ListState[Any] | None:
        return self.picker_state(self.state.mode)

    def _picker_next(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.next_item(len(self.picker_rows(self.state.mode)))

    def _picker_prev(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.prev_item()

    def _picker_page_down(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.page_down(len(self.picker_rows(self.state.mode)))

    def _picker_page_up(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.page_up()

    def _picker_type(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None and event.char:
            picker.filter_push(event.char)

    def _picker_backspace(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.filter_pop()

    def _picker_delete_word(self, event: ActionEvent) -> None:
        picker = self._current_picker()
        if picker is not None:
            picker.filter = delete_last_word(picker.filter)
            picker.reset()

    def _picker_refresh(self, event: ActionEvent) -> None:
        mode = self.state.mode
        if mode is Mode.REGION_PICKER:
            self._emit(EffectKind.PROBE_REGIONS, payload=list(REGION_CODES))
        elif mode is Mode.PROFILE_PICKER:
            self._emit(EffectKind.LOAD_PROFILES)
        elif mode is Mode.SESSION_PICKER and self.session_store is not None:
            picker = self.state.session_picker
            picker.items = self.session_store.list_all()
            picker.clamp(len(self.picker_rows(mode)))

    # =========================================================================
    # Commit
    # =========================================================================

    def _picker_commit(self, event: ActionEvent) -> None:
        mode = self.state.mode
        picker = self.picker_state(mode)
        if picker is None:
            return
        rows = self.picker_rows(mode)
        if not 0 <= picker.selected < len(rows):
            return
        row = rows[picker.selected]

        if mode is Mode.SERVICE_PICKER:
            self.open_service(row)
        elif mode is Mode.TAB_PICKER:
            self._commit_tab(row)
        elif mode is Mode.REGION_PICKER:
            self.state.mode = Mode.NORMAL
            self.change_context(region=row.code)
        elif mode is Mode.PROFILE_PICKER:
            self._commit_profile(row)
        elif mode is Mode.SESSION_PICKER:
            self._commit_session(row)

    def _commit_tab(self, tab: Tab) -> None:
        index = self.state.tabs.index_of(tab.tab_id)
        self.state.mode = Mode.NORMAL
        if index is None:
            return
        self.state.tabs.activate(index)
        self.ensure_loaded()

    def _commit_profile(self, profile: ProfileInfo) -> None:
        self.state.mode = Mode.NORMAL
        self.change_context(
            profile=profile.name,
            region=profile.region,
            role_arn=profile.role_arn or "",
        )

    def _commit_session(self, session: Session) -> None:
        logger.info("Restoring session %s", session.id)
        self.restore_session(session)


__all__ = ["PickerMixin", "filter_picker_rows", "picker_label"]
