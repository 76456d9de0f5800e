"""Normal-mode navigation: movement, expansion, drill-down and tabs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cloudnav.constants.enums import EffectKind, Mode, SelectBehavior
from cloudnav.constants.values import FOCUS_EXACT, FOCUS_SHOW_EXPIRED
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.state.app_state import DocumentView
from cloudnav.navigation.mixins.base import DispatcherMixinBase

if TYPE_CHECKING:
    from collections.abc import Callable

    from cloudnav.navigation.dispatcher import ViewTarget

logger = logging.getLogger(__name__)


class NavigationMixin(DispatcherMixinBase):
    """Handlers for the normal mode.

    Mixed into ``ActionDispatcher``; relies on its ``state``, ``registry``,
    ``presenter`` and fetch helpers.
    """

    def _normal_handlers(self) -> dict[Action, Callable[[ActionEvent], None]]:
        return {
            Action.QUIT: self._quit,
            Action.CLOSE_SERVICE: self._close_tab,
            Action.CLOSE_TAB: self._close_tab,
            Action.NEXT_ITEM: self._next_item,
            Action.PREV_ITEM: self._prev_item,
            Action.SCROLL_DOWN: self._next_item,
            Action.SCROLL_UP: self._prev_item,
            Action.PAGE_DOWN: self._page_down,
            Action.PAGE_UP: self._page_up,
            Action.NEXT_PANE: self._expand,
            Action.EXPAND_ROW: self._expand,
            Action.PREV_PANE: self._collapse,
            Action.COLLAPSE_ROW: self._collapse,
            Action.SELECT: self._select,
            Action.GO_BACK: self._go_back,
            Action.NEXT_TAB: self._next_tab,
            Action.PREV_TAB: self._prev_tab,
            Action.NEXT_DETAIL_TAB: self._next_detail_tab,
            Action.PREV_DETAIL_TAB: self._prev_detail_tab,
            Action.CYCLE_SORT_COLUMN: self._cycle_sort_column,
            Action.TOGGLE_SORT_DIRECTION: self._toggle_sort_direction,
            Action.TOGGLE_EXACT_MATCH: self._toggle_exact_match,
            Action.TOGGLE_SHOW_EXPIRED: self._toggle_show_expired,
            Action.REFRESH: self._refresh,
            Action.RETRY_LOAD: self._refresh,
            Action.YANK: self._yank,
            Action.OPEN_IN_CONSOLE: self._open_in_console,
            Action.COPY_TO_CLIPBOARD: self._copy_screen,
            Action.FILTER_INPUT: self._normal_digit,
            Action.START_FILTER: self._start_filter,
            Action.START_EVENT_FILTER: self._start_event_filter,
            Action.OPEN_COLUMN_SELECTOR: self._open_column_selector,
            Action.OPEN_SPACE_MENU: self._open_space_menu,
            Action.OPEN_SERVICE_PICKER: self._open_service_picker,
            Action.OPEN_TAB_PICKER: self._open_tab_picker,
            Action.OPEN_SESSION_PICKER: self._open_session_picker,
            Action.OPEN_REGION_PICKER: self._open_region_picker,
            Action.OPEN_PROFILE_PICKER: self._open_profile_picker,
            Action.OPEN_CLOUDWATCH_ALARMS: self._open_alarms,
            Action.SHOW_HELP: self._show_help,
            Action.OPEN_CALENDAR: self._open_calendar,
        }

    # =========================================================================
    # Movement
    # =========================================================================

    def _next_item(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.list_state.next_item(self.row_count(target))

    def _prev_item(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.list_state.prev_item()

    def _page_down(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.list_state.page_down(self.row_count(target))

    def _page_up(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.list_state.page_up()

    def _normal_digit(self, event: ActionEvent) -> None:
        if event.char and event.char.isdigit():
            self._buffer_page_digit(event.char)

    # =========================================================================
    # Expansion
    # =========================================================================

    def _expand(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        list_state = target.slot.list_state
        if not target.spec.tree:
            if not list_state.is_expanded():
                list_state.toggle_expand()
            return

        move = target.slot.tree.expand_at(self.roots(target), list_state.selected)
        list_state.selected = move.selected
        list_state.clamp(self.row_count(target))
        if move.fetch_key is not None:
            self.request_children(
                target.tab, target.view, target.level, target.slot, move.fetch_key
            )

    def _collapse(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        list_state = target.slot.list_state
        if not target.spec.tree:
            list_state.collapse()
            return

        move = target.slot.tree.collapse_at(self.roots(target), list_state.selected)
        list_state.selected = move.selected
        list_state.clamp(self.row_count(target))

    # =========================================================================
    # Selection commit
    # =========================================================================

    def _select(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            self.open_service_picker()
            return

        behavior = target.spec.select
        if behavior is SelectBehavior.DRILL:
            self._drill(target)
        elif behavior is SelectBehavior.VIEWER:
            self._open_viewer(target)
        elif behavior is SelectBehavior.EXPAND:
            target.slot.list_state.toggle_expand()

    def _drill(self, target: ViewTarget) -> None:
        item = self.presenter.selected_item(target.spec, target.slot)
        if item is None:
            return

        if target.spec.prefix_drill:
            if not item.is_branch:
                return
            target.slot.path_stack.append(item.key)
            target.slot.list_state.items = []
            target.slot.list_state.reset()
            self.refresh_breadcrumb(target.tab, target.view)
            self.reload_target(target)
            return

        if not self.registry.has_level(target.view.kind, target.level.depth + 1):
            return
        target.view.push_level(item.key, item.label)
        self.refresh_breadcrumb(target.tab, target.view)
        self.ensure_loaded()

    def _open_viewer(self, target: ViewTarget) -> None:
        item = self.presenter.selected_item(target.spec, target.slot)
        if item is None or item.document is None:
            return
        self.state.viewer = DocumentView(
            title=item.label, lines=item.document.splitlines() or [""]
        )
        self.state.mode = Mode.POLICY_VIEW

    # =========================================================================
    # Unwinding
    # =========================================================================

    def _go_back(self, event: ActionEvent) -> None:
        """Unwind the innermost state: expanded row, prefix, drill level, service."""
        target = self.target()
        if target is None:
            self.open_service_picker()
            return

        slot = target.slot
        if not target.spec.tree and slot.list_state.has_expanded_item():
            slot.list_state.collapse()
            return

        if slot.path_stack:
            slot.path_stack.pop()
            slot.list_state.items = []
            slot.list_state.reset()
            self.refresh_breadcrumb(target.tab, target.view)
            self.reload_target(target)
            return

        if target.view.pop_level() is not None:
            target.view.slot.list_state.snap_to_page()
            self.refresh_breadcrumb(target.tab, target.view)
            self.ensure_loaded()
            return

        self.open_service_picker()

    # =========================================================================
    # Tabs
    # =========================================================================

    def _close_tab(self, event: ActionEvent) -> None:
        self.close_active_tab()

    def _next_tab(self, event: ActionEvent) -> None:
        self.state.tabs.next()
        self.ensure_loaded()

    def _prev_tab(self, event: ActionEvent) -> None:
        self.state.tabs.prev()
        self.ensure_loaded()

    def _next_detail_tab(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or len(target.level.order) < 2:
            return
        target.level.next_sub_tab()
        self.ensure_loaded()

    def _prev_detail_tab(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or len(target.level.order) < 2:
            return
        target.level.prev_sub_tab()
        self.ensure_loaded()

    # =========================================================================
    # Sorting and quick filters
    # =========================================================================

    def _cycle_sort_column(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or not target.spec.sort_columns:
            return
        slot = target.slot
        if slot.sort_index is None:
            slot.sort_index = 0
        elif slot.sort_index + 1 < len(target.spec.sort_columns):
            slot.sort_index += 1
        else:
            slot.sort_index = None
        slot.list_state.reset()

    def _toggle_sort_direction(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or not target.spec.sort_columns:
            return
        target.slot.sort_direction = target.slot.sort_direction.toggled()
        target.slot.list_state.reset()

    def _toggle_control(self, name: str) -> None:
        target = self.target()
        if target is None or not target.spec.has_target(name):
            return
        target.slot.controls[name] = not target.slot.controls.get(name, False)
        target.slot.list_state.reset()

    def _toggle_exact_match(self, event: ActionEvent) -> None:
        self._toggle_control(FOCUS_EXACT)

    def _toggle_show_expired(self, event: ActionEvent) -> None:
        self._toggle_control(FOCUS_SHOW_EXPIRED)

    # =========================================================================
    # Data and external effects
    # =========================================================================

    def _refresh(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        target.slot.tree.previews.clear()
        self.reload_target(target)

    def _quit(self, event: ActionEvent) -> None:
        self.state.running = False
        self._emit(EffectKind.QUIT)

    def _yank(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        item = self.presenter.selected_item(target.spec, target.slot)
        if item is not None:
            self._emit(EffectKind.COPY, payload=item.key)

    def _open_in_console(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        item = self.presenter.selected_item(target.spec, target.slot)
        self._emit(
            EffectKind.OPEN_CONSOLE,
            payload={
                "kind": target.view.kind.value,
                "region": self.state.context.region,
                "parents": list(target.view.parent_keys()),
                "sub_tab": target.level.sub_tab,
                "key": item.key if item is not None else None,
            },
        )

    def _copy_screen(self, event: ActionEvent) -> None:
        self._emit(EffectKind.COPY_SCREEN)


__all__ = ["NavigationMixin"]
