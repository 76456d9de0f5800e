"""Error and help modals, the calendar picker and the document viewer."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from cloudnav.constants.enums import CalendarField, EffectKind, Mode
from cloudnav.constants.values import FOCUS_END_DATE, FOCUS_START_DATE
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.state.calendar import CalendarState
from cloudnav.navigation.mixins.base import DispatcherMixinBase

logger = logging.getLogger(__name__)

Handler = Callable[[ActionEvent], None]

_CALENDAR_FIELDS = {
    CalendarField.START: FOCUS_START_DATE,
    CalendarField.END: FOCUS_END_DATE,
}


class ModalMixin(DispatcherMixinBase):
    """Handlers for ERROR_MODAL, HELP_MODAL, CALENDAR_PICKER and POLICY_VIEW."""

    # =========================================================================
    # Help
    # =========================================================================

    def _help_handlers(self) -> dict[Action, Handler]:
        return {Action.CLOSE_MENU: self._close_help}

    def _show_help(self, event: ActionEvent) -> None:
        self.state.return_mode = Mode.NORMAL
        self.state.mode = Mode.HELP_MODAL

    def _close_help(self, event: ActionEvent) -> None:
        self.state.mode = Mode.NORMAL

    # =========================================================================
    # Errors
    # =========================================================================

    def _error_handlers(self) -> dict[Action, Handler]:
        return {
            Action.CLOSE_MENU: self._dismiss_error,
            Action.RETRY_LOAD: self._retry_load,
            Action.QUIT: self._quit,
            Action.YANK: self._yank_error,
        }

    def _dismiss_error(self, event: ActionEvent) -> None:
        self.state.error = None
        self.state.mode = Mode.NORMAL

    def _retry_load(self, event: ActionEvent) -> None:
        """Re-request the scope that failed and close the modal."""
        error = self.state.error
        self._dismiss_error(event)

        request = error.request if error is not None else None
        target = self.target_for(request) if request is not None else None
        if target is None:
            # The failed scope was closed or popped.
            target = self.target()
            if target is not None:
                self.reload_target(target)
            return

        if request is not None and request.child_path is not None:
            self.request_children(
                target.tab, target.view, target.level, target.slot, request.child_path
            )
            return
        self.reload_target(target)

    def _yank_error(self, event: ActionEvent) -> None:
        if self.state.error is not None:
            self._emit(EffectKind.COPY, payload=self.state.error.message)

    # =========================================================================
    # Calendar
    # =========================================================================

    def _calendar_handlers(self) -> dict[Action, Handler]:
        def move(step: Callable[[CalendarState], None]) -> Handler:
            def handler(event: ActionEvent) -> None:
                if self.state.calendar is not None:
                    step(self.state.calendar)

            return handler

        return {
            Action.CALENDAR_PREV_DAY: move(CalendarState.prev_day),
            Action.CALENDAR_NEXT_DAY: move(CalendarState.next_day),
            Action.CALENDAR_PREV_WEEK: move(CalendarState.prev_week),
            Action.CALENDAR_NEXT_WEEK: move(CalendarState.next_week),
            Action.CALENDAR_PREV_MONTH: move(CalendarState.prev_month),
            Action.CALENDAR_NEXT_MONTH: move(CalendarState.next_month),
            Action.CALENDAR_SELECT: self._calendar_select,
            Action.CLOSE_CALENDAR: self._close_calendar,
            Action.CLOSE_MENU: self._close_calendar,
        }

    def _open_calendar(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or not target.spec.has_dates():
            return

        field = CalendarField.START
        if self.state.mode is not Mode.NORMAL:
            current = self.ring(target).current
            if current is not None and current.name == FOCUS_END_DATE:
                field = CalendarField.END

        existing = str(target.slot.controls.get(_CALENDAR_FIELDS[field], ""))
        try:
            cursor = date.fromisoformat(existing)
        except ValueError:
            cursor = date.today()

        self.state.return_mode = self.state.mode
        self.state.calendar = CalendarState(cursor=cursor, target=field)
        self.state.mode = Mode.CALENDAR_PICKER

    def _calendar_select(self, event: ActionEvent) -> None:
        calendar = self.state.calendar
        target = self.target()
        if calendar is not None and target is not None:
            name = _CALENDAR_FIELDS[calendar.target]
            target.slot.controls[name] = calendar.cursor.isoformat()
            target.slot.list_state.reset()
            if name in target.spec.server_controls:
                target.slot.needs_reload = True
        self._close_calendar(event)
        if target is not None and target.slot.needs_reload and self.state.mode is Mode.NORMAL:
            self.reload_target(target)

    def _close_calendar(self, event: ActionEvent) -> None:
        self.state.calendar = None
        self.state.mode = self.state.return_mode
        self.state.return_mode = Mode.NORMAL

    # =========================================================================
    # Document viewer
    # =========================================================================

    def _policy_view_handlers(self) -> dict[Action, Handler]:
        return {
            Action.SCROLL_DOWN: self._viewer_scroll_down,
            Action.NEXT_ITEM: self._viewer_scroll_down,
            Action.SCROLL_UP: self._viewer_scroll_up,
            Action.PREV_ITEM: self._viewer_scroll_up,
            Action.PAGE_DOWN: self._viewer_page_down,
            Action.PAGE_UP: self._viewer_page_up,
            Action.GO_BACK: self._close_viewer,
            Action.CLOSE_MENU: self._close_viewer,
            Action.YANK: self._yank_document,
        }

    def _scroll_viewer(self, delta: int) -> None:
        viewer = self.state.viewer
        if viewer is None:
            return
        last = max(len(viewer.lines) - 1, 0)
        viewer.scroll = min(max(viewer.scroll + delta, 0), last)

    def _viewer_page(self) -> int:
        target = self.target()
        return int(target.slot.list_state.page_size) if target is not None else 10

    def _viewer_scroll_down(self, event: ActionEvent) -> None:
        self._scroll_viewer(1)

    def _viewer_scroll_up(self, event: ActionEvent) -> None:
        self._scroll_viewer(-1)

    def _viewer_page_down(self, event: ActionEvent) -> None:
        self._scroll_viewer(self._viewer_page())

    def _viewer_page_up(self, event: ActionEvent) -> None:
        self._scroll_viewer(-self._viewer_page())

    def _close_viewer(self, event: ActionEvent) -> None:
        self.state.viewer = None
        self.state.mode = Mode.NORMAL

    def _yank_document(self, event: ActionEvent) -> None:
        if self.state.viewer is not None:
            self._emit(EffectKind.COPY, payload=self.state.viewer.text)


__all__ = ["ModalMixin"]
