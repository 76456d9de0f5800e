"""Filter modes and the column selector.

Filter, event filter and Insights input modes share one set of handlers that
act on whatever the view's focus ring points at: text fields take typed
characters, dropdowns cycle options, checkboxes toggle and the pagination
target collects a page number.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from cloudnav.constants.enums import FocusKind, Mode, PageSize, PreferencesSection
from cloudnav.constants.values import FOCUS_END_DATE, FOCUS_FILTER, FOCUS_START_DATE
from cloudnav.keyboard.actions import Action, ActionEvent
from cloudnav.models.state.app_state import ColumnSelectorState
from cloudnav.models.state.focus_ring import FocusRing, FocusTarget
from cloudnav.models.state.list_state import delete_last_word
from cloudnav.navigation.mixins.base import DispatcherMixinBase

if TYPE_CHECKING:
    from cloudnav.navigation.dispatcher import ViewTarget

logger = logging.getLogger(__name__)

Handler = Callable[[ActionEvent], None]

_DATE_FIELDS = frozenset({FOCUS_START_DATE, FOCUS_END_DATE})


class FilterMixin(DispatcherMixinBase):
    """Handlers for FILTER_INPUT, EVENT_FILTER_INPUT, INSIGHTS_INPUT and COLUMN_SELECTOR."""

    def _filter_handlers(self) -> dict[Action, Handler]:
        return {
            Action.FILTER_INPUT: self._type_char,
            Action.FILTER_BACKSPACE: self._backspace,
            Action.DELETE_WORD: self._delete_word,
            Action.NEXT_FILTER_FOCUS: self._next_focus,
            Action.PREV_FILTER_FOCUS: self._prev_focus,
            Action.NEXT_ITEM: self._filter_next_item,
            Action.PREV_ITEM: self._filter_prev_item,
            Action.PAGE_DOWN: self._filter_page_down,
            Action.PAGE_UP: self._filter_page_up,
            Action.APPLY_FILTER: self._apply_filter,
            Action.TOGGLE_FILTER_CHECKBOX: self._toggle_focused,
            Action.CLOSE_MENU: self._leave_filter,
        }

    def _insights_handlers(self) -> dict[Action, Handler]:
        handlers = self._filter_handlers()
        handlers.update(
            {
                Action.SELECT: self._insights_select,
                Action.APPLY_FILTER: self._insights_select,
                Action.REFRESH: self._run_query,
            }
        )
        return handlers

    # =========================================================================
    # Entering and leaving
    # =========================================================================

    def ring(self, target: ViewTarget) -> FocusRing:
        """Focus ring of the current filter mode."""
        if self.state.mode is Mode.EVENT_FILTER_INPUT:
            return target.slot.event_focus
        return target.slot.focus

    def _start_filter(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or not target.slot.focus.targets:
            return
        target.slot.focus.reset()
        target.slot.dropdown_open = False
        self.state.mode = target.spec.filter_mode

    def _start_event_filter(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None or not target.slot.event_focus.targets:
            return
        target.slot.event_focus.reset()
        target.slot.dropdown_open = False
        self.state.mode = Mode.EVENT_FILTER_INPUT

    def _leave_filter(self, event: ActionEvent) -> None:
        self.state.mode = Mode.NORMAL
        target = self.target()
        if target is None:
            return
        target.slot.dropdown_open = False
        if target.slot.needs_reload:
            self.reload_target(target)

    # =========================================================================
    # Text editing
    # =========================================================================

    def _edit_text(self, target: ViewTarget, field: FocusTarget, edit: Callable[[str], str]) -> None:
        slot = target.slot
        if field.name == FOCUS_FILTER:
            slot.list_state.filter = edit(slot.list_state.filter)
        else:
            slot.controls[field.name] = edit(str(slot.controls.get(field.name, "")))
            if field.name in target.spec.server_controls:
                slot.needs_reload = True
        slot.list_state.reset()

    def _focused(self) -> tuple[ViewTarget, FocusTarget] | None:
        target = self.target()
        if target is None:
            return None
        field = self.ring(target).current
        if field is None:
            return None
        return target, field

    def _type_char(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is None or not event.char:
            return
        target, field = focused
        char = event.char
        if field.kind is FocusKind.TEXT:
            self._edit_text(target, field, lambda text: text + char)
        elif field.kind is FocusKind.PAGINATION and char.isdigit():
            self._buffer_page_digit(char)

    def _backspace(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.TEXT:
            self._edit_text(*focused, lambda text: text[:-1])

    def _delete_word(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.TEXT:
            self._edit_text(*focused, delete_last_word)

    # =========================================================================
    # Focus and controls
    # =========================================================================

    def _next_focus(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.dropdown_open = False
            self.ring(target).next()

    def _prev_focus(self, event: ActionEvent) -> None:
        target = self.target()
        if target is not None:
            target.slot.dropdown_open = False
            self.ring(target).prev()

    def _cycle_dropdown(self, target: ViewTarget, field: FocusTarget, step: int) -> None:
        if not field.options:
            return
        current = target.slot.controls.get(field.name, field.options[0])
        try:
            position = field.options.index(str(current))
        except ValueError:
            position = 0
        target.slot.controls[field.name] = field.options[(position + step) % len(field.options)]
        if field.name in target.spec.server_controls:
            target.slot.needs_reload = True
        target.slot.list_state.reset()

    def _toggle_checkbox(self, target: ViewTarget, field: FocusTarget) -> None:
        target.slot.controls[field.name] = not target.slot.controls.get(field.name, False)
        if field.name in target.spec.server_controls:
            target.slot.needs_reload = True
        target.slot.list_state.reset()

    def _toggle_focused(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is None:
            return
        target, field = focused
        if field.kind is FocusKind.CHECKBOX:
            self._toggle_checkbox(target, field)
        elif field.kind is FocusKind.DROPDOWN:
            target.slot.dropdown_open = not target.slot.dropdown_open
        elif field.kind is FocusKind.TEXT:
            # Space is bound to the toggle; on text fields it is still a space.
            self._edit_text(target, field, lambda text: text + " ")

    def _apply_filter(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].name in _DATE_FIELDS:
            self._open_calendar(event)
            return
        if focused is not None and focused[1].kind in (FocusKind.CHECKBOX, FocusKind.DROPDOWN):
            self._toggle_focused(event)
            return
        self._leave_filter(event)

    def _filter_next_item(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.DROPDOWN and focused[0].slot.dropdown_open:
            self._cycle_dropdown(*focused, 1)
            return
        self._next_item(event)

    def _filter_prev_item(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.DROPDOWN and focused[0].slot.dropdown_open:
            self._cycle_dropdown(*focused, -1)
            return
        self._prev_item(event)

    def _filter_page_down(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.DROPDOWN:
            self._cycle_dropdown(*focused, 1)
            return
        self._page_down(event)

    def _filter_page_up(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].kind is FocusKind.DROPDOWN:
            self._cycle_dropdown(*focused, -1)
            return
        self._page_up(event)

    # =========================================================================
    # Insights queries
    # =========================================================================

    def _insights_select(self, event: ActionEvent) -> None:
        focused = self._focused()
        if focused is not None and focused[1].name in _DATE_FIELDS:
            self._open_calendar(event)
            return
        if focused is not None and focused[1].kind in (FocusKind.CHECKBOX, FocusKind.DROPDOWN):
            self._toggle_focused(event)
            return
        self._run_query(event)

    def _run_query(self, event: ActionEvent) -> None:
        target = self.target()
        if target is None:
            return
        target.slot.dropdown_open = False
        self.state.mode = Mode.NORMAL
        self.reload_target(target)

    # =========================================================================
    # Column selector
    # =========================================================================

    def _column_selector_handlers(self) -> dict[Action, Handler]:
        return {
            Action.NEXT_ITEM: self._columns_next,
            Action.PREV_ITEM: self._columns_prev,
            Action.PAGE_DOWN: self._columns_page_down,
            Action.PAGE_UP: self._columns_page_up,
            Action.TOGGLE_COLUMN: self._toggle_column,
            Action.NEXT_PREFERENCES: self._switch_preferences,
            Action.PREV_PREFERENCES: self._switch_preferences,
            Action.CLOSE_COLUMN_SELECTOR: self._close_column_selector,
            Action.CLOSE_MENU: self._close_column_selector,
        }

    def preference_rows(self) -> list[str]:
        """Rows of the active column selector section."""
        selector = self.state.column_selector
        if selector.section is PreferencesSection.PAGE_SIZE:
            return [str(int(size)) for size in PageSize]
        target = self.target()
        return list(target.spec.columns) if target is not None else []

    def _open_column_selector(self, event: ActionEvent) -> None:
        if self.target() is None:
            return
        self.state.column_selector = ColumnSelectorState()
        self.state.column_selector.cursor.items = self.preference_rows()
        self.state.mode = Mode.COLUMN_SELECTOR

    def _close_column_selector(self, event: ActionEvent) -> None:
        self.state.mode = Mode.NORMAL

    def _columns_next(self, event: ActionEvent) -> None:
        self.state.column_selector.cursor.next_item(len(self.preference_rows()))

    def _columns_prev(self, event: ActionEvent) -> None:
        self.state.column_selector.cursor.prev_item()

    def _columns_page_down(self, event: ActionEvent) -> None:
        self.state.column_selector.cursor.page_down(len(self.preference_rows()))

    def _columns_page_up(self, event: ActionEvent) -> None:
        self.state.column_selector.cursor.page_up()

    def _switch_preferences(self, event: ActionEvent) -> None:
        selector = self.state.column_selector
        selector.section = (
            PreferencesSection.PAGE_SIZE
            if selector.section is PreferencesSection.COLUMNS
            else PreferencesSection.COLUMNS
        )
        selector.cursor.reset()
        selector.cursor.items = self.preference_rows()

    def _toggle_column(self, event: ActionEvent) -> None:
        target = self.target()
        rows = self.preference_rows()
        cursor = self.state.column_selector.cursor
        if target is None or not 0 <= cursor.selected < len(rows):
            return
        choice = rows[cursor.selected]

        if self.state.column_selector.section is PreferencesSection.PAGE_SIZE:
            target.slot.list_state.set_page_size(PageSize(int(choice)))
            return

        hidden = target.slot.hidden_columns
        if choice in hidden:
            hidden.discard(choice)
        elif len(target.spec.columns) - len(hidden) > 1:
            hidden.add(choice)
        else:
            logger.debug("Refusing to hide the last visible column %s", choice)


__all__ = ["FilterMixin"]
