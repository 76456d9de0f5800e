"""Closed set of user actions consumed by the dispatcher.

Key presses never reach the navigation core directly: the keymap turns them
into ``ActionEvent`` values, which carry an optional character payload for
text input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

# Bumped whenever a member is removed or its meaning changes.
ACTION_SCHEMA_VERSION: Final = 1


class Action(Enum):
    """User actions."""

    QUIT = "quit"
    CLOSE_SERVICE = "close_service"
    NEXT_ITEM = "next_item"
    PREV_ITEM = "prev_item"
    NEXT_PANE = "next_pane"
    PREV_PANE = "prev_pane"
    COLLAPSE_ROW = "collapse_row"
    EXPAND_ROW = "expand_row"
    SELECT = "select"
    OPEN_SPACE_MENU = "open_space_menu"
    CLOSE_MENU = "close_menu"
    OPEN_SERVICE_PICKER = "open_service_picker"
    OPEN_CLOUDWATCH_ALARMS = "open_cloudwatch_alarms"
    FILTER_INPUT = "filter_input"
    FILTER_BACKSPACE = "filter_backspace"
    DELETE_WORD = "delete_word"
    WORD_LEFT = "word_left"
    WORD_RIGHT = "word_right"
    OPEN_COLUMN_SELECTOR = "open_column_selector"
    TOGGLE_COLUMN = "toggle_column"
    NEXT_PREFERENCES = "next_preferences"
    PREV_PREFERENCES = "prev_preferences"
    CLOSE_COLUMN_SELECTOR = "close_column_selector"
    START_FILTER = "start_filter"
    START_EVENT_FILTER = "start_event_filter"
    APPLY_FILTER = "apply_filter"
    TOGGLE_EXACT_MATCH = "toggle_exact_match"
    TOGGLE_SHOW_EXPIRED = "toggle_show_expired"
    GO_BACK = "go_back"
    NEXT_FILTER_FOCUS = "next_filter_focus"
    PREV_FILTER_FOCUS = "prev_filter_focus"
    TOGGLE_FILTER_CHECKBOX = "toggle_filter_checkbox"
    CYCLE_SORT_COLUMN = "cycle_sort_column"
    TOGGLE_SORT_DIRECTION = "toggle_sort_direction"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    REFRESH = "refresh"
    RETRY_LOAD = "retry_load"
    YANK = "yank"
    OPEN_IN_CONSOLE = "open_in_console"
    SHOW_HELP = "show_help"
    OPEN_REGION_PICKER = "open_region_picker"
    OPEN_CALENDAR = "open_calendar"
    CLOSE_CALENDAR = "close_calendar"
    CALENDAR_PREV_DAY = "calendar_prev_day"
    CALENDAR_NEXT_DAY = "calendar_next_day"
    CALENDAR_PREV_WEEK = "calendar_prev_week"
    CALENDAR_NEXT_WEEK = "calendar_next_week"
    CALENDAR_PREV_MONTH = "calendar_prev_month"
    CALENDAR_NEXT_MONTH = "calendar_next_month"
    CALENDAR_SELECT = "calendar_select"
    NEXT_TAB = "next_tab"
    PREV_TAB = "prev_tab"
    NEXT_DETAIL_TAB = "next_detail_tab"
    PREV_DETAIL_TAB = "prev_detail_tab"
    CLOSE_TAB = "close_tab"
    OPEN_TAB_PICKER = "open_tab_picker"
    OPEN_SESSION_PICKER = "open_session_picker"
    OPEN_PROFILE_PICKER = "open_profile_picker"
    LOAD_SESSION = "load_session"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


@dataclass(frozen=True)
class ActionEvent:
    """An action plus its optional character payload."""

    action: Action
    char: str | None = None

    @classmethod
    def typed(cls, char: str) -> ActionEvent:
        """Build a FILTER_INPUT event for a typed character."""
        return cls(Action.FILTER_INPUT, char)


__all__ = ["ACTION_SCHEMA_VERSION", "Action", "ActionEvent"]
