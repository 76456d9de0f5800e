"""Per-mode key maps.

Translates Textual key names (``event.key``) and printable characters
(``event.character``) into ``ActionEvent`` values for the current mode.
Lookups try the key name first and then the character, so entries may use
either form (``"question_mark"`` or ``"?"``).
"""

from __future__ import annotations

import logging

from cloudnav.constants.enums import Mode
from cloudnav.keyboard.actions import Action, ActionEvent

logger = logging.getLogger(__name__)

# ============================================================================
# Shared fragments
# ============================================================================

_LIST_NAVIGATION: dict[str, Action] = {
    "up": Action.PREV_ITEM,
    "down": Action.NEXT_ITEM,
    "ctrl+u": Action.PAGE_UP,
    "ctrl+d": Action.PAGE_DOWN,
}

_PICKER_KEYS: dict[str, Action] = {
    **_LIST_NAVIGATION,
    "escape": Action.CLOSE_MENU,
    "enter": Action.SELECT,
    "backspace": Action.FILTER_BACKSPACE,
    "ctrl+w": Action.DELETE_WORD,
}

# ============================================================================
# Mode key maps
# ============================================================================

NORMAL_KEYS: dict[str, Action] = {
    "q": Action.QUIT,
    "ctrl+w": Action.CLOSE_SERVICE,
    "ctrl+o": Action.OPEN_IN_CONSOLE,
    "ctrl+r": Action.REFRESH,
    "ctrl+u": Action.PAGE_UP,
    "ctrl+d": Action.PAGE_DOWN,
    "ctrl+p": Action.COPY_TO_CLIPBOARD,
    "escape": Action.GO_BACK,
    "up": Action.PREV_ITEM,
    "down": Action.NEXT_ITEM,
    "right": Action.EXPAND_ROW,
    "left": Action.COLLAPSE_ROW,
    "tab": Action.NEXT_DETAIL_TAB,
    "shift+tab": Action.PREV_DETAIL_TAB,
    "enter": Action.SELECT,
    "space": Action.OPEN_SPACE_MENU,
    "i": Action.START_FILTER,
    "f": Action.START_EVENT_FILTER,
    "c": Action.OPEN_CALENDAR,
    "p": Action.OPEN_COLUMN_SELECTOR,
    "e": Action.TOGGLE_EXACT_MATCH,
    "x": Action.TOGGLE_SHOW_EXPIRED,
    "s": Action.CYCLE_SORT_COLUMN,
    "o": Action.TOGGLE_SORT_DIRECTION,
    "y": Action.YANK,
    "[": Action.PREV_TAB,
    "]": Action.NEXT_TAB,
    "?": Action.SHOW_HELP,
}

SPACE_MENU_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_MENU,
    "space": Action.CLOSE_MENU,
    "o": Action.OPEN_SERVICE_PICKER,
    "r": Action.OPEN_REGION_PICKER,
    "p": Action.OPEN_PROFILE_PICKER,
    "a": Action.OPEN_CLOUDWATCH_ALARMS,
    "c": Action.CLOSE_TAB,
    "b": Action.OPEN_TAB_PICKER,
    "t": Action.OPEN_TAB_PICKER,
    "s": Action.OPEN_SESSION_PICKER,
    "h": Action.SHOW_HELP,
}

FILTER_INPUT_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_MENU,
    "enter": Action.APPLY_FILTER,
    "tab": Action.NEXT_FILTER_FOCUS,
    "shift+tab": Action.PREV_FILTER_FOCUS,
    "up": Action.PREV_ITEM,
    "down": Action.NEXT_ITEM,
    "left": Action.PAGE_UP,
    "right": Action.PAGE_DOWN,
    "alt+left": Action.WORD_LEFT,
    "alt+right": Action.WORD_RIGHT,
    "ctrl+left": Action.WORD_LEFT,
    "ctrl+right": Action.WORD_RIGHT,
    "ctrl+w": Action.DELETE_WORD,
    "backspace": Action.FILTER_BACKSPACE,
}

EVENT_FILTER_INPUT_KEYS: dict[str, Action] = {
    **FILTER_INPUT_KEYS,
    "space": Action.TOGGLE_FILTER_CHECKBOX,
}

INSIGHTS_INPUT_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_MENU,
    "enter": Action.SELECT,
    "tab": Action.NEXT_FILTER_FOCUS,
    "shift+tab": Action.PREV_FILTER_FOCUS,
    "ctrl+r": Action.REFRESH,
    "up": Action.PREV_ITEM,
    "down": Action.NEXT_ITEM,
    "space": Action.TOGGLE_FILTER_CHECKBOX,
    "backspace": Action.FILTER_BACKSPACE,
    "ctrl+w": Action.DELETE_WORD,
    "alt+left": Action.WORD_LEFT,
    "alt+right": Action.WORD_RIGHT,
}

ERROR_MODAL_KEYS: dict[str, Action] = {
    "ctrl+r": Action.RETRY_LOAD,
    "y": Action.YANK,
    "q": Action.QUIT,
    "escape": Action.CLOSE_MENU,
}

HELP_MODAL_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_MENU,
    "enter": Action.CLOSE_MENU,
    "q": Action.CLOSE_MENU,
    "?": Action.CLOSE_MENU,
}

REGION_PICKER_KEYS: dict[str, Action] = {
    **_PICKER_KEYS,
    "ctrl+r": Action.REFRESH,
}

PROFILE_PICKER_KEYS: dict[str, Action] = {
    **_PICKER_KEYS,
    "ctrl+r": Action.REFRESH,
}

SESSION_PICKER_KEYS: dict[str, Action] = {
    **_PICKER_KEYS,
    "ctrl+r": Action.REFRESH,
    "enter": Action.LOAD_SESSION,
}

TAB_PICKER_KEYS: dict[str, Action] = dict(_PICKER_KEYS)

SERVICE_PICKER_KEYS: dict[str, Action] = dict(_PICKER_KEYS)

CALENDAR_PICKER_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_CALENDAR,
    "enter": Action.CALENDAR_SELECT,
    "left": Action.CALENDAR_PREV_DAY,
    "right": Action.CALENDAR_NEXT_DAY,
    "up": Action.CALENDAR_PREV_WEEK,
    "down": Action.CALENDAR_NEXT_WEEK,
    "n": Action.CALENDAR_NEXT_MONTH,
    "tab": Action.CALENDAR_NEXT_MONTH,
    "p": Action.CALENDAR_PREV_MONTH,
    "shift+tab": Action.CALENDAR_PREV_MONTH,
}

COLUMN_SELECTOR_KEYS: dict[str, Action] = {
    "escape": Action.CLOSE_COLUMN_SELECTOR,
    "up": Action.PREV_ITEM,
    "down": Action.NEXT_ITEM,
    "space": Action.TOGGLE_COLUMN,
    "enter": Action.TOGGLE_COLUMN,
    "tab": Action.NEXT_PREFERENCES,
    "shift+tab": Action.PREV_PREFERENCES,
    "ctrl+d": Action.PAGE_DOWN,
    "ctrl+u": Action.PAGE_UP,
}

POLICY_VIEW_KEYS: dict[str, Action] = {
    "escape": Action.GO_BACK,
    "q": Action.GO_BACK,
    "up": Action.SCROLL_UP,
    "down": Action.SCROLL_DOWN,
    "ctrl+u": Action.PAGE_UP,
    "ctrl+d": Action.PAGE_DOWN,
    "y": Action.YANK,
}

MODE_KEYMAPS: dict[Mode, dict[str, Action]] = {
    Mode.NORMAL: NORMAL_KEYS,
    Mode.SPACE_MENU: SPACE_MENU_KEYS,
    Mode.SERVICE_PICKER: SERVICE_PICKER_KEYS,
    Mode.COLUMN_SELECTOR: COLUMN_SELECTOR_KEYS,
    Mode.FILTER_INPUT: FILTER_INPUT_KEYS,
    Mode.EVENT_FILTER_INPUT: EVENT_FILTER_INPUT_KEYS,
    Mode.INSIGHTS_INPUT: INSIGHTS_INPUT_KEYS,
    Mode.ERROR_MODAL: ERROR_MODAL_KEYS,
    Mode.HELP_MODAL: HELP_MODAL_KEYS,
    Mode.REGION_PICKER: REGION_PICKER_KEYS,
    Mode.PROFILE_PICKER: PROFILE_PICKER_KEYS,
    Mode.CALENDAR_PICKER: CALENDAR_PICKER_KEYS,
    Mode.TAB_PICKER: TAB_PICKER_KEYS,
    Mode.SESSION_PICKER: SESSION_PICKER_KEYS,
    Mode.POLICY_VIEW: POLICY_VIEW_KEYS,
}

# Modes where unbound printable characters are typed into a text field.
TEXT_ENTRY_MODES: frozenset[Mode] = frozenset(
    {
        Mode.SERVICE_PICKER,
        Mode.FILTER_INPUT,
        Mode.EVENT_FILTER_INPUT,
        Mode.INSIGHTS_INPUT,
        Mode.REGION_PICKER,
        Mode.PROFILE_PICKER,
        Mode.TAB_PICKER,
        Mode.SESSION_PICKER,
    }
)

# Second keys accepted after the "g" prefix in normal mode.
PREFIX_KEY = "g"
PREFIX_SEQUENCES: dict[str, Action] = {
    "n": Action.NEXT_TAB,
    "p": Action.PREV_TAB,
}


class KeyMapper:
    """Stateful key translator.

    Holds the pending ``g`` prefix between key presses; every other lookup is
    a pure table read.
    """

    def __init__(self) -> None:
        self._pending_prefix = False

    @property
    def pending_prefix(self) -> bool:
        return self._pending_prefix

    def resolve(
        self, mode: Mode, key: str, character: str | None = None
    ) -> ActionEvent | None:
        """Translate one key press.

        Args:
            mode: Current interaction mode.
            key: Textual key name.
            character: Printable character for the key, if any.

        Returns:
            The action event, or None when the key is unbound.
        """
        if mode is Mode.NORMAL:
            if self._pending_prefix:
                self._pending_prefix = False
                sequence_action = PREFIX_SEQUENCES.get(key)
                if sequence_action is not None:
                    return ActionEvent(sequence_action)
            elif key == PREFIX_KEY:
                self._pending_prefix = True
                return None
        else:
            self._pending_prefix = False

        keymap = MODE_KEYMAPS.get(mode, {})
        action = keymap.get(key)
        if action is None and character:
            action = keymap.get(character)
        if action is not None:
            return ActionEvent(action)

        if character and character.isprintable() and len(character) == 1:
            if mode in TEXT_ENTRY_MODES:
                return ActionEvent.typed(character)
            if mode is Mode.NORMAL and character.isdigit():
                return ActionEvent.typed(character)

        logger.debug("Unbound key %s in mode %s", key, mode.value)
        return None


__all__ = [
    "MODE_KEYMAPS",
    "PREFIX_SEQUENCES",
    "TEXT_ENTRY_MODES",
    "KeyMapper",
]
