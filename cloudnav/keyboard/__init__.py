"""Keyboard module.

This module provides all keyboard handling for the CloudNav TUI:

- actions: The closed Action set and ActionEvent payload
- keymap: Per-mode key maps and the KeyMapper translator
- app: App-level Textual bindings (APP_BINDINGS)
"""

from cloudnav.keyboard.actions import ACTION_SCHEMA_VERSION, Action, ActionEvent
from cloudnav.keyboard.app import APP_BINDINGS
from cloudnav.keyboard.keymap import MODE_KEYMAPS, KeyMapper

__all__ = [
    "ACTION_SCHEMA_VERSION",
    "APP_BINDINGS",
    "MODE_KEYMAPS",
    "Action",
    "ActionEvent",
    "KeyMapper",
]
