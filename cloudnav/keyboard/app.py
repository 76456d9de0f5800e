"""App-level keyboard bindings.

This module contains Textual Binding objects for bindings that bypass the
mode key maps and work from any mode.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "app.quit", "Quit", priority=True, show=False),
]

__all__ = [
    "APP_BINDINGS",
]
