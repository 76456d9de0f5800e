"""Open tabs and their breadcrumbs."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass

from cloudnav.constants.enums import ResourceKind
from cloudnav.constants.values import BREADCRUMB_SEPARATOR

logger = logging.getLogger(__name__)


@dataclass
class Tab:
    """One open service tab."""

    tab_id: int
    kind: ResourceKind
    title: str
    breadcrumb: str


def build_breadcrumb(title: str, parts: list[str]) -> str:
    """Join the service title with drill labels and prefix segments."""
    return BREADCRUMB_SEPARATOR.join([title, *parts])


class TabManager:
    """Ordered tabs with one active tab.

    Breadcrumbs are only written through ``refresh_breadcrumb``.
    """

    def __init__(self) -> None:
        self.tabs: list[Tab] = []
        self.active_index = 0
        self._ids = itertools.count(1)

    @property
    def active(self) -> Tab | None:
        if not self.tabs:
            return None
        return self.tabs[self.active_index]

    def __len__(self) -> int:
        return len(self.tabs)

    def is_empty(self) -> bool:
        return not self.tabs

    def open(self, kind: ResourceKind, title: str) -> Tab:
        """Append a tab and make it active."""
        tab = Tab(tab_id=next(self._ids), kind=kind, title=title, breadcrumb=title)
        self.tabs.append(tab)
        self.active_index = len(self.tabs) - 1
        logger.debug("Opened tab %d for %s", tab.tab_id, kind.value)
        return tab

    def close(self, index: int) -> bool:
        """Close the tab at ``index``.

        When the active tab closes, the tab now at the same index becomes
        active, or the last one when the closed tab was last. Closing another
        tab keeps the active tab.

        Returns:
            False when no tab remains.
        """
        if not 0 <= index < len(self.tabs):
            return bool(self.tabs)
        was_active = index == self.active_index
        self.tabs.pop(index)
        if not self.tabs:
            self.active_index = 0
            return False
        if was_active:
            self.active_index = min(index, len(self.tabs) - 1)
        elif index < self.active_index:
            self.active_index -= 1
        return True

    def close_active(self) -> bool:
        return self.close(self.active_index)

    def next(self) -> None:
        if self.tabs:
            self.active_index = (self.active_index + 1) % len(self.tabs)

    def prev(self) -> None:
        if self.tabs:
            self.active_index = (self.active_index - 1) % len(self.tabs)

    def activate(self, index: int) -> None:
        if self.tabs:
            self.active_index = min(max(index, 0), len(self.tabs) - 1)

    def index_of(self, tab_id: int) -> int | None:
        for position, tab in enumerate(self.tabs):
            if tab.tab_id == tab_id:
                return position
        return None

    def get(self, tab_id: int) -> Tab | None:
        position = self.index_of(tab_id)
        return self.tabs[position] if position is not None else None

    def refresh_breadcrumb(self, tab: Tab, parts: list[str]) -> None:
        tab.breadcrumb = build_breadcrumb(tab.title, parts)

    def clear(self) -> None:
        self.tabs.clear()
        self.active_index = 0


__all__ = ["Tab", "TabManager", "build_breadcrumb"]
