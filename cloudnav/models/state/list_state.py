"""Browsing state for one paginated collection.

``ListState`` keeps selection, scroll position, page size, the single
expanded row and the raw filter text for a list view. It never filters:
callers compute the derived (filtered/sorted) row count themselves and pass
it in as ``n`` wherever bounds matter. Every operation saturates instead of
raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from cloudnav.constants.defaults import PAGE_SIZE_DEFAULT
from cloudnav.constants.enums import PageSize

T = TypeVar("T")


@dataclass
class ListState(Generic[T]):
    """Selection, paging and expansion state of a list view."""

    items: list[T] = field(default_factory=list)
    selected: int = 0
    scroll_offset: int = 0
    filter: str = ""
    page_size: PageSize = PageSize(PAGE_SIZE_DEFAULT)
    expanded: int | None = None
    loading: bool = False

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_item(self, n: int) -> None:
        """Move selection down one row, clamped to the last row."""
        if n <= 0:
            self.selected = 0
            self.scroll_offset = 0
            return
        self.selected = min(self.selected + 1, n - 1)
        self._follow_selection()

    def prev_item(self) -> None:
        """Move selection up one row, clamped to the first row."""
        self.selected = max(self.selected - 1, 0)
        self._follow_selection()

    def page_down(self, n: int) -> None:
        """Move selection down by one page and snap to its page."""
        if n <= 0:
            self.reset()
            return
        self.selected = min(self.selected + int(self.page_size), n - 1)
        self.snap_to_page()

    def page_up(self) -> None:
        """Move selection up by one page and snap to its page."""
        self.selected = max(self.selected - int(self.page_size), 0)
        self.snap_to_page()

    def goto_page(self, page: int, n: int) -> None:
        """Jump to a 1-based page.

        Args:
            page: Page number; 0 is ignored.
            n: Number of rows in the derived view.
        """
        if page <= 0:
            return
        size = int(self.page_size)
        last_page_start = ((n - 1) // size) * size if n > 0 else 0
        offset = min((page - 1) * size, last_page_start)
        self.selected = offset
        self.scroll_offset = offset

    def snap_to_page(self) -> None:
        """Scroll to the page boundary containing the selection."""
        size = int(self.page_size)
        self.scroll_offset = (self.selected // size) * size

    def reset(self) -> None:
        """Zero selection, scroll and expansion."""
        self.selected = 0
        self.scroll_offset = 0
        self.expanded = None

    def clamp(self, n: int) -> None:
        """Re-establish bounds after the derived view changed size."""
        if n <= 0:
            self.selected = 0
            self.scroll_offset = 0
            self.expanded = None
            return
        self.selected = min(max(self.selected, 0), n - 1)
        if self.expanded is not None and self.expanded >= n:
            self.expanded = None
        self._follow_selection()

    def _follow_selection(self) -> None:
        size = int(self.page_size)
        if self.selected < self.scroll_offset:
            self.scroll_offset = self.selected
        elif self.selected >= self.scroll_offset + size:
            self.scroll_offset = self.selected - size + 1

    # =========================================================================
    # Paging
    # =========================================================================

    def current_page(self) -> int:
        """0-based index of the page holding the scroll offset."""
        return self.scroll_offset // int(self.page_size)

    def total_pages(self, n: int) -> int:
        size = int(self.page_size)
        return max(1, (n + size - 1) // size)

    def page_slice(self, rows: list[T]) -> list[T]:
        """Rows visible on the current page."""
        return rows[self.scroll_offset : self.scroll_offset + int(self.page_size)]

    def set_page_size(self, size: PageSize) -> None:
        self.page_size = PageSize(size)
        self.reset()

    # =========================================================================
    # Expansion
    # =========================================================================

    def toggle_expand(self) -> None:
        """Expand the selected row, or collapse it when already expanded.

        Expanding a different row moves the expansion, so at most one row
        is expanded at a time.
        """
        if self.expanded == self.selected:
            self.expanded = None
        else:
            self.expanded = self.selected

    def collapse(self) -> None:
        self.expanded = None

    def is_expanded(self) -> bool:
        """Whether the selected row is the expanded one."""
        return self.expanded is not None and self.expanded == self.selected

    def has_expanded_item(self) -> bool:
        return self.expanded is not None

    # =========================================================================
    # Contents
    # =========================================================================

    def set_items(self, items: list[T], n: int | None = None) -> None:
        """Replace the collection wholesale and clear the loading flag.

        Args:
            items: New collection.
            n: Size of the derived view, when it differs from ``len(items)``.
        """
        self.items = list(items)
        self.loading = False
        self.clamp(len(self.items) if n is None else n)

    # =========================================================================
    # Filter text
    # =========================================================================

    def filter_push(self, char: str) -> None:
        self.filter += char
        self.reset()

    def filter_pop(self) -> None:
        self.filter = self.filter[:-1]
        self.reset()

    def filter_delete_word(self) -> None:
        """Delete the last word of the filter text and trailing spaces."""
        self.filter = delete_last_word(self.filter)
        self.reset()

    def filter_clear(self) -> None:
        self.filter = ""
        self.reset()


def delete_last_word(text: str) -> str:
    """Remove the last whitespace-delimited word from ``text``."""
    stripped = text.rstrip()
    cut = stripped.rfind(" ")
    return "" if cut < 0 else stripped[: cut + 1]


__all__ = ["ListState", "delete_last_word"]
