"""Unit tests for ListState.

This module tests:
- Item navigation and clamping
- Page jumps, paging and page slices
- Single-row expansion
- Filter text editing
"""

from __future__ import annotations

from cloudnav.constants.enums import PageSize
from cloudnav.models.state.list_state import ListState, delete_last_word


def _state(n: int = 23, page_size: PageSize = PageSize.TEN) -> ListState[int]:
    return ListState(items=list(range(n)), page_size=page_size)


# =============================================================================
# Navigation Tests
# =============================================================================


class TestListStateNavigation:
    """Test item and page movement."""

    def test_paging_scenario_on_23_items(self) -> None:
        """goto_page(3), next_item, then 21 prev_item calls return to the top."""
        state = _state()
        state.goto_page(3, 23)
        assert (state.selected, state.scroll_offset) == (20, 20)

        state.next_item(23)
        assert state.selected == 21

        for _ in range(21):
            state.prev_item()
        assert (state.selected, state.scroll_offset) == (0, 0)

    def test_next_item_saturates_at_last_row(self) -> None:
        state = _state(3)
        for _ in range(10):
            state.next_item(3)
        assert state.selected == 2

    def test_prev_item_saturates_at_zero(self) -> None:
        state = _state()
        state.prev_item()
        assert state.selected == 0

    def test_next_item_on_empty_view_resets(self) -> None:
        state = _state(0)
        state.selected = 4
        state.next_item(0)
        assert (state.selected, state.scroll_offset) == (0, 0)

    def test_selection_scrolls_into_view(self) -> None:
        """Moving past the page bottom scrolls by one row."""
        state = _state()
        for _ in range(10):
            state.next_item(23)
        assert state.selected == 10
        assert state.scroll_offset == 1

    def test_page_down_snaps_to_page_boundary(self) -> None:
        state = _state()
        state.selected = 3
        state.page_down(23)
        assert (state.selected, state.scroll_offset) == (13, 10)

    def test_page_down_clamps_to_last_row(self) -> None:
        state = _state()
        state.goto_page(3, 23)
        state.page_down(23)
        assert state.selected == 22
        assert state.scroll_offset == 20

    def test_page_up_stops_at_first_page(self) -> None:
        state = _state()
        state.selected = 4
        state.page_up()
        assert (state.selected, state.scroll_offset) == (0, 0)


# =============================================================================
# Page Jump Tests
# =============================================================================


class TestListStateGotoPage:
    """Test goto_page semantics."""

    def test_current_page_matches_requested_page(self) -> None:
        state = _state(95)
        for page in range(1, 11):
            state.goto_page(page, 95)
            assert state.current_page() == page - 1

    def test_page_zero_is_ignored(self) -> None:
        state = _state()
        state.goto_page(2, 23)
        state.goto_page(0, 23)
        assert state.selected == 10

    def test_page_past_end_clamps_to_last_page(self) -> None:
        state = _state()
        state.goto_page(99, 23)
        assert (state.selected, state.scroll_offset) == (20, 20)

    def test_goto_page_on_empty_view(self) -> None:
        state = _state(0)
        state.goto_page(4, 0)
        assert (state.selected, state.scroll_offset) == (0, 0)

    def test_total_pages_is_at_least_one(self) -> None:
        state = _state(0)
        assert state.total_pages(0) == 1
        assert state.total_pages(23) == 3

    def test_page_slice(self) -> None:
        state = _state()
        state.goto_page(3, 23)
        assert state.page_slice(state.items) == [20, 21, 22]


# =============================================================================
# Clamp Tests
# =============================================================================


class TestListStateClamp:
    """Test bounds after the derived view shrinks."""

    def test_clamp_pulls_selection_inside(self) -> None:
        state = _state()
        state.goto_page(3, 23)
        state.next_item(23)
        state.clamp(5)
        assert state.selected == 4
        assert state.scroll_offset <= state.selected

    def test_clamp_to_empty_resets(self) -> None:
        state = _state()
        state.selected = 7
        state.expanded = 7
        state.clamp(0)
        assert (state.selected, state.scroll_offset, state.expanded) == (0, 0, None)

    def test_clamp_drops_expansion_outside_view(self) -> None:
        state = _state()
        state.expanded = 12
        state.clamp(5)
        assert state.expanded is None

    def test_set_items_clamps_and_clears_loading(self) -> None:
        state = _state()
        state.loading = True
        state.selected = 15
        state.set_items([1, 2])
        assert state.loading is False
        assert state.selected == 1

    def test_set_page_size_resets_position(self) -> None:
        state = _state()
        state.goto_page(2, 23)
        state.set_page_size(PageSize.TWENTY_FIVE)
        assert state.page_size is PageSize.TWENTY_FIVE
        assert (state.selected, state.scroll_offset) == (0, 0)


# =============================================================================
# Expansion Tests
# =============================================================================


class TestListStateExpansion:
    """Test single-row expansion."""

    def test_toggle_twice_returns_to_collapsed(self) -> None:
        state = _state()
        state.selected = 3
        state.toggle_expand()
        assert state.is_expanded()
        state.toggle_expand()
        assert not state.has_expanded_item()

    def test_expanding_another_row_moves_expansion(self) -> None:
        state = _state()
        state.toggle_expand()
        state.next_item(23)
        state.toggle_expand()
        assert state.expanded == 1

    def test_is_expanded_only_for_selected_row(self) -> None:
        state = _state()
        state.toggle_expand()
        state.next_item(23)
        assert state.has_expanded_item()
        assert not state.is_expanded()


# =============================================================================
# Filter Text Tests
# =============================================================================


class TestListStateFilterText:
    """Test filter text editing."""

    def test_push_and_pop_reset_selection(self) -> None:
        state = _state()
        state.selected = 9
        state.filter_push("a")
        assert state.filter == "a"
        assert state.selected == 0
        state.selected = 4
        state.filter_pop()
        assert state.filter == ""
        assert state.selected == 0

    def test_pop_on_empty_filter(self) -> None:
        state = _state()
        state.filter_pop()
        assert state.filter == ""

    def test_delete_word(self) -> None:
        state = _state()
        state.filter = "error timeout  "
        state.filter_delete_word()
        assert state.filter == "error "

    def test_delete_last_word_helper(self) -> None:
        assert delete_last_word("one") == ""
        assert delete_last_word("one two") == "one "
        assert delete_last_word("") == ""
