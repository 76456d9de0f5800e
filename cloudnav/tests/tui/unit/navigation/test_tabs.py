"""Unit tests for TabManager."""

from __future__ import annotations

from cloudnav.constants.enums import ResourceKind
from cloudnav.navigation.tabs import TabManager, build_breadcrumb


def _three_tabs() -> TabManager:
    tabs = TabManager()
    tabs.open(ResourceKind.LOG_GROUPS, "Logs")
    tabs.open(ResourceKind.S3_BUCKETS, "Buckets")
    tabs.open(ResourceKind.SQS_QUEUES, "Queues")
    return tabs


class TestTabManager:
    """Test open, close and cycling."""

    def test_open_activates_new_tab(self) -> None:
        tabs = _three_tabs()
        assert len(tabs) == 3
        assert tabs.active is not None
        assert tabs.active.title == "Queues"

    def test_tab_ids_are_unique(self) -> None:
        tabs = _three_tabs()
        assert len({tab.tab_id for tab in tabs.tabs}) == 3

    def test_close_active_middle_tab_activates_right_neighbour(self) -> None:
        tabs = _three_tabs()
        tabs.activate(1)
        assert tabs.close(1) is True
        assert len(tabs) == 2
        assert tabs.active is not None
        assert tabs.active.title == "Queues"

    def test_close_active_last_tab_activates_new_last(self) -> None:
        tabs = _three_tabs()
        tabs.close_active()
        assert tabs.active is not None
        assert tabs.active.title == "Buckets"

    def test_close_tab_left_of_active_keeps_active(self) -> None:
        tabs = _three_tabs()
        tabs.close(0)
        assert tabs.active is not None
        assert tabs.active.title == "Queues"
        assert tabs.active_index == 1

    def test_close_tab_right_of_active_keeps_active(self) -> None:
        tabs = _three_tabs()
        tabs.activate(0)
        tabs.close(2)
        assert tabs.active is not None
        assert tabs.active.title == "Logs"

    def test_close_last_remaining_tab(self) -> None:
        tabs = TabManager()
        tabs.open(ResourceKind.ALARMS, "Alarms")
        assert tabs.close_active() is False
        assert tabs.is_empty()
        assert tabs.active is None

    def test_close_out_of_range_is_ignored(self) -> None:
        tabs = _three_tabs()
        assert tabs.close(7) is True
        assert len(tabs) == 3

    def test_next_and_prev_wrap(self) -> None:
        tabs = _three_tabs()
        tabs.next()
        assert tabs.active_index == 0
        tabs.prev()
        assert tabs.active_index == 2

    def test_lookup_by_id(self) -> None:
        tabs = _three_tabs()
        first = tabs.tabs[0]
        assert tabs.index_of(first.tab_id) == 0
        assert tabs.get(first.tab_id) is first
        assert tabs.index_of(999) is None

    def test_refresh_breadcrumb(self) -> None:
        tabs = _three_tabs()
        tab = tabs.tabs[1]
        tabs.refresh_breadcrumb(tab, ["assets", "a"])
        assert tab.breadcrumb == build_breadcrumb("Buckets", ["assets", "a"])
        assert tab.breadcrumb.startswith("Buckets")
        assert tab.breadcrumb.endswith("a")
