"""Unit tests for the read-only render snapshot."""

from __future__ import annotations

from datetime import date

import pytest

from cloudnav.constants.enums import FocusKind, Mode, ResourceKind
from cloudnav.keyboard.actions import Action
from cloudnav.navigation.snapshot import build_snapshot


def _snapshot(harness):
    return build_snapshot(harness.state, harness.registry)


# =============================================================================
# View Snapshot Tests
# =============================================================================


class TestViewSnapshot:
    """Test the active view section of the snapshot."""

    def test_no_tabs(self, harness) -> None:
        snapshot = _snapshot(harness)
        assert snapshot.view is None
        assert snapshot.tabs == ()
        assert snapshot.breadcrumb == ""
        assert snapshot.overlay is None
        assert (snapshot.profile, snapshot.region) == ("dev", "us-east-1")

    @pytest.mark.asyncio
    async def test_first_page_of_list(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        view = _snapshot(harness).view
        assert view is not None
        assert view.columns == ("name", "retention", "stored_bytes", "created")
        assert len(view.rows) == 10
        assert view.row_count == 23
        assert (view.page, view.total_pages) == (1, 3)
        assert view.rows[0].selected is True
        assert view.rows[0].cells[0] == "service-01"
        assert view.loading is False

    @pytest.mark.asyncio
    async def test_last_page_after_goto(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.FILTER_INPUT, "9")
        assert _snapshot(harness).pending_page == "9"
        harness.press(Action.SELECT)

        view = _snapshot(harness).view
        assert view is not None
        assert view.page == 3
        assert [row.cells[0] for row in view.rows] == ["service-21", "service-22", "service-23"]

    @pytest.mark.asyncio
    async def test_tab_row_and_breadcrumb(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.press(Action.SELECT)

        snapshot = _snapshot(harness)
        assert [tab.active for tab in snapshot.tabs] == [False, True]
        assert snapshot.breadcrumb == "S3 > Buckets > assets"
        assert snapshot.view is not None
        assert snapshot.view.sub_tabs == ("objects", "properties")
        assert snapshot.view.active_sub_tab == "objects"
        assert snapshot.view.loading is True

    @pytest.mark.asyncio
    async def test_hidden_columns_drop_cells(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        target = harness.dispatcher.target()
        assert target is not None
        target.slot.hidden_columns.add("metric")

        view = _snapshot(harness).view
        assert view is not None
        assert view.columns == ("name", "status", "updated")
        assert view.rows[0].cells == ("cpu-high", "ALARM", "2024-05-01")

    @pytest.mark.asyncio
    async def test_expanded_row_details(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.SELECT)
        rows = _snapshot(harness).view.rows
        assert rows[0].expanded is True
        assert rows[0].details == (("metric", "CPUUtilization"), ("updated", "2024-05-01"))
        assert rows[1].details == ()

    @pytest.mark.asyncio
    async def test_tree_rows_with_placeholder(self, harness) -> None:
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.press(Action.SELECT)
        await harness.settle()
        harness.press(Action.EXPAND_ROW)

        rows = _snapshot(harness).view.rows
        assert [row.placeholder for row in rows] == [False, True, False]
        assert rows[0].is_branch is True
        assert rows[0].expanded is True
        assert rows[1].depth == 1

        await harness.settle()
        rows = _snapshot(harness).view.rows
        assert [row.key for row in rows] == ["a/", "a/b/", "readme.txt"]

    @pytest.mark.asyncio
    async def test_controls_follow_focus(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.START_FILTER)
        harness.type("cpu")
        harness.press(Action.NEXT_FILTER_FOCUS)

        controls = _snapshot(harness).view.controls
        assert [c.name for c in controls] == ["filter", "status", "pagination"]
        assert controls[0].value == "cpu"
        assert controls[1].focused is True
        assert controls[1].kind is FocusKind.DROPDOWN
        assert controls[1].options[0] == "All"

    @pytest.mark.asyncio
    async def test_sort_state(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.CYCLE_SORT_COLUMN)
        harness.press(Action.CYCLE_SORT_COLUMN)
        view = _snapshot(harness).view
        assert view.sort_column == "status"
        assert [row.cells[1] for row in view.rows] == ["ALARM", "INSUFFICIENT_DATA", "OK"]


# =============================================================================
# Overlay Snapshot Tests
# =============================================================================


class TestOverlaySnapshot:
    """Test overlays for pickers and modals."""

    def test_service_picker_page(self, harness) -> None:
        harness.dispatcher.open_service_picker()
        overlay = _snapshot(harness).overlay
        assert overlay is not None
        assert overlay.title == "Services"
        assert overlay.rows[0] == "CloudWatch > Log Groups"
        assert overlay.selected == 0
        assert len(overlay.rows) == 15

    def test_picker_filter_text(self, harness) -> None:
        harness.dispatcher.open_service_picker()
        harness.type("iam")
        overlay = _snapshot(harness).overlay
        assert overlay.filter == "iam"
        assert overlay.rows == ("IAM > Users", "IAM > Roles", "IAM > User Groups")

    def test_empty_picker_has_no_selection(self, harness) -> None:
        harness.dispatcher.open_service_picker()
        harness.type("nothing-matches")
        overlay = _snapshot(harness).overlay
        assert overlay.rows == ()
        assert overlay.selected is None

    @pytest.mark.asyncio
    async def test_error_overlay(self, harness) -> None:
        harness.source.fail(ResourceKind.ALARMS, "line one\nline two")
        await harness.open(ResourceKind.ALARMS)
        overlay = _snapshot(harness).overlay
        assert overlay.title == "Error (fetch)"
        assert overlay.rows == ("line one", "line two")

    @pytest.mark.asyncio
    async def test_calendar_overlay(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.SELECT)
        await harness.settle()
        harness.press(Action.SELECT)
        await harness.settle()
        target = harness.dispatcher.target()
        target.slot.controls["start_date"] = "2024-02-29"
        harness.press(Action.OPEN_CALENDAR)

        overlay = _snapshot(harness).overlay
        assert overlay.mode is Mode.CALENDAR_PICKER
        assert overlay.title == "February 2024"
        assert overlay.cursor == date(2024, 2, 29)
        assert max(max(week) for week in overlay.weeks) == 29

    @pytest.mark.asyncio
    async def test_column_selector_checkboxes(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.OPEN_COLUMN_SELECTOR)
        harness.press(Action.TOGGLE_COLUMN)
        overlay = _snapshot(harness).overlay
        assert overlay.title == "Columns"
        assert overlay.checked == (False, True, True, True)

        harness.press(Action.NEXT_PREFERENCES)
        overlay = _snapshot(harness).overlay
        assert overlay.title == "Page size"
        assert overlay.rows == ("10", "25", "50", "100")
        assert overlay.checked == (True, False, False, False)

    def test_help_lists_normal_keys(self, harness) -> None:
        harness.press(Action.SHOW_HELP)
        overlay = _snapshot(harness).overlay
        assert overlay.title == "Help"
        assert "q: quit" in overlay.rows
