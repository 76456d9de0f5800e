"""Unit tests for normal-mode dispatching.

This module tests:
- Drill-down, sub-tabs and GO_BACK unwinding
- Page number buffering
- Prefix trees: expansion, child fetches and prefix drill-in
- API Gateway resource trees and CloudTrail event records
- Tabs, sorting and effect-only actions
"""

from __future__ import annotations

import json

import pytest

from cloudnav.constants.enums import EffectKind, Mode, ResourceKind
from cloudnav.keyboard.actions import Action

# =============================================================================
# Drill-down Tests
# =============================================================================


class TestDrillDown:
    """Test drilling into containers and unwinding."""

    @pytest.mark.asyncio
    async def test_open_service_loads_root_list(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        target = harness.dispatcher.target()
        assert target is not None
        assert harness.state.mode is Mode.NORMAL
        assert harness.dispatcher.row_count(target) == 23
        assert target.slot.list_state.loading is False

    @pytest.mark.asyncio
    async def test_select_drills_into_streams(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.SELECT)
        await harness.settle()

        view = harness.state.active_view
        assert view is not None
        assert view.depth == 1
        assert view.level.sub_tab == "streams"
        target = harness.dispatcher.target()
        assert target is not None
        # Two of the seven demo streams are expired and hidden by default.
        assert harness.dispatcher.row_count(target) == 5
        assert harness.state.tabs.active is not None
        assert harness.state.tabs.active.breadcrumb.endswith(" > service-01")

    @pytest.mark.asyncio
    async def test_sub_tab_switch_loads_lazily(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.SELECT)
        await harness.settle()

        harness.press(Action.NEXT_DETAIL_TAB)
        assert len(harness.pending) == 1
        await harness.settle()
        target = harness.dispatcher.target()
        assert target is not None
        assert target.level.sub_tab == "tags"
        assert [item.key for item in target.slot.list_state.items] == ["team", "env"]

        harness.press(Action.PREV_DETAIL_TAB)
        assert harness.pending == []

    @pytest.mark.asyncio
    async def test_go_back_restores_parent_selection(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.SELECT)
        await harness.settle()

        harness.press(Action.GO_BACK)
        view = harness.state.active_view
        assert view is not None
        assert view.depth == 0
        assert harness.selected_key() == "/aws/lambda/service-03"
        assert harness.state.tabs.active is not None
        assert harness.state.tabs.active.breadcrumb == "CloudWatch > Log Groups"

    @pytest.mark.asyncio
    async def test_go_back_collapses_expanded_row_first(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.SELECT)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.list_state.is_expanded()

        harness.press(Action.GO_BACK)
        assert not target.slot.list_state.has_expanded_item()
        assert harness.state.mode is Mode.NORMAL

    @pytest.mark.asyncio
    async def test_go_back_at_root_opens_service_picker(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.GO_BACK)
        assert harness.state.mode is Mode.SERVICE_PICKER
        assert len(harness.state.tabs) == 1

    @pytest.mark.asyncio
    async def test_events_are_scoped_by_group_and_stream(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.SELECT)
        await harness.settle()
        harness.press(Action.SELECT)
        await harness.settle()

        target = harness.dispatcher.target()
        assert target is not None
        assert target.level.depth == 2
        assert harness.dispatcher.row_count(target) == 12
        last_call = harness.source.calls[-1]
        assert last_call[2].parents == (
            "/aws/lambda/service-01",
            "2024/05/03/[$LATEST]0003",
        )

    @pytest.mark.asyncio
    async def test_select_on_empty_list_does_nothing(self, harness) -> None:
        await harness.open(ResourceKind.LAMBDA_FUNCTIONS)
        harness.press(Action.SELECT)
        view = harness.state.active_view
        assert view is not None
        assert view.depth == 0


# =============================================================================
# Page Number Buffer Tests
# =============================================================================


class TestPageBuffer:
    """Test typed page numbers in normal mode."""

    @pytest.mark.asyncio
    async def test_digits_then_select_jumps_without_drilling(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.FILTER_INPUT, "2")
        assert harness.state.pending_page == "2"

        harness.press(Action.SELECT)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.level.depth == 0
        assert target.slot.list_state.selected == 10
        assert harness.state.pending_page == ""

    @pytest.mark.asyncio
    async def test_other_action_commits_then_runs(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.FILTER_INPUT, "3")
        harness.press(Action.NEXT_ITEM)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.list_state.selected == 21

    @pytest.mark.asyncio
    async def test_page_zero_is_ignored(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.FILTER_INPUT, "0")
        harness.press(Action.SELECT)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.list_state.selected == 1

    @pytest.mark.asyncio
    async def test_buffer_length_is_bounded(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        for _ in range(20):
            harness.press(Action.FILTER_INPUT, "9")
        assert len(harness.state.pending_page) == 6


# =============================================================================
# Prefix Tree Tests
# =============================================================================


class TestPrefixTree:
    """Test hierarchical object listings."""

    async def _objects(self, harness) -> None:
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.press(Action.SELECT)
        await harness.settle()

    @pytest.mark.asyncio
    async def test_expand_fetches_children_once(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.EXPAND_ROW)
        assert len(harness.pending) == 1
        assert harness.pending[0].request.child_path == "a/"
        await harness.settle()

        harness.press(Action.COLLAPSE_ROW)
        harness.press(Action.EXPAND_ROW)
        assert harness.pending == []

    @pytest.mark.asyncio
    async def test_nested_expansion_reaches_leaf(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.EXPAND_ROW)
        await harness.settle()
        harness.press(Action.NEXT_ITEM)
        assert harness.selected_key() == "a/b/"
        harness.press(Action.EXPAND_ROW)
        await harness.settle()
        harness.press(Action.NEXT_ITEM)
        assert harness.selected_key() == "a/b/c.txt"

        target = harness.dispatcher.target()
        assert target is not None
        assert harness.dispatcher.row_count(target) == 4

    @pytest.mark.asyncio
    async def test_collapse_on_child_moves_to_parent(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.EXPAND_ROW)
        await harness.settle()
        harness.press(Action.EXPAND_ROW)
        assert harness.selected_key() == "a/b/"

        harness.press(Action.COLLAPSE_ROW)
        assert harness.selected_key() == "a/"

    @pytest.mark.asyncio
    async def test_pending_branch_shows_placeholder(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.EXPAND_ROW)
        target = harness.dispatcher.target()
        assert target is not None
        assert harness.dispatcher.row_count(target) == 3
        harness.press(Action.NEXT_ITEM)
        assert harness.selected_key() is None

    @pytest.mark.asyncio
    async def test_prefix_drill_and_back(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.SELECT)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.path_stack == ["a/"]
        await harness.settle()
        assert [item.key for item in target.slot.list_state.items] == ["a/b/"]
        assert harness.state.tabs.active is not None
        assert harness.state.tabs.active.breadcrumb.endswith(" > assets > a")

        harness.press(Action.GO_BACK)
        await harness.settle()
        assert target.slot.path_stack == []
        assert [item.key for item in target.slot.list_state.items] == ["a/", "readme.txt"]

    @pytest.mark.asyncio
    async def test_select_on_leaf_object_is_noop(self, harness) -> None:
        await self._objects(harness)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.SELECT)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.path_stack == []
        assert harness.pending == []


# =============================================================================
# Service Catalog Tests
# =============================================================================


class TestApiGateway:
    """Test API resource trees and stages."""

    async def _resources(self, harness) -> None:
        await harness.open(ResourceKind.APIGATEWAY_APIS)
        harness.press(Action.SELECT)
        await harness.settle()

    @pytest.mark.asyncio
    async def test_drill_shows_resource_roots(self, harness) -> None:
        await self._resources(harness)
        view = harness.state.active_view
        assert view is not None
        assert view.level.sub_tab == "resources"
        target = harness.dispatcher.target()
        assert target is not None
        assert target.spec.tree is True
        assert [item.key for item in target.slot.list_state.items] == ["/orders/", "/health"]

    @pytest.mark.asyncio
    async def test_expand_resource_fetches_nested_paths(self, harness) -> None:
        await self._resources(harness)
        harness.press(Action.EXPAND_ROW)
        assert len(harness.pending) == 1
        assert harness.pending[0].request.child_path == "/orders/"
        await harness.settle()

        harness.press(Action.NEXT_ITEM)
        assert harness.selected_key() == "/orders/{id}/"
        target = harness.dispatcher.target()
        assert target is not None
        assert harness.dispatcher.row_count(target) == 3

    @pytest.mark.asyncio
    async def test_stages_tab(self, harness) -> None:
        await self._resources(harness)
        harness.press(Action.NEXT_DETAIL_TAB)
        await harness.settle()
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.sub_tab == "stages"
        assert harness.dispatcher.row_count(target) == 2


class TestCloudTrail:
    """Test event history drill-down."""

    async def _event(self, harness) -> None:
        await harness.open(ResourceKind.CLOUDTRAIL_EVENTS)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.SELECT)
        await harness.settle()

    @pytest.mark.asyncio
    async def test_drill_lists_referenced_resources(self, harness) -> None:
        await self._event(harness)
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.sub_tab == "resources"
        assert [item.key for item in target.slot.list_state.items] == ["assets"]

    @pytest.mark.asyncio
    async def test_event_record_opens_viewer(self, harness) -> None:
        await self._event(harness)
        harness.press(Action.NEXT_DETAIL_TAB)
        await harness.settle()
        harness.press(Action.SELECT)

        assert harness.state.mode is Mode.POLICY_VIEW
        viewer = harness.state.viewer
        assert viewer is not None
        assert viewer.title == "Event record"
        assert json.loads(viewer.text)["eventName"] == "PutObject"


# =============================================================================
# Stale Result Tests
# =============================================================================


class TestLastRequestWins:
    """Test that superseded fetches never land."""

    @pytest.mark.asyncio
    async def test_older_refresh_is_discarded(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.REFRESH)
        harness.press(Action.REFRESH)
        assert len(harness.pending) == 2
        await harness.settle()
        assert harness.coordinator.discarded == 1

    @pytest.mark.asyncio
    async def test_context_switch_discards_inflight_results(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.REFRESH)
        harness.dispatcher.change_context(region="eu-west-1")
        harness.drain()
        assert len(harness.pending) == 2
        assert harness.pending[1].request.context_key == "dev@eu-west-1"

        await harness.settle()
        assert harness.coordinator.discarded == 1
        target = harness.dispatcher.target()
        assert target is not None
        assert target.slot.needs_reload is False

    @pytest.mark.asyncio
    async def test_context_switch_marks_other_tabs_stale(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.dispatcher.change_context(profile="prod")
        harness.drain()
        await harness.settle()

        harness.press(Action.PREV_TAB)
        assert len(harness.pending) == 1
        assert harness.pending[0].request.kind is ResourceKind.ALARMS

    @pytest.mark.asyncio
    async def test_closed_tab_result_is_discarded(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.REFRESH)
        harness.press(Action.CLOSE_TAB)
        await harness.settle()
        assert harness.coordinator.discarded == 1


# =============================================================================
# Tabs, Sorting and Effects Tests
# =============================================================================


class TestTabsAndEffects:
    """Test tab cycling, sorting and effect-only actions."""

    @pytest.mark.asyncio
    async def test_closing_last_tab_opens_service_picker(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.CLOSE_SERVICE)
        assert harness.state.tabs.is_empty()
        assert harness.state.mode is Mode.SERVICE_PICKER

    @pytest.mark.asyncio
    async def test_next_and_prev_tab(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.press(Action.NEXT_TAB)
        assert harness.state.tabs.active_index == 0
        harness.press(Action.PREV_TAB)
        assert harness.state.tabs.active_index == 1

    @pytest.mark.asyncio
    async def test_views_keep_their_state_per_tab(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.NEXT_ITEM)
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.PREV_TAB)
        assert harness.selected_key() == "/aws/lambda/service-02"

    @pytest.mark.asyncio
    async def test_cycle_sort_column_wraps_to_source_order(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        target = harness.dispatcher.target()
        assert target is not None
        seen = []
        for _ in range(4):
            harness.press(Action.CYCLE_SORT_COLUMN)
            seen.append(harness.dispatcher.presenter.sort_column(target.spec, target.slot))
        assert seen == ["name", "stored_bytes", "created", None]

    @pytest.mark.asyncio
    async def test_toggle_sort_direction_reverses(self, harness) -> None:
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.CYCLE_SORT_COLUMN)
        harness.press(Action.TOGGLE_SORT_DIRECTION)
        assert harness.selected_key() == "/aws/lambda/service-23"

    @pytest.mark.asyncio
    async def test_quit_yank_console_and_copy(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        harness.press(Action.YANK)
        harness.press(Action.OPEN_IN_CONSOLE)
        harness.press(Action.COPY_TO_CLIPBOARD)
        harness.press(Action.QUIT)

        assert harness.effect_kinds() == [
            EffectKind.COPY,
            EffectKind.OPEN_CONSOLE,
            EffectKind.COPY_SCREEN,
            EffectKind.QUIT,
        ]
        assert harness.effects[0].payload == "cpu-high"
        assert harness.effects[1].payload["region"] == "us-east-1"
        assert harness.state.running is False

    @pytest.mark.asyncio
    async def test_unbound_action_for_mode_is_ignored(self, harness) -> None:
        await harness.open(ResourceKind.ALARMS)
        assert harness.press(Action.CALENDAR_NEXT_DAY) == []
        assert harness.state.mode is Mode.NORMAL
