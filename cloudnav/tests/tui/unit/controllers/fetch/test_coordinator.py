"""Tests for the fetch coordinator."""

from __future__ import annotations

import pytest

from cloudnav.constants.enums import ErrorKind, Mode, ResourceKind
from cloudnav.keyboard.actions import Action

# =============================================================================
# Execution Tests
# =============================================================================


class TestExecute:
    """Tests for running requests against the data source."""

    @pytest.mark.asyncio
    async def test_execute_returns_items(self, harness) -> None:
        """Test that a list request returns the source's items."""
        harness.dispatcher.open_service(ResourceKind.ALARMS)
        harness.drain()
        outcome = await harness.coordinator.execute(harness.pending[0].request)
        assert outcome.success is True
        assert [item.key for item in outcome.items] == ["cpu-high", "disk-low", "errors"]
        assert outcome.duration_ms >= 0.0

    @pytest.mark.asyncio
    async def test_execute_captures_errors(self, harness) -> None:
        """Test that fetch errors become outcomes instead of exceptions."""
        harness.source.fail(ResourceKind.ALARMS, "throttled")
        harness.dispatcher.open_service(ResourceKind.ALARMS)
        harness.drain()
        outcome = await harness.coordinator.execute(harness.pending[0].request)
        assert outcome.success is False
        assert outcome.error == "throttled"
        assert outcome.credential_error is False

    @pytest.mark.asyncio
    async def test_execute_flags_credential_errors(self, harness) -> None:
        """Test that credential errors are flagged on the outcome."""
        harness.source.fail(ResourceKind.ALARMS, "no credentials", credential=True)
        harness.dispatcher.open_service(ResourceKind.ALARMS)
        harness.drain()
        outcome = await harness.coordinator.execute(harness.pending[0].request)
        assert outcome.credential_error is True

    @pytest.mark.asyncio
    async def test_execute_captures_unexpected_errors(self, harness, monkeypatch) -> None:
        """Test that a source bug surfaces as an error modal instead of escaping."""

        async def broken_list(kind, scope):
            raise RuntimeError("boom")

        monkeypatch.setattr(harness.source, "list", broken_list)
        harness.dispatcher.open_service(ResourceKind.ALARMS)
        harness.drain()
        outcome = await harness.coordinator.execute(harness.pending[0].request)
        assert outcome.success is False
        assert outcome.error == "RuntimeError: boom"

        harness.coordinator.deliver(harness.state, outcome)
        assert harness.state.mode is Mode.ERROR_MODAL
        assert harness.state.error.kind is ErrorKind.FETCH

    @pytest.mark.asyncio
    async def test_execute_query_polls_until_complete(self, harness) -> None:
        """Test that query requests start and poll the query."""
        await harness.open(ResourceKind.INSIGHTS)
        harness.press(Action.START_FILTER)
        harness.type("stats count(*)")
        harness.press(Action.SELECT)
        outcome = await harness.coordinator.execute(harness.pending[0].request)
        assert len(outcome.items) == 5
        assert [call[0] for call in harness.source.calls] == ["query"]
        assert harness.source.calls[0][3] == "stats count(*)"

    @pytest.mark.asyncio
    async def test_execute_scope_carries_parents(self, harness) -> None:
        """Test that drilled requests carry the parent keys."""
        await harness.open(ResourceKind.SQS_QUEUES)
        harness.press(Action.NEXT_ITEM)
        harness.press(Action.SELECT)
        await harness.settle()
        _, kind, scope, _ = harness.source.calls[-1]
        assert kind is ResourceKind.SQS_QUEUES
        assert scope.parents == ("orders.fifo",)
        assert scope.sub_tab == "details"
        assert scope.depth == 1


# =============================================================================
# Delivery Tests
# =============================================================================


class TestDeliver:
    """Tests for routing outcomes back into the state."""

    @pytest.mark.asyncio
    async def test_result_for_popped_level_is_discarded(self, harness) -> None:
        """Test that leaving a level before its result arrives drops the result."""
        await harness.open(ResourceKind.LOG_GROUPS)
        harness.press(Action.SELECT)
        harness.press(Action.GO_BACK)
        await harness.settle()

        assert harness.coordinator.discarded == 1
        target = harness.dispatcher.target()
        assert target is not None
        assert target.level.depth == 0
        assert harness.dispatcher.row_count(target) == 23

    @pytest.mark.asyncio
    async def test_only_latest_child_request_applies(self, harness) -> None:
        """Test that an older child fetch for the same branch is discarded."""
        await harness.open(ResourceKind.S3_BUCKETS)
        harness.press(Action.SELECT)
        await harness.settle()

        target = harness.dispatcher.target()
        assert target is not None
        for _ in range(2):
            harness.dispatcher.request_children(
                target.tab, target.view, target.level, target.slot, "a/"
            )
        harness.drain()
        assert [effect.request.seq for effect in harness.pending] == [1, 2]

        await harness.settle()
        assert harness.coordinator.discarded == 1
        assert [item.key for item in target.slot.tree.previews["a/"]] == ["a/b/"]

    @pytest.mark.asyncio
    async def test_failure_keeps_existing_items(self, harness) -> None:
        """Test that a failed refresh leaves the last good items in place."""
        await harness.open(ResourceKind.ALARMS)
        harness.source.fail(ResourceKind.ALARMS, "throttled")
        harness.press(Action.REFRESH)
        await harness.settle()

        assert harness.state.mode is Mode.ERROR_MODAL
        assert harness.state.error.kind is ErrorKind.FETCH
        target = harness.dispatcher.target()
        assert target is not None
        assert len(target.slot.list_state.items) == 3
        assert target.slot.list_state.loading is False

    @pytest.mark.asyncio
    async def test_stale_failure_is_silent(self, harness) -> None:
        """Test that a superseded failing request raises no error modal."""
        await harness.open(ResourceKind.ALARMS)
        harness.source.fail(ResourceKind.ALARMS, "throttled")
        harness.press(Action.REFRESH)
        failing = harness.pending.pop()
        harness.source.recover()
        harness.press(Action.REFRESH)

        outcome = await harness.coordinator.execute(failing.request)
        await harness.settle()
        harness.coordinator.deliver(harness.state, outcome)

        assert harness.state.mode is Mode.NORMAL
        assert harness.state.error is None
        assert harness.coordinator.discarded == 1
