"""Main application class for CloudNav."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import DataTable, Static

from cloudnav.constants import APP_TITLE
from cloudnav.constants.enums import EffectKind, FocusKind, Mode
from cloudnav.constants.values import EMPTY_LABEL, LOADING_LABEL
from cloudnav.controllers.base import DataSource
from cloudnav.controllers.fetch import FetchCoordinator
from cloudnav.controllers.insights import QueryPoller
from cloudnav.controllers.profiles import load_profiles
from cloudnav.controllers.regions import RegionLatencyProber
from cloudnav.keyboard.app import APP_BINDINGS
from cloudnav.keyboard.keymap import KeyMapper
from cloudnav.models.core.resources import ConnectionContext, ProfileInfo
from cloudnav.models.state.app_settings import AppSettings
from cloudnav.models.state.app_state import AppState
from cloudnav.navigation.dispatcher import ActionDispatcher
from cloudnav.navigation.effects import Effect, FetchRequest
from cloudnav.navigation.snapshot import OverlaySnapshot, Snapshot, ViewSnapshot, build_snapshot
from cloudnav.navigation.view_config import build_registry
from cloudnav.utils.session_store import SessionStore

logger = logging.getLogger(__name__)

_TREE_OPEN = "▾ "
_TREE_CLOSED = "▸ "
_TREE_LEAF = "  "


class CloudNavApp(App[None]):
    """Terminal shell around the navigation core.

    Keys go through ``KeyMapper`` into ``ActionDispatcher``; the effects it
    returns run here, fetches and probes as Textual workers on the app's
    event loop. Every state change is followed by a re-render from a fresh
    ``Snapshot``.
    """

    TITLE = APP_TITLE
    ENABLE_COMMAND_PALETTE = False
    BINDINGS: list[Binding] = APP_BINDINGS
    CSS = """
    #tabs {
        height: 1;
        background: $panel;
    }

    #breadcrumb {
        height: 1;
        color: $text-muted;
    }

    #rows {
        height: 1fr;
    }

    #overlay {
        display: none;
        height: auto;
        max-height: 60%;
        border: round $accent;
        padding: 0 1;
    }

    #overlay.visible {
        display: block;
    }

    #status {
        height: 1;
        background: $panel;
    }
    """

    # Type hint for state attribute
    state: AppState

    def __init__(
        self,
        context: ConnectionContext,
        source: DataSource,
        settings: AppSettings | None = None,
        session_store: SessionStore | None = None,
        prober: RegionLatencyProber | None = None,
        profile_loader: Callable[[], list[ProfileInfo]] = load_profiles,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self.registry = build_registry()
        self.state = AppState(context=context)
        self.dispatcher = ActionDispatcher(
            self.state,
            self.registry,
            session_store=session_store,
            page_size=self.settings.page_size,
        )
        self.session_store = session_store
        self.coordinator = FetchCoordinator(
            source,
            self.registry,
            poller=QueryPoller(
                max_attempts=self.settings.query_poll_max_attempts,
                interval_seconds=self.settings.query_poll_interval_seconds,
            ),
        )
        self.prober = prober or RegionLatencyProber(
            max_workers=self.settings.probe_max_workers,
            timeout_seconds=self.settings.probe_timeout_seconds,
        )
        self.profile_loader = profile_loader
        self.keys = KeyMapper()
        self.last_snapshot: Snapshot | None = None

    def compose(self) -> ComposeResult:
        yield Static(id="tabs")
        yield Static(id="breadcrumb")
        table: DataTable[str] = DataTable(id="rows", cursor_type="row", zebra_stripes=True)
        table.can_focus = False
        yield table
        yield Static(id="overlay")
        yield Static(id="status")

    def on_mount(self) -> None:
        """Restore the last session for this context or ask for a service."""
        session = None
        if self.settings.restore_last_session and self.session_store is not None:
            session = self.session_store.latest()
        if session is not None and (session.profile, session.region) == (
            self.state.context.profile,
            self.state.context.region,
        ):
            logger.info("Restoring session %s", session.id)
            self.dispatcher.restore_session(session)
        else:
            self.dispatcher.open_service_picker()
        self.run_effects(self.dispatcher.drain_effects())
        self.refresh_view()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        action = self.keys.resolve(self.state.mode, event.key, event.character)
        event.stop()
        if action is None:
            self.refresh_view()
            return
        self.run_effects(self.dispatcher.dispatch(action))
        self.refresh_view()

    # =========================================================================
    # Effects
    # =========================================================================

    def run_effects(self, effects: list[Effect]) -> None:
        for effect in effects:
            if effect.kind in (EffectKind.FETCH, EffectKind.RUN_QUERY) and effect.request:
                self.run_worker(
                    self._fetch(effect.request),
                    name=f"fetch-{effect.request.tab_id}-{effect.request.seq}",
                    group="fetch",
                )
            elif effect.kind is EffectKind.PROBE_REGIONS:
                self.run_worker(
                    self._probe(list(effect.payload or [])),
                    name="probe-regions",
                    group="probe",
                    exclusive=True,
                )
            elif effect.kind is EffectKind.LOAD_PROFILES:
                self.dispatcher.apply_profiles(self.profile_loader())
            elif effect.kind is EffectKind.COPY:
                self.copy_to_clipboard(str(effect.payload))
                self.notify("Copied to clipboard", severity="information")
            elif effect.kind is EffectKind.COPY_SCREEN:
                self.copy_to_clipboard(self.screen_text())
                self.notify("Screen copied to clipboard", severity="information")
            elif effect.kind is EffectKind.OPEN_CONSOLE:
                payload = effect.payload or {}
                self.notify(
                    f"{payload.get('kind')} {payload.get('key') or ''} ({payload.get('region')})",
                    title="Console",
                    severity="information",
                )
            elif effect.kind is EffectKind.QUIT:
                self.exit()

    async def _fetch(self, request: FetchRequest) -> None:
        outcome = await self.coordinator.execute(request)
        follow_up = self.coordinator.deliver(self.state, outcome)
        self.run_effects(follow_up)
        self.refresh_view()

    async def _probe(self, regions: list[str]) -> None:
        latencies = await self.prober.measure(regions)
        self.dispatcher.apply_latencies(latencies)
        self.refresh_view()

    # =========================================================================
    # Rendering
    # =========================================================================

    def refresh_view(self) -> None:
        snapshot = build_snapshot(self.state, self.registry)
        self.last_snapshot = snapshot

        tabs = "  ".join(
            f"[reverse] {escape(tab.title)} [/reverse]" if tab.active else f" {escape(tab.title)} "
            for tab in snapshot.tabs
        )
        self.query_one("#tabs", Static).update(tabs or " ")
        self.query_one("#breadcrumb", Static).update(escape(snapshot.breadcrumb) or " ")
        self._render_table(snapshot.view)
        self._render_overlay(snapshot.overlay)
        self.query_one("#status", Static).update(escape(self._status_line(snapshot)))

    def _render_table(self, view: ViewSnapshot | None) -> None:
        table = self.query_one("#rows", DataTable)
        table.clear(columns=True)
        if view is None:
            return
        table.add_columns(*view.columns)
        width = len(view.columns)
        cursor = 0
        for row in view.rows:
            if row.selected:
                cursor = table.row_count
            indent = "  " * row.depth
            if row.placeholder:
                cells = [indent + LOADING_LABEL, *[""] * (width - 1)]
            else:
                cells = list(row.cells)
                if row.depth or row.is_branch:
                    marker = _TREE_OPEN if row.expanded else _TREE_CLOSED
                    cells[0] = indent + (marker if row.is_branch else _TREE_LEAF) + cells[0]
            table.add_row(*cells)
            for name, value in row.details:
                table.add_row(f"    {name}: {value}", *[""] * (width - 1))
        if not view.rows:
            label = LOADING_LABEL if view.loading else EMPTY_LABEL
            table.add_row(label, *[""] * (width - 1))
        table.move_cursor(row=cursor)

    def _render_overlay(self, overlay: OverlaySnapshot | None) -> None:
        widget = self.query_one("#overlay", Static)
        if overlay is None:
            widget.remove_class("visible")
            return
        lines = [f"[b]{escape(overlay.title)}[/b]"]
        if overlay.mode in (
            Mode.SERVICE_PICKER,
            Mode.TAB_PICKER,
            Mode.REGION_PICKER,
            Mode.PROFILE_PICKER,
            Mode.SESSION_PICKER,
        ):
            lines.append(f"> {escape(overlay.filter)}")
        if overlay.weeks:
            for week in overlay.weeks:
                days = []
                for day in week:
                    cell = f"{day:>2}" if day else "  "
                    if overlay.cursor is not None and day == overlay.cursor.day:
                        cell = f"[reverse]{cell}[/reverse]"
                    days.append(cell)
                lines.append(" ".join(days))
        for index, label in enumerate(overlay.rows):
            box = ""
            if overlay.checked:
                box = "[x] " if overlay.checked[index] else "[ ] "
            text = escape(box + label)
            lines.append(f"[reverse]{text}[/reverse]" if index == overlay.selected else text)
        widget.update("\n".join(lines))
        widget.add_class("visible")

    def _status_line(self, snapshot: Snapshot) -> str:
        parts = [snapshot.mode.value, f"{snapshot.profile}@{snapshot.region}"]
        view = snapshot.view
        if view is not None:
            parts.append(f"page {view.page}/{view.total_pages}")
            if view.sub_tabs != (None,):
                tabs = [tab or "" for tab in view.sub_tabs]
                active = view.active_sub_tab or ""
                parts.append(" | ".join(f"*{tab}*" if tab == active else tab for tab in tabs))
            for control in view.controls:
                if control.kind is FocusKind.PAGINATION or control.value in ("", False):
                    continue
                marker = ">" if control.focused else ""
                parts.append(f"{marker}{control.name}={control.value}")
            if view.sort_column:
                parts.append(f"sort {view.sort_column} {view.sort_direction.value}")
            if view.loading:
                parts.append(LOADING_LABEL)
        if snapshot.pending_page:
            parts.append(f"goto {snapshot.pending_page}")
        return "  ".join(parts)

    def screen_text(self) -> str:
        """Plain-text rendering of the current view for COPY_SCREEN."""
        snapshot = self.last_snapshot or build_snapshot(self.state, self.registry)
        lines = [snapshot.breadcrumb]
        if snapshot.view is not None:
            lines.append("\t".join(snapshot.view.columns))
            lines.extend("\t".join(row.cells) for row in snapshot.view.rows)
        return "\n".join(lines)


__all__ = ["CloudNavApp"]
