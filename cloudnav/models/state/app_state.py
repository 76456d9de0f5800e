"""Composed application state.

Everything the dispatcher mutates hangs off one ``AppState`` instance that
is passed around explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from cloudnav.constants.enums import ErrorKind, Mode, PreferencesSection
from cloudnav.models.core.resources import ConnectionContext, ProfileInfo, RegionInfo
from cloudnav.models.session.session import Session
from cloudnav.models.state.calendar import CalendarState
from cloudnav.models.state.list_state import ListState
from cloudnav.navigation.tabs import Tab, TabManager

if TYPE_CHECKING:
    from cloudnav.navigation.effects import FetchRequest
    from cloudnav.navigation.resource_view import ResourceView


@dataclass
class ErrorInfo:
    """Error shown in the error modal."""

    kind: ErrorKind
    message: str
    request: FetchRequest | None = None


@dataclass
class DocumentView:
    """Document open in the policy viewer."""

    title: str
    lines: list[str]
    scroll: int = 0

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@dataclass
class ColumnSelectorState:
    """Cursor of the column selector."""

    section: PreferencesSection = PreferencesSection.COLUMNS
    cursor: ListState[str] = field(default_factory=ListState)


@dataclass
class AppState:
    """Navigation core state."""

    context: ConnectionContext
    mode: Mode = Mode.NORMAL
    return_mode: Mode = Mode.NORMAL
    tabs: TabManager = field(default_factory=TabManager)
    views: dict[int, ResourceView] = field(default_factory=dict)

    # Pickers
    service_picker: ListState[Any] = field(default_factory=ListState)
    tab_picker: ListState[Tab] = field(default_factory=ListState)
    region_picker: ListState[RegionInfo] = field(default_factory=ListState)
    profile_picker: ListState[ProfileInfo] = field(default_factory=ListState)
    session_picker: ListState[Session] = field(default_factory=ListState)
    column_selector: ColumnSelectorState = field(default_factory=ColumnSelectorState)

    # Boundary results
    latencies: dict[str, float | None] = field(default_factory=dict)
    profiles: list[ProfileInfo] = field(default_factory=list)

    # Modal and transient state
    error: ErrorInfo | None = None
    viewer: DocumentView | None = None
    calendar: CalendarState | None = None
    pending_page: str = ""
    running: bool = True

    @property
    def active_view(self) -> ResourceView | None:
        tab = self.tabs.active
        if tab is None:
            return None
        return self.views.get(tab.tab_id)


__all__ = [
    "AppState",
    "ColumnSelectorState",
    "DocumentView",
    "ErrorInfo",
]
