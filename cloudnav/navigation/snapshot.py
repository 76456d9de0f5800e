"""Read-only render output.

``build_snapshot`` copies what a presentation layer needs out of ``AppState``
into frozen dataclasses: the tab row, the visible page of the active view and
the overlay of the current mode. Nothing here picks colors or layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from cloudnav.constants.enums import FocusKind, Mode, PageSize, PreferencesSection, SortDirection
from cloudnav.keyboard.keymap import MODE_KEYMAPS
from cloudnav.models.state.app_state import AppState
from cloudnav.models.state.list_state import ListState
from cloudnav.navigation.mixins.pickers import filter_picker_rows, picker_label
from cloudnav.navigation.presenter import ViewPresenter
from cloudnav.navigation.resource_view import ResourceView
from cloudnav.navigation.views import ViewRegistry

_PICKER_TITLES: dict[Mode, str] = {
    Mode.SERVICE_PICKER: "Services",
    Mode.TAB_PICKER: "Tabs",
    Mode.REGION_PICKER: "Regions",
    Mode.PROFILE_PICKER: "Profiles",
    Mode.SESSION_PICKER: "Sessions",
}

# Modes that edit the event filter ring.
_EVENT_RING_MODES = frozenset({Mode.EVENT_FILTER_INPUT})


@dataclass(frozen=True)
class TabSnapshot:
    title: str
    breadcrumb: str
    active: bool


@dataclass(frozen=True)
class RowSnapshot:
    """One visible row.

    Attributes:
        key: Item key, or the pending branch key for placeholders.
        cells: Cell values in visible column order.
        depth: Tree nesting depth.
        is_branch: Row is a container.
        expanded: Table row expanded, or tree branch open.
        placeholder: Loading row of a pending branch.
        selected: Row holds the selection.
        details: Attribute pairs shown under an expanded table row.
    """

    key: str
    cells: tuple[str, ...]
    depth: int = 0
    is_branch: bool = False
    expanded: bool = False
    placeholder: bool = False
    selected: bool = False
    details: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True)
class ControlSnapshot:
    name: str
    kind: FocusKind
    value: str | bool
    focused: bool
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class ViewSnapshot:
    """The active view of the active tab."""

    title: str
    depth: int
    sub_tabs: tuple[str | None, ...]
    active_sub_tab: str | None
    columns: tuple[str, ...]
    rows: tuple[RowSnapshot, ...]
    row_count: int
    page: int
    total_pages: int
    page_size: int
    loading: bool
    filter: str
    sort_column: str | None
    sort_direction: SortDirection
    controls: tuple[ControlSnapshot, ...]
    dropdown_open: bool


@dataclass(frozen=True)
class OverlaySnapshot:
    """Menu, picker or modal drawn over the view.

    Attributes:
        mode: Mode that owns the overlay.
        title: Overlay heading.
        rows: Visible row labels.
        selected: Index of the selected row within ``rows``.
        filter: Picker filter text.
        checked: Per-row checkbox state for the column selector.
        weeks: Month grid of the calendar picker, 0 for padding days.
        cursor: Calendar cursor date.
    """

    mode: Mode
    title: str
    rows: tuple[str, ...] = ()
    selected: int | None = None
    filter: str = ""
    checked: tuple[bool, ...] = ()
    weeks: tuple[tuple[int, ...], ...] = ()
    cursor: date | None = None


@dataclass(frozen=True)
class Snapshot:
    mode: Mode
    profile: str
    region: str
    tabs: tuple[TabSnapshot, ...]
    breadcrumb: str
    view: ViewSnapshot | None
    overlay: OverlaySnapshot | None
    pending_page: str


# =============================================================================
# View
# =============================================================================


def _controls(state: AppState, view: ResourceView, registry: ViewRegistry) -> tuple[ControlSnapshot, ...]:
    slot = view.slot
    spec = registry.lookup(view.kind, view.depth, slot.sub_tab)
    ring = slot.event_focus if state.mode in _EVENT_RING_MODES else slot.focus
    targets = spec.event_focus_targets if state.mode in _EVENT_RING_MODES else spec.focus_targets
    in_filter = state.mode in (Mode.FILTER_INPUT, Mode.EVENT_FILTER_INPUT, Mode.INSIGHTS_INPUT)
    focused = ring.current.name if in_filter and ring.current is not None else None

    controls: list[ControlSnapshot] = []
    for target in targets:
        if target.kind is FocusKind.PAGINATION:
            value: str | bool = state.pending_page
        elif target.name in slot.controls:
            value = slot.controls[target.name]
        else:
            value = slot.list_state.filter
        controls.append(
            ControlSnapshot(
                name=target.name,
                kind=target.kind,
                value=value,
                focused=target.name == focused,
                options=target.options,
            )
        )
    return tuple(controls)


def _view_snapshot(
    state: AppState, view: ResourceView, registry: ViewRegistry, presenter: ViewPresenter
) -> ViewSnapshot:
    level = view.level
    slot = level.slot
    spec = registry.lookup(view.kind, level.depth, slot.sub_tab)
    list_state = slot.list_state
    columns = tuple(presenter.visible_columns(spec, slot))
    items = presenter.visible_items(spec, slot)

    rows: list[RowSnapshot] = []
    if spec.tree:
        visual_rows = slot.tree.rows(items)
        count = len(visual_rows)
        for row in list_state.page_slice(visual_rows):
            node = row.node
            if node is None:
                rows.append(
                    RowSnapshot(
                        key=row.key,
                        cells=(),
                        depth=row.depth,
                        placeholder=True,
                        selected=row.index == list_state.selected,
                    )
                )
                continue
            rows.append(
                RowSnapshot(
                    key=node.key,
                    cells=tuple(node.column(name) for name in columns),
                    depth=row.depth,
                    is_branch=node.is_branch,
                    expanded=slot.tree.is_expanded(node.key),
                    selected=row.index == list_state.selected,
                )
            )
    else:
        count = len(items)
        start = list_state.scroll_offset
        for offset, item in enumerate(list_state.page_slice(items)):
            index = start + offset
            expanded = list_state.expanded == index
            rows.append(
                RowSnapshot(
                    key=item.key,
                    cells=tuple(item.column(name) for name in columns),
                    is_branch=item.is_branch,
                    expanded=expanded,
                    selected=index == list_state.selected,
                    details=tuple(sorted(item.attributes.items())) if expanded else (),
                )
            )

    return ViewSnapshot(
        title=spec.title,
        depth=level.depth,
        sub_tabs=level.order,
        active_sub_tab=level.sub_tab,
        columns=columns,
        rows=tuple(rows),
        row_count=count,
        page=list_state.current_page() + 1,
        total_pages=list_state.total_pages(count),
        page_size=int(list_state.page_size),
        loading=list_state.loading,
        filter=list_state.filter,
        sort_column=presenter.sort_column(spec, slot),
        sort_direction=slot.sort_direction,
        controls=_controls(state, view, registry),
        dropdown_open=slot.dropdown_open,
    )


# =============================================================================
# Overlays
# =============================================================================


def _paged(picker: ListState[Any], labels: list[str]) -> tuple[tuple[str, ...], int | None]:
    visible = picker.page_slice(labels)
    if not visible:
        return (), None
    return tuple(visible), picker.selected - picker.scroll_offset


def _key_rows(mode: Mode) -> tuple[str, ...]:
    return tuple(f"{key}: {action.value}" for key, action in MODE_KEYMAPS[mode].items())


def _overlay(state: AppState, registry: ViewRegistry) -> OverlaySnapshot | None:
    mode = state.mode

    if mode in _PICKER_TITLES:
        picker: ListState[Any] = {
            Mode.SERVICE_PICKER: state.service_picker,
            Mode.TAB_PICKER: state.tab_picker,
            Mode.REGION_PICKER: state.region_picker,
            Mode.PROFILE_PICKER: state.profile_picker,
            Mode.SESSION_PICKER: state.session_picker,
        }[mode]
        labels = [picker_label(registry, mode, row) for row in filter_picker_rows(registry, mode, picker)]
        rows, selected = _paged(picker, labels)
        return OverlaySnapshot(
            mode=mode, title=_PICKER_TITLES[mode], rows=rows, selected=selected, filter=picker.filter
        )

    if mode is Mode.SPACE_MENU:
        return OverlaySnapshot(mode=mode, title="Menu", rows=_key_rows(Mode.SPACE_MENU))

    if mode is Mode.HELP_MODAL:
        return OverlaySnapshot(mode=mode, title="Help", rows=_key_rows(Mode.NORMAL))

    if mode is Mode.ERROR_MODAL and state.error is not None:
        return OverlaySnapshot(
            mode=mode,
            title=f"Error ({state.error.kind.value})",
            rows=tuple(state.error.message.splitlines() or [""]),
        )

    if mode is Mode.POLICY_VIEW and state.viewer is not None:
        viewer = state.viewer
        return OverlaySnapshot(
            mode=mode, title=viewer.title, rows=tuple(viewer.lines[viewer.scroll :])
        )

    if mode is Mode.CALENDAR_PICKER and state.calendar is not None:
        calendar = state.calendar
        return OverlaySnapshot(
            mode=mode,
            title=calendar.cursor.strftime("%B %Y"),
            weeks=tuple(tuple(week) for week in calendar.month_grid()),
            cursor=calendar.cursor,
        )

    if mode is Mode.COLUMN_SELECTOR:
        return _column_selector(state, registry)

    return None


def _column_selector(state: AppState, registry: ViewRegistry) -> OverlaySnapshot | None:
    view = state.active_view
    if view is None:
        return None
    selector = state.column_selector
    slot = view.slot
    if selector.section is PreferencesSection.PAGE_SIZE:
        labels = [str(int(size)) for size in PageSize]
        checked = tuple(size == slot.list_state.page_size for size in PageSize)
        title = "Page size"
    else:
        spec = registry.lookup(view.kind, view.depth, slot.sub_tab)
        labels = list(spec.columns)
        checked = tuple(column not in slot.hidden_columns for column in spec.columns)
        title = "Columns"
    rows, selected = _paged(selector.cursor, labels)
    start = selector.cursor.scroll_offset
    return OverlaySnapshot(
        mode=Mode.COLUMN_SELECTOR,
        title=title,
        rows=rows,
        selected=selected,
        checked=checked[start : start + len(rows)],
    )


def build_snapshot(state: AppState, registry: ViewRegistry) -> Snapshot:
    """Capture everything the presentation layer reads.

    Args:
        state: Application state.
        registry: View registry the dispatcher uses.

    Returns:
        Immutable snapshot of tabs, active view and overlay.
    """
    presenter = ViewPresenter()
    active = state.tabs.active
    view = state.active_view
    return Snapshot(
        mode=state.mode,
        profile=state.context.profile,
        region=state.context.region,
        tabs=tuple(
            TabSnapshot(title=tab.title, breadcrumb=tab.breadcrumb, active=tab is active)
            for tab in state.tabs.tabs
        ),
        breadcrumb=active.breadcrumb if active is not None else "",
        view=_view_snapshot(state, view, registry, presenter) if view is not None else None,
        overlay=_overlay(state, registry),
        pending_page=state.pending_page,
    )


__all__ = [
    "ControlSnapshot",
    "OverlaySnapshot",
    "RowSnapshot",
    "Snapshot",
    "TabSnapshot",
    "ViewSnapshot",
    "build_snapshot",
]
