"""Per-tab view state: drill levels, sub-tab slots and their browsing state."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field

from cloudnav.constants.enums import PageSize, ResourceKind, SortDirection
from cloudnav.constants.values import PREFIX_DELIMITER
from cloudnav.models.core.resources import ResourceItem
from cloudnav.models.state.focus_ring import FocusRing
from cloudnav.models.state.hierarchy import HierarchyCache
from cloudnav.models.state.list_state import ListState
from cloudnav.navigation.views import ViewRegistry, ViewSpec

_level_ids = itertools.count(1)


@dataclass
class ViewSlot:
    """Browsing state of one sub-tab of one drill level.

    Attributes:
        sub_tab: Sub-tab name, None for levels without sub-tabs.
        list_state: Selection, paging and root filter.
        focus: Focus ring of the filter mode.
        event_focus: Focus ring of the event filter mode.
        tree: Expanded prefixes and cached children.
        controls: Values of dropdown, checkbox and secondary text controls.
        sort_index: Index into the spec's sort columns, None for source order.
        sort_direction: Direction of the active sort.
        hidden_columns: Columns hidden from the column selector.
        path_stack: Prefixes drilled into, innermost last.
        loaded: A fetch has been issued at least once.
        needs_reload: Data is stale and must be refetched before use.
        dropdown_open: The focused dropdown is open.
        request_seq: Sequence number of the latest list fetch.
        child_requests: Sequence number of the latest fetch per prefix.
    """

    sub_tab: str | None
    list_state: ListState[ResourceItem] = field(default_factory=ListState)
    focus: FocusRing = field(default_factory=FocusRing)
    event_focus: FocusRing = field(default_factory=FocusRing)
    tree: HierarchyCache = field(default_factory=HierarchyCache)
    controls: dict[str, str | bool] = field(default_factory=dict)
    sort_index: int | None = None
    sort_direction: SortDirection = SortDirection.ASC
    hidden_columns: set[str] = field(default_factory=set)
    path_stack: list[str] = field(default_factory=list)
    loaded: bool = False
    needs_reload: bool = False
    dropdown_open: bool = False
    request_seq: int = 0
    child_requests: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_spec(cls, spec: ViewSpec, page_size: PageSize) -> ViewSlot:
        return cls(
            sub_tab=spec.sub_tab,
            list_state=ListState(page_size=page_size),
            focus=FocusRing(list(spec.focus_targets)),
            event_focus=FocusRing(list(spec.event_focus_targets)),
            controls=spec.default_controls(),
        )

    @property
    def prefix(self) -> str:
        """Innermost drilled prefix, empty at the container root."""
        return self.path_stack[-1] if self.path_stack else ""

    def next_request_seq(self) -> int:
        self.request_seq += 1
        return self.request_seq

    def next_child_seq(self, path: str) -> int:
        seq = self.child_requests.get(path, 0) + 1
        self.child_requests[path] = seq
        return seq


@dataclass
class ViewLevel:
    """One drill level: the container it was opened for plus its sub-tabs."""

    depth: int
    parent_key: str | None
    label: str | None
    slots: dict[str | None, ViewSlot]
    order: tuple[str | None, ...]
    active: int = 0
    level_id: int = field(default_factory=lambda: next(_level_ids))

    @property
    def sub_tab(self) -> str | None:
        return self.order[self.active]

    @property
    def slot(self) -> ViewSlot:
        return self.slots[self.sub_tab]

    def next_sub_tab(self) -> None:
        self.active = (self.active + 1) % len(self.order)

    def prev_sub_tab(self) -> None:
        self.active = (self.active - 1) % len(self.order)


def prefix_segments(path_stack: list[str]) -> list[str]:
    """Breadcrumb labels for a path stack of nested prefixes."""
    segments: list[str] = []
    for prefix in path_stack:
        trimmed = prefix.rstrip(PREFIX_DELIMITER)
        segments.append(trimmed.rsplit(PREFIX_DELIMITER, 1)[-1])
    return segments


def prefix_chain(key: str) -> list[str]:
    """Every ancestor prefix of ``key`` including itself: ``a/b/`` -> ``[a/, a/b/]``."""
    parts = [part for part in key.split(PREFIX_DELIMITER) if part]
    chain: list[str] = []
    for position in range(1, len(parts) + 1):
        chain.append(PREFIX_DELIMITER.join(parts[:position]) + PREFIX_DELIMITER)
    return chain


class ResourceView:
    """All drill levels of one tab, innermost last."""

    def __init__(
        self, kind: ResourceKind, registry: ViewRegistry, page_size: PageSize
    ) -> None:
        self.kind = kind
        self._registry = registry
        self._page_size = page_size
        self.levels: list[ViewLevel] = [self._build_level(0, None, None)]

    def _build_level(
        self, depth: int, parent_key: str | None, label: str | None
    ) -> ViewLevel:
        order = self._registry.sub_tabs(self.kind, depth)
        slots = {
            sub_tab: ViewSlot.from_spec(
                self._registry.lookup(self.kind, depth, sub_tab), self._page_size
            )
            for sub_tab in order
        }
        return ViewLevel(depth=depth, parent_key=parent_key, label=label, slots=slots, order=order)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def depth(self) -> int:
        return len(self.levels) - 1

    @property
    def level(self) -> ViewLevel:
        return self.levels[-1]

    @property
    def slot(self) -> ViewSlot:
        return self.level.slot

    @property
    def root_slot(self) -> ViewSlot:
        return self.levels[0].slot

    @property
    def spec(self) -> ViewSpec:
        return self._registry.lookup(self.kind, self.depth, self.level.sub_tab)

    def find_level(self, level_id: int) -> ViewLevel | None:
        for level in self.levels:
            if level.level_id == level_id:
                return level
        return None

    def parent_keys(self, upto: ViewLevel | None = None) -> tuple[str, ...]:
        """Keys of the containers drilled into, outermost first."""
        keys: list[str] = []
        for level in self.levels:
            if level.parent_key is not None:
                keys.append(level.parent_key)
            if level is upto:
                break
        return tuple(keys)

    # =========================================================================
    # Drill
    # =========================================================================

    def push_level(self, parent_key: str, label: str) -> ViewLevel:
        level = self._build_level(self.depth + 1, parent_key, label)
        self.levels.append(level)
        return level

    def pop_level(self) -> ViewLevel | None:
        """Leave the innermost level; the root level is never popped."""
        if len(self.levels) == 1:
            return None
        return self.levels.pop()

    def breadcrumb_parts(self) -> list[str]:
        parts: list[str] = []
        for level in self.levels:
            if level.label:
                parts.append(level.label)
            parts.extend(prefix_segments(level.slot.path_stack))
        return parts

    def mark_stale(self) -> None:
        """Flag every slot for reload, keeping drill levels and selections."""
        for level in self.levels:
            for slot in level.slots.values():
                slot.needs_reload = True
                slot.tree.previews.clear()
                slot.child_requests.clear()


__all__ = [
    "ResourceView",
    "ViewLevel",
    "ViewSlot",
    "prefix_chain",
    "prefix_segments",
]
