"""View descriptors and their registry.

Every browsable view is described by a ``ViewSpec`` keyed by
``(resource kind, drill depth, sub-tab)``. The dispatcher looks the spec up
once per action instead of branching on the resource kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cloudnav.constants.enums import FocusKind, Mode, ResourceKind, SelectBehavior
from cloudnav.constants.values import FOCUS_END_DATE, FOCUS_FILTER, FOCUS_START_DATE
from cloudnav.models.state.focus_ring import FocusTarget

logger = logging.getLogger(__name__)

ViewKey = tuple[ResourceKind, int, "str | None"]


@dataclass(frozen=True)
class ViewSpec:
    """Descriptor of one view.

    Attributes:
        kind: Resource kind.
        depth: Drill depth, 0 for the resource list.
        sub_tab: Sub-tab name within the drill level, None when the level
            has no sub-tabs.
        title: Level title shown on sub-tab bars and in the help text.
        columns: Column names, first one is the label column.
        sort_columns: Columns CYCLE_SORT_COLUMN walks through.
        select: What SELECT does.
        tree: Rows come from the hierarchy cache (prefix tree).
        prefix_drill: SELECT on a branch pushes its key on the path stack
            instead of opening a new drill level.
        filter_mode: Mode entered by START_FILTER.
        focus_targets: Focus ring of the filter mode.
        event_focus_targets: Focus ring of the event filter mode; empty when
            the view has no event filter.
        server_controls: Controls whose change requires a refetch.
    """

    kind: ResourceKind
    depth: int
    sub_tab: str | None
    title: str
    columns: tuple[str, ...] = ("name", "status")
    sort_columns: tuple[str, ...] = ("name",)
    select: SelectBehavior = SelectBehavior.NONE
    tree: bool = False
    prefix_drill: bool = False
    filter_mode: Mode = Mode.FILTER_INPUT
    focus_targets: tuple[FocusTarget, ...] = ()
    event_focus_targets: tuple[FocusTarget, ...] = ()
    server_controls: frozenset[str] = field(default_factory=frozenset)

    @property
    def key(self) -> ViewKey:
        return (self.kind, self.depth, self.sub_tab)

    def all_targets(self) -> tuple[FocusTarget, ...]:
        """Targets of both rings, without duplicates by name."""
        seen: dict[str, FocusTarget] = {}
        for target in (*self.focus_targets, *self.event_focus_targets):
            seen.setdefault(target.name, target)
        return tuple(seen.values())

    def has_target(self, name: str) -> bool:
        return any(target.name == name for target in self.all_targets())

    def has_dates(self) -> bool:
        return self.has_target(FOCUS_START_DATE) or self.has_target(FOCUS_END_DATE)

    def default_controls(self) -> dict[str, str | bool]:
        """Initial value of every non-text-filter control."""
        controls: dict[str, str | bool] = {}
        for target in self.all_targets():
            if target.name == FOCUS_FILTER:
                continue
            if target.kind is FocusKind.DROPDOWN:
                controls[target.name] = target.options[0] if target.options else ""
            elif target.kind is FocusKind.CHECKBOX:
                controls[target.name] = False
            elif target.kind is FocusKind.TEXT:
                controls[target.name] = ""
        return controls


class ViewRegistry:
    """Lookup of view specs by ``(kind, depth, sub_tab)``."""

    def __init__(self) -> None:
        self._specs: dict[ViewKey, ViewSpec] = {}
        self._sub_tabs: dict[tuple[ResourceKind, int], list[str | None]] = {}
        self._titles: dict[ResourceKind, str] = {}

    def register(self, spec: ViewSpec) -> None:
        if spec.key in self._specs:
            raise ValueError(f"View already registered: {spec.key}")
        self._specs[spec.key] = spec
        self._sub_tabs.setdefault((spec.kind, spec.depth), []).append(spec.sub_tab)

    def register_service(self, kind: ResourceKind, title: str) -> None:
        self._titles[kind] = title

    # =========================================================================
    # Lookup
    # =========================================================================

    def lookup(self, kind: ResourceKind, depth: int, sub_tab: str | None) -> ViewSpec:
        """Spec for a view, falling back to a bare list descriptor."""
        spec = self._specs.get((kind, depth, sub_tab))
        if spec is None and sub_tab is not None:
            spec = self._specs.get((kind, depth, None))
        if spec is None:
            logger.debug("No view registered for %s depth %d %s", kind.value, depth, sub_tab)
            spec = ViewSpec(kind=kind, depth=depth, sub_tab=sub_tab, title=kind.value)
        return spec

    def sub_tabs(self, kind: ResourceKind, depth: int) -> tuple[str | None, ...]:
        """Sub-tabs of a drill level in registration order."""
        return tuple(self._sub_tabs.get((kind, depth), [None]))

    def has_level(self, kind: ResourceKind, depth: int) -> bool:
        return (kind, depth) in self._sub_tabs

    def service_title(self, kind: ResourceKind) -> str:
        return self._titles.get(kind, kind.value)

    def services(self) -> list[ResourceKind]:
        """Kinds with a root view, in registration order."""
        return [kind for kind in self._titles if self.has_level(kind, 0)]


__all__ = ["ViewKey", "ViewRegistry", "ViewSpec"]
