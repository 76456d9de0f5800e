"""Side effects requested by the dispatcher and the fetch requests they carry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cloudnav.constants.enums import EffectKind, ResourceKind
from cloudnav.models.core.resources import ConnectionContext


@dataclass(frozen=True)
class FetchScope:
    """What a data source should list.

    Attributes:
        context: Connection the fetch runs under.
        depth: Drill depth of the requesting view.
        sub_tab: Sub-tab of the requesting view.
        parents: Keys of the containers drilled into, outermost first.
        prefix: Innermost drilled prefix within the container.
        params: Server-side control values (time ranges, query text).
    """

    context: ConnectionContext
    depth: int = 0
    sub_tab: str | None = None
    parents: tuple[str, ...] = ()
    prefix: str = ""
    params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FetchRequest:
    """A fetch tagged with everything needed to route or discard its result.

    Attributes:
        tab_id: Tab that issued the request.
        level_id: Drill level that issued the request.
        sub_tab: Slot within the level.
        seq: Per-slot (or per-prefix) sequence number.
        context_key: Connection context the request was issued under.
        kind: Resource kind.
        scope: Listing scope.
        child_path: Branch whose children are fetched; None for the list.
        query: Query text for long-running queries.
    """

    tab_id: int
    level_id: int
    sub_tab: str | None
    seq: int
    context_key: str
    kind: ResourceKind
    scope: FetchScope
    child_path: str | None = None
    query: str | None = None

    @property
    def is_children(self) -> bool:
        return self.child_path is not None


@dataclass(frozen=True)
class Effect:
    """One side effect for the application shell."""

    kind: EffectKind
    request: FetchRequest | None = None
    payload: Any = None


__all__ = ["Effect", "FetchRequest", "FetchScope"]
