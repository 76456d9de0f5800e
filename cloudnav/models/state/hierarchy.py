"""Lazily loaded tree over prefix-style hierarchies.

The visible rows of a tree view are the in-order flattening of its root
nodes where only expanded branches contribute children. Children come from
a flat preview cache keyed by the branch path; an expanded branch whose
preview has not arrived yet contributes a single placeholder row.

The walk uses an explicit stack of child iterators, so nesting depth is
bounded only by memory.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class TreeNode(Protocol):
    """Anything that can appear in a tree view."""

    @property
    def key(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def is_branch(self) -> bool: ...


@dataclass(frozen=True)
class VisualRow:
    """One rendered row of a tree view.

    Attributes:
        index: Visual row index.
        node: Node shown on the row, or None for a loading placeholder.
        key: Node key; for placeholders, the key of the pending branch.
        depth: Nesting depth, 0 for roots.
        parent_index: Visual row of the parent branch, None for roots.
    """

    index: int
    node: TreeNode | None
    key: str
    depth: int
    parent_index: int | None

    @property
    def is_placeholder(self) -> bool:
        return self.node is None


@dataclass(frozen=True)
class TreeMove:
    """Outcome of an expand or collapse request.

    Attributes:
        selected: Visual row that should be selected afterwards.
        fetch_key: Branch whose children must be fetched, if any.
    """

    selected: int
    fetch_key: str | None = None


@dataclass
class HierarchyCache:
    """Expanded paths plus cached child previews."""

    expanded: set[str] = field(default_factory=set)
    previews: dict[str, list[TreeNode]] = field(default_factory=dict)

    # =========================================================================
    # Walk
    # =========================================================================

    def iter_rows(self, roots: Sequence[TreeNode]) -> Iterator[VisualRow]:
        """Yield visual rows in display order."""
        stack: list[tuple[Iterator[TreeNode], int, int | None]] = [
            (iter(roots), 0, None)
        ]
        index = 0
        while stack:
            nodes, depth, parent_index = stack[-1]
            node = next(nodes, None)
            if node is None:
                stack.pop()
                continue

            row_index = index
            yield VisualRow(row_index, node, node.key, depth, parent_index)
            index += 1

            if not (node.is_branch and node.key in self.expanded):
                continue
            children = self.previews.get(node.key)
            if children is None:
                yield VisualRow(index, None, node.key, depth + 1, row_index)
                index += 1
            elif children:
                stack.append((iter(children), depth + 1, row_index))

    def rows(self, roots: Sequence[TreeNode]) -> list[VisualRow]:
        return list(self.iter_rows(roots))

    def row(self, roots: Sequence[TreeNode], index: int) -> VisualRow | None:
        """Visual row at ``index``, or None when out of range."""
        if index < 0:
            return None
        for row in self.iter_rows(roots):
            if row.index == index:
                return row
        return None

    def resolve(self, roots: Sequence[TreeNode], index: int) -> TreeNode | None:
        """Node shown at ``index``; None for placeholders and out of range."""
        row = self.row(roots, index)
        return row.node if row is not None else None

    def row_count(self, roots: Sequence[TreeNode]) -> int:
        return sum(1 for _ in self.iter_rows(roots))

    # =========================================================================
    # Expand / collapse
    # =========================================================================

    def expand_at(self, roots: Sequence[TreeNode], index: int) -> TreeMove:
        """Expand the branch at ``index`` or descend into its first child.

        A collapsed branch becomes expanded; when its children are not cached
        the returned move names it in ``fetch_key``. An expanded branch with
        at least one cached child moves the selection to that child.
        """
        row = self.row(roots, index)
        if row is None or row.node is None or not row.node.is_branch:
            return TreeMove(index)

        key = row.node.key
        if key not in self.expanded:
            self.expanded.add(key)
            fetch_key = None if key in self.previews else key
            return TreeMove(index, fetch_key)

        if self.previews.get(key):
            return TreeMove(index + 1)
        return TreeMove(index)

    def collapse_at(self, roots: Sequence[TreeNode], index: int) -> TreeMove:
        """Collapse the branch at ``index`` or ascend to its parent row."""
        row = self.row(roots, index)
        if row is None:
            return TreeMove(index)

        if row.node is not None and row.node.is_branch and row.key in self.expanded:
            self.expanded.discard(row.key)
            return TreeMove(index)

        if row.parent_index is not None:
            return TreeMove(row.parent_index)
        return TreeMove(index)

    # =========================================================================
    # Cache
    # =========================================================================

    def is_expanded(self, key: str) -> bool:
        return key in self.expanded

    def is_pending(self, key: str) -> bool:
        """Expanded but still waiting for its children."""
        return key in self.expanded and key not in self.previews

    def pending_keys(self) -> list[str]:
        return sorted(key for key in self.expanded if key not in self.previews)

    def set_preview(self, key: str, children: Sequence[TreeNode]) -> None:
        self.previews[key] = list(children)

    def discard_preview(self, key: str) -> None:
        """Forget cached children so the next expansion refetches them."""
        self.previews.pop(key, None)

    def invalidate(self) -> None:
        """Drop every expansion and preview."""
        logger.debug(
            "Invalidating hierarchy cache (%d expanded, %d previews)",
            len(self.expanded),
            len(self.previews),
        )
        self.expanded.clear()
        self.previews.clear()


__all__ = ["HierarchyCache", "TreeMove", "TreeNode", "VisualRow"]
