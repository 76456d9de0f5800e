"""Unit tests for HierarchyCache.

This module tests:
- Visual row flattening with cached and pending children
- Expand / collapse moves
- Iterative walks over very deep trees
"""

from __future__ import annotations

from cloudnav.models.core.resources import ResourceItem
from cloudnav.models.state.hierarchy import HierarchyCache


def _branch(key: str) -> ResourceItem:
    return ResourceItem(key=key, is_branch=True)


def _leaf(key: str) -> ResourceItem:
    return ResourceItem(key=key)


# =============================================================================
# Flattening Tests
# =============================================================================


class TestHierarchyRows:
    """Test visual row derivation."""

    def test_collapsed_roots_only(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/"), _leaf("b.txt")]
        assert [row.key for row in cache.rows(roots)] == ["a/", "b.txt"]

    def test_expanded_branch_round_trip(self) -> None:
        """Parent, two cached children and the next sibling resolve in order."""
        cache = HierarchyCache()
        roots = [_branch("logs/"), _leaf("z.txt")]
        cache.set_preview("logs/", [_leaf("logs/1.gz"), _leaf("logs/2.gz")])
        cache.expand_at(roots, 0)

        resolved = [cache.resolve(roots, index) for index in range(4)]
        assert [node.key for node in resolved if node is not None] == [
            "logs/",
            "logs/1.gz",
            "logs/2.gz",
            "z.txt",
        ]

    def test_nested_expansion_scenario(self) -> None:
        """Collapsing the inner branch drops its child from the rows."""
        cache = HierarchyCache()
        roots = [_branch("a/")]

        move = cache.expand_at(roots, 0)
        assert move.fetch_key == "a/"
        cache.set_preview("a/", [_branch("a/b/")])

        move = cache.expand_at(roots, 1)
        assert move.fetch_key == "a/b/"
        cache.set_preview("a/b/", [_leaf("a/b/c.txt")])

        node = cache.resolve(roots, 2)
        assert node is not None and node.key == "a/b/c.txt"

        cache.collapse_at(roots, 1)
        assert cache.resolve(roots, 2) is None
        assert cache.row_count(roots) == 2

    def test_pending_branch_yields_placeholder(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/"), _leaf("b.txt")]
        cache.expand_at(roots, 0)

        rows = cache.rows(roots)
        assert [row.is_placeholder for row in rows] == [False, True, False]
        assert rows[1].key == "a/"
        assert rows[1].depth == 1
        assert cache.is_pending("a/")
        assert cache.pending_keys() == ["a/"]

    def test_empty_preview_contributes_no_rows(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("empty/")]
        cache.set_preview("empty/", [])
        cache.expand_at(roots, 0)
        assert cache.row_count(roots) == 1

    def test_out_of_range_resolves_to_none(self) -> None:
        cache = HierarchyCache()
        roots = [_leaf("a")]
        assert cache.resolve(roots, -1) is None
        assert cache.resolve(roots, 5) is None

    def test_parent_index_of_child_rows(self) -> None:
        cache = HierarchyCache()
        roots = [_leaf("first"), _branch("a/")]
        cache.set_preview("a/", [_leaf("a/x"), _leaf("a/y")])
        cache.expand_at(roots, 1)
        rows = cache.rows(roots)
        assert [row.parent_index for row in rows] == [None, None, 1, 1]


# =============================================================================
# Expand / Collapse Tests
# =============================================================================


class TestHierarchyMoves:
    """Test expand and collapse requests."""

    def test_expand_cached_branch_needs_no_fetch(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/")]
        cache.set_preview("a/", [_leaf("a/x")])
        move = cache.expand_at(roots, 0)
        assert move.fetch_key is None
        assert move.selected == 0

    def test_expand_expanded_branch_descends(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/")]
        cache.set_preview("a/", [_leaf("a/x")])
        cache.expand_at(roots, 0)
        assert cache.expand_at(roots, 0).selected == 1

    def test_expand_leaf_is_noop(self) -> None:
        cache = HierarchyCache()
        roots = [_leaf("a")]
        move = cache.expand_at(roots, 0)
        assert move.selected == 0
        assert move.fetch_key is None
        assert not cache.expanded

    def test_collapse_child_ascends_to_parent(self) -> None:
        cache = HierarchyCache()
        roots = [_leaf("first"), _branch("a/")]
        cache.set_preview("a/", [_leaf("a/x")])
        cache.expand_at(roots, 1)
        assert cache.collapse_at(roots, 2).selected == 1
        assert cache.is_expanded("a/")

    def test_collapse_root_leaf_stays(self) -> None:
        cache = HierarchyCache()
        roots = [_leaf("a")]
        assert cache.collapse_at(roots, 0).selected == 0

    def test_collapse_keeps_preview(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/")]
        cache.set_preview("a/", [_leaf("a/x")])
        cache.expand_at(roots, 0)
        cache.collapse_at(roots, 0)
        assert cache.expand_at(roots, 0).fetch_key is None

    def test_invalidate_and_discard(self) -> None:
        cache = HierarchyCache()
        roots = [_branch("a/")]
        cache.set_preview("a/", [_leaf("a/x")])
        cache.expand_at(roots, 0)
        cache.discard_preview("a/")
        assert cache.is_pending("a/")
        cache.invalidate()
        assert not cache.expanded
        assert not cache.previews


# =============================================================================
# Deep Tree Tests
# =============================================================================


class TestHierarchyDepth:
    """Test walks far deeper than the interpreter recursion limit."""

    def test_ten_thousand_level_chain(self) -> None:
        depth = 10_000
        keys = [f"n{level}/" for level in range(depth)]
        cache = HierarchyCache()
        for parent, child in zip(keys, keys[1:]):
            cache.set_preview(parent, [_branch(child)])
            cache.expanded.add(parent)
        cache.set_preview(keys[-1], [_leaf(keys[-1] + "leaf")])
        cache.expanded.add(keys[-1])

        roots = [_branch(keys[0])]
        rows = cache.rows(roots)
        assert len(rows) == depth + 1
        assert rows[-1].depth == depth
        assert rows[-1].key.endswith("leaf")
