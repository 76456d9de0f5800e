"""View presenter - filtering, sorting and row derivation.

The list engine never filters; everything that turns a slot's raw items into
the rows on screen lives here so the dispatcher and the renderer agree on
row counts.
"""

from __future__ import annotations

from cloudnav.constants.enums import FocusKind, SortDirection
from cloudnav.constants.values import ALL_OPTION, FOCUS_EXACT, FOCUS_SHOW_EXPIRED
from cloudnav.models.core.resources import ResourceItem
from cloudnav.models.state.hierarchy import VisualRow
from cloudnav.navigation.resource_view import ViewSlot
from cloudnav.navigation.views import ViewSpec

EXPIRED_ATTRIBUTE = "expired"


class ViewPresenter:
    """Derives visible rows of a slot according to its spec."""

    # =========================================================================
    # Filtering
    # =========================================================================

    def apply_filters(self, spec: ViewSpec, slot: ViewSlot) -> list[ResourceItem]:
        """Items passing the text filter and every filter control."""
        result = list(slot.list_state.items)

        text = slot.list_state.filter
        if text:
            if slot.controls.get(FOCUS_EXACT):
                result = [item for item in result if item.label.startswith(text)]
            else:
                needle = text.lower()
                result = [item for item in result if needle in item.label.lower()]

        for target in spec.focus_targets:
            # Server-side dropdowns shape the request, not the rows.
            if target.kind is not FocusKind.DROPDOWN or target.name in spec.server_controls:
                continue
            choice = slot.controls.get(target.name)
            if not choice or choice == ALL_OPTION:
                continue
            result = [
                item for item in result if item.column(target.name).lower() == str(choice).lower()
            ]

        if spec.has_target(FOCUS_SHOW_EXPIRED) and not slot.controls.get(FOCUS_SHOW_EXPIRED):
            result = [
                item for item in result if item.attributes.get(EXPIRED_ATTRIBUTE) != "true"
            ]

        return result

    # =========================================================================
    # Sorting
    # =========================================================================

    def sort_column(self, spec: ViewSpec, slot: ViewSlot) -> str | None:
        if slot.sort_index is None or not spec.sort_columns:
            return None
        return spec.sort_columns[slot.sort_index % len(spec.sort_columns)]

    def sort_items(
        self, items: list[ResourceItem], column: str | None, direction: SortDirection
    ) -> list[ResourceItem]:
        if column is None:
            return items
        return sorted(
            items,
            key=lambda item: _sort_key(item.column(column)),
            reverse=direction is SortDirection.DESC,
        )

    # =========================================================================
    # Rows
    # =========================================================================

    def visible_items(self, spec: ViewSpec, slot: ViewSlot) -> list[ResourceItem]:
        """Filtered and sorted items; for tree views these are the roots."""
        filtered = self.apply_filters(spec, slot)
        return self.sort_items(filtered, self.sort_column(spec, slot), slot.sort_direction)

    def row_count(self, spec: ViewSpec, slot: ViewSlot) -> int:
        items = self.visible_items(spec, slot)
        if spec.tree:
            return slot.tree.row_count(items)
        return len(items)

    def selected_item(self, spec: ViewSpec, slot: ViewSlot) -> ResourceItem | None:
        """Item under the selection; None on placeholders or empty lists."""
        items = self.visible_items(spec, slot)
        index = slot.list_state.selected
        if spec.tree:
            node = slot.tree.resolve(items, index)
            return node if isinstance(node, ResourceItem) else None
        if 0 <= index < len(items):
            return items[index]
        return None

    def visible_columns(self, spec: ViewSpec, slot: ViewSlot) -> list[str]:
        return [column for column in spec.columns if column not in slot.hidden_columns]


def _sort_key(value: str) -> tuple[int, float, str]:
    """Numbers sort numerically ahead of text, text case-insensitively."""
    try:
        return (0, float(value), "")
    except ValueError:
        return (1, 0.0, value.lower())


__all__ = ["EXPIRED_ATTRIBUTE", "ViewPresenter"]
