"""Cyclic focus over a view's filter controls."""

from __future__ import annotations

from dataclasses import dataclass, field

from cloudnav.constants.enums import FocusKind


@dataclass(frozen=True)
class FocusTarget:
    """One focusable control.

    Attributes:
        name: Control identifier, also the key of its value in the slot.
        kind: Control kind.
        options: Choices for dropdown controls.
    """

    name: str
    kind: FocusKind
    options: tuple[str, ...] = ()


@dataclass
class FocusRing:
    """Ordered focus targets with a cyclic cursor."""

    targets: list[FocusTarget] = field(default_factory=list)
    index: int = 0

    @property
    def current(self) -> FocusTarget | None:
        if not self.targets:
            return None
        return self.targets[self.index]

    @property
    def current_kind(self) -> FocusKind | None:
        target = self.current
        return target.kind if target is not None else None

    def next(self) -> None:
        if self.targets:
            self.index = (self.index + 1) % len(self.targets)

    def prev(self) -> None:
        if self.targets:
            self.index = (self.index - 1) % len(self.targets)

    def reset(self) -> None:
        self.index = 0

    def focus(self, name: str) -> bool:
        """Move the cursor to the named target.

        Returns:
            True when the target exists.
        """
        for position, target in enumerate(self.targets):
            if target.name == name:
                self.index = position
                return True
        return False


__all__ = ["FocusRing", "FocusTarget"]
