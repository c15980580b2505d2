"""Shared types and errors for tick-tactics."""
from __future__ import annotations

from dataclasses import dataclass

Cell = tuple[int, int]
Vec2 = tuple[float, float]
UnitId = int


class OutOfBoundsError(ValueError):
    """Raised when a cell lies outside the grid where one is required."""

    def __init__(self, cell: Cell, message: str) -> None:
        self.cell = cell
        super().__init__(message)


class OccupiedCellError(ValueError):
    """Raised when a unit would be placed on a cell another unit holds."""

    def __init__(self, cell: Cell, message: str) -> None:
        self.cell = cell
        super().__init__(message)


@dataclass(eq=False)
class Unit:
    """A unit on the board.

    ``cell`` mirrors the registry and is only written by ``UnitRegistry``.
    Units compare by identity.
    """

    uid: UnitId
    cell: Cell
    move_range: int = 6
    name: str = ""
    selected: bool = False

    def __post_init__(self) -> None:
        if self.move_range < 0:
            raise ValueError(f"move_range must be >= 0, got {self.move_range}")
        self.cell = (int(self.cell[0]), int(self.cell[1]))

    def __repr__(self) -> str:
        label = self.name or f"#{self.uid}"
        return f"Unit({label} at {self.cell}, range={self.move_range})"
