"""GridModel - bounds and pixel arithmetic for a fixed rectangular grid."""
from __future__ import annotations

import math
from typing import Iterator

from tick_tactics.types import Cell, OutOfBoundsError, Vec2

# Left, right, up, down. y grows downward. Both solvers expand in this order.
DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class GridModel:
    def __init__(
        self, columns: int, rows: int, cell_size: tuple[int, int] = (32, 32)
    ) -> None:
        if columns <= 0 or rows <= 0:
            raise ValueError(f"grid size must be positive, got {columns}x{rows}")
        if cell_size[0] <= 0 or cell_size[1] <= 0:
            raise ValueError(f"cell size must be positive, got {cell_size}")
        self._columns = columns
        self._rows = rows
        self._cell_size = (cell_size[0], cell_size[1])

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def size(self) -> tuple[int, int]:
        return (self._columns, self._rows)

    @property
    def cell_size(self) -> tuple[int, int]:
        return self._cell_size

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._columns and 0 <= y < self._rows

    def check_bounds(self, cell: Cell) -> None:
        if not self.in_bounds(cell):
            raise OutOfBoundsError(
                cell,
                f"{tuple(cell)} out of bounds for {self._columns}x{self._rows} grid",
            )

    def clamp(self, cell: Cell) -> Cell:
        x, y = cell
        return (
            min(max(x, 0), self._columns - 1),
            min(max(y, 0), self._rows - 1),
        )

    def map_to_cell(self, pos: Vec2) -> Cell:
        """Cell containing a pixel position. Positions are not clamped."""
        w, h = self._cell_size
        return (math.floor(pos[0] / w), math.floor(pos[1] / h))

    def cell_to_map_center(self, cell: Cell) -> Vec2:
        w, h = self._cell_size
        return (cell[0] * w + w / 2, cell[1] * h + h / 2)

    def as_index(self, cell: Cell) -> int:
        self.check_bounds(cell)
        return cell[0] + self._columns * cell[1]

    def neighbors(self, cell: Cell) -> list[Cell]:
        x, y = cell
        result: list[Cell] = []
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < self._columns and 0 <= ny < self._rows:
                result.append((nx, ny))
        return result

    def heuristic(self, a: Cell, b: Cell) -> int:
        return abs(a[0] - b[0]) + abs(a[1] - b[1])

    def cells(self) -> Iterator[Cell]:
        for y in range(self._rows):
            for x in range(self._columns):
                yield (x, y)
