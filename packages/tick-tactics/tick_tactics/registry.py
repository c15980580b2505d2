"""UnitRegistry - authoritative cell to unit occupancy."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from tick_tactics.types import Cell, OccupiedCellError, Unit, UnitId

if TYPE_CHECKING:
    from tick_tactics.grid import GridModel

logger = logging.getLogger(__name__)


class UnitRegistry:
    """At most one unit per cell; every entry satisfies ``unit.cell == cell``."""

    def __init__(self, grid: GridModel) -> None:
        self._grid = grid
        self._cells: dict[Cell, Unit] = {}
        self._units: dict[UnitId, Unit] = {}

    def place(self, unit: Unit, cell: Cell) -> None:
        """Put ``unit`` on ``cell``.

        Raises OccupiedCellError if the cell is taken, ValueError if the
        unit is already on the board, OutOfBoundsError if off the grid.
        """
        self._grid.check_bounds(cell)
        holder = self._cells.get(cell)
        if holder is not None:
            raise OccupiedCellError(
                cell, f"Cannot place {unit!r} on {cell}: occupied by {holder!r}"
            )
        if unit.uid in self._units:
            raise ValueError(f"Unit {unit.uid} is already on the board")
        unit.cell = cell
        self._cells[cell] = unit
        self._units[unit.uid] = unit
        logger.debug("placed %r", unit)

    def remove(self, cell: Cell) -> Unit | None:
        unit = self._cells.pop(cell, None)
        if unit is not None:
            del self._units[unit.uid]
            logger.debug("removed %r", unit)
        return unit

    def move_unit(self, unit: Unit, from_cell: Cell, to_cell: Cell) -> None:
        """Relocate ``unit`` in one step.

        All checks run before any mutation, so a failed move leaves the
        registry untouched and a successful one never exposes a state with
        zero or two entries for the unit.
        """
        self._grid.check_bounds(to_cell)
        if self._cells.get(from_cell) is not unit:
            raise KeyError(f"{unit!r} is not on {from_cell}")
        holder = self._cells.get(to_cell)
        if holder is not None and holder is not unit:
            raise OccupiedCellError(
                to_cell, f"Cannot move {unit!r} to {to_cell}: occupied by {holder!r}"
            )
        del self._cells[from_cell]
        self._cells[to_cell] = unit
        unit.cell = to_cell
        logger.debug("moved unit %s %s -> %s", unit.uid, from_cell, to_cell)

    def is_occupied(self, cell: Cell) -> bool:
        return cell in self._cells

    def get(self, cell: Cell) -> Unit | None:
        return self._cells.get(cell)

    def unit(self, uid: UnitId) -> Unit:
        try:
            return self._units[uid]
        except KeyError:
            raise KeyError(f"Unit {uid} is not on the board") from None

    def cell_of(self, uid: UnitId) -> Cell:
        return self.unit(uid).cell

    def units(self) -> list[Unit]:
        return list(self._units.values())

    def occupied_by_other(self, unit: Unit) -> Callable[[Cell], bool]:
        """Occupancy predicate that ignores ``unit``'s own cell."""
        cells = self._cells

        def occupied(cell: Cell) -> bool:
            holder = cells.get(cell)
            return holder is not None and holder is not unit

        return occupied

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, uid: object) -> bool:
        return uid in self._units
