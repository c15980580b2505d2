"""Cursor - board cursor that turns positions into discrete input events."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_tactics.events import CancelPressed, CursorMoved, InteractPressed
from tick_tactics.types import Cell, Vec2

if TYPE_CHECKING:
    from tick_tactics.grid import GridModel
    from tick_tactics.inputs import InputQueue


class Cursor:
    """The player's cursor on the grid.

    Every requested position is clamped into the grid. ``CursorMoved`` is
    queued only when the clamped cell differs from the current one.

    Each move starts a ``cooldown`` (seconds) that limits held-key moves made
    through ``repeat_by``. Fresh presses (``move_by``) and pointer moves are
    never held back. The front end advances the cooldown with ``update(dt)``.
    """

    def __init__(
        self,
        grid: GridModel,
        queue: InputQueue,
        cell: Cell = (0, 0),
        cooldown: float = 0.1,
    ) -> None:
        if cooldown < 0:
            raise ValueError(f"cooldown must be >= 0, got {cooldown}")
        self._grid = grid
        self._queue = queue
        self._cell = grid.clamp(cell)
        self._cooldown = cooldown
        self._cooldown_left = 0.0

    @property
    def cell(self) -> Cell:
        return self._cell

    @property
    def position(self) -> Vec2:
        """Pixel centre of the hovered cell."""
        return self._grid.cell_to_map_center(self._cell)

    @property
    def cooling_down(self) -> bool:
        return self._cooldown_left > 0.0

    def update(self, dt: float) -> None:
        self._cooldown_left = max(0.0, self._cooldown_left - dt)

    def move_to(self, cell: Cell) -> bool:
        new_cell = self._grid.clamp(cell)
        if new_cell == self._cell:
            return False
        self._cell = new_cell
        self._cooldown_left = self._cooldown
        self._queue.enqueue(CursorMoved(new_cell))
        return True

    def move_by(self, dx: int, dy: int) -> bool:
        return self.move_to((self._cell[0] + dx, self._cell[1] + dy))

    def repeat_by(self, dx: int, dy: int) -> bool:
        """Move for a held direction key, once the cooldown has run out."""
        if self.cooling_down:
            return False
        return self.move_by(dx, dy)

    def point_at(self, pos: Vec2) -> bool:
        """Follow a pointer at pixel position ``pos``."""
        return self.move_to(self._grid.map_to_cell(pos))

    def accept(self) -> None:
        self._queue.enqueue(InteractPressed(self._cell))

    def cancel(self) -> None:
        self._queue.enqueue(CancelPressed())
