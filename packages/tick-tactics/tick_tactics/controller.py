"""SelectionController - Idle / Selected / Moving state machine."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable

from tick_tactics.bus import SignalBus
from tick_tactics.events import (
    CancelPressed,
    CursorMoved,
    InteractPressed,
    MoveCompleted,
    MoveRejected,
    MoveStarted,
    PathPreviewed,
    UnitDeselected,
    UnitSelected,
)
from tick_tactics.pathfind import PathSolver
from tick_tactics.reach import ReachableSet, flood_fill
from tick_tactics.types import Cell, Unit, UnitId

if TYPE_CHECKING:
    from tick_tactics.animator import MovementAnimator
    from tick_tactics.grid import GridModel
    from tick_tactics.registry import UnitRegistry

logger = logging.getLogger(__name__)


class SelectionState(Enum):
    IDLE = "idle"
    SELECTED = "selected"
    MOVING = "moving"


class SelectionController:
    """Turns cursor input into unit selection and committed moves.

    Transitions:

    - Idle + interact on a unit -> Selected (flood fill, path mask built).
    - Selected + interact on the active unit, or cancel -> Idle.
    - Selected + cursor moved -> Selected (path preview refreshed).
    - Selected + interact on a free reachable cell -> Moving. The registry is
      updated before the animator receives the path.
    - Selected + interact on an occupied or unreachable cell -> ignored.
    - Moving + any input -> ignored.
    - Moving + animator completion -> Idle.

    A move whose animator never reports completion keeps the controller in
    Moving; there is no cancellation and no timeout. If ``walk`` raises, the
    move is rolled back (unit on its origin, still Selected, ``MoveRejected``
    with reason "walk failed") and the error propagates.

    Signals are queued on ``bus`` and only delivered by ``bus.flush()``.
    Without a shared bus the controller makes its own; the owner must then
    flush ``controller.bus`` (or ``clear()`` it) regularly.
    """

    def __init__(
        self,
        grid: GridModel,
        walkable: Callable[[Cell], bool],
        registry: UnitRegistry,
        animator: MovementAnimator,
        bus: SignalBus | None = None,
    ) -> None:
        self._grid = grid
        self._walkable = walkable
        self._registry = registry
        self._animator = animator
        self._bus = bus if bus is not None else SignalBus()
        self._state = SelectionState.IDLE
        self._active: Unit | None = None
        self._reachable: ReachableSet | None = None
        self._solver: PathSolver | None = None
        self._path: list[Cell] = []

    # -- Properties --

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def bus(self) -> SignalBus:
        """Queue of outgoing signals; nothing is delivered until it is flushed."""
        return self._bus

    @property
    def active_unit(self) -> Unit | None:
        return self._active

    @property
    def reachable(self) -> ReachableSet | None:
        """Reachable set of the selected unit; None unless Selected."""
        return self._reachable

    @property
    def path(self) -> tuple[Cell, ...]:
        """Path preview while Selected, committed path while Moving."""
        return tuple(self._path)

    # -- Input --

    def handle(self, event: Any) -> bool:
        """Dispatch an input event. Returns True if it was acted upon."""
        if isinstance(event, CursorMoved):
            return self.cursor_moved(event.cell)
        if isinstance(event, InteractPressed):
            return self.interact(event.cell)
        if isinstance(event, CancelPressed):
            return self.cancel()
        raise TypeError(f"No handler for input event {type(event).__qualname__}")

    def interact(self, cell: Cell) -> bool:
        if self._state is SelectionState.MOVING:
            return False
        if self._state is SelectionState.IDLE:
            unit = self._registry.get(cell)
            if unit is None:
                return False
            self._select(unit)
            return True

        unit = self._require_active()
        if cell == unit.cell:
            self._deselect()
            return True
        if self._registry.is_occupied(cell):
            self._reject(unit, cell, "occupied")
            return False
        assert self._reachable is not None and self._solver is not None
        if cell not in self._reachable:
            self._reject(unit, cell, "out of range")
            return False

        path = self._path
        if not path or path[0] != unit.cell or path[-1] != cell:
            path = self._solver.find_path(unit.cell, cell)
        if len(path) < 2:
            logger.warning("no route for unit %s from %s to %s", unit.uid, unit.cell, cell)
            self._reject(unit, cell, "no route")
            return False
        self._commit(unit, path)
        return True

    def cursor_moved(self, cell: Cell) -> bool:
        if self._state is not SelectionState.SELECTED:
            return False
        unit = self._require_active()
        assert self._solver is not None
        self._path = self._solver.find_path(unit.cell, cell)
        self._bus.publish(PathPreviewed(unit.uid, cell, tuple(self._path)))
        return True

    def cancel(self) -> bool:
        if self._state is not SelectionState.SELECTED:
            return False
        self._deselect()
        return True

    # -- Transitions --

    def _select(self, unit: Unit) -> None:
        unit.selected = True
        self._active = unit
        self._reachable = flood_fill(
            self._grid,
            unit.cell,
            unit.move_range,
            self._walkable,
            self._registry.occupied_by_other(unit),
        )
        self._solver = PathSolver.from_reachable(self._grid, self._reachable)
        self._path = []
        self._state = SelectionState.SELECTED
        logger.debug(
            "selected unit %s at %s (%d reachable cells)",
            unit.uid, unit.cell, len(self._reachable),
        )
        self._bus.publish(UnitSelected(unit.uid, unit.cell, tuple(self._reachable)))

    def _deselect(self) -> None:
        unit = self._require_active()
        unit.selected = False
        self._reset()
        logger.debug("deselected unit %s", unit.uid)
        self._bus.publish(UnitDeselected(unit.uid))

    def _commit(self, unit: Unit, path: list[Cell]) -> None:
        origin, destination = unit.cell, path[-1]
        reachable, solver = self._reachable, self._solver
        unit.selected = False
        # Occupancy is final before the walk starts.
        self._registry.move_unit(unit, origin, destination)
        self._reachable = None
        self._solver = None
        self._path = list(path)
        self._state = SelectionState.MOVING
        logger.info("unit %s moving %s -> %s", unit.uid, origin, destination)
        self._bus.publish(MoveStarted(unit.uid, origin, destination, tuple(path)))
        try:
            self._animator.walk(unit.uid, tuple(path), self._on_walk_finished)
        except Exception:
            # A walk that already reported completion is not undone.
            if self._state is SelectionState.MOVING and self._active is unit:
                self._roll_back(unit, origin, reachable, solver)
            raise

    def _roll_back(
        self,
        unit: Unit,
        origin: Cell,
        reachable: ReachableSet | None,
        solver: PathSolver | None,
    ) -> None:
        """Undo a commit whose walk was refused; the unit stays selected."""
        destination = unit.cell
        self._registry.move_unit(unit, destination, origin)
        unit.selected = True
        self._reachable = reachable
        self._solver = solver
        self._path = []
        self._state = SelectionState.SELECTED
        logger.warning("walk of unit %s refused, back on %s", unit.uid, origin)
        self._bus.publish(MoveRejected(unit.uid, destination, "walk failed"))

    def _on_walk_finished(self, uid: UnitId) -> None:
        active = self._active
        if self._state is not SelectionState.MOVING or active is None or active.uid != uid:
            raise RuntimeError(f"Unexpected walk completion for unit {uid}")
        cell = active.cell
        self._reset()
        logger.debug("unit %s arrived at %s", uid, cell)
        self._bus.publish(MoveCompleted(uid, cell))

    def _reject(self, unit: Unit, cell: Cell, reason: str) -> None:
        logger.debug("ignored move of unit %s to %s: %s", unit.uid, cell, reason)
        self._bus.publish(MoveRejected(unit.uid, cell, reason))

    def _reset(self) -> None:
        self._active = None
        self._reachable = None
        self._solver = None
        self._path = []
        self._state = SelectionState.IDLE

    def _require_active(self) -> Unit:
        if self._active is None:
            raise RuntimeError(f"No active unit in state {self._state.value}")
        return self._active
