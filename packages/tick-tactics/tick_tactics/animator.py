"""Movement animation: the animator protocol and a tick-driven walker."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, Sequence

from tick_tactics.easing import EASINGS
from tick_tactics.types import Cell, UnitId, Vec2

if TYPE_CHECKING:
    from tick_tactics.grid import GridModel

logger = logging.getLogger(__name__)

WalkFinished = Callable[[UnitId], None]


class MovementAnimator(Protocol):
    """Plays a unit's walk along a path.

    ``walk`` returns immediately. ``on_finished(uid)`` must be called exactly
    once per accepted path, on the same thread as all controller input.
    """

    def walk(self, uid: UnitId, path: Sequence[Cell], on_finished: WalkFinished) -> None: ...


@dataclass
class Walk:
    uid: UnitId
    path: tuple[Cell, ...]
    on_finished: WalkFinished
    duration: int
    elapsed: int = 0


class WalkAnimator:
    """Moves units centre to centre along their path, one ``advance()`` per tick.

    A walk over ``n`` steps lasts ``n * ticks_per_cell`` ticks; the easing
    curve is applied to the walk as a whole. A single-cell path finishes on
    the next advance.
    """

    def __init__(
        self, grid: GridModel, ticks_per_cell: int = 4, easing: str = "linear"
    ) -> None:
        if ticks_per_cell <= 0:
            raise ValueError(f"ticks_per_cell must be positive, got {ticks_per_cell}")
        if easing not in EASINGS:
            raise ValueError(f"Unknown easing: {easing!r}")
        self._grid = grid
        self._ticks_per_cell = ticks_per_cell
        self._easing = EASINGS[easing]
        self._walks: dict[UnitId, Walk] = {}
        self._positions: dict[UnitId, Vec2] = {}

    def walk(self, uid: UnitId, path: Sequence[Cell], on_finished: WalkFinished) -> None:
        if not path:
            raise ValueError("Cannot walk an empty path")
        if uid in self._walks:
            raise RuntimeError(f"Unit {uid} is already walking")
        steps = len(path) - 1
        self._walks[uid] = Walk(
            uid=uid,
            path=tuple(path),
            on_finished=on_finished,
            duration=max(1, steps * self._ticks_per_cell),
        )
        self._positions[uid] = self._grid.cell_to_map_center(path[0])
        logger.debug("unit %s walking %d steps", uid, steps)

    def advance(self) -> None:
        for uid, walk in list(self._walks.items()):
            walk.elapsed += 1
            t = min(walk.elapsed / walk.duration, 1.0)
            self._positions[uid] = self._point_along(walk.path, self._easing(t))
            if walk.elapsed >= walk.duration:
                del self._walks[uid]
                del self._positions[uid]
                walk.on_finished(uid)

    def _point_along(self, path: tuple[Cell, ...], t: float) -> Vec2:
        steps = len(path) - 1
        if steps == 0 or t >= 1.0:
            return self._grid.cell_to_map_center(path[-1])
        progress = max(t, 0.0) * steps
        index = int(progress)
        frac = progress - index
        ax, ay = self._grid.cell_to_map_center(path[index])
        bx, by = self._grid.cell_to_map_center(path[index + 1])
        return (ax + (bx - ax) * frac, ay + (by - ay) * frac)

    def is_walking(self, uid: UnitId) -> bool:
        return uid in self._walks

    def position_of(self, uid: UnitId) -> Vec2 | None:
        """Interpolated pixel position of a walking unit, else None."""
        return self._positions.get(uid)

    def active(self) -> int:
        return len(self._walks)
