"""Range-limited breadth-first flood fill over a GridModel."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable, Iterator

from tick_tactics.types import Cell

if TYPE_CHECKING:
    from tick_tactics.grid import GridModel


class ReachableSet:
    """Cells one unit may stop on, with their hop-count from the origin.

    Iteration follows discovery order, so it is deterministic for a given
    board. Instances are never mutated after construction.
    """

    __slots__ = ("_origin", "_distances")

    def __init__(self, origin: Cell, distances: dict[Cell, int]) -> None:
        self._origin = origin
        self._distances = distances

    @property
    def origin(self) -> Cell:
        return self._origin

    def distance(self, cell: Cell) -> int | None:
        return self._distances.get(cell)

    def cells(self) -> frozenset[Cell]:
        return frozenset(self._distances)

    def __contains__(self, cell: object) -> bool:
        return cell in self._distances

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._distances)

    def __len__(self) -> int:
        return len(self._distances)

    def __repr__(self) -> str:
        return f"ReachableSet(origin={self._origin}, cells={len(self._distances)})"


def flood_fill(
    grid: GridModel,
    origin: Cell,
    move_range: int,
    walkable: Callable[[Cell], bool],
    occupied: Callable[[Cell], bool] | None = None,
) -> ReachableSet:
    """Cells reachable from ``origin`` in at most ``move_range`` orthogonal steps.

    ``occupied`` must answer True only for cells held by a *different* unit;
    the origin is never tested against it. Blocked cells (non-walkable or
    occupied) are neither included nor expanded. Each cell is enqueued once,
    when first discovered, so its recorded distance is its minimum hop-count.

    Raises OutOfBoundsError if ``origin`` is outside the grid and ValueError
    if ``move_range`` is negative.
    """
    grid.check_bounds(origin)
    if move_range < 0:
        raise ValueError(f"move_range must be >= 0, got {move_range}")

    distances: dict[Cell, int] = {}
    if not walkable(origin):
        return ReachableSet(origin, distances)

    distances[origin] = 0
    blocked: set[Cell] = set()
    frontier: deque[Cell] = deque([origin])

    while frontier:
        current = frontier.popleft()
        dist = distances[current]
        if dist >= move_range:
            continue
        for neighbor in grid.neighbors(current):
            if neighbor in distances or neighbor in blocked:
                continue
            if not walkable(neighbor) or (occupied is not None and occupied(neighbor)):
                blocked.add(neighbor)
                continue
            distances[neighbor] = dist + 1
            frontier.append(neighbor)

    return ReachableSet(origin, distances)
