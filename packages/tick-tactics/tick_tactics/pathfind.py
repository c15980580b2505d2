"""A* path search restricted to an allowed set of cells."""
from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Iterable

from tick_tactics.types import Cell

if TYPE_CHECKING:
    from tick_tactics.grid import GridModel
    from tick_tactics.reach import ReachableSet


class PathSolver:
    """Shortest orthogonal paths through a solid/allowed mask.

    Every in-bounds cell outside ``allowed`` is solid. The start cell of a
    query is always passable. The mask is independent of the grid's bounds
    and must be rebuilt whenever the allowed set changes.
    """

    def __init__(self, grid: GridModel, allowed: Iterable[Cell] = ()) -> None:
        self._grid = grid
        self._allowed: frozenset[Cell] = frozenset()
        self.rebuild(allowed)

    @classmethod
    def from_reachable(cls, grid: GridModel, reachable: ReachableSet) -> PathSolver:
        return cls(grid, reachable)

    @property
    def allowed(self) -> frozenset[Cell]:
        return self._allowed

    def rebuild(self, allowed: Iterable[Cell]) -> None:
        grid = self._grid
        self._allowed = frozenset(c for c in allowed if grid.in_bounds(c))

    def is_solid(self, cell: Cell) -> bool:
        return cell not in self._allowed

    def find_path(self, start: Cell, goal: Cell) -> list[Cell]:
        """Return ``[start, ..., goal]`` with the fewest steps, or ``[]``.

        An empty list means no route: the goal is out of bounds, solid, or
        cut off from the start. Raises OutOfBoundsError if ``start`` is
        outside the grid.
        """
        grid = self._grid
        grid.check_bounds(start)
        if start == goal:
            return [start]
        if not grid.in_bounds(goal) or goal not in self._allowed:
            return []

        # (f, insertion counter, cell): equal f pops first-in first-out.
        open_set: list[tuple[int, int, Cell]] = [(grid.heuristic(start, goal), 0, start)]
        came_from: dict[Cell, Cell] = {}
        g_score: dict[Cell, int] = {start: 0}
        closed: set[Cell] = set()
        counter = 1

        while open_set:
            _, _, current = heapq.heappop(open_set)
            if current in closed:
                continue
            closed.add(current)
            if current == goal:
                path: list[Cell] = [current]
                while current in came_from:
                    current = came_from[current]
                    path.append(current)
                path.reverse()
                return path

            tentative = g_score[current] + 1
            for neighbor in grid.neighbors(current):
                if neighbor not in self._allowed or neighbor in closed:
                    continue
                if tentative < g_score.get(neighbor, tentative + 1):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative
                    f = tentative + grid.heuristic(neighbor, goal)
                    heapq.heappush(open_set, (f, counter, neighbor))
                    counter += 1

        return []
