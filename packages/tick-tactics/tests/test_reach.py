"""
Test suite for the range-limited flood fill.

Tests cover:
- Open-grid Manhattan balls
- Occupied cells acting as walls
- Range zero and unwalkable origins
- Precondition failures
- Agreement with an independent shortest-distance reference on random boards
"""
from __future__ import annotations

import random

import pytest
from tick_tactics import GridModel, OutOfBoundsError, flood_fill


def open_grid(columns: int = 5, rows: int = 5) -> GridModel:
    return GridModel(columns, rows)


def everywhere(cell: tuple[int, int]) -> bool:
    return True


def manhattan_ball(center, radius, grid):
    cx, cy = center
    return {
        (x, y)
        for x in range(grid.columns)
        for y in range(grid.rows)
        if abs(x - cx) + abs(y - cy) <= radius
    }


def reference_distances(grid, origin, walkable, blocked):
    """Relax hop counts until nothing changes; no queue discipline involved."""
    inf = float("inf")
    dist = {cell: inf for cell in grid.cells()}
    dist[origin] = 0
    changed = True
    while changed:
        changed = False
        for cell in grid.cells():
            if cell == origin or not walkable(cell) or cell in blocked:
                continue
            best = min(dist[n] for n in grid.neighbors(cell)) + 1
            if best < dist[cell]:
                dist[cell] = best
                changed = True
    return dist


class TestOpenGrid:
    def test_range_two_from_center_is_thirteen_cells(self) -> None:
        grid = open_grid()
        reach = flood_fill(grid, (2, 2), 2, everywhere)
        assert len(reach) == 13
        assert reach.cells() == manhattan_ball((2, 2), 2, grid)

    def test_distances_are_manhattan(self) -> None:
        grid = open_grid(7, 7)
        reach = flood_fill(grid, (3, 3), 4, everywhere)
        for cell in reach:
            assert reach.distance(cell) == abs(cell[0] - 3) + abs(cell[1] - 3)

    def test_ball_is_cut_by_grid_edges(self) -> None:
        grid = open_grid()
        reach = flood_fill(grid, (0, 0), 2, everywhere)
        assert reach.cells() == {(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (0, 2)}

    def test_large_range_covers_whole_grid(self) -> None:
        grid = open_grid(4, 3)
        reach = flood_fill(grid, (1, 1), 50, everywhere)
        assert reach.cells() == set(grid.cells())

    def test_origin_and_discovery_order(self) -> None:
        grid = open_grid()
        reach = flood_fill(grid, (2, 2), 1, everywhere)
        assert reach.origin == (2, 2)
        assert list(reach) == [(2, 2), (1, 2), (3, 2), (2, 1), (2, 3)]


class TestRangeZero:
    def test_range_zero_is_origin_only(self) -> None:
        reach = flood_fill(open_grid(), (1, 3), 0, everywhere)
        assert reach.cells() == {(1, 3)}
        assert reach.distance((1, 3)) == 0

    def test_unwalkable_origin_yields_empty_set(self) -> None:
        reach = flood_fill(open_grid(), (1, 1), 3, lambda c: c != (1, 1))
        assert len(reach) == 0
        assert (1, 1) not in reach


class TestBlockers:
    def test_occupied_cell_and_cells_behind_it_are_excluded(self) -> None:
        grid = open_grid()
        reach = flood_fill(grid, (2, 2), 2, everywhere, occupied=lambda c: c == (2, 3))
        assert (2, 3) not in reach
        # (2, 4) is two steps away only through (2, 3).
        assert (2, 4) not in reach
        assert (1, 3) in reach
        assert (3, 3) in reach
        assert len(reach) == 11

    def test_occupancy_is_never_asked_about_origin(self) -> None:
        asked = []

        def occupied(cell):
            asked.append(cell)
            return True

        reach = flood_fill(open_grid(), (2, 2), 3, everywhere, occupied)
        assert reach.cells() == {(2, 2)}
        assert (2, 2) not in asked

    def test_wall_forces_detour_within_range(self) -> None:
        grid = GridModel(5, 3)
        wall = {(2, 0), (2, 1)}
        reach = flood_fill(grid, (0, 0), 7, lambda c: c not in wall)
        # Around the wall through (2, 2): (3, 0) takes 7 steps, (4, 0) takes 8.
        assert reach.distance((2, 2)) == 4
        assert reach.distance((3, 0)) == 7
        assert (4, 0) not in reach

    def test_unwalkable_cells_excluded(self) -> None:
        grid = open_grid()
        reach = flood_fill(grid, (0, 0), 4, lambda c: c[0] != 1)
        assert all(x == 0 for x, _ in reach)

    def test_walkable_queried_once_per_cell(self) -> None:
        calls: dict = {}

        def walkable(cell):
            calls[cell] = calls.get(cell, 0) + 1
            return cell != (1, 1)

        flood_fill(open_grid(), (0, 0), 6, walkable)
        assert max(calls.values()) == 1


class TestPreconditions:
    def test_out_of_bounds_origin_raises(self) -> None:
        with pytest.raises(OutOfBoundsError):
            flood_fill(open_grid(), (5, 0), 2, everywhere)

    def test_negative_range_raises(self) -> None:
        with pytest.raises(ValueError, match="move_range"):
            flood_fill(open_grid(), (0, 0), -1, everywhere)


@pytest.mark.parametrize("seed", range(12))
def test_matches_reference_on_random_boards(seed: int) -> None:
    rng = random.Random(seed)
    grid = GridModel(rng.randint(3, 9), rng.randint(3, 9))
    walls = {c for c in grid.cells() if rng.random() < 0.25}
    others = {c for c in grid.cells() if c not in walls and rng.random() < 0.1}
    free = [c for c in grid.cells() if c not in walls and c not in others]
    if not free:
        return
    origin = rng.choice(free)
    move_range = rng.randint(0, 6)

    def walkable(cell):
        return cell not in walls

    reach = flood_fill(grid, origin, move_range, walkable, lambda c: c in others)
    expected = reference_distances(grid, origin, walkable, others)

    assert reach.cells() == {c for c, d in expected.items() if d <= move_range}
    for cell in reach:
        assert reach.distance(cell) == expected[cell]
