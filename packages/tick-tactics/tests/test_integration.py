"""Integration tests: boards built from layouts and scenarios, driven by the engine."""
from __future__ import annotations

import json

import pytest
from tick_tactics import (
    Board,
    BoardConfig,
    Engine,
    MoveCompleted,
    MoveStarted,
    OccupiedCellError,
    PathPreviewed,
    SelectionState,
    Unit,
    UnitSelected,
    load_board,
    make_engine,
    make_input_system,
    make_signal_system,
)

LAYOUT = [
    "A....",
    ".....",
    "..#..",
    ".....",
    "....B",
]


def record_signals(board: Board) -> list:
    seen: list = []
    for signal_type in (UnitSelected, PathPreviewed, MoveStarted, MoveCompleted):
        board.bus.subscribe(signal_type, seen.append)
    return seen


class TestFromLayout:
    def test_units_and_terrain(self) -> None:
        board = Board.from_layout(LAYOUT)
        assert board.grid.size == (5, 5)
        a = board.registry.get((0, 0))
        b = board.registry.get((4, 4))
        assert (a.name, a.uid) == ("A", 0)
        assert (b.name, b.uid) == ("B", 1)
        assert board.terrain.walkable((0, 0))
        assert not board.terrain.walkable((2, 2))

    def test_move_ranges_by_letter(self) -> None:
        board = Board.from_layout(LAYOUT, move_ranges={"A": 2})
        assert board.registry.get((0, 0)).move_range == 2
        assert board.registry.get((4, 4)).move_range == board.config.default_move_range

    def test_walkable_cells_does_not_select(self) -> None:
        board = Board.from_layout(LAYOUT, move_ranges={"A": 2})
        reach = board.walkable_cells(board.registry.get((0, 0)))
        assert len(reach) == 6
        assert board.controller.state is SelectionState.IDLE

    def test_walkable_cells_excludes_other_units(self) -> None:
        board = Board.from_layout(["AB.."], move_ranges={"A": 3})
        reach = board.walkable_cells(board.registry.get((0, 0)))
        assert reach.cells() == {(0, 0)}

    def test_duplicate_placement_fails_fast(self) -> None:
        board = Board.from_layout(LAYOUT)
        with pytest.raises(OccupiedCellError):
            board.populate([Unit(uid=9, cell=(0, 0))])


class TestEngineLoop:
    def test_select_move_and_finish(self) -> None:
        board = Board.from_layout(LAYOUT, config=BoardConfig(columns=5, rows=5, walk_ticks_per_cell=4))
        engine = make_engine(board)
        seen = record_signals(board)
        unit = board.registry.get((0, 0))

        board.cursor.accept()
        engine.step()
        assert board.controller.state is SelectionState.SELECTED

        board.cursor.move_by(2, 0)
        board.cursor.accept()
        engine.step()
        assert board.controller.state is SelectionState.MOVING
        assert board.registry.get((2, 0)) is unit
        assert board.animator.is_walking(unit.uid)

        assert engine.run_until(lambda b: b.controller.state is SelectionState.IDLE, 20)
        assert board.registry.get((2, 0)) is unit
        assert not board.registry.is_occupied((0, 0))
        assert [type(s) for s in seen] == [
            UnitSelected, PathPreviewed, MoveStarted, MoveCompleted,
        ]
        # Eight ticks of walking, the first in the committing tick.
        assert engine.clock.tick_number == 9

    def test_input_during_walk_is_ignored(self) -> None:
        board = Board.from_layout(LAYOUT)
        engine = make_engine(board)
        a = board.registry.get((0, 0))
        b = board.registry.get((4, 4))

        board.cursor.accept()
        board.cursor.move_to((0, 3))
        board.cursor.accept()
        engine.step()
        assert board.controller.state is SelectionState.MOVING

        board.cursor.move_to((4, 4))
        board.cursor.accept()
        engine.step()
        assert board.controller.state is SelectionState.MOVING
        assert board.controller.active_unit is a
        assert not b.selected

    def test_on_ignored_callback(self) -> None:
        board = Board.from_layout(LAYOUT)
        engine = Engine(board)
        ignored = []
        engine.add_system(make_input_system(board.inputs, on_ignored=ignored.append))
        engine.add_system(make_signal_system(board.bus))

        board.cursor.move_to((3, 3))
        board.cursor.accept()
        engine.step()

        assert len(ignored) == 2
        assert board.controller.state is SelectionState.IDLE

    def test_animator_that_never_finishes(self) -> None:
        class StuckAnimator:
            def __init__(self) -> None:
                self.calls = 0

            def walk(self, uid, path, on_finished) -> None:
                self.calls += 1

        animator = StuckAnimator()
        board = Board.from_layout(LAYOUT, animator=animator)
        engine = make_engine(board)

        board.cursor.accept()
        board.cursor.move_by(1, 0)
        board.cursor.accept()
        engine.step()
        assert board.controller.state is SelectionState.MOVING

        assert not engine.run_until(
            lambda b: b.controller.state is SelectionState.IDLE, 200
        )
        assert board.controller.state is SelectionState.MOVING
        assert animator.calls == 1
        assert board.registry.get((1, 0)).name == "A"

    def test_request_stop_ends_run(self) -> None:
        board = Board.from_layout(LAYOUT)
        engine = Engine(board, tps=10)
        ticks = []

        def stopper(b, ctx) -> None:
            ticks.append(ctx.tick_number)
            if ctx.tick_number == 3:
                ctx.request_stop()

        engine.add_system(stopper)
        engine.run(10)
        assert ticks == [1, 2, 3]
        assert engine.clock.dt == pytest.approx(0.1)


class TestScenario:
    SCENARIO = {
        "config": {"cell_size": [24, 24], "walk_ticks_per_cell": 2},
        "layout": [
            "......",
            ".##...",
            "A.....",
        ],
        "move_ranges": {"A": 3},
        "units": [
            {"name": "Scout", "cell": [5, 0], "move_range": 5},
        ],
    }

    def test_from_scenario(self) -> None:
        board = Board.from_scenario(self.SCENARIO)
        assert board.grid.size == (6, 3)
        assert board.grid.cell_size == (24, 24)
        assert board.registry.get((0, 2)).move_range == 3
        scout = board.registry.get((5, 0))
        assert (scout.name, scout.uid, scout.move_range) == ("Scout", 1, 5)

    def test_load_board_from_json(self, tmp_path) -> None:
        path = tmp_path / "scenario.json"
        path.write_text(json.dumps(self.SCENARIO))
        board = load_board(path)
        assert len(board.registry) == 2

    def test_scenario_with_unit_on_layout_unit_fails(self) -> None:
        data = dict(self.SCENARIO, units=[{"name": "Twin", "cell": [0, 2]}])
        with pytest.raises(OccupiedCellError):
            Board.from_scenario(data)

    def test_scenario_unknown_config_key_fails(self) -> None:
        data = dict(self.SCENARIO, config={"speed": 3})
        with pytest.raises(ValueError, match="speed"):
            Board.from_scenario(data)

    def test_scenario_scalar_cell_size_fails(self) -> None:
        data = dict(self.SCENARIO, config={"cell_size": 32})
        with pytest.raises(ValueError, match="cell_size"):
            Board.from_scenario(data)
