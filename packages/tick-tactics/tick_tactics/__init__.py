"""tick-tactics - Grid movement, selection and pathing for turn-based tactics."""
from __future__ import annotations

from tick_tactics.animator import MovementAnimator, WalkAnimator
from tick_tactics.board import Board, load_board
from tick_tactics.bus import SignalBus
from tick_tactics.config import BoardConfig, load_config
from tick_tactics.controller import SelectionController, SelectionState
from tick_tactics.cursor import Cursor
from tick_tactics.easing import EASINGS
from tick_tactics.engine import Clock, Engine, TickContext
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
from tick_tactics.grid import GridModel
from tick_tactics.inputs import InputQueue
from tick_tactics.pathfind import PathSolver
from tick_tactics.reach import ReachableSet, flood_fill
from tick_tactics.registry import UnitRegistry
from tick_tactics.systems import (
    make_engine,
    make_input_system,
    make_signal_system,
    make_walk_system,
)
from tick_tactics.terrain import TerrainDef, TerrainMap
from tick_tactics.types import Cell, OccupiedCellError, OutOfBoundsError, Unit, UnitId

__all__ = [
    "Board",
    "BoardConfig",
    "CancelPressed",
    "Cell",
    "Clock",
    "Cursor",
    "CursorMoved",
    "EASINGS",
    "Engine",
    "GridModel",
    "InputQueue",
    "InteractPressed",
    "MoveCompleted",
    "MoveRejected",
    "MoveStarted",
    "MovementAnimator",
    "OccupiedCellError",
    "OutOfBoundsError",
    "PathPreviewed",
    "PathSolver",
    "ReachableSet",
    "SelectionController",
    "SelectionState",
    "SignalBus",
    "TerrainDef",
    "TerrainMap",
    "TickContext",
    "Unit",
    "UnitDeselected",
    "UnitId",
    "UnitRegistry",
    "UnitSelected",
    "WalkAnimator",
    "flood_fill",
    "load_board",
    "load_config",
    "make_engine",
    "make_input_system",
    "make_signal_system",
    "make_walk_system",
]
