"""Input events consumed by the controller and signals it publishes."""
from __future__ import annotations

from dataclasses import dataclass

from tick_tactics.types import Cell, UnitId

# -- Input --


@dataclass(frozen=True)
class CursorMoved:
    cell: Cell


@dataclass(frozen=True)
class InteractPressed:
    cell: Cell


@dataclass(frozen=True)
class CancelPressed:
    pass


InputEvent = CursorMoved | InteractPressed | CancelPressed

# -- Signals --


@dataclass(frozen=True)
class UnitSelected:
    """A unit became active. ``reachable`` is in discovery order."""

    uid: UnitId
    cell: Cell
    reachable: tuple[Cell, ...]


@dataclass(frozen=True)
class UnitDeselected:
    uid: UnitId


@dataclass(frozen=True)
class PathPreviewed:
    """Fresh path preview for the cursor cell; empty when there is no route."""

    uid: UnitId
    target: Cell
    path: tuple[Cell, ...]


@dataclass(frozen=True)
class MoveStarted:
    """Registry already shows the unit on ``to_cell`` when this is published."""

    uid: UnitId
    from_cell: Cell
    to_cell: Cell
    path: tuple[Cell, ...]


@dataclass(frozen=True)
class MoveCompleted:
    uid: UnitId
    cell: Cell


@dataclass(frozen=True)
class MoveRejected:
    uid: UnitId
    cell: Cell
    reason: str
