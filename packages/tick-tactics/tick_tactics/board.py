"""Board - constructor-time wiring of grid, terrain, units and controller."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Sequence

from tick_tactics.animator import WalkAnimator
from tick_tactics.bus import SignalBus
from tick_tactics.config import BoardConfig
from tick_tactics.controller import SelectionController
from tick_tactics.cursor import Cursor
from tick_tactics.grid import GridModel
from tick_tactics.inputs import InputQueue
from tick_tactics.reach import ReachableSet, flood_fill
from tick_tactics.registry import UnitRegistry
from tick_tactics.terrain import DEFAULT_LEGEND, GRASS, TerrainDef, TerrainMap
from tick_tactics.types import Unit

if TYPE_CHECKING:
    from tick_tactics.animator import MovementAnimator

logger = logging.getLogger(__name__)


class Board:
    """Owns one instance of every collaborator and wires them together.

    Units are placed once through ``populate``; after that the registry is
    only changed by the controller committing a move.
    """

    def __init__(
        self,
        config: BoardConfig,
        terrain: TerrainMap,
        animator: MovementAnimator | None = None,
    ) -> None:
        self.config = config
        self.grid = GridModel(config.columns, config.rows, config.cell_size)
        self.terrain = terrain
        self.registry = UnitRegistry(self.grid)
        self.bus = SignalBus()
        self.inputs = InputQueue()
        if animator is None:
            animator = WalkAnimator(
                self.grid, config.walk_ticks_per_cell, config.walk_easing
            )
        self.animator = animator
        self.controller = SelectionController(
            self.grid, terrain.walkable, self.registry, animator, self.bus
        )
        self.cursor = Cursor(self.grid, self.inputs)

    def populate(self, units: Iterable[Unit]) -> None:
        """Place units on their starting cells.

        Two units on one cell raise OccupiedCellError; nothing is dropped.
        """
        count = 0
        for unit in units:
            self.registry.place(unit, unit.cell)
            count += 1
        logger.debug("board populated with %d units", count)

    def walkable_cells(self, unit: Unit) -> ReachableSet:
        """Flood fill for ``unit`` without selecting it."""
        return flood_fill(
            self.grid,
            unit.cell,
            unit.move_range,
            self.terrain.walkable,
            self.registry.occupied_by_other(unit),
        )

    # -- Construction helpers --

    @classmethod
    def from_layout(
        cls,
        rows: Sequence[str],
        config: BoardConfig | None = None,
        legend: Mapping[str, TerrainDef] | None = None,
        move_ranges: Mapping[str, int] | None = None,
        animator: MovementAnimator | None = None,
    ) -> Board:
        """Build a board from ASCII rows.

        Terrain characters come from ``legend``. Any other letter marks a unit
        named after it, standing on grass; uids follow reading order. Grid size
        defaults to the layout's extent.
        """
        legend = DEFAULT_LEGEND if legend is None else legend
        move_ranges = move_ranges or {}
        if config is None:
            columns = max((len(r) for r in rows), default=0)
            config = BoardConfig(columns=columns, rows=len(rows))

        terrain_rows: list[str] = []
        units: list[Unit] = []
        for y, row in enumerate(rows):
            chars = []
            for x, ch in enumerate(row):
                if ch not in legend and ch.isalpha():
                    units.append(Unit(
                        uid=len(units),
                        cell=(x, y),
                        move_range=move_ranges.get(ch, config.default_move_range),
                        name=ch,
                    ))
                    chars.append(_char_for(legend, GRASS))
                else:
                    chars.append(ch)
            terrain_rows.append("".join(chars))

        board = cls(config, TerrainMap.from_rows(terrain_rows, legend), animator)
        board.populate(units)
        return board

    @classmethod
    def from_scenario(
        cls, data: Mapping[str, Any], animator: MovementAnimator | None = None
    ) -> Board:
        """Build a board from a scenario mapping.

        Keys: ``layout`` (ASCII rows, required), ``config`` (BoardConfig
        fields), ``move_ranges`` (letter -> range) and ``units`` (list of
        ``{"name", "cell", "move_range"}`` placed after the layout's units).
        """
        rows = list(data["layout"])
        config_data = dict(data.get("config", {}))
        config_data.setdefault("columns", max((len(r) for r in rows), default=0))
        config_data.setdefault("rows", len(rows))
        config = BoardConfig.from_dict(config_data)

        board = cls.from_layout(
            rows, config, move_ranges=data.get("move_ranges"), animator=animator
        )
        extra: list[Unit] = []
        next_uid = len(board.registry)
        for i, entry in enumerate(data.get("units", ())):
            x, y = entry["cell"]
            extra.append(Unit(
                uid=next_uid + i,
                cell=(int(x), int(y)),
                move_range=entry.get("move_range", config.default_move_range),
                name=entry.get("name", ""),
            ))
        board.populate(extra)
        return board


def load_board(path: str | Path, animator: MovementAnimator | None = None) -> Board:
    with open(path, encoding="utf-8") as fh:
        return Board.from_scenario(json.load(fh), animator)


def _char_for(legend: Mapping[str, TerrainDef], terrain: TerrainDef) -> str:
    for ch, t in legend.items():
        if t == terrain:
            return ch
    raise KeyError(f"Legend has no character for terrain '{terrain.name}'")
