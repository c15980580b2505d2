"""TerrainMap - sparse tile layer answering walkability queries."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from tick_tactics.types import Cell


@dataclass(frozen=True)
class TerrainDef:
    """Immutable terrain type.

    Attributes:
        name: Unique identifier for this terrain type.
        walkable: Whether units may enter or stop on this terrain.
        properties: Arbitrary user data (colors, labels, ...).
    """

    name: str
    walkable: bool = True
    properties: dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TerrainDef name must be non-empty")


VOID = TerrainDef(name="void", walkable=False)
GRASS = TerrainDef(name="grass")
WALL = TerrainDef(name="wall", walkable=False)
WATER = TerrainDef(name="water", walkable=False)

DEFAULT_LEGEND: dict[str, TerrainDef] = {
    ".": GRASS,
    "#": WALL,
    "~": WATER,
    " ": VOID,
}


class TerrainMap:
    """Maps cells to TerrainDefs.

    Unset cells return the default, which is ``VOID`` unless given: a cell
    without tile data is never walkable.
    """

    def __init__(self, default: TerrainDef = VOID) -> None:
        self._default = default
        self._cells: dict[Cell, TerrainDef] = {}
        self._registry: dict[str, TerrainDef] = {default.name: default}

    @property
    def default(self) -> TerrainDef:
        return self._default

    def register(self, terrain: TerrainDef) -> None:
        """Register a TerrainDef by name.

        Raises ValueError if a different TerrainDef with the same name exists.
        """
        existing = self._registry.get(terrain.name)
        if existing is not None and existing != terrain:
            raise ValueError(
                f"TerrainDef name collision: '{terrain.name}' already registered "
                f"with different definition"
            )
        self._registry[terrain.name] = terrain

    def set(self, cell: Cell, terrain: TerrainDef) -> None:
        self.register(terrain)
        if terrain == self._default:
            self._cells.pop(cell, None)
        else:
            self._cells[cell] = terrain

    def fill_rect(self, corner1: Cell, corner2: Cell, terrain: TerrainDef) -> None:
        """Fill a rectangle (inclusive) with a terrain type."""
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                self.set((x, y), terrain)

    def at(self, cell: Cell) -> TerrainDef:
        return self._cells.get(cell, self._default)

    def walkable(self, cell: Cell) -> bool:
        """Walkability predicate handed to the reachability solver."""
        return self.at(cell).walkable

    def of_type(self, name: str) -> list[Cell]:
        return [c for c, t in self._cells.items() if t.name == name]

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[str],
        legend: Mapping[str, TerrainDef] | None = None,
        default: TerrainDef = VOID,
    ) -> TerrainMap:
        """Build a map from ASCII rows, one character per cell.

        Characters missing from the legend raise KeyError.
        """
        legend = DEFAULT_LEGEND if legend is None else legend
        terrain = cls(default)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in legend:
                    raise KeyError(f"No terrain for {ch!r} at ({x}, {y})")
                terrain.set((x, y), legend[ch])
        return terrain
