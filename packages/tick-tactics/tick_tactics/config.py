"""Board configuration dataclass."""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tick_tactics.easing import EASINGS


@dataclass(frozen=True)
class BoardConfig:
    """Immutable configuration for a tactics board.

    Attributes:
        columns: Grid width in cells.
        rows: Grid height in cells.
        cell_size: Pixel size of one cell as ``(width, height)``.
        default_move_range: Move range for units that do not set their own.
        walk_ticks_per_cell: Ticks a walking unit spends on each step.
        walk_easing: Easing curve applied to a whole walk.
        tps: Ticks per second of the engine loop.
    """

    columns: int = 20
    rows: int = 20
    cell_size: tuple[int, int] = (32, 32)
    default_move_range: int = 6
    walk_ticks_per_cell: int = 4
    walk_easing: str = "linear"
    tps: int = 20

    def __post_init__(self) -> None:
        if self.columns <= 0 or self.rows <= 0:
            raise ValueError(
                f"grid size must be positive, got {self.columns}x{self.rows}"
            )
        if not _is_cell_size(self.cell_size):
            raise ValueError(f"cell_size must be two positive ints, got {self.cell_size}")
        object.__setattr__(self, "cell_size", (int(self.cell_size[0]), int(self.cell_size[1])))
        if self.default_move_range < 0:
            raise ValueError(
                f"default_move_range must be >= 0, got {self.default_move_range}"
            )
        if self.walk_ticks_per_cell <= 0:
            raise ValueError(
                f"walk_ticks_per_cell must be positive, got {self.walk_ticks_per_cell}"
            )
        if self.walk_easing not in EASINGS:
            raise ValueError(f"Unknown easing: {self.walk_easing!r}")
        if self.tps <= 0:
            raise ValueError("tps must be positive")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardConfig:
        """Build a config from a mapping. Unknown keys raise ValueError."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown board config keys: {', '.join(unknown)}")
        values = dict(data)
        if isinstance(values.get("cell_size"), list):
            values["cell_size"] = tuple(values["cell_size"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        data = dataclasses.asdict(self)
        data["cell_size"] = list(self.cell_size)
        return data


def load_config(path: str | Path) -> BoardConfig:
    with open(path, encoding="utf-8") as fh:
        return BoardConfig.from_dict(json.load(fh))


def _is_cell_size(value: Any) -> bool:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False
    return all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in value)
