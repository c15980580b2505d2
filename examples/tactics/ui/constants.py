"""Layout, color, and rendering constants."""
from __future__ import annotations

FPS = 60
STATUS_H = 32
SIDEBAR_W = 200

# Terrain colors, keyed by TerrainDef name
TERRAIN_COLORS: dict[str, tuple[int, int, int]] = {
    "grass": (70, 130, 60),
    "wall": (90, 90, 100),
    "water": (40, 80, 160),
    "void": (12, 12, 18),
}

# Overlays (r, g, b, alpha)
COLOR_REACHABLE = (90, 170, 255, 70)
COLOR_PATH = (255, 230, 90)
COLOR_CURSOR = (255, 255, 255)
COLOR_CURSOR_BLOCKED = (255, 80, 80)

# Units
COLOR_UNIT = (220, 220, 220)
COLOR_UNIT_SELECTED = (255, 210, 60)
COLOR_UNIT_OUTLINE = (20, 20, 20)

# UI colors
COLOR_BG = (20, 20, 30)
COLOR_SIDEBAR_BG = (25, 25, 35)
COLOR_TEXT = (200, 200, 200)
COLOR_TEXT_DIM = (130, 130, 140)
COLOR_OK = (100, 255, 100)
COLOR_WARN = (255, 180, 80)
COLOR_BAD = (255, 80, 80)


def compute_layout(columns: int, rows: int, cell_size: tuple[int, int]) -> dict[str, int]:
    """Compute screen dimensions from the board size."""
    grid_w = columns * cell_size[0]
    grid_h = rows * cell_size[1]
    return {
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": grid_w + SIDEBAR_W,
        "screen_h": grid_h + STATUS_H,
    }
