"""Board rendering: terrain, reach overlay, path preview, units, cursor."""
from __future__ import annotations

import pygame

from tick_tactics import Board, SelectionState, WalkAnimator

from ui.constants import (
    COLOR_CURSOR,
    COLOR_CURSOR_BLOCKED,
    COLOR_PATH,
    COLOR_REACHABLE,
    COLOR_UNIT,
    COLOR_UNIT_OUTLINE,
    COLOR_UNIT_SELECTED,
    TERRAIN_COLORS,
)


def _cell_rect(board: Board, cell: tuple[int, int]) -> pygame.Rect:
    cw, ch = board.grid.cell_size
    return pygame.Rect(cell[0] * cw, cell[1] * ch, cw, ch)


def draw_terrain(surface: pygame.Surface, board: Board) -> None:
    """Draw the terrain grid with grid lines."""
    for cell in board.grid.cells():
        color = TERRAIN_COLORS.get(board.terrain.at(cell).name, (40, 40, 40))
        pygame.draw.rect(surface, color, _cell_rect(board, cell))

    cw, ch = board.grid.cell_size
    grid_w, grid_h = board.grid.columns * cw, board.grid.rows * ch
    for x in range(board.grid.columns + 1):
        pygame.draw.line(surface, (30, 30, 30), (x * cw, 0), (x * cw, grid_h))
    for y in range(board.grid.rows + 1):
        pygame.draw.line(surface, (30, 30, 30), (0, y * ch), (grid_w, y * ch))


def draw_reachable(surface: pygame.Surface, board: Board) -> None:
    """Tint every cell the selected unit can reach."""
    reach = board.controller.reachable
    if reach is None:
        return
    cw, ch = board.grid.cell_size
    overlay = pygame.Surface((cw, ch), pygame.SRCALPHA)
    overlay.fill(COLOR_REACHABLE)
    for cell in reach:
        surface.blit(overlay, (cell[0] * cw, cell[1] * ch))


def draw_path(surface: pygame.Surface, board: Board) -> None:
    """Polyline through cell centres of the previewed or committed path."""
    path = board.controller.path
    if len(path) < 2:
        return
    points = [board.grid.cell_to_map_center(cell) for cell in path]
    pygame.draw.lines(surface, COLOR_PATH, False, points, 3)
    pygame.draw.circle(surface, COLOR_PATH, points[-1], 4)


def draw_units(surface: pygame.Surface, board: Board, font: pygame.font.Font) -> None:
    """Draw units, walking ones at their interpolated position."""
    cw, ch = board.grid.cell_size
    radius = max(4, min(cw, ch) // 2 - 3)
    animator = board.animator if isinstance(board.animator, WalkAnimator) else None
    for unit in board.registry.units():
        pos = animator.position_of(unit.uid) if animator is not None else None
        if pos is None:
            pos = board.grid.cell_to_map_center(unit.cell)
        color = COLOR_UNIT_SELECTED if unit.selected else COLOR_UNIT
        center = (int(pos[0]), int(pos[1]))
        pygame.draw.circle(surface, color, center, radius)
        pygame.draw.circle(surface, COLOR_UNIT_OUTLINE, center, radius, 1)
        label = font.render((unit.name or str(unit.uid))[:1], True, COLOR_UNIT_OUTLINE)
        surface.blit(label, label.get_rect(center=center))


def draw_cursor(surface: pygame.Surface, board: Board) -> None:
    """Outline the cursor cell; red when a selected unit cannot go there."""
    cell = board.cursor.cell
    color = COLOR_CURSOR
    controller = board.controller
    if controller.state is SelectionState.SELECTED:
        reach = controller.reachable
        if reach is not None and cell not in reach:
            color = COLOR_CURSOR_BLOCKED
    pygame.draw.rect(surface, color, _cell_rect(board, cell), 2)
