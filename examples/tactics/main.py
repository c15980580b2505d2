"""Tactics - grid movement demo for tick-tactics.

Select a unit, preview a path inside its move range, and watch it walk.

Controls:
  Arrows      Move cursor (hold to repeat)
  Mouse       Point cursor
  Enter/Space Select unit / confirm move (left-click does the same)
  Esc         Cancel selection (quits when nothing is selected)
  Right-click Cancel selection
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pygame

from tick_tactics import Board, SelectionState, make_engine
from ui.constants import COLOR_BG, FPS, SIDEBAR_W, compute_layout
from ui.renderer import draw_cursor, draw_path, draw_reachable, draw_terrain, draw_units
from ui.status import StatusBar, draw_sidebar

DEFAULT_SCENARIO = Path(__file__).parent / "scenarios" / "skirmish.json"

ARROWS = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tactics - tick-tactics movement demo")
    p.add_argument("--scenario", type=Path, default=DEFAULT_SCENARIO,
                   metavar="FILE", help="Scenario JSON (default: skirmish)")
    p.add_argument("--tps", type=int, default=None,
                   help="Ticks per second (default: from scenario)")
    p.add_argument("--cell-size", type=int, default=None,
                   help="Square cell size in pixels (default: from scenario)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args()
    if args.tps is not None:
        args.tps = max(1, min(120, args.tps))
    if args.cell_size is not None:
        args.cell_size = max(8, min(96, args.cell_size))
    return args


def load_scenario(path: Path, cell_size: int | None) -> Board:
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if cell_size is not None:
        data["config"] = dict(data.get("config", {}), cell_size=[cell_size, cell_size])
    return Board.from_scenario(data)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    board = load_scenario(args.scenario, args.cell_size)
    engine = make_engine(board, tps=args.tps)
    status = StatusBar(board)
    layout = compute_layout(board.grid.columns, board.grid.rows, board.grid.cell_size)
    grid_w, grid_h = layout["grid_w"], layout["grid_h"]

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Tactics - tick-tactics demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)
    unit_font = pygame.font.SysFont("monospace", max(10, board.grid.cell_size[1] // 2), bold=True)

    # Tick accumulator for fixed-rate engine ticks
    tick_interval = engine.clock.dt
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        board.cursor.update(dt)
        pressed_now: set[int] = set()

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if board.controller.state is SelectionState.SELECTED:
                        board.cursor.cancel()
                    elif board.controller.state is SelectionState.IDLE:
                        running = False
                elif event.key in ARROWS:
                    pressed_now.add(event.key)
                    board.cursor.move_by(*ARROWS[event.key])
                elif event.key in (pygame.K_RETURN, pygame.K_SPACE):
                    board.cursor.accept()

            elif event.type == pygame.MOUSEMOTION:
                if event.pos[0] < grid_w and event.pos[1] < grid_h:
                    board.cursor.point_at(event.pos)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.pos[0] >= grid_w or event.pos[1] >= grid_h:
                    continue
                if event.button == 1:  # Left click
                    board.cursor.point_at(event.pos)
                    board.cursor.accept()
                elif event.button == 3:  # Right click
                    board.cursor.cancel()

        # Held arrows repeat at the cursor cooldown
        held = pygame.key.get_pressed()
        for key, (dx, dy) in ARROWS.items():
            if held[key] and key not in pressed_now:
                board.cursor.repeat_by(dx, dy)

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            engine.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_terrain(screen, board)
        draw_reachable(screen, board)
        draw_path(screen, board)
        draw_units(screen, board, unit_font)
        draw_cursor(screen, board)

        sidebar_rect = pygame.Rect(grid_w, 0, SIDEBAR_W, grid_h)
        draw_sidebar(screen, board, sidebar_rect, font, engine.clock.tick_number)
        status.draw(screen, grid_h, layout["screen_w"])

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
