"""Status bar and sidebar fed by board signals."""
from __future__ import annotations

import pygame

from tick_tactics import (
    Board,
    MoveCompleted,
    MoveRejected,
    MoveStarted,
    UnitDeselected,
    UnitSelected,
)

from ui.constants import (
    COLOR_BAD,
    COLOR_OK,
    COLOR_SIDEBAR_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    COLOR_WARN,
    STATUS_H,
)


class StatusBar:
    """Displays the latest controller event at the bottom of the screen."""

    def __init__(self, board: Board) -> None:
        self._board = board
        self._message = "Select a unit"
        self._color = COLOR_TEXT
        self._font: pygame.font.Font | None = None
        board.bus.subscribe(UnitSelected, self._on_selected)
        board.bus.subscribe(UnitDeselected, self._on_deselected)
        board.bus.subscribe(MoveStarted, self._on_started)
        board.bus.subscribe(MoveCompleted, self._on_completed)
        board.bus.subscribe(MoveRejected, self._on_rejected)

    def _name(self, uid: int) -> str:
        unit = self._board.registry.unit(uid)
        return unit.name or f"Unit {uid}"

    def _on_selected(self, signal: UnitSelected) -> None:
        self.set(f"{self._name(signal.uid)} selected, {len(signal.reachable)} cells in reach")

    def _on_deselected(self, signal: UnitDeselected) -> None:
        self.set(f"{self._name(signal.uid)} deselected", COLOR_TEXT_DIM)

    def _on_started(self, signal: MoveStarted) -> None:
        steps = len(signal.path) - 1
        self.set(f"{self._name(signal.uid)} moving {steps} cells to {signal.to_cell}", COLOR_WARN)

    def _on_completed(self, signal: MoveCompleted) -> None:
        self.set(f"{self._name(signal.uid)} arrived at {signal.cell}", COLOR_OK)

    def _on_rejected(self, signal: MoveRejected) -> None:
        self.set(f"Cannot move to {signal.cell}: {signal.reason}", COLOR_BAD)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def set(self, message: str, color: tuple[int, int, int] = COLOR_TEXT) -> None:
        self._message = message
        self._color = color

    def draw(self, surface: pygame.Surface, top: int, width: int) -> None:
        bar_rect = pygame.Rect(0, top, width, STATUS_H)
        pygame.draw.rect(surface, (30, 30, 40), bar_rect)
        if self._message:
            text = self._get_font().render(self._message, True, self._color)
            surface.blit(text, (8, top + 8))


def draw_sidebar(
    surface: pygame.Surface,
    board: Board,
    rect: pygame.Rect,
    font: pygame.font.Font,
    tick: int,
) -> None:
    """Controller state, cursor cell and the unit roster."""
    pygame.draw.rect(surface, COLOR_SIDEBAR_BG, rect)
    x, y = rect.x + 10, rect.y + 10
    lines = [
        (f"Tick {tick}", COLOR_TEXT_DIM),
        (f"State: {board.controller.state.value}", COLOR_TEXT),
        (f"Cursor: {board.cursor.cell}", COLOR_TEXT),
        ("", COLOR_TEXT),
        ("Units", COLOR_TEXT_DIM),
    ]
    for unit in board.registry.units():
        color = COLOR_WARN if unit.selected else COLOR_TEXT
        lines.append((f" {unit.name or unit.uid} {unit.cell} mv {unit.move_range}", color))
    lines += [
        ("", COLOR_TEXT),
        ("Arrows/mouse  move cursor", COLOR_TEXT_DIM),
        ("Enter/click   select, move", COLOR_TEXT_DIM),
        ("Esc/RMB       cancel", COLOR_TEXT_DIM),
        ("Esc (idle)    quit", COLOR_TEXT_DIM),
    ]
    for text, color in lines:
        if text:
            surface.blit(font.render(text, True, color), (x, y))
        y += 16
