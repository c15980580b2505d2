"""Engine - fixed-timestep tick loop driving a board."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick_tactics.board import Board


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


System = Callable[["Board", TickContext], None]


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
            request_stop=stop_fn,
        )


class Engine:
    """Runs systems over a board, in registration order, once per tick."""

    def __init__(self, board: Board, tps: int | None = None) -> None:
        self._board = board
        self._clock = Clock(board.config.tps if tps is None else tps)
        self._systems: list[System] = []
        self._stop_requested = False

    @property
    def board(self) -> Board:
        return self._board

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop)
        for system in self._systems:
            system(self._board, ctx)
            if self._stop_requested:
                break

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

    def run_until(self, predicate: Callable[[Board], bool], max_ticks: int) -> bool:
        """Tick until ``predicate(board)`` holds. False if ``max_ticks`` ran out."""
        self._stop_requested = False
        for _ in range(max_ticks):
            if predicate(self._board):
                return True
            self._tick()
            if self._stop_requested:
                break
        return predicate(self._board)
