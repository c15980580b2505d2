"""System factories wiring a board into the engine loop."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from tick_tactics.animator import WalkAnimator
from tick_tactics.engine import Engine

if TYPE_CHECKING:
    from tick_tactics.board import Board
    from tick_tactics.bus import SignalBus
    from tick_tactics.engine import TickContext
    from tick_tactics.inputs import InputQueue


def make_input_system(
    queue: InputQueue,
    on_ignored: Callable[[Any], None] | None = None,
) -> Callable[[Board, TickContext], None]:
    """Return a system that feeds queued input to the board's controller.

    ``on_ignored(event)`` fires for every event the controller did not act on.
    """

    def input_system(board: Board, ctx: TickContext) -> None:
        for event, accepted in queue.drain(board.controller):
            if not accepted and on_ignored is not None:
                on_ignored(event)

    return input_system


def make_walk_system(animator: WalkAnimator) -> Callable[[Board, TickContext], None]:
    def walk_system(board: Board, ctx: TickContext) -> None:
        animator.advance()

    return walk_system


def make_signal_system(bus: SignalBus) -> Callable[[Board, TickContext], None]:
    def signal_system(board: Board, ctx: TickContext) -> None:
        bus.flush()

    return signal_system


def make_engine(board: Board, tps: int | None = None) -> Engine:
    """Engine with the default order: input, walk animation, signal flush.

    The walk system is only added when the board uses a ``WalkAnimator``.
    """
    engine = Engine(board, tps)
    engine.add_system(make_input_system(board.inputs))
    if isinstance(board.animator, WalkAnimator):
        engine.add_system(make_walk_system(board.animator))
    engine.add_system(make_signal_system(board.bus))
    return engine
