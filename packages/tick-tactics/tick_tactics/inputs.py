"""InputQueue - FIFO buffer of discrete input events between ticks."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

from tick_tactics.events import CancelPressed, CursorMoved, InteractPressed

if TYPE_CHECKING:
    from tick_tactics.controller import SelectionController

_INPUT_TYPES = (CursorMoved, InteractPressed, CancelPressed)


class InputQueue:
    """Collects input events from the front end and feeds the controller.

    Only the three input event classes are accepted; anything else raises
    ``TypeError`` at enqueue time.
    """

    def __init__(self) -> None:
        self._pending: deque[Any] = deque()

    def enqueue(self, event: Any) -> None:
        """Add an event to the queue. Safe to call between ticks."""
        if not isinstance(event, _INPUT_TYPES):
            raise TypeError(f"Not an input event: {type(event).__qualname__}")
        self._pending.append(event)

    def pending(self) -> int:
        return len(self._pending)

    def drain(self, controller: SelectionController) -> list[tuple[Any, bool]]:
        """Hand every pending event to the controller, oldest first.

        Returns ``[(event, accepted), ...]``.
        """
        results: list[tuple[Any, bool]] = []
        while self._pending:
            event = self._pending.popleft()
            results.append((event, controller.handle(event)))
        return results

    def clear(self) -> None:
        self._pending.clear()
