"""Typed in-process signal bus with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable, TypeVar

E = TypeVar("E")

_Handler = Callable[[Any], None]


class SignalBus:
    """Queues published signals and delivers them on ``flush()``.

    Handlers subscribe to a signal class and receive the signal instance.
    Signals published while flushing are delivered on the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[_Handler]] = {}
        self._queue: list[Any] = []

    def subscribe(self, signal_type: type[E], handler: Callable[[E], None]) -> None:
        self._subscribers.setdefault(signal_type, []).append(handler)

    def unsubscribe(self, signal_type: type[E], handler: Callable[[E], None]) -> None:
        handlers = self._subscribers.get(signal_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal: Any) -> None:
        self._queue.append(signal)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal in snapshot:
            for handler in list(self._subscribers.get(type(signal), ())):
                handler(signal)

    def clear(self) -> None:
        self._queue.clear()
