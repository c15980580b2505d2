"""Easing curves for walk interpolation."""
from __future__ import annotations

from typing import Callable


def linear(t: float) -> float:
    return t


def ease_in(t: float) -> float:
    return t * t


def ease_out(t: float) -> float:
    return t * (2 - t)


def smoothstep(t: float) -> float:
    return t * t * (3 - 2 * t)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "smoothstep": smoothstep,
}
