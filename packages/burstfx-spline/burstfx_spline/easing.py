"""Easing functions for spline segment interpolation."""
from __future__ import annotations

import math
from typing import Callable


def linear(f: float) -> float:
    return f


def cosine(f: float) -> float:
    return (1 - math.cos(math.pi * f)) / 2


def smoothstep(f: float) -> float:
    return f * f * (3 - 2 * f)


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "cosine": cosine,
    "smoothstep": smoothstep,
}
