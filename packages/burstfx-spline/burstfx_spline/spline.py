"""1-D splines of random lateral deviations keyed on sampled positions."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Sequence

from burstfx_spline.easing import EASINGS
from burstfx_spline.sampler import generate


@dataclass(frozen=True)
class ControlPoint:
    """One knot of a spline: normalized position ``x`` and deviation ``y``."""

    x: float
    y: float


Spline = tuple[ControlPoint, ...]


def build_spline(
    positions: Sequence[float], deviation: float, rng: random.Random
) -> Spline:
    """Attach a deviation drawn from [0, deviation) to every position.

    Endpoint deviations are drawn independently of each other.
    """
    if len(positions) < 2:
        raise ValueError("a spline needs at least two positions")
    if positions[0] != 0.0 or positions[-1] != 1.0:
        raise ValueError("spline positions must start at 0.0 and end at 1.0")
    return tuple(ControlPoint(x, deviation * rng.random()) for x in positions)


def random_spline(min_gap: float, deviation: float, rng: random.Random) -> Spline:
    return build_spline(generate(min_gap, rng), deviation, rng)


def evaluate(spline: Spline, t: float, easing: str = "cosine") -> float:
    """Interpolate the spline at ``t`` in [0, 1].

    The endpoints are returned exactly; values outside [0, 1] clamp.
    """
    first, last = spline[0], spline[-1]
    if t <= first.x:
        return first.y
    if t >= last.x:
        return last.y

    ease = EASINGS[easing]
    for left, right in zip(spline, spline[1:]):
        if left.x <= t <= right.x:
            if t == right.x:
                return right.y
            f = (t - left.x) / (right.x - left.x)
            return left.y + ease(f) * (right.y - left.y)
    return last.y
