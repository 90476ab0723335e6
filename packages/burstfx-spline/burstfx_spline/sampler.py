"""Dart-throwing Poisson-disc sampler over the unit interval."""
from __future__ import annotations

import random


def _measure(domain: list[tuple[float, float]]) -> float:
    return sum(b - a for a, b in domain)


def _locate(domain: list[tuple[float, float]], dart: float) -> float:
    """Map a dart thrown over the free measure onto a position in [0, 1]."""
    offset = 0.0
    for a, b in domain:
        width = b - a
        if dart < offset + width:
            return a + (dart - offset)
        offset += width
    # Rounding in the running sum can push the dart past the last interval.
    a, b = domain[-1]
    return a + (b - a) / 2


def _carve(
    domain: list[tuple[float, float]], low: float, high: float
) -> list[tuple[float, float]]:
    """Remove (low, high) from every free interval, splitting where needed."""
    carved: list[tuple[float, float]] = []
    for a, b in domain:
        if b <= low or a >= high:
            carved.append((a, b))
            continue
        if a < low:
            carved.append((a, low))
        if b > high:
            carved.append((high, b))
    return carved


def generate(min_gap: float, rng: random.Random | None = None) -> list[float]:
    """Return sorted positions in [0, 1] at least ``min_gap`` apart.

    Always contains exactly one 0.0 and one 1.0. Interior points are
    accepted one at a time, each drawn uniformly over the free measure
    that remains, until no free space is left.

    Raises:
        ValueError: If ``min_gap`` is not inside (0, 0.5).
    """
    if not 0.0 < min_gap < 0.5:
        raise ValueError(f"min_gap must be in (0, 0.5), got {min_gap}")
    if rng is None:
        rng = random.Random()

    domain = [(min_gap, 1.0 - min_gap)]
    measure = _measure(domain)
    points = [0.0, 1.0]

    while measure > 0.0:
        position = _locate(domain, measure * rng.random())
        points.append(position)
        domain = [
            (a, b) for a, b in _carve(domain, position - min_gap, position + min_gap)
            if b > a
        ]
        remaining = _measure(domain)
        if remaining >= measure:
            raise RuntimeError(
                f"free measure did not shrink ({measure} -> {remaining})"
            )
        measure = remaining

    return sorted(points)
