"""Tests for spline building and evaluation."""
from __future__ import annotations

import math
import random

import pytest

from burstfx_spline import ControlPoint, build_spline, evaluate, generate, random_spline


def _spline(*knots: tuple[float, float]):
    return tuple(ControlPoint(x, y) for x, y in knots)


# --- build_spline ---


def test_build_keeps_positions():
    positions = [0.0, 0.3, 0.6, 1.0]
    spline = build_spline(positions, 100.0, random.Random(0))
    assert [p.x for p in spline] == positions


def test_deviations_within_range():
    rng = random.Random(5)
    spline = random_spline(0.05, 40.0, rng)
    for point in spline:
        assert 0.0 <= point.y < 40.0


def test_endpoint_deviations_drawn_independently():
    """Endpoint deviations are not mirrored."""
    differing = 0
    for seed in range(20):
        spline = random_spline(0.1, 100.0, random.Random(seed))
        if spline[0].y != spline[-1].y:
            differing += 1
    assert differing == 20


def test_zero_deviation_is_flat():
    spline = random_spline(0.1, 0.0, random.Random(1))
    assert all(p.y == 0.0 for p in spline)


def test_build_rejects_missing_endpoints():
    with pytest.raises(ValueError):
        build_spline([0.1, 0.5, 1.0], 10.0, random.Random(0))
    with pytest.raises(ValueError):
        build_spline([0.0], 10.0, random.Random(0))


def test_random_spline_matches_manual_pipeline():
    expected = build_spline(generate(0.1, random.Random(9)), 50.0, _continue(9, 0.1))
    assert random_spline(0.1, 50.0, random.Random(9)) == expected


def _continue(seed: int, min_gap: float) -> random.Random:
    """An rng advanced past the draws made by generate()."""
    rng = random.Random(seed)
    generate(min_gap, rng)
    return rng


# --- evaluate ---


def test_evaluate_endpoints_exact():
    """evaluate(0) and evaluate(1) return the endpoint deviations exactly."""
    for seed in range(30):
        spline = random_spline(0.1, 100.0, random.Random(seed))
        assert evaluate(spline, 0.0) == spline[0].y
        assert evaluate(spline, 1.0) == spline[-1].y


def test_evaluate_at_knot_returns_knot_value():
    spline = _spline((0.0, 1.0), (0.4, 7.0), (1.0, 3.0))
    assert evaluate(spline, 0.4) == 7.0


def test_evaluate_midpoint_is_average():
    """Cosine easing passes through the mean at the segment midpoint."""
    spline = _spline((0.0, 0.0), (1.0, 10.0))
    assert evaluate(spline, 0.5) == pytest.approx(5.0)


def test_evaluate_cosine_shape():
    spline = _spline((0.0, 0.0), (1.0, 10.0))
    expected = 10.0 * (1 - math.cos(math.pi * 0.25)) / 2
    assert evaluate(spline, 0.25) == pytest.approx(expected)
    assert evaluate(spline, 0.25) < 2.5


def test_evaluate_linear_easing():
    spline = _spline((0.0, 0.0), (1.0, 10.0))
    assert evaluate(spline, 0.25, easing="linear") == pytest.approx(2.5)


def test_evaluate_stays_between_bracketing_knots():
    spline = random_spline(0.05, 100.0, random.Random(4))
    for i in range(101):
        t = i / 100
        value = evaluate(spline, t)
        left = max((p for p in spline if p.x <= t), key=lambda p: p.x)
        right = min((p for p in spline if p.x >= t), key=lambda p: p.x)
        low, high = sorted((left.y, right.y))
        assert low - 1e-9 <= value <= high + 1e-9


def test_evaluate_clamps_outside_unit_interval():
    spline = _spline((0.0, 2.0), (1.0, 8.0))
    assert evaluate(spline, -0.5) == 2.0
    assert evaluate(spline, 1.5) == 8.0
