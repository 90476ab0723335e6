"""Burst configuration."""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from burstfx.palette import THEMES
from burstfx.types import InvalidConfigurationError

Range = tuple[float, float]


def _all_themes() -> tuple[str, ...]:
    return tuple(THEMES)


@dataclass(frozen=True)
class BurstConfig:
    """Immutable settings for one confetti burst.

    Times are milliseconds and velocities are pixels (or degrees) per
    millisecond.

    Attributes:
        particle_count: Particles to spawn. Zero or less is an empty burst.
        size_range: Edge length of each particle, in pixels.
        lateral_deviation: Wobble amplitude. Also the spawn height above
            the viewport and the margin below it before a particle expires.
        fall_velocity_range: Downward speed.
        lateral_velocity_range: Horizontal drift speed.
        rotation_velocity_range: Spin speed about the particle's axis.
        period_millis: Time for one full cycle of the wobble spline.
        path_min_gap: Minimum spacing of wobble spline knots in (0, 0.5).
            Smaller values give busier paths.
        spawn_interval_millis: Delay between successive particles appearing.
        color_themes: Names from ``palette.THEMES`` to draw colours from.
    """

    particle_count: int = 50
    size_range: Range = (3.0, 12.0)
    lateral_deviation: float = 100.0
    fall_velocity_range: Range = (0.13, 0.31)
    lateral_velocity_range: Range = (-0.1, 0.1)
    rotation_velocity_range: Range = (0.4, 0.7)
    period_millis: int = 6000
    path_min_gap: float = 0.1
    spawn_interval_millis: float = 0.0
    color_themes: tuple[str, ...] = field(default_factory=_all_themes)

    def __post_init__(self) -> None:
        if not isinstance(self.particle_count, int) or isinstance(self.particle_count, bool):
            raise InvalidConfigurationError(
                f"particle_count must be an int, got {self.particle_count!r}"
            )
        _check_range("size_range", self.size_range, positive=True)
        _check_range("fall_velocity_range", self.fall_velocity_range, positive=True)
        _check_range("lateral_velocity_range", self.lateral_velocity_range)
        _check_range("rotation_velocity_range", self.rotation_velocity_range)
        _check_number("lateral_deviation", self.lateral_deviation)
        if self.lateral_deviation < 0:
            raise InvalidConfigurationError(
                f"lateral_deviation must be >= 0, got {self.lateral_deviation}"
            )
        if (
            not isinstance(self.period_millis, int)
            or isinstance(self.period_millis, bool)
            or self.period_millis <= 0
        ):
            raise InvalidConfigurationError(
                f"period_millis must be a positive int, got {self.period_millis!r}"
            )
        _check_number("path_min_gap", self.path_min_gap)
        if not 0.0 < self.path_min_gap < 0.5:
            raise InvalidConfigurationError(
                f"path_min_gap must be in (0, 0.5), got {self.path_min_gap}"
            )
        _check_number("spawn_interval_millis", self.spawn_interval_millis)
        if self.spawn_interval_millis < 0:
            raise InvalidConfigurationError(
                f"spawn_interval_millis must be >= 0, got {self.spawn_interval_millis}"
            )
        if not isinstance(self.color_themes, (tuple, list)) or not all(
            isinstance(name, str) for name in self.color_themes
        ):
            raise InvalidConfigurationError(
                f"color_themes must be a sequence of names, got {self.color_themes!r}"
            )
        if not self.color_themes:
            raise InvalidConfigurationError("color_themes must not be empty")
        unknown = [name for name in self.color_themes if name not in THEMES]
        if unknown:
            raise InvalidConfigurationError(f"Unknown color themes: {unknown}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BurstConfig:
        """Build a config from a plain mapping, e.g. decoded JSON."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigurationError(f"Unknown config keys: {unknown}")
        values = {
            key: tuple(value) if isinstance(value, list) else value
            for key, value in data.items()
        }
        return cls(**values)

    def replace(self, **changes: Any) -> BurstConfig:
        return dataclasses.replace(self, **changes)


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidConfigurationError(f"{name} must be finite, got {value!r}")


def _check_range(name: str, value: Range, positive: bool = False) -> None:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise InvalidConfigurationError(f"{name} must be a (min, max) pair, got {value!r}")
    low, high = value
    _check_number(name, low)
    _check_number(name, high)
    if low > high:
        raise InvalidConfigurationError(f"{name} min {low} exceeds max {high}")
    if positive and low <= 0:
        raise InvalidConfigurationError(f"{name} must be positive, got {value!r}")
