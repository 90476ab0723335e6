"""Particle state, motion and the view adapter that draws it."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Any

from burstfx_spline import Spline, evaluate, random_spline

from burstfx.config import BurstConfig, Range
from burstfx.host import RenderSurface
from burstfx.palette import pick_color
from burstfx.types import Color

_TAU = 2 * math.pi


@dataclass
class ParticleState:
    """Physics of one particle. Holds no reference to anything drawable.

    ``position`` is the fall line; the wobble from ``spline`` only shows
    up in ``render_position``.
    """

    position: tuple[float, float]
    fall_velocity: float
    lateral_velocity: float
    rotation_angle: float
    rotation_velocity: float
    rotation_axis: tuple[float, float, float]
    size: float
    color: Color
    spline: Spline
    period: float
    margin: float
    frame_accumulator: float = 0.0
    delay: float = 0.0
    render_position: tuple[float, float] | None = None

    @property
    def active(self) -> bool:
        return self.delay <= 0.0


def _between(rng: random.Random, bounds: Range) -> float:
    low, high = bounds
    return low + (high - low) * rng.random()


def spawn_particle(
    config: BurstConfig,
    viewport_width: float,
    rng: random.Random,
    delay: float = 0.0,
) -> ParticleState:
    """Create a particle just above the viewport at a random column."""
    deviation = config.lateral_deviation
    axis = (math.cos(_TAU * rng.random()), math.cos(_TAU * rng.random()), 0.0)
    return ParticleState(
        position=(viewport_width * rng.random(), -deviation),
        fall_velocity=_between(rng, config.fall_velocity_range),
        lateral_velocity=_between(rng, config.lateral_velocity_range),
        rotation_angle=360.0 * rng.random(),
        rotation_velocity=_between(rng, config.rotation_velocity_range),
        rotation_axis=axis,
        size=_between(rng, config.size_range),
        color=pick_color(config.color_themes, rng),
        spline=random_spline(config.path_min_gap, deviation, rng),
        period=float(config.period_millis),
        margin=deviation,
        delay=delay,
    )


def advance(state: ParticleState, dt: float, viewport_height: float) -> bool:
    """Move ``state`` forward by ``dt`` ms. Returns True once it has expired."""
    if state.delay > 0.0:
        state.delay -= dt
        if state.delay > 0.0:
            return False
        dt = -state.delay
        state.delay = 0.0

    state.frame_accumulator += dt
    x, y = state.position
    x += state.lateral_velocity * dt
    y += state.fall_velocity * dt
    state.position = (x, y)
    state.rotation_angle += state.rotation_velocity * dt

    phi = (state.frame_accumulator % state.period) / state.period
    rho = evaluate(state.spline, phi)
    theta = phi * _TAU
    state.render_position = (x + rho * math.cos(theta), y + rho * math.sin(theta))

    return y > viewport_height + state.margin


class ParticleView:
    """Mirrors a ParticleState onto one primitive of a RenderSurface."""

    def __init__(self, surface: RenderSurface, container: Any, state: ParticleState) -> None:
        self._surface = surface
        self._container = container
        self._primitive: Any = surface.create_primitive(container, state.size, state.color)
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def render(self, state: ParticleState) -> None:
        if self._released:
            return
        if not state.active or state.render_position is None:
            x, y = state.position
            visible = False
        else:
            x, y = state.render_position
            visible = True
        self._surface.place(
            self._primitive, x, y, state.rotation_angle, state.rotation_axis, visible
        )

    def release(self) -> None:
        if self._released:
            return
        self._surface.destroy_primitive(self._container, self._primitive)
        self._released = True


class Particle:
    """A ParticleState paired with its view."""

    def __init__(self, state: ParticleState, view: ParticleView | None = None) -> None:
        self.state = state
        self.view = view

    def update(self, dt: float, viewport_height: float) -> bool:
        expired = advance(self.state, dt, viewport_height)
        if self.view is not None and not expired:
            self.view.render(self.state)
        return expired

    def release(self) -> None:
        if self.view is not None:
            self.view.release()
