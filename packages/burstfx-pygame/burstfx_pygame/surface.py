"""PygameSurface - draws burst particles as tumbling squares."""
from __future__ import annotations

import math
from dataclasses import dataclass, field

import pygame

Point = tuple[float, float]


@dataclass(eq=False)
class Flake:
    size: float
    color: tuple[int, int, int]
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    axis: tuple[float, float, float] = (0.0, 0.0, 1.0)
    visible: bool = False


@dataclass(eq=False)
class Layer:
    flakes: list[Flake] = field(default_factory=list)


def _rotate(
    point: tuple[float, float, float], axis: tuple[float, float, float], angle: float
) -> tuple[float, float, float]:
    """Rodrigues rotation of ``point`` about unit ``axis`` by ``angle`` radians."""
    px, py, pz = point
    kx, ky, kz = axis
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    dot = kx * px + ky * py + kz * pz
    cross = (ky * pz - kz * py, kz * px - kx * pz, kx * py - ky * px)
    return (
        px * cos_a + cross[0] * sin_a + kx * dot * (1 - cos_a),
        py * cos_a + cross[1] * sin_a + ky * dot * (1 - cos_a),
        pz * cos_a + cross[2] * sin_a + kz * dot * (1 - cos_a),
    )


def project_square(
    x: float,
    y: float,
    size: float,
    angle: float,
    axis: tuple[float, float, float],
) -> list[Point]:
    """Corners of a square centred on (x, y) after rotating it in 3-D.

    ``angle`` is in degrees. The result is an orthographic projection
    onto the screen plane, so a square seen edge-on collapses to a line.
    """
    length = math.sqrt(sum(c * c for c in axis))
    unit = (0.0, 0.0, 1.0) if length == 0.0 else tuple(c / length for c in axis)
    half = size / 2
    corners = ((-half, -half, 0.0), (half, -half, 0.0), (half, half, 0.0), (-half, half, 0.0))
    radians = math.radians(angle)
    projected = []
    for corner in corners:
        rx, ry, _ = _rotate(corner, unit, radians)  # type: ignore[arg-type]
        projected.append((x + rx, y + ry))
    return projected


class PygameSurface:
    """RenderSurface that keeps flakes in layers and draws them onto a pygame surface."""

    def __init__(self, target: pygame.Surface | None = None) -> None:
        self._target = target
        self._layers: list[Layer] = []

    @property
    def ready(self) -> bool:
        return self._target is not None

    @property
    def target(self) -> pygame.Surface | None:
        return self._target

    @target.setter
    def target(self, value: pygame.Surface | None) -> None:
        self._target = value

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def create_container(self) -> Layer:
        layer = Layer()
        self._layers.append(layer)
        return layer

    def destroy_container(self, container: Layer) -> None:
        self._layers.remove(container)

    def create_primitive(self, container: Layer, size: float, color: tuple[int, int, int]) -> Flake:
        flake = Flake(size=size, color=color)
        container.flakes.append(flake)
        return flake

    def destroy_primitive(self, container: Layer, primitive: Flake) -> None:
        container.flakes.remove(primitive)

    def place(
        self,
        primitive: Flake,
        x: float,
        y: float,
        angle: float,
        axis: tuple[float, float, float],
        visible: bool = True,
    ) -> None:
        primitive.x = x
        primitive.y = y
        primitive.angle = angle
        primitive.axis = axis
        primitive.visible = visible

    def draw(self, target: pygame.Surface | None = None) -> int:
        """Draw every visible flake. Returns how many were drawn."""
        target = target if target is not None else self._target
        if target is None:
            return 0
        drawn = 0
        for layer in self._layers:
            for flake in layer.flakes:
                if not flake.visible:
                    continue
                corners = project_square(flake.x, flake.y, flake.size, flake.angle, flake.axis)
                pygame.draw.polygon(target, flake.color, corners)
                drawn += 1
        return drawn
