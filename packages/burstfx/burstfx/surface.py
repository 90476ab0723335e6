"""Headless host pieces: a fixed viewport and an in-memory render surface."""
from __future__ import annotations

from dataclasses import dataclass, field

from burstfx.types import Color


@dataclass
class FixedViewport:
    width: float = 800.0
    height: float = 600.0

    def size(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(eq=False)
class Primitive:
    size: float
    color: Color
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    axis: tuple[float, float, float] = (0.0, 0.0, 1.0)
    visible: bool = False
    placements: int = 0


@dataclass(eq=False)
class Container:
    primitives: list[Primitive] = field(default_factory=list)


class MemorySurface:
    """Keeps containers and primitives as plain objects.

    Useful for running bursts without a display and for checking what a
    burst created and released.
    """

    def __init__(self, ready: bool = True) -> None:
        self._ready = ready
        self.containers: list[Container] = []
        self.created_containers = 0
        self.destroyed_containers = 0
        self.created_primitives = 0
        self.destroyed_primitives = 0

    @property
    def ready(self) -> bool:
        return self._ready

    @ready.setter
    def ready(self, value: bool) -> None:
        self._ready = value

    @property
    def live_primitives(self) -> int:
        return sum(len(c.primitives) for c in self.containers)

    def create_container(self) -> Container:
        container = Container()
        self.containers.append(container)
        self.created_containers += 1
        return container

    def destroy_container(self, container: Container) -> None:
        self.containers.remove(container)
        self.destroyed_containers += 1

    def create_primitive(self, container: Container, size: float, color: Color) -> Primitive:
        primitive = Primitive(size=size, color=color)
        container.primitives.append(primitive)
        self.created_primitives += 1
        return primitive

    def destroy_primitive(self, container: Container, primitive: Primitive) -> None:
        container.primitives.remove(primitive)
        self.destroyed_primitives += 1

    def place(
        self,
        primitive: Primitive,
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
        primitive.placements += 1
