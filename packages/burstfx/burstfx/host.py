"""Protocols the host environment implements for burstfx."""
from __future__ import annotations

from typing import Any, Callable, Protocol

from burstfx.types import Color

FrameCallback = Callable[[float], None]


class Viewport(Protocol):
    def size(self) -> tuple[float, float]:
        """Current (width, height) in pixels."""
        ...


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> None:
        """Invoke ``callback(timestamp_ms)`` once before the next repaint."""
        ...


class RenderSurface(Protocol):
    @property
    def ready(self) -> bool: ...

    def create_container(self) -> Any: ...

    def destroy_container(self, container: Any) -> None: ...

    def create_primitive(self, container: Any, size: float, color: Color) -> Any: ...

    def destroy_primitive(self, container: Any, primitive: Any) -> None: ...

    def place(
        self,
        primitive: Any,
        x: float,
        y: float,
        angle: float,
        axis: tuple[float, float, float],
        visible: bool = True,
    ) -> None:
        """Move ``primitive`` to (x, y), rotated ``angle`` degrees about ``axis``."""
        ...
