"""Viewport and frame scheduler backed by a pygame display."""
from __future__ import annotations

from typing import Callable

import pygame


class PygameViewport:
    def __init__(self, screen: pygame.Surface) -> None:
        self._screen = screen

    def size(self) -> tuple[float, float]:
        width, height = self._screen.get_size()
        return (float(width), float(height))


class PygameFrameScheduler:
    """Collects frame requests and delivers them from the game loop.

    Call ``pump()`` once per iteration of the pygame main loop, before
    drawing.
    """

    def __init__(self) -> None:
        self._queue: list[Callable[[float], None]] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def request_frame(self, callback: Callable[[float], None]) -> None:
        self._queue.append(callback)

    def pump(self, timestamp: float | None = None) -> int:
        if timestamp is None:
            timestamp = float(pygame.time.get_ticks())
        snapshot = self._queue
        self._queue = []
        for callback in snapshot:
            callback(timestamp)
        return len(snapshot)
