"""FrameClock - turns host frame timestamps into per-frame deltas."""
from __future__ import annotations

from burstfx.types import FrameContext


class FrameClock:
    def __init__(self) -> None:
        self._frame_number = 0
        self._elapsed = 0.0
        self._previous: float | None = None

    @property
    def frame_number(self) -> int:
        return self._frame_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def previous(self) -> float | None:
        return self._previous

    def advance(self, timestamp: float) -> FrameContext:
        """Record a frame at ``timestamp`` ms and return its context.

        The first frame has dt 0. Timestamps that go backwards also
        yield dt 0 rather than a negative delta.
        """
        if self._previous is None:
            dt = 0.0
        else:
            dt = max(0.0, timestamp - self._previous)
        self._previous = timestamp
        self._frame_number += 1
        self._elapsed += dt
        return FrameContext(
            frame_number=self._frame_number,
            dt=dt,
            elapsed=self._elapsed,
            timestamp=timestamp,
        )

    def reset(self) -> None:
        self._frame_number = 0
        self._elapsed = 0.0
        self._previous = None
