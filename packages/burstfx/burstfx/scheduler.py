"""ManualFrameScheduler - a frame source driven by the caller."""
from __future__ import annotations

from burstfx.host import FrameCallback


class ManualFrameScheduler:
    """Queues frame requests until the caller advances time.

    Callbacks requested while a frame is being delivered wait for the
    next frame, matching how a browser or game loop behaves.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[FrameCallback] = []
        self._frames = 0

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def frames(self) -> int:
        """Frames delivered that had at least one callback waiting."""
        return self._frames

    def request_frame(self, callback: FrameCallback) -> None:
        self._queue.append(callback)

    def advance(self, dt: float = 16.0) -> int:
        """Move the clock forward ``dt`` ms and fire the waiting callbacks.

        Returns the number of callbacks fired.
        """
        self._now += dt
        snapshot = self._queue
        self._queue = []
        if snapshot:
            self._frames += 1
        for callback in snapshot:
            callback(self._now)
        return len(snapshot)

    def run(self, n: int, dt: float = 16.0) -> None:
        for _ in range(n):
            self.advance(dt)

    def run_until_idle(self, dt: float = 16.0, max_frames: int = 100_000) -> int:
        """Advance until nothing is queued. Returns frames delivered."""
        delivered = 0
        while self._queue:
            if delivered >= max_frames:
                raise RuntimeError(f"Still busy after {max_frames} frames")
            self.advance(dt)
            delivered += 1
        return delivered
