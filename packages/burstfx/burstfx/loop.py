"""SimulationLoop - frame-driven ticking of a particle set until it drains."""
from __future__ import annotations

import logging
from typing import Callable, Iterable

from burstfx.clock import FrameClock
from burstfx.host import FrameScheduler, Viewport
from burstfx.particle import Particle
from burstfx.types import FrameContext, LoopState

logger = logging.getLogger(__name__)

DrainHook = Callable[["SimulationLoop"], None]


class SimulationLoop:
    """Ticks every particle once per frame and stops when none are left.

    IDLE -> RUNNING -> DRAINED. A loop runs once; DRAINED is terminal.
    Each tick requests the next frame from the scheduler, so the host
    drives timing and tests can fire frames by hand.
    """

    def __init__(
        self,
        particles: Iterable[Particle],
        viewport: Viewport,
        scheduler: FrameScheduler,
    ) -> None:
        self._particles: list[Particle] = list(particles)
        self._viewport = viewport
        self._scheduler = scheduler
        self._clock = FrameClock()
        self._state = LoopState.IDLE
        self._drain_hooks: list[DrainHook] = []
        self._cancelled = False

    @property
    def state(self) -> LoopState:
        return self._state

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def particles(self) -> tuple[Particle, ...]:
        return tuple(self._particles)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def on_drain(self, hook: DrainHook) -> None:
        self._drain_hooks.append(hook)

    def start(self) -> None:
        if self._state is not LoopState.IDLE:
            raise RuntimeError(f"Cannot start a loop that is {self._state.value}")
        self._state = LoopState.RUNNING
        logger.debug("Loop started with %d particles", len(self._particles))
        if not self._particles:
            self._drain()
            return
        self._scheduler.request_frame(self.tick)

    def tick(self, timestamp: float) -> FrameContext | None:
        """Advance one frame. A no-op unless the loop is running."""
        if self._state is not LoopState.RUNNING:
            return None

        ctx = self._clock.advance(timestamp)
        _, height = self._viewport.size()
        survivors: list[Particle] = []
        for particle in self._particles:
            if particle.update(ctx.dt, height):
                particle.release()
            else:
                survivors.append(particle)
        self._particles = survivors

        if self._particles:
            self._scheduler.request_frame(self.tick)
        else:
            self._drain()
        return ctx

    def cancel(self) -> None:
        if self._state is LoopState.DRAINED:
            return
        self._cancelled = True
        logger.debug("Loop cancelled with %d particles left", len(self._particles))
        self._drain()

    def _drain(self) -> None:
        for particle in self._particles:
            particle.release()
        self._particles = []
        self._state = LoopState.DRAINED
        logger.debug("Loop drained after %d frames", self._clock.frame_number)
        for hook in self._drain_hooks:
            hook(self)
