"""Burst handle, trigger_burst and BurstController."""
from __future__ import annotations

import logging
import os
import random
from typing import Any, Mapping

from burstfx.config import BurstConfig
from burstfx.host import FrameScheduler, RenderSurface, Viewport
from burstfx.loop import SimulationLoop
from burstfx.particle import Particle, ParticleView, spawn_particle
from burstfx.types import InvalidConfigurationError, LoopState, PreconditionFailedError

logger = logging.getLogger(__name__)


class Burst:
    """One running confetti burst. Owns its container and its particles."""

    def __init__(
        self,
        config: BurstConfig,
        surface: RenderSurface,
        container: Any,
        loop: SimulationLoop,
    ) -> None:
        self._config = config
        self._surface = surface
        self._container = container
        self._loop = loop
        self._container_released = False
        loop.on_drain(self._release_container)

    @property
    def config(self) -> BurstConfig:
        return self._config

    @property
    def container(self) -> Any:
        return self._container

    @property
    def loop(self) -> SimulationLoop:
        return self._loop

    @property
    def state(self) -> LoopState:
        return self._loop.state

    @property
    def drained(self) -> bool:
        return self._loop.state is LoopState.DRAINED

    @property
    def container_released(self) -> bool:
        return self._container_released

    def __len__(self) -> int:
        return len(self._loop.particles)

    def cancel(self) -> None:
        """Stop the burst now, releasing every particle and the container."""
        self._loop.cancel()

    def _release_container(self, loop: SimulationLoop) -> None:
        if self._container_released:
            return
        self._surface.destroy_container(self._container)
        self._container_released = True


def trigger_burst(
    config: BurstConfig | Mapping[str, Any] | None = None,
    *,
    surface: RenderSurface | None,
    viewport: Viewport,
    scheduler: FrameScheduler,
    rng: random.Random | None = None,
) -> Burst:
    """Spawn ``config.particle_count`` particles and start their loop.

    ``config`` may be a BurstConfig or a plain mapping of its fields.

    Raises:
        InvalidConfigurationError: If a mapping config is invalid.
        PreconditionFailedError: If ``surface`` is missing or not ready.
            Nothing is created in either case.
    """
    if config is None:
        config = BurstConfig()
    elif not isinstance(config, BurstConfig):
        try:
            config = BurstConfig.from_dict(config)
        except InvalidConfigurationError as exc:
            logger.warning("Rejected burst config: %s", exc)
            raise
    if surface is None or not surface.ready:
        logger.warning("Burst triggered without a ready render surface")
        raise PreconditionFailedError("Render surface is not available")
    if rng is None:
        rng = random.Random()

    width, _ = viewport.size()
    container = surface.create_container()
    particles: list[Particle] = []
    try:
        for i in range(max(config.particle_count, 0)):
            state = spawn_particle(config, width, rng, delay=i * config.spawn_interval_millis)
            particles.append(Particle(state, ParticleView(surface, container, state)))
    except Exception:
        for particle in particles:
            particle.release()
        surface.destroy_container(container)
        raise

    loop = SimulationLoop(particles, viewport, scheduler)
    burst = Burst(config, surface, container, loop)
    logger.debug("Triggering burst of %d particles", len(particles))
    loop.start()
    return burst


class BurstController:
    """Fires bursts against one host and keeps track of the live ones.

    Bursts never interfere with one another. Hosts that want one burst at
    a time can call ``cancel_all()`` before ``trigger()``.
    """

    def __init__(
        self,
        surface: RenderSurface | None,
        viewport: Viewport,
        scheduler: FrameScheduler,
        config: BurstConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self._surface = surface
        self._viewport = viewport
        self._scheduler = scheduler
        self._config = config if config is not None else BurstConfig()
        self._active: list[Burst] = []
        self._triggered = 0

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def config(self) -> BurstConfig:
        return self._config

    @property
    def active(self) -> tuple[Burst, ...]:
        return tuple(self._active)

    @property
    def triggered(self) -> int:
        return self._triggered

    def trigger(self, config: BurstConfig | Mapping[str, Any] | None = None) -> Burst:
        burst = trigger_burst(
            config if config is not None else self._config,
            surface=self._surface,
            viewport=self._viewport,
            scheduler=self._scheduler,
            rng=self._rng,
        )
        self._triggered += 1
        if not burst.drained:
            self._active.append(burst)
            burst.loop.on_drain(lambda loop: self._forget(burst))
        return burst

    def cancel_all(self) -> None:
        for burst in list(self._active):
            burst.cancel()

    def _forget(self, burst: Burst) -> None:
        if burst in self._active:
            self._active.remove(burst)
