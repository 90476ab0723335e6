"""burstfx - Self-draining confetti bursts driven by host frames."""

from burstfx.burst import Burst, BurstController, trigger_burst
from burstfx.clock import FrameClock
from burstfx.config import BurstConfig
from burstfx.host import FrameScheduler, RenderSurface, Viewport
from burstfx.logging_config import setup_logging
from burstfx.loop import SimulationLoop
from burstfx.palette import THEMES
from burstfx.particle import Particle, ParticleState, ParticleView, advance, spawn_particle
from burstfx.scheduler import ManualFrameScheduler
from burstfx.surface import FixedViewport, MemorySurface
from burstfx.types import (
    BurstError,
    FrameContext,
    InvalidConfigurationError,
    LoopState,
    PreconditionFailedError,
)

__all__ = [
    "Burst",
    "BurstController",
    "BurstConfig",
    "BurstError",
    "FixedViewport",
    "FrameClock",
    "FrameContext",
    "FrameScheduler",
    "InvalidConfigurationError",
    "LoopState",
    "ManualFrameScheduler",
    "MemorySurface",
    "Particle",
    "ParticleState",
    "ParticleView",
    "PreconditionFailedError",
    "RenderSurface",
    "SimulationLoop",
    "THEMES",
    "Viewport",
    "advance",
    "setup_logging",
    "spawn_particle",
    "trigger_burst",
]
