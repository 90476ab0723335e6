"""burstfx-pygame - pygame host adapter for burstfx bursts."""
from __future__ import annotations

from burstfx_pygame.host import PygameFrameScheduler, PygameViewport
from burstfx_pygame.surface import PygameSurface, project_square

__all__ = ["PygameSurface", "PygameViewport", "PygameFrameScheduler", "project_square"]
