"""Shared types and exceptions for burstfx."""
from __future__ import annotations

import enum
from dataclasses import dataclass

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    timestamp: float


class LoopState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    DRAINED = "drained"


class BurstError(Exception):
    """Base class for burstfx errors."""


class InvalidConfigurationError(BurstError, ValueError):
    """Raised when a BurstConfig cannot produce a valid burst."""


class PreconditionFailedError(BurstError, RuntimeError):
    """Raised when the host is not ready to display a burst."""
