"""burstfx-spline - Poisson-disc interval sampling and 1-D splines for wobble paths."""
from __future__ import annotations

from burstfx_spline.easing import EASINGS
from burstfx_spline.sampler import generate
from burstfx_spline.spline import ControlPoint, Spline, build_spline, evaluate, random_spline

__all__ = [
    "ControlPoint",
    "Spline",
    "EASINGS",
    "generate",
    "build_spline",
    "evaluate",
    "random_spline",
]
