"""Colour themes for burst particles.

Each theme takes the burst's random source and returns an RGB triple.
Channels are kept at or below 200 (grey goes to 255) so confetti stay
readable on a light page.
"""
from __future__ import annotations

import random
from typing import Callable

from burstfx.types import Color

Theme = Callable[[random.Random], Color]


def _channel(rng: random.Random, scale: int = 200) -> int:
    return int(scale * rng.random())


def random_color(rng: random.Random) -> Color:
    return (_channel(rng), _channel(rng), _channel(rng))


def red(rng: random.Random) -> Color:
    shade = _channel(rng)
    return (200, shade, shade)


def green(rng: random.Random) -> Color:
    shade = _channel(rng)
    return (shade, 200, shade)


def blue(rng: random.Random) -> Color:
    shade = _channel(rng)
    return (shade, shade, 200)


def magenta(rng: random.Random) -> Color:
    return (200, 100, _channel(rng))


def cyan(rng: random.Random) -> Color:
    return (_channel(rng), 200, 200)


def grey(rng: random.Random) -> Color:
    shade = _channel(rng, 256)
    return (shade, shade, shade)


def _either(first: Theme, second: Theme) -> Theme:
    def mixed(rng: random.Random) -> Color:
        return first(rng) if rng.random() < 0.5 else second(rng)

    return mixed


THEMES: dict[str, Theme] = {
    "random": random_color,
    "red": red,
    "green": green,
    "blue": blue,
    "magenta": magenta,
    "cyan": cyan,
    "grey": grey,
    "red_green": _either(red, green),
    "blue_cyan": _either(blue, cyan),
    "green_magenta": _either(green, magenta),
}


def pick_color(themes: tuple[str, ...], rng: random.Random) -> Color:
    """Select one theme from ``themes`` and draw a colour from it."""
    name = themes[int(len(themes) * rng.random())]
    return THEMES[name](rng)
