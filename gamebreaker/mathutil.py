"""Numeric helpers for game code: angles, clamping, statistics and random numbers."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Iterable
from typing import Any


def modwrap(val: float, minv: float, maxv: float) -> float:
    """Wrap ``val`` into the window ``[minv, maxv)``."""
    width = maxv - minv
    if width == 0:
        raise ZeroDivisionError("modwrap window has zero width")
    offset = val - minv
    return offset - math.floor(offset / width) * width + minv


def degtorad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def lendir_x(length: float, direction: float) -> float:
    """Horizontal component of a vector of ``length`` pointing at ``direction`` degrees."""
    return math.cos(degtorad(int(direction))) * length


def lendir_y(length: float, direction: float) -> float:
    """Vertical component (screen coordinates, y grows downwards)."""
    return -math.sin(degtorad(int(direction))) * length


def clamp(val: float, minval: float, maxval: float) -> float:
    """Limit ``val`` to the range ``[minval, maxval]``."""
    if val < minval:
        return minval
    if val > maxval:
        return maxval
    return val


def point_in_rect(px: float, py: float, rx1: float, ry1: float, rx2: float, ry2: float) -> bool:
    """True if the point lies inside the rectangle; the left and top edges are excluded."""
    return px > rx1 and py > ry1 and px <= rx2 and py <= ry2


def iround(x: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    base = math.floor(x)
    diff = x - base
    if diff > 0.5 or (diff == 0.5 and x > 0):
        return int(base) + 1
    return int(base)


def ifloor(x: float) -> int:
    """Largest integer not above ``x``."""
    return int(math.floor(x))


def iceil(x: float) -> int:
    """Smallest integer not below ``x``."""
    return int(math.ceil(x))


def dsin(x: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(degtorad(x))


def dcos(x: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(degtorad(x))


def pdirection(x1: float, y1: float, x2: float, y2: float) -> float:
    """Direction in degrees, in ``[0, 360)``, from the first point to the second."""
    return modwrap(math.atan2(-(y2 - y1), x2 - x1) * 180 / math.pi, 0, 360)


def pdistance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Distance between two points."""
    return math.hypot(x2 - x1, y2 - y1)


def sign(num: float) -> int:
    """-1, 0 or 1 according to the sign of ``num``."""
    return (num > 0) - (num < 0)


def power(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n``."""
    return x ** n


def sqr(x: float) -> float:
    """``x`` squared."""
    return x * x


def frac(x: float) -> float:
    """Fractional part of ``x``, always in ``[0, 1)``."""
    return x - math.floor(x)


def _non_empty(values: Iterable[float]) -> list[float]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def minimum(values: Iterable[float]) -> float:
    """Smallest of the values."""
    return min(_non_empty(values))


def maximum(values: Iterable[float]) -> float:
    """Largest of the values."""
    return max(_non_empty(values))


def mean(values: Iterable[float]) -> float:
    """Arithmetic mean of the values."""
    items = _non_empty(values)
    return sum(items) / len(items)


def median(values: Iterable[float]) -> float:
    """Middle value; for an even count, the upper of the two middle values."""
    items = sorted(_non_empty(values))
    return items[len(items) // 2]


class _RandomState:
    def __init__(self) -> None:
        self.seed = 0
        self.rng = _random.Random(0)


_state = _RandomState()


def random(num: float) -> float:
    """Random number in ``[0, num)`` with four decimal places."""
    upper = int(num)
    if upper <= 0:
        raise ValueError("random() needs a bound of at least 1")
    return _state.rng.randrange(upper) + _state.rng.randrange(10000) / 10000


def irandom(num: int) -> int:
    """Random integer in ``[0, num)``."""
    if num <= 0:
        raise ValueError("irandom() needs a positive bound")
    return _state.rng.randrange(num)


def random_range(low: float, high: float) -> float:
    """Random real number between ``low`` and ``high``."""
    if low > high:
        low, high = high, low
    return _state.rng.uniform(low, high)


def irandom_range(low: int, high: int) -> int:
    """Random integer between ``low`` and ``high``, both included."""
    if low > high:
        low, high = high, low
    return _state.rng.randint(low, high)


def random_set_seed(seed: int) -> None:
    """Seed the generator and remember the seed."""
    _state.rng.seed(seed)
    _state.seed = seed


def random_get_seed() -> int:
    """The seed last given to the generator."""
    return _state.seed


def randomize() -> None:
    """Reseed the generator with a seed drawn from it."""
    random_set_seed(_state.rng.randrange(2**31))


def choose(*args: Any) -> Any:
    """Return one of the arguments at random."""
    if not args:
        raise ValueError("choose() needs at least one argument")
    return _state.rng.choice(args)