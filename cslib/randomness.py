"""Pseudorandom integers, reals and chances from a shared, seedable source."""

from __future__ import annotations

import math
import random
import time

_rng = random.Random(int(time.time()))


def random_integer(low: int, high: int) -> int:
    """Return a random integer in the inclusive range [low, high]."""
    d = _rng.random()
    return int(math.floor(low + d * (float(high) - low + 1)))


def random_real(low: float, high: float) -> float:
    """Return a random real in the half-open interval [low, high)."""
    d = _rng.random()
    return low + d * (high - low)


def random_chance(p: float) -> bool:
    """Return True with probability p."""
    return random_real(0, 1) < p


def set_random_seed(seed: int) -> None:
    """Reseed the shared source so that later results are repeatable."""
    _rng.seed(seed)