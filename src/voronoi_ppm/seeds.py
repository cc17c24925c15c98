"""seeds.py - Random seed placement.

Seeds are drawn uniformly over the canvas from an injectable
``numpy.random.Generator``. Without an explicit seed the generator is
keyed from the wall clock, so unseeded runs differ from one another.
"""
from __future__ import annotations
import time
from typing import Optional
import numpy as np
from .config import COORD_DTYPE
from .types import SeedSet


def clock_seed() -> int:
    """Return a wall-clock derived rng seed."""
    return time.time_ns()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source for seed placement.

    Args:
        seed: Explicit rng seed, or None to derive one from the clock

    Returns:
        numpy Generator (PCG64)
    """
    if seed is None:
        seed = clock_seed()
    return np.random.default_rng(seed)


def generate(count: int, width: int, height: int, rng: np.random.Generator) -> SeedSet:
    """Generate ``count`` seeds inside a width x height canvas.

    Args:
        count: Number of seeds (>= 0)
        width: Canvas width; x is drawn from [0, width)
        height: Canvas height; y is drawn from [0, height)
        rng: Random source

    Returns:
        SeedSet of shape (count, 2)

    Raises:
        ValueError: If count is negative or dimensions are not positive

    Notes:
        - Coordinates are drawn per seed, x then y
        - Seeds need not be distinct
    """
    if count < 0:
        raise ValueError(f"Seed count must be >= 0, got {count}")
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas dimensions must be positive, got W={width}, H={height}")

    points = np.empty((count, 2), dtype=COORD_DTYPE)
    for i in range(count):
        points[i, 0] = rng.integers(0, width)
        points[i, 1] = rng.integers(0, height)

    return SeedSet(points)
