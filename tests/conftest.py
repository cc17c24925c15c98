"""Shared fixtures."""

import numpy as np
import pytest

from voronoi_ppm.types import SeedSet


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_seeds():
    """A handful of fixed seeds on a 24x16 canvas."""
    return SeedSet.from_points([(3, 2), (20, 4), (11, 13), (0, 15), (23, 0), (11, 13)])
