"""Tests for seed generation."""

import numpy as np
import pytest

from voronoi_ppm import seeds as seeds_module
from voronoi_ppm.config import COORD_DTYPE


class TestGenerate:
    """Test random seed placement."""

    def test_count_and_dtype(self, rng):
        seeds = seeds_module.generate(50, 1000, 1000, rng)
        assert seeds.count == 50
        assert seeds.points.dtype == COORD_DTYPE

    def test_within_bounds(self, rng):
        seeds = seeds_module.generate(500, 13, 7, rng)
        assert np.all((seeds.xs >= 0) & (seeds.xs < 13))
        assert np.all((seeds.ys >= 0) & (seeds.ys < 7))
        seeds.assert_within(13, 7)

    def test_injected_rng_is_reproducible(self):
        a = seeds_module.generate(20, 100, 80, np.random.default_rng(99))
        b = seeds_module.generate(20, 100, 80, np.random.default_rng(99))
        np.testing.assert_array_equal(a.points, b.points)

    def test_make_rng_with_explicit_seed(self):
        a = seeds_module.generate(10, 100, 100, seeds_module.make_rng(5))
        b = seeds_module.generate(10, 100, 100, seeds_module.make_rng(5))
        np.testing.assert_array_equal(a.points, b.points)

    def test_make_rng_uses_clock_when_unseeded(self, monkeypatch):
        monkeypatch.setattr(seeds_module, "clock_seed", lambda: 31337)
        a = seeds_module.generate(10, 100, 100, seeds_module.make_rng())
        b = seeds_module.generate(10, 100, 100, seeds_module.make_rng(31337))
        np.testing.assert_array_equal(a.points, b.points)

    def test_single_pixel_canvas_gives_duplicates(self, rng):
        seeds = seeds_module.generate(4, 1, 1, rng)
        assert np.all(seeds.points == 0)

    def test_zero_count(self, rng):
        assert seeds_module.generate(0, 10, 10, rng).count == 0

    def test_invalid_arguments(self, rng):
        with pytest.raises(ValueError):
            seeds_module.generate(-1, 10, 10, rng)
        with pytest.raises(ValueError):
            seeds_module.generate(3, 0, 10, rng)
