"""Tests for seed marker rendering."""

import numpy as np
import pytest

from voronoi_ppm.config import COLOR_BLACK, COLOR_BLUE, COLOR_RED, SEED_MARKER_RADIUS
from voronoi_ppm.markers import fill_circle, render_markers
from voronoi_ppm.types import Canvas, Point, SeedSet
from voronoi_ppm.voronoi import render


def disk_mask(width, height, cx, cy, r):
    yy, xx = np.mgrid[0:height, 0:width]
    return (xx - cx) ** 2 + (yy - cy) ** 2 <= r * r


class TestFillCircle:
    """Test single disk filling."""

    def test_disk_membership(self):
        canvas = Canvas(21, 21)
        fill_circle(canvas, Point(10, 10), 4, COLOR_RED)
        np.testing.assert_array_equal(
            canvas.pixels == COLOR_RED, disk_mask(21, 21, 10, 10, 4)
        )

    def test_extreme_pixels_are_painted(self):
        canvas = Canvas(21, 21)
        fill_circle(canvas, Point(10, 10), 4, COLOR_RED)
        for x, y in [(14, 10), (6, 10), (10, 14), (10, 6)]:
            assert canvas.get_pixel(x, y) == COLOR_RED
        assert canvas.get_pixel(14, 14) == 0

    def test_zero_radius_paints_centre_only(self):
        canvas = Canvas(5, 5)
        fill_circle(canvas, Point(2, 3), 0, COLOR_RED)
        assert canvas.get_pixel(2, 3) == COLOR_RED
        assert np.count_nonzero(canvas.pixels) == 1

    def test_negative_radius_rejected(self):
        with pytest.raises(ValueError):
            fill_circle(Canvas(5, 5), Point(2, 2), -1, COLOR_RED)

    def test_origin_off_canvas_clips(self):
        canvas = Canvas(10, 10)
        fill_circle(canvas, Point(-2, 5), 3, COLOR_RED)
        np.testing.assert_array_equal(
            canvas.pixels == COLOR_RED, disk_mask(10, 10, -2, 5, 3)
        )

    def test_origin_far_off_canvas_is_noop(self):
        canvas = Canvas(10, 10)
        fill_circle(canvas, Point(50, 50), 3, COLOR_RED)
        assert np.count_nonzero(canvas.pixels) == 0

    def test_later_disk_overwrites_overlap(self):
        canvas = Canvas(20, 20)
        fill_circle(canvas, Point(8, 10), 4, COLOR_RED)
        fill_circle(canvas, Point(11, 10), 4, COLOR_BLUE)
        assert canvas.get_pixel(10, 10) == COLOR_BLUE
        assert canvas.get_pixel(5, 10) == COLOR_RED


class TestRenderMarkers:
    """Test marker overlay on top of the diagram."""

    def test_markers_overwrite_diagram(self, small_seeds):
        canvas = Canvas(24, 16)
        render(canvas, small_seeds)
        before = canvas.pixels.copy()
        render_markers(canvas, small_seeds, SEED_MARKER_RADIUS, COLOR_BLACK)

        covered = np.zeros((16, 24), dtype=bool)
        for seed in small_seeds:
            covered |= disk_mask(24, 16, seed.x, seed.y, SEED_MARKER_RADIUS)

        assert np.all(canvas.pixels[covered] == COLOR_BLACK)
        np.testing.assert_array_equal(canvas.pixels[~covered], before[~covered])

    def test_corner_seeds_stay_in_bounds(self):
        canvas = Canvas(20, 20)
        seeds = SeedSet.from_points([(0, 0), (19, 19)])
        render(canvas, seeds)
        render_markers(canvas, seeds, 4, COLOR_BLACK)

        assert canvas.get_pixel(0, 0) == COLOR_BLACK
        assert canvas.get_pixel(4, 0) == COLOR_BLACK
        assert canvas.get_pixel(19, 19) == COLOR_BLACK
        assert canvas.get_pixel(15, 19) == COLOR_BLACK
        # No wrap-around onto the opposite edges
        assert canvas.get_pixel(19, 0) != COLOR_BLACK
        assert canvas.get_pixel(0, 19) != COLOR_BLACK
        assert np.count_nonzero(canvas.pixels == COLOR_BLACK) == 2 * int(
            disk_mask(20, 20, 0, 0, 4).sum()
        )
