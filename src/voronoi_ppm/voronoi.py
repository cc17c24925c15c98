"""voronoi.py - Nearest-seed rasterization.

Every pixel takes the color of its nearest seed by squared Euclidean
distance. The search is a brute-force scan over all seeds:
- Distances: scipy.spatial.distance.cdist with the 'sqeuclidean' metric
- Winner: argmin along the seed axis, i.e. the lowest index among ties
- Colors: derived from the winning seed's coordinates, not its index

Integer coordinates up to 2^16 give squared distances well below 2^53,
so the float64 distances from cdist compare exactly.
"""
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Tuple
import numpy as np
from scipy.spatial.distance import cdist
from .config import COLOR_COORD_LIMIT, RENDER_CHUNK_ROWS, enforce_dtype
from .types import Canvas, Point, SeedSet


def square_distance(a: Point, b: Point) -> int:
    """Squared Euclidean distance dx^2 + dy^2 between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def color_of(x: int, y: int) -> int:
    """Derive a packed color from seed coordinates.

    Args:
        x: Seed x, 0 <= x < 2^16
        y: Seed y, 0 <= y < 2^16

    Returns:
        (x << 16) ^ y as a 32-bit packed color

    Raises:
        ValueError: If a coordinate does not fit in 16 bits
    """
    if not (0 <= x < COLOR_COORD_LIMIT and 0 <= y < COLOR_COORD_LIMIT):
        raise ValueError(
            f"Seed coordinates must be in [0, {COLOR_COORD_LIMIT}), got ({x}, {y})"
        )
    return ((x & 0xFFFF) << 16) ^ (y & 0xFFFF)


def seed_colors(seeds: SeedSet) -> np.ndarray:
    """Vectorised color_of over a seed set.

    Returns:
        (N,) uint32 array, entry i is the color of seed i
    """
    xs, ys = seeds.xs, seeds.ys
    if seeds.count and (
        np.any(xs < 0) or np.any(xs >= COLOR_COORD_LIMIT)
        or np.any(ys < 0) or np.any(ys >= COLOR_COORD_LIMIT)
    ):
        raise ValueError(
            f"Seed coordinates must be in [0, {COLOR_COORD_LIMIT}) to derive colors"
        )
    return enforce_dtype(((xs & 0xFFFF) << 16) ^ (ys & 0xFFFF), "color")


def nearest_seed_indices(
    seeds: SeedSet,
    width: int,
    height: int,
    rows: Optional[Tuple[int, int]] = None,
) -> np.ndarray:
    """Index of the nearest seed for each pixel in a band of rows.

    Args:
        seeds: Non-empty seed set
        width: Canvas width
        height: Canvas height
        rows: (r0, r1) end-exclusive row range; defaults to the whole canvas

    Returns:
        (r1 - r0, width) int64 array of seed indices

    Notes:
        - Ties resolve to the lowest seed index (np.argmin returns the
          first minimum), matching a scan that only replaces the best
          seed on a strictly smaller distance
    """
    if seeds.count == 0:
        raise ValueError("Cannot rasterize an empty seed set")

    r0, r1 = rows if rows is not None else (0, height)
    if not (0 <= r0 <= r1 <= height):
        raise ValueError(f"Row range ({r0}, {r1}) outside canvas height {height}")

    yy, xx = np.meshgrid(np.arange(r0, r1), np.arange(width), indexing="ij")
    coords = np.stack([xx.ravel(), yy.ravel()], axis=1)

    d2 = cdist(coords, seeds.points, metric="sqeuclidean")
    winners = enforce_dtype(np.argmin(d2, axis=1), "index")

    return winners.reshape(r1 - r0, width)


def _row_bands(height: int, chunk_rows: int) -> List[Tuple[int, int]]:
    return [(r, min(r + chunk_rows, height)) for r in range(0, height, chunk_rows)]


def render(
    canvas: Canvas,
    seeds: SeedSet,
    workers: int = 1,
    chunk_rows: int = RENDER_CHUNK_ROWS,
) -> None:
    """Fill the canvas with the Voronoi diagram of ``seeds``.

    Args:
        canvas: Target canvas (mutated in place)
        seeds: Non-empty seed set
        workers: Threads used for row bands (1 = run inline)
        chunk_rows: Rows per band

    Raises:
        ValueError: If seeds is empty, workers/chunk_rows < 1, or a seed
            cannot be mapped to a color

    Notes:
        - Bands cover disjoint row slices of the buffer
        - Returns only once every band has been written
    """
    if seeds.count == 0:
        raise ValueError("Cannot rasterize an empty seed set")
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if chunk_rows < 1:
        raise ValueError(f"chunk_rows must be >= 1, got {chunk_rows}")

    palette = seed_colors(seeds)
    bands = _row_bands(canvas.height, chunk_rows)

    def paint(band: Tuple[int, int]) -> None:
        r0, r1 = band
        idx = nearest_seed_indices(seeds, canvas.width, canvas.height, rows=band)
        canvas.pixels[r0:r1, :] = palette[idx]

    if workers == 1:
        for band in bands:
            paint(band)
        return

    with ThreadPoolExecutor(max_workers=workers) as pool:
        # list() re-raises the first band failure here
        list(pool.map(paint, bands))
