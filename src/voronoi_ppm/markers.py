"""markers.py - Seed marker overlay.

Draws a solid disk at each seed on top of the rasterized diagram.
Markers are plain overwrites; where disks overlap the later seed wins.
"""
from __future__ import annotations
import numpy as np
from .config import check_color
from .types import Canvas, Point, SeedSet


def fill_circle(canvas: Canvas, origin: Point, radius: int, color: int) -> None:
    """Fill a disk of ``radius`` centred on ``origin``.

    Args:
        canvas: Target canvas (mutated in place)
        origin: Disk centre; may lie anywhere, including off-canvas
        radius: Disk radius (>= 0)
        color: Packed color

    Raises:
        ValueError: If radius is negative

    Notes:
        - Candidate box is origin +/- radius on each axis (inclusive),
          clipped to the canvas; off-canvas candidates are skipped
        - A pixel is inside when dx^2 + dy^2 <= radius^2
    """
    if radius < 0:
        raise ValueError(f"Marker radius must be >= 0, got {radius}")
    color = check_color(color)

    x0 = max(origin.x - radius, 0)
    x1 = min(origin.x + radius + 1, canvas.width)
    y0 = max(origin.y - radius, 0)
    y1 = min(origin.y + radius + 1, canvas.height)
    if x0 >= x1 or y0 >= y1:
        return

    yy, xx = np.ogrid[y0:y1, x0:x1]
    inside = (xx - origin.x) ** 2 + (yy - origin.y) ** 2 <= radius * radius
    canvas.pixels[y0:y1, x0:x1][inside] = color


def render_markers(canvas: Canvas, seeds: SeedSet, radius: int, color: int) -> None:
    """Draw one marker per seed, in seed order."""
    for seed in seeds:
        fill_circle(canvas, seed, radius, color)
