"""types.py - Canonical dataclasses and type shapes.

Defines the data passed between pipeline stages:
- Point: integer (x, y) coordinate
- SeedSet: immutable ordered seeds backed by an (N, 2) int64 array
- Canvas: mutable (H, W) uint32 pixel buffer
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple
import numpy as np
from .config import COLOR_DTYPE, COORD_DTYPE, check_color, enforce_dtype


@dataclass(frozen=True)
class Point:
    """Integer pixel coordinate.

    Attributes:
        x: Column
        y: Row
    """

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass(frozen=True, eq=False)
class SeedSet:
    """Ordered, immutable set of Voronoi seeds.

    Attributes:
        points: numpy array (N, 2) with dtype int64, columns (x, y)

    Notes:
        - Index order is significant: it is the tie-break order for the
          rasterizer and the drawing order for markers
        - Duplicate positions are allowed
    """

    points: np.ndarray

    def __post_init__(self):
        if self.points.dtype != COORD_DTYPE:
            raise RuntimeError(
                f"SeedSet dtype must be {COORD_DTYPE}, got {self.points.dtype}"
            )
        if self.points.ndim != 2 or self.points.shape[1] != 2:
            raise ValueError(f"SeedSet must have shape (N, 2), got {self.points.shape}")
        self.points.setflags(write=False)

    @classmethod
    def from_points(cls, points: Iterable) -> "SeedSet":
        """Build a SeedSet from Points or (x, y) pairs."""
        rows = [p.as_tuple() if isinstance(p, Point) else tuple(p) for p in points]
        arr = enforce_dtype(rows, "coord").reshape(len(rows), 2)
        return cls(arr)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeedSet):
            return NotImplemented
        return bool(np.array_equal(self.points, other.points))

    def __hash__(self) -> int:
        return hash((self.points.shape, self.points.tobytes(order="C")))

    @property
    def xs(self) -> np.ndarray:
        """Seed x coordinates (N,)."""
        return self.points[:, 0]

    @property
    def ys(self) -> np.ndarray:
        """Seed y coordinates (N,)."""
        return self.points[:, 1]

    @property
    def count(self) -> int:
        return self.points.shape[0]

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, i: int) -> Point:
        x, y = self.points[i]
        return Point(int(x), int(y))

    def __iter__(self) -> Iterator[Point]:
        for x, y in self.points:
            yield Point(int(x), int(y))

    def assert_within(self, width: int, height: int) -> None:
        """Assert every seed lies in [0, width) x [0, height).

        Raises:
            ValueError: If any seed is out of bounds
        """
        if self.count == 0:
            return
        xs, ys = self.xs, self.ys
        if np.any(xs < 0) or np.any(xs >= width) or np.any(ys < 0) or np.any(ys >= height):
            raise ValueError(
                f"Seeds must lie within [0, {width}) x [0, {height}), "
                f"got x in [{xs.min()}, {xs.max()}], y in [{ys.min()}, {ys.max()}]"
            )


@dataclass(eq=False)
class Canvas:
    """Fixed-size packed-color raster.

    Attributes:
        width: Columns
        height: Rows
        pixels: numpy array (height, width) with dtype uint32, row-major

    Notes:
        All operations mutate ``pixels`` in place.
    """

    width: int
    height: int
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got W={self.width}, H={self.height}"
            )
        self.pixels = np.zeros((self.height, self.width), dtype=COLOR_DTYPE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.pixels, other.pixels))

    # Mutable; unhashable
    __hash__ = None

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (H, W) shape tuple."""
        return (self.height, self.width)

    @property
    def size(self) -> int:
        """Return total number of pixels."""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        self.pixels.fill(check_color(color))

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Write one pixel; coordinates outside the canvas are ignored."""
        if not self.contains(x, y):
            return
        self.pixels[y, x] = check_color(color)

    def get_pixel(self, x: int, y: int) -> int:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside canvas {self.width}x{self.height}")
        return int(self.pixels[y, x])
