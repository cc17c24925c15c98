"""config.py - Canvas, seed and color constants, dtypes.

Holds the fixed parameters of a run:
- Canvas dimensions and seed count
- Packed color constants (0xAABBGGRR, alpha in the top byte)
- Marker radius/color and the output path
- Fixed dtypes for colors, coordinates and indices
"""
from __future__ import annotations
import numpy as np


# ============================================================================
# Canvas & seeds
# ============================================================================
WIDTH = 1000
HEIGHT = 1000
SEEDS_COUNT = 50

OUTPUT_FILE_PATH = "output.ppm"


# ============================================================================
# Packed colors (byte 0 = red, byte 1 = green, byte 2 = blue, byte 3 = alpha)
# ============================================================================
COLOR_WHITE = 0xFFFFFFFF
COLOR_RED = 0xFF0000FF
COLOR_GREEN = 0xFF00FF00
COLOR_BLUE = 0xFFFF0000
COLOR_BLACK = 0xFF000000
COLOR_BACKGROUND = 0xFF201717

COLOR_MAX = 0xFFFFFFFF


# ============================================================================
# Seed markers
# ============================================================================
SEED_MARKER_RADIUS = 4
SEED_MARKER_COLOR = COLOR_BLACK


# ============================================================================
# Dtypes
# ============================================================================
COLOR_DTYPE = np.uint32  # Packed 32-bit colors
COORD_DTYPE = np.int64  # Seed coordinates, squared distances
INDEX_DTYPE = np.int64  # Seed indices

# Coordinates must fit in 16 bits to derive a seed color
COLOR_COORD_LIMIT = 1 << 16

# Rows per band when the rasterizer splits work
RENDER_CHUNK_ROWS = 64


# ============================================================================
# Dtype enforcement helpers
# ============================================================================
def enforce_dtype(arr: np.ndarray, kind: str) -> np.ndarray:
    """Enforce dtype for given array kind.

    Args:
        arr: Input array
        kind: One of 'color', 'coord', 'index'

    Returns:
        Array with correct dtype

    Raises:
        ValueError: If kind is unknown
    """
    if kind == "color":
        return np.asarray(arr, dtype=COLOR_DTYPE)
    elif kind == "coord":
        return np.asarray(arr, dtype=COORD_DTYPE)
    elif kind == "index":
        return np.asarray(arr, dtype=INDEX_DTYPE)
    else:
        raise ValueError(f"Unknown dtype kind: {kind}")


def check_color(color: int) -> int:
    """Validate a packed color and return it as a plain int.

    Raises:
        ValueError: If color does not fit in 32 unsigned bits
    """
    color = int(color)
    if not (0 <= color <= COLOR_MAX):
        raise ValueError(f"Color must fit in 32 bits, got {color:#x}")
    return color
