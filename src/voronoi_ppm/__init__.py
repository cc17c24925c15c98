"""voronoi_ppm - Random Voronoi diagrams rendered to binary PPM.

Pipeline:
    Canvas.fill(background) -> seeds.generate -> voronoi.render
    -> markers.render_markers -> ppm.save

Architecture:
- Byte-exact: packed uint32 colors, integer coordinates, exact distances
- Deterministic given a seed set: identical seeds give identical files
- Nearest seed by squared Euclidean distance, lowest index on ties
- Single owned canvas threaded through each stage (no module globals)

Modules:
- config: Dimensions, seed count, colors, marker settings, dtypes
- types: Point, SeedSet, Canvas
- seeds: Seed generation from an injectable rng
- voronoi: Nearest-seed rasterizer and seed color derivation
- markers: Seed marker disks
- ppm: P6 encoder and writer
- receipts: JSON run receipts
- harness: Pipeline runner and CLI
- utils: Hash utilities (byte-stable SHA256)
"""
from __future__ import annotations

# Version
__version__ = "0.1.0"

# Expose key types and functions at package level
from .types import Canvas, Point, SeedSet
from .ppm import PPMWriteError, encode_ppm, save
from .harness import run_pipeline
from . import config

__all__ = [
    "Canvas",
    "Point",
    "SeedSet",
    "PPMWriteError",
    "encode_ppm",
    "save",
    "run_pipeline",
    "config",
]
