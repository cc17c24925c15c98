"""harness.py - Pipeline runner and CLI.

Runs the full pipeline:
    fill background -> generate seeds -> rasterize -> draw markers -> save

Usage:
    python -m voronoi_ppm.harness
    python -m voronoi_ppm.harness --seed 42 --output out/voronoi.ppm --receipt out/run.json

Flags (defaults come from voronoi_ppm.config):
    --output: Destination .ppm file
    --width / --height: Canvas size
    --seeds: Number of seeds
    --seed: rng seed (default: wall clock)
    --marker-radius: Seed marker radius
    --workers: Threads for rasterization
    --receipt: Optional JSON receipt path
"""
from __future__ import annotations
import argparse
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from . import config
from . import markers as markers_module
from . import ppm
from . import receipts
from . import seeds as seeds_module
from . import voronoi
from .types import Canvas
from .utils import hash_utils


def run_pipeline(
    width: int = config.WIDTH,
    height: int = config.HEIGHT,
    seeds_count: int = config.SEEDS_COUNT,
    output_path: Union[str, Path] = config.OUTPUT_FILE_PATH,
    rng_seed: Optional[int] = None,
    marker_radius: int = config.SEED_MARKER_RADIUS,
    marker_color: int = config.SEED_MARKER_COLOR,
    background: int = config.COLOR_BACKGROUND,
    workers: int = 1,
    receipt_path: Optional[Union[str, Path]] = None,
) -> Dict[str, Any]:
    """Render a Voronoi diagram and write it to ``output_path``.

    Args:
        width, height: Canvas size
        seeds_count: Number of random seeds (>= 1)
        output_path: Destination P6 file
        rng_seed: Seed for the random source; None derives one from the clock
        marker_radius: Seed marker radius
        marker_color: Seed marker color
        background: Initial canvas color
        workers: Threads for rasterization
        receipt_path: If given, a JSON receipt is written there

    Returns:
        {
            "canvas": Canvas,
            "seeds": SeedSet,
            "output_path": Path,
            "rng_seed": int,
            "canvas_hash": str,
            "file_hash": str,
            "receipt_path": Path | None,
        }

    Raises:
        ValueError: On invalid parameters (including zero seeds)
        PPMWriteError: If the image cannot be written
    """
    if seeds_count < 1:
        raise ValueError(f"At least one seed is required, got {seeds_count}")

    if rng_seed is None:
        rng_seed = seeds_module.clock_seed()
    rng = seeds_module.make_rng(rng_seed)

    canvas = Canvas(width, height)
    canvas.fill(background)

    seeds = seeds_module.generate(seeds_count, width, height, rng)
    seeds.assert_within(width, height)
    print(f"[voronoi] Generated {seeds.count} seeds (rng seed {rng_seed})", file=sys.stderr)

    t0 = time.perf_counter()
    voronoi.render(canvas, seeds, workers=workers)
    print(
        f"[voronoi] Rasterized {width}x{height} in {time.perf_counter() - t0:.2f}s "
        f"({workers} worker{'s' if workers != 1 else ''})",
        file=sys.stderr,
    )

    # Markers go on only after the full diagram is in place
    markers_module.render_markers(canvas, seeds, marker_radius, marker_color)

    encoded = ppm.encode_ppm(canvas)
    output_path = ppm.write_encoded(encoded, output_path)
    print(f"[voronoi] Wrote {output_path}", file=sys.stderr)

    result = {
        "canvas": canvas,
        "seeds": seeds,
        "output_path": output_path,
        "rng_seed": rng_seed,
        "canvas_hash": hash_utils.hash_canvas(canvas),
        "file_hash": hash_utils.sha256_bytes(encoded),
        "receipt_path": None,
    }

    if receipt_path is not None:
        payload = receipts.make_run_payload(
            canvas,
            seeds,
            encoded,
            output_path,
            rng_seed=rng_seed,
            marker_radius=marker_radius,
            marker_color=marker_color,
            background=background,
        )
        result["receipt_path"] = receipts.write_run_receipt(payload, receipt_path)
        print(f"[voronoi] Receipt written to {result['receipt_path']}", file=sys.stderr)

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a random Voronoi diagram to a binary PPM file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: 1000x1000, 50 seeds, clock-seeded, writes output.ppm
  python -m voronoi_ppm.harness

  # Reproducible run with a receipt
  python -m voronoi_ppm.harness --seed 42 --receipt receipts/run.json
        """,
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(config.OUTPUT_FILE_PATH),
        help=f"Destination PPM file (default: {config.OUTPUT_FILE_PATH})",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=config.WIDTH,
        help=f"Canvas width (default: {config.WIDTH})",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=config.HEIGHT,
        help=f"Canvas height (default: {config.HEIGHT})",
    )
    parser.add_argument(
        "--seeds",
        type=int,
        default=config.SEEDS_COUNT,
        help=f"Number of seeds (default: {config.SEEDS_COUNT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="rng seed for seed placement (default: derived from the clock)",
    )
    parser.add_argument(
        "--marker-radius",
        type=int,
        default=config.SEED_MARKER_RADIUS,
        help=f"Seed marker radius (default: {config.SEED_MARKER_RADIUS})",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used for rasterization (default: 1)",
    )
    parser.add_argument(
        "--receipt",
        type=Path,
        default=None,
        help="Write a JSON run receipt to this path",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        run_pipeline(
            width=args.width,
            height=args.height,
            seeds_count=args.seeds,
            output_path=args.output,
            rng_seed=args.seed,
            marker_radius=args.marker_radius,
            workers=args.workers,
            receipt_path=args.receipt,
        )
    except ppm.PPMWriteError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: cannot write receipt {args.receipt}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0


def entry_point() -> None:
    """Console script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
