"""receipts.py - JSON run receipts.

A receipt records what a run produced: dimensions, the rng seed, every seed
position and the hashes of the canvas and the encoded file. Two runs with
the same receipt inputs must produce the same hashes.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union
import numpy as np
from .types import Canvas, SeedSet
from .utils import hash_utils


def make_run_payload(
    canvas: Canvas,
    seeds: SeedSet,
    encoded: bytes,
    output_path: Union[str, Path],
    rng_seed: Optional[int],
    marker_radius: int,
    marker_color: int,
    background: int,
) -> Dict[str, Any]:
    """Create the receipt payload for one pipeline run.

    Returns:
        JSON-serializable dict

    Notes:
        - receipt_hash covers every field except output.path, so two runs
          with the same inputs share it wherever they write
    """
    payload = {
        "stage": "voronoi",
        "canvas": {"width": canvas.width, "height": canvas.height},
        "seeds": {
            "count": seeds.count,
            "rng_seed": rng_seed,
            "points": seeds.points.tolist(),
            "hash": hash_utils.hash_ndarray_int(seeds.points) if seeds.count else None,
        },
        "colors": {
            "background": f"{background:#010x}",
            "marker": f"{marker_color:#010x}",
        },
        "marker_radius": marker_radius,
        "output": {
            "path": str(output_path),
            "bytes": len(encoded),
            "sha256": hash_utils.sha256_bytes(encoded),
        },
        "canvas_hash": hash_utils.hash_canvas(canvas),
        "distinct_colors": int(np.unique(canvas.pixels).size),
    }

    hashed = dict(payload)
    hashed["output"] = {k: v for k, v in payload["output"].items() if k != "path"}
    payload["receipt_hash"] = hash_utils.hash_json_canonical(hashed)

    return payload


def write_run_receipt(payload: Dict[str, Any], out_path: Union[str, Path]) -> Path:
    """Write a run receipt.

    Notes:
        - Creates parent directories if needed
        - Writes with sorted keys, Unix newlines
        - Overwrites an existing receipt at the same path
    """
    receipt_path = Path(out_path)
    receipt_path.parent.mkdir(parents=True, exist_ok=True)

    with receipt_path.open("w", encoding="utf-8", newline="\n") as f:
        json.dump(
            payload,
            f,
            sort_keys=True,
            ensure_ascii=False,
            separators=(",", ":"),
            indent=2,
        )
        f.write("\n")

    return receipt_path
