"""hash_utils.py - Byte-stable hashing for receipts and determinism checks.

Provides deterministic, cross-platform hashing for:
- Raw bytes (encoded image files)
- Integer numpy arrays (canvas buffers, seed arrays)
- JSON-serializable objects (canonical key order)

All hashes use SHA256.
"""
from __future__ import annotations
import hashlib
import json
from typing import Any
import numpy as np
from ..types import Canvas


def sha256_bytes(b: bytes) -> str:
    """Compute SHA256 hex digest of bytes."""
    return hashlib.sha256(b).hexdigest()


def hash_ndarray_int(a: np.ndarray) -> str:
    """Hash integer numpy array (byte-exact).

    Args:
        a: Integer numpy array

    Returns:
        SHA256 hex digest

    Raises:
        RuntimeError: If array is not integer dtype
    """
    if not np.issubdtype(a.dtype, np.integer):
        raise RuntimeError(
            f"hash_ndarray_int requires integer dtype, got {a.dtype}"
        )
    # Little-endian, C-order so the digest is platform independent
    a = np.ascontiguousarray(a, dtype=a.dtype.newbyteorder("<"))
    return sha256_bytes(a.tobytes(order="C"))


def hash_canvas(canvas: Canvas) -> str:
    """Hash a Canvas pixel buffer, shape included."""
    h, w = canvas.shape
    pixels = np.ascontiguousarray(canvas.pixels, dtype="<u4")
    return sha256_bytes(f"{w}x{h}:".encode("ascii") + pixels.tobytes(order="C"))


def hash_json_canonical(obj: Any) -> str:
    """Hash JSON-serializable object with canonical serialization.

    Notes:
        - Keys are sorted
        - No whitespace
        - UTF-8 encoding
    """
    json_str = json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )
    return sha256_bytes(json_str.encode("utf-8"))
