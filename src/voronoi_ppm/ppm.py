"""ppm.py - Binary pixel-map (P6) encoder.

File layout:
    b"P6\\n"
    b"<width> <height> 255\\n"
    width*height records of 3 bytes, rows top to bottom

Each record is the low three bytes of the packed color,
least-significant byte first. Byte 3 (alpha) is dropped.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union
import numpy as np
from .types import Canvas


class PPMWriteError(OSError):
    """Raised when the output image cannot be opened, written or closed.

    Attributes:
        path: Destination path
        stage: 'open' or 'write'
        reason: Underlying error text
    """

    def __init__(self, path: Union[str, Path], reason: str, stage: str = "write"):
        self.path = Path(path)
        self.stage = stage
        self.reason = reason
        super().__init__(f"cannot write into file {self.path}: {reason}")


def encode_header(width: int, height: int) -> bytes:
    return b"P6\n" + f"{width} {height} 255\n".encode("ascii")


def encode_pixels(pixels: np.ndarray) -> bytes:
    """Pack an (H, W) uint32 buffer into 3-byte records.

    Notes:
        - Colors are viewed as little-endian bytes so byte 0 is bits 0-7
          on every platform
    """
    if pixels.ndim != 2:
        raise ValueError(f"Pixel buffer must be 2D, got shape {pixels.shape}")
    le = np.ascontiguousarray(pixels, dtype="<u4")
    rgba = le.view(np.uint8).reshape(pixels.shape[0], pixels.shape[1], 4)
    return rgba[:, :, :3].tobytes(order="C")


def encode_ppm(canvas: Canvas) -> bytes:
    """Encode a canvas as a complete P6 file image."""
    return encode_header(canvas.width, canvas.height) + encode_pixels(canvas.pixels)


def write_encoded(data: bytes, path: Union[str, Path]) -> Path:
    """Write already-encoded P6 bytes to ``path``.

    Raises:
        PPMWriteError: If the file cannot be opened, written or closed
    """
    path = Path(path)

    try:
        f = path.open("wb")
    except OSError as e:
        raise PPMWriteError(path, e.strerror or str(e), stage="open") from e

    try:
        with f:
            f.write(data)
    except OSError as e:
        raise PPMWriteError(path, e.strerror or str(e), stage="write") from e

    return path


def save(canvas: Canvas, path: Union[str, Path]) -> Path:
    """Write the canvas to ``path`` as a P6 pixel map.

    Args:
        canvas: Canvas to encode
        path: Destination file (overwritten; parent must exist)

    Returns:
        Path written

    Raises:
        PPMWriteError: If the file cannot be opened, written or closed.
            A failure after opening may leave a truncated file behind.
    """
    return write_encoded(encode_ppm(canvas), path)
