# colour_rank/worker.py
from __future__ import annotations

"""
Per-worker colour counting over one partition.

count_partition() touches no shared state: it reads the immutable grid and
returns a fresh LocalHistogram. Channel values are packed as r<<16 | g<<8 | b
while counting so one np.unique call does the tallying.
"""

import numpy as np

from .core_types import ColourKey, LocalHistogram, PixelGrid, RGBTuple, U8Image
from .errors import OutOfBounds
from .partition import Partition, index_to_xy


def quantise_channels(rgb: U8Image, offset: int) -> U8Image:
    """Bucket each channel down to a multiple of offset. offset <= 1 is a no-op."""
    if offset <= 1:
        return rgb
    return ((rgb.astype(np.int64) // offset) * offset).astype(np.uint8)


def colour_key(rgb: RGBTuple, offset: int = 0) -> ColourKey:
    """Canonical histogram key for one pixel. Same bucketing as count_partition."""
    pixel = np.array([[rgb[:3]]], dtype=np.uint8)
    return unpack_rgb(int(pack_rgb(quantise_channels(pixel, offset))[0]))


def pack_rgb(rgb: U8Image) -> np.ndarray:
    flat = rgb.reshape(-1, 3).astype(np.uint32)
    return (flat[:, 0] << 16) | (flat[:, 1] << 8) | flat[:, 2]


def unpack_rgb(code: int) -> ColourKey:
    return ((code >> 16) & 0xFF, (code >> 8) & 0xFF, code & 0xFF)


def count_partition(
    grid: PixelGrid, partition: Partition, offset: int = 0
) -> LocalHistogram:
    """
    Count colours in partition's linear range.

    Raises OutOfBounds if any index in the range maps below row 0 or past the
    last row. Nothing is counted in that case.
    """
    if len(partition) == 0:
        return {}

    width, height = grid.width, grid.height
    indices = np.arange(partition.start, partition.end, dtype=np.int64)
    # divmod wraps x onto the next row once it passes the width
    xs, ys = index_to_xy(indices, width)

    bad = (ys < 0) | (ys >= height)
    if np.any(bad):
        first = int(np.argmax(bad))
        x, y = int(xs[first]), int(ys[first])
        raise OutOfBounds(
            f"worker {partition.worker_id}: index {int(indices[first])} -> ({x}, {y}) "
            f"outside {width}x{height} grid (range [{partition.start}, {partition.end}))",
            worker_id=partition.worker_id,
            start=partition.start,
            end=partition.end,
            x=x,
            y=y,
            width=width,
            height=height,
        )

    pixels = quantise_channels(grid.rgb[ys, xs], offset)
    codes, counts = np.unique(pack_rgb(pixels), return_counts=True)
    return {unpack_rgb(int(c)): int(n) for c, n in zip(codes.tolist(), counts.tolist())}


__all__ = [
    "quantise_channels",
    "colour_key",
    "pack_rgb",
    "unpack_rgb",
    "count_partition",
]
