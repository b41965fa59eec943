# colour_rank/partition.py
from __future__ import annotations

"""
Split a grid's linear pixel index space into one contiguous range per worker.

Ranges are [w*chunk, (w+1)*chunk) with chunk = P // W. When W does not divide P
the trailing P % W pixels belong to no range and are never counted;
dropped_pixel_count() reports how many.
"""

from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

from .errors import InvalidConfiguration

IndexLike = Union[int, np.ndarray]


@dataclass(frozen=True)
class Partition:
    """Half-open linear pixel range [start, end) owned by one worker."""

    worker_id: int
    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start)


def chunk_size(total_pixels: int, workers: int) -> int:
    _check(total_pixels, workers)
    return int(total_pixels) // int(workers)


def dropped_pixel_count(total_pixels: int, workers: int) -> int:
    """Pixels past the last range: P - W * (P // W)."""
    return int(total_pixels) - chunk_size(total_pixels, workers) * int(workers)


def partition_pixels(total_pixels: int, workers: int) -> List[Partition]:
    step = chunk_size(total_pixels, workers)
    return [Partition(w, w * step, (w + 1) * step) for w in range(int(workers))]


def index_to_xy(index: IndexLike, width: int) -> Tuple[IndexLike, IndexLike]:
    """Linear index -> (x, y) on a row-major grid of the given width."""
    return index % width, index // width


def _check(total_pixels: int, workers: int) -> None:
    if int(workers) <= 0:
        raise InvalidConfiguration(f"worker count must be > 0, got {workers}")
    if int(total_pixels) <= 0:
        raise InvalidConfiguration(f"nothing to count: pixel count is {total_pixels}")


__all__ = [
    "Partition",
    "chunk_size",
    "dropped_pixel_count",
    "partition_pixels",
    "index_to_xy",
]
