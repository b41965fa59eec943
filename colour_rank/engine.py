# colour_rank/engine.py
from __future__ import annotations

"""
Parallel histogram engine.

  build_histogram(grid, config) -> HistogramResult
  top_colours(grid, config)     -> List[RankedEntry]

Each worker scans its partition into a private histogram. With merge="lock" it
then folds into a SharedHistogram under the mutex; with merge="tree" the local
histograms are reduced pairwise after the join. Nothing is returned until every
worker has finished. The first worker failure cancels anything not yet started
and is re-raised unchanged.
"""

import time
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, List, Optional

from .config import EngineConfig
from .core_types import ColourKey, LocalHistogram, PixelGrid, RankedEntry
from .errors import ColourRankError, WorkerFailure
from .merge import SharedHistogram, tree_reduce
from .partition import Partition, chunk_size, dropped_pixel_count, partition_pixels
from .rank import rank_colours
from .utils import debug_log, key_value_pairs_to_string, warn
from .worker import count_partition


@dataclass(frozen=True)
class HistogramResult:
    histogram: Dict[ColourKey, int]
    pixel_count: int
    chunk_size: int
    dropped_pixels: int
    workers: int
    elapsed_s: float

    @property
    def counted_pixels(self) -> int:
        return sum(self.histogram.values())

    @property
    def distinct_colours(self) -> int:
        return len(self.histogram)


def _join(futures: List[Future]) -> List[LocalHistogram]:
    """Wait for all futures; on the first failure cancel the rest and re-raise."""
    done, pending = wait(futures, return_when=FIRST_EXCEPTION)
    for fut in futures:
        if fut in done and fut.exception() is not None:
            for other in pending:
                other.cancel()
            raise fut.exception()  # type: ignore[misc]
    return [fut.result() for fut in futures]


def build_histogram(
    grid: PixelGrid, config: Optional[EngineConfig] = None
) -> HistogramResult:
    cfg = (config or EngineConfig()).validate()
    t0 = time.perf_counter()

    total = grid.pixel_count
    partitions = partition_pixels(total, cfg.workers)
    step = chunk_size(total, cfg.workers)
    dropped = dropped_pixel_count(total, cfg.workers)

    if cfg.debug:
        debug_log(
            key_value_pairs_to_string(
                [
                    ("Grid", f"{grid.width}x{grid.height}"),
                    ("Pixels", total),
                    ("Workers", cfg.workers),
                    ("Chunk size", step),
                    ("Merge", cfg.merge),
                ]
            )
        )
    if dropped:
        warn(f"{dropped:,} trailing pixel(s) not covered by {cfg.workers} equal chunks")

    shared = SharedHistogram()

    def scan(part: Partition) -> LocalHistogram:
        try:
            local = count_partition(grid, part, cfg.offset)
        except ColourRankError:
            raise
        except Exception as e:
            raise WorkerFailure(
                f"worker {part.worker_id}: range [{part.start}, {part.end}) failed: {e}",
                worker_id=part.worker_id,
                start=part.start,
                end=part.end,
            ) from e
        if cfg.debug:
            debug_log(
                f"worker {part.worker_id}: [{part.start}, {part.end}) "
                f"-> {len(local):,} colours"
            )
        if cfg.merge == "lock":
            shared.fold(local)
        return local

    with ThreadPoolExecutor(max_workers=cfg.workers) as ex:
        locals_ = _join([ex.submit(scan, p) for p in partitions])
        if cfg.merge == "tree":
            histogram = tree_reduce(locals_, executor=ex)
        else:
            histogram = shared.as_dict()

    return HistogramResult(
        histogram=histogram,
        pixel_count=total,
        chunk_size=step,
        dropped_pixels=dropped,
        workers=cfg.workers,
        elapsed_s=time.perf_counter() - t0,
    )


def top_colours(
    grid: PixelGrid, config: Optional[EngineConfig] = None
) -> List[RankedEntry]:
    cfg = (config or EngineConfig()).validate()
    return rank_colours(build_histogram(grid, cfg).histogram, cfg.top_k)


__all__ = ["HistogramResult", "build_histogram", "top_colours"]
