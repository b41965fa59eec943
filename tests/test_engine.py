"""Tests for the parallel histogram engine."""

from __future__ import annotations

import pytest

from colour_rank import engine
from colour_rank.config import EngineConfig
from colour_rank.core_types import PixelGrid, RankedEntry
from colour_rank.errors import InvalidConfiguration, OutOfBounds, WorkerFailure
from colour_rank.merge import SharedHistogram
from colour_rank.partition import Partition


def test_two_by_two_scenario(rgb_2x2: PixelGrid) -> None:
    ranked = engine.top_colours(rgb_2x2, EngineConfig(workers=2, top_k=2))

    assert ranked == [RankedEntry((255, 0, 0), 2), RankedEntry((0, 0, 255), 1)]


@pytest.mark.parametrize("merge", ["lock", "tree"])
@pytest.mark.parametrize("workers", [1, 37, 53])
def test_even_split_counts_every_pixel(
    noisy_grid: PixelGrid, workers: int, merge: str
) -> None:
    # 37 * 53 pixels
    result = engine.build_histogram(
        noisy_grid, EngineConfig(workers=workers, merge=merge)
    )

    assert result.dropped_pixels == 0
    assert result.counted_pixels == noisy_grid.pixel_count


@pytest.mark.parametrize("merge", ["lock", "tree"])
@pytest.mark.parametrize("workers", [2, 4, 5, 6, 10, 20])
def test_uneven_split_drops_remainder(
    noisy_grid: PixelGrid, workers: int, merge: str
) -> None:
    total = noisy_grid.pixel_count
    result = engine.build_histogram(
        noisy_grid, EngineConfig(workers=workers, merge=merge)
    )

    assert total % workers != 0
    assert result.dropped_pixels == total % workers
    assert result.counted_pixels == total - (total % workers)
    assert result.chunk_size == total // workers


def test_lock_and_tree_agree(noisy_grid: PixelGrid) -> None:
    a = engine.build_histogram(noisy_grid, EngineConfig(workers=7, merge="lock"))
    b = engine.build_histogram(noisy_grid, EngineConfig(workers=7, merge="tree"))

    assert a.histogram == b.histogram


def test_repeat_runs_are_identical(noisy_grid: PixelGrid) -> None:
    cfg = EngineConfig(workers=6, top_k=20)

    assert engine.top_colours(noisy_grid, cfg) == engine.top_colours(noisy_grid, cfg)


def test_top_k_beyond_distinct(rgb_2x2: PixelGrid) -> None:
    ranked = engine.top_colours(rgb_2x2, EngineConfig(workers=1, top_k=100))

    assert len(ranked) == 3


def test_zero_workers_does_no_work(
    rgb_2x2: PixelGrid, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(*_args, **_kwargs):
        raise AssertionError("partitioning must not run")

    monkeypatch.setattr(engine, "partition_pixels", boom)

    with pytest.raises(InvalidConfiguration):
        engine.top_colours(rgb_2x2, EngineConfig(workers=0))


def test_out_of_bounds_aborts_run(
    rgb_2x2: PixelGrid, monkeypatch: pytest.MonkeyPatch
) -> None:
    folded = []
    original_fold = SharedHistogram.fold

    def recording_fold(self, local):
        folded.append(dict(local))
        original_fold(self, local)

    monkeypatch.setattr(SharedHistogram, "fold", recording_fold)
    monkeypatch.setattr(
        engine,
        "partition_pixels",
        lambda total, workers: [Partition(0, 0, 2), Partition(1, 2, 8)],
    )

    with pytest.raises(OutOfBounds) as exc_info:
        engine.build_histogram(rgb_2x2, EngineConfig(workers=2))

    assert exc_info.value.worker_id == 1
    # the faulty worker never folded its partial counts
    assert {(0, 255, 0): 1, (0, 0, 255): 1} not in folded
    assert all(sum(h.values()) == 2 and (255, 0, 0) in h for h in folded)


def test_debug_logs_run_shape(rgb_2x2: PixelGrid, capsys: pytest.CaptureFixture) -> None:
    engine.build_histogram(rgb_2x2, EngineConfig(workers=3, debug=True))

    out = capsys.readouterr().out
    assert "[debug] Grid: 2x2" in out
    assert "Chunk size: 1" in out
    assert "[warn] 1 trailing pixel(s)" in out


def test_unexpected_worker_error_names_worker_and_range(
    rgb_2x2: PixelGrid, monkeypatch: pytest.MonkeyPatch
) -> None:
    original_count = engine.count_partition

    def flaky_count(grid, part, offset=0):
        if part.worker_id == 1:
            raise RuntimeError("disk on fire")
        return original_count(grid, part, offset)

    monkeypatch.setattr(engine, "count_partition", flaky_count)

    with pytest.raises(WorkerFailure) as exc_info:
        engine.build_histogram(rgb_2x2, EngineConfig(workers=2))

    err = exc_info.value
    assert (err.worker_id, err.start, err.end) == (1, 2, 4)
    assert "worker 1: range [2, 4)" in str(err)
    assert isinstance(err.__cause__, RuntimeError)
