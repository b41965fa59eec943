"""Shared fixtures for colour_rank tests."""

from __future__ import annotations

import numpy as np
import pytest

from colour_rank.core_types import PixelGrid


def make_grid(rows) -> PixelGrid:
    return PixelGrid(np.array(rows, dtype=np.uint8))


@pytest.fixture
def rgb_2x2() -> PixelGrid:
    # (255,0,0) x2, (0,255,0), (0,0,255)
    return make_grid(
        [
            [[255, 0, 0], [255, 0, 0]],
            [[0, 255, 0], [0, 0, 255]],
        ]
    )


@pytest.fixture
def noisy_grid() -> PixelGrid:
    rng = np.random.default_rng(1234)
    # few channel levels so colours repeat across partitions
    levels = np.array([0, 64, 128, 255], dtype=np.uint8)
    return PixelGrid(levels[rng.integers(0, 4, size=(37, 53, 3))])
