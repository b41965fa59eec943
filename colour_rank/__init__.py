# colour_rank/__init__.py
"""
colour_rank package.

Purpose:
  Rank the most frequent colours in an image with a parallel histogram engine.
  See colour_rank.cli for the command line.

Public API:
  top_colours     : grid + config -> ranked (colour, count) entries.
  build_histogram : grid + config -> merged histogram and run stats.
  EngineConfig    : workers, top_k, offset, scale, merge.
  PixelGrid       : read-only (H,W,3) uint8 pixel source.
  load_pixel_grid : decode an image file into a PixelGrid.
  errors          : InvalidConfiguration, OutOfBounds, DecodeFailure, SourceUnavailable.

Quick start:
  from colour_rank import EngineConfig, load_pixel_grid, top_colours
  entries = top_colours(load_pixel_grid("photo.png"), EngineConfig(workers=8, top_k=5))
"""

__version__ = "0.1.0"

from . import errors
from .config import EngineConfig
from .core_types import PixelGrid, RankedEntry
from .engine import HistogramResult, build_histogram, top_colours
from .errors import (
    ColourRankError,
    DecodeFailure,
    InvalidConfiguration,
    OutOfBounds,
    SourceUnavailable,
    WorkerFailure,
)
from .image_io import load_pixel_grid, scale_pixel_grid

__all__ = [
    "__version__",
    "errors",
    "EngineConfig",
    "PixelGrid",
    "RankedEntry",
    "HistogramResult",
    "build_histogram",
    "top_colours",
    "ColourRankError",
    "DecodeFailure",
    "InvalidConfiguration",
    "OutOfBounds",
    "SourceUnavailable",
    "WorkerFailure",
    "load_pixel_grid",
    "scale_pixel_grid",
]
