# colour_rank/errors.py
"""
Exception taxonomy.

  InvalidConfiguration : bad worker count, zero pixels, unknown scale. Raised before work starts.
  OutOfBounds          : a partition walked off the grid. Programming defect, fatal.
  WorkerFailure        : anything else a worker raised, with worker id and range.
  DecodeFailure        : Pillow could not decode the input.
  SourceUnavailable    : input path missing or unreadable.
"""

from __future__ import annotations

from typing import Optional


class ColourRankError(Exception):
    """Base class for every error raised by colour_rank."""


class InvalidConfiguration(ColourRankError, ValueError):
    pass


class OutOfBounds(ColourRankError, IndexError):
    """Coordinate derived from a partition fell outside the pixel grid."""

    def __init__(
        self,
        message: str,
        *,
        worker_id: Optional[int] = None,
        start: Optional[int] = None,
        end: Optional[int] = None,
        x: Optional[int] = None,
        y: Optional[int] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.worker_id = worker_id
        self.start = start
        self.end = end
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class WorkerFailure(ColourRankError):
    """Unexpected error inside one worker, re-raised with its range attached."""

    def __init__(self, message: str, *, worker_id: int, start: int, end: int) -> None:
        super().__init__(message)
        self.worker_id = worker_id
        self.start = start
        self.end = end


class DecodeFailure(ColourRankError):
    pass


class SourceUnavailable(ColourRankError):
    pass


__all__ = [
    "ColourRankError",
    "InvalidConfiguration",
    "OutOfBounds",
    "WorkerFailure",
    "DecodeFailure",
    "SourceUnavailable",
]
