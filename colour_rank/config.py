# colour_rank/config.py
from __future__ import annotations

"""
Engine configuration and validation.

Exports:
  EngineConfig(workers, top_k, offset, scale, merge, debug)
  parse_scale(text) -> int   # "1/4" -> 4
"""

from dataclasses import dataclass

from .constants import (
    ALLOWED_SCALES,
    DEFAULT_MERGE,
    DEFAULT_OFFSET,
    DEFAULT_SCALE,
    DEFAULT_TOP_K,
    DEFAULT_WORKERS,
    MERGE_STRATEGIES,
)
from .errors import InvalidConfiguration


def parse_scale(text: str) -> int:
    """Return the denominator of an allowed scale fraction."""
    if text not in ALLOWED_SCALES:
        raise InvalidConfiguration(
            f"invalid scaling {text!r}; expected one of: {', '.join(ALLOWED_SCALES)}"
        )
    return int(text.split("/")[1])


@dataclass(frozen=True)
class EngineConfig:
    workers: int = DEFAULT_WORKERS
    top_k: int = DEFAULT_TOP_K
    offset: int = DEFAULT_OFFSET
    scale: str = DEFAULT_SCALE
    merge: str = DEFAULT_MERGE
    debug: bool = False

    @property
    def scale_denominator(self) -> int:
        return parse_scale(self.scale)

    def validate(self) -> "EngineConfig":
        """Raise InvalidConfiguration on the first bad field; return self otherwise."""
        for name in ("workers", "top_k", "offset"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an int, got {value!r}")
        if self.workers <= 0:
            raise InvalidConfiguration(f"worker count must be > 0, got {self.workers}")
        if self.top_k < 0:
            raise InvalidConfiguration(f"top_k must be >= 0, got {self.top_k}")
        if self.offset < 0:
            raise InvalidConfiguration(f"offset must be >= 0, got {self.offset}")
        if self.merge not in MERGE_STRATEGIES:
            raise InvalidConfiguration(
                f"merge must be one of {', '.join(MERGE_STRATEGIES)}, got {self.merge!r}"
            )
        parse_scale(self.scale)
        return self


__all__ = ["EngineConfig", "parse_scale"]
