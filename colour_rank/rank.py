# colour_rank/rank.py
from __future__ import annotations

"""
Top-K ranking of a finished histogram.

Order: count descending, then colour key ascending (r, then g, then b) so equal
counts always come out in the same order.
"""

import heapq
from typing import List, Mapping, Tuple

from .core_types import ColourKey, RankedEntry
from .errors import InvalidConfiguration


def _sort_key(item: Tuple[ColourKey, int]) -> Tuple[int, ColourKey]:
    key, count = item
    return (-count, key)


def rank_colours(histogram: Mapping[ColourKey, int], top_k: int) -> List[RankedEntry]:
    """Up to top_k entries; all distinct colours when top_k exceeds their number."""
    if top_k < 0:
        raise InvalidConfiguration(f"top_k must be >= 0, got {top_k}")
    if top_k == 0 or not histogram:
        return []
    if top_k >= len(histogram):
        ordered = sorted(histogram.items(), key=_sort_key)
    else:
        ordered = heapq.nsmallest(top_k, histogram.items(), key=_sort_key)
    return [RankedEntry(colour=tuple(k), count=int(n)) for k, n in ordered]


__all__ = ["rank_colours"]
