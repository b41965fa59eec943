# colour_rank/merge.py
from __future__ import annotations

"""
Histogram merging.

Two strategies, both order-independent:
  SharedHistogram : one dict behind a mutex; each worker folds its local counts once.
  tree_reduce     : pairwise fan-in of local histograms, no shared mutable state.
"""

import threading
from concurrent.futures import Executor
from typing import Dict, Iterable, List, Mapping, Optional

from .core_types import ColourKey, LocalHistogram


class SharedHistogram:
    """Global colour counts. Mutated only inside fold()."""

    def __init__(self) -> None:
        self._counts: Dict[ColourKey, int] = {}
        self._lock = threading.Lock()
        self.folds = 0

    def fold(self, local: Mapping[ColourKey, int]) -> None:
        with self._lock:
            counts = self._counts
            for key, n in local.items():
                counts[key] = counts.get(key, 0) + n
            self.folds += 1

    def as_dict(self) -> Dict[ColourKey, int]:
        with self._lock:
            return dict(self._counts)

    def total(self) -> int:
        with self._lock:
            return sum(self._counts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


def merge_pair(a: Mapping[ColourKey, int], b: Mapping[ColourKey, int]) -> LocalHistogram:
    """Sum two histograms into a new dict. Inputs are left untouched."""
    if len(a) < len(b):
        a, b = b, a
    out = dict(a)
    for key, n in b.items():
        out[key] = out.get(key, 0) + n
    return out


def tree_reduce(
    histograms: Iterable[Mapping[ColourKey, int]],
    executor: Optional[Executor] = None,
) -> LocalHistogram:
    """
    Fan-in merge: combine neighbours level by level until one histogram is left.
    Pairs on each level run through executor.map when an executor is given.
    """
    level: List[Mapping[ColourKey, int]] = list(histograms)
    if not level:
        return {}
    while len(level) > 1:
        lefts = level[0::2]
        rights = level[1::2]
        carry = [lefts.pop()] if len(lefts) > len(rights) else []
        if executor is not None:
            merged = list(executor.map(merge_pair, lefts, rights))
        else:
            merged = [merge_pair(a, b) for a, b in zip(lefts, rights)]
        level = merged + carry
    return dict(level[0])


__all__ = ["SharedHistogram", "merge_pair", "tree_reduce"]
