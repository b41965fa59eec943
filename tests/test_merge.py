"""Tests for histogram merging."""

from __future__ import annotations

import itertools
from concurrent.futures import ThreadPoolExecutor

from colour_rank.merge import SharedHistogram, merge_pair, tree_reduce

LOCALS = [
    {(1, 1, 1): 3, (2, 2, 2): 1},
    {(1, 1, 1): 2},
    {(3, 3, 3): 5, (2, 2, 2): 4},
    {},
    {(9, 9, 9): 1},
]
EXPECTED = {(1, 1, 1): 5, (2, 2, 2): 5, (3, 3, 3): 5, (9, 9, 9): 1}


def test_fold_order_does_not_matter() -> None:
    for order in itertools.permutations(LOCALS):
        shared = SharedHistogram()
        for local in order:
            shared.fold(local)
        assert shared.as_dict() == EXPECTED
        assert shared.folds == len(LOCALS)


def test_concurrent_folds_lose_nothing() -> None:
    shared = SharedHistogram()
    local = {(i, 0, 0): 1 for i in range(200)}

    with ThreadPoolExecutor(max_workers=16) as ex:
        list(ex.map(shared.fold, [local] * 64))

    assert shared.total() == 200 * 64
    assert len(shared) == 200
    assert shared.folds == 64


def test_merge_pair_leaves_inputs_alone() -> None:
    a = {(1, 1, 1): 1}
    b = {(1, 1, 1): 2, (0, 0, 0): 1}

    assert merge_pair(a, b) == {(1, 1, 1): 3, (0, 0, 0): 1}
    assert a == {(1, 1, 1): 1}


def test_tree_reduce_matches_shared_fold() -> None:
    assert tree_reduce(LOCALS) == EXPECTED
    assert tree_reduce(reversed(LOCALS)) == EXPECTED
    with ThreadPoolExecutor(max_workers=3) as ex:
        assert tree_reduce(LOCALS, executor=ex) == EXPECTED


def test_tree_reduce_empty() -> None:
    assert tree_reduce([]) == {}
