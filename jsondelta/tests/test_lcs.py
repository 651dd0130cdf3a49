# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from jsondelta.diff_format import json_equal
from jsondelta.diffing.lcs import (
    compare_grid, llcs_grid, backtrack, align,
    Insertion, Deletion, Unchanged,
    )


def _apply_components(components):
    "Rebuild both sequences from an alignment."
    a, b = [], []
    for c in components:
        if isinstance(c, Unchanged):
            a.append(c.left)
            b.append(c.right)
        elif isinstance(c, Deletion):
            a.append(c.item)
        else:
            b.append(c.item)
    return a, b


def test_llcs_grid_worked_example():
    a = list("gac")
    b = list("agcat")
    R = llcs_grid(compare_grid(a, b))
    assert R == [
        [0, 0, 0, 0, 0, 0],
        [0, 0, 1, 1, 1, 1],
        [0, 1, 1, 1, 2, 2],
        [0, 1, 1, 2, 2, 2],
        ]


def test_align_sequences():
    examples = [
        ([], []),
        ([1], [1]),
        ([1, 2], [1, 2]),
        ([2, 1], [1, 2]),
        ([1, 2, 3], [1, 2]),
        ([2, 1, 3], [1, 2]),
        ([1, 2], [1, 2, 3]),
        ([2, 1], [1, 2, 3]),
        ([1, 2], [1, 2, 1, 2]),
        ([1, 2, 1, 2], [1, 2]),
        ([1, 2, 3, 4, 1, 2], [3, 4, 2, 3]),
        (list("abcab"), list("ayb")),
        (list("xaxcxabc"), list("abcy")),
        ]
    for a, b in examples:
        G = compare_grid(a, b)
        assert all(bool(G[i][j]) == (a[i] == b[j]) for i in range(len(a)) for j in range(len(b)))

        R = llcs_grid(G)
        for i in range(len(a)):
            for j in range(len(b)):
                assert R[i+1][j+1] >= R[i][j]
                assert R[i+1][j+1] - R[i][j] <= 1
        llcs = R[len(a)][len(b)]

        components = backtrack(a, b, G, R)
        assert sum(isinstance(c, Unchanged) for c in components) == llcs
        assert len(components) == len(a) + len(b) - llcs
        assert _apply_components(components) == (a, b)

        # Combined function repeats the above pieces
        assert align(a, b) == components


def test_align_order_and_tie_break():
    assert align(list("axb"), list("abc")) == [
        Unchanged("a", "a"),
        Deletion("x"),
        Unchanged("b", "b"),
        Insertion("c"),
        ]

    # Ties take the deletion first when walking back from the end,
    # so the insertion comes first in document order
    assert align([3], [4]) == [Insertion(4), Deletion(3)]
    assert align(list("abc"), list("abd")) == [
        Unchanged("a", "a"),
        Unchanged("b", "b"),
        Insertion("d"),
        Deletion("c"),
        ]


def test_align_is_deterministic():
    a = [1, 2, 3, 1, 2, 3]
    b = [3, 2, 1, 3, 2, 1]
    first = align(a, b)
    for i in range(5):
        assert align(a, b) == first


def test_align_custom_compare():
    # True == 1 in python, json_equal tells them apart
    assert align([True], [1]) == [Unchanged(True, 1)]
    assert align([True], [1], json_equal) == [Insertion(1), Deletion(True)]


def test_align_empty_sides():
    assert align([], [1, 2]) == [Insertion(1), Insertion(2)]
    assert align([1, 2], []) == [Deletion(1), Deletion(2)]
