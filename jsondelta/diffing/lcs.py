# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..diff_format import record_type

__all__ = ["align", "Insertion", "Deletion", "Unchanged"]


Insertion = record_type("Insertion", ("item",))
Deletion = record_type("Deletion", ("item",))
Unchanged = record_type("Unchanged", ("left", "right"))


def compare_grid(A, B, compare=operator.__eq__):
    "Compute grid G[i][j] == compare(A[i], B[j])."
    return [[compare(a, b) for b in B] for a in A]


def llcs_grid(G):
    "Compute grid R[x][y] == llcs(A[:x], B[:y]), given G[i][j] = compare(A[i], B[j])."
    N = len(G)
    M = len(G[0]) if N else 0

    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        for y in range(1, M+1):
            if G[x-1][y-1]:
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R


def backtrack(A, B, G, R):
    """Walk the llcs grid back from (len(A), len(B)) into diff components.

    When both neighbours have the same llcs, the deletion is taken
    first. The result stays stable for equal inputs because of this.
    """
    x = len(A)
    y = len(B)
    components = []
    while x > 0 or y > 0:
        if x == 0:
            y -= 1
            components.append(Insertion(B[y]))
        elif y == 0:
            x -= 1
            components.append(Deletion(A[x]))
        elif G[x-1][y-1]:
            x -= 1
            y -= 1
            components.append(Unchanged(A[x], B[y]))
        elif R[x][y-1] > R[x-1][y]:
            y -= 1
            components.append(Insertion(B[y]))
        else:
            x -= 1
            components.append(Deletion(A[x]))
    components.reverse()
    return components


def align(A, B, compare=operator.__eq__):
    """Align A and B along their longest common subsequence.

    Returns a list of Insertion, Deletion and Unchanged components
    in left to right order. Uses O(MN) time and memory.
    """
    G = compare_grid(A, B, compare)
    R = llcs_grid(G)
    return backtrack(A, B, G, R)
