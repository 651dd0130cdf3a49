# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import (
    Same, Different,
    MismatchedString, MismatchedNumber, MismatchedBool, MismatchedTypes,
    MismatchedArray, MismatchedObject,
    SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference,
    SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue,
    json_type_name,
    )

from .config import DiffConfig
from .lcs import align, Insertion, Deletion, Unchanged

__all__ = ["compare"]


_scalar_differences = {
    "string": MismatchedString,
    "number": MismatchedNumber,
    "bool": MismatchedBool,
}


def compare(left, right, config=None):
    """Compare two json-like values.

    Returns Same(left, right) if the values are structurally equal,
    otherwise Different(left, right, difference) where difference
    is the root of a tree locating each disagreement.
    """
    if config is None:
        config = DiffConfig()

    d = compare_values(left, right, config=config)
    if d is None:
        return Same(left, right)
    return Different(left, right, d)


def compare_values(left, right, config=None):
    "Return the difference between left and right, or None if they are equal."
    if config is None:
        config = DiffConfig()

    if config.compare(left, right):
        return None
    return compare_different_values(left, right, config=config)


def compare_different_values(left, right, config=None):
    "Classify the difference between two values known to be unequal."
    if config is None:
        config = DiffConfig()

    kind = json_type_name(left)
    if kind != json_type_name(right):
        # No recursion across type boundaries
        return MismatchedTypes(left, right)
    if kind == "array":
        return compare_arrays(left, right, config=config)
    elif kind == "object":
        return compare_objects(left, right, config=config)
    elif kind in _scalar_differences:
        return _scalar_differences[kind](left, right)
    # Two nulls are always equal, this is only reached
    # with a custom compare predicate
    return MismatchedTypes(left, right)


def compare_arrays(left, right, config=None):
    """Compare two lists aligned by their longest common subsequence.

    A deletion next to an insertion is reported as a single changed
    element, recursively compared. The index of each record counts
    the records emitted before it, not positions in left or right.
    """
    if config is None:
        config = DiffConfig()

    components = align(left, right, config.compare)

    comparisons = []
    N = len(components)
    k = 0
    while k < N:
        c = components[k]
        n = components[k+1] if k + 1 < N else None
        index = len(comparisons)
        if isinstance(c, Deletion) and isinstance(n, Insertion):
            comparisons.append(_changed_item(index, c.item, n.item, config))
            k += 2
        elif isinstance(c, Insertion) and isinstance(n, Deletion):
            comparisons.append(_changed_item(index, n.item, c.item, config))
            k += 2
        else:
            if isinstance(c, Unchanged):
                comparisons.append(SameArrayValue(index, c.left))
            elif isinstance(c, Deletion):
                comparisons.append(RemovedArrayValue(index, c.item))
            else:
                assert isinstance(c, Insertion)
                comparisons.append(AddedArrayValue(index, c.item))
            k += 1

    return MismatchedArray(comparisons)


def _changed_item(index, old, new, config):
    d = compare_values(old, new, config=config)
    if d is None:
        return SameArrayValue(index, old)
    return ArrayDifference(index, d)


def compare_objects(left, right, config=None):
    """Compare two dicts key by key.

    Keys of left come first, in the order given by config.keys,
    followed by the keys only found in right.
    """
    if config is None:
        config = DiffConfig()

    if not isinstance(left, dict) or not isinstance(right, dict):
        raise TypeError('Arguments to compare_objects need to be dicts, got %r and %r' % (left, right))

    comparisons = []
    for key in config.keys(left):
        lvalue = left[key]
        if key not in right:
            comparisons.append(RemovedObjectKey(key, lvalue))
            continue
        d = compare_values(lvalue, right[key], config=config)
        if d is None:
            comparisons.append(SameObjectValue(key, lvalue))
        else:
            comparisons.append(MismatchedObjectValue(key, d))

    for key in config.keys(right):
        if key not in left:
            comparisons.append(AddedObjectKey(key, right[key]))

    return MismatchedObject(comparisons)
