# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple


# Sentinel to allow None as a value
Missing = object()


def record_type(name, fields):
    """Make a namedtuple based record type.

    Plain namedtuples compare equal to any tuple with equal items,
    so two variants like RemovedArrayValue(0, 1) and AddedArrayValue(0, 1)
    would be considered equal. Records only equal records of the same type.
    """
    base = namedtuple(name, fields)

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not __eq__(self, other)

    return type(name, (base,), {
        '__slots__': (),
        '__eq__': __eq__,
        '__ne__': __ne__,
        # Records hold lists and documents, they are never hashable
        '__hash__': None,
    })


def _make_diff_types():
    # Outcome of comparing two documents
    Same = record_type("Same", ("left", "right"))
    Different = record_type("Different", ("left", "right", "difference"))

    # One populated variant per node of the difference tree
    MismatchedString = record_type("MismatchedString", ("left", "right"))
    MismatchedNumber = record_type("MismatchedNumber", ("left", "right"))
    MismatchedBool = record_type("MismatchedBool", ("left", "right"))
    MismatchedTypes = record_type("MismatchedTypes", ("left", "right"))
    MismatchedArray = record_type("MismatchedArray", ("comparisons",))
    MismatchedObject = record_type("MismatchedObject", ("comparisons",))

    # Records of an aligned array, index counts emitted records
    SameArrayValue = record_type("SameArrayValue", ("index", "value"))
    RemovedArrayValue = record_type("RemovedArrayValue", ("index", "value"))
    AddedArrayValue = record_type("AddedArrayValue", ("index", "value"))
    ArrayDifference = record_type("ArrayDifference", ("index", "difference"))

    # Records of an object, one per key of either side
    SameObjectValue = record_type("SameObjectValue", ("key", "value"))
    RemovedObjectKey = record_type("RemovedObjectKey", ("key", "value"))
    AddedObjectKey = record_type("AddedObjectKey", ("key", "value"))
    MismatchedObjectValue = record_type("MismatchedObjectValue", ("key", "difference"))

    return (Same, Different,
            MismatchedString, MismatchedNumber, MismatchedBool, MismatchedTypes,
            MismatchedArray, MismatchedObject,
            SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference,
            SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue)


(Same, Different,
 MismatchedString, MismatchedNumber, MismatchedBool, MismatchedTypes,
 MismatchedArray, MismatchedObject,
 SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference,
 SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue) = _make_diff_types()


# Collections used for dispatch and validation
comparison_types = (Same, Different)
scalar_difference_types = (MismatchedString, MismatchedNumber, MismatchedBool)
difference_types = scalar_difference_types + (
    MismatchedTypes, MismatchedArray, MismatchedObject)
array_comparison_types = (
    SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference)
object_comparison_types = (
    SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue)


def json_type_name(value):
    "Return the JSON kind of a python value, raising TypeError for non-JSON values."
    # bool is a subclass of int, check it first
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "bool"
    elif isinstance(value, (int, float)):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, (list, tuple)):
        return "array"
    elif isinstance(value, dict):
        return "object"
    raise TypeError("Not a JSON value: {!r} of type {}".format(
        value, type(value).__name__))


def json_equal(a, b):
    """Deep structural equality of two JSON values.

    Numbers compare by value, booleans are never equal to numbers,
    objects compare regardless of key order and arrays in order.
    """
    ta = json_type_name(a)
    if ta != json_type_name(b):
        return False
    if ta == "array":
        return len(a) == len(b) and all(json_equal(x, y) for x, y in zip(a, b))
    elif ta == "object":
        if len(a) != len(b):
            return False
        for key, value in a.items():
            if key not in b or not json_equal(value, b[key]):
                return False
        return True
    return a == b


def is_same(comparison):
    return isinstance(comparison, Same)


def count_records(difference):
    "Count the records of a difference tree, including nested ones."
    n = 0
    if isinstance(difference, (MismatchedArray, MismatchedObject)):
        for e in difference.comparisons:
            n += 1
            if isinstance(e, (ArrayDifference, MismatchedObjectValue)):
                n += count_records(e.difference)
    return n
