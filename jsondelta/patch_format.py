# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .diff_format import (
    Same, Different,
    MismatchedTypes, MismatchedArray, MismatchedObject,
    SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference,
    SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue,
    scalar_difference_types,
    )
from .log import JSONDeltaFormatError
from .pointer import join_pointer
from . import log

__all__ = ["generate_patch", "PatchEntry", "PatchOp"]


class PatchEntry(dict):
    """For internal usage in jsondelta library.

    Minimal class providing attribute access to patch operation keys.
    Note that the "from" key of move and copy operations is only
    available by item access, as from is a python keyword.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


class PatchOp:
    "Collection of valid values for the op field in patch operations."
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    MOVE = "move"
    COPY = "copy"
    TEST = "test"

    # Operations produced by generate_patch
    GENERATED = (ADD, REMOVE, REPLACE)
    # Operations accepted by the patch applier
    ALL = (ADD, REMOVE, REPLACE, MOVE, COPY, TEST)


def op_add(path, value):
    "Create a patch operation adding value at path."
    return PatchEntry(op=PatchOp.ADD, path=path, value=value)

def op_remove(path):
    "Create a patch operation removing the value at path."
    return PatchEntry(op=PatchOp.REMOVE, path=path)

def op_replace(path, value):
    "Create a patch operation replacing the value at path."
    return PatchEntry(op=PatchOp.REPLACE, path=path, value=value)

def op_move(path, from_path):
    "Create a patch operation moving the value at from_path to path."
    return PatchEntry({"op": PatchOp.MOVE, "path": path, "from": from_path})

def op_copy(path, from_path):
    "Create a patch operation copying the value at from_path to path."
    return PatchEntry({"op": PatchOp.COPY, "path": path, "from": from_path})

def op_test(path, value):
    "Create a patch operation testing that path holds value."
    return PatchEntry(op=PatchOp.TEST, path=path, value=value)


def validate_patch(operations):
    """Check whether a patch (list of operations) is well formed.

    Raises a JSONDeltaFormatError if not well formed.
    """
    if not isinstance(operations, list):
        raise JSONDeltaFormatError("Patch must be a list.")
    for e in operations:
        validate_patch_entry(e)


def validate_patch_entry(e):
    """Check that e is a well formed patch operation.

    Raises a JSONDeltaFormatError if not well formed.
    """
    if not isinstance(e, dict):
        raise JSONDeltaFormatError("Patch operation '{}' is not an object.".format(e))
    op = e.get("op")
    if op not in PatchOp.ALL:
        raise JSONDeltaFormatError("Unknown patch op '{}'.".format(op))
    if not isinstance(e.get("path"), str):
        raise JSONDeltaFormatError(
            "Patch op '{}' expects a string path, not '{}'.".format(op, e.get("path")))
    if op in (PatchOp.ADD, PatchOp.REPLACE, PatchOp.TEST):
        if "value" not in e:
            raise JSONDeltaFormatError("Patch op '{}' expects a value.".format(op))
    elif op in (PatchOp.MOVE, PatchOp.COPY):
        if not isinstance(e.get("from"), str):
            raise JSONDeltaFormatError(
                "Patch op '{}' expects a string from path, not '{}'.".format(op, e.get("from")))


def is_valid_patch(operations):
    try:
        validate_patch(operations)
        result = True
    except JSONDeltaFormatError:
        result = False
    return result


def to_patch_entries(operations):
    "Convert a list of plain dicts, e.g. loaded from json, into PatchEntry objects."
    validate_patch(operations)
    return [PatchEntry(e) for e in operations]


def generate_patch(comparison, shift_indices=False, replace_types=False):
    """Convert a comparison into a list of add, remove and replace operations.

    Array operations use the index of the aligned record by default.
    These are not adjusted for the effect earlier operations have on
    later indices, so applying the operations in sequence to the left
    document only reproduces the right document when no removal in an
    array is followed by a later operation in the same array. With
    shift_indices, indices are instead the position in the array as it
    looks after the previous operations.

    Values of differing types are not patched unless replace_types
    is given, in which case they are replaced.
    """
    if isinstance(comparison, Same):
        return []
    if not isinstance(comparison, Different):
        raise JSONDeltaFormatError("Not a comparison: {!r}".format(comparison))

    operations = []
    _patch_difference(comparison.difference, [], operations,
                      shift_indices, replace_types)
    return operations


def _patch_difference(d, path, operations, shift_indices, replace_types):
    if isinstance(d, scalar_difference_types):
        operations.append(op_replace(join_pointer(path), d.right))
    elif isinstance(d, MismatchedTypes):
        if replace_types:
            operations.append(op_replace(join_pointer(path), copy.deepcopy(d.right)))
        else:
            log.debug("Not patching mismatched types at %r", join_pointer(path))
    elif isinstance(d, MismatchedArray):
        _patch_array(d, path, operations, shift_indices, replace_types)
    elif isinstance(d, MismatchedObject):
        _patch_object(d, path, operations, shift_indices, replace_types)
    else:
        raise JSONDeltaFormatError("Invalid difference {!r}.".format(d))


def _patch_array(d, path, operations, shift_indices, replace_types):
    # Position in the array after applying the operations emitted so far
    position = 0
    for e in d.comparisons:
        index = position if shift_indices else e.index
        if isinstance(e, SameArrayValue):
            position += 1
        elif isinstance(e, RemovedArrayValue):
            operations.append(op_remove(join_pointer(path + [index])))
        elif isinstance(e, AddedArrayValue):
            operations.append(op_add(join_pointer(path + [index]), copy.deepcopy(e.value)))
            position += 1
        elif isinstance(e, ArrayDifference):
            _patch_difference(e.difference, path + [index], operations,
                              shift_indices, replace_types)
            position += 1
        else:
            raise JSONDeltaFormatError("Invalid array comparison {!r}.".format(e))


def _patch_object(d, path, operations, shift_indices, replace_types):
    for e in d.comparisons:
        if isinstance(e, SameObjectValue):
            pass
        elif isinstance(e, AddedObjectKey):
            operations.append(op_add(join_pointer(path + [e.key]), copy.deepcopy(e.value)))
        elif isinstance(e, RemovedObjectKey):
            operations.append(op_remove(join_pointer(path + [e.key])))
        elif isinstance(e, MismatchedObjectValue):
            _patch_difference(e.difference, path + [e.key], operations,
                              shift_indices, replace_types)
        else:
            raise JSONDeltaFormatError("Invalid object comparison {!r}.".format(e))
