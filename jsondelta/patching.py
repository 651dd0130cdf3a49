# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from .diff_format import Missing, json_equal
from .log import (
    OperationError,
    MissingKeyForSelector, FailedTest, InvalidKey, DisallowedMove, InvalidIndex,
    )
from .patch_format import PatchOp, validate_patch, validate_patch_entry
from .pointer import (
    ArrayIndex, LastElementInArray, parse_pointer, segment_token, split_pointer,
    value_at, mutate_at,
    )
from . import log


__all__ = ["apply_operation", "apply_patch"]


def add_value(document, path, value):
    "Add value at path, inserting into arrays and setting object keys."
    selector = parse_pointer(path)
    if not selector:
        return value

    parent = value_at(document, selector[:-1])
    if parent is Missing:
        raise MissingKeyForSelector(path)

    segment = selector[-1]
    if isinstance(parent, dict):
        parent[segment_token(segment)] = value
    elif isinstance(parent, list):
        if isinstance(segment, LastElementInArray):
            parent.append(value)
        elif isinstance(segment, ArrayIndex):
            if segment.index > len(parent):
                raise InvalidIndex(path)
            parent.insert(segment.index, value)
        else:
            raise InvalidKey(path)
    else:
        raise InvalidKey(path)
    return document


def remove_value(document, path):
    "Remove the key or element at path."
    selector = parse_pointer(path)
    if not selector:
        raise InvalidKey(path)

    parent = value_at(document, selector[:-1])
    segment = selector[-1]
    if isinstance(parent, dict):
        key = segment_token(segment)
        if key not in parent:
            raise InvalidKey(path)
        del parent[key]
    elif isinstance(parent, list):
        if isinstance(segment, ArrayIndex) and segment.index < len(parent):
            del parent[segment.index]
        elif isinstance(segment, LastElementInArray) and parent:
            parent.pop()
        else:
            raise InvalidKey(path)
    else:
        raise InvalidKey(path)
    return document


def _is_nested_in(path, from_path):
    "Check whether path points strictly inside from_path."
    inner = split_pointer(path)
    outer = split_pointer(from_path)
    return len(inner) > len(outer) and inner[:len(outer)] == outer


def apply_operation(document, operation):
    """Apply a single patch operation to document.

    The document is mutated in place where possible, the result is
    returned and should be used in place of document, as operations
    on the full document path "" replace it.

    Raises an OperationError subclass if the operation can not be
    applied, leaving document unchanged. There is no rollback across
    operations, callers that apply sequences of operations keep the
    effects of the operations applied so far.
    """
    validate_patch_entry(operation)
    op = operation["op"]
    path = operation["path"]
    log.debug("Applying %s operation at %r", op, path)

    if op == PatchOp.TEST:
        found = value_at(document, path)
        if found is Missing:
            raise InvalidKey(path)
        if not json_equal(found, operation["value"]):
            raise FailedTest(path)
        return document

    elif op == PatchOp.ADD:
        return add_value(document, path, copy.deepcopy(operation["value"]))

    elif op == PatchOp.REMOVE:
        return remove_value(document, path)

    elif op == PatchOp.REPLACE:
        if value_at(document, path) is Missing:
            raise InvalidKey(path)
        return mutate_at(document, path, copy.deepcopy(operation["value"]))

    # Move and copy
    from_path = operation["from"]
    if _is_nested_in(path, from_path):
        raise DisallowedMove(path)
    value = value_at(document, from_path)
    if value is Missing:
        raise InvalidKey(from_path)
    value = copy.deepcopy(value)
    if op == PatchOp.COPY:
        return add_value(document, path, value)

    document = remove_value(document, from_path)
    try:
        return add_value(document, path, value)
    except OperationError:
        # Put the source back, a failed move leaves the document as it was
        add_value(document, from_path, value)
        raise


def apply_patch(document, operations):
    """Apply a list of patch operations in order.

    Stops at the first operation that fails, raising its error.
    """
    validate_patch(operations)
    for e in operations:
        document = apply_operation(document, e)
    return document
