# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy

from jsondelta import compare, generate_patch, apply_patch
from jsondelta.diff_format import Same, Different, json_equal
from jsondelta.patch_format import is_valid_patch


def check_diff_and_patch(a, b, **kwargs):
    "Check that applying generate_patch(compare(a, b)) to a reproduces b."
    c = compare(a, b)
    assert isinstance(c, Same if json_equal(a, b) else Different)
    operations = generate_patch(c, **kwargs)
    assert is_valid_patch(operations)
    # Patching mutates the document, keep a and b intact
    patched = apply_patch(copy.deepcopy(a), operations)
    assert json_equal(patched, b)
    return operations


def check_symmetric_diff_and_patch(a, b, **kwargs):
    "Check that patching reproduces b from a and vice versa."
    check_diff_and_patch(a, b, **kwargs)
    check_diff_and_patch(b, a, **kwargs)
