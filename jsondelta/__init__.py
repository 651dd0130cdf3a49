# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .diffing import compare, DiffConfig
from .patch_format import generate_patch
from .patching import apply_operation, apply_patch
from .pointer import parse_pointer, value_at, mutate_at


__all__ = [
    "__version__",
    "compare", "DiffConfig",
    "generate_patch",
    "apply_operation", "apply_patch",
    "parse_pointer", "value_at", "mutate_at",
    ]
