# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .generic import compare
from .config import DiffConfig

__all__ = ["compare", "DiffConfig"]
