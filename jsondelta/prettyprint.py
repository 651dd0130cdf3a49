# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import json
import sys

import colorama

from .diff_format import (
    Same, Different,
    MismatchedTypes, MismatchedArray, MismatchedObject,
    SameArrayValue, RemovedArrayValue, AddedArrayValue, ArrayDifference,
    SameObjectValue, RemovedObjectKey, AddedObjectKey, MismatchedObjectValue,
    scalar_difference_types, json_type_name,
    )
from .log import JSONDeltaFormatError


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'KEY',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        KEY    = colorama.Fore.YELLOW,
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        KEY    = '',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def KEY(self):
        return col_const[self.use_color].KEY

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def format_value(value):
    return json.dumps(value, ensure_ascii=False)


def format_key(key, config):
    return "{}{}{}:".format(config.KEY, json.dumps(key, ensure_ascii=False), config.RESET)


def _write(marker, prefix, text, config):
    config.out.write(marker + prefix + text + config.RESET + "\n")


def pretty_print_value(value, prefix, marker, config=DefaultConfig):
    "Print a json value, one line per nesting level, each line marked."
    text = json.dumps(value, indent=len(IND), ensure_ascii=False)
    for line in text.splitlines():
        _write(marker, prefix, line, config)


def pretty_print_comparison(comparison, config=DefaultConfig):
    """Pretty-print a comparison of two documents.

    Unchanged values are printed as they are, removed values are
    marked with '-' and added values with '+'.
    """
    if isinstance(comparison, Same):
        pretty_print_value(comparison.left, "", config.KEEP, config)
    elif isinstance(comparison, Different):
        pretty_print_difference(comparison.difference, "", config)
    else:
        raise JSONDeltaFormatError("Not a comparison: {!r}".format(comparison))


def pretty_print_difference(d, prefix, config=DefaultConfig):
    if isinstance(d, scalar_difference_types):
        _write(config.REMOVE, prefix, format_value(d.left), config)
        _write(config.ADD, prefix, format_value(d.right), config)
    elif isinstance(d, MismatchedTypes):
        _write(config.INFO, prefix, "expected {}, got {}".format(
            json_type_name(d.left), json_type_name(d.right)), config)
        _write(config.REMOVE, prefix, format_value(d.left), config)
        _write(config.ADD, prefix, format_value(d.right), config)
    elif isinstance(d, MismatchedArray):
        _write(config.KEEP, prefix, "[", config)
        for e in d.comparisons:
            pretty_print_array_comparison(e, prefix + IND, config)
        _write(config.KEEP, prefix, "]", config)
    elif isinstance(d, MismatchedObject):
        _write(config.KEEP, prefix, "{", config)
        for e in d.comparisons:
            pretty_print_object_comparison(e, prefix + IND, config)
        _write(config.KEEP, prefix, "}", config)
    else:
        raise JSONDeltaFormatError("Invalid difference {!r}.".format(d))


def pretty_print_array_comparison(e, prefix, config=DefaultConfig):
    if isinstance(e, SameArrayValue):
        _write(config.KEEP, prefix, format_value(e.value), config)
    elif isinstance(e, RemovedArrayValue):
        _write(config.REMOVE, prefix, format_value(e.value), config)
    elif isinstance(e, AddedArrayValue):
        _write(config.ADD, prefix, format_value(e.value), config)
    elif isinstance(e, ArrayDifference):
        pretty_print_difference(e.difference, prefix, config)
    else:
        raise JSONDeltaFormatError("Invalid array comparison {!r}.".format(e))


def pretty_print_object_comparison(e, prefix, config=DefaultConfig):
    if isinstance(e, SameObjectValue):
        _write(config.KEEP, prefix, "{}: {}".format(
            json.dumps(e.key, ensure_ascii=False), format_value(e.value)), config)
    elif isinstance(e, RemovedObjectKey):
        _write(config.REMOVE, prefix, "{}: {}".format(
            json.dumps(e.key, ensure_ascii=False), format_value(e.value)), config)
    elif isinstance(e, AddedObjectKey):
        _write(config.ADD, prefix, "{}: {}".format(
            json.dumps(e.key, ensure_ascii=False), format_value(e.value)), config)
    elif isinstance(e, MismatchedObjectValue):
        _write(config.KEEP, prefix, format_key(e.key, config), config)
        pretty_print_difference(e.difference, prefix + IND, config)
    else:
        raise JSONDeltaFormatError("Invalid object comparison {!r}.".format(e))
