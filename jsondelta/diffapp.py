# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_patch_generation_args,
    add_prettyprint_args, add_filename_args, ConfigBackedParser,
    prettyprint_config_from_args, diff_config_from_args,
    )
from .diff_format import is_same, count_records
from .diffing import compare
from .patch_format import generate_patch
from .prettyprint import pretty_print_comparison
from .utils import read_json, write_json, setup_std_streams
from . import log


_description = "Compute the difference between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    left = args.left
    right = args.right
    output = getattr(args, 'out', None)

    for fn in (left, right):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        a = read_json(left)
        b = read_json(right)
    except ValueError as e:
        log.error("Failed parsing JSON: %s", e)
        return 1

    comparison = compare(a, b, config=diff_config_from_args(args))
    if not is_same(comparison):
        log.debug("Found %d difference records",
                  count_records(comparison.difference))

    if output or args.patch:
        operations = generate_patch(
            comparison,
            shift_indices=args.shift_indices,
            replace_types=args.replace_types)
        if output:
            write_json(operations, output)
        else:
            print(json.dumps(operations, indent=2, separators=(",", ": "),
                             ensure_ascii=False))
    else:
        # This printer is to keep the unit tests passing,
        # some tests capture output with capsys which doesn't
        # pick up on sys.stdout.write()
        class Printer:
            def write(self, text):
                print(text, end="")
        config = prettyprint_config_from_args(args, out=Printer())
        pretty_print_comparison(comparison, config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsondelta-diff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondelta-diff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_patch_generation_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["left", "right"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diff is written to this file as a JSON "
             "patch. Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
