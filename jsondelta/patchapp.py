# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import ConfigBackedParser, add_generic_args, add_filename_args
from .log import JSONDeltaFormatError, OperationError
from .patch_format import to_patch_entries
from .patching import apply_patch
from .utils import read_json, write_json, setup_std_streams
from . import log


_description = "Apply a JSON patch to a JSON document."


def main_patch(args):
    document_filename = args.document
    patch_filename = args.patch
    output_filename = args.output

    for fn in (document_filename, patch_filename):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    try:
        before = read_json(document_filename)
        operations = to_patch_entries(read_json(patch_filename))
    except JSONDeltaFormatError as e:
        log.error("Invalid patch: %s", e)
        return 1
    except ValueError as e:
        log.error("Failed parsing JSON: %s", e)
        return 1

    try:
        after = apply_patch(before, operations)
    except OperationError as e:
        log.error("Failed to apply patch: %s", e)
        return 1

    if output_filename:
        write_json(after, output_filename)
    else:
        print(json.dumps(after, indent=2, separators=(",", ": "),
                         ensure_ascii=False))

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsondelta-patch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondelta-patch',
        add_help=True,
        )
    add_generic_args(parser)
    add_filename_args(parser, ["document", "patch"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="if supplied, the patched document is written "
             "to this file. Otherwise it is printed to the "
             "terminal.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
