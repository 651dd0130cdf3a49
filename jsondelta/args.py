# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import get_defaults_for_argparse, build_config, entrypoint_configurables
from .log import init_logging, set_jsondelta_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_jsondelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_jsondelta_log_level(level, True)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        json.dump({header: config}, sys.stderr, indent=2, sort_keys=True)
        sys.stderr.write('\n')
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondelta commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    parser.add_argument(
        '--insertion-order',
        dest='sort_keys',
        action="store_false",
        default=True,
        help="compare object keys in the order they appear in the "
             "documents instead of sorted order.")


def add_patch_generation_args(parser):
    """Adds arguments controlling how a diff is converted to a patch.
    """
    parser.add_argument(
        '--patch',
        action="store_true",
        default=False,
        help="print the diff as a JSON patch instead of a pretty diff.")
    parser.add_argument(
        '--shift-indices',
        action="store_true",
        default=False,
        help="adjust array indices in the patch for the effect of "
             "earlier operations, so it can be applied in sequence.")
    parser.add_argument(
        '--replace-types',
        action="store_true",
        default=False,
        help="emit replace operations for values that changed type.")


filename_help = {
    "left": "the original JSON document filename.",
    "right": "the modified JSON document filename.",
    "document": "the JSON document filename to patch.",
    "patch": "the JSON patch filename.",
}


def add_filename_args(parser, names):
    """Add positional filename arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing import DiffConfig
    return DiffConfig(sort_keys=getattr(arguments, 'sort_keys', True))
