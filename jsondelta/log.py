# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class JSONDeltaFormatError(ValueError):
    pass


class OperationError(Exception):
    """Base class for errors raised while applying a patch operation.

    The offending pointer string is available as `path`.
    """
    def __init__(self, path):
        super(OperationError, self).__init__(path)
        self.path = path

    def __eq__(self, other):
        return type(self) is type(other) and self.path == other.path

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.path))

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, self.path)

    def __str__(self):
        return '%s: %s' % (type(self).__name__, self.path)


class MissingKeyForSelector(OperationError):
    pass


class FailedTest(OperationError):
    pass


class InvalidKey(OperationError):
    pass


class DisallowedMove(OperationError):
    pass


class InvalidIndex(OperationError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for jsondelta entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all jsondelta loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_jsondelta_log_level(level, set_main=True):
    """Set a log level for jsondelta loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('jsondelta')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
