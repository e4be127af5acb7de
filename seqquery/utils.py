"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def clip(x, a, b):
    """Clip value within specified range."""
    return max(a, min(x, b))


def identity(x):
    """Return the argument, default selector for aggregations."""
    return x


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_callable(f, name):
    if not callable(f):
        raise TypeError("{} must be callable".format(name))
