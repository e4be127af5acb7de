import contextlib
import inspect
import os
import threading

from tblib import pickling_support

from .utils import get_logger


logger = get_logger(__name__)


class EvaluationError(Exception):
    """Raised when a function passed to a query fails."""


# wrapped errors keep their cause and traceback when pickled
pickling_support.install()


# Settings --------------------------------------------------------------------

def seterr(evaluation=None):
    """Set how errors are handled.

    Args:
        evaluation (str): how errors from user code triggered by SeqQuery are
            propagated:

            - `'passthrough'`: let the error propagate unmodified (default).
            - `'wrap'`: raise :class:`EvaluationError` with original error as
              its cause and a description of the failing query.
            - `None` leave unchanged and return current setting
    Returns:
        The setting value.
    """
    if evaluation == 'wrap':
        error_config.passthrough = False
    elif evaluation == 'passthrough':
        error_config.passthrough = True
    elif evaluation is not None:
        raise ValueError("evaluation must be 'wrap' or 'passthrough'")

    return "passthrough" if error_config.passthrough else 'wrap'


class ErrorConfig(threading.local):
    def __init__(self):
        super().__init__()
        self.passthrough = True


error_config = ErrorConfig()


# Helpers ---------------------------------------------------------------------

def unindent(lines):
    if lines is None:
        return []

    prefix = lines[0]
    while len(prefix) > 0 and not prefix.isspace():
        prefix = prefix[:-1]

    for line in lines[1:]:
        while not line.startswith(prefix):
            prefix = prefix[:-1]

    return [line[len(prefix):] for line in lines]


def format_stack(skip=1):
    out = ""
    for frame in inspect.stack()[:skip:-1]:
        _, filename, lineno, function, code_context, _ = frame
        out += "  File \"{}\", line {}, in {}\n".format(
            filename, lineno, function)
        for line in unindent(code_context):
            out += "    " + line

    return out


_package_dir = os.path.dirname(os.path.abspath(__file__))


def creation_stack():
    """Return the stack where a query is built, only when errors are wrapped.

    Frames from the seqquery package itself are left out so that the
    stack ends on the user code which built the query.
    """
    if error_config.passthrough:
        return None

    frames = inspect.stack()
    skip = 0
    while skip < len(frames) and os.path.dirname(
            os.path.abspath(frames[skip].filename)) == _package_dir:
        skip += 1

    # format_stack adds its own frame on top of ours
    return format_stack(skip)


@contextlib.contextmanager
def evaluating(operation, stack=None):
    """Apply the current error setting to failures of user functions.

    Args:
        operation (str): name of the query operation being evaluated.
        stack (Optional[str]): formatted stack of the query creation.
    """
    try:
        yield

    except Exception as error:
        if seterr() == 'passthrough' or isinstance(error, EvaluationError):
            raise

        msg = "Failed to evaluate {}".format(operation)
        if stack is not None:
            msg += " on Query created at:\n{}".format(stack)
        logger.debug("wrapping %s raised during %s",
                     error.__class__.__name__, operation)
        raise EvaluationError(msg) from error
