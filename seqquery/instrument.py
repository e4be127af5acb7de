"""Debugging tools."""

import functools
from time import monotonic


class Debug(object):
    def __init__(self, func, callback, max_calls, max_rate):
        self.func = func
        self.callback = callback
        self.max_calls = max_calls
        self.max_rate = max_rate
        self.n_calls = 0
        self.n_evaluations = 0
        self.last_call = None
        functools.update_wrapper(self, func)

    def silence(self):
        if self.max_calls is not None:
            if self.n_calls >= self.max_calls:
                return True

        if self.max_rate is not None and self.last_call is not None:
            elapsed = monotonic() - self.last_call
            if elapsed < (1.0 / self.max_rate):
                return True

        return False

    def __call__(self, *args):
        result = self.func(*args)
        self.n_evaluations += 1

        if not self.silence():
            self.callback(args, result)
            self.last_call = monotonic()
            self.n_calls += 1

        return result


def debug(func, callback, max_calls=None, max_rate=None):
    """Wrap a function passed to a query to observe its invocations.

    Args:
        func (Callable):
            A predicate, selector, comparator... to be passed to a query.
        callback (Callable):
            A function to call whenever `func` is invoked, must take the
            tuple of arguments and the returned value.
        max_calls (Optional[int]):
            An optional count limit on how many times `callback` is invoked
            (default None).
        max_rate (Optional[int]):
            An optional rate limit to avoid spamming `callback`.

    Returns:
        (Callable): The wrapped function, its `n_evaluations` attribute
        counts every call to `func`.

    Example:

        .. testsetup::

           import seqquery
           from seqquery.instrument import debug

        >>> is_even = debug(lambda n: n % 2 == 0, print, max_calls=2)
        >>> seqquery.query([1, 2, 3, 4]).any(is_even)
        (1,) False
        (2,) True
        True
        >>> is_even.n_evaluations
        2
    """
    return Debug(func, callback, max_calls, max_rate)
