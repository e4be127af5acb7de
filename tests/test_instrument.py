import time
from seqquery import query, select
from seqquery.instrument import debug


def test_debug():
    arr = list(range(100))

    def do(args, result):
        del args, result
        do.i += 1

    do.i = 0

    double = debug(lambda x: 2 * x, do)

    assert select(query(arr), double).to_list() == [2 * x for x in arr]
    assert do.i == 100
    assert double.n_calls == 100
    assert double.n_evaluations == 100

    do.i = 0
    double = debug(lambda x: 2 * x, do, max_calls=3)

    assert select(query(arr), double).to_list() == [2 * x for x in arr]
    assert do.i == 3
    assert double.n_evaluations == 100

    def proc(x):
        time.sleep(0.01)
        return x

    do.i = 0
    slow = debug(proc, do, max_rate=10)

    assert select(query(arr), slow).to_list() == arr
    assert 2 <= do.i <= 30  # about 10 over the ~1s run


def test_debug_arguments():
    seen = []
    less_than = debug(lambda a, b: a < b, lambda args, r: seen.append((args, r)))

    assert query([2, 1]).order_by(less_than).to_list() == [1, 2]
    assert len(seen) > 0
    for (a, b), result in seen:
        assert result == (a < b)


def test_debug_wraps():
    def is_even(n):
        """Even numbers."""
        return n % 2 == 0

    wrapped = debug(is_even, lambda args, result: None)
    assert wrapped.__name__ == "is_even"
    assert wrapped.__doc__ == "Even numbers."
