import random
from collections import namedtuple
import pytest
from seqquery import query, Query, select, group_by, to_map, seterr, \
    EvaluationError

Item = namedtuple("Item", ["id", "name", "value"])

items = [Item(1, "a", 10), Item(2, "b", 20), Item(3, "a", 30)]


def test_select():
    n = 100
    data = [random.random() for _ in range(n)]

    def do(x):
        do.call_cnt += 1
        return x + 1

    do.call_cnt = 0

    result = select(query(data), do)
    assert isinstance(result, Query)
    assert do.call_cnt == n  # eager evaluation
    assert result.to_list() == [x + 1 for x in data]
    assert len(result) == len(data)

    names = select(query(items), lambda item: item.name)
    assert names.to_list() == ["a", "b", "a"]
    assert select(names, str.upper).distinct(lambda a, b: a == b) \
        .to_list() == ["A", "B"]

    assert select(query([]), do).to_list() == []
    assert select([1, 2], lambda x: -x).to_list() == [-1, -2]

    with pytest.raises(TypeError):
        select(query(data), None)


def test_group_by():
    grouped = group_by(query(items), lambda item: item.name)

    assert len(grouped) == 2
    assert [item.id for item in grouped["a"]] == [1, 3]
    assert [item.id for item in grouped["b"]] == [2]
    assert group_by(query([]), lambda item: item) == {}


def test_group_by_order():
    data = [(random.randint(0, 5), i) for i in range(200)]
    grouped = group_by(query(data), lambda x: x[0])

    assert sorted(grouped.keys()) == sorted(set(k for k, _ in data))
    for key, group in grouped.items():
        assert group == [x for x in data if x[0] == key]


def test_to_map():
    mapping = to_map(query(items), lambda item: item.id,
                     lambda item: item.name)
    assert mapping == {1: "a", 2: "b", 3: "a"}

    # last write wins
    mapping = to_map(query(items), lambda item: item.name,
                     lambda item: item.id)
    assert mapping == {"a": 3, "b": 2}

    assert to_map(query([]), lambda x: x, lambda x: x) == {}

    with pytest.raises(TypeError):
        to_map(query(items), lambda item: item.id, None)


class CustomException(Exception):
    pass


@pytest.mark.parametrize('evaluation', ['wrap', 'passthrough'])
def test_mapping_exceptions(evaluation):
    def do(x):
        del x
        raise CustomException

    old = seterr(evaluation)
    try:
        q = query(items)
        error_t = EvaluationError if evaluation == "wrap" else CustomException

        with pytest.raises(error_t):
            select(q, do)

        with pytest.raises(error_t):
            group_by(q, do)

        with pytest.raises(error_t):
            to_map(q, lambda item: item.id, do)

    finally:
        seterr(old)
