from collections import defaultdict

from .errors import evaluating
from .query import Query
from .utils import check_callable


def _as_query(q):
    return q if isinstance(q, Query) else Query(q)


def select(query, selector):
    """Return a query of `selector` applied to each element.

    Equivalent to :code:`[selector(x) for x in query]`, the type of the
    elements may change along the way.

    Example:

        >>> q = seqquery.query([{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}])
        >>> seqquery.select(q, lambda item: item['name']).to_list()
        ['a', 'b']
    """
    check_callable(selector, "selector")
    query = _as_query(query)

    with evaluating("select", query.stack):
        return Query([selector(item) for item in query])


def group_by(query, key_selector):
    """Group elements sharing the same key.

    Args:
        query (Query): elements to group.
        key_selector (Callable[[Any], Hashable]): key of each element.

    Returns:
        (Dict[Hashable, List]): elements for each key, in their original
        relative order.

    Example:

        >>> people = [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'},
        ...           {'id': 3, 'name': 'a'}]
        >>> groups = seqquery.group_by(people, lambda p: p['name'])
        >>> [p['id'] for p in groups['a']]
        [1, 3]
    """
    check_callable(key_selector, "key_selector")
    query = _as_query(query)

    groups = defaultdict(list)
    with evaluating("group_by", query.stack):
        for item in query:
            groups[key_selector(item)].append(item)

    return dict(groups)


def to_map(query, key_selector, value_selector):
    """Build a dictionary from the elements.

    When several elements have the same key, the value of the last one is
    kept.
    """
    check_callable(key_selector, "key_selector")
    check_callable(value_selector, "value_selector")
    query = _as_query(query)

    result = {}
    with evaluating("to_map", query.stack):
        for item in query:
            result[key_selector(item)] = value_selector(item)

    return result
