"""The :class:`Query` container and its chainable operations."""

import functools

from .errors import creation_stack, evaluating
from .predicates import PredicateGroup
from .utils import isint, clip, identity, get_logger, check_callable


logger = get_logger(__name__)

# used to indicate missing arguments
_missing = object()


def _comparison(less_than):
    # sorted() only relies on `<`, which maps to less_than(a, b)
    def compare(a, b):
        if less_than(a, b):
            return -1
        elif less_than(b, a):
            return 1
        else:
            return 0

    return compare


class Query(object):
    """An ordered, immutable collection with chainable operations.

    The source is copied when the query is built so that later changes to
    it are not reflected. Transformations return new :class:`Query`
    objects and never modify the elements of an existing one.
    """
    def __init__(self, source=()):
        if isinstance(source, Query):
            self.elements = source.elements
        else:
            self.elements = tuple(source)

        self.stack = creation_stack()

    # Sequence protocol -------------------------------------------------------

    def __len__(self):
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Query(self.elements[key])

        elif isint(key):
            if key < -len(self) or key >= len(self):
                raise IndexError(
                    self.__class__.__name__ + " index out of range")

            return self.elements[key]

        else:
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

    def __eq__(self, other):
        if isinstance(other, Query):
            return self.elements == other.elements
        elif isinstance(other, (list, tuple)):
            return self.elements == tuple(other)
        else:
            return NotImplemented

    __hash__ = None

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, list(self.elements))

    # Filtering ---------------------------------------------------------------

    def where(self, predicate):
        """Keep the elements for which `predicate` returns true."""
        return self.where_group(PredicateGroup([predicate]))

    def where_group(self, group):
        """Keep the elements accepted by a :class:`PredicateGroup`.

        Relative order is preserved. With AND, predicates are evaluated in
        order until one fails, with OR until one succeeds.
        """
        if not isinstance(group, PredicateGroup):
            raise TypeError(
                "group must be a PredicateGroup, not "
                + group.__class__.__name__)

        with evaluating("where_group", self.stack):
            return Query([item for item in self.elements if group(item)])

    # Element access & quantifiers --------------------------------------------

    def any(self, predicate):
        """Return whether at least one element satisfies `predicate`."""
        check_callable(predicate, "predicate")
        with evaluating("any", self.stack):
            for item in self.elements:
                if predicate(item):
                    return True
            return False

    def all(self, predicate):
        """Return whether every element satisfies `predicate`.

        An empty query trivially satisfies any predicate.
        """
        check_callable(predicate, "predicate")
        with evaluating("all", self.stack):
            for item in self.elements:
                if not predicate(item):
                    return False
            return True

    def first(self, predicate=None, default=None):
        """Return the first element satisfying `predicate`.

        Args:
            predicate (Optional[Callable[[Any], bool]]): condition to
                match, if omitted the first element is returned.
            default: value returned when no element matches (default
                None).

        Returns:
            (Tuple[Any, bool]): the element and whether it was found, the
            element is `default` when not found.

        Example:

            >>> query([10, 20, 30, 40]).first(lambda n: n > 25)
            (30, True)
            >>> query([10, 20, 30, 40]).first(lambda n: n > 100)
            (None, False)
        """
        if predicate is not None:
            check_callable(predicate, "predicate")

        with evaluating("first", self.stack):
            for item in self.elements:
                if predicate is None or predicate(item):
                    return item, True

        return default, False

    def element_at(self, index, default=None):
        """Return the element at a given position.

        Negative indices are out of range, they do not count from the end.

        Returns:
            (Tuple[Any, bool]): the element and whether `index` was in
            range, the element is `default` when it was not.
        """
        if not isint(index):
            raise TypeError(
                "index must be an integer, not " + index.__class__.__name__)

        if index < 0 or index >= len(self.elements):
            return default, False

        return self.elements[index], True

    def count(self):
        """Return the number of elements."""
        return len(self.elements)

    def default_if_empty(self, default_value):
        """Return a single element query with `default_value` if empty."""
        if len(self.elements) == 0:
            return Query((default_value,))

        return self

    # Set operations ----------------------------------------------------------

    def distinct(self, equal):
        """Remove elements equal to a previous one.

        The first occurrence of each value is kept in place. Each element
        is compared against all kept elements, so arbitrary equality
        functions are supported at a quadratic cost.

        Args:
            equal (Callable[[Any, Any], bool]): equality test.
        """
        check_callable(equal, "equal")

        with evaluating("distinct", self.stack):
            result = []
            for item in self.elements:
                if not any(equal(item, kept) for kept in result):
                    result.append(item)

        return Query(result)

    def union(self, other, equal):
        """Return the distinct elements of both sequences, self first.

        Example:

            >>> eq = lambda a, b: a == b
            >>> query([1, 2, 3, 4]).union([3, 4, 5, 6], eq).to_list()
            [1, 2, 3, 4, 5, 6]
        """
        return Query(self.elements + tuple(other)).distinct(equal)

    def intersect(self, other, equal):
        """Return the distinct elements of self which also occur in `other`.
        """
        check_callable(equal, "equal")
        other = tuple(other)

        with evaluating("intersect", self.stack):
            result = [item for item in self.elements
                      if any(equal(item, o) for o in other)]

        return Query(result).distinct(equal)

    def except_(self, other, equal):
        """Return the elements of self which do not occur in `other`.

        Unlike :meth:`union` and :meth:`intersect`, the result is not
        deduplicated: repeated elements absent from `other` are all kept.

        Example:

            >>> eq = lambda a, b: a == b
            >>> query([1, 1, 2, 3]).except_([3], eq).to_list()
            [1, 1, 2]
        """
        check_callable(equal, "equal")
        other = tuple(other)

        with evaluating("except_", self.stack):
            result = [item for item in self.elements
                      if not any(equal(item, o) for o in other)]

        return Query(result)

    # Ordering & reshaping ----------------------------------------------------

    def order_by(self, less_than):
        """Sort in ascending order.

        The sort is stable: elements that compare neither lower nor greater
        than each other keep their relative order.

        Args:
            less_than (Callable[[Any, Any], bool]): strict less-than
                comparison.
        """
        check_callable(less_than, "less_than")
        key = functools.cmp_to_key(_comparison(less_than))

        with evaluating("order_by", self.stack):
            return Query(sorted(self.elements, key=key))

    def order_by_descending(self, less_than):
        """Sort with the negation of `less_than`.

        For distinct values this is a descending order. Equal elements
        compare lower than each other under the negated comparison, so
        their relative order is not guaranteed to be preserved.
        """
        check_callable(less_than, "less_than")
        return self.order_by(lambda a, b: not less_than(a, b))

    def skip(self, n):
        """Drop the first `n` elements, counts are clamped to the length."""
        if not isint(n):
            raise TypeError("n must be an integer, not " + n.__class__.__name__)

        n = clip(n, 0, len(self.elements))
        if n == 0:
            return self

        return Query(self.elements[n:])

    def take(self, n):
        """Keep the first `n` elements, counts are clamped to the length."""
        if not isint(n):
            raise TypeError("n must be an integer, not " + n.__class__.__name__)

        n = clip(n, 0, len(self.elements))
        return Query(self.elements[:n])

    def reverse(self):
        """Return the elements in reverse order."""
        return Query(self.elements[::-1])

    # Aggregation -------------------------------------------------------------

    def sum(self, selector=identity):
        """Return the sum of `selector` over the elements, 0 if empty."""
        check_callable(selector, "selector")
        with evaluating("sum", self.stack):
            return sum(selector(item) for item in self.elements)

    def min(self, selector=identity, default=_missing):
        """Return the smallest value of `selector` over the elements.

        Args:
            selector (Callable[[Any], Any]): projection of the elements
                (default identity).
            default: value returned for an empty query.

        Notes:
            Without `default`, an empty query returns 0 which cannot be told
            apart from an actual minimum of 0, a warning is logged in that
            case.
        """
        return self._extremum(min, "min", selector, default)

    def max(self, selector=identity, default=_missing):
        """Return the largest value of `selector` over the elements.

        See :meth:`min` for the behavior on empty queries.
        """
        return self._extremum(max, "max", selector, default)

    def _extremum(self, reduction, name, selector, default):
        check_callable(selector, "selector")

        if len(self.elements) == 0:
            if default is _missing:
                logger.warning(
                    "%s() of an empty Query, returning 0 instead", name)
                return 0
            return default

        with evaluating(name, self.stack):
            return reduction(selector(item) for item in self.elements)

    def aggregate(self, seed, accumulator):
        """Fold elements from left to right starting from `seed`.

        Example:

            >>> query([1, 2, 3, 4]).aggregate(0, lambda acc, n: acc + n)
            10
        """
        check_callable(accumulator, "accumulator")

        result = seed
        with evaluating("aggregate", self.stack):
            for item in self.elements:
                result = accumulator(result, item)

        return result

    # Conversion --------------------------------------------------------------

    def to_list(self):
        """Return the elements as a new list."""
        return list(self.elements)

    def to_slice(self):
        """Alias for :meth:`to_list`."""
        return self.to_list()


def query(source):
    """Build a :class:`Query` over the elements of `source`.

    Args:
        source (Iterable): elements of the query, they are copied.

    Example:

        >>> q = query([5, 3, 8, 6, 2])
        >>> q.where(lambda n: n % 2 == 0 and n > 3).to_list()
        [8, 6]
        >>> q.sum()
        24
        >>> q.order_by_descending(lambda a, b: a < b).take(3).to_list()
        [8, 6, 5]
    """
    return Query(source)
