"""Boolean combination of predicates."""

import enum

from .utils import check_callable


class LogicalOperator(enum.Enum):
    AND = "and"
    OR = "or"


class PredicateGroup(object):
    """A list of predicates joined by a logical operator.

    The group is callable and evaluates its predicates in order, stopping
    as soon as the result is known: on the first false predicate for
    :attr:`LogicalOperator.AND`, on the first true one for
    :attr:`LogicalOperator.OR`.

    An empty group follows the boolean identities, it accepts every
    element with AND and rejects every element with OR.

    Args:
        predicates (Iterable[Callable[[Any], bool]]): the predicates.
        operator (Union[LogicalOperator, str]): how predicates are
            combined, `'and'` and `'or'` strings are accepted too
            (default AND).

    Example:

        >>> small_even = PredicateGroup(
        ...     [lambda n: n % 2 == 0, lambda n: n < 5], LogicalOperator.AND)
        >>> [n for n in range(10) if small_even(n)]
        [0, 2, 4]
    """
    def __init__(self, predicates=(), operator=LogicalOperator.AND):
        self.predicates = tuple(predicates)
        for predicate in self.predicates:
            check_callable(predicate, "predicate")

        if isinstance(operator, str):
            try:
                operator = LogicalOperator(operator.lower())
            except ValueError:
                raise ValueError(
                    "operator must be 'and' or 'or', not " + repr(operator))
        elif not isinstance(operator, LogicalOperator):
            raise ValueError(
                "operator must be a LogicalOperator, not "
                + operator.__class__.__name__)

        self.operator = operator

    @classmethod
    def all_of(cls, *predicates):
        """Group accepting elements that satisfy every predicate."""
        return cls(predicates, LogicalOperator.AND)

    @classmethod
    def any_of(cls, *predicates):
        """Group accepting elements that satisfy at least one predicate."""
        return cls(predicates, LogicalOperator.OR)

    def __len__(self):
        return len(self.predicates)

    def __call__(self, item):
        if self.operator is LogicalOperator.AND:
            for predicate in self.predicates:
                if not predicate(item):
                    return False
            return True

        else:
            for predicate in self.predicates:
                if predicate(item):
                    return True
            return False

    def __repr__(self):
        return "{}({} predicates, {})".format(
            self.__class__.__name__, len(self.predicates), self.operator.name)
