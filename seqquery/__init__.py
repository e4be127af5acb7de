"""
A python library to query in-memory sequences.

The seqquery package wraps ordered collections (lists, tuples, arrays,
any iterable) into a :class:`Query` object offering chainable operations:
filtering, projection, sorting, aggregation, set combinations,
pagination, grouping and conversion.

Every operation is evaluated eagerly and returns either a new query or a
plain value, the source collection and previous queries are never
modified.
Functions whose element type changes (:func:`select`) or which produce
dictionaries (:func:`group_by`, :func:`to_map`) are exposed as free
functions taking the query as their first argument.
"""

from . import instrument
from .errors import EvaluationError, seterr
from .mapping import group_by, select, to_map
from .predicates import LogicalOperator, PredicateGroup
from .query import Query, query

__all__ = [
    "query",
    "Query",
    "EvaluationError",
    "seterr",
    "LogicalOperator",
    "PredicateGroup",
    "select",
    "group_by",
    "to_map",
]
