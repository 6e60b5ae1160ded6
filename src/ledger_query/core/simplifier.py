"""
Algebraic simplification of query trees.

Rewrites are applied until the tree stops changing. Each rewrite builds a
new tree; query nodes are immutable. Only And/Or nodes are descended into:
a Not node is left exactly as given.
"""

from typing import Callable, List

from ..models.query_models import And, AnyQuery, Date, NoneQuery, Or, Query, QueryType
from ..utils.dates import spans_intersect
from .accessors import query_is_date


def simplify_query(query: Query) -> Query:
    """Simplify a query to a fixed point of the rewrite rules."""
    while True:
        simplified = _simplify(query)
        if simplified == query:
            return query
        query = simplified


def _simplify(query: Query) -> Query:
    """One rewrite pass."""
    if query.node_type == QueryType.AND:
        return _simplify_and(list(query.queries))
    elif query.node_type == QueryType.OR:
        return _simplify_or(list(query.queries))
    elif query.node_type == QueryType.DATE and query.span.is_unbounded():
        return AnyQuery()
    return query


def _simplify_and(queries: List[Query]) -> Query:
    if not queries:
        return AnyQuery()
    if len(queries) == 1 or _all_same(queries):
        return _simplify(queries[0])
    if any(q == NoneQuery() for q in queries):
        return NoneQuery()
    if all(query_is_date(q) for q in queries):
        return Date(span=spans_intersect(q.span for q in queries))

    remaining = [q for q in queries if q != AnyQuery()]
    date_queries = [_simplify(q) for q in remaining if query_is_date(q)]
    other_queries = [_simplify(q) for q in remaining if not query_is_date(q)]
    return And(queries=date_queries + other_queries)


def _simplify_or(queries: List[Query]) -> Query:
    if not queries:
        return AnyQuery()
    if len(queries) == 1:
        return simplify_query(queries[0])
    if _all_same(queries):
        return _simplify(queries[0])
    if any(q == AnyQuery() for q in queries):
        return AnyQuery()
    return Or(queries=[_simplify(q) for q in queries if q != NoneQuery()])


def _all_same(queries: List[Query]) -> bool:
    return all(q == queries[0] for q in queries[1:])


def filter_query(predicate: Callable[[Query], bool], query: Query) -> Query:
    """Remove the terms of a query which don't satisfy the predicate.

    Only the direct children of a top-level And/Or are filtered. Any other
    query is kept if it satisfies the predicate, else replaced by AnyQuery.
    """
    if query.node_type == QueryType.AND:
        return And(queries=[q for q in query.queries if predicate(q)])
    elif query.node_type == QueryType.OR:
        return Or(queries=[q for q in query.queries if predicate(q)])
    return query if predicate(query) else AnyQuery()
