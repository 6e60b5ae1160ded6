"""
Query accessors - what report parameters does a query imply?

These read a query tree without an entity to match against. None of them
look inside a Not: a negated date, depth or empty term does not
contribute.
"""

from datetime import date
from typing import List, Optional, Sequence, Tuple

from ..models.period_models import DateSpan
from ..models.query_models import (
    Acct,
    InAcctOnly,
    Query,
    QueryOpt,
    QueryType,
)
from ..utils.accounts import (
    account_name_to_account_only_regex,
    account_name_to_account_regex,
)
from ..utils.dates import spans_union

# Depth reported when a query has no depth limit
NO_DEPTH_LIMIT = 99999


def query_is_null(query: Query) -> bool:
    """Does this query match everything?"""
    if query.node_type == QueryType.ANY:
        return True
    if query.node_type == QueryType.AND:
        return not query.queries
    if query.node_type == QueryType.NOT:
        return query.query.node_type == QueryType.OR and not query.query.queries
    return False


def query_is_depth(query: Query) -> bool:
    return query.node_type == QueryType.DEPTH


def query_is_date(query: Query) -> bool:
    return query.node_type == QueryType.DATE


def query_is_desc(query: Query) -> bool:
    return query.node_type == QueryType.DESC


def query_is_acct(query: Query) -> bool:
    return query.node_type == QueryType.ACCT


def _date_leaf_type(effective: bool) -> QueryType:
    return QueryType.EDATE if effective else QueryType.DATE


def query_is_start_date_only(effective: bool, query: Query) -> bool:
    """Does this query specify a start date and nothing else?

    Such a query would only exclude postings prior to the date. When
    ``effective`` is true, look for a starting effective date instead.
    And and Or are treated alike: all of their terms must qualify.
    """
    if query.node_type in (QueryType.AND, QueryType.OR):
        return all(query_is_start_date_only(effective, q) for q in query.queries)
    if query.node_type == _date_leaf_type(effective):
        return query.span.start is not None
    return False


def query_start_date(effective: bool, query: Query) -> Optional[date]:
    """What start date (or effective start date) does this query specify?

    For Or, the earliest of the terms' start dates; for And, the latest.
    A term with no start date counts as earliest.
    """
    if query.node_type == QueryType.OR:
        return earliest_maybe_date(
            [query_start_date(effective, q) for q in query.queries]
        )
    if query.node_type == QueryType.AND:
        return latest_maybe_date(
            [query_start_date(effective, q) for q in query.queries]
        )
    if query.node_type == _date_leaf_type(effective):
        return query.span.start
    return None


def earliest_maybe_date(dates: Sequence[Optional[date]]) -> Optional[date]:
    """The earliest of these dates, where None is earliest."""
    if not dates or any(d is None for d in dates):
        return None
    return min(dates)


def latest_maybe_date(dates: Sequence[Optional[date]]) -> Optional[date]:
    """The latest of these dates, where None is earliest."""
    defined = [d for d in dates if d is not None]
    return max(defined) if defined else None


def query_date_spans(effective: bool, query: Query) -> List[DateSpan]:
    """All date (or effective date) spans specified in this query."""
    if query.node_type in (QueryType.AND, QueryType.OR):
        return [
            span for q in query.queries for span in query_date_spans(effective, q)
        ]
    if query.node_type == _date_leaf_type(effective):
        return [query.span]
    return []


def query_date_span(effective: bool, query: Query) -> DateSpan:
    """The widest date span covering every date span in this query."""
    return spans_union(query_date_spans(effective, query))


def _collect(query: Query, node_type: QueryType, attr: str) -> list:
    if query.node_type in (QueryType.AND, QueryType.OR):
        return [v for q in query.queries for v in _collect(q, node_type, attr)]
    if query.node_type == node_type:
        return [getattr(query, attr)]
    return []


def query_depth(query: Query) -> int:
    """The depth limit this query specifies, or NO_DEPTH_LIMIT if none."""
    depths = _collect(query, QueryType.DEPTH, "limit")
    return min(depths) if depths else NO_DEPTH_LIMIT


def query_empty(query: Query) -> bool:
    """The show-empty flag specified by this query, defaulting to false."""
    flags = _collect(query, QueryType.EMPTY, "value")
    return flags[0] if flags else False


# Query options. Only the first option is looked at.


def first_focus_option(options: Sequence[QueryOpt]) -> Optional[QueryOpt]:
    """The query option which decides the focused account, if any."""
    return options[0] if options else None


def in_account(options: Sequence[QueryOpt]) -> Optional[Tuple[str, bool]]:
    """The account we are focused on, if any, and whether its subaccounts
    are included."""
    option = first_focus_option(options)
    if option is None:
        return None
    return option.account, not isinstance(option, InAcctOnly)


def in_account_query(options: Sequence[QueryOpt]) -> Optional[Query]:
    """A query matching the account(s) we are focused on, if any."""
    option = first_focus_option(options)
    if option is None:
        return None
    if isinstance(option, InAcctOnly):
        return Acct(pattern=account_name_to_account_only_regex(option.account))
    return Acct(pattern=account_name_to_account_regex(option.account))
