"""
Query Matcher - decide whether accounts, postings and transactions match a
query tree.

Each entity kind walks the same tree with its own rule for every leaf.
Leaves testing a field the entity doesn't have match vacuously.
"""

from typing import Callable, Optional

from ..models.journal_models import Posting, Transaction
from ..models.query_models import Query, QueryType
from ..utils.accounts import account_name_level
from ..utils.dates import span_contains_date
from ..utils.regex import regex_matches_ci

RegexMatcher = Callable[[str, str], bool]

# Leaves that aren't defined for a bare account name
ACCOUNT_VACUOUS_TYPES = (
    QueryType.ANY,
    QueryType.DESC,
    QueryType.DATE,
    QueryType.EDATE,
    QueryType.STATUS,
    QueryType.REAL,
    QueryType.EMPTY,
)


class QueryMatcher:
    """
    Evaluates query trees against accounts, postings and transactions.

    Dispatches on each node's type, recursing through Not, Or and And.
    Matching never mutates the query, so one matcher may be shared
    between threads.
    """

    def __init__(self, regex_matcher: Optional[RegexMatcher] = None):
        """Initialize the matcher.

        Args:
            regex_matcher: Function (pattern, text) -> bool used for Desc and
                Acct patterns. Defaults to case-insensitive regex search.
        """
        self.regex_matcher = regex_matcher or regex_matches_ci

    def matches_account(self, query: Query, account: str) -> bool:
        """Does the query match this account name?"""
        node_type = query.node_type

        if node_type == QueryType.NONE:
            return False
        elif node_type == QueryType.NOT:
            return not self.matches_account(query.query, account)
        elif node_type == QueryType.OR:
            return any(self.matches_account(q, account) for q in query.queries)
        elif node_type == QueryType.AND:
            return all(self.matches_account(q, account) for q in query.queries)
        elif node_type == QueryType.ACCT:
            return self.regex_matcher(query.pattern, account)
        elif node_type == QueryType.DEPTH:
            return account_name_level(account) <= query.limit
        elif node_type in ACCOUNT_VACUOUS_TYPES:
            return True
        raise TypeError(f"Not a query: {query!r}")

    def matches_posting(self, query: Query, posting: Posting) -> bool:
        """Does the query match this posting?"""
        node_type = query.node_type
        transaction = posting.transaction

        if node_type == QueryType.NOT:
            return not self.matches_posting(query.query, posting)
        elif node_type == QueryType.ANY:
            return True
        elif node_type == QueryType.NONE:
            return False
        elif node_type == QueryType.OR:
            return any(self.matches_posting(q, posting) for q in query.queries)
        elif node_type == QueryType.AND:
            return all(self.matches_posting(q, posting) for q in query.queries)
        elif node_type == QueryType.DESC:
            description = transaction.description if transaction else ""
            return self.regex_matcher(query.pattern, description)
        elif node_type == QueryType.ACCT:
            return self.regex_matcher(query.pattern, posting.account)
        elif node_type == QueryType.DATE:
            if transaction is None:
                return False
            return span_contains_date(query.span, transaction.date)
        elif node_type == QueryType.EDATE:
            effective_date = posting.effective_date_or_default
            if effective_date is None:
                return False
            return span_contains_date(query.span, effective_date)
        elif node_type == QueryType.STATUS:
            return query.value == posting.is_cleared
        elif node_type == QueryType.REAL:
            return query.value == posting.is_real
        elif node_type == QueryType.DEPTH:
            return self.matches_account(query, posting.account)
        elif node_type == QueryType.EMPTY:
            # Zero-amount postings are not filtered here
            return True
        raise TypeError(f"Not a query: {query!r}")

    def matches_transaction(self, query: Query, transaction: Transaction) -> bool:
        """Does the query match this transaction?"""
        node_type = query.node_type

        if node_type == QueryType.NOT:
            return not self.matches_transaction(query.query, transaction)
        elif node_type == QueryType.ANY:
            return True
        elif node_type == QueryType.NONE:
            return False
        elif node_type == QueryType.OR:
            return any(self.matches_transaction(q, transaction) for q in query.queries)
        elif node_type == QueryType.AND:
            return all(self.matches_transaction(q, transaction) for q in query.queries)
        elif node_type == QueryType.DESC:
            return self.regex_matcher(query.pattern, transaction.description)
        elif node_type == QueryType.ACCT:
            return any(self.matches_posting(query, p) for p in transaction.postings)
        elif node_type == QueryType.DATE:
            return span_contains_date(query.span, transaction.date)
        elif node_type == QueryType.EDATE:
            return span_contains_date(
                query.span, transaction.effective_date_or_default
            )
        elif node_type == QueryType.STATUS:
            return query.value == transaction.status
        elif node_type == QueryType.REAL:
            return query.value == transaction.has_real_postings
        elif node_type == QueryType.DEPTH:
            return any(self.matches_posting(query, p) for p in transaction.postings)
        elif node_type == QueryType.EMPTY:
            return True
        raise TypeError(f"Not a query: {query!r}")


_default_matcher = QueryMatcher()


def matches_account(query: Query, account: str) -> bool:
    """Does the query match this account name?"""
    return _default_matcher.matches_account(query, account)


def matches_posting(query: Query, posting: Posting) -> bool:
    """Does the query match this posting?"""
    return _default_matcher.matches_posting(query, posting)


def matches_transaction(query: Query, transaction: Transaction) -> bool:
    """Does the query match this transaction?"""
    return _default_matcher.matches_transaction(query, transaction)
