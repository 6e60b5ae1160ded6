"""Ledger Query Library.

This library parses ledger query expressions such as
``acct:expenses desc:coffee date:2012`` into a simplified boolean query
tree, and matches that tree against accounts, postings and transactions.
"""

from ledger_query.core.tokenizer import QueryLexer, tokenize
from ledger_query.core.query_parser import QueryParser, parse_query, parse_query_term
from ledger_query.core.simplifier import simplify_query, filter_query
from ledger_query.core.matcher import (
    QueryMatcher,
    matches_account,
    matches_posting,
    matches_transaction,
)
from ledger_query.core.accessors import (
    NO_DEPTH_LIMIT,
    first_focus_option,
    in_account,
    in_account_query,
    query_date_span,
    query_depth,
    query_empty,
    query_is_acct,
    query_is_date,
    query_is_depth,
    query_is_desc,
    query_is_null,
    query_is_start_date_only,
    query_start_date,
)

# Query and option types
from ledger_query.models.query_models import (
    Acct,
    And,
    AnyQuery,
    Date,
    Depth,
    Desc,
    EDate,
    Empty,
    InAcct,
    InAcctOnly,
    NoneQuery,
    Not,
    Or,
    Query,
    QueryOpt,
    QueryType,
    Real,
    Status,
)
from ledger_query.models.period_models import DateSpan
from ledger_query.models.journal_models import Posting, PostingType, Transaction
from ledger_query.utils.period_parser import PeriodExpressionError, parse_period_expr

# Version
__version__ = "0.1.0"

# Public API
__all__ = [
    # Parsing
    "QueryLexer",
    "tokenize",
    "QueryParser",
    "parse_query",
    "parse_query_term",
    "parse_period_expr",
    "PeriodExpressionError",
    # Simplification
    "simplify_query",
    "filter_query",
    # Accessors
    "NO_DEPTH_LIMIT",
    "first_focus_option",
    "in_account",
    "in_account_query",
    "query_date_span",
    "query_depth",
    "query_empty",
    "query_is_acct",
    "query_is_date",
    "query_is_depth",
    "query_is_desc",
    "query_is_null",
    "query_is_start_date_only",
    "query_start_date",
    # Matching
    "QueryMatcher",
    "matches_account",
    "matches_posting",
    "matches_transaction",
    # Types
    "Query",
    "QueryOpt",
    "QueryType",
    "AnyQuery",
    "NoneQuery",
    "Not",
    "Or",
    "And",
    "Desc",
    "Acct",
    "Date",
    "EDate",
    "Status",
    "Real",
    "Empty",
    "Depth",
    "InAcct",
    "InAcctOnly",
    "DateSpan",
    "Posting",
    "PostingType",
    "Transaction",
    # Version
    "__version__",
]
