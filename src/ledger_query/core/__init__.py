from .tokenizer import QueryLexer, tokenize
from .query_parser import QueryParser, parse_query, parse_query_term
from .simplifier import simplify_query, filter_query
from .matcher import QueryMatcher, matches_account, matches_posting, matches_transaction

__all__ = [
    "QueryLexer",
    "tokenize",
    "QueryParser",
    "parse_query",
    "parse_query_term",
    "simplify_query",
    "filter_query",
    "QueryMatcher",
    "matches_account",
    "matches_posting",
    "matches_transaction",
]
