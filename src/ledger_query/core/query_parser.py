"""
Query Parser - convert query expressions to a query tree and query options.

A query expression is zero or more space-separated terms. A term is either

1. a search pattern, matching one field, eg:

     acct:REGEXP     - match the account name with a regular expression
     desc:REGEXP     - match the transaction description
     date:PERIODEXP  - match the date with a period expression

   The prefix indicates the field to match; without a prefix the account
   name is assumed. Any pattern may be negated with a "not:" prefix.

2. a query option, which changes reporting behaviour:

     inacct:FULLACCTNAME       - focus on this account and its subaccounts
     inacctonly:FULLACCTNAME   - focus on exactly this account

Multiple terms are combined as follows: account patterns are OR'd
together, description patterns are OR'd together, then all of these are
AND'd with the remaining terms.

Malformed terms never raise; they degrade to a conservative query.
"""

import logging
import re
from datetime import date
from typing import Callable, List, Optional, Tuple, Union

from ..models.period_models import DateSpan, Interval
from ..models.query_models import (
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
    QueryNode,
    QueryOpt,
    QueryOptNode,
    Real,
    Status,
)
from ..utils.period_parser import PeriodExpressionError, parse_period_expr
from .accessors import query_is_acct, query_is_desc
from .simplifier import simplify_query
from .tokenizer import NEGATION_PREFIX, QueryLexer

logger = logging.getLogger(__name__)

PeriodParser = Callable[[date, str], Tuple[Interval, DateSpan]]

Term = Union[Query, QueryOpt]

DEFAULT_PREFIX = "acct:"

TRUE_STRINGS = ("1", "t", "true")

INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_status(text: str) -> bool:
    """Parse the value of a status: term. "*" is another way to spell true,
    as in the journal format."""
    return text in TRUE_STRINGS + ("*",)


def parse_bool(text: str) -> bool:
    """Parse a boolean term value. True is spelled "1", "t" or "true"."""
    return text in TRUE_STRINGS


def parse_int(text: str, default: int = 0) -> int:
    """Parse a plain decimal integer, or return the default.

    Signs other than a leading "-", whitespace, underscores and non-ASCII
    digits are not accepted.
    """
    if INTEGER_RE.fullmatch(text) is None:
        return default
    return int(text)


class QueryParser:
    """Parses query expressions relative to a reference date.

    The reference date resolves relative period expressions in date: and
    edate: terms, eg "from last month". It is usually today, or a report's
    end date.
    """

    def __init__(
        self,
        reference_date: date,
        period_parser: Optional[PeriodParser] = None,
        lexer: Optional[QueryLexer] = None,
    ):
        self.reference_date = reference_date
        self.period_parser = period_parser or parse_period_expr
        self.lexer = lexer or QueryLexer()

        # Term prefixes, longest first where one is a prefix of another
        self.term_handlers = [
            ("inacctonly:", lambda s: InAcctOnly(account=s)),
            ("inacct:", lambda s: InAcct(account=s)),
            ("desc:", lambda s: Desc(pattern=s)),
            ("acct:", lambda s: Acct(pattern=s)),
            ("date:", lambda s: self._parse_date_term(s, Date)),
            ("edate:", lambda s: self._parse_date_term(s, EDate)),
            ("status:", lambda s: Status(value=parse_status(s))),
            ("real:", lambda s: Real(value=parse_bool(s))),
            ("empty:", lambda s: Empty(value=parse_bool(s))),
            ("depth:", lambda s: Depth(limit=parse_int(s))),
        ]

    def parse(self, text: str) -> Tuple[Query, List[QueryOpt]]:
        """Parse a query expression into a simplified query and its options."""
        terms = [self.parse_term(token.value) for token in self.lexer.tokenize(text)]

        options = [term for term in terms if isinstance(term, QueryOptNode)]
        patterns = [term for term in terms if isinstance(term, QueryNode)]

        desc_patterns = [q for q in patterns if query_is_desc(q)]
        acct_patterns = [q for q in patterns if query_is_acct(q)]
        other_patterns = [
            q for q in patterns if not (query_is_desc(q) or query_is_acct(q))
        ]

        query = simplify_query(
            And(
                queries=[Or(queries=acct_patterns), Or(queries=desc_patterns)]
                + other_patterns
            )
        )
        logger.debug(f"Parsed query {text!r}: {query!r}, options {options!r}")
        return query, options

    def parse_term(self, term: str) -> Term:
        """Parse a single term as either a query or a query option."""
        negations = 0
        while term.startswith(NEGATION_PREFIX):
            term = term[len(NEGATION_PREFIX) :]
            negations += 1

        parsed = self._parse_positive_term(term)
        if negations and isinstance(parsed, QueryOptNode):
            # The innermost not: turns the option into Any
            logger.debug(f"Ignoring negated query option {term!r}")
            parsed = AnyQuery()
            negations -= 1
        for _ in range(negations):
            parsed = Not(query=parsed)
        return parsed

    def _parse_positive_term(self, term: str) -> Term:
        for prefix, handler in self.term_handlers:
            if term.startswith(prefix):
                return handler(term[len(prefix) :])

        if term == "":
            return AnyQuery()

        return self._parse_positive_term(DEFAULT_PREFIX + term)

    def _parse_date_term(self, text: str, query_class) -> Query:
        try:
            _, span = self.period_parser(self.reference_date, text)
        except PeriodExpressionError as e:
            logger.warning(f"Ignoring unparseable period expression {text!r}: {e}")
            return NoneQuery()
        return query_class(span=span)


def parse_query(reference_date: date, text: str) -> Tuple[Query, List[QueryOpt]]:
    """Parse a query expression into a simplified query and its options."""
    return QueryParser(reference_date).parse(text)


def parse_query_term(reference_date: date, term: str) -> Term:
    """Parse a single query term as either a query or a query option."""
    return QueryParser(reference_date).parse_term(term)
