"""
Query tree schema for ledger queries.

A query is a closed set of immutable node types: the boolean connectives
(AnyQuery, NoneQuery, Not, Or, And) and the predicate leaves, each testing
one field of an account, posting or transaction.
"""

from enum import Enum
from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .period_models import DateSpan


class QueryType(str, Enum):
    """Query node types."""

    # Connectives
    ANY = "any"  # always match
    NONE = "none"  # never match
    NOT = "not"
    OR = "or"
    AND = "and"

    # Predicate leaves
    DESC = "desc"  # description regexp
    ACCT = "acct"  # account name regexp
    DATE = "date"  # actual date in span
    EDATE = "edate"  # effective date in span
    STATUS = "status"  # cleared status
    REAL = "real"  # non-virtual
    EMPTY = "empty"  # show zero-amount items
    DEPTH = "depth"  # account depth limit


class QueryNode(BaseModel):
    """Base class for all query nodes."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class AnyQuery(QueryNode):
    node_type: Literal[QueryType.ANY] = QueryType.ANY


class NoneQuery(QueryNode):
    node_type: Literal[QueryType.NONE] = QueryType.NONE


class Not(QueryNode):
    node_type: Literal[QueryType.NOT] = QueryType.NOT
    query: "Query"


class Or(QueryNode):
    """Matches if any of the child queries match."""

    node_type: Literal[QueryType.OR] = QueryType.OR
    queries: Tuple["Query", ...] = ()


class And(QueryNode):
    """Matches if all of the child queries match."""

    node_type: Literal[QueryType.AND] = QueryType.AND
    queries: Tuple["Query", ...] = ()


class Desc(QueryNode):
    node_type: Literal[QueryType.DESC] = QueryType.DESC
    pattern: str


class Acct(QueryNode):
    node_type: Literal[QueryType.ACCT] = QueryType.ACCT
    pattern: str


class Date(QueryNode):
    node_type: Literal[QueryType.DATE] = QueryType.DATE
    span: DateSpan


class EDate(QueryNode):
    node_type: Literal[QueryType.EDATE] = QueryType.EDATE
    span: DateSpan


class Status(QueryNode):
    node_type: Literal[QueryType.STATUS] = QueryType.STATUS
    value: bool


class Real(QueryNode):
    node_type: Literal[QueryType.REAL] = QueryType.REAL
    value: bool


class Empty(QueryNode):
    """Show zero-amount postings/accounts which are usually hidden.

    More of a report option than a match criterion: matchers accept it
    unconditionally and reports read it with ``query_empty``.
    """

    node_type: Literal[QueryType.EMPTY] = QueryType.EMPTY
    value: bool


class Depth(QueryNode):
    node_type: Literal[QueryType.DEPTH] = QueryType.DEPTH
    limit: int


Query = Annotated[
    Union[
        AnyQuery,
        NoneQuery,
        Not,
        Or,
        And,
        Desc,
        Acct,
        Date,
        EDate,
        Status,
        Real,
        Empty,
        Depth,
    ],
    Field(discriminator="node_type"),
]


class OptionType(str, Enum):
    """Query option types."""

    IN_ACCT_ONLY = "inacctonly"  # account register focused on this account
    IN_ACCT = "inacct"  # as above, including subaccounts


class QueryOptNode(BaseModel):
    """Base class for query options, which change report behaviour."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    account: str


class InAcctOnly(QueryOptNode):
    option_type: Literal[OptionType.IN_ACCT_ONLY] = OptionType.IN_ACCT_ONLY


class InAcct(QueryOptNode):
    option_type: Literal[OptionType.IN_ACCT] = OptionType.IN_ACCT


QueryOpt = Annotated[
    Union[InAcctOnly, InAcct], Field(discriminator="option_type")
]


# Forward reference resolution
Not.model_rebuild()
Or.model_rebuild()
And.model_rebuild()


__all__ = [
    "QueryType",
    "QueryNode",
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
    "Query",
    "OptionType",
    "QueryOptNode",
    "InAcctOnly",
    "InAcct",
    "QueryOpt",
]
