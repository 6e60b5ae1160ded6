"""Tests for query accessors and query option helpers."""

from datetime import date

import pytest

from ledger_query.core.accessors import (
    NO_DEPTH_LIMIT,
    earliest_maybe_date,
    first_focus_option,
    in_account,
    in_account_query,
    latest_maybe_date,
    query_date_span,
    query_date_spans,
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
from ledger_query.core.matcher import matches_account
from ledger_query.models.period_models import DateSpan
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
    Status,
)

D2010 = date(2010, 1, 1)
D2011 = date(2011, 1, 1)
D2012 = date(2012, 1, 1)


def from_date(start):
    return Date(span=DateSpan(start=start))


class TestShapePredicates:
    @pytest.mark.parametrize(
        ("query", "expected"),
        [
            (AnyQuery(), True),
            (And(), True),
            (Not(query=Or()), True),
            (NoneQuery(), False),
            (Or(), False),
            (Not(query=And()), False),
            (And(queries=[AnyQuery()]), False),
        ],
    )
    def test_query_is_null(self, query, expected):
        assert query_is_null(query) is expected

    def test_leaf_shapes(self):
        assert query_is_depth(Depth(limit=1))
        assert query_is_date(Date(span=DateSpan()))
        assert query_is_desc(Desc(pattern="x"))
        assert query_is_acct(Acct(pattern="x"))
        assert not query_is_date(EDate(span=DateSpan()))
        assert not query_is_acct(And(queries=[Acct(pattern="x")]))
        assert not query_is_desc(Not(query=Desc(pattern="x")))


class TestStartDate:
    def test_start_date_only(self):
        assert query_is_start_date_only(False, from_date(D2010))
        assert query_is_start_date_only(
            False, And(queries=[from_date(D2010), Or(queries=[from_date(D2011)])])
        )

    def test_not_start_date_only(self):
        assert not query_is_start_date_only(False, AnyQuery())
        assert not query_is_start_date_only(False, NoneQuery())
        assert not query_is_start_date_only(False, Date(span=DateSpan(end=D2010)))
        assert not query_is_start_date_only(
            False, And(queries=[from_date(D2010), Acct(pattern="a")])
        )
        assert not query_is_start_date_only(False, Not(query=from_date(D2010)))

    def test_effective_start_date_only(self):
        edate = EDate(span=DateSpan(start=D2010))
        assert query_is_start_date_only(True, edate)
        assert not query_is_start_date_only(False, edate)
        assert not query_is_start_date_only(True, from_date(D2010))

    def test_leaf_start_date(self):
        assert query_start_date(False, from_date(D2010)) == D2010
        assert query_start_date(True, from_date(D2010)) is None
        assert query_start_date(True, EDate(span=DateSpan(start=D2011))) == D2011
        assert query_start_date(False, Acct(pattern="a")) is None

    def test_or_takes_earliest(self):
        query = Or(queries=[from_date(D2011), from_date(D2010)])
        assert query_start_date(False, query) == D2010

    def test_or_with_undated_branch_has_no_start(self):
        query = Or(queries=[from_date(D2011), Acct(pattern="a")])
        assert query_start_date(False, query) is None

    def test_and_takes_latest(self):
        query = And(queries=[from_date(D2010), Acct(pattern="a"), from_date(D2012)])
        assert query_start_date(False, query) == D2012

    def test_negated_date_ignored(self):
        assert query_start_date(False, Not(query=from_date(D2010))) is None

    def test_maybe_date_ordering(self):
        assert earliest_maybe_date([]) is None
        assert earliest_maybe_date([D2011, None]) is None
        assert earliest_maybe_date([D2011, D2010]) == D2010
        assert latest_maybe_date([]) is None
        assert latest_maybe_date([None, D2010]) == D2010
        assert latest_maybe_date([None, None]) is None


class TestDateSpan:
    def test_no_dates_is_unbounded(self):
        assert query_date_span(False, Acct(pattern="a")) == DateSpan()

    def test_union_of_spans(self):
        query = Or(
            queries=[
                Date(span=DateSpan(start=D2010, end=D2011)),
                And(queries=[Date(span=DateSpan(start=D2011, end=D2012))]),
            ]
        )
        assert query_date_span(False, query) == DateSpan(start=D2010, end=D2012)

    def test_effective_spans_selected(self):
        query = And(
            queries=[
                Date(span=DateSpan(start=D2010, end=D2011)),
                EDate(span=DateSpan(start=D2011, end=D2012)),
            ]
        )
        assert query_date_spans(True, query) == [DateSpan(start=D2011, end=D2012)]
        assert query_date_span(True, query) == DateSpan(start=D2011, end=D2012)

    def test_negated_span_ignored(self):
        query = And(
            queries=[
                Date(span=DateSpan(start=D2010, end=D2011)),
                Not(query=Date(span=DateSpan(start=D2011, end=D2012))),
            ]
        )
        assert query_date_span(False, query) == DateSpan(start=D2010, end=D2011)


class TestDepthAndEmpty:
    def test_no_depth_limit(self):
        assert query_depth(Acct(pattern="a")) == NO_DEPTH_LIMIT

    def test_minimum_depth(self):
        query = And(queries=[Depth(limit=3), Or(queries=[Depth(limit=1)])])
        assert query_depth(query) == 1

    def test_negated_depth_ignored(self):
        assert query_depth(Not(query=Depth(limit=1))) == NO_DEPTH_LIMIT

    def test_empty_defaults_false(self):
        assert query_empty(Status(value=True)) is False

    def test_first_empty_wins(self):
        query = And(queries=[Empty(value=True), Or(queries=[Empty(value=False)])])
        assert query_empty(query) is True
        assert query_empty(Not(query=Empty(value=True))) is False


class TestQueryOptions:
    def test_no_options(self):
        assert first_focus_option([]) is None
        assert in_account([]) is None
        assert in_account_query([]) is None

    def test_only_first_option_counts(self):
        options = [InAcctOnly(account="a"), InAcct(account="b")]
        assert first_focus_option(options) == InAcctOnly(account="a")
        assert in_account(options) == ("a", False)

    def test_in_account_with_subaccounts(self):
        assert in_account([InAcct(account="assets:cash")]) == ("assets:cash", True)

    def test_in_account_query_includes_subaccounts(self):
        query = in_account_query([InAcct(account="assets:cash")])
        assert matches_account(query, "assets:cash")
        assert matches_account(query, "assets:cash:wallet")
        assert not matches_account(query, "assets:cashbox")
        assert not matches_account(query, "old:assets:cash")

    def test_in_account_only_query(self):
        query = in_account_query([InAcctOnly(account="assets:cash")])
        assert matches_account(query, "assets:cash")
        assert not matches_account(query, "assets:cash:wallet")
