"""Unit tests for period expression parsing."""

from datetime import date

import pytest

from ledger_query.models.period_models import NO_INTERVAL, DateSpan, Interval, IntervalUnit
from ledger_query.utils.period_parser import PeriodExpressionError, parse_period_expr

# A Wednesday
REFERENCE_DATE = date(2012, 5, 16)


def span(start=None, end=None):
    return DateSpan(start=start, end=end)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", span()),
        ("2008", span(date(2008, 1, 1), date(2009, 1, 1))),
        ("2008/5", span(date(2008, 5, 1), date(2008, 6, 1))),
        ("2008-12", span(date(2008, 12, 1), date(2009, 1, 1))),
        ("2008/5/17", span(date(2008, 5, 17), date(2008, 5, 18))),
        ("2008.02.29", span(date(2008, 2, 29), date(2008, 3, 1))),
        ("5/17", span(date(2012, 5, 17), date(2012, 5, 18))),
        ("feb", span(date(2012, 2, 1), date(2012, 3, 1))),
        ("today", span(date(2012, 5, 16), date(2012, 5, 17))),
        ("yesterday", span(date(2012, 5, 15), date(2012, 5, 16))),
        ("tomorrow", span(date(2012, 5, 17), date(2012, 5, 18))),
        ("this week", span(date(2012, 5, 14), date(2012, 5, 21))),
        ("last month", span(date(2012, 4, 1), date(2012, 5, 1))),
        ("next quarter", span(date(2012, 7, 1), date(2012, 10, 1))),
        ("last year", span(date(2011, 1, 1), date(2012, 1, 1))),
        ("from 2012/5/17", span(date(2012, 5, 17))),
        ("since 2012", span(date(2012, 1, 1))),
        ("to 2012", span(end=date(2012, 1, 1))),
        ("until 2012/3", span(end=date(2012, 3, 1))),
        ("from 2009/1/1 to 2009/4/1", span(date(2009, 1, 1), date(2009, 4, 1))),
        ("2008 to 2010", span(date(2008, 1, 1), date(2010, 1, 1))),
        ("in 2008", span(date(2008, 1, 1), date(2009, 1, 1))),
        ("  FROM   2012  ", span(date(2012, 1, 1))),
    ],
)
def test_date_spans(text, expected):
    interval, result = parse_period_expr(REFERENCE_DATE, text)
    assert interval == NO_INTERVAL
    assert result == expected


@pytest.mark.parametrize(
    ("text", "interval", "expected"),
    [
        ("monthly", Interval(unit=IntervalUnit.MONTHS), span()),
        (
            "weekly in 2008",
            Interval(unit=IntervalUnit.WEEKS),
            span(date(2008, 1, 1), date(2009, 1, 1)),
        ),
        (
            "every 2 weeks from 2012/1/1",
            Interval(unit=IntervalUnit.WEEKS, count=2),
            span(date(2012, 1, 1)),
        ),
        (
            "every quarter to 2013",
            Interval(unit=IntervalUnit.QUARTERS),
            span(end=date(2013, 1, 1)),
        ),
        ("every 3 days", Interval(unit=IntervalUnit.DAYS, count=3), span()),
    ],
)
def test_intervals(text, interval, expected):
    assert parse_period_expr(REFERENCE_DATE, text) == (interval, expected)


@pytest.mark.parametrize(
    "text",
    ["bogus", "2008/13", "2008/2/30", "from", "from nowhere", "every 0 days", "12345"],
)
def test_invalid_expressions(text):
    with pytest.raises(PeriodExpressionError):
        parse_period_expr(REFERENCE_DATE, text)


@pytest.mark.parametrize(
    ("reference_date", "text"),
    [
        (REFERENCE_DATE, "9999/12/31"),
        (REFERENCE_DATE, "9999-12-31"),
        (REFERENCE_DATE, "from 9999/12/31"),
        (REFERENCE_DATE, "to 9999/12/31"),
        (REFERENCE_DATE, "0000"),
        (REFERENCE_DATE, "0000/1/1"),
        (date.max, "tomorrow"),
        (date.max, "today"),
        (date.max, "next week"),
        (date.max, "this year"),
        (date.min, "yesterday"),
        (date.min, "last month"),
    ],
)
def test_dates_beyond_the_calendar(reference_date, text):
    with pytest.raises(PeriodExpressionError):
        parse_period_expr(reference_date, text)


def test_error_is_value_error():
    with pytest.raises(ValueError):
        parse_period_expr(REFERENCE_DATE, "bogus")
