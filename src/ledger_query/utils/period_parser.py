"""
Period expression parser - convert text like "from 2012/5/17" or
"monthly in 2008" into a reporting interval and a date span.

Relative dates ("today", "last month", "5/17") are resolved against a
reference date supplied by the caller.
"""

import logging
import re
from datetime import date, timedelta
from typing import Tuple

from dateutil.relativedelta import relativedelta

from ..models.period_models import NO_INTERVAL, DateSpan, Interval, IntervalUnit

logger = logging.getLogger(__name__)


class PeriodExpressionError(ValueError):
    """Raised when a period expression cannot be parsed."""

    pass


PERIOD_UNITS = {
    "day": IntervalUnit.DAYS,
    "week": IntervalUnit.WEEKS,
    "month": IntervalUnit.MONTHS,
    "quarter": IntervalUnit.QUARTERS,
    "year": IntervalUnit.YEARS,
}

ADVERB_INTERVALS = {
    "daily": IntervalUnit.DAYS,
    "weekly": IntervalUnit.WEEKS,
    "monthly": IntervalUnit.MONTHS,
    "quarterly": IntervalUnit.QUARTERS,
    "yearly": IntervalUnit.YEARS,
}

MONTH_NAMES = {
    name: number
    for number, names in enumerate(
        [
            ("jan", "january"),
            ("feb", "february"),
            ("mar", "march"),
            ("apr", "april"),
            ("may",),
            ("jun", "june"),
            ("jul", "july"),
            ("aug", "august"),
            ("sep", "september"),
            ("oct", "october"),
            ("nov", "november"),
            ("dec", "december"),
        ],
        start=1,
    )
    for name in names
}

# Interval patterns (order matters!)
ADVERB_INTERVAL_RE = re.compile(r"^(daily|weekly|monthly|quarterly|yearly)\b\s*(.*)$")
EVERY_INTERVAL_RE = re.compile(
    r"^every\s+(?:(\d+)\s+)?(day|week|month|quarter|year)s?\b\s*(.*)$"
)

# Range patterns (order matters!)
FROM_RANGE_RE = re.compile(r"^(?:from|since)\s+(.+?)(?:\s+(?:to|until)\s+(.+))?$")
TO_RANGE_RE = re.compile(r"^(?:to|until)\s+(.+)$")
IN_RANGE_RE = re.compile(r"^in\s+(.+)$")
BETWEEN_RANGE_RE = re.compile(r"^(.+?)\s+(?:to|until)\s+(.+)$")

# Smart date patterns
YMD_RE = re.compile(r"^(\d{4})[/.-](\d{1,2})[/.-](\d{1,2})$")
YM_RE = re.compile(r"^(\d{4})[/.-](\d{1,2})$")
Y_RE = re.compile(r"^(\d{4})$")
MD_RE = re.compile(r"^(\d{1,2})[/.-](\d{1,2})$")
RELATIVE_RE = re.compile(r"^(this|last|next)\s+(day|week|month|quarter|year)$")


def parse_period_expr(reference_date: date, text: str) -> Tuple[Interval, DateSpan]:
    """Parse a period expression.

    Args:
        reference_date: Date that relative dates are resolved against
        text: Period expression, eg "2008", "from 2012/5/17", "weekly to 2013"

    Returns:
        Tuple of the reporting interval (NO_INTERVAL if none was given)
        and the date span

    Raises:
        PeriodExpressionError: If the text is not a valid period expression
    """
    expr = " ".join(text.lower().split())
    if not expr:
        return NO_INTERVAL, DateSpan()

    interval, rest = _parse_interval(expr)
    if interval != NO_INTERVAL and not rest:
        return interval, DateSpan()

    span = _parse_date_range(reference_date, rest)
    logger.debug(f"Parsed period expression {text!r} as {interval} {span}")
    return interval, span


def _parse_interval(expr: str) -> Tuple[Interval, str]:
    match = ADVERB_INTERVAL_RE.match(expr)
    if match:
        return Interval(unit=ADVERB_INTERVALS[match.group(1)]), match.group(2)

    match = EVERY_INTERVAL_RE.match(expr)
    if match:
        count = int(match.group(1)) if match.group(1) else 1
        if count < 1:
            raise PeriodExpressionError(f"Interval count must be positive: {expr!r}")
        unit = PERIOD_UNITS[match.group(2)]
        return Interval(unit=unit, count=count), match.group(3)

    return NO_INTERVAL, expr


def _parse_date_range(reference_date: date, expr: str) -> DateSpan:
    match = FROM_RANGE_RE.match(expr)
    if match:
        start = _smart_date_span(reference_date, match.group(1)).start
        end = None
        if match.group(2):
            end = _smart_date_span(reference_date, match.group(2)).start
        return DateSpan(start=start, end=end)

    match = TO_RANGE_RE.match(expr)
    if match:
        return DateSpan(end=_smart_date_span(reference_date, match.group(1)).start)

    match = IN_RANGE_RE.match(expr)
    if match:
        return _smart_date_span(reference_date, match.group(1))

    match = BETWEEN_RANGE_RE.match(expr)
    if match:
        return DateSpan(
            start=_smart_date_span(reference_date, match.group(1)).start,
            end=_smart_date_span(reference_date, match.group(2)).start,
        )

    return _smart_date_span(reference_date, expr)


def _smart_date_span(reference_date: date, text: str) -> DateSpan:
    """The whole period denoted by a single smart date, eg all of 2008."""
    try:
        return _resolve_smart_date(reference_date, text.strip())
    except PeriodExpressionError:
        raise
    except (ValueError, OverflowError) as e:
        # Out-of-range fields, eg month 13, or arithmetic past the calendar's ends
        raise PeriodExpressionError(f"Invalid date {text!r}: {e}") from e


def _resolve_smart_date(reference_date: date, text: str) -> DateSpan:
    match = YMD_RE.match(text)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _period_span(date(year, month, day), IntervalUnit.DAYS)

    match = YM_RE.match(text)
    if match:
        year, month = (int(g) for g in match.groups())
        return _period_span(date(year, month, 1), IntervalUnit.MONTHS)

    match = Y_RE.match(text)
    if match:
        return _period_span(date(int(match.group(1)), 1, 1), IntervalUnit.YEARS)

    match = MD_RE.match(text)
    if match:
        month, day = (int(g) for g in match.groups())
        return _period_span(date(reference_date.year, month, day), IntervalUnit.DAYS)

    if text in MONTH_NAMES:
        start = date(reference_date.year, MONTH_NAMES[text], 1)
        return _period_span(start, IntervalUnit.MONTHS)

    if text == "today":
        return _period_span(reference_date, IntervalUnit.DAYS)
    if text == "yesterday":
        return _period_span(reference_date - timedelta(days=1), IntervalUnit.DAYS)
    if text == "tomorrow":
        return _period_span(reference_date + timedelta(days=1), IntervalUnit.DAYS)

    match = RELATIVE_RE.match(text)
    if match:
        unit = PERIOD_UNITS[match.group(2)]
        span = _period_span(reference_date, unit)
        offset = {"this": 0, "last": -1, "next": 1}[match.group(1)]
        return _period_span(span.start + _unit_delta(unit, offset), unit)

    raise PeriodExpressionError(f"Unrecognised date {text!r}")


def _period_span(day: date, unit: IntervalUnit) -> DateSpan:
    """The span of the calendar period of this unit containing the day."""
    start = _period_start(day, unit)
    return DateSpan(start=start, end=start + _unit_delta(unit, 1))


def _period_start(day: date, unit: IntervalUnit) -> date:
    if unit == IntervalUnit.WEEKS:
        return day - timedelta(days=day.weekday())
    if unit == IntervalUnit.MONTHS:
        return day.replace(day=1)
    if unit == IntervalUnit.QUARTERS:
        return date(day.year, 3 * ((day.month - 1) // 3) + 1, 1)
    if unit == IntervalUnit.YEARS:
        return date(day.year, 1, 1)
    return day


def _unit_delta(unit: IntervalUnit, n: int) -> relativedelta:
    if unit == IntervalUnit.WEEKS:
        return relativedelta(weeks=n)
    if unit == IntervalUnit.MONTHS:
        return relativedelta(months=n)
    if unit == IntervalUnit.QUARTERS:
        return relativedelta(months=3 * n)
    if unit == IntervalUnit.YEARS:
        return relativedelta(years=n)
    return relativedelta(days=n)

