"""Date span algebra: containment, intersection and union."""

from datetime import date
from typing import Iterable, List, Optional

from ..models.period_models import DateSpan


def span_contains_date(span: DateSpan, day: date) -> bool:
    """Does the span include this date? The end bound is exclusive."""
    if span.start is not None and day < span.start:
        return False
    if span.end is not None and day >= span.end:
        return False
    return True


def span_intersect(a: DateSpan, b: DateSpan) -> DateSpan:
    """The overlap of two spans: the later start and the earlier end.

    Disjoint spans give an inverted span, which contains no dates.
    """
    return DateSpan(
        start=_latest([a.start, b.start]), end=_earliest([a.end, b.end])
    )


def spans_intersect(spans: Iterable[DateSpan]) -> DateSpan:
    """Intersect all spans; no spans gives the unbounded span."""
    result = DateSpan()
    for span in spans:
        result = span_intersect(result, span)
    return result


def span_union(a: DateSpan, b: DateSpan) -> DateSpan:
    """The smallest span covering both spans. An open bound stays open."""
    start = None if a.start is None or b.start is None else min(a.start, b.start)
    end = None if a.end is None or b.end is None else max(a.end, b.end)
    return DateSpan(start=start, end=end)


def spans_union(spans: Iterable[DateSpan]) -> DateSpan:
    """Union of all spans; no spans gives the unbounded span."""
    spans = list(spans)
    if not spans:
        return DateSpan()
    result = spans[0]
    for span in spans[1:]:
        result = span_union(result, span)
    return result


def _latest(dates: List[Optional[date]]) -> Optional[date]:
    defined = [d for d in dates if d is not None]
    return max(defined) if defined else None


def _earliest(dates: List[Optional[date]]) -> Optional[date]:
    defined = [d for d in dates if d is not None]
    return min(defined) if defined else None
