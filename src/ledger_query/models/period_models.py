"""
Pydantic models for date spans and reporting intervals.
Separated from period parsing logic for better organization.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class DateSpan(BaseModel):
    """A range of calendar dates.

    Either bound may be absent, meaning the span is unbounded on that side.
    The start is inclusive and the end is exclusive.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {"start": "2008-01-01", "end": "2009-01-01"},
                {"start": "2012-05-17", "end": None},
                {"start": None, "end": None},
            ]
        },
    )

    def is_unbounded(self) -> bool:
        """True if neither bound is set."""
        return self.start is None and self.end is None

    def __str__(self) -> str:
        start = self.start.isoformat() if self.start else ""
        end = self.end.isoformat() if self.end else ""
        return f"{start}..{end}"


class IntervalUnit(str, Enum):
    """Calendar units a report interval can step by."""

    NONE = "none"
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    QUARTERS = "quarters"
    YEARS = "years"


class Interval(BaseModel):
    """The recurrence part of a period expression, eg "every 2 weeks"."""

    unit: IntervalUnit = IntervalUnit.NONE
    count: int = 1

    model_config = ConfigDict(frozen=True)


NO_INTERVAL = Interval()


__all__ = ["DateSpan", "IntervalUnit", "Interval", "NO_INTERVAL"]
