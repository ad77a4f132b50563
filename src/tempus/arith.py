"""
tempus.arith
------------
Month- and year-wise arithmetic on FieldDate.

The target month is found on the linear month index 12*year + (month - 1),
so carries into and borrows from the year need no special cases. What
happens to a day that does not exist in the target month is chosen by the
``overflow`` policy, and is the same for addition and subtraction:

  "roll"   (default) the excess days spill into the following month:
           2001-01-31 + 1 month -> 2001-03-03
  "clamp"  the day is clamped to the target month's last day:
           2001-01-31 + 1 month -> 2001-02-28
  "strict" InvalidDateError
"""

from __future__ import annotations

import logging
from typing import Literal

from .core.errors import DateRangeError, InvalidDateError
from .core.period import Months, Years
from .core.rules import last_day_of_month
from .core.types import FieldDate

log = logging.getLogger(__name__)

Overflow = Literal["roll", "clamp", "strict"]
OVERFLOW_POLICIES = ("roll", "clamp", "strict")


def _shift(date: FieldDate, delta: int, overflow: str) -> FieldDate:
    if overflow not in OVERFLOW_POLICIES:
        raise ValueError(f"overflow must be one of {OVERFLOW_POLICIES}, got {overflow!r}")

    index = 12 * date.year + (date.month.value - 1) + delta
    if index < 0:
        raise DateRangeError(f"{date} shifted by {delta} months is before year 0")
    year, m0 = divmod(index, 12)
    month = m0 + 1
    day = date.day.value

    eom = last_day_of_month(year, month).value
    if day > eom:
        if overflow == "strict":
            raise InvalidDateError(f"{year}-{month} has {eom} days, got {day}")
        if overflow == "clamp":
            log.debug("clamping %s-%s-%s to %s-%s-%s", year, month, day, year, month, eom)
            day = eom
        else:
            log.debug("rolling %s-%s-%s over into the next month", year, month, day)
            year, m0 = divmod(index + 1, 12)
            month = m0 + 1
            day -= eom

    return FieldDate(year, month, day)


def add_months(date: FieldDate, months: Months, *, overflow: Overflow = "roll") -> FieldDate:
    """Date ``months`` calendar months after ``date``."""
    return _shift(date, months.n, overflow)


def sub_months(date: FieldDate, months: Months, *, overflow: Overflow = "roll") -> FieldDate:
    """Date ``months`` calendar months before ``date``."""
    return _shift(date, -months.n, overflow)


def add_years(date: FieldDate, years: Years, *, overflow: Overflow = "roll") -> FieldDate:
    # Feb 29 + 1 year is Mar 1 under "roll", Feb 28 under "clamp".
    return _shift(date, 12 * years.n, overflow)


def sub_years(date: FieldDate, years: Years, *, overflow: Overflow = "roll") -> FieldDate:
    return _shift(date, -12 * years.n, overflow)
