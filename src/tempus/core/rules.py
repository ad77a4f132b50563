"""
tempus.core.rules
-----------------
Gregorian leap-year rule and month lengths, written as bit identities.

  is_leap_year:      y & (15 if 100 | y else 3) == 0
  last_day_of_month: (m ^ (m >> 3)) | 30 outside February

For a century year y = 100k = 4 * 25k, 400 | y exactly when 16 | y.
"""

from __future__ import annotations

from typing import Union

from .errors import DateRangeError
from .fields import Day, Month, _require_int

# Unsigned 32-bit serial range; rd 0 is 0000-03-01.
RD_MIN = 0
RD_MAX = 2**32 - 1
EPOCH_YMD = (0, 3, 1)

MonthLike = Union[int, Month]


def check_year(y: int) -> int:
    _require_int("year", y)
    if y < 0:
        raise DateRangeError(f"year must be non-negative, got {y}")
    return y


def is_leap_year(y: int) -> bool:
    mask = 15 if y % 100 == 0 else 3
    return (y & mask) == 0


def days_in_year(y: int) -> int:
    return 366 if is_leap_year(y) else 365


def last_day_of_month(y: int, m: MonthLike) -> Day:
    """Number of days in month ``m`` of year ``y``, as a Day."""
    m = m.value if isinstance(m, Month) else Month(m).value
    if m == 2:
        return Day(29) if is_leap_year(y) else Day(28)
    return Day((m ^ (m >> 3)) | 30)
