from __future__ import annotations

from datetime import date
from typing import Union

from .core.types import FieldDate, SerialDate

# JDN of 0000-03-01 (proleptic Gregorian); JDN 2451545 is 2000-01-01.
JDN_OFFSET = 1721120

# rd of 1970-01-01
UNIX_EPOCH_RD = 719468


def _serial(d: Union[SerialDate, FieldDate, date]) -> SerialDate:
    if isinstance(d, SerialDate):
        return d
    if isinstance(d, FieldDate):
        return d.to_serial_date()
    if isinstance(d, date):
        return SerialDate.from_date(d)
    raise TypeError(f"expected SerialDate, FieldDate or date, got {type(d).__name__}")


def to_jdn(d: Union[SerialDate, FieldDate, date]) -> int:
    """Julian Day Number of the day (the integer JD at noon)."""
    return _serial(d).rd + JDN_OFFSET


def from_jdn(jdn: int) -> SerialDate:
    return SerialDate(jdn - JDN_OFFSET)


def to_unix_days(d: Union[SerialDate, FieldDate, date]) -> int:
    """Days since 1970-01-01; negative before it."""
    return _serial(d).rd - UNIX_EPOCH_RD


def from_unix_days(n: int) -> SerialDate:
    return SerialDate(n + UNIX_EPOCH_RD)
