from __future__ import annotations

from typing import Union

from .core.types import DateLike, FieldDate, SerialDate, Weekday


def to_serial(d: DateLike) -> SerialDate:
    if isinstance(d, SerialDate):
        return d
    if isinstance(d, FieldDate):
        return d.to_serial_date()
    raise TypeError(f"expected SerialDate or FieldDate, got {type(d).__name__}")


def to_field(d: DateLike) -> FieldDate:
    if isinstance(d, FieldDate):
        return d
    if isinstance(d, SerialDate):
        return d.to_field_date()
    raise TypeError(f"expected SerialDate or FieldDate, got {type(d).__name__}")


def weekday(d: Union[DateLike, int]) -> Weekday:
    """
    Weekday of a date.

    A plain int is taken as a weekday ordinal (Sunday=0 .. Saturday=6), not
    as an rd; wrap rd values in SerialDate.
    """
    if isinstance(d, int) and not isinstance(d, bool):
        return Weekday.from_ordinal(d)
    return to_serial(d).weekday()
