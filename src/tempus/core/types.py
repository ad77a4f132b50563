from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from enum import IntEnum
from typing import Any, Union

from .errors import DateRangeError, InvalidDateError
from .fields import Day, Month, _require_int
from .period import Days, Months, Years
from .rata_die import from_rd, to_rd
from .rules import EPOCH_YMD, RD_MAX, RD_MIN, check_year, last_day_of_month

# date.toordinal() counts 0001-01-01 as 1; that day is rd 306.
_ORDINAL_SHIFT = 305


class Weekday(IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_ordinal(cls, n: int) -> "Weekday":
        """Sunday=0 .. Saturday=6. Anything else is a ValueError."""
        return cls(n)

    @classmethod
    def from_serial(cls, sd: "SerialDate") -> "Weekday":
        # 0000-03-01 (rd 0) was a Wednesday
        return cls((sd.rd + 3) % 7)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __add__(self, other):
        if isinstance(other, Days):
            return Weekday((int(self) + other.n) % 7)
        return int.__add__(self, other)

    def __sub__(self, other):
        if isinstance(other, Weekday):
            # forward distance from other to self
            return Days((int(self) - int(other)) % 7)
        if isinstance(other, Days):
            return Weekday((int(self) - other.n) % 7)
        return int.__sub__(self, other)


@dataclass(frozen=True, order=True, repr=False)
class SerialDate:
    """Day count since 0000-03-01 (rata die), unsigned 32-bit."""
    rd: int

    def __post_init__(self) -> None:
        _require_int("rd", self.rd)
        if not (RD_MIN <= self.rd <= RD_MAX):
            raise DateRangeError(f"rd must be in [{RD_MIN}, {RD_MAX}], got {self.rd}")

    @classmethod
    def from_date(cls, d: date) -> "SerialDate":
        return cls(d.toordinal() + _ORDINAL_SHIFT)

    def to_date(self) -> date:
        n = self.rd - _ORDINAL_SHIFT
        if not (date.min.toordinal() <= n <= date.max.toordinal()):
            raise DateRangeError(f"{self} is outside the datetime.date range")
        return date.fromordinal(n)

    def to_field_date(self) -> "FieldDate":
        y, m, d = from_rd(self.rd)
        return FieldDate._trusted(y, m, d)

    def weekday(self) -> Weekday:
        return Weekday.from_serial(self)

    def __add__(self, other):
        if not isinstance(other, Days):
            return NotImplemented
        return SerialDate(self.rd + other.n)

    def __sub__(self, other):
        if isinstance(other, Days):
            return SerialDate(self.rd - other.n)
        if isinstance(other, SerialDate):
            return self.rd - other.rd
        return NotImplemented

    def __repr__(self) -> str:
        return f"SerialDate(rd={self.rd})"

    def __str__(self) -> str:
        return f"rata die: {self.rd}"


_MAX_YMD = from_rd(RD_MAX)


@dataclass(frozen=True, order=True, repr=False)
class FieldDate:
    """
    Proleptic Gregorian (year, month, day).

    Plain ints are accepted for month and day. Construction checks, in order:
      - year is a non-negative int            (DateRangeError)
      - month is in 1..12                     (MonthOutOfRangeError)
      - day is in 1..last_day_of_month        (InvalidDateError)
      - the date lies in the serial range     (DateRangeError)
    """
    year: int
    month: Month
    day: Day

    def __post_init__(self) -> None:
        check_year(self.year)
        month = self.month if isinstance(self.month, Month) else Month(self.month)
        day = self.day if isinstance(self.day, Day) else Day(self.day)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)

        ldm = last_day_of_month(self.year, month)
        if day > ldm:
            raise InvalidDateError(f"{self.year}-{month} has {ldm} days, got {day}")

        ymd = (self.year, month.value, day.value)
        if ymd < EPOCH_YMD or ymd > _MAX_YMD:
            raise DateRangeError(
                f"{self.year}-{month}-{day} is outside the serial range "
                f"[{'-'.join(map(str, EPOCH_YMD))}, {'-'.join(map(str, _MAX_YMD))}]"
            )

    @classmethod
    def _trusted(cls, year: int, month: int, day: int) -> "FieldDate":
        # Output of from_rd is valid by construction; skip the day checks.
        obj = object.__new__(cls)
        object.__setattr__(obj, "year", year)
        object.__setattr__(obj, "month", Month(month))
        object.__setattr__(obj, "day", Day(day))
        return obj

    @classmethod
    def from_date(cls, d: date) -> "FieldDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        if self.year < date.min.year or self.year > date.max.year:
            raise DateRangeError(f"{self} is outside the datetime.date range")
        return date(self.year, self.month.value, self.day.value)

    def to_serial_date(self) -> SerialDate:
        return SerialDate(to_rd(self.year, self.month.value, self.day.value))

    def weekday(self) -> Weekday:
        return self.to_serial_date().weekday()

    def replace(self, **changes: Any) -> "FieldDate":
        return replace(self, **changes)

    def __add__(self, other):
        if isinstance(other, Days):
            return (self.to_serial_date() + other).to_field_date()
        if isinstance(other, (Months, Years)):
            from ..arith import add_months
            months = other.to_months() if isinstance(other, Years) else other
            return add_months(self, months)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Days):
            return (self.to_serial_date() - other).to_field_date()
        if isinstance(other, (Months, Years)):
            from ..arith import sub_months
            months = other.to_months() if isinstance(other, Years) else other
            return sub_months(self, months)
        if isinstance(other, FieldDate):
            return self.to_serial_date() - other.to_serial_date()
        return NotImplemented

    def __repr__(self) -> str:
        return f"FieldDate({self.year}, {self.month.value}, {self.day.value})"

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


DateLike = Union[SerialDate, FieldDate]
