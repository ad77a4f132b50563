"""
tempus.core.period
------------------
Durations in a single unit. A period is a magnitude, not a point in time,
and units never mix: ``Days(1) + Months(1)`` is a TypeError.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import PeriodError


@dataclass(frozen=True, order=True, repr=False)
class _Period:
    n: int

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, int):
            raise TypeError(f"{type(self).__name__} needs an int, got {type(self.n).__name__}")
        if self.n < 0:
            raise PeriodError(f"{type(self).__name__} must be non-negative, got {self.n}")

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.n + other.n)

    def __int__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.n})"


class Days(_Period):
    pass


class Months(_Period):
    pass


class Years(_Period):
    def to_months(self) -> Months:
        return Months(12 * self.n)
