from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDateError, MonthOutOfRangeError


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


@dataclass(frozen=True, order=True, repr=False)
class Month:
    """Month number 1..12. Out-of-range values are rejected, never clamped."""
    value: int

    MIN = 1
    MAX = 12

    def __post_init__(self) -> None:
        _require_int("month", self.value)
        if not (self.MIN <= self.value <= self.MAX):
            raise MonthOutOfRangeError(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Month({self.value})"

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, repr=False)
class Day:
    """
    Day of month 1..31.

    The bound for a particular month depends on the year, so only FieldDate
    checks it (against last_day_of_month).
    """
    value: int

    MIN = 1
    MAX = 31

    def __post_init__(self) -> None:
        _require_int("day", self.value)
        if not (self.MIN <= self.value <= self.MAX):
            raise InvalidDateError(f"day must be between 1 and 31, got {self.value}")

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Day({self.value})"

    def __str__(self) -> str:
        return str(self.value)
