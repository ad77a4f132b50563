class TempusError(Exception):
    """Base error."""

class MonthOutOfRangeError(TempusError, ValueError):
    """Raised when a month number is not in 1..12."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"month must be between 1 and 12, got {value!r}")

class InvalidDateError(TempusError, ValueError):
    """Raised when a day does not exist in its year and month."""

class DateRangeError(TempusError, OverflowError):
    """Raised when a date falls outside the representable unsigned range."""

class PeriodError(TempusError, ValueError):
    """Raised when a period is built from a negative magnitude."""
