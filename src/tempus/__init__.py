"""tempus public API.

Proleptic Gregorian date arithmetic on unsigned day counts. Keep this
surface small: users should mostly interact with names re-exported here.
"""

import logging

from .core.errors import (
    DateRangeError,
    InvalidDateError,
    MonthOutOfRangeError,
    PeriodError,
    TempusError,
)
from .core.fields import Day, Month
from .core.period import Days, Months, Years
from .core.rules import RD_MAX, days_in_year, is_leap_year, last_day_of_month
from .core.types import FieldDate, SerialDate, Weekday
from .api import to_field, to_serial, weekday
from .arith import add_months, add_years, sub_months, sub_years
from .interop import UNIX_EPOCH_RD, from_jdn, from_unix_days, to_jdn, to_unix_days

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Day",
    "Month",
    "Weekday",
    "SerialDate",
    "FieldDate",
    "Days",
    "Months",
    "Years",
    "RD_MAX",
    "is_leap_year",
    "days_in_year",
    "last_day_of_month",
    "to_serial",
    "to_field",
    "weekday",
    "add_months",
    "sub_months",
    "add_years",
    "sub_years",
    "to_jdn",
    "from_jdn",
    "to_unix_days",
    "from_unix_days",
    "UNIX_EPOCH_RD",
    "TempusError",
    "MonthOutOfRangeError",
    "InvalidDateError",
    "DateRangeError",
    "PeriodError",
]
