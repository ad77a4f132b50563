# tests/test_arith.py

import random

import pytest

from tempus import (
    DateRangeError,
    FieldDate,
    InvalidDateError,
    Months,
    Years,
    add_months,
    add_years,
    last_day_of_month,
    sub_months,
    sub_years,
)


class TestAddMonths:

    def test_carries_into_year(self):
        assert FieldDate(2000, 12, 1) + Months(1) == FieldDate(2001, 1, 1)
        assert FieldDate(2000, 11, 15) + Months(14) == FieldDate(2002, 1, 15)

    def test_zero_is_identity(self):
        fd = FieldDate(2001, 1, 31)
        assert fd + Months(0) == fd
        assert fd - Months(0) == fd

    def test_twelve_months_is_a_year(self):
        fd = FieldDate(1999, 7, 4)
        assert fd + Months(12) == FieldDate(2000, 7, 4)
        assert fd + Months(12) == fd + Years(1)

    def test_roll_spills_into_next_month(self):
        assert add_months(FieldDate(2001, 1, 31), Months(1)) == FieldDate(2001, 3, 3)
        assert add_months(FieldDate(2000, 1, 31), Months(1)) == FieldDate(2000, 3, 2)
        assert add_months(FieldDate(2000, 3, 31), Months(1)) == FieldDate(2000, 5, 1)

    def test_roll_is_operator_default(self):
        assert FieldDate(2001, 1, 31) + Months(1) == FieldDate(2001, 3, 3)

    def test_clamp(self):
        assert add_months(FieldDate(2001, 1, 31), Months(1), overflow="clamp") == FieldDate(2001, 2, 28)
        assert add_months(FieldDate(2000, 1, 31), Months(1), overflow="clamp") == FieldDate(2000, 2, 29)
        assert add_months(FieldDate(2000, 5, 31), Months(1), overflow="clamp") == FieldDate(2000, 6, 30)

    def test_strict(self):
        with pytest.raises(InvalidDateError):
            add_months(FieldDate(2001, 1, 31), Months(1), overflow="strict")
        assert add_months(FieldDate(2001, 1, 28), Months(1), overflow="strict") == FieldDate(2001, 2, 28)

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            add_months(FieldDate(2001, 1, 1), Months(1), overflow="wrap")

    def test_past_serial_range(self):
        with pytest.raises(DateRangeError):
            FieldDate(2000, 1, 1) + Years(20_000_000)


class TestSubMonths:

    def test_borrows_from_year(self):
        assert FieldDate(2000, 3, 15) - Months(3) == FieldDate(1999, 12, 15)
        assert FieldDate(2001, 1, 1) - Months(1) == FieldDate(2000, 12, 1)
        assert FieldDate(2001, 1, 1) - Months(25) == FieldDate(1998, 12, 1)

    def test_same_policy_as_addition(self):
        # Mar 31 -> Feb: the excess rolls forward, exactly as for addition
        assert sub_months(FieldDate(2001, 3, 31), Months(1)) == FieldDate(2001, 3, 3)
        assert sub_months(FieldDate(2001, 3, 31), Months(1), overflow="clamp") == FieldDate(2001, 2, 28)
        with pytest.raises(InvalidDateError):
            sub_months(FieldDate(2001, 3, 31), Months(1), overflow="strict")

    def test_before_epoch(self):
        with pytest.raises(DateRangeError):
            FieldDate(0, 3, 1) - Months(1)
        with pytest.raises(DateRangeError):
            FieldDate(0, 3, 1) - Months(5)
        assert FieldDate(1, 3, 1) - Months(12) == FieldDate(0, 3, 1)


class TestYears:

    def test_leap_day(self):
        leap = FieldDate(2000, 2, 29)
        assert leap + Years(1) == FieldDate(2001, 3, 1)
        assert add_years(leap, Years(1), overflow="clamp") == FieldDate(2001, 2, 28)
        assert leap + Years(4) == FieldDate(2004, 2, 29)
        assert sub_years(leap, Years(100)) == FieldDate(1900, 3, 1)
        assert leap - Years(400) == FieldDate(1600, 2, 29)


def test_add_then_sub_is_identity_when_no_overflow():
    random.seed(99)
    for _ in range(2000):
        y = random.randint(1, 9000)
        m = random.randint(1, 12)
        d = random.randint(1, 28)
        n = Months(random.randint(0, 1000))
        fd = FieldDate(y, m, d)
        assert sub_months(add_months(fd, n), n) == fd


def test_results_are_always_valid():
    random.seed(5)
    for _ in range(2000):
        y = random.randint(100, 9000)
        m = random.randint(1, 12)
        d = random.randint(1, last_day_of_month(y, m).value)
        n = Months(random.randint(0, 50))
        for policy in ("roll", "clamp"):
            for fn in (add_months, sub_months):
                out = fn(FieldDate(y, m, d), n, overflow=policy)
                assert 1 <= out.day.value <= last_day_of_month(out.year, out.month).value
