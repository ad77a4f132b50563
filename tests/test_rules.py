# tests/test_rules.py

import calendar

import pytest

from tempus import (
    Day,
    Month,
    MonthOutOfRangeError,
    days_in_year,
    is_leap_year,
    last_day_of_month,
)


@pytest.mark.parametrize("year", [0, 4, 400, 1600, 2000, 2004, 2024])
def test_leap_years(year):
    assert is_leap_year(year)


@pytest.mark.parametrize("year", [1, 100, 1700, 1800, 1900, 2023, 2100])
def test_common_years(year):
    assert not is_leap_year(year)


def test_leap_rule_agrees_with_stdlib():
    for y in range(1, 5000):
        assert is_leap_year(y) == calendar.isleap(y), y


def test_last_day_of_month_reference_values():
    assert last_day_of_month(2000, 2) == Day(29)
    assert last_day_of_month(1900, 2) == Day(28)
    for y in (1, 1900, 2000, 2023):
        assert last_day_of_month(y, 4) == Day(30)
        assert last_day_of_month(y, 1) == Day(31)


def test_last_day_of_month_agrees_with_stdlib():
    for y in (1, 1600, 1700, 1999, 2000, 2023, 2024, 9999):
        for m in range(1, 13):
            assert last_day_of_month(y, m).value == calendar.monthrange(y, m)[1], (y, m)


def test_last_day_of_month_accepts_month():
    assert last_day_of_month(2024, Month(2)) == Day(29)


@pytest.mark.parametrize("m", [0, 13, -1])
def test_last_day_of_month_rejects_bad_month(m):
    with pytest.raises(MonthOutOfRangeError):
        last_day_of_month(2000, m)


def test_days_in_year():
    assert days_in_year(2000) == 366
    assert days_in_year(1900) == 365
    assert days_in_year(2023) == 365
