# tests/test_weekday.py

import itertools

import pytest

import tempus
from tempus import Days, FieldDate, SerialDate, Weekday


def test_unix_epoch_is_thursday():
    unix_epoch = FieldDate(1970, 1, 1).to_serial_date()
    wd = unix_epoch.weekday()
    assert wd == Weekday.THURSDAY
    assert wd - Days(1) == Weekday.WEDNESDAY
    assert wd + Days(1) == Weekday.FRIDAY


def test_known_weekdays():
    assert SerialDate(0).weekday() == Weekday.WEDNESDAY
    assert FieldDate(2000, 1, 1).weekday() == Weekday.SATURDAY
    assert FieldDate(2024, 2, 29).weekday() == Weekday.THURSDAY


def test_agrees_with_stdlib():
    d = FieldDate(1, 1, 1)
    for _ in range(800):
        # date.isoweekday(): Monday=1 .. Sunday=7
        assert d.weekday() == d.to_date().isoweekday() % 7
        d = d + Days(97)


def test_add():
    assert Weekday.MONDAY + Days(2) == Weekday.WEDNESDAY
    assert Weekday.WEDNESDAY + Days(7) == Weekday.WEDNESDAY
    assert Weekday.SATURDAY + Days(2) == Weekday.MONDAY
    assert Weekday.SUNDAY + Days(700) == Weekday.SUNDAY


def test_sub_days():
    assert Weekday.MONDAY - Days(2) == Weekday.SATURDAY
    assert Weekday.WEDNESDAY - Days(7) == Weekday.WEDNESDAY
    assert Weekday.SATURDAY - Days(2) == Weekday.THURSDAY
    assert Weekday.SUNDAY - Days(15) == Weekday.SATURDAY


def test_sub_weekday():
    assert Weekday.MONDAY - Weekday.SATURDAY == Days(2)
    assert Weekday.WEDNESDAY - Weekday.WEDNESDAY == Days(0)
    assert Weekday.SATURDAY - Weekday.THURSDAY == Days(2)


@pytest.mark.parametrize("w", list(Weekday))
def test_period_seven(w):
    assert w + Days(7) == w
    assert w - Days(7) == w


def test_circular_distance_all_pairs():
    for a, b in itertools.product(Weekday, repeat=2):
        dist = a - b
        assert 0 <= dist.n <= 6
        assert b + dist == a


def test_results_are_weekdays():
    assert isinstance(Weekday.FRIDAY + Days(3), Weekday)
    assert isinstance(Weekday.FRIDAY - Days(30), Weekday)


def test_from_ordinal():
    assert Weekday.from_ordinal(0) == Weekday.SUNDAY
    assert Weekday.from_ordinal(6) == Weekday.SATURDAY
    with pytest.raises(ValueError):
        Weekday.from_ordinal(7)


def test_functional_api():
    assert tempus.weekday(FieldDate(1970, 1, 1)) == Weekday.THURSDAY
    assert tempus.weekday(SerialDate(0)) == Weekday.WEDNESDAY
    assert tempus.weekday(4) == Weekday.THURSDAY
    with pytest.raises(ValueError):
        tempus.weekday(9)


def test_label():
    assert Weekday.THURSDAY.label == "Thursday"
