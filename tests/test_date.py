import datetime

import pytest

from labkit.date import Date

_PY_WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday",
                "friday", "saturday", "sunday"]


def _py(d: Date) -> datetime.date:
    return datetime.date(d.year, d.month, d.day)


@pytest.mark.parametrize(
    "year, month, day, expected",
    [
        (2001, 2, 29, False),
        (2000, 2, 29, True),
        (2024, 4, 31, False),
        (2048, 10, 31, True),
        (0, 2, 29, True),
        (-3, 2, 29, False),
        (1, 2, 29, False),
        (2020, 13, 1, False),
        (2020, 0, 1, False),
        (2020, 1, 0, False),
    ],
)
def test_ispossible(year, month, day, expected):
    assert Date.ispossible(year, month, day) is expected


def test_impossible_date_raises():
    with pytest.raises(ValueError):
        Date(2001, 2, 29)


def test_formats():
    d = Date(1991, 12, 16)
    assert d.euro() == "16 december 1991"
    assert d.usa() == "december 16 1991"
    assert str(d) == "december 16 1991"


def test_comparisons_from_source():
    assert Date(1995, 3, 8) == Date(1995, 3, 8)
    assert Date(1995, 3, 8) <= Date(1995, 3, 9)
    assert not (Date(1995, 3, 8) <= Date(1995, 3, 7))

    d1, d2 = Date(1995, 3, 8), Date(1995, 3, 8)
    assert (d1 == d2, d1 <= d2, d2 <= d1) == (True, True, True)

    d1, d2 = Date(2000, 5, 12), Date(2000, 3, 7)
    assert (d1 == d2, d1 <= d2, d2 <= d1) == (False, False, True)

    d1, d2 = Date(1991, 3, 8), Date(1990, 5, 12)
    assert (d1 == d2, d1 <= d2, d2 <= d1) == (False, False, True)
    assert (d1 == d2, d1 != d2) == (False, True)
    assert (d1 < d2, d1 > d2) == (False, True)
    assert d1 >= d2


def test_days1jan_end_of_leap_year():
    assert Date(2024, 12, 31).days1jan() == 365


@pytest.mark.parametrize("y, m, d", [(2024, 1, 1), (2021, 3, 8), (1999, 7, 4)])
def test_days1jan_matches_datetime(y, m, d):
    date = Date(y, m, d)
    assert date.days1jan() == _py(date).timetuple().tm_yday - 1


def test_setdays1jan_round_trip():
    for i in range(Date.daysinyear(1992)):
        d = Date(1992, 1, 1)
        d.setdays1jan(i)
        assert d.days1jan() == i


def test_setdays1jan_beyond_year_raises():
    d = Date(1993, 1, 1)
    with pytest.raises(ValueError):
        d.setdays1jan(365)


def test_average_year_length():
    total = sum(Date.daysinyear(i) for i in range(10000))
    assert total / 10000.0 == pytest.approx(365.2425)


def test_difference_matches_datetime():
    pairs = [
        (Date(2022, 9, 17), Date(2019, 3, 23)),
        (Date(1990, 10, 3), Date(1949, 10, 7)),
    ]
    for a, b in pairs:
        assert a - b == (_py(a) - _py(b)).days
        assert b - a == -(a - b)


def test_add_subtract_round_trip():
    start = Date(1991, 12, 16)
    offsets = list(range(-1000, 1000, 37))
    for i1 in offsets:
        d1 = start + i1
        assert d1 - start == i1
        assert start - d1 == -i1
        for i2 in offsets[::5]:
            d2 = start + i2
            assert d2 - d1 == i2 - i1


@pytest.mark.parametrize(
    "date, name",
    [
        (Date(1900, 1, 1), "monday"),
        (Date(2025, 2, 26), "wednesday"),
        (Date(1959, 2, 3), "tuesday"),
        (Date(1969, 7, 20), "sunday"),
        (Date(1991, 12, 16), "monday"),
        (Date(1961, 4, 12), "wednesday"),
    ],
)
def test_weekday_from_source(date, name):
    assert date.weekday() == name


def test_weekday_matches_datetime():
    start = Date(1, 1, 1)
    for offset in range(0, 800000, 9973):
        d = start + offset
        assert d.weekday() == _PY_WEEKDAYS[_py(d).weekday()]


def test_before_year_one():
    assert Date(1, 1, 1) - 1 == Date(0, 12, 31)


def test_before_year_zero_raises():
    with pytest.raises(ValueError):
        Date(0, 1, 1) - 1


def test_in_place_operators_mutate():
    d = Date(2000, 2, 28)
    same = d
    d += 1
    assert same is d
    assert d == Date(2000, 2, 29)
    d -= 1
    assert d == Date(2000, 2, 28)


def test_add_does_not_mutate():
    d = Date(2000, 2, 28)
    e = d + 10
    assert d == Date(2000, 2, 28)
    assert e - d == 10