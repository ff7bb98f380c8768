"""Calendar dates in the proleptic Gregorian calendar, counted from year 0."""

from __future__ import annotations

_NORMAL_YEAR = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_LEAP_YEAR = (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_MONTH_NAMES = (
    "", "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_WEEKDAYS = (
    "sunday", "monday", "tuesday", "wednesday",
    "thursday", "friday", "saturday",
)


class Date:
    """A mutable date; constructing an impossible date raises ValueError."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, year: int, month: int, day: int) -> None:
        if not self.ispossible(year, month, day):
            raise ValueError("tried to construct impossible date")
        self.year = year
        self.month = month
        self.day = day

    @staticmethod
    def isleapyear(y: int) -> bool:
        return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0

    @staticmethod
    def ispossible(year: int, month: int, day: int) -> bool:
        """True if year/month/day names a real day (year >= 0)."""
        if year < 0 or not 1 <= month <= 12:
            return False
        return 1 <= day <= Date.daysinmonth(year, month)

    @staticmethod
    def daysinyear(year: int) -> int:
        """Number of days in the given year: 366 in leap years, else 365."""
        table = _LEAP_YEAR if Date.isleapyear(year) else _NORMAL_YEAR
        return sum(table)

    @staticmethod
    def daysinmonth(year: int, month: int) -> int:
        table = _LEAP_YEAR if Date.isleapyear(year) else _NORMAL_YEAR
        return table[month]

    def usa(self) -> str:
        """Format as 'month day year'."""
        return f"{_MONTH_NAMES[self.month]} {self.day} {self.year}"

    def euro(self) -> str:
        """Format as 'day month year'."""
        return f"{self.day} {_MONTH_NAMES[self.month]} {self.year}"

    def days1jan(self) -> int:
        """Number of days since the 1st of January of this date's year."""
        return self.day - 1 + sum(
            self.daysinmonth(self.year, m) for m in range(1, self.month)
        )

    def setdays1jan(self, nrdays: int) -> None:
        """Set month and day to the nrdays-th day (from 0) of this year."""
        if nrdays < 0:
            raise ValueError("day number cannot be negative")
        for m in range(1, 13):
            days = self.daysinmonth(self.year, m)
            if nrdays < days:
                self.month = m
                self.day = nrdays + 1
                return
            nrdays -= days
        raise ValueError("day number lies beyond the end of the year")

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() == other._key()

    def __le__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() <= other._key()

    def __lt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not other <= self

    def __gt__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return not self <= other

    def __ge__(self, other: Date) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return other <= self

    def __iadd__(self, diff: int) -> Date:
        if not isinstance(diff, int):
            return NotImplemented
        year = self.year
        offset = diff + self.days1jan()
        while offset < 0:
            if year == 0:
                raise ValueError("date would fall before year 0")
            year -= 1
            offset += self.daysinyear(year)
        while offset >= self.daysinyear(year):
            offset -= self.daysinyear(year)
            year += 1
        self.year = year
        self.setdays1jan(offset)
        return self

    def __isub__(self, diff: int) -> Date:
        if not isinstance(diff, int):
            return NotImplemented
        return self.__iadd__(-diff)

    def __add__(self, diff: int) -> Date:
        if not isinstance(diff, int):
            return NotImplemented
        result = Date(self.year, self.month, self.day)
        result += diff
        return result

    def __sub__(self, other: Date | int) -> int | Date:
        """Date - Date gives days between them; Date - int gives a Date."""
        if isinstance(other, Date):
            diff = self.days1jan() - other.days1jan()
            if self.year > other.year:
                diff += sum(self.daysinyear(y) for y in range(other.year, self.year))
            elif self.year < other.year:
                diff -= sum(self.daysinyear(y) for y in range(self.year, other.year))
            return diff
        if isinstance(other, int):
            return self + (-other)
        return NotImplemented

    def weekday(self) -> str:
        """Name of the day of the week, in lower case."""
        return _WEEKDAYS[(self - Date(2000, 1, 2)) % 7]

    def __str__(self) -> str:
        return self.usa()

    def __repr__(self) -> str:
        return f"Date({self.year}, {self.month}, {self.day})"