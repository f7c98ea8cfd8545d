"""Calendar dates used for planet-local timekeeping."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)\.\s*([+-]?\d+)")


@functools.total_ordering
@dataclass
class Date:
    """A mutable day/month/year date on the Gregorian calendar."""

    day: int
    month: int
    year: int

    def is_leap_year(self) -> bool:
        """Return True if the date's year is a Gregorian leap year."""
        year = self.year
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    def days_in_month(self) -> int:
        """Return the number of days in the date's month."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"invalid month: {self.month}")
        if self.month == 2 and self.is_leap_year():
            return 29
        return _DAYS_IN_MONTH[self.month - 1]

    def add_days(self, days: int) -> None:
        """Advance the date in place by ``days``; non-positive values do nothing."""
        while days > 0:
            month_length = self.days_in_month()
            if self.day + days <= month_length:
                self.day += days
                return
            days -= month_length - self.day + 1
            self.day = 1
            self.month += 1
            if self.month > 12:
                self.month = 1
                self.year += 1

    def compare_to(self, other: Date) -> int:
        """Return a negative, zero or positive number as self is before, equal to or after other."""
        if self.year != other.year:
            return self.year - other.year
        if self.month != other.month:
            return self.month - other.month
        return self.day - other.day

    def copy(self) -> Date:
        """Return an independent copy of this date."""
        return Date(self.day, self.month, self.year)

    @classmethod
    def parse(cls, text: str) -> Date:
        """Parse a ``DD.MM.YYYY`` string."""
        match = _DATE_PATTERN.match(text)
        if match is None:
            raise ValueError(f"invalid date: {text!r}")
        day, month, year = (int(part) for part in match.groups())
        return cls(day, month, year)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare_to(other) < 0

    def __str__(self) -> str:
        return f"{self.day:02d}.{self.month:02d}.{self.year:04d}"