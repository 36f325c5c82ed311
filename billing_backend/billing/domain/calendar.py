"""
Calendar helpers

Locale-independent weekday names and month arithmetic used by the
billing anchor calculator.
"""

import calendar
from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    """ISO weekday numbers (Monday is 1)."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7
    
    @property
    def label(self) -> str:
        """English weekday name, independent of the process locale."""
        return self.name.capitalize()
    
    @classmethod
    def from_date(cls, value: date) -> 'Weekday':
        return cls(value.isoweekday())
    
    @classmethod
    def from_name(cls, name: str) -> 'Weekday':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {name!r}")


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def clamp_day(year: int, month: int, day: int) -> date:
    """Return ``day`` of the month, rolled back to the month's last day if it does not exist."""
    return date(year, month, min(day, days_in_month(year, month)))


def is_leap_day(value: date) -> bool:
    """True when ``value`` is February 29th."""
    return value.month == 2 and value.day == 29
