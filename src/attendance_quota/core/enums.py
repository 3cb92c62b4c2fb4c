from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Teaching days, in display order (Sunday has no lectures)."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"

    @classmethod
    def parse(cls, value: str) -> "Weekday":
        key = (value or "").strip().lower()
        for day in cls:
            if day.value.lower() == key or day.name.lower() == key:
                return day
        raise ValueError(f"Unknown weekday: {value!r}")


class Horizon(str, Enum):
    """Time window a quota calculation covers."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    TERM = "term"


class QuotaStatus(str, Enum):
    """Reportable state of a horizon (never raised as an error)."""

    ON_TRACK = "ON_TRACK"
    BELOW_TARGET = "BELOW_TARGET"
    UNREACHABLE = "UNREACHABLE"
    NO_LECTURES = "NO_LECTURES"
