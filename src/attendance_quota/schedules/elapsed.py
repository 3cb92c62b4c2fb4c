from __future__ import annotations

from typing import Mapping, Union

from ..core.constants import DEFAULT_WEEKS_PER_MONTH
from ..core.enums import Weekday
from ..quota.engine import monthly_total, weekly_total
from .model import WeeklySchedule

ScheduleLike = Union[WeeklySchedule, Mapping[str, int]]


def _as_schedule(schedule: ScheduleLike) -> WeeklySchedule:
    if isinstance(schedule, WeeklySchedule):
        return schedule
    return WeeklySchedule.from_mapping(schedule)


def sum_first_n_days(schedule: ScheduleLike, days: int) -> int:
    """Lectures held in the first ``days`` teaching days, Monday onwards.

    Values past Saturday stop at the end of the week; negative means none.
    """
    schedule = _as_schedule(schedule)
    days = max(0, min(int(days), len(Weekday)))
    return sum(schedule.get(day) for day in list(Weekday)[:days])


def lectures_elapsed(
    schedule: ScheduleLike,
    *,
    months: int = 0,
    weeks: int = 0,
    days: int = 0,
    weeks_per_month: int = DEFAULT_WEEKS_PER_MONTH,
) -> int:
    """Lectures already held after whole months, whole weeks and extra days."""
    schedule = _as_schedule(schedule)
    weekly = weekly_total(schedule)
    monthly = monthly_total(weekly, weeks_per_month)
    return (
        max(0, int(months)) * monthly
        + max(0, int(weeks)) * weekly
        + sum_first_n_days(schedule, days)
    )
