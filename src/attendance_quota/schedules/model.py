from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator, Mapping

from ..common.validators import clamp_percentage, non_negative_int, require_positive
from ..core.constants import DEFAULT_MONTHS_IN_TERM, DEFAULT_REQUIRED_PERCENTAGE, DEFAULT_WEEKS_PER_MONTH
from ..core.enums import Weekday


@dataclass(frozen=True)
class WeeklySchedule:
    """Lectures per teaching day. Negative counts are clamped to 0."""

    monday: int = 0
    tuesday: int = 0
    wednesday: int = 0
    thursday: int = 0
    friday: int = 0
    saturday: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, non_negative_int(getattr(self, f.name)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> "WeeklySchedule":
        kwargs = {Weekday.parse(str(day)).name.lower(): int(count) for day, count in mapping.items()}
        return cls(**kwargs)

    def get(self, day: Weekday) -> int:
        return getattr(self, day.name.lower())

    def items(self) -> Iterator[tuple[Weekday, int]]:
        for day in Weekday:
            yield day, self.get(day)

    def values(self) -> Iterator[int]:
        for _, count in self.items():
            yield count

    def as_dict(self) -> dict[str, int]:
        return {day.value: count for day, count in self.items()}


@dataclass(frozen=True)
class PeriodConfig:
    """Scalar settings shared by every horizon of one calculation."""

    required_percentage: float = DEFAULT_REQUIRED_PERCENTAGE
    weeks_per_month: int = DEFAULT_WEEKS_PER_MONTH
    months_in_term: int = DEFAULT_MONTHS_IN_TERM

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_percentage", clamp_percentage(self.required_percentage))
        object.__setattr__(self, "weeks_per_month", require_positive(self.weeks_per_month, "weeks_per_month"))
        object.__setattr__(self, "months_in_term", require_positive(self.months_in_term, "months_in_term"))
