import pytest

from attendance_quota.core.enums import Weekday
from attendance_quota.core.exceptions import ValidationError
from attendance_quota.schedules.model import PeriodConfig, WeeklySchedule


def test_schedule_defaults_to_zero_and_clamps_negatives():
    schedule = WeeklySchedule(monday=3, tuesday=-2)

    assert schedule.get(Weekday.MONDAY) == 3
    assert schedule.get(Weekday.TUESDAY) == 0
    assert schedule.get(Weekday.SATURDAY) == 0


def test_schedule_from_mapping_accepts_any_case():
    schedule = WeeklySchedule.from_mapping({"monday": 2, "FRIDAY": 1, "Wednesday": 4})

    assert schedule.as_dict() == {
        "Monday": 2,
        "Tuesday": 0,
        "Wednesday": 4,
        "Thursday": 0,
        "Friday": 1,
        "Saturday": 0,
    }


def test_schedule_from_mapping_rejects_unknown_day():
    with pytest.raises(ValueError):
        WeeklySchedule.from_mapping({"Sunday": 1})


def test_schedule_iterates_in_week_order():
    schedule = WeeklySchedule(saturday=1, monday=2)

    assert [day for day, _ in schedule.items()] == list(Weekday)
    assert list(schedule.values()) == [2, 0, 0, 0, 0, 1]


def test_period_config_defaults():
    config = PeriodConfig()

    assert config.required_percentage == 85
    assert config.weeks_per_month == 4
    assert config.months_in_term == 3


def test_period_config_clamps_percentage():
    assert PeriodConfig(required_percentage=150).required_percentage == 100
    assert PeriodConfig(required_percentage=-1).required_percentage == 0


def test_period_config_rejects_non_positive_counts():
    with pytest.raises(ValidationError):
        PeriodConfig(months_in_term=0)
    with pytest.raises(ValidationError):
        PeriodConfig(weeks_per_month=-4)
