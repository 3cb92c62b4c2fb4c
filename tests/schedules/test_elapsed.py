from attendance_quota.schedules.elapsed import lectures_elapsed, sum_first_n_days
from attendance_quota.schedules.model import WeeklySchedule

UNEVEN = WeeklySchedule(monday=3, tuesday=2, wednesday=3, thursday=4, friday=2)
EVEN = WeeklySchedule(monday=3, tuesday=3, wednesday=3, thursday=3, friday=3)


def test_sum_first_n_days():
    assert sum_first_n_days(UNEVEN, 0) == 0
    assert sum_first_n_days(UNEVEN, 1) == 3
    assert sum_first_n_days(UNEVEN, 3) == 8


def test_sum_first_n_days_stops_at_saturday():
    assert sum_first_n_days(UNEVEN, 10) == 14
    assert sum_first_n_days(UNEVEN, -2) == 0


def test_sum_first_n_days_accepts_plain_mapping():
    assert sum_first_n_days({"Monday": 3, "Tuesday": 2}, 2) == 5


def test_lectures_elapsed_in_month():
    assert lectures_elapsed(EVEN, weeks=3) == 45
    assert lectures_elapsed(EVEN, weeks=3, days=2) == 51


def test_lectures_elapsed_in_term():
    assert lectures_elapsed(EVEN, months=1, weeks=2, days=3) == 60 + 30 + 9
    assert lectures_elapsed(EVEN, months=1, weeks_per_month=5) == 75


def test_lectures_elapsed_ignores_negative_counters():
    assert lectures_elapsed(EVEN, months=-1, weeks=-1, days=-1) == 0
