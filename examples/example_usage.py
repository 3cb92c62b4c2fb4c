"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; all quota figures come from the service.
"""

import importlib

from attendance_quota.config import get_settings_module
from attendance_quota.container import build_container
from attendance_quota.core.enums import Horizon
from attendance_quota.quota.model import ProgressInput
from attendance_quota.schedules.elapsed import lectures_elapsed
from attendance_quota.schedules.model import WeeklySchedule


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    schedule = WeeklySchedule(monday=3, tuesday=3, wednesday=3, thursday=3, friday=3)
    month_elapsed = lectures_elapsed(schedule, weeks=3)
    report = container.quota_service.build_report(
        schedule,
        {
            Horizon.WEEK: ProgressInput.from_percentage(80),
            Horizon.MONTH: ProgressInput.from_count(40, elapsed=month_elapsed),
        },
    )
    for horizon, result in report.horizons.items():
        print(horizon.value, result.to_dict())


if __name__ == "__main__":
    main()
