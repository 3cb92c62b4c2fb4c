"""JSON request bodies -> domain objects.

Raw numbers are sanitised the way the calculator form always did it: lecture
counts parse-or-zero with negatives clamped to 0, percentages clamp into
[0, 100]. Anything that is not a number at all is a ``ValidationError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..common.validators import parse_int_or_zero, parse_percentage, require_mapping
from ..core.enums import Horizon
from ..core.exceptions import ValidationError
from ..schedules.elapsed import lectures_elapsed
from ..schedules.model import PeriodConfig, WeeklySchedule
from .model import ProgressInput


@dataclass(frozen=True)
class ReportRequest:
    schedule: WeeklySchedule
    config: PeriodConfig
    progress: dict[Horizon, ProgressInput] = field(default_factory=dict)
    day_total: Optional[int] = None
    day_attended: int = 0


@dataclass(frozen=True)
class HorizonRequest:
    total: int
    config: PeriodConfig
    progress: Optional[ProgressInput] = None


def parse_schedule(raw: Any) -> WeeklySchedule:
    raw = require_mapping(raw, "schedule")
    counts = {day: parse_int_or_zero(value, f"schedule.{day}") for day, value in raw.items()}
    try:
        return WeeklySchedule.from_mapping(counts)
    except ValueError as e:
        raise ValidationError(str(e)) from None


def parse_config(raw: Any, defaults: PeriodConfig) -> PeriodConfig:
    raw = require_mapping(raw, "config")
    required = defaults.required_percentage
    months = defaults.months_in_term
    if raw.get("required_percentage") is not None:
        required = parse_percentage(raw["required_percentage"], "required_percentage")
    if raw.get("months_in_term") is not None:
        months = parse_int_or_zero(raw["months_in_term"], "months_in_term")
    return PeriodConfig(
        required_percentage=required,
        weeks_per_month=defaults.weeks_per_month,
        months_in_term=months,
    )


def parse_elapsed(raw: Any, schedule: WeeklySchedule, config: PeriodConfig) -> Optional[int]:
    """Either a plain lecture count or ``{"months", "weeks", "days"}`` passed."""
    if raw is None:
        return None
    if isinstance(raw, dict):
        return lectures_elapsed(
            schedule,
            months=parse_int_or_zero(raw.get("months"), "elapsed.months"),
            weeks=parse_int_or_zero(raw.get("weeks"), "elapsed.weeks"),
            days=parse_int_or_zero(raw.get("days"), "elapsed.days"),
            weeks_per_month=config.weeks_per_month,
        )
    return parse_int_or_zero(raw, "elapsed")


def parse_progress(
    raw: Any,
    *,
    schedule: Optional[WeeklySchedule] = None,
    config: PeriodConfig,
    field_name: str = "progress",
) -> Optional[ProgressInput]:
    if raw is None:
        return None
    raw = require_mapping(raw, field_name)
    elapsed_raw = raw.get("elapsed")
    if isinstance(elapsed_raw, dict) and schedule is None:
        raise ValidationError(f"{field_name}.elapsed must be a lecture count here")
    elapsed = parse_elapsed(elapsed_raw, schedule or WeeklySchedule(), config)

    has_count = raw.get("attended") is not None
    has_pct = raw.get("percentage") is not None
    if has_count == has_pct:
        raise ValidationError(f"{field_name}: give either 'attended' or 'percentage'")
    if has_count:
        return ProgressInput.from_count(parse_int_or_zero(raw["attended"], f"{field_name}.attended"), elapsed=elapsed)
    return ProgressInput.from_percentage(parse_percentage(raw["percentage"], f"{field_name}.percentage"), elapsed=elapsed)


def parse_report_request(body: Any, defaults: PeriodConfig) -> ReportRequest:
    body = require_mapping(body, "body")
    schedule = parse_schedule(body.get("schedule"))
    config = parse_config(body.get("config"), defaults)

    progress_raw = require_mapping(body.get("progress"), "progress")
    progress: dict[Horizon, ProgressInput] = {}
    day_total: Optional[int] = None
    day_attended = 0
    for key, value in progress_raw.items():
        try:
            horizon = Horizon(str(key).lower())
        except ValueError:
            raise ValidationError(f"Unknown horizon: {key!r}") from None
        if horizon == Horizon.DAY:
            day = require_mapping(value, "progress.day")
            day_total = parse_int_or_zero(day.get("total"), "progress.day.total")
            day_attended = parse_int_or_zero(day.get("attended"), "progress.day.attended")
            continue
        parsed = parse_progress(value, schedule=schedule, config=config, field_name=f"progress.{horizon.value}")
        if parsed is not None:
            progress[horizon] = parsed

    return ReportRequest(
        schedule=schedule,
        config=config,
        progress=progress,
        day_total=day_total,
        day_attended=day_attended,
    )


def parse_horizon_request(body: Any, defaults: PeriodConfig) -> HorizonRequest:
    body = require_mapping(body, "body")
    if body.get("total") is None:
        raise ValidationError("total is required")
    total = parse_int_or_zero(body["total"], "total")
    config = parse_config({"required_percentage": body.get("required_percentage")}, defaults)

    progress = None
    if body.get("attended") is not None or body.get("percentage") is not None:
        progress = parse_progress(
            {k: body.get(k) for k in ("attended", "percentage", "elapsed")},
            config=config,
            field_name="body",
        )
    return HorizonRequest(total=total, config=config, progress=progress)
