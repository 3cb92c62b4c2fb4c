from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..core.enums import Horizon, QuotaStatus
from ..schedules.model import PeriodConfig, WeeklySchedule
from .engine import (
    allowed_misses,
    is_target_reachable,
    monthly_total,
    remaining_required,
    required_for_target,
    skip_allowed_simple,
    term_total,
    weekly_total,
)
from .factory import ProgressStrategyFactory
from .model import ProgressInput, QuotaReport, QuotaResult

logger = logging.getLogger(__name__)


class QuotaService:
    """Turns a schedule and per-horizon progress into display-ready figures.

    Horizons are computed independently: month and term progress is never
    back-derived from the week's figures or from a shared counter.
    """

    def __init__(
        self,
        config: Optional[PeriodConfig] = None,
        *,
        strategy_factory: Optional[ProgressStrategyFactory] = None,
    ):
        self._config = config or PeriodConfig()
        self._factory = strategy_factory or ProgressStrategyFactory()

    @property
    def config(self) -> PeriodConfig:
        return self._config

    def totals(self, schedule: WeeklySchedule, *, config: Optional[PeriodConfig] = None) -> dict[Horizon, int]:
        config = config or self._config
        week = weekly_total(schedule)
        month = monthly_total(week, config.weeks_per_month)
        return {
            Horizon.WEEK: week,
            Horizon.MONTH: month,
            Horizon.TERM: term_total(month, config.months_in_term),
        }

    def compute_horizon(
        self,
        horizon: Horizon,
        total: int,
        progress: Optional[ProgressInput] = None,
        *,
        config: Optional[PeriodConfig] = None,
    ) -> QuotaResult:
        config = config or self._config
        total = max(0, int(total))
        required = required_for_target(total, config.required_percentage)

        # Without an explicit elapsed count the progress describes the whole horizon.
        if progress is None:
            elapsed = 0
        elif progress.elapsed is None:
            elapsed = total
        else:
            elapsed = min(progress.elapsed, total)

        strategy = self._factory.for_progress(progress)
        resolved = strategy.resolve(progress, basis=elapsed)
        attended = resolved.attended

        if progress is None:
            allowed = skip_allowed_simple(total, config.required_percentage)
        else:
            allowed = allowed_misses(total, required, attended, elapsed)

        reachable = is_target_reachable(total, required, attended, elapsed)
        status = self._status(
            total=total,
            reachable=reachable,
            percentage=resolved.percentage,
            required_percentage=config.required_percentage,
        )

        result = QuotaResult(
            horizon=horizon,
            total_for_period=total,
            required_for_period=required,
            current_percentage=resolved.percentage,
            allowed_misses=allowed,
            attended=attended,
            missed=max(0, elapsed - attended),
            elapsed=elapsed,
            remaining_required=remaining_required(required, attended),
            status=status,
            required_percentage=config.required_percentage,
            reachable=reachable,
        )
        logger.debug(
            "quota %s: total=%d required=%d attended=%d elapsed=%d allowed=%d status=%s",
            horizon.value, total, required, attended, elapsed, allowed, status.value,
        )
        if status == QuotaStatus.UNREACHABLE:
            logger.warning(
                "quota %s not achievable: %d more needed, %d lectures left",
                horizon.value, result.remaining_required, total - elapsed,
            )
        return result

    def compute_day(self, total: int, attended: int, *, config: Optional[PeriodConfig] = None) -> QuotaResult:
        """A single day, with its lecture count typed in rather than taken from the schedule."""
        total = max(0, int(total))
        progress = ProgressInput.from_count(attended, elapsed=total)
        return self.compute_horizon(Horizon.DAY, total, progress, config=config)

    def build_report(
        self,
        schedule: WeeklySchedule,
        progress: Optional[Mapping[Horizon, ProgressInput]] = None,
        *,
        config: Optional[PeriodConfig] = None,
        day_total: Optional[int] = None,
        day_attended: int = 0,
    ) -> QuotaReport:
        config = config or self._config
        progress = progress or {}
        totals = self.totals(schedule, config=config)

        horizons: dict[Horizon, QuotaResult] = {}
        if day_total is not None:
            horizons[Horizon.DAY] = self.compute_day(day_total, day_attended, config=config)
        for horizon, total in totals.items():
            horizons[horizon] = self.compute_horizon(horizon, total, progress.get(horizon), config=config)

        return QuotaReport(
            weekly_total=totals[Horizon.WEEK],
            monthly_total=totals[Horizon.MONTH],
            term_total=totals[Horizon.TERM],
            required_percentage=config.required_percentage,
            horizons=horizons,
        )

    @staticmethod
    def _status(
        *,
        total: int,
        reachable: bool,
        percentage: float,
        required_percentage: float,
    ) -> QuotaStatus:
        if total == 0:
            return QuotaStatus.NO_LECTURES
        if percentage >= required_percentage:
            return QuotaStatus.ON_TRACK
        if not reachable:
            return QuotaStatus.UNREACHABLE
        return QuotaStatus.BELOW_TARGET
