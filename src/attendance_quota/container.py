from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_MONTHS_IN_TERM, DEFAULT_REQUIRED_PERCENTAGE, DEFAULT_WEEKS_PER_MONTH
from .quota.factory import ProgressStrategyFactory
from .quota.service import QuotaService
from .schedules.model import PeriodConfig


@dataclass(frozen=True)
class Container:
    config: PeriodConfig
    strategy_factory: ProgressStrategyFactory
    quota_service: QuotaService


def build_container(*, settings: object = None) -> Container:
    config = PeriodConfig(
        required_percentage=float(getattr(settings, "REQUIRED_PERCENTAGE", DEFAULT_REQUIRED_PERCENTAGE)),
        weeks_per_month=int(getattr(settings, "WEEKS_PER_MONTH", DEFAULT_WEEKS_PER_MONTH)),
        months_in_term=int(getattr(settings, "MONTHS_IN_TERM", DEFAULT_MONTHS_IN_TERM)),
    )
    strategy_factory = ProgressStrategyFactory()
    quota_service = QuotaService(config, strategy_factory=strategy_factory)

    return Container(
        config=config,
        strategy_factory=strategy_factory,
        quota_service=quota_service,
    )
