from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import clamp_percentage, non_negative_int
from ..core.enums import Horizon, QuotaStatus
from ..core.exceptions import ValidationError
from .engine import display_percentage


@dataclass(frozen=True)
class ProgressInput:
    """Progress within one horizon.

    Exactly one of ``attended_count`` / ``percentage`` is authoritative; the
    other is derived by the service. ``elapsed`` is the number of lectures
    already held in the horizon, when known.
    """

    attended_count: Optional[int] = None
    percentage: Optional[float] = None
    elapsed: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.attended_count is None) == (self.percentage is None):
            raise ValidationError("Provide either an attended count or a percentage")
        if self.attended_count is not None:
            object.__setattr__(self, "attended_count", non_negative_int(self.attended_count))
        if self.percentage is not None:
            object.__setattr__(self, "percentage", clamp_percentage(self.percentage))
        if self.elapsed is not None:
            object.__setattr__(self, "elapsed", non_negative_int(self.elapsed))

    @classmethod
    def from_count(cls, attended: int, *, elapsed: Optional[int] = None) -> "ProgressInput":
        return cls(attended_count=attended, elapsed=elapsed)

    @classmethod
    def from_percentage(cls, percentage: float, *, elapsed: Optional[int] = None) -> "ProgressInput":
        return cls(percentage=percentage, elapsed=elapsed)

    @property
    def uses_percentage(self) -> bool:
        return self.percentage is not None


@dataclass(frozen=True)
class QuotaResult:
    """Figures for one horizon, ready for display."""

    horizon: Horizon
    total_for_period: int
    required_for_period: int
    current_percentage: float
    allowed_misses: int
    attended: int = 0
    missed: int = 0
    elapsed: int = 0
    remaining_required: int = 0
    status: QuotaStatus = QuotaStatus.NO_LECTURES
    required_percentage: float = 0.0
    reachable: bool = True

    @property
    def display_percentage(self) -> float:
        return display_percentage(self.current_percentage)

    @property
    def bar_css_class(self) -> str:
        return "bg-red-500" if self.current_percentage < self.required_percentage else "bg-green-500"

    def to_dict(self) -> dict:
        return {
            "horizon": self.horizon.value,
            "total_for_period": self.total_for_period,
            "required_for_period": self.required_for_period,
            "current_percentage": round(self.current_percentage, 2),
            "required_percentage": self.required_percentage,
            "display_percentage": round(self.display_percentage, 2),
            "allowed_misses": self.allowed_misses,
            "attended": self.attended,
            "missed": self.missed,
            "elapsed": self.elapsed,
            "remaining_required": self.remaining_required,
            "status": self.status.value,
            "reachable": self.reachable,
            "bar_css_class": self.bar_css_class,
        }


@dataclass(frozen=True)
class QuotaReport:
    weekly_total: int
    monthly_total: int
    term_total: int
    required_percentage: float
    horizons: dict[Horizon, QuotaResult] = field(default_factory=dict)

    def get(self, horizon: Horizon) -> Optional[QuotaResult]:
        return self.horizons.get(horizon)

    def to_dict(self) -> dict:
        return {
            "totals": {
                "week": self.weekly_total,
                "month": self.monthly_total,
                "term": self.term_total,
            },
            "required_percentage": self.required_percentage,
            "horizons": {h.value: r.to_dict() for h, r in self.horizons.items()},
        }
