from __future__ import annotations

from typing import Optional

from ..engine import attended_from_percentage
from ..model import ProgressInput
from .base import ProgressStrategy, ResolvedProgress


class PercentageProgressStrategy(ProgressStrategy):
    """Percentage typed directly; attended count is derived from it."""

    def resolve(self, progress: Optional[ProgressInput], *, basis: int) -> ResolvedProgress:
        pct = progress.percentage
        percentage = pct if basis > 0 else 0.0
        return ResolvedProgress(attended=attended_from_percentage(pct, basis), percentage=percentage)
