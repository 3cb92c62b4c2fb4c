from __future__ import annotations

from typing import Optional

from ..engine import percentage_from_counts
from ..model import ProgressInput
from .base import ProgressStrategy, ResolvedProgress


class CountProgressStrategy(ProgressStrategy):
    """Attended count typed directly; percentage is derived."""

    def resolve(self, progress: Optional[ProgressInput], *, basis: int) -> ResolvedProgress:
        attended = progress.attended_count
        return ResolvedProgress(attended=attended, percentage=percentage_from_counts(attended, basis))
