from __future__ import annotations

from typing import Optional

from ..model import ProgressInput
from .base import ProgressStrategy, ResolvedProgress


class UntouchedProgressStrategy(ProgressStrategy):
    """No progress yet: nothing attended, nothing held."""

    def resolve(self, progress: Optional[ProgressInput], *, basis: int) -> ResolvedProgress:
        return ResolvedProgress(attended=0, percentage=0.0)
