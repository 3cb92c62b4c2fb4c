from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .model import ProgressInput
from .strategies.base import ProgressStrategy
from .strategies.count_strategy import CountProgressStrategy
from .strategies.percentage_strategy import PercentageProgressStrategy
from .strategies.untouched_strategy import UntouchedProgressStrategy


@dataclass
class ProgressStrategyFactory:
    """Factory Pattern: choose the strategy matching the authoritative input."""

    def for_progress(self, progress: Optional[ProgressInput]) -> ProgressStrategy:
        if progress is None:
            return UntouchedProgressStrategy()
        if progress.uses_percentage:
            return PercentageProgressStrategy()
        return CountProgressStrategy()
