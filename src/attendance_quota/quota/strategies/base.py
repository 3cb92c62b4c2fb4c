from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..model import ProgressInput


@dataclass(frozen=True)
class ResolvedProgress:
    attended: int
    percentage: float


class ProgressStrategy(ABC):
    """Strategy Pattern: encapsulate how attended/percentage are derived."""

    @abstractmethod
    def resolve(self, progress: Optional[ProgressInput], *, basis: int) -> ResolvedProgress:
        raise NotImplementedError
