"""Attendance quota arithmetic.

Pure functions only: no I/O and no retained state. Callers are expected to
sanitise raw input first (see ``common.validators``), but every function
clamps out-of-range numbers itself instead of returning negative counts,
NaN or infinity.

Products of a percentage and a lecture count are evaluated with
``Fraction`` so that e.g. 7% of 100 is exactly 7 and not 7.000000000000001,
which a ceiling would otherwise turn into 8.
"""

from __future__ import annotations

import math
import sys
from fractions import Fraction
from typing import Iterable, Mapping, Union

from ..core.constants import DEFAULT_WEEKS_PER_MONTH, MAX_PERCENTAGE, MIN_PERCENTAGE

Number = Union[int, float]

_FLOAT_MAX = Fraction(sys.float_info.max)


def _clamp_pct(percentage: Number) -> Number:
    if percentage != percentage:  # NaN
        return MIN_PERCENTAGE
    return min(max(percentage, MIN_PERCENTAGE), MAX_PERCENTAGE)


def _share(percentage: Number, total: int) -> Fraction:
    """Exact value of ``percentage / 100 * total``."""
    if isinstance(percentage, float) and not math.isfinite(percentage):
        percentage = _clamp_pct(percentage)
    return Fraction(percentage) * int(total) / 100


def weekly_total(schedule: Union[Mapping[str, int], Iterable[int]]) -> int:
    """Sum of lectures over every day of the schedule; negatives count as 0."""
    counts = schedule.values() if hasattr(schedule, "values") else schedule
    return sum(max(0, int(c)) for c in counts)


def monthly_total(weekly: int, weeks_per_month: int = DEFAULT_WEEKS_PER_MONTH) -> int:
    return max(0, int(weekly)) * max(0, int(weeks_per_month))


def term_total(monthly: int, months_in_term: int) -> int:
    return max(0, int(monthly)) * max(0, int(months_in_term))


def percentage_from_counts(attended: int, total: int) -> float:
    """``attended / total * 100``; exactly 0 for a period with no lectures.

    Not clamped to 100: an attended count above the total stays visible.
    Counts too large for a float saturate at the largest finite float.
    """
    if total <= 0:
        return 0.0
    value = Fraction(int(attended), int(total)) * 100
    return float(min(max(value, -_FLOAT_MAX), _FLOAT_MAX))



def attended_from_percentage(percentage: Number, total: int) -> int:
    """Lectures attended implied by ``percentage`` of ``total``.

    Rounds half away from zero (2.5 -> 3), the way the calculator pages
    always have. The percentage is used as given.
    """
    share = _share(percentage, total)
    if share < 0:
        return -math.floor(-share + Fraction(1, 2))
    return math.floor(share + Fraction(1, 2))


def missed_from_percentage(percentage: Number, total: int) -> int:
    return max(0, int(total) - attended_from_percentage(percentage, total))


def required_for_target(total: int, required_percentage: Number) -> int:
    """Minimum lectures to attend so that ``required_percentage`` is met.

    Always the ceiling: a fractional lecture cannot be attended, so rounding
    would let a student fall short by part of a lecture.
    """
    total = max(0, int(total))
    return math.ceil(_share(_clamp_pct(required_percentage), total))


def remaining_required(required: int, attended: int) -> int:
    return max(0, required - attended)


def allowed_misses(total: int, required: int, attended: int, elapsed: int) -> int:
    """Upcoming lectures that may still be skipped while the quota stays reachable.

    0 when the quota can no longer be met; see ``is_target_reachable``.
    """
    remaining_slots = total - elapsed
    still_needed = remaining_required(required, attended)
    return max(0, remaining_slots - still_needed)


def is_target_reachable(total: int, required: int, attended: int, elapsed: int) -> bool:
    return remaining_required(required, attended) <= total - elapsed


def skip_allowed_simple(total: int, required_percentage: Number) -> int:
    """Most lectures that can be missed across an untouched period."""
    return max(0, int(total) - required_for_target(total, required_percentage))


def display_percentage(percentage: Number) -> float:
    """Percentage clamped into [0, 100], for progress bars only."""
    return float(_clamp_pct(percentage))
