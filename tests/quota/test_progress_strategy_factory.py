import pytest

from attendance_quota.core.exceptions import ValidationError
from attendance_quota.quota.factory import ProgressStrategyFactory
from attendance_quota.quota.model import ProgressInput
from attendance_quota.quota.strategies.count_strategy import CountProgressStrategy
from attendance_quota.quota.strategies.percentage_strategy import PercentageProgressStrategy
from attendance_quota.quota.strategies.untouched_strategy import UntouchedProgressStrategy


def test_factory_without_progress_returns_untouched():
    strategy = ProgressStrategyFactory().for_progress(None)

    assert isinstance(strategy, UntouchedProgressStrategy)
    resolved = strategy.resolve(None, basis=60)
    assert resolved.attended == 0
    assert resolved.percentage == 0


def test_factory_count_input():
    progress = ProgressInput.from_count(40, elapsed=45)
    strategy = ProgressStrategyFactory().for_progress(progress)

    assert isinstance(strategy, CountProgressStrategy)
    resolved = strategy.resolve(progress, basis=45)
    assert resolved.attended == 40
    assert resolved.percentage == pytest.approx(88.888, abs=1e-3)


def test_factory_percentage_input():
    progress = ProgressInput.from_percentage(90, elapsed=45)
    strategy = ProgressStrategyFactory().for_progress(progress)

    assert isinstance(strategy, PercentageProgressStrategy)
    resolved = strategy.resolve(progress, basis=45)
    assert resolved.attended == 41
    assert resolved.percentage == 90


def test_percentage_against_empty_basis_is_zero():
    progress = ProgressInput.from_percentage(90)
    resolved = PercentageProgressStrategy().resolve(progress, basis=0)

    assert resolved.attended == 0
    assert resolved.percentage == 0


def test_progress_input_requires_exactly_one_representation():
    with pytest.raises(ValidationError):
        ProgressInput()
    with pytest.raises(ValidationError):
        ProgressInput(attended_count=3, percentage=50)


def test_progress_input_clamps_values():
    assert ProgressInput.from_percentage(120).percentage == 100
    assert ProgressInput.from_percentage(-5).percentage == 0
    assert ProgressInput.from_count(-3).attended_count == 0
    assert ProgressInput.from_count(3, elapsed=-1).elapsed == 0
