"""
Unit tests for the sleep score and sleep-modifier inputs.
"""

import datetime

import pytest

from recovery_engine.analytics.sleep import compute_sleep_score, sleep_modifier_inputs
from recovery_engine.schemas.health import SleepStage, SleepStageType

BEDTIME = datetime.datetime(2026, 2, 7, 23, 0)


def _make_night(*plan: tuple[SleepStageType, float]) -> list[SleepStage]:
    """Consecutive stages from ``(stage, minutes)`` pairs."""
    stages = []
    t = BEDTIME
    for stage, minutes in plan:
        end = t + datetime.timedelta(minutes=minutes)
        stages.append(SleepStage(stage=stage, start=t, end=end))
        t = end
    return stages


class TestSleepScore:

    def test_ideal_night(self):
        night = _make_night(
            (SleepStageType.CORE, 300),
            (SleepStageType.DEEP, 96),
            (SleepStageType.REM, 84),
        )
        result = compute_sleep_score(night)
        assert result.score == 100
        assert result.total_minutes == pytest.approx(480)
        assert result.efficiency == pytest.approx(100)

    def test_short_night_no_deep(self):
        night = _make_night((SleepStageType.CORE, 300))
        # duration 40 - 3×10 = 10, deep 0, efficiency 30
        assert compute_sleep_score(night).score == 40

    def test_acceptable_duration_excess_deep(self):
        night = _make_night((SleepStageType.CORE, 195), (SleepStageType.DEEP, 195))
        # 6.5h → 30, deep 50% → 0, efficiency 30
        assert compute_sleep_score(night).score == 60

    def test_awake_time_lowers_efficiency(self):
        night = _make_night(
            (SleepStageType.CORE, 384),
            (SleepStageType.AWAKE, 480),
            (SleepStageType.DEEP, 96),
        )
        result = compute_sleep_score(night)
        assert result.efficiency == pytest.approx(50)
        assert result.total_minutes == pytest.approx(480)
        assert result.score == 85

    def test_no_sleep(self):
        result = compute_sleep_score(_make_night((SleepStageType.AWAKE, 60)))
        assert result.score == 0
        assert result.total_minutes == 0
        assert result.efficiency == 0

    def test_empty(self):
        assert compute_sleep_score([]).score == 0


class TestSleepModifierInputs:

    def test_ratios(self):
        night = _make_night(
            (SleepStageType.CORE, 240),
            (SleepStageType.DEEP, 120),
            (SleepStageType.AWAKE, 30),
            (SleepStageType.REM, 120),
        )
        total, deep, rem = sleep_modifier_inputs(night)
        assert total == pytest.approx(480)
        assert deep == pytest.approx(0.25)
        assert rem == pytest.approx(0.25)

    def test_no_sleep_is_missing(self):
        assert sleep_modifier_inputs([]) == (None, None, None)
