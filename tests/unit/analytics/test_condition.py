"""
Unit tests for the HRV condition score.

Tests day grouping, the log-space baseline, the RHR correction,
contributions and the baseline-readiness gate.
"""

import datetime
import math

import pytest

from recovery_engine.analytics.condition import (
    ConditionConfig,
    build_condition_score,
    compute_condition_score,
    daily_averages,
    hrv_z_score,
)
from recovery_engine.schemas.condition import (
    ContributionFactor,
    ContributionImpact,
    ScoreStatus,
)
from recovery_engine.schemas.health import HealthSample

TODAY = datetime.datetime(2026, 2, 8, 7, 0)


# ======================================================================
# Helpers
# ======================================================================


def _make_samples(values: list[float]) -> list[HealthSample]:
    """One sample per day; the last value is today."""
    n = len(values)
    return [
        HealthSample(value=v, date=TODAY - datetime.timedelta(days=n - 1 - i))
        for i, v in enumerate(values)
    ]


def _score(raw: float) -> int:
    return int(math.floor(max(0.0, min(100.0, raw)) + 0.5))


def _expected_z(values: list[float]) -> float:
    logs = [math.log(v) for v in values]
    mean = sum(logs) / len(logs)
    std = math.sqrt(sum((x - mean) ** 2 for x in logs) / len(logs))
    return (logs[-1] - mean) / max(std, 0.05)


# ======================================================================
# daily_averages
# ======================================================================


class TestDailyAverages:

    def test_groups_and_sorts_newest_first(self):
        samples = [
            HealthSample(value=40, date=datetime.datetime(2026, 2, 7, 6)),
            HealthSample(value=60, date=datetime.datetime(2026, 2, 8, 6)),
            HealthSample(value=50, date=datetime.datetime(2026, 2, 7, 22)),
        ]
        assert daily_averages(samples) == [
            (datetime.date(2026, 2, 8), 60.0),
            (datetime.date(2026, 2, 7), 45.0),
        ]

    def test_drops_non_finite(self):
        samples = [
            HealthSample(value=math.nan, date=TODAY),
            HealthSample(value=50, date=TODAY),
        ]
        assert daily_averages(samples) == [(TODAY.date(), 50.0)]

    def test_uses_timezone_for_day_boundary(self):
        plus_two = datetime.timezone(datetime.timedelta(hours=2))
        utc = datetime.timezone.utc
        samples = [
            HealthSample(value=40, date=datetime.datetime(2026, 2, 7, 22, 30, tzinfo=utc)),
            HealthSample(value=60, date=datetime.datetime(2026, 2, 8, 8, 0, tzinfo=utc)),
        ]
        assert len(daily_averages(samples, utc)) == 2
        assert daily_averages(samples, plus_two) == [(datetime.date(2026, 2, 8), 50.0)]


# ======================================================================
# compute_condition_score
# ======================================================================


class TestBaselineGate:

    def test_six_days_is_not_ready(self):
        result = compute_condition_score(_make_samples([50] * 6))
        assert result.score is None
        assert not result.baseline_status.is_ready
        assert result.baseline_status.days_collected == 6
        assert result.baseline_status.progress == pytest.approx(6 / 7)

    def test_same_day_samples_count_once(self):
        samples = [HealthSample(value=50, date=TODAY - datetime.timedelta(hours=h)) for h in range(7)]
        result = compute_condition_score(samples)
        assert result.score is None
        assert result.baseline_status.days_collected == 1

    def test_empty(self):
        result = compute_condition_score([])
        assert result.score is None
        assert result.baseline_status.days_collected == 0

    def test_custom_required_days(self):
        cfg = ConditionConfig(required_days=3)
        assert compute_condition_score(_make_samples([50] * 3), config=cfg).score is not None


class TestConditionScore:

    def test_identical_days_score_fifty(self):
        result = compute_condition_score(_make_samples([50] * 7))
        assert result.baseline_status.is_ready
        assert result.score.score == 50
        assert result.score.status == ScoreStatus.FAIR
        assert result.score.date == TODAY.date()

    def test_formula(self):
        values = [52, 48, 55, 50, 47, 53, 60]
        result = compute_condition_score(_make_samples(values))
        expected = _score(50 + 25 * _expected_z(values))
        assert result.score.score == expected

    def test_high_hrv_is_positive(self):
        result = compute_condition_score(_make_samples([50, 51, 49, 50, 52, 48, 70]))
        assert result.score.score > 50
        [hrv] = result.contributions
        assert hrv.factor == ContributionFactor.HRV
        assert hrv.impact == ContributionImpact.POSITIVE
        assert hrv.detail == "Above baseline"

    def test_low_hrv_is_negative(self):
        result = compute_condition_score(_make_samples([50, 51, 49, 50, 52, 48, 30]))
        assert result.score.score < 50
        assert result.contributions[0].impact == ContributionImpact.NEGATIVE

    def test_neutral_hrv(self):
        result = compute_condition_score(_make_samples([50] * 7))
        assert result.contributions[0].detail == "Within normal range"

    def test_clamped(self):
        result = compute_condition_score(_make_samples([50, 50, 50, 50, 50, 50, 500]))
        assert result.score.score == 100
        assert result.score.status == ScoreStatus.EXCELLENT

    def test_as_of_stamps_date(self):
        as_of = datetime.date(2026, 2, 9)
        result = compute_condition_score(_make_samples([50] * 7), as_of=as_of)
        assert result.score.date == as_of

    def test_non_positive_today(self):
        result = compute_condition_score(_make_samples([50] * 6 + [0]))
        assert result.baseline_status.is_ready
        assert result.score is None


class TestRhrCorrection:

    VALUES = [50, 51, 49, 50, 52, 48, 40]

    def _raw(self, values):
        return 50 + 25 * _expected_z(values)

    def test_rising_rhr_penalises_low_hrv(self):
        result = compute_condition_score(_make_samples(self.VALUES), today_rhr=60, yesterday_rhr=55)
        expected = _score(self._raw(self.VALUES) - 2 * 5)
        assert result.score.score == expected
        rhr = result.contributions[1]
        assert rhr.factor == ContributionFactor.RHR
        assert rhr.impact == ContributionImpact.NEGATIVE
        assert rhr.detail == "Increased from yesterday"

    def test_falling_rhr_boosts_high_hrv(self):
        values = [50, 51, 49, 50, 52, 48, 56]
        result = compute_condition_score(_make_samples(values), today_rhr=50, yesterday_rhr=54)
        assert result.score.score == _score(self._raw(values) + 4)
        assert result.contributions[1].detail == "Decreased from yesterday"

    def test_rhr_against_hrv_direction_ignored(self):
        values = [50, 51, 49, 50, 52, 48, 56]
        with_rhr = compute_condition_score(_make_samples(values), today_rhr=60, yesterday_rhr=54)
        without = compute_condition_score(_make_samples(values))
        assert with_rhr.score.score == without.score.score

    def test_stable_rhr(self):
        result = compute_condition_score(_make_samples([50] * 7), today_rhr=55, yesterday_rhr=56)
        assert result.contributions[1].impact == ContributionImpact.NEUTRAL
        assert result.contributions[1].detail == "Stable"

    def test_missing_yesterday_skips_rhr(self):
        result = compute_condition_score(_make_samples([50] * 7), today_rhr=55)
        assert len(result.contributions) == 1


# ======================================================================
# hrv_z_score / build_condition_score
# ======================================================================


class TestHrvZScore:

    def test_not_ready(self):
        assert hrv_z_score(_make_samples([50] * 6)) is None

    def test_matches_formula(self):
        values = [52, 48, 55, 50, 47, 53, 60]
        assert hrv_z_score(_make_samples(values)) == pytest.approx(_expected_z(values))

    def test_unsorted_input(self):
        samples = _make_samples([52, 48, 55, 50, 47, 53, 60])
        assert hrv_z_score(list(reversed(samples))) == hrv_z_score(samples)


class TestBuildConditionScore:

    def test_rounds_and_labels(self):
        score = build_condition_score(79.5, TODAY.date())
        assert score.score == 80
        assert score.status == ScoreStatus.EXCELLENT
