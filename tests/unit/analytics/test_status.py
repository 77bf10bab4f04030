"""
Unit tests for the shared fatigue-level and score-status mappings.
"""

import math

import pytest

from recovery_engine.analytics.status import clamp_score, fatigue_level, score_status
from recovery_engine.schemas.condition import ScoreStatus
from recovery_engine.schemas.fatigue import FatigueLevel


# ======================================================================
# fatigue_level
# ======================================================================


class TestFatigueLevel:
    """Normalised score → 1-10 level."""

    @pytest.mark.parametrize("value,expected", [
        (0.0, 1),
        (0.049, 1),
        (0.05, 2),
        (0.149, 2),
        (0.15, 3),
        (0.25, 4),
        (0.35, 5),
        (0.50, 6),
        (0.65, 7),
        (0.75, 8),
        (0.85, 9),
        (0.95, 10),
        (1.0, 10),
    ])
    def test_boundaries(self, value, expected):
        assert fatigue_level(value) == expected

    def test_monotonic(self):
        levels = [fatigue_level(i / 1000) for i in range(1001)]
        assert levels == sorted(levels)

    def test_out_of_range_is_clamped(self):
        assert fatigue_level(-0.5) == FatigueLevel.FULLY_RECOVERED
        assert fatigue_level(3.0) == FatigueLevel.OVERTRAINED

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_is_fully_recovered(self, value):
        assert fatigue_level(value) == FatigueLevel.FULLY_RECOVERED

    def test_never_returns_no_data(self):
        assert all(fatigue_level(i / 100) != FatigueLevel.NO_DATA for i in range(101))


class TestFatigueLevelHelpers:

    def test_training_recommended_up_to_four(self):
        assert FatigueLevel.MILD_FATIGUE.is_training_recommended
        assert not FatigueLevel.MODERATE_FATIGUE.is_training_recommended

    def test_rest_advised_from_eight(self):
        assert FatigueLevel.VERY_HIGH_FATIGUE.is_rest_advised
        assert not FatigueLevel.HIGH_FATIGUE.is_rest_advised


# ======================================================================
# score_status / clamp_score
# ======================================================================


class TestScoreStatus:

    @pytest.mark.parametrize("score,expected", [
        (0, ScoreStatus.WARNING),
        (19, ScoreStatus.WARNING),
        (20, ScoreStatus.TIRED),
        (39, ScoreStatus.TIRED),
        (40, ScoreStatus.FAIR),
        (59, ScoreStatus.FAIR),
        (60, ScoreStatus.GOOD),
        (79, ScoreStatus.GOOD),
        (80, ScoreStatus.EXCELLENT),
        (100, ScoreStatus.EXCELLENT),
    ])
    def test_buckets(self, score, expected):
        assert score_status(score) == expected

    def test_label_and_message(self):
        assert ScoreStatus.FAIR.label == "Fair"
        assert ScoreStatus.WARNING.guide_message == "Rest is recommended"


class TestClampScore:

    @pytest.mark.parametrize("raw,expected", [
        (-12.0, 0),
        (0.0, 0),
        (49.5, 50),
        (50.49, 50),
        (62.5, 63),
        (100.0, 100),
        (140.0, 100),
    ])
    def test_clamp_and_round_half_up(self, raw, expected):
        assert clamp_score(raw) == expected

    def test_nan_is_zero(self):
        assert clamp_score(math.nan) == 0
