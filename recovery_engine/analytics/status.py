"""
Shared level and status mappings.

Two fixed bucket tables are used across the engine:

* **Fatigue level** — normalised fatigue score (0.0-1.0) to a 1-10
  level.  Level 0 is reserved for "no data" and is never produced here.
* **Score status** — 0-100 integer score to a 5-bucket status, used by
  both the condition score and the wellness score.

Both mappings are monotonic: a higher input never maps to a lower bucket.
"""

from __future__ import annotations

import math

from recovery_engine.schemas.condition import ScoreStatus
from recovery_engine.schemas.fatigue import FatigueLevel

# (level, low inclusive, high exclusive)
_FATIGUE_THRESHOLDS: list[tuple[FatigueLevel, float, float]] = [
    (FatigueLevel.FULLY_RECOVERED, 0.0, 0.05),
    (FatigueLevel.WELL_RESTED, 0.05, 0.15),
    (FatigueLevel.LIGHT_FATIGUE, 0.15, 0.25),
    (FatigueLevel.MILD_FATIGUE, 0.25, 0.35),
    (FatigueLevel.MODERATE_FATIGUE, 0.35, 0.50),
    (FatigueLevel.NOTABLE_FATIGUE, 0.50, 0.65),
    (FatigueLevel.HIGH_FATIGUE, 0.65, 0.75),
    (FatigueLevel.VERY_HIGH_FATIGUE, 0.75, 0.85),
    (FatigueLevel.EXTREME_FATIGUE, 0.85, 0.95),
    (FatigueLevel.OVERTRAINED, 0.95, float("inf")),
]

# (status, low inclusive, high exclusive)
_STATUS_THRESHOLDS: list[tuple[ScoreStatus, float, float]] = [
    (ScoreStatus.WARNING, float("-inf"), 20),
    (ScoreStatus.TIRED, 20, 40),
    (ScoreStatus.FAIR, 40, 60),
    (ScoreStatus.GOOD, 60, 80),
    (ScoreStatus.EXCELLENT, 80, float("inf")),
]


def fatigue_level(normalized_score: float) -> FatigueLevel:
    """Map a normalised fatigue score to its 1-10 level.

    Non-finite input is treated as 0.0 (fully recovered).
    """
    if not math.isfinite(normalized_score):
        return FatigueLevel.FULLY_RECOVERED
    clamped = max(0.0, min(1.0, normalized_score))
    for level, low, high in _FATIGUE_THRESHOLDS:
        if low <= clamped < high:
            return level
    return FatigueLevel.OVERTRAINED


def clamp_score(score: float) -> int:
    """Clamp a raw score to 0-100 and round half up to an integer."""
    if not math.isfinite(score):
        return 0
    return int(math.floor(max(0.0, min(100.0, score)) + 0.5))


def score_status(score: int) -> ScoreStatus:
    """Map a 0-100 score to its 5-bucket status."""
    for status, low, high in _STATUS_THRESHOLDS:
        if low <= score < high:
            return status
    return ScoreStatus.EXCELLENT
