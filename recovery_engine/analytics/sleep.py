"""
Nightly sleep score and sleep-modifier inputs.

Score (0-100) is the sum of three parts:

    duration    0-40   7-9h → 40, 6-10h → 30, else 40 - |h - 8| × 10
    deep ratio  0-30   15-25% → 30, else 30 - |r - 0.20| × 150
    efficiency  0-30   asleep / in-bed × 30

Awake stages count towards time in bed but not towards time asleep.
"""

from __future__ import annotations

from typing import Iterable, Optional

from recovery_engine.schemas.health import SleepStage, SleepStageType
from recovery_engine.schemas.wellness import SleepScore

_IDEAL_HOURS = (7.0, 9.0)
_ACCEPTABLE_HOURS = (6.0, 10.0)
_IDEAL_DEEP_RATIO = (0.15, 0.25)
_TARGET_DEEP_RATIO = 0.20


def _minutes(stages: Iterable[SleepStage], *types: SleepStageType) -> float:
    return sum(s.duration_minutes for s in stages if s.stage in types)


_ASLEEP_STAGES = (
    SleepStageType.CORE,
    SleepStageType.DEEP,
    SleepStageType.REM,
    SleepStageType.UNSPECIFIED,
)


def _duration_points(hours: float) -> float:
    if _IDEAL_HOURS[0] <= hours <= _IDEAL_HOURS[1]:
        return 40.0
    if _ACCEPTABLE_HOURS[0] <= hours <= _ACCEPTABLE_HOURS[1]:
        return 30.0
    return max(0.0, 40.0 - abs(hours - 8.0) * 10.0)


def _deep_points(deep_ratio: float) -> float:
    if _IDEAL_DEEP_RATIO[0] <= deep_ratio <= _IDEAL_DEEP_RATIO[1]:
        return 30.0
    return max(0.0, 30.0 - abs(deep_ratio - _TARGET_DEEP_RATIO) * 150.0)


def compute_sleep_score(stages: Iterable[SleepStage]) -> SleepScore:
    """Score one night of sleep stages.

    A night with no time asleep scores 0.
    """
    stages = list(stages)
    in_bed = sum(s.duration_minutes for s in stages)
    asleep = _minutes(stages, *_ASLEEP_STAGES)

    if asleep <= 0:
        return SleepScore(score=0, total_minutes=0.0, efficiency=0.0)

    efficiency = asleep / in_bed * 100.0
    deep_ratio = _minutes(stages, SleepStageType.DEEP) / asleep

    total = (
        _duration_points(asleep / 60.0)
        + _deep_points(deep_ratio)
        + min(30.0, efficiency / 100.0 * 30.0)
    )
    return SleepScore(
        score=int(min(100.0, total)),
        total_minutes=asleep,
        efficiency=efficiency,
    )


def sleep_modifier_inputs(
    stages: Iterable[SleepStage],
) -> tuple[Optional[float], Optional[float], Optional[float]]:
    """Return ``(total_sleep_minutes, deep_ratio, rem_ratio)``.

    All three are ``None`` when no sleep was recorded, which the sleep
    modifier treats as missing data.
    """
    stages = list(stages)
    asleep = _minutes(stages, *_ASLEEP_STAGES)
    if asleep <= 0:
        return None, None, None
    return (
        asleep,
        _minutes(stages, SleepStageType.DEEP) / asleep,
        _minutes(stages, SleepStageType.REM) / asleep,
    )
