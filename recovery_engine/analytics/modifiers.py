"""
Recovery modifiers — sleep and HRV/RHR readiness.

Two dimensionless scalars scale the fatigue decay time constant:

    tau_effective = tau_base / (sleep_modifier × readiness_modifier)

A modifier **above 1.0 means faster recovery** (smaller tau), below 1.0
means slower recovery.  This is the opposite of a "stress" scale.

Sleep modifier (0.5-1.25)
-------------------------
Base factor by hours slept, plus a quality bonus for deep and REM ratio:

    >= 8h  1.15      deep/REM >= 20%  +0.05 each
    7-8h   1.00      deep/REM <  10%  -0.05 each
    6-7h   0.85
    5-6h   0.70
    <  5h  0.55

Readiness modifier (0.6-1.20)
-----------------------------
Base factor by HRV z-score against the personal baseline, refined by the
day-over-day resting heart rate change:

    z >= 1.0        1.15      RHR delta >= +5 bpm  cap at 0.75
    0 <= z < 1.0    1.05      RHR delta <= -2 bpm  +0.05 (cap 1.20)
    -0.5 <= z < 0   1.00
    -1.0 <= z < -.5 0.85
    z < -1.0        0.70

Missing data always yields the neutral value 1.0.
"""

from __future__ import annotations

import math
from typing import Optional

from recovery_engine.schemas.health import RecoveryModifiers

SLEEP_MODIFIER_RANGE: tuple[float, float] = (0.5, 1.25)
READINESS_MODIFIER_RANGE: tuple[float, float] = (0.6, 1.20)

NEUTRAL_MODIFIER = 1.0

# (min hours inclusive, factor), checked top-down.
_SLEEP_HOURS_FACTORS: list[tuple[float, float]] = [
    (8.0, 1.15),
    (7.0, 1.00),
    (6.0, 0.85),
    (5.0, 0.70),
]
_SHORT_SLEEP_FACTOR = 0.55

_GOOD_STAGE_RATIO = 0.20
_POOR_STAGE_RATIO = 0.10
_STAGE_BONUS = 0.05

# (min z-score inclusive, factor), checked top-down.
_HRV_Z_FACTORS: list[tuple[float, float]] = [
    (1.0, 1.15),
    (0.0, 1.05),
    (-0.5, 1.00),
    (-1.0, 0.85),
]
_LOW_HRV_FACTOR = 0.70

_RHR_RISE_BPM = 5.0
_RHR_DROP_BPM = -2.0
_RHR_RISE_CAP = 0.75
_RHR_DROP_BONUS = 0.05
_RHR_ONLY_RISE = 0.85
_RHR_ONLY_DROP = 1.05


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(value, high))


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def _stage_bonus(ratio: Optional[float]) -> float:
    """Quality bonus for one sleep stage ratio (ignored if invalid)."""
    if not _is_finite(ratio) or not 0.0 <= ratio <= 1.0:
        return 0.0
    if ratio >= _GOOD_STAGE_RATIO:
        return _STAGE_BONUS
    if ratio < _POOR_STAGE_RATIO:
        return -_STAGE_BONUS
    return 0.0


def calculate_sleep_modifier(
    total_sleep_minutes: Optional[float],
    deep_sleep_ratio: Optional[float] = None,
    rem_sleep_ratio: Optional[float] = None,
) -> float:
    """Sleep-based recovery modifier.

    Args:
        total_sleep_minutes: Time asleep last night.  Missing, non-finite,
            negative or > 1440 yields the neutral 1.0.
        deep_sleep_ratio: Fraction of sleep in the deep stage (0-1).
        rem_sleep_ratio: Fraction of sleep in REM (0-1).

    Returns:
        Modifier in [0.5, 1.25].  Higher = faster recovery.
    """
    if not _is_finite(total_sleep_minutes) or not 0.0 <= total_sleep_minutes <= 1440.0:
        return NEUTRAL_MODIFIER

    hours = total_sleep_minutes / 60.0
    base = _SHORT_SLEEP_FACTOR
    for min_hours, factor in _SLEEP_HOURS_FACTORS:
        if hours >= min_hours:
            base = factor
            break

    bonus = _stage_bonus(deep_sleep_ratio) + _stage_bonus(rem_sleep_ratio)
    return _clamp(base + bonus, SLEEP_MODIFIER_RANGE)


def calculate_readiness_modifier(
    hrv_z_score: Optional[float],
    rhr_delta: Optional[float] = None,
) -> float:
    """HRV/RHR-based readiness modifier.

    Args:
        hrv_z_score: Today's HRV z-score against the personal log-space
            baseline (see :func:`~recovery_engine.analytics.condition.hrv_z_score`).
        rhr_delta: Today's resting HR minus yesterday's (bpm).

    Returns:
        Modifier in [0.6, 1.20].  Higher = faster recovery.
    """
    has_rhr = _is_finite(rhr_delta)

    if not _is_finite(hrv_z_score):
        # RHR alone.
        if has_rhr:
            if rhr_delta >= _RHR_RISE_BPM:
                return _RHR_ONLY_RISE
            if rhr_delta <= _RHR_DROP_BPM:
                return _RHR_ONLY_DROP
        return NEUTRAL_MODIFIER

    modifier = _LOW_HRV_FACTOR
    for min_z, factor in _HRV_Z_FACTORS:
        if hrv_z_score >= min_z:
            modifier = factor
            break

    if has_rhr:
        if rhr_delta >= _RHR_RISE_BPM:
            modifier = min(modifier, _RHR_RISE_CAP)
        elif rhr_delta <= _RHR_DROP_BPM:
            modifier = min(modifier + _RHR_DROP_BONUS, READINESS_MODIFIER_RANGE[1])

    return _clamp(modifier, READINESS_MODIFIER_RANGE)


def clamp_sleep_modifier(value: float) -> float:
    """Re-apply the sleep modifier range; non-finite becomes neutral."""
    if not math.isfinite(value):
        return NEUTRAL_MODIFIER
    return _clamp(value, SLEEP_MODIFIER_RANGE)


def clamp_readiness_modifier(value: float) -> float:
    """Re-apply the readiness modifier range; non-finite becomes neutral."""
    if not math.isfinite(value):
        return NEUTRAL_MODIFIER
    return _clamp(value, READINESS_MODIFIER_RANGE)


def rhr_delta(
    today_rhr: Optional[float],
    yesterday_rhr: Optional[float],
) -> Optional[float]:
    """Day-over-day resting heart rate change, or ``None`` if unknown."""
    if not _is_finite(today_rhr) or not _is_finite(yesterday_rhr):
        return None
    return today_rhr - yesterday_rhr


def calculate_modifiers(
    total_sleep_minutes: Optional[float] = None,
    deep_sleep_ratio: Optional[float] = None,
    rem_sleep_ratio: Optional[float] = None,
    hrv_z_score: Optional[float] = None,
    rhr_change: Optional[float] = None,
) -> RecoveryModifiers:
    """Compute both modifiers at once."""
    return RecoveryModifiers(
        sleep_modifier=calculate_sleep_modifier(
            total_sleep_minutes, deep_sleep_ratio, rem_sleep_ratio,
        ),
        readiness_modifier=calculate_readiness_modifier(hrv_z_score, rhr_change),
    )
