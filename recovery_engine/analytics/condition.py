"""
Daily condition score — HRV against the personal log-space baseline.

HRV is roughly log-normally distributed, so the baseline is built on
``ln(daily average HRV)``:

    baseline     = mean(ln(daily_avg))                  over collected days
    normal_range = max(population_std(ln(daily_avg)), 0.05)
    z            = (ln(today_avg) - baseline) / normal_range
    raw          = 50 + 25 z

A resting heart rate change confirms the HRV signal:

    RHR up   > 2 bpm and z < 0  →  raw -= 2 × delta
    RHR down > 2 bpm and z > 0  →  raw += |delta|

The final score is ``round(clamp(raw, 0, 100))``.

At least 7 distinct days of HRV are required before any score is
produced; until then only the :class:`BaselineStatus` is returned.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections import defaultdict
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from recovery_engine.analytics.status import clamp_score, score_status
from recovery_engine.core.timeutils import local_day
from recovery_engine.schemas.condition import (
    BaselineStatus,
    ConditionScore,
    ConditionScoreResult,
    ContributionFactor,
    ContributionImpact,
    ScoreContribution,
)
from recovery_engine.schemas.health import HealthSample

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================


class ConditionConfig(BaseModel):
    """Configuration for the condition score computation."""

    required_days: int = Field(7, ge=1)
    baseline_score: float = 50.0
    z_score_multiplier: float = 25.0
    minimum_std_dev: float = Field(0.05, gt=0.0)
    rhr_change_threshold: float = Field(2.0, ge=0.0)
    rhr_penalty_multiplier: float = 2.0
    hrv_contribution_z: float = Field(
        0.5, ge=0.0,
        description="|z| above which HRV is reported as a positive/negative factor",
    )


DEFAULT_CONDITION_CONFIG = ConditionConfig()


# ======================================================================
# Baseline
# ======================================================================


def daily_averages(
    samples: Iterable[HealthSample],
    tz: Optional[datetime.tzinfo] = None,
) -> list[tuple[datetime.date, float]]:
    """Average samples per local calendar day, newest day first.

    Non-finite sample values are dropped.
    """
    grouped: dict[datetime.date, list[float]] = defaultdict(list)
    for sample in samples:
        if not math.isfinite(sample.value):
            continue
        grouped[local_day(sample.date, tz)].append(sample.value)

    return sorted(
        ((day, sum(values) / len(values)) for day, values in grouped.items()),
        key=lambda item: item[0],
        reverse=True,
    )


def _log_baseline(
    averages: list[tuple[datetime.date, float]],
    cfg: ConditionConfig,
) -> Optional[tuple[float, float]]:
    """Return ``(baseline, normal_range)`` in log space, or ``None``."""
    ln_values = [math.log(v) for _, v in averages if v > 0]
    if not ln_values:
        return None

    baseline = sum(ln_values) / len(ln_values)
    variance = sum((x - baseline) ** 2 for x in ln_values) / len(ln_values)
    if not math.isfinite(variance):
        return None

    return baseline, max(math.sqrt(variance), cfg.minimum_std_dev)


def _today_z_score(
    averages: list[tuple[datetime.date, float]],
    cfg: ConditionConfig,
) -> Optional[float]:
    """z-score of the newest day against the baseline of all days."""
    if not averages:
        return None
    today_avg = averages[0][1]
    if today_avg <= 0:
        return None

    stats = _log_baseline(averages, cfg)
    if stats is None:
        return None
    baseline, normal_range = stats

    z = (math.log(today_avg) - baseline) / normal_range
    return z if math.isfinite(z) else None


def hrv_z_score(
    hrv_samples: Iterable[HealthSample],
    tz: Optional[datetime.tzinfo] = None,
    config: Optional[ConditionConfig] = None,
) -> Optional[float]:
    """Today's HRV z-score, or ``None`` until the baseline is ready.

    This is the input expected by
    :func:`~recovery_engine.analytics.modifiers.calculate_readiness_modifier`.
    """
    cfg = config or DEFAULT_CONDITION_CONFIG
    averages = daily_averages(hrv_samples, tz)
    if len(averages) < cfg.required_days:
        return None
    return _today_z_score(averages, cfg)


# ======================================================================
# Contributions
# ======================================================================


def _hrv_contribution(z: float, cfg: ConditionConfig) -> ScoreContribution:
    if z > cfg.hrv_contribution_z:
        impact, detail = ContributionImpact.POSITIVE, "Above baseline"
    elif z < -cfg.hrv_contribution_z:
        impact, detail = ContributionImpact.NEGATIVE, "Below baseline"
    else:
        impact, detail = ContributionImpact.NEUTRAL, "Within normal range"
    return ScoreContribution(factor=ContributionFactor.HRV, impact=impact, detail=detail)


def _rhr_contribution(delta: float, cfg: ConditionConfig) -> ScoreContribution:
    if delta < -cfg.rhr_change_threshold:
        impact, detail = ContributionImpact.POSITIVE, "Decreased from yesterday"
    elif delta > cfg.rhr_change_threshold:
        impact, detail = ContributionImpact.NEGATIVE, "Increased from yesterday"
    else:
        impact, detail = ContributionImpact.NEUTRAL, "Stable"
    return ScoreContribution(factor=ContributionFactor.RHR, impact=impact, detail=detail)


def _apply_rhr_correction(raw: float, z: float, delta: float, cfg: ConditionConfig) -> float:
    """Rising RHR confirms low HRV; falling RHR confirms high HRV."""
    if delta > cfg.rhr_change_threshold and z < 0:
        return raw - delta * cfg.rhr_penalty_multiplier
    if delta < -cfg.rhr_change_threshold and z > 0:
        return raw + abs(delta)
    return raw


def build_condition_score(
    raw_score: float,
    date: datetime.date,
    contributions: Optional[list[ScoreContribution]] = None,
) -> ConditionScore:
    """Clamp, round and label a raw condition score."""
    score = clamp_score(raw_score)
    return ConditionScore(
        score=score,
        status=score_status(score),
        date=date,
        contributions=contributions or [],
    )


# ======================================================================
# Main entry point
# ======================================================================


def compute_condition_score(
    hrv_samples: Iterable[HealthSample],
    today_rhr: Optional[float] = None,
    yesterday_rhr: Optional[float] = None,
    tz: Optional[datetime.tzinfo] = None,
    as_of: Optional[datetime.date] = None,
    config: Optional[ConditionConfig] = None,
) -> ConditionScoreResult:
    """Compute today's condition score.

    Args:
        hrv_samples: HRV readings over the trailing window, any order.
        today_rhr: Today's resting heart rate (bpm).
        yesterday_rhr: Yesterday's resting heart rate (bpm).
        tz: Timezone defining calendar days.  Naive timestamps are
            taken as already local.
        as_of: Date stamped on the score.  Defaults to the newest day
            with HRV data.
        config: Optional config override.

    Returns:
        :class:`ConditionScoreResult`; ``score`` is ``None`` when the
        baseline is not ready or today's HRV is unusable.
    """
    cfg = config or DEFAULT_CONDITION_CONFIG

    averages = daily_averages(hrv_samples, tz)
    baseline_status = BaselineStatus(
        days_collected=len(averages),
        days_required=cfg.required_days,
    )

    if not baseline_status.is_ready:
        logger.debug(
            "Condition baseline not ready: %d/%d days",
            baseline_status.days_collected, baseline_status.days_required,
        )
        return ConditionScoreResult(score=None, baseline_status=baseline_status)

    z = _today_z_score(averages, cfg)
    if z is None:
        logger.debug("Condition score unavailable: no usable HRV average for today")
        return ConditionScoreResult(score=None, baseline_status=baseline_status)

    raw = cfg.baseline_score + z * cfg.z_score_multiplier
    contributions = [_hrv_contribution(z, cfg)]

    if (
        today_rhr is not None and yesterday_rhr is not None
        and math.isfinite(today_rhr) and math.isfinite(yesterday_rhr)
    ):
        delta = today_rhr - yesterday_rhr
        raw = _apply_rhr_correction(raw, z, delta, cfg)
        contributions.append(_rhr_contribution(delta, cfg))

    score = build_condition_score(raw, as_of or averages[0][0], contributions)

    return ConditionScoreResult(
        score=score,
        baseline_status=baseline_status,
        contributions=contributions,
    )
