"""
Compound muscle fatigue — per-muscle exponential decay model.

This module computes how fatigued each muscle group is based on recent
workout history, last night's sleep and today's HRV/RHR readiness.

Model
-----
Each logged session deposits a load on every muscle it engages.  The
residual fatigue from that load decays exponentially:

    fatigue_from_session(t) = load × engagement × exp(-t / tau)

where ``t`` is hours elapsed and ``tau`` is the muscle's effective time
constant.  Fatigue from multiple sessions is summed (superposition) and
normalised against a size-dependent saturation threshold:

    normalised = min(total_fatigue / saturation, 1.0)

Time constant
-------------
    tau = max(base_recovery_hours × 2 / max(sleep × readiness, 0.1), 1.0)

Both modifiers are > 1.0 on good days, shrinking tau (faster recovery).

Session load
------------
First applicable strategy wins:

1. Strength — ``(total_weight × total_reps / 70) / 100``
   (70 kg reference body weight; a 100 kg 5×5 squat ≈ 0.36)
2. Cardio with distance — ``distance_km × sqrt(hours) / 10``
   (5 km in 30 min ≈ 0.35)
3. Cardio duration only — ``minutes / 60``
4. Fallback — ``sets × 0.1``, or 0.05 so any logged session counts

Design choices
--------------
1. **Engagement weighting** — primary muscles take the full load,
   secondary muscles 40%.
2. **Fixed lookback** — only the last 14 days are considered.  With the
   largest tau (144h at neutral modifiers) a 14-day-old session keeps
   ~10% of its load, which the saturation threshold absorbs.
3. **Fail soft** — any non-finite intermediate drops the contribution
   instead of raising.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from recovery_engine.analytics.modifiers import (
    clamp_readiness_modifier,
    clamp_sleep_modifier,
)
from recovery_engine.analytics.status import fatigue_level
from recovery_engine.core.timeutils import hours_between
from recovery_engine.schemas.exercise import ExerciseRecordSnapshot
from recovery_engine.schemas.fatigue import (
    CompoundFatigueScore,
    FatigueBreakdown,
    FatigueLevel,
    WorkoutContribution,
)
from recovery_engine.schemas.muscle import MuscleGroup, MuscleSize, muscle_size

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

# Cumulative decayed load at which the normalised score reaches 1.0.
_DEFAULT_SATURATION: dict[MuscleSize, float] = {
    MuscleSize.LARGE: 15.0,
    MuscleSize.MEDIUM: 12.0,
    MuscleSize.SMALL: 10.0,
}

# Exponents below this are treated as full decay (exp underflow noise).
_MIN_EXPONENT = -500.0


class FatigueConfig(BaseModel):
    """Configuration for the compound fatigue computation."""

    lookback_days: int = Field(14, ge=1)
    reference_body_weight_kg: float = Field(70.0, gt=0.0)
    primary_engagement: float = Field(1.0, ge=0.0, le=1.0)
    secondary_engagement: float = Field(0.4, ge=0.0, le=1.0)
    tau_multiplier: float = Field(
        2.0, gt=0.0,
        description="Base tau = muscle recovery hours × this multiplier",
    )
    min_combined_modifier: float = Field(0.1, gt=0.0)
    min_tau_hours: float = Field(1.0, gt=0.0)
    saturation: dict[MuscleSize, float] = Field(
        default_factory=lambda: dict(_DEFAULT_SATURATION),
    )


DEFAULT_FATIGUE_CONFIG = FatigueConfig()


# ======================================================================
# Session load
# ======================================================================


def _fallback_load(record: ExerciseRecordSnapshot) -> float:
    """Set count as a rough proxy, with a non-zero floor."""
    sets = record.completed_set_count
    return sets * 0.1 if sets > 0 else 0.05


def _positive(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value) and value > 0


def session_load(
    record: ExerciseRecordSnapshot,
    config: Optional[FatigueConfig] = None,
) -> float:
    """Raw load of one session, before engagement and decay."""
    cfg = config or DEFAULT_FATIGUE_CONFIG

    # Strength: volume normalised by the reference body weight.
    if _positive(record.total_weight_kg) and _positive(record.total_reps):
        volume = (record.total_weight_kg * record.total_reps) / cfg.reference_body_weight_kg
        if not math.isfinite(volume):
            return _fallback_load(record)
        return volume / 100.0

    # Cardio: distance weighted by the square root of duration.
    if _positive(record.distance_km) and _positive(record.duration_minutes):
        load = record.distance_km * math.sqrt(max(record.duration_minutes / 60.0, 0.01))
        if not math.isfinite(load):
            return _fallback_load(record)
        return load / 10.0

    # Cardio without distance.
    if _positive(record.duration_minutes):
        load = record.duration_minutes / 60.0
        if not math.isfinite(load):
            return _fallback_load(record)
        return load

    return _fallback_load(record)


# ======================================================================
# Helpers
# ======================================================================


def effective_tau(
    muscle: MuscleGroup,
    sleep_modifier: float,
    readiness_modifier: float,
    config: Optional[FatigueConfig] = None,
) -> float:
    """Decay time constant (hours) for *muscle* under the given modifiers."""
    cfg = config or DEFAULT_FATIGUE_CONFIG
    base_tau = muscle.recovery_hours * cfg.tau_multiplier
    combined = max(sleep_modifier * readiness_modifier, cfg.min_combined_modifier)
    return max(base_tau / combined, cfg.min_tau_hours)


def decay_factor(hours_since: float, tau: float) -> float:
    """``exp(-hours_since / tau)``, with extreme exponents flushed to 0."""
    exponent = -hours_since / tau
    if exponent < _MIN_EXPONENT:
        return 0.0
    return math.exp(exponent)


def _engagement(
    muscle: MuscleGroup,
    record: ExerciseRecordSnapshot,
    cfg: FatigueConfig,
) -> float:
    if muscle in record.primary_muscles:
        return cfg.primary_engagement
    if muscle in record.secondary_muscles:
        return cfg.secondary_engagement
    return 0.0


def saturation_threshold(
    muscle: MuscleGroup,
    config: Optional[FatigueConfig] = None,
) -> float:
    """Saturation load for *muscle*'s size bucket."""
    cfg = config or DEFAULT_FATIGUE_CONFIG
    return cfg.saturation[muscle_size(muscle)]


# ======================================================================
# Core computation
# ======================================================================


def _compute_muscle_score(
    muscle: MuscleGroup,
    records: list[ExerciseRecordSnapshot],
    sleep_modifier: float,
    readiness_modifier: float,
    reference_date: datetime.datetime,
    cfg: FatigueConfig,
) -> CompoundFatigueScore:
    """Compute the compound fatigue score of a single muscle.

    Args:
        muscle: Muscle to score.
        records: Sessions already restricted to the lookback window.
        sleep_modifier: Clamped sleep modifier.
        readiness_modifier: Clamped readiness modifier.
        reference_date: Instant at which fatigue is evaluated.
        cfg: Fatigue configuration.

    Returns:
        :class:`CompoundFatigueScore` for this muscle.
    """
    tau = effective_tau(muscle, sleep_modifier, readiness_modifier, cfg)

    contributions: list[WorkoutContribution] = []

    for record in records:
        engagement = _engagement(muscle, record, cfg)
        if engagement <= 0:
            continue

        raw_load = session_load(record, cfg) * engagement
        if not math.isfinite(raw_load) or raw_load <= 0:
            continue

        hours_since = max(0.0, hours_between(reference_date, record.date))
        if not math.isfinite(hours_since):
            continue

        decayed = raw_load * decay_factor(hours_since, tau)
        if not math.isfinite(decayed):
            logger.debug("Skipping non-finite decayed load for %s at %s", muscle.value, record.date)
            continue

        contributions.append(WorkoutContribution(
            date=record.date,
            exercise_name=record.exercise_name,
            raw_load=raw_load,
            decayed_load=decayed,
        ))

    total_decayed = math.fsum(c.decayed_load for c in contributions)
    threshold = saturation_threshold(muscle, cfg)
    if total_decayed > 0 and threshold > 0:
        normalized = min(total_decayed / threshold, 1.0)
    else:
        normalized = 0.0

    level = FatigueLevel.NO_DATA if not contributions else fatigue_level(normalized)

    contributions.sort(key=lambda c: c.date, reverse=True)

    return CompoundFatigueScore(
        muscle=muscle,
        normalized_score=normalized,
        level=level,
        breakdown=FatigueBreakdown(
            workout_contributions=contributions,
            base_fatigue=total_decayed,
            sleep_modifier=sleep_modifier,
            readiness_modifier=readiness_modifier,
            effective_tau=tau,
        ),
    )


# ======================================================================
# Main entry point
# ======================================================================


def compute_compound_fatigue(
    muscles: Iterable[MuscleGroup],
    records: Iterable[ExerciseRecordSnapshot],
    sleep_modifier: float,
    readiness_modifier: float,
    reference_date: datetime.datetime,
    config: Optional[FatigueConfig] = None,
) -> list[CompoundFatigueScore]:
    """Compute compound fatigue for each requested muscle.

    Args:
        muscles: Muscles to score (output preserves this order).
        records: Workout history, in any order.
        sleep_modifier: Output of
            :func:`~recovery_engine.analytics.modifiers.calculate_sleep_modifier`.
        readiness_modifier: Output of
            :func:`~recovery_engine.analytics.modifiers.calculate_readiness_modifier`.
        reference_date: Evaluation instant.  Sessions after it or older
            than the lookback window are ignored.
        config: Optional config override.

    Returns:
        One :class:`CompoundFatigueScore` per requested muscle.
    """
    cfg = config or DEFAULT_FATIGUE_CONFIG

    cutoff = reference_date - datetime.timedelta(days=cfg.lookback_days)
    relevant = sorted(
        (r for r in records if cutoff <= r.date <= reference_date),
        key=lambda r: (r.date, r.exercise_name or ""),
    )

    sleep = clamp_sleep_modifier(sleep_modifier)
    readiness = clamp_readiness_modifier(readiness_modifier)

    return [
        _compute_muscle_score(muscle, relevant, sleep, readiness, reference_date, cfg)
        for muscle in muscles
    ]


def fatigue_by_muscle(scores: Iterable[CompoundFatigueScore]) -> dict[MuscleGroup, CompoundFatigueScore]:
    """Index a score list by muscle."""
    return {s.muscle: s for s in scores}
