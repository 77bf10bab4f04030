"""
Compound fatigue schemas.

A :class:`CompoundFatigueScore` is the per-muscle output of the fatigue
engine: a normalised score, its 10-level category and an audit trail
(:class:`FatigueBreakdown`) listing every session that contributed.

Normalised scores are 0.0-1.0 where:
    0.0 = fully recovered (no residual load)
    1.0 = saturated / overtrained
"""

import datetime
from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, Field

from recovery_engine.schemas.muscle import MuscleGroup


class FatigueLevel(IntEnum):
    """10-level muscle fatigue scale.  Level 0 means no data."""
    NO_DATA = 0
    FULLY_RECOVERED = 1
    WELL_RESTED = 2
    LIGHT_FATIGUE = 3
    MILD_FATIGUE = 4
    MODERATE_FATIGUE = 5
    NOTABLE_FATIGUE = 6
    HIGH_FATIGUE = 7
    VERY_HIGH_FATIGUE = 8
    EXTREME_FATIGUE = 9
    OVERTRAINED = 10

    @property
    def is_training_recommended(self) -> bool:
        return self <= FatigueLevel.MILD_FATIGUE

    @property
    def is_rest_advised(self) -> bool:
        return self >= FatigueLevel.VERY_HIGH_FATIGUE


class WorkoutContribution(BaseModel):
    """One session's contribution to one muscle's fatigue."""

    date: datetime.datetime
    exercise_name: Optional[str] = None
    raw_load: float = Field(..., ge=0.0, description="Load before time decay (engagement applied)")
    decayed_load: float = Field(..., ge=0.0, description="Load remaining after exponential decay")


class FatigueBreakdown(BaseModel):
    """How a compound fatigue score was obtained."""

    workout_contributions: list[WorkoutContribution] = Field(
        default_factory=list,
        description="Contributing sessions, newest first",
    )
    base_fatigue: float = Field(
        ..., ge=0.0,
        description="Sum of decayed loads before normalisation",
    )
    sleep_modifier: float = Field(..., description="Sleep modifier applied (0.5-1.25)")
    readiness_modifier: float = Field(..., description="Readiness modifier applied (0.6-1.20)")
    effective_tau: float = Field(..., gt=0.0, description="Decay time constant used (hours)")


class CompoundFatigueScore(BaseModel):
    """Per-muscle fatigue combining workout load, sleep and HRV/RHR."""

    muscle: MuscleGroup
    normalized_score: float = Field(..., ge=0.0, le=1.0)
    level: FatigueLevel
    breakdown: FatigueBreakdown
