"""
HTTP request bodies for the analytics endpoints.

Every request carries the full snapshot it needs; the service keeps no
state between calls.  Timestamps in one request must be either all
timezone-aware or all naive; mixed requests fail validation.
"""

import datetime
from typing import Optional, Self

from pydantic import BaseModel, Field, model_validator

from recovery_engine.core.timeutils import mixed_awareness
from recovery_engine.schemas.exercise import ExerciseRecordSnapshot
from recovery_engine.schemas.health import HealthSample, SleepStage
from recovery_engine.schemas.muscle import MuscleGroup
from recovery_engine.schemas.wellness import BodyTrend


def _check_record_dates(request):
    """Reject histories whose record dates differ from ``reference_date`` in awareness."""
    if mixed_awareness(request.reference_date, (r.date for r in request.records)):
        raise ValueError(
            "record dates and reference_date must all be timezone-aware or all naive"
        )
    return request


class ModifiersRequest(BaseModel):
    """Raw signals for the sleep and readiness modifiers."""

    sleep_stages: list[SleepStage] = Field(default_factory=list, description="Last night's sleep stages")
    hrv_samples: list[HealthSample] = Field(default_factory=list, description="HRV history (ms)")
    today_rhr: Optional[float] = None
    yesterday_rhr: Optional[float] = None


class FatigueRequest(BaseModel):
    """Workout history plus the modifiers to apply."""

    records: list[ExerciseRecordSnapshot] = Field(default_factory=list)
    reference_date: datetime.datetime
    muscles: Optional[list[MuscleGroup]] = Field(None, description="Defaults to every muscle")
    sleep_modifier: float = 1.0
    readiness_modifier: float = 1.0

    @model_validator(mode="after")
    def validate_record_dates(self) -> Self:
        return _check_record_dates(self)


class ConditionRequest(BaseModel):
    hrv_samples: list[HealthSample] = Field(default_factory=list)
    today_rhr: Optional[float] = None
    yesterday_rhr: Optional[float] = None
    as_of: Optional[datetime.date] = None


class RecommendationRequest(BaseModel):
    """Workout history for the next-workout recommendation.

    ``exercise_ids`` restricts the built-in catalog to a subset (e.g. the
    equipment available today).  When ``use_compound_fatigue`` is set,
    compound fatigue is computed with the given modifiers and feeds the
    overworked check.
    """

    records: list[ExerciseRecordSnapshot] = Field(default_factory=list)
    reference_date: datetime.datetime
    exercise_ids: Optional[list[str]] = None
    use_compound_fatigue: bool = True
    sleep_modifier: float = 1.0
    readiness_modifier: float = 1.0

    @model_validator(mode="after")
    def validate_record_dates(self) -> Self:
        return _check_record_dates(self)


class WellnessRequest(BaseModel):
    """Wellness components.  ``sleep_stages`` wins over ``sleep_score``."""

    sleep_score: Optional[int] = Field(None, ge=0, le=100)
    sleep_stages: Optional[list[SleepStage]] = None
    condition_score: Optional[int] = Field(None, ge=0, le=100)
    body_trend: Optional[BodyTrend] = None
