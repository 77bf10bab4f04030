"""
Workout recommendation schemas.

The recommendation engine either returns a ranked list of
:class:`SuggestedExercise` for up to three focus muscles, or a **rest
day** (empty exercise list) with active-recovery ideas and the muscle
expected to be ready soonest.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from recovery_engine.schemas.exercise import ExerciseDefinition
from recovery_engine.schemas.fatigue import FatigueLevel
from recovery_engine.schemas.muscle import MuscleGroup


class MuscleFatigueState(BaseModel):
    """Linear recovery state of one muscle, used for ranking."""

    muscle: MuscleGroup
    last_trained: Optional[datetime.datetime] = Field(
        None, description="Most recent session touching this muscle (None if never trained)",
    )
    hours_since_last_trained: Optional[float] = Field(None, ge=0.0)
    weekly_volume: int = Field(
        0, ge=0,
        description="Sets in the trailing 7 days (secondary counts half, min 1)",
    )
    recovery_percent: float = Field(
        ..., ge=0.0, le=1.0,
        description="0.0 = just trained, 1.0 = fully recovered",
    )
    fatigue_level: FatigueLevel = Field(
        ...,
        description="Compound fatigue level if known, else derived from 1 - recovery_percent",
    )
    is_recovered: bool
    is_overworked: bool

    @property
    def days_since_last_trained(self) -> Optional[int]:
        if self.hours_since_last_trained is None:
            return None
        return int(self.hours_since_last_trained // 24)


class SuggestedExercise(BaseModel):
    """One exercise in a workout suggestion."""

    definition: ExerciseDefinition
    suggested_sets: int = Field(..., ge=1)
    reason: str
    alternatives: list[ExerciseDefinition] = Field(default_factory=list, max_length=3)

    @property
    def id(self) -> str:
        return self.definition.id


class ActiveRecoverySuggestion(BaseModel):
    """Light activity idea for rest days."""

    id: str
    title: str
    duration: str


class NextReadyMuscle(BaseModel):
    """The muscle that will finish recovering soonest."""

    muscle: MuscleGroup
    ready_date: datetime.datetime


class WorkoutSuggestion(BaseModel):
    """Complete recommendation output."""

    exercises: list[SuggestedExercise] = Field(default_factory=list)
    reasoning: str
    focus_muscles: list[MuscleGroup] = Field(default_factory=list, max_length=3)
    active_recovery_suggestions: list[ActiveRecoverySuggestion] = Field(default_factory=list)
    next_ready_muscle: Optional[NextReadyMuscle] = None

    @property
    def is_rest_day(self) -> bool:
        return not self.exercises
