"""
Exercise schemas.

* :class:`ExerciseDefinition` — a catalog entry (what an exercise is).
* :class:`ExerciseRecordSnapshot` — one logged session of an exercise
  (what the user did).  Snapshots are handed to the engine by the
  persistence layer and are never modified.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from recovery_engine.schemas.muscle import MuscleGroup


class ExerciseCategory(str, Enum):
    """Broad exercise category used for recommendation filtering."""
    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility"
    BODYWEIGHT = "bodyweight"


class ExerciseDefinition(BaseModel):
    """A single exercise in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique catalog ID, e.g. 'bench_press'")
    name: str = Field(..., min_length=1, description="Display name")
    category: ExerciseCategory
    primary_muscles: list[MuscleGroup] = Field(default_factory=list)
    secondary_muscles: list[MuscleGroup] = Field(default_factory=list)
    equipment: Optional[str] = Field(None, description="Equipment tag, e.g. 'barbell'")

    @property
    def is_compound(self) -> bool:
        """Multi-muscle movement: two or more primaries, or any secondary."""
        return len(self.primary_muscles) >= 2 or bool(self.secondary_muscles)


class ExerciseRecordSnapshot(BaseModel):
    """One completed exercise session, as logged by the user.

    Strength sessions carry ``total_weight_kg`` / ``total_reps``; cardio
    sessions carry ``distance_km`` / ``duration_minutes``.  Every field is
    optional except the timestamp, muscles and set count, and the engine
    falls back gracefully when metrics are missing.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.datetime = Field(..., description="When the session was performed")
    exercise_definition_id: Optional[str] = Field(None, description="Catalog exercise ID, if any")
    exercise_name: Optional[str] = None
    primary_muscles: list[MuscleGroup] = Field(default_factory=list)
    secondary_muscles: list[MuscleGroup] = Field(default_factory=list)
    completed_set_count: int = Field(0, ge=0, description="Number of completed sets")

    # Strength metrics
    total_weight_kg: Optional[float] = Field(None, description="Sum of weight over all sets (kg)")
    total_reps: Optional[int] = Field(None, description="Sum of reps over all sets")

    # Cardio metrics
    distance_km: Optional[float] = None
    duration_minutes: Optional[float] = None

    def engages(self, muscle: MuscleGroup) -> bool:
        """Whether *muscle* is a primary or secondary muscle of this session."""
        return muscle in self.primary_muscles or muscle in self.secondary_muscles
