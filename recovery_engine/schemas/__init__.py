"""Pydantic schemas for engine inputs and outputs."""

from recovery_engine.schemas.muscle import ALL_MUSCLES, MuscleGroup, MuscleSize
from recovery_engine.schemas.exercise import (
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseRecordSnapshot,
)
from recovery_engine.schemas.health import (
    HealthSample,
    RecoveryModifiers,
    SleepStage,
    SleepStageType,
)
from recovery_engine.schemas.fatigue import (
    CompoundFatigueScore,
    FatigueBreakdown,
    FatigueLevel,
    WorkoutContribution,
)
from recovery_engine.schemas.condition import (
    BaselineStatus,
    ConditionScore,
    ConditionScoreResult,
    ScoreContribution,
    ScoreStatus,
)
from recovery_engine.schemas.recommendation import (
    ActiveRecoverySuggestion,
    MuscleFatigueState,
    NextReadyMuscle,
    SuggestedExercise,
    WorkoutSuggestion,
)
from recovery_engine.schemas.wellness import BodyTrend, SleepScore, WellnessScore

__all__ = [
    "ALL_MUSCLES",
    "MuscleGroup",
    "MuscleSize",
    "ExerciseCategory",
    "ExerciseDefinition",
    "ExerciseRecordSnapshot",
    "HealthSample",
    "RecoveryModifiers",
    "SleepStage",
    "SleepStageType",
    "CompoundFatigueScore",
    "FatigueBreakdown",
    "FatigueLevel",
    "WorkoutContribution",
    "BaselineStatus",
    "ConditionScore",
    "ConditionScoreResult",
    "ScoreContribution",
    "ScoreStatus",
    "ActiveRecoverySuggestion",
    "MuscleFatigueState",
    "NextReadyMuscle",
    "SuggestedExercise",
    "WorkoutSuggestion",
    "BodyTrend",
    "SleepScore",
    "WellnessScore",
]
