"""
Muscle group schema.

The MuscleGroup is the fundamental unit of fatigue tracking.  Every
exercise record engages a set of primary and secondary muscle groups, and
every muscle group carries two constants derived from its size bucket:

- Base recovery hours: time for a typical session's fatigue to clear
- Saturation threshold: accumulated decayed load at which the normalised
  fatigue score reaches 1.0 (see :mod:`recovery_engine.analytics.fatigue`)

Size buckets:

    large   (72h)  — quadriceps, hamstrings, glutes, back, lats
    medium  (48h)  — chest, shoulders, traps
    small   (36h)  — biceps, triceps, forearms, core, calves
"""

from __future__ import annotations

from enum import Enum


class MuscleSize(str, Enum):
    """Approximate muscle mass bucket."""
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"


class MuscleGroup(str, Enum):
    """Trackable muscle groups."""
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    QUADRICEPS = "quadriceps"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    CORE = "core"
    FOREARMS = "forearms"
    TRAPS = "traps"
    LATS = "lats"

    @property
    def size(self) -> MuscleSize:
        return muscle_size(self)

    @property
    def recovery_hours(self) -> float:
        return recovery_hours(self)


ALL_MUSCLES: list[MuscleGroup] = list(MuscleGroup)

_MUSCLE_SIZES: dict[MuscleGroup, MuscleSize] = {
    MuscleGroup.QUADRICEPS: MuscleSize.LARGE,
    MuscleGroup.HAMSTRINGS: MuscleSize.LARGE,
    MuscleGroup.GLUTES: MuscleSize.LARGE,
    MuscleGroup.BACK: MuscleSize.LARGE,
    MuscleGroup.LATS: MuscleSize.LARGE,
    MuscleGroup.CHEST: MuscleSize.MEDIUM,
    MuscleGroup.SHOULDERS: MuscleSize.MEDIUM,
    MuscleGroup.TRAPS: MuscleSize.MEDIUM,
    MuscleGroup.BICEPS: MuscleSize.SMALL,
    MuscleGroup.TRICEPS: MuscleSize.SMALL,
    MuscleGroup.FOREARMS: MuscleSize.SMALL,
    MuscleGroup.CORE: MuscleSize.SMALL,
    MuscleGroup.CALVES: MuscleSize.SMALL,
}

# Base recovery time per size bucket (hours).
RECOVERY_HOURS_BY_SIZE: dict[MuscleSize, float] = {
    MuscleSize.LARGE: 72.0,
    MuscleSize.MEDIUM: 48.0,
    MuscleSize.SMALL: 36.0,
}


def muscle_size(muscle: MuscleGroup) -> MuscleSize:
    """Size bucket of *muscle*."""
    return _MUSCLE_SIZES[muscle]


def recovery_hours(muscle: MuscleGroup) -> float:
    """Base recovery hours of *muscle*."""
    return RECOVERY_HOURS_BY_SIZE[_MUSCLE_SIZES[muscle]]
