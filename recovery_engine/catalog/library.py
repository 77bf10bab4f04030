"""
Exercise library.

The recommendation engine only needs two queries from a catalog, which
are captured by the :class:`ExerciseLibraryQuerying` protocol.  Any
object with those two methods can be injected; :class:`ExerciseLibrary`
is the in-memory implementation backing the built-in catalog.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol

from recovery_engine.schemas.exercise import ExerciseCategory, ExerciseDefinition
from recovery_engine.schemas.muscle import MuscleGroup


class ExerciseLibraryQuerying(Protocol):
    """Read-only catalog queries used by the recommendation engine."""

    def exercises_for_muscle(self, muscle: MuscleGroup) -> list[ExerciseDefinition]:
        ...

    def all_exercises(self) -> list[ExerciseDefinition]:
        ...


class ExerciseLibrary:
    """In-memory exercise catalog, keyed by exercise ID.

    Iteration order is registration order, which the recommendation
    engine uses as its final tie-break.
    """

    def __init__(self, exercises: Iterable[ExerciseDefinition] = ()) -> None:
        self._exercises: dict[str, ExerciseDefinition] = {}
        for exercise in exercises:
            self.register(exercise)

    def register(self, exercise: ExerciseDefinition) -> None:
        """Add an exercise.

        Raises :class:`ValueError` if ``exercise.id`` is already taken.
        """
        if exercise.id in self._exercises:
            raise ValueError(f"Exercise '{exercise.id}' already registered")
        self._exercises[exercise.id] = exercise

    def get(self, exercise_id: str) -> Optional[ExerciseDefinition]:
        """Get an exercise by ID.  Returns ``None`` if not found."""
        return self._exercises.get(exercise_id)

    def get_or_raise(self, exercise_id: str) -> ExerciseDefinition:
        """Get an exercise by ID.

        Raises :class:`KeyError` if not found.
        """
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            raise KeyError(f"Exercise '{exercise_id}' not registered")
        return exercise

    def exercises_for_muscle(self, muscle: MuscleGroup) -> list[ExerciseDefinition]:
        """Exercises listing *muscle* as a primary or secondary muscle."""
        return [
            e for e in self._exercises.values()
            if muscle in e.primary_muscles or muscle in e.secondary_muscles
        ]

    def exercises_for_category(self, category: ExerciseCategory) -> list[ExerciseDefinition]:
        return [e for e in self._exercises.values() if e.category == category]

    def search(self, query: str) -> list[ExerciseDefinition]:
        """Case-insensitive substring match on the display name.

        An empty query returns every exercise.
        """
        needle = query.strip().casefold()
        if not needle:
            return self.all_exercises()
        return [e for e in self._exercises.values() if needle in e.name.casefold()]

    def all_exercises(self) -> list[ExerciseDefinition]:
        return list(self._exercises.values())

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises
