"""
Unit tests for the exercise library and the built-in catalog.
"""

import pytest

from recovery_engine.catalog import DEFAULT_LIBRARY, ExerciseLibrary
from recovery_engine.schemas.exercise import ExerciseCategory, ExerciseDefinition
from recovery_engine.schemas.muscle import ALL_MUSCLES, MuscleGroup


def _make_exercise(id: str, primary, secondary=(), category=ExerciseCategory.STRENGTH) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=id,
        name=id.replace("_", " ").title(),
        category=category,
        primary_muscles=list(primary),
        secondary_muscles=list(secondary),
    )


# ======================================================================
# ExerciseLibrary
# ======================================================================


class TestExerciseLibrary:

    def test_register_and_get(self):
        library = ExerciseLibrary()
        library.register(_make_exercise("bench_press", [MuscleGroup.CHEST]))
        assert library.get("bench_press").name == "Bench Press"
        assert library.get("nope") is None
        assert "bench_press" in library
        assert len(library) == 1

    def test_duplicate_raises(self):
        library = ExerciseLibrary([_make_exercise("bench_press", [MuscleGroup.CHEST])])
        with pytest.raises(ValueError, match="already registered"):
            library.register(_make_exercise("bench_press", [MuscleGroup.CHEST]))

    def test_get_or_raise(self):
        with pytest.raises(KeyError):
            ExerciseLibrary().get_or_raise("nope")

    def test_exercises_for_muscle_includes_secondary(self):
        library = ExerciseLibrary([
            _make_exercise("bench_press", [MuscleGroup.CHEST], [MuscleGroup.TRICEPS]),
            _make_exercise("pushdown", [MuscleGroup.TRICEPS]),
            _make_exercise("curl", [MuscleGroup.BICEPS]),
        ])
        ids = [e.id for e in library.exercises_for_muscle(MuscleGroup.TRICEPS)]
        assert ids == ["bench_press", "pushdown"]

    def test_all_exercises_keeps_registration_order(self):
        ids = ["c", "a", "b"]
        library = ExerciseLibrary(_make_exercise(i, [MuscleGroup.CORE]) for i in ids)
        assert [e.id for e in library.all_exercises()] == ids

    def test_search(self):
        library = ExerciseLibrary([
            _make_exercise("bench_press", [MuscleGroup.CHEST]),
            _make_exercise("leg_press", [MuscleGroup.QUADRICEPS]),
            _make_exercise("curl", [MuscleGroup.BICEPS]),
        ])
        assert [e.id for e in library.search("PRESS")] == ["bench_press", "leg_press"]
        assert len(library.search("  ")) == 3

    def test_exercises_for_category(self):
        library = ExerciseLibrary([
            _make_exercise("push_up", [MuscleGroup.CHEST], category=ExerciseCategory.BODYWEIGHT),
            _make_exercise("bench_press", [MuscleGroup.CHEST]),
        ])
        assert [e.id for e in library.exercises_for_category(ExerciseCategory.BODYWEIGHT)] == ["push_up"]


# ======================================================================
# Built-in catalog
# ======================================================================


class TestDefaultLibrary:

    def test_not_empty(self):
        assert len(DEFAULT_LIBRARY) > 20

    def test_every_muscle_has_a_trainable_exercise(self):
        trainable = (ExerciseCategory.STRENGTH, ExerciseCategory.BODYWEIGHT)
        for muscle in ALL_MUSCLES:
            assert any(
                e.category in trainable for e in DEFAULT_LIBRARY.exercises_for_muscle(muscle)
            ), muscle

    def test_entries_have_primary_muscles(self):
        for exercise in DEFAULT_LIBRARY.all_exercises():
            assert exercise.primary_muscles, exercise.id
            assert not set(exercise.primary_muscles) & set(exercise.secondary_muscles), exercise.id

    def test_has_compound_strength_movements(self):
        compounds = [
            e for e in DEFAULT_LIBRARY.all_exercises()
            if e.is_compound and e.category == ExerciseCategory.STRENGTH
        ]
        assert len(compounds) >= 4
