"""
Built-in exercise catalog.

Each entry is an :class:`~recovery_engine.schemas.exercise.ExerciseDefinition`
with primary and secondary muscles.  Secondary muscles receive 40% of
the session load in the fatigue model and half the sets in weekly
volume, so only list muscles that do meaningful work.

Entries are registered into :data:`DEFAULT_LIBRARY` at import time.
Order matters: it is the final tie-break when the recommendation engine
ranks equally fresh exercises.
"""

from __future__ import annotations

from recovery_engine.catalog.library import ExerciseLibrary
from recovery_engine.schemas.exercise import ExerciseCategory, ExerciseDefinition
from recovery_engine.schemas.muscle import MuscleGroup

# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
ST = ExerciseCategory.STRENGTH
BW = ExerciseCategory.BODYWEIGHT
CA = ExerciseCategory.CARDIO
HI = ExerciseCategory.HIIT
FL = ExerciseCategory.FLEXIBILITY

CHEST = MuscleGroup.CHEST
BACK = MuscleGroup.BACK
SHOULDERS = MuscleGroup.SHOULDERS
BICEPS = MuscleGroup.BICEPS
TRICEPS = MuscleGroup.TRICEPS
QUADS = MuscleGroup.QUADRICEPS
HAMS = MuscleGroup.HAMSTRINGS
GLUTES = MuscleGroup.GLUTES
CALVES = MuscleGroup.CALVES
CORE = MuscleGroup.CORE
FOREARMS = MuscleGroup.FOREARMS
TRAPS = MuscleGroup.TRAPS
LATS = MuscleGroup.LATS


def _ex(id, name, category, primary, secondary=(), equipment=None) -> ExerciseDefinition:
    return ExerciseDefinition(
        id=id,
        name=name,
        category=category,
        primary_muscles=list(primary),
        secondary_muscles=list(secondary),
        equipment=equipment,
    )


# ======================================================================
# Built-in exercises
# ======================================================================

_EXERCISES: list[ExerciseDefinition] = [
    # ── Chest ─────────────────────────────────────────────────────
    _ex("bench_press", "Barbell Bench Press", ST, [CHEST], [TRICEPS, SHOULDERS], "barbell"),
    _ex("incline_dumbbell_press", "Incline Dumbbell Press", ST, [CHEST], [SHOULDERS, TRICEPS], "dumbbell"),
    _ex("dumbbell_fly", "Dumbbell Fly", ST, [CHEST], equipment="dumbbell"),
    _ex("cable_crossover", "Cable Crossover", ST, [CHEST], equipment="cable"),
    _ex("push_up", "Push-Up", BW, [CHEST], [TRICEPS, CORE], "bodyweight"),
    _ex("dip", "Dip", BW, [CHEST, TRICEPS], [SHOULDERS], "bodyweight"),

    # ── Back ──────────────────────────────────────────────────────
    _ex("deadlift", "Deadlift", ST, [BACK, HAMS, GLUTES], [TRAPS, FOREARMS, CORE], "barbell"),
    _ex("barbell_row", "Barbell Row", ST, [BACK, LATS], [BICEPS, FOREARMS], "barbell"),
    _ex("seated_cable_row", "Seated Cable Row", ST, [BACK], [LATS, BICEPS], "cable"),
    _ex("pull_up", "Pull-Up", BW, [LATS], [BICEPS, BACK, FOREARMS], "bodyweight"),
    _ex("lat_pulldown", "Lat Pulldown", ST, [LATS], [BICEPS], "cable"),
    _ex("back_extension", "Back Extension", BW, [BACK], [GLUTES, HAMS], "bodyweight"),

    # ── Shoulders / traps ─────────────────────────────────────────
    _ex("overhead_press", "Overhead Press", ST, [SHOULDERS], [TRICEPS, CORE], "barbell"),
    _ex("lateral_raise", "Lateral Raise", ST, [SHOULDERS], equipment="dumbbell"),
    _ex("face_pull", "Face Pull", ST, [SHOULDERS], [TRAPS], "cable"),
    _ex("barbell_shrug", "Barbell Shrug", ST, [TRAPS], [FOREARMS], "barbell"),

    # ── Arms ──────────────────────────────────────────────────────
    _ex("barbell_curl", "Barbell Curl", ST, [BICEPS], [FOREARMS], "barbell"),
    _ex("hammer_curl", "Hammer Curl", ST, [BICEPS], [FOREARMS], "dumbbell"),
    _ex("triceps_pushdown", "Triceps Pushdown", ST, [TRICEPS], equipment="cable"),
    _ex("skull_crusher", "Skull Crusher", ST, [TRICEPS], equipment="barbell"),
    _ex("wrist_curl", "Wrist Curl", ST, [FOREARMS], equipment="dumbbell"),

    # ── Lower body ────────────────────────────────────────────────
    _ex("back_squat", "Back Squat", ST, [QUADS, GLUTES], [HAMS, CORE], "barbell"),
    _ex("leg_press", "Leg Press", ST, [QUADS], [GLUTES], "machine"),
    _ex("walking_lunge", "Walking Lunge", ST, [QUADS, GLUTES], [HAMS], "dumbbell"),
    _ex("leg_extension", "Leg Extension", ST, [QUADS], equipment="machine"),
    _ex("romanian_deadlift", "Romanian Deadlift", ST, [HAMS], [GLUTES, BACK], "barbell"),
    _ex("leg_curl", "Leg Curl", ST, [HAMS], equipment="machine"),
    _ex("hip_thrust", "Hip Thrust", ST, [GLUTES], [HAMS], "barbell"),
    _ex("standing_calf_raise", "Standing Calf Raise", ST, [CALVES], equipment="machine"),
    _ex("bodyweight_squat", "Bodyweight Squat", BW, [QUADS], [GLUTES], "bodyweight"),

    # ── Core ──────────────────────────────────────────────────────
    _ex("plank", "Plank", BW, [CORE], [SHOULDERS], "bodyweight"),
    _ex("hanging_leg_raise", "Hanging Leg Raise", BW, [CORE], [FOREARMS], "bodyweight"),
    _ex("cable_crunch", "Cable Crunch", ST, [CORE], equipment="cable"),

    # ── Conditioning / mobility ───────────────────────────────────
    _ex("running", "Running", CA, [QUADS, CALVES], [HAMS, GLUTES]),
    _ex("cycling", "Cycling", CA, [QUADS], [CALVES, GLUTES]),
    _ex("rowing_machine", "Rowing Machine", CA, [BACK, QUADS], [LATS, BICEPS], "machine"),
    _ex("burpee", "Burpee", HI, [QUADS, CHEST], [CORE, SHOULDERS], "bodyweight"),
    _ex("kettlebell_swing", "Kettlebell Swing", HI, [GLUTES, HAMS], [CORE, SHOULDERS], "kettlebell"),
    _ex("hamstring_stretch", "Hamstring Stretch", FL, [HAMS]),
    _ex("yoga_flow", "Yoga Flow", FL, [CORE], [HAMS, SHOULDERS]),
]

DEFAULT_LIBRARY = ExerciseLibrary(_EXERCISES)
