"""
Exercise catalog endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recovery_engine.api.dependencies import get_library
from recovery_engine.catalog import ExerciseLibrary
from recovery_engine.schemas.exercise import ExerciseCategory, ExerciseDefinition
from recovery_engine.schemas.muscle import MuscleGroup

router = APIRouter()


@router.get(
    "",
    summary="List or search the built-in exercise catalog.",
    response_model=list[ExerciseDefinition],
)
def list_exercises(
    muscle: Optional[MuscleGroup] = Query(None, description="Primary or secondary muscle"),
    category: Optional[ExerciseCategory] = Query(None),
    q: str = Query("", description="Case-insensitive name search"),
    library: ExerciseLibrary = Depends(get_library),
):
    exercises = library.search(q)
    if muscle is not None:
        exercises = [e for e in exercises if muscle in e.primary_muscles or muscle in e.secondary_muscles]
    if category is not None:
        exercises = [e for e in exercises if e.category == category]
    return exercises


@router.get(
    "/{exercise_id}",
    summary="Get one exercise by ID.",
    response_model=ExerciseDefinition,
)
def get_exercise(
    exercise_id: str,
    library: ExerciseLibrary = Depends(get_library),
):
    try:
        return library.get_or_raise(exercise_id)
    except KeyError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc.args[0])) from exc
