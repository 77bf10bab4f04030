"""
Exercise catalog.

Importing this package builds :data:`DEFAULT_LIBRARY` from the built-in
exercise table.
"""

from recovery_engine.catalog.library import ExerciseLibrary, ExerciseLibraryQuerying
from recovery_engine.catalog.exercise_catalog import DEFAULT_LIBRARY

__all__ = ["DEFAULT_LIBRARY", "ExerciseLibrary", "ExerciseLibraryQuerying"]
