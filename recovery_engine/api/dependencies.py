"""
Shared API dependencies.

Reusable FastAPI dependencies for the calendar timezone and the
exercise catalog.
"""

import datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import HTTPException, status

from recovery_engine.catalog import DEFAULT_LIBRARY, ExerciseLibrary
from recovery_engine.core.config import settings


def get_timezone() -> datetime.tzinfo:
    """Timezone used to group samples into calendar days."""
    if settings.TIMEZONE.upper() == "UTC":
        return datetime.timezone.utc
    try:
        return ZoneInfo(settings.TIMEZONE)
    except ZoneInfoNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Unknown TIMEZONE setting '{settings.TIMEZONE}'",
        ) from exc


def get_library() -> ExerciseLibrary:
    """The built-in exercise catalog."""
    return DEFAULT_LIBRARY
