"""
Calendar helpers.

Every day-boundary decision in the engine (HRV day grouping, weekday
patterns, ISO weeks) goes through :func:`local_day` with an explicit
timezone, so results never depend on the host's local time.
"""

from __future__ import annotations

import datetime
from typing import Iterable


def local_datetime(
    ts: datetime.datetime,
    tz: datetime.tzinfo | None = None,
) -> datetime.datetime:
    """Express *ts* in *tz*.

    Naive timestamps are taken as already local and returned unchanged.
    """
    if tz is None or ts.tzinfo is None:
        return ts
    return ts.astimezone(tz)


def local_day(
    ts: datetime.datetime,
    tz: datetime.tzinfo | None = None,
) -> datetime.date:
    """Truncate a timestamp to its local calendar day."""
    return local_datetime(ts, tz).date()


def iso_week(day: datetime.date) -> tuple[int, int]:
    """Return ``(iso_year, iso_week)`` for a calendar day."""
    iso = day.isocalendar()
    return iso[0], iso[1]


def hours_between(later: datetime.datetime, earlier: datetime.datetime) -> float:
    """Signed number of hours from *earlier* to *later*."""
    return (later - earlier).total_seconds() / 3600.0


def is_aware(ts: datetime.datetime) -> bool:
    """True when *ts* carries a usable UTC offset."""
    return ts.tzinfo is not None and ts.utcoffset() is not None


def mixed_awareness(
    reference: datetime.datetime,
    timestamps: Iterable[datetime.datetime],
) -> bool:
    """True when any of *timestamps* differs from *reference* in awareness.

    Naive and aware datetimes cannot be compared or subtracted, so a
    request has to use one kind throughout.
    """
    aware = is_aware(reference)
    return any(is_aware(ts) != aware for ts in timestamps)
