"""
Unit tests for the calendar helpers.
"""

import datetime

from recovery_engine.core.timeutils import (
    hours_between,
    is_aware,
    iso_week,
    local_day,
    mixed_awareness,
)

UTC = datetime.timezone.utc
KST = datetime.timezone(datetime.timedelta(hours=9))
CET = datetime.timezone(datetime.timedelta(hours=1))
NAIVE = datetime.datetime(2026, 2, 8, 12, 0)
AWARE = datetime.datetime(2026, 2, 8, 12, 0, tzinfo=UTC)


class TestLocalDay:

    def test_naive_is_taken_as_local(self):
        late = datetime.datetime(2026, 2, 7, 23, 30)
        assert local_day(late, KST) == datetime.date(2026, 2, 7)

    def test_aware_is_converted(self):
        late = datetime.datetime(2026, 2, 7, 23, 30, tzinfo=UTC)
        assert local_day(late, KST) == datetime.date(2026, 2, 8)

    def test_iso_week_crosses_year(self):
        assert iso_week(datetime.date(2026, 1, 1)) == (2026, 1)
        assert iso_week(datetime.date(2027, 1, 1)) == (2026, 53)

    def test_hours_between_is_signed(self):
        assert hours_between(AWARE, AWARE - datetime.timedelta(hours=6)) == 6.0
        assert hours_between(AWARE - datetime.timedelta(hours=6), AWARE) == -6.0


class TestAwareness:

    def test_is_aware(self):
        assert is_aware(AWARE)
        assert not is_aware(NAIVE)

    def test_uniform_timestamps(self):
        assert not mixed_awareness(NAIVE, [NAIVE, NAIVE - datetime.timedelta(days=1)])
        assert not mixed_awareness(AWARE, [AWARE.astimezone(CET)])
        assert not mixed_awareness(NAIVE, [])

    def test_mixed_timestamps(self):
        assert mixed_awareness(NAIVE, [NAIVE, AWARE])
        assert mixed_awareness(AWARE, [NAIVE])
