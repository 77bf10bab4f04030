"""
Workout recommendation — which muscles to train next, and with what.

Architecture (three layers):
    1. **Muscle state** — linear recovery since last session, weekly set
       volume, and the compound fatigue level when available
    2. **Ranking** — recovered, non-overworked muscles ordered by
       recovery, with a small bonus for muscles habitually trained on
       today's weekday
    3. **Selection** — up to three focus muscles, one exercise each
       (plus alternatives), topped up with compound movements to four
       exercises

When nothing is recovered the result is a **rest day**: no exercises,
a few active-recovery ideas and the muscle that will be ready soonest.

Linear recovery
---------------
    recovery = min(hours_since_last_session / base_recovery_hours, 1.0)

A muscle counts as recovered when the fatigue level of
``1 - recovery`` is at most 3 (i.e. recovery > 0.75).  It is overworked
when its effective fatigue level is 8 or more, or when it already has
20 sets this week.  The effective level is the compound level when one
is supplied and the linear level otherwise.

Weekly volume
-------------
Primary muscles add the session's set count; secondary muscles add
``max(sets // 2, 1)``.
"""

from __future__ import annotations

import datetime
import logging
from collections import defaultdict
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from recovery_engine.analytics.fatigue import fatigue_by_muscle
from recovery_engine.analytics.status import fatigue_level
from recovery_engine.catalog.library import ExerciseLibraryQuerying
from recovery_engine.core.timeutils import hours_between, iso_week, local_datetime, local_day
from recovery_engine.schemas.exercise import (
    ExerciseCategory,
    ExerciseDefinition,
    ExerciseRecordSnapshot,
)
from recovery_engine.schemas.fatigue import CompoundFatigueScore, FatigueLevel
from recovery_engine.schemas.muscle import ALL_MUSCLES, MuscleGroup
from recovery_engine.schemas.recommendation import (
    ActiveRecoverySuggestion,
    MuscleFatigueState,
    NextReadyMuscle,
    SuggestedExercise,
    WorkoutSuggestion,
)

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

REST_DAY_REASONING = (
    "All muscle groups are still recovering. Consider a rest day or light cardio."
)
COMPOUND_REASON = "Compound movement for overall development"

ACTIVE_RECOVERY_SUGGESTIONS: list[ActiveRecoverySuggestion] = [
    ActiveRecoverySuggestion(id="walking", title="Light Walking", duration="20-30 min"),
    ActiveRecoverySuggestion(id="stretching", title="Stretching", duration="10 min"),
    ActiveRecoverySuggestion(id="yoga", title="Yoga Flow", duration="15 min"),
]

_FOCUS_CATEGORIES = (ExerciseCategory.STRENGTH, ExerciseCategory.BODYWEIGHT)
_COMPOUND_CATEGORIES = (ExerciseCategory.STRENGTH,)


class RecommendationConfig(BaseModel):
    """Configuration for the workout recommendation."""

    target_exercise_count: int = Field(4, ge=1)
    max_focus_muscles: int = Field(3, ge=1, le=3)
    max_alternatives: int = Field(3, ge=0, le=3)

    weekly_window_days: int = Field(7, ge=1)
    max_weekly_volume: int = Field(20, ge=1, description="Sets/week at which a muscle is overworked")
    low_weekly_volume: int = Field(10, ge=0)

    recovered_max_level: FatigueLevel = FatigueLevel.LIGHT_FATIGUE
    overworked_min_level: FatigueLevel = FatigueLevel.VERY_HIGH_FATIGUE

    min_sets: int = Field(2, ge=1)
    max_sets: int = Field(5, ge=1)
    compound_sets: int = Field(3, ge=1)

    weekday_bonus: float = Field(0.1, ge=0.0)
    weekday_lookback_days: int = Field(56, ge=7)
    weekday_min_weeks: int = Field(4, ge=1)
    weekday_min_sessions: int = Field(3, ge=1)

    reason_min_days: int = Field(3, ge=0, description="Days idle before the reason mentions them")


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()


# ======================================================================
# Muscle state
# ======================================================================


def _weekly_volume(
    muscle: MuscleGroup,
    records: list[ExerciseRecordSnapshot],
) -> int:
    volume = 0
    for record in records:
        if muscle in record.primary_muscles:
            volume += record.completed_set_count
        elif muscle in record.secondary_muscles:
            volume += max(record.completed_set_count // 2, 1)
    return volume


def compute_fatigue_states(
    records: Iterable[ExerciseRecordSnapshot],
    reference_date: datetime.datetime,
    fatigue_scores: Optional[Iterable[CompoundFatigueScore]] = None,
    config: Optional[RecommendationConfig] = None,
) -> list[MuscleFatigueState]:
    """Compute the ranking state of every muscle.

    Args:
        records: Workout history, in any order.  Sessions after
            *reference_date* are ignored.
        reference_date: Evaluation instant.
        fatigue_scores: Optional compound fatigue scores.  When a muscle
            has one, its level replaces the linear level in the
            overworked check.
        config: Optional config override.

    Returns:
        One :class:`MuscleFatigueState` per muscle, in enum order.
    """
    cfg = config or DEFAULT_RECOMMENDATION_CONFIG
    compound = fatigue_by_muscle(fatigue_scores or [])

    past = [r for r in records if r.date <= reference_date]
    week_start = reference_date - datetime.timedelta(days=cfg.weekly_window_days)
    recent = [r for r in past if r.date >= week_start]

    states: list[MuscleFatigueState] = []
    for muscle in ALL_MUSCLES:
        touching = [r.date for r in past if r.engages(muscle)]
        last_trained = max(touching) if touching else None

        if last_trained is not None:
            hours_since = max(0.0, hours_between(reference_date, last_trained))
            recovery = min(hours_since / muscle.recovery_hours, 1.0)
        else:
            hours_since = None
            recovery = 1.0

        weekly = _weekly_volume(muscle, recent)
        linear_level = fatigue_level(1.0 - recovery)

        score = compound.get(muscle)
        level = score.level if score is not None else linear_level

        is_overworked = weekly >= cfg.max_weekly_volume or level >= cfg.overworked_min_level

        states.append(MuscleFatigueState(
            muscle=muscle,
            last_trained=last_trained,
            hours_since_last_trained=hours_since,
            weekly_volume=weekly,
            recovery_percent=recovery,
            fatigue_level=level,
            is_recovered=linear_level <= cfg.recovered_max_level,
            is_overworked=is_overworked,
        ))

    return states


# ======================================================================
# Weekday pattern
# ======================================================================


def weekday_bonus_muscles(
    records: Iterable[ExerciseRecordSnapshot],
    reference_date: datetime.datetime,
    tz: Optional[datetime.tzinfo] = None,
    config: Optional[RecommendationConfig] = None,
) -> set[MuscleGroup]:
    """Muscles the user habitually trains on the reference weekday.

    Only the trailing window (8 weeks by default) is used, and the
    pattern is trusted only if that window covers enough distinct ISO
    weeks.  A muscle qualifies when it is a primary muscle on at least
    three distinct days falling on the reference weekday.  Sessions are
    counted per local calendar day, so several records logged on the
    same day (one per exercise) make up a single session.
    """
    cfg = config or DEFAULT_RECOMMENDATION_CONFIG

    cutoff = reference_date - datetime.timedelta(days=cfg.weekday_lookback_days)
    window = [r for r in records if cutoff <= r.date <= reference_date]

    weeks = {iso_week(local_day(r.date, tz)) for r in window}
    if len(weeks) < cfg.weekday_min_weeks:
        return set()

    weekday = local_datetime(reference_date, tz).weekday()
    days_by_muscle: dict[MuscleGroup, set[datetime.date]] = defaultdict(set)
    for record in window:
        day = local_day(record.date, tz)
        if day.weekday() != weekday:
            continue
        for muscle in record.primary_muscles:
            days_by_muscle[muscle].add(day)

    return {
        muscle for muscle, days in days_by_muscle.items()
        if len(days) >= cfg.weekday_min_sessions
    }


# ======================================================================
# Helpers
# ======================================================================


def _rank_candidates(
    states: list[MuscleFatigueState],
    bonus: set[MuscleGroup],
    cfg: RecommendationConfig,
) -> list[MuscleFatigueState]:
    order = {m: i for i, m in enumerate(ALL_MUSCLES)}
    candidates = [s for s in states if s.is_recovered and not s.is_overworked]
    return sorted(
        candidates,
        key=lambda s: (
            -(s.recovery_percent + (cfg.weekday_bonus if s.muscle in bonus else 0.0)),
            s.weekly_volume,
            order[s.muscle],
        ),
    )


def _next_ready_muscle(
    states: list[MuscleFatigueState],
    reference_date: datetime.datetime,
) -> Optional[NextReadyMuscle]:
    """Trained muscle whose base recovery window ends soonest in the future."""
    upcoming: list[NextReadyMuscle] = []
    for state in states:
        if state.last_trained is None:
            continue
        ready = state.last_trained + datetime.timedelta(hours=state.muscle.recovery_hours)
        if ready > reference_date:
            upcoming.append(NextReadyMuscle(muscle=state.muscle, ready_date=ready))
    if not upcoming:
        return None
    return min(upcoming, key=lambda n: n.ready_date)


def _rest_day(
    states: list[MuscleFatigueState],
    reference_date: datetime.datetime,
) -> WorkoutSuggestion:
    return WorkoutSuggestion(
        exercises=[],
        reasoning=REST_DAY_REASONING,
        focus_muscles=[],
        active_recovery_suggestions=list(ACTIVE_RECOVERY_SUGGESTIONS),
        next_ready_muscle=_next_ready_muscle(states, reference_date),
    )


def _last_performed(
    records: Iterable[ExerciseRecordSnapshot],
    reference_date: datetime.datetime,
) -> dict[str, datetime.datetime]:
    last: dict[str, datetime.datetime] = {}
    for record in records:
        ex_id = record.exercise_definition_id
        if ex_id is None or record.date > reference_date:
            continue
        if ex_id not in last or record.date > last[ex_id]:
            last[ex_id] = record.date
    return last


def _least_recently_performed(
    exercises: list[ExerciseDefinition],
    last_performed: dict[str, datetime.datetime],
) -> list[ExerciseDefinition]:
    """Never-performed first, then oldest first; catalog order otherwise."""
    never = [e for e in exercises if e.id not in last_performed]
    performed = sorted(
        (e for e in exercises if e.id in last_performed),
        key=lambda e: last_performed[e.id],
    )
    return never + performed


def _suggested_sets(state: MuscleFatigueState, cfg: RecommendationConfig) -> int:
    remaining = max(cfg.max_weekly_volume - state.weekly_volume, 0)
    return min(max(remaining // 2, cfg.min_sets), cfg.max_sets)


def _reason_text(state: MuscleFatigueState, cfg: RecommendationConfig) -> str:
    days = state.days_since_last_trained
    if days is not None and days >= cfg.reason_min_days:
        return f"{days} days since last trained, {state.weekly_volume} sets this week"
    if state.weekly_volume < cfg.low_weekly_volume:
        return f"Low weekly volume ({state.weekly_volume} sets), room for more"
    return "Recovered and ready for training"


def _reasoning(focus: list[MuscleGroup]) -> str:
    names = ", ".join(m.value for m in focus)
    return (
        f"Focus on {names} — these muscles are well-recovered "
        "and could use more volume this week."
    )


# ======================================================================
# Main entry point
# ======================================================================


def recommend_workout(
    records: Iterable[ExerciseRecordSnapshot],
    library: ExerciseLibraryQuerying,
    reference_date: datetime.datetime,
    fatigue_scores: Optional[Iterable[CompoundFatigueScore]] = None,
    tz: Optional[datetime.tzinfo] = None,
    config: Optional[RecommendationConfig] = None,
) -> Optional[WorkoutSuggestion]:
    """Suggest the next workout.

    Args:
        records: Workout history, in any order.
        library: Exercise catalog to pick from.
        reference_date: Evaluation instant (also defines "today's weekday").
        fatigue_scores: Optional compound fatigue scores, typically from
            :func:`~recovery_engine.analytics.fatigue.compute_compound_fatigue`.
        tz: Timezone for weekday and ISO-week grouping.
        config: Optional config override.

    Returns:
        :class:`WorkoutSuggestion` (a rest day if nothing is recovered),
        or ``None`` if muscles are ready but the catalog has nothing
        suitable for them.
    """
    cfg = config or DEFAULT_RECOMMENDATION_CONFIG
    records = list(records)

    states = compute_fatigue_states(records, reference_date, fatigue_scores, cfg)
    by_muscle = {s.muscle: s for s in states}
    bonus = weekday_bonus_muscles(records, reference_date, tz, cfg)

    candidates = _rank_candidates(states, bonus, cfg)
    if not candidates:
        logger.debug("No recovered muscle at %s, suggesting a rest day", reference_date)
        return _rest_day(states, reference_date)

    focus = [s.muscle for s in candidates[: cfg.max_focus_muscles]]
    last_performed = _last_performed(records, reference_date)

    def _primaries_ok(exercise: ExerciseDefinition, require_recovered: bool) -> bool:
        for muscle in exercise.primary_muscles:
            state = by_muscle[muscle]
            if state.is_overworked:
                return False
            if require_recovered and not state.is_recovered:
                return False
        return True

    selected: list[SuggestedExercise] = []
    used: set[str] = set()

    for muscle in focus:
        options = _least_recently_performed(
            [
                e for e in library.exercises_for_muscle(muscle)
                if e.category in _FOCUS_CATEGORIES
                and e.id not in used
                and _primaries_ok(e, require_recovered=False)
            ],
            last_performed,
        )
        if not options:
            continue

        choice, alternatives = options[0], options[1: 1 + cfg.max_alternatives]
        used.add(choice.id)
        state = by_muscle[muscle]
        selected.append(SuggestedExercise(
            definition=choice,
            suggested_sets=_suggested_sets(state, cfg),
            reason=_reason_text(state, cfg),
            alternatives=alternatives,
        ))

        if len(selected) >= cfg.target_exercise_count:
            break

    if len(selected) < cfg.target_exercise_count:
        compounds = _least_recently_performed(
            [
                e for e in library.all_exercises()
                if e.is_compound
                and e.category in _COMPOUND_CATEGORIES
                and e.id not in used
                and _primaries_ok(e, require_recovered=True)
            ],
            last_performed,
        )
        for exercise in compounds[: cfg.target_exercise_count - len(selected)]:
            used.add(exercise.id)
            selected.append(SuggestedExercise(
                definition=exercise,
                suggested_sets=cfg.compound_sets,
                reason=COMPOUND_REASON,
            ))

    if not selected:
        logger.debug("No catalog exercise for focus muscles %s", [m.value for m in focus])
        return None

    return WorkoutSuggestion(
        exercises=selected,
        reasoning=_reasoning(focus),
        focus_muscles=focus,
    )
