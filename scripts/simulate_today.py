"""What would the engine tell you TODAY (2026-02-08)?

Runs the whole pipeline on a synthetic three-week history:
sleep and HRV → recovery modifiers → compound fatigue → condition
score → workout recommendation → wellness score.

Usage:
    python scripts/simulate_today.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from recovery_engine.analytics.condition import compute_condition_score, hrv_z_score
from recovery_engine.analytics.fatigue import compute_compound_fatigue
from recovery_engine.analytics.modifiers import calculate_modifiers, rhr_delta
from recovery_engine.analytics.recommendation import recommend_workout
from recovery_engine.analytics.sleep import compute_sleep_score, sleep_modifier_inputs
from recovery_engine.analytics.wellness import compute_wellness_score
from recovery_engine.catalog import DEFAULT_LIBRARY
from recovery_engine.schemas.exercise import ExerciseRecordSnapshot
from recovery_engine.schemas.health import HealthSample, SleepStage, SleepStageType
from recovery_engine.schemas.muscle import ALL_MUSCLES
from recovery_engine.schemas.wellness import BodyTrend

UTC = datetime.timezone.utc
NOW = datetime.datetime(2026, 2, 8, 7, 30, tzinfo=UTC)

# ─── Workout log: (date, exercise id, sets, total kg, total reps) ───
RAW_DATA = [
    ("2026-01-20", "back_squat", 5, 2000, 25),
    ("2026-01-20", "romanian_deadlift", 3, 1080, 24),
    ("2026-01-22", "bench_press", 5, 1500, 25),
    ("2026-01-22", "barbell_row", 4, 1280, 32),
    ("2026-01-25", "deadlift", 3, 1350, 9),
    ("2026-01-25", "overhead_press", 4, 640, 24),
    ("2026-01-27", "back_squat", 5, 2100, 25),
    ("2026-01-29", "bench_press", 5, 1550, 25),
    ("2026-01-29", "pull_up", 4, 0, 28),
    ("2026-02-01", "deadlift", 3, 1400, 9),
    ("2026-02-03", "back_squat", 5, 2200, 25),
    ("2026-02-03", "leg_curl", 3, 450, 30),
    ("2026-02-05", "bench_press", 5, 1600, 25),
    ("2026-02-05", "triceps_pushdown", 3, 540, 36),
    ("2026-02-07", "barbell_row", 4, 1360, 32),
    ("2026-02-07", "barbell_curl", 3, 450, 30),
]

# ─── Morning HRV (ms) and resting HR (bpm), oldest first ────────────
HRV_DAYS = [58, 61, 55, 63, 60, 57, 62, 59, 64, 56, 60, 66]
RHR_YESTERDAY = 56.0
RHR_TODAY = 54.0


def _records() -> list[ExerciseRecordSnapshot]:
    records = []
    for day, ex_id, sets, kg, reps in RAW_DATA:
        ex = DEFAULT_LIBRARY.get_or_raise(ex_id)
        records.append(ExerciseRecordSnapshot(
            date=datetime.datetime.fromisoformat(day).replace(hour=18, tzinfo=UTC),
            exercise_definition_id=ex.id,
            exercise_name=ex.name,
            primary_muscles=ex.primary_muscles,
            secondary_muscles=ex.secondary_muscles,
            completed_set_count=sets,
            total_weight_kg=kg or None,
            total_reps=reps,
        ))
    return records


def _hrv_samples() -> list[HealthSample]:
    start = NOW - datetime.timedelta(days=len(HRV_DAYS) - 1)
    return [
        HealthSample(value=v, date=start + datetime.timedelta(days=i))
        for i, v in enumerate(HRV_DAYS)
    ]


def _last_night() -> list[SleepStage]:
    t = NOW.replace(hour=0, minute=0) - datetime.timedelta(minutes=30)
    plan = [
        (SleepStageType.CORE, 90),
        (SleepStageType.DEEP, 60),
        (SleepStageType.REM, 40),
        (SleepStageType.AWAKE, 10),
        (SleepStageType.CORE, 120),
        (SleepStageType.DEEP, 35),
        (SleepStageType.REM, 60),
        (SleepStageType.AWAKE, 15),
    ]
    stages = []
    for stage, minutes in plan:
        end = t + datetime.timedelta(minutes=minutes)
        stages.append(SleepStage(stage=stage, start=t, end=end))
        t = end
    return stages


def main():
    records = _records()
    hrv = _hrv_samples()
    night = _last_night()

    print("=" * 65)
    print(f"  RECOVERY ENGINE — {NOW:%Y-%m-%d %H:%M} UTC")
    print("=" * 65)

    # ── Modifiers ─────────────────────────────────────────────────
    total, deep, rem = sleep_modifier_inputs(night)
    z = hrv_z_score(hrv, UTC)
    modifiers = calculate_modifiers(
        total_sleep_minutes=total,
        deep_sleep_ratio=deep,
        rem_sleep_ratio=rem,
        hrv_z_score=z,
        rhr_change=rhr_delta(RHR_TODAY, RHR_YESTERDAY),
    )
    print()
    print(f"  Sleep: {total / 60:.1f}h  deep {deep:.0%}  REM {rem:.0%}")
    print(f"  HRV z-score: {z:+.2f}" if z is not None else "  HRV z-score: n/a")
    print(f"  Sleep modifier:     {modifiers.sleep_modifier:.2f}")
    print(f"  Readiness modifier: {modifiers.readiness_modifier:.2f}")

    # ── Compound fatigue ──────────────────────────────────────────
    scores = compute_compound_fatigue(
        ALL_MUSCLES, records,
        modifiers.sleep_modifier, modifiers.readiness_modifier, NOW,
    )
    print()
    print("  MUSCLE        SCORE  LEVEL  TAU(h)")
    print("  " + "-" * 38)
    for s in scores:
        print(
            f"  {s.muscle.value:<12} {s.normalized_score:6.3f}  {int(s.level):>5}"
            f"  {s.breakdown.effective_tau:6.1f}"
        )

    # ── Condition ─────────────────────────────────────────────────
    condition = compute_condition_score(hrv, RHR_TODAY, RHR_YESTERDAY, tz=UTC)
    print()
    if condition.score is None:
        bs = condition.baseline_status
        print(f"  Condition: baseline {bs.days_collected}/{bs.days_required} days")
    else:
        c = condition.score
        print(f"  Condition: {c.score} ({c.status.label}) — {c.status.guide_message}")
        for contrib in c.contributions:
            print(f"    {contrib.factor.value.upper()}: {contrib.detail}")

    # ── Recommendation ────────────────────────────────────────────
    suggestion = recommend_workout(records, DEFAULT_LIBRARY, NOW, fatigue_scores=scores, tz=UTC)
    print()
    if suggestion is None:
        print("  No suitable exercise in the catalog.")
    elif suggestion.is_rest_day:
        print(f"  >>> {suggestion.reasoning}")
        for a in suggestion.active_recovery_suggestions:
            print(f"    - {a.title} ({a.duration})")
        if suggestion.next_ready_muscle:
            n = suggestion.next_ready_muscle
            print(f"  Next ready: {n.muscle.value} at {n.ready_date:%a %H:%M}")
    else:
        print(f"  >>> {suggestion.reasoning}")
        for ex in suggestion.exercises:
            alts = ", ".join(a.name for a in ex.alternatives)
            print(f"    - {ex.definition.name}: {ex.suggested_sets} sets — {ex.reason}")
            if alts:
                print(f"        alternatives: {alts}")

    # ── Wellness ──────────────────────────────────────────────────
    sleep = compute_sleep_score(night)
    wellness = compute_wellness_score(
        sleep_score=sleep.score,
        condition_score=condition.score.score if condition.score else None,
        body_trend=BodyTrend(weight_change_kg=-0.3, body_fat_change_pct=-0.4),
    )
    print()
    print(f"  Sleep score: {sleep.score}  (efficiency {sleep.efficiency:.0f}%)")
    if wellness is not None:
        print(f"  Wellness: {wellness.score} ({wellness.status.label}) — {wellness.guide_message}")
    print()


if __name__ == "__main__":
    main()
