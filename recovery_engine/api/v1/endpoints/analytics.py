"""
Analytics endpoints — recovery modifiers, compound fatigue, condition,
workout recommendation and wellness.
"""

import datetime
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from recovery_engine.analytics.condition import compute_condition_score, hrv_z_score
from recovery_engine.analytics.fatigue import compute_compound_fatigue
from recovery_engine.analytics.modifiers import calculate_modifiers, rhr_delta
from recovery_engine.analytics.recommendation import recommend_workout
from recovery_engine.analytics.sleep import compute_sleep_score, sleep_modifier_inputs
from recovery_engine.analytics.wellness import compute_wellness_score
from recovery_engine.api.dependencies import get_library, get_timezone
from recovery_engine.catalog import ExerciseLibrary
from recovery_engine.schemas.condition import ConditionScoreResult
from recovery_engine.schemas.fatigue import CompoundFatigueScore
from recovery_engine.schemas.health import RecoveryModifiers
from recovery_engine.schemas.muscle import ALL_MUSCLES
from recovery_engine.schemas.recommendation import WorkoutSuggestion
from recovery_engine.schemas.requests import (
    ConditionRequest,
    FatigueRequest,
    ModifiersRequest,
    RecommendationRequest,
    WellnessRequest,
)
from recovery_engine.schemas.wellness import WellnessScore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/modifiers",
    summary="Compute sleep and readiness recovery modifiers.",
    response_model=RecoveryModifiers,
)
def post_modifiers(
    body: ModifiersRequest,
    tz: datetime.tzinfo = Depends(get_timezone),
):
    total, deep, rem = sleep_modifier_inputs(body.sleep_stages)
    return calculate_modifiers(
        total_sleep_minutes=total,
        deep_sleep_ratio=deep,
        rem_sleep_ratio=rem,
        hrv_z_score=hrv_z_score(body.hrv_samples, tz),
        rhr_change=rhr_delta(body.today_rhr, body.yesterday_rhr),
    )


@router.post(
    "/fatigue",
    summary="Compute per-muscle compound fatigue.",
    response_model=list[CompoundFatigueScore],
)
def post_fatigue(body: FatigueRequest):
    return compute_compound_fatigue(
        muscles=body.muscles or ALL_MUSCLES,
        records=body.records,
        sleep_modifier=body.sleep_modifier,
        readiness_modifier=body.readiness_modifier,
        reference_date=body.reference_date,
    )


@router.post(
    "/condition",
    summary="Compute the daily condition score from HRV and RHR.",
    response_model=ConditionScoreResult,
)
def post_condition(
    body: ConditionRequest,
    tz: datetime.tzinfo = Depends(get_timezone),
):
    return compute_condition_score(
        body.hrv_samples,
        today_rhr=body.today_rhr,
        yesterday_rhr=body.yesterday_rhr,
        tz=tz,
        as_of=body.as_of,
    )


@router.post(
    "/recommendation",
    summary="Suggest the next workout (or a rest day).",
    response_model=Optional[WorkoutSuggestion],
)
def post_recommendation(
    body: RecommendationRequest,
    tz: datetime.tzinfo = Depends(get_timezone),
    library: ExerciseLibrary = Depends(get_library),
):
    if body.exercise_ids is not None:
        try:
            library = ExerciseLibrary(library.get_or_raise(ex_id) for ex_id in body.exercise_ids)
        except KeyError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc.args[0])) from exc
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    fatigue_scores = None
    if body.use_compound_fatigue:
        fatigue_scores = compute_compound_fatigue(
            muscles=ALL_MUSCLES,
            records=body.records,
            sleep_modifier=body.sleep_modifier,
            readiness_modifier=body.readiness_modifier,
            reference_date=body.reference_date,
        )

    suggestion = recommend_workout(
        body.records,
        library,
        body.reference_date,
        fatigue_scores=fatigue_scores,
        tz=tz,
    )
    if suggestion is None:
        logger.info("No recommendation: catalog has no exercise for the ready muscles")
    return suggestion


@router.post(
    "/wellness",
    summary="Combine sleep, condition and body trend into a wellness score.",
    response_model=Optional[WellnessScore],
)
def post_wellness(body: WellnessRequest):
    sleep_score = body.sleep_score
    if body.sleep_stages is not None:
        sleep_score = compute_sleep_score(body.sleep_stages).score
    return compute_wellness_score(
        sleep_score=sleep_score,
        condition_score=body.condition_score,
        body_trend=body.body_trend,
    )
