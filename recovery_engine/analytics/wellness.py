"""
Daily wellness score — weighted sleep, condition and body trend.

    wellness = Σ(score_i × weight_i) / Σ(weight_i)    over available parts

Weights are sleep 0.40, condition 0.35, body trend 0.25.  A missing
part drops out of both sums, so its weight is spread proportionally
over the others.
"""

from __future__ import annotations

import math
from typing import Optional

from recovery_engine.analytics.status import clamp_score, score_status
from recovery_engine.schemas.condition import ScoreStatus
from recovery_engine.schemas.wellness import BodyTrend, WellnessScore

SLEEP_WEIGHT = 0.40
CONDITION_WEIGHT = 0.35
BODY_WEIGHT = 0.25

WELLNESS_GUIDE_MESSAGES: dict[ScoreStatus, str] = {
    ScoreStatus.EXCELLENT: "Well recovered. Ready for high intensity.",
    ScoreStatus.GOOD: "Good condition. Normal training is fine.",
    ScoreStatus.FAIR: "Some recovery needed. Consider lighter work.",
    ScoreStatus.TIRED: "You need more rest. Low intensity only.",
    ScoreStatus.WARNING: "Rest is recommended. Skip training today.",
}


def body_trend_score(trend: BodyTrend) -> int:
    """Score a 7-day body composition trend (50 = neutral).

    Stable or decreasing weight and body fat score higher.
    """
    points = 50.0

    weight = trend.weight_change_kg
    if weight is not None and math.isfinite(weight):
        if abs(weight) < 0.5:
            points += 25
        elif weight < 0:
            points += 15
        else:
            points -= min(15.0, abs(weight) * 5)

    fat = trend.body_fat_change_pct
    if fat is not None and math.isfinite(fat):
        if abs(fat) < 0.3 or fat < 0:
            points += 25
        else:
            points -= min(25.0, abs(fat) * 10)

    return clamp_score(points)


def compute_wellness_score(
    sleep_score: Optional[int] = None,
    condition_score: Optional[int] = None,
    body_trend: Optional[BodyTrend] = None,
) -> Optional[WellnessScore]:
    """Combine the available component scores.

    Returns:
        :class:`WellnessScore`, or ``None`` when every component is missing.
    """
    body_score = body_trend_score(body_trend) if body_trend is not None else None

    weighted = [
        (score, weight)
        for score, weight in (
            (sleep_score, SLEEP_WEIGHT),
            (condition_score, CONDITION_WEIGHT),
            (body_score, BODY_WEIGHT),
        )
        if score is not None
    ]
    if not weighted:
        return None

    total_weight = sum(w for _, w in weighted)
    raw = sum(s * w for s, w in weighted) / total_weight
    if not math.isfinite(raw):
        return None

    score = clamp_score(raw)
    status = score_status(score)
    return WellnessScore(
        score=score,
        status=status,
        sleep_score=sleep_score,
        condition_score=condition_score,
        body_score=body_score,
        guide_message=WELLNESS_GUIDE_MESSAGES[status],
    )
