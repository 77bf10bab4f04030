"""
Daily condition score schemas.

The condition score compares today's HRV (and, optionally, the change in
resting heart rate) against the user's own trailing baseline:

    z     = (ln(today_hrv) - mean(ln(daily_hrv))) / max(std, 0.05)
    score = clamp(50 + 25 z, 0, 100)

Status buckets (shared with the wellness score):

- ``excellent`` — 80-100
- ``good``      — 60-79
- ``fair``      — 40-59
- ``tired``     — 20-39
- ``warning``   — 0-19
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ScoreStatus(str, Enum):
    """Qualitative 5-bucket status for 0-100 scores."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    TIRED = "tired"
    WARNING = "warning"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def guide_message(self) -> str:
        return _GUIDE_MESSAGES[self]


_GUIDE_MESSAGES: dict[ScoreStatus, str] = {
    ScoreStatus.EXCELLENT: "You're in top shape",
    ScoreStatus.GOOD: "Condition looks good",
    ScoreStatus.FAIR: "Take it easy today",
    ScoreStatus.TIRED: "You need more rest",
    ScoreStatus.WARNING: "Rest is recommended",
}


class ContributionFactor(str, Enum):
    HRV = "hrv"
    RHR = "rhr"


class ContributionImpact(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ScoreContribution(BaseModel):
    """A named factor and the direction it pushed the score."""

    factor: ContributionFactor
    impact: ContributionImpact
    detail: str


class ConditionScore(BaseModel):
    """Daily physiological condition score."""

    score: int = Field(..., ge=0, le=100)
    status: ScoreStatus
    date: datetime.date
    contributions: list[ScoreContribution] = Field(default_factory=list)


class BaselineStatus(BaseModel):
    """How much HRV history has been collected for the baseline."""

    days_collected: int = Field(..., ge=0)
    days_required: int = Field(..., gt=0)

    @property
    def is_ready(self) -> bool:
        return self.days_collected >= self.days_required

    @property
    def progress(self) -> float:
        return min(self.days_collected / self.days_required, 1.0)


class ConditionScoreResult(BaseModel):
    """Output of the condition score computation.

    ``score`` is ``None`` when the baseline is not ready or today's HRV
    is unusable.  That is a valid outcome, not an error.
    """

    score: Optional[ConditionScore] = None
    baseline_status: BaselineStatus
    contributions: list[ScoreContribution] = Field(default_factory=list)
