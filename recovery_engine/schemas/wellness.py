"""
Sleep and wellness score schemas.

The wellness score is a weighted aggregate of three 0-100 components:

    sleep      40%
    condition  35%
    body trend 25%

Missing components are dropped and their weight redistributed, so a
single available component is enough to produce a score.
"""

from typing import Optional

from pydantic import BaseModel, Field

from recovery_engine.schemas.condition import ScoreStatus


class SleepScore(BaseModel):
    """Nightly sleep quality score."""

    score: int = Field(..., ge=0, le=100)
    total_minutes: float = Field(..., ge=0.0, description="Time asleep (awake stages excluded)")
    efficiency: float = Field(..., ge=0.0, le=100.0, description="Asleep / in-bed, percent")


class BodyTrend(BaseModel):
    """Body composition change over the last 7 days."""

    weight_change_kg: Optional[float] = Field(None, description="Negative = loss")
    body_fat_change_pct: Optional[float] = Field(None, description="Percentage points, negative = loss")


class WellnessScore(BaseModel):
    """Weighted daily wellness aggregate."""

    score: int = Field(..., ge=0, le=100)
    status: ScoreStatus
    sleep_score: Optional[int] = None
    condition_score: Optional[int] = None
    body_score: Optional[int] = None
    guide_message: str
