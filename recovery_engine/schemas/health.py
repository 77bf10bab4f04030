"""
Raw health-sample schemas.

Samples come from an external health-data provider in no particular
order.  The engine only checks values for finiteness; range validation
belongs to the provider.
"""

import datetime
from enum import Enum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from recovery_engine.core.timeutils import mixed_awareness


class HealthSample(BaseModel):
    """A single ``{value, timestamp}`` reading (HRV in ms, RHR in bpm)."""

    model_config = ConfigDict(frozen=True)

    value: float
    date: datetime.datetime


class SleepStageType(str, Enum):
    AWAKE = "awake"
    CORE = "core"
    DEEP = "deep"
    REM = "rem"
    UNSPECIFIED = "unspecified"


class SleepStage(BaseModel):
    """A contiguous interval spent in one sleep stage."""

    model_config = ConfigDict(frozen=True)

    stage: SleepStageType
    start: datetime.datetime
    end: datetime.datetime

    @model_validator(mode="after")
    def validate_same_awareness(self) -> Self:
        if mixed_awareness(self.start, [self.end]):
            raise ValueError("start and end must both be timezone-aware or both naive")
        return self

    @property
    def duration_minutes(self) -> float:
        return max((self.end - self.start).total_seconds() / 60.0, 0.0)


class RecoveryModifiers(BaseModel):
    """Pair of recovery scalars fed into the fatigue engine.

    Higher values mean **faster** recovery.
    """

    sleep_modifier: float = Field(1.0, ge=0.5, le=1.25)
    readiness_modifier: float = Field(1.0, ge=0.6, le=1.20)
