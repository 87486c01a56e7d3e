from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from study_engine.models.attempt import AttemptRecord
from study_engine.models.check import CheckResult


class ScheduleState(BaseModel):
    ease_factor: float = Field(default=2.5, ge=1.3)
    repetitions: int = Field(default=0, ge=0)  # consecutive successful recalls
    interval_days: int = Field(default=0, ge=0)
    next_review: date | None = None  # None = never scheduled, due immediately

    model_config = {"frozen": True}


class ReviewOutcome(BaseModel):
    check: CheckResult
    attempt: AttemptRecord
    mastery: float
    quality: int = Field(ge=0, le=5)
    schedule: ScheduleState
