from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AttemptRecord(BaseModel):
    correct: bool
    timestamp: datetime | None = None
    question_id: str | None = None  # only needed for statistics

    model_config = {"frozen": True}
