from __future__ import annotations

from pydantic import BaseModel, Field


class BlankResult(BaseModel):
    blank_index: int
    user_answer: str
    correct_answer: str
    is_correct: bool
    similarity: float = Field(ge=0.0, le=1.0)

    model_config = {"frozen": True}


class CheckResult(BaseModel):
    blanks: list[BlankResult]
    correct_count: int
    total_blanks: int
    score: float = Field(ge=0.0, le=1.0)  # 1.0 when there are no blanks

    model_config = {"frozen": True}
