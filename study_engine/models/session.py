from enum import Enum

from pydantic import BaseModel, Field


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"


class StudyMode(str, Enum):
    PRACTICE = "practice"
    TIMED = "timed"


class InputMethod(str, Enum):
    TYPING = "typing"
    WORDBANK = "wordbank"


class QuestionResult(BaseModel):
    question_id: str
    question: str
    correct: bool
    score: float = Field(ge=0.0, le=1.0)
    user_answers: list[str]
    correct_answers: list[str]
    hints_used: int = 0


class SessionSummary(BaseModel):
    mode: StudyMode
    difficulty: Difficulty
    input_method: InputMethod
    questions_answered: int
    correct_count: int
    score: float  # mean per-question score, 0-1
