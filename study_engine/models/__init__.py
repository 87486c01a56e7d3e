from study_engine.models.attempt import AttemptRecord
from study_engine.models.check import BlankResult, CheckResult
from study_engine.models.schedule import ReviewOutcome, ScheduleState
from study_engine.models.session import (
    Difficulty,
    InputMethod,
    QuestionResult,
    SessionSummary,
    StudyMode,
)
from study_engine.models.stats import DailyStat, OverviewStats
from study_engine.models.token import Token

__all__ = [
    "AttemptRecord",
    "BlankResult",
    "CheckResult",
    "DailyStat",
    "Difficulty",
    "InputMethod",
    "OverviewStats",
    "QuestionResult",
    "ReviewOutcome",
    "ScheduleState",
    "SessionSummary",
    "StudyMode",
    "Token",
]
