from __future__ import annotations

from collections.abc import Sequence

from study_engine.models.session import (
    Difficulty,
    InputMethod,
    QuestionResult,
    SessionSummary,
    StudyMode,
)


def session_score(results: Sequence[QuestionResult]) -> float:
    """Mean per-question score; 0 for an empty session."""
    if not results:
        return 0.0
    return sum(r.score for r in results) / len(results)


def summarize_session(
    results: Sequence[QuestionResult],
    mode: StudyMode,
    difficulty: Difficulty,
    input_method: InputMethod,
) -> SessionSummary:
    return SessionSummary(
        mode=mode,
        difficulty=difficulty,
        input_method=input_method,
        questions_answered=len(results),
        correct_count=sum(1 for r in results if r.correct),
        score=session_score(results),
    )
