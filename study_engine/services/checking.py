"""
Answer checking for fill-in-the-blank submissions.

Each submitted value is fuzzy-matched against the blank at the same index.
A blank counts as correct when its similarity reaches MATCH_THRESHOLD; the
question as a whole is recorded as correct when at least PASS_THRESHOLD of
its blanks are.
"""
from __future__ import annotations

from collections.abc import Sequence

from study_engine.models.check import BlankResult, CheckResult
from study_engine.services.similarity import MATCH_THRESHOLD, similarity

PASS_THRESHOLD = 0.5


def check(
    user_answers: Sequence[str],
    correct_answers: Sequence[str],
    threshold: float = MATCH_THRESHOLD,
) -> CheckResult:
    blanks: list[BlankResult] = []
    for i, user_answer in enumerate(user_answers):
        correct_answer = correct_answers[i] if i < len(correct_answers) else ""
        sim = similarity(user_answer, correct_answer)
        blanks.append(
            BlankResult(
                blank_index=i,
                user_answer=user_answer.strip(),
                correct_answer=correct_answer,
                is_correct=sim >= threshold,
                similarity=sim,
            )
        )

    correct_count = sum(1 for b in blanks if b.is_correct)
    total_blanks = len(blanks)
    return CheckResult(
        blanks=blanks,
        correct_count=correct_count,
        total_blanks=total_blanks,
        score=correct_count / total_blanks if total_blanks > 0 else 1.0,
    )


def is_passing(result: CheckResult, threshold: float = PASS_THRESHOLD) -> bool:
    return result.score >= threshold
