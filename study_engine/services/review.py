"""
Review pipeline: from a learner's submission to the question's next schedule.

    check answers -> record attempt -> recompute mastery -> quality -> SM-2

Nothing is persisted here. The caller stores `outcome.attempt` at the head of
the question's history and `outcome.schedule` as its new schedule.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timezone

from study_engine.config import Settings, settings as default_settings
from study_engine.models.attempt import AttemptRecord
from study_engine.models.schedule import ReviewOutcome, ScheduleState
from study_engine.services.checking import check, is_passing
from study_engine.services.mastery import weighted_score
from study_engine.services.sm2 import advance, quality_from_score

logger = logging.getLogger(__name__)


def review_answer(
    user_answers: Sequence[str],
    correct_answers: Sequence[str],
    history: Sequence[AttemptRecord],
    state: ScheduleState | None = None,
    today: date | None = None,
    settings: Settings | None = None,
) -> ReviewOutcome:
    """
    Grade one submission and advance the question's schedule.

    `history` holds the question's earlier attempts, most recent first.
    `state` defaults to a never-reviewed schedule.
    """
    settings = settings or default_settings
    state = state or ScheduleState(ease_factor=settings.default_ease_factor)

    result = check(user_answers, correct_answers, threshold=settings.match_threshold)
    attempt = AttemptRecord(
        correct=is_passing(result, threshold=settings.pass_threshold),
        timestamp=datetime.now(timezone.utc),
    )

    # History now has at least one attempt, so mastery is never None here
    mastery = weighted_score([attempt, *history], weights=settings.recency_weights)
    quality = quality_from_score(mastery)
    schedule = advance(quality, state, today=today, min_ease_factor=settings.min_ease_factor)

    logger.debug(
        "Reviewed %d blanks: score=%.2f correct=%s mastery=%.2f quality=%d next=%s",
        result.total_blanks,
        result.score,
        attempt.correct,
        mastery,
        quality,
        schedule.next_review,
    )
    return ReviewOutcome(
        check=result,
        attempt=attempt,
        mastery=mastery,
        quality=quality,
        schedule=schedule,
    )
