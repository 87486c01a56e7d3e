"""
SM-2 spaced repetition scheduling.

Quality scale (0-5):
  5 - perfect response
  4 - correct response after hesitation
  3 - correct response recalled with serious difficulty
  2 - incorrect response; correct one seemed easy to recall
  1 - incorrect response; correct one remembered
  0 - complete blackout

Quality is derived from a question's mastery score through QUALITY_TABLE.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from datetime import date, timedelta

from study_engine.errors import InvalidInputError
from study_engine.models.schedule import ScheduleState

logger = logging.getLogger(__name__)

DEFAULT_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
PASSING_QUALITY = 3

# (lower_bound, quality), checked in order with score >= lower_bound.
# The smallest positive float makes "score > 0" an inclusive bound.
QUALITY_TABLE: tuple[tuple[float, int], ...] = (
    (1.0, 5),
    (0.8, 4),
    (0.5, 3),
    (0.3, 2),
    (math.nextafter(0.0, 1.0), 1),
    (0.0, 0),
)


def quality_from_score(score: float | None) -> int:
    """Map a mastery score in [0, 1] to an SM-2 quality rating."""
    if score is None or not 0.0 <= score <= 1.0:
        raise InvalidInputError(f"mastery score must be in [0, 1], got {score!r}")
    for lower_bound, quality in QUALITY_TABLE:
        if score >= lower_bound:
            return quality
    return QUALITY_TABLE[-1][1]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def advance(
    quality: int,
    state: ScheduleState,
    today: date | None = None,
    min_ease_factor: float = MIN_EASE_FACTOR,
) -> ScheduleState:
    """
    Compute the schedule that follows a review graded `quality`.

    Returns a new ScheduleState; `state` is left untouched.
    """
    if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 5:
        raise InvalidInputError(f"quality must be an integer in 0..5, got {quality!r}")

    if quality < PASSING_QUALITY:
        # Failed recall: reset streak and retry tomorrow
        new_reps = 0
        new_interval = 1
    else:
        if state.repetitions == 0:
            new_interval = 1
        elif state.repetitions == 1:
            new_interval = 6
        else:
            new_interval = _round_half_up(state.interval_days * state.ease_factor)
        new_reps = state.repetitions + 1

    # EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))
    q_diff = 5 - quality
    # A configured floor can raise the SM-2 minimum but never lower it
    new_ease = max(
        MIN_EASE_FACTOR,
        min_ease_factor,
        state.ease_factor + (0.1 - q_diff * (0.08 + q_diff * 0.02)),
    )

    next_review = (today or date.today()) + timedelta(days=new_interval)
    logger.debug(
        "SM-2 q=%d: reps %d->%d, interval %d->%d, ease %.2f->%.2f",
        quality,
        state.repetitions,
        new_reps,
        state.interval_days,
        new_interval,
        state.ease_factor,
        new_ease,
    )
    return ScheduleState(
        ease_factor=new_ease,
        repetitions=new_reps,
        interval_days=new_interval,
        next_review=next_review,
    )


def is_due(state: ScheduleState, today: date | None = None) -> bool:
    """A question is due when it was never scheduled or its review date has arrived."""
    if state.next_review is None:
        return True
    return state.next_review <= (today or date.today())


def due_indices(states: Sequence[ScheduleState], today: date | None = None) -> list[int]:
    """Indices of due questions: never-scheduled first, then oldest review date first."""
    today = today or date.today()
    due = [i for i, s in enumerate(states) if is_due(s, today)]
    # sorted() is stable, so ties keep input order
    return sorted(due, key=lambda i: (states[i].next_review is not None, states[i].next_review or today))
