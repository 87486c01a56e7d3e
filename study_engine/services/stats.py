"""
Study statistics over a learner's attempt history.

All functions take attempt records supplied by the caller. Attempts without
a timestamp count toward totals but not toward any per-day figure.
"""
from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date, timedelta

from study_engine.errors import InvalidInputError
from study_engine.models.attempt import AttemptRecord
from study_engine.models.stats import DailyStat, OverviewStats

WEEK_DAYS = 7


def accuracy_percent(total: int, correct: int) -> int:
    if total <= 0:
        return 0
    # Half-up, so 12.5% reports as 13
    return math.floor(correct / total * 100 + 0.5)


def _attempt_day(attempt: AttemptRecord) -> date | None:
    return attempt.timestamp.date() if attempt.timestamp is not None else None


def current_streak(activity_dates: Iterable[date], today: date | None = None) -> int:
    """
    Consecutive days with at least one attempt, counting back from today.

    If nothing was studied today yet, a streak ending yesterday still counts.
    """
    today = today or date.today()
    days = set(activity_dates)

    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def daily_stats(
    attempts: Iterable[AttemptRecord],
    days: int = WEEK_DAYS,
    today: date | None = None,
) -> list[DailyStat]:
    """Per-day totals for the last `days` days (today included), oldest first.

    Days without attempts are left out.
    """
    if days < 1:
        raise InvalidInputError(f"days must be at least 1, got {days}")
    today = today or date.today()
    first_day = today - timedelta(days=days - 1)

    counts: dict[date, list[int]] = defaultdict(lambda: [0, 0])
    for attempt in attempts:
        day = _attempt_day(attempt)
        if day is None or not first_day <= day <= today:
            continue
        counts[day][0] += 1
        counts[day][1] += int(attempt.correct)

    return [
        DailyStat(
            date=day,
            count=count,
            correct=correct,
            accuracy=accuracy_percent(count, correct),
        )
        for day, (count, correct) in sorted(counts.items())
    ]


def overview_stats(attempts: Sequence[AttemptRecord], today: date | None = None) -> OverviewStats:
    today = today or date.today()
    week_start = today - timedelta(days=WEEK_DAYS - 1)

    total = len(attempts)
    correct = sum(1 for a in attempts if a.correct)
    days = [d for d in (_attempt_day(a) for a in attempts) if d is not None]

    return OverviewStats(
        total=total,
        correct=correct,
        accuracy=accuracy_percent(total, correct),
        streak=current_streak(days, today),
        today=sum(1 for d in days if d == today),
        this_week=sum(1 for d in days if week_start <= d <= today),
        unique_questions=len({a.question_id for a in attempts if a.question_id is not None}),
    )
