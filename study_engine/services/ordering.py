"""
Question selection biased toward weak items.

Every question gets a weight of 1 - score (0.5 for never-attempted
questions), and both selection modes draw from the same weighted-random
primitive:

  smart_order  - practice mode: weighted sampling without replacement into a
                 full permutation of the question indices.
  pick_next    - timed mode: one weighted draw that skips the most recently
                 shown questions.
"""
from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import TypeVar

from study_engine.errors import InvalidInputError

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNKNOWN_SCORE_WEIGHT_BASIS = 0.5


def selection_weight(score: float | None) -> float:
    """Lower scores give higher weights; None counts as medium priority."""
    return 1.0 - (UNKNOWN_SCORE_WEIGHT_BASIS if score is None else score)


def _validate_scores(scores: Sequence[float | None]) -> None:
    if not scores:
        raise InvalidInputError("scores must not be empty")
    for i, score in enumerate(scores):
        if score is not None and not 0.0 <= score <= 1.0:
            raise InvalidInputError(f"score at index {i} must be in [0, 1], got {score!r}")


def weighted_random_index(weights: Sequence[float], rng: random.Random | None = None) -> int:
    """Index drawn with probability proportional to its weight (uniform if all are 0)."""
    if not weights:
        raise InvalidInputError("weights must not be empty")
    rng = rng or random.Random()

    total = sum(weights)
    if total == 0:
        return rng.randrange(len(weights))

    r = rng.random() * total
    for i, weight in enumerate(weights):
        r -= weight
        if r <= 0:
            return i
    # Floating-point leftovers
    return len(weights) - 1


def smart_order(scores: Sequence[float | None], rng: random.Random | None = None) -> list[int]:
    _validate_scores(scores)
    rng = rng or random.Random()

    weights = [selection_weight(s) for s in scores]
    remaining = list(range(len(scores)))
    result: list[int] = []
    while remaining:
        picked = weighted_random_index([weights[i] for i in remaining], rng)
        result.append(remaining.pop(picked))
    return result


def apply_smart_order(
    items: Sequence[T],
    scores: Sequence[float | None],
    rng: random.Random | None = None,
) -> list[T]:
    if len(items) != len(scores):
        raise InvalidInputError(
            f"items and scores differ in length ({len(items)} != {len(scores)})"
        )
    return [items[i] for i in smart_order(scores, rng)]


def pick_next(
    scores: Sequence[float | None],
    recent_indices: Sequence[int],
    rng: random.Random | None = None,
) -> int:
    """
    Pick the next question for timed mode.

    The last min(max(1, n // 2), len(recent_indices)) entries of
    `recent_indices` (most recent last) are excluded, unless that would leave
    no candidates, in which case nothing is excluded.
    """
    _validate_scores(scores)
    rng = rng or random.Random()

    n = len(scores)
    exclude_count = min(max(1, n // 2), len(recent_indices))
    excluded = set(recent_indices[len(recent_indices) - exclude_count:])

    pool = [i for i in range(n) if i not in excluded]
    if not pool:
        pool = list(range(n))

    picked = pool[weighted_random_index([selection_weight(scores[i]) for i in pool], rng)]
    logger.debug("Picked question %d from %d candidates (%d excluded)", picked, len(pool), len(excluded))
    return picked
