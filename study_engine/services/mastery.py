from __future__ import annotations

from collections.abc import Sequence

from study_engine.models.attempt import AttemptRecord

# Most recent attempt first
RECENCY_WEIGHTS: tuple[float, ...] = (1.0, 0.8, 0.6, 0.4, 0.2)


def weighted_score(
    attempts: Sequence[AttemptRecord],
    weights: Sequence[float] = RECENCY_WEIGHTS,
) -> float | None:
    """
    Recency-weighted share of correct attempts, in [0, 1].

    `attempts` must be ordered most recent first. Only as many attempts as
    there are weights are used, and only the weights of attempts actually
    present are summed. Returns None when there are no attempts.
    """
    recent = list(attempts[: len(weights)])
    if not recent:
        return None

    weighted_sum = 0.0
    total_weight = 0.0
    for attempt, weight in zip(recent, weights):
        if attempt.correct:
            weighted_sum += weight
        total_weight += weight
    return weighted_sum / total_weight
