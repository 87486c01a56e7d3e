"""
Word bank and hint helpers for the fill-in-the-blank review screen.

The word bank holds the correct answers plus decoy words taken from other
questions' answers; a hint reveals one still-empty blank.
"""
from __future__ import annotations

import math
import random
from collections.abc import Collection, Iterable, Sequence

from study_engine.services.blanking import is_blankable


def build_word_bank(
    correct_answers: Sequence[str],
    other_answers: Iterable[str],
    rng: random.Random | None = None,
) -> list[str]:
    """Shuffle the correct answers together with max(1, ceil(k / 2)) decoys."""
    rng = rng or random.Random()
    correct_set = {a.casefold() for a in correct_answers}

    decoy_pool = [
        word
        for answer in other_answers
        for word in answer.split()
        if is_blankable(word) and word.casefold() not in correct_set
    ]
    rng.shuffle(decoy_pool)
    num_decoys = max(1, math.ceil(len(correct_answers) / 2))

    words = list(correct_answers) + decoy_pool[:num_decoys]
    rng.shuffle(words)
    return words


def pick_hint(
    values: Sequence[str],
    hinted: Collection[int],
    rng: random.Random | None = None,
) -> int | None:
    """Index of a random empty, not-yet-hinted blank, or None when there is none."""
    candidates = [i for i, v in enumerate(values) if not v.strip() and i not in hinted]
    if not candidates:
        return None
    rng = rng or random.Random()
    return rng.choice(candidates)
