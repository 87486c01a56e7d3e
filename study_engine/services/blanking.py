"""
Fill-in-the-blank generation.

An answer is split into word, whitespace and punctuation tokens (joining the
token texts gives the answer back unchanged). A share of the tokens that
contain a letter is hidden; hidden tokens get dense blank indices in the
order they appear in the answer.
"""
from __future__ import annotations

import logging
import math
import random
import re

from study_engine.errors import InvalidInputError
from study_engine.models.session import Difficulty
from study_engine.models.token import Token

logger = logging.getLogger(__name__)

DEFAULT_BLANK_FRACTION = 0.4
DEFAULT_PLACEHOLDER = "____"

DIFFICULTY_FRACTIONS: dict[Difficulty, float] = {
    Difficulty.EASY: 0.2,
    Difficulty.MEDIUM: 0.4,
    Difficulty.HARD: 0.6,
    Difficulty.EXTREME: 0.8,
}

# Runs of whitespace or of punctuation are kept as their own tokens
_SPLIT_RE = re.compile(r"(\s+|[.,!?;:'\"()\[\]{}]+)")


def blank_fraction_for(difficulty: Difficulty | str) -> float:
    try:
        return DIFFICULTY_FRACTIONS[Difficulty(difficulty)]
    except ValueError:
        raise InvalidInputError(f"Unknown difficulty preset: {difficulty!r}") from None


def split_tokens(answer: str) -> list[str]:
    return [part for part in _SPLIT_RE.split(answer) if part]


def is_blankable(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def tokenize(
    answer: str,
    blank_fraction: float = DEFAULT_BLANK_FRACTION,
    rng: random.Random | None = None,
) -> list[Token]:
    """Tokenize an answer and hide max(1, floor(n * blank_fraction)) of its n words."""
    if not 0.0 < blank_fraction <= 1.0:
        raise InvalidInputError(
            f"blank_fraction must be in (0, 1], got {blank_fraction}"
        )

    parts = split_tokens(answer)
    blankable = [i for i, part in enumerate(parts) if is_blankable(part)]
    if not blankable:
        return [Token(text=part) for part in parts]

    rng = rng or random.Random()
    num_to_blank = max(1, math.floor(len(blankable) * blank_fraction))
    chosen = set(rng.sample(blankable, num_to_blank))
    logger.debug(
        "Blanking %d of %d words in %d tokens", num_to_blank, len(blankable), len(parts)
    )

    tokens: list[Token] = []
    blank_counter = 0
    for i, part in enumerate(parts):
        if i in chosen:
            tokens.append(Token(text=part, is_blank=True, blank_index=blank_counter))
            blank_counter += 1
        else:
            tokens.append(Token(text=part))
    return tokens


def get_correct_answers(tokens: list[Token]) -> list[str]:
    """Text of each blank, in blank-index order."""
    blanks = sorted((t for t in tokens if t.is_blank), key=lambda t: t.blank_index)
    return [t.text for t in blanks]


def count_blanks(tokens: list[Token]) -> int:
    return sum(1 for t in tokens if t.is_blank)


def render_masked(tokens: list[Token], placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    return "".join(placeholder if t.is_blank else t.text for t in tokens)
