"""
Tests for fill-in-the-blank generation.
Run: python -m pytest tests/test_blanking.py -v
"""

import random

import pytest
from pydantic import ValidationError

from study_engine.errors import InvalidInputError
from study_engine.models import Difficulty, Token
from study_engine.services.blanking import (
    DIFFICULTY_FRACTIONS,
    blank_fraction_for,
    count_blanks,
    get_correct_answers,
    render_masked,
    split_tokens,
    tokenize,
)

ANSWERS = [
    "The mitochondria is the powerhouse of the cell.",
    "Hello, world!  It's (mostly) fine...",
    "  leading and trailing  ",
    "E = mc^2",
    "123 456 !!!",
    "",
]


class TestSplitTokens:

    def test_punctuation_and_whitespace_are_separate(self):
        assert split_tokens("Hello, world!") == ["Hello", ",", " ", "world", "!"]

    def test_runs_are_grouped(self):
        assert split_tokens("Wait...  what?!") == ["Wait", "...", "  ", "what", "?!"]

    @pytest.mark.parametrize("answer", ANSWERS)
    def test_lossless(self, answer):
        assert "".join(split_tokens(answer)) == answer


class TestTokenize:

    @pytest.mark.parametrize("answer", ANSWERS)
    def test_lossless(self, answer, rng):
        tokens = tokenize(answer, 0.6, rng)
        assert "".join(t.text for t in tokens) == answer

    @pytest.mark.parametrize("answer", ANSWERS)
    def test_blank_indices_are_dense(self, answer, rng):
        tokens = tokenize(answer, 0.8, rng)
        indices = [t.blank_index for t in tokens if t.is_blank]
        assert indices == list(range(count_blanks(tokens)))
        assert all(t.blank_index == -1 for t in tokens if not t.is_blank)

    @pytest.mark.parametrize("fraction", [0.01, 0.2, 0.4, 0.6, 0.8, 1.0])
    def test_at_least_one_blank(self, fraction, rng):
        assert count_blanks(tokenize("Paris", fraction, rng)) == 1
        assert count_blanks(tokenize("one two three", fraction, rng)) >= 1

    def test_blank_count_uses_floor(self, rng):
        # 5 words * 0.4 = 2
        tokens = tokenize("alpha beta gamma delta epsilon", 0.4, rng)
        assert count_blanks(tokens) == 2

    def test_full_fraction_blanks_every_word(self, rng):
        tokens = tokenize("red, green and blue", 1.0, rng)
        assert get_correct_answers(tokens) == ["red", "green", "and", "blue"]

    def test_only_words_are_blanked(self, rng):
        tokens = tokenize("Hello, world! 42", 1.0, rng)
        for t in tokens:
            assert t.is_blank == any(ch.isalpha() for ch in t.text)

    def test_no_blankable_tokens(self, rng):
        tokens = tokenize("123 456 !!!", 0.8, rng)
        assert count_blanks(tokens) == 0
        assert all(t.blank_index == -1 for t in tokens)

    def test_empty_answer(self, rng):
        assert tokenize("", 0.4, rng) == []

    def test_seeded_generator_is_reproducible(self):
        answer = ANSWERS[0]
        first = tokenize(answer, 0.4, random.Random(7))
        second = tokenize(answer, 0.4, random.Random(7))
        assert first == second

    def test_works_without_generator(self):
        tokens = tokenize("alpha beta gamma", 0.4)
        assert count_blanks(tokens) == 1

    @pytest.mark.parametrize("fraction", [0.0, -0.1, 1.5])
    def test_invalid_fraction(self, fraction):
        with pytest.raises(InvalidInputError):
            tokenize("Paris", fraction)


class TestHelpers:

    def test_correct_answers_follow_blank_index(self):
        tokens = [
            Token(text="b", is_blank=True, blank_index=1),
            Token(text=" "),
            Token(text="a", is_blank=True, blank_index=0),
        ]
        assert get_correct_answers(tokens) == ["a", "b"]
        assert count_blanks(tokens) == 2

    def test_render_masked(self):
        tokens = [
            Token(text="The"),
            Token(text=" "),
            Token(text="cell", is_blank=True, blank_index=0),
            Token(text="."),
        ]
        assert render_masked(tokens) == "The ____."
        assert render_masked(tokens, placeholder="[?]") == "The [?]."

    def test_tokens_are_immutable(self):
        token = Token(text="cell")
        with pytest.raises(ValidationError):
            token.text = "other"


class TestDifficultyPresets:

    def test_fractions(self):
        assert DIFFICULTY_FRACTIONS == {
            Difficulty.EASY: 0.2,
            Difficulty.MEDIUM: 0.4,
            Difficulty.HARD: 0.6,
            Difficulty.EXTREME: 0.8,
        }

    def test_lookup_by_name(self):
        assert blank_fraction_for("hard") == 0.6
        assert blank_fraction_for(Difficulty.EASY) == 0.2

    def test_unknown_preset(self):
        with pytest.raises(InvalidInputError):
            blank_fraction_for("impossible")
