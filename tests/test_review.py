"""
Tests for the end-to-end review pipeline.
Run: python -m pytest tests/test_review.py -v
"""

from datetime import timedelta

import pytest

from study_engine.config import Settings
from study_engine.models import AttemptRecord, ScheduleState
from study_engine.services.review import review_answer


class TestReviewAnswer:

    def test_first_correct_answer(self, today):
        outcome = review_answer(["Paris"], ["Paris"], [], today=today)

        assert outcome.check.score == 1.0
        assert outcome.attempt.correct is True
        assert outcome.attempt.timestamp is not None
        assert outcome.mastery == 1.0
        assert outcome.quality == 5
        assert outcome.schedule.repetitions == 1
        assert outcome.schedule.interval_days == 1
        assert outcome.schedule.ease_factor == pytest.approx(2.6)
        assert outcome.schedule.next_review == today + timedelta(days=1)

    def test_wrong_answer_resets_schedule(self, today):
        state = ScheduleState(ease_factor=2.5, repetitions=4, interval_days=20)
        outcome = review_answer(["Berlin"], ["Paris"], [], state, today=today)

        assert outcome.attempt.correct is False
        assert outcome.mastery == 0.0
        assert outcome.quality == 0
        assert outcome.schedule.repetitions == 0
        assert outcome.schedule.interval_days == 1
        assert outcome.schedule.ease_factor == pytest.approx(1.7)

    def test_history_shapes_quality(self, today):
        history = [AttemptRecord(correct=False), AttemptRecord(correct=False)]
        outcome = review_answer(["Paris"], ["Paris"], history, today=today)

        # 1.0 / (1.0 + 0.8 + 0.6)
        assert outcome.mastery == pytest.approx(1.0 / 2.4)
        assert outcome.quality == 2
        assert outcome.schedule.repetitions == 0

    def test_half_the_blanks_counts_as_correct(self, today):
        outcome = review_answer(["cell", "nope"], ["cell", "atom"], [], today=today)
        assert outcome.check.score == 0.5
        assert outcome.attempt.correct is True

    def test_settings_are_applied(self, today):
        strict = Settings(match_threshold=0.9, pass_threshold=1.0, recency_weights=(1.0, 1.0))
        history = [AttemptRecord(correct=True)]
        outcome = review_answer(["Pari"], ["Paris"], history, today=today, settings=strict)

        assert not outcome.check.blanks[0].is_correct
        assert outcome.attempt.correct is False
        assert outcome.mastery == 0.5
        assert outcome.quality == 3

    def test_default_ease_from_settings(self, today):
        custom = Settings(default_ease_factor=2.0)
        outcome = review_answer(["Paris"], ["Paris"], [], today=today, settings=custom)
        assert outcome.schedule.ease_factor == pytest.approx(2.1)

    def test_input_state_unchanged(self, today):
        state = ScheduleState()
        review_answer(["Paris"], ["Paris"], [], state, today=today)
        assert state == ScheduleState()

    def test_weak_answer_at_ease_floor(self, today):
        state = ScheduleState(ease_factor=1.3)
        outcome = review_answer(["x"], ["Paris"], [], state, today=today)
        assert outcome.schedule.ease_factor == 1.3
        assert outcome.schedule.interval_days == 1
