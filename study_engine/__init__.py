from study_engine.errors import InvalidInputError, StudyEngineError
from study_engine.services.blanking import (
    blank_fraction_for,
    count_blanks,
    get_correct_answers,
    render_masked,
    tokenize,
)
from study_engine.services.checking import check, is_passing
from study_engine.services.mastery import weighted_score
from study_engine.services.ordering import (
    apply_smart_order,
    pick_next,
    selection_weight,
    smart_order,
    weighted_random_index,
)
from study_engine.services.review import review_answer
from study_engine.services.session import session_score, summarize_session
from study_engine.services.similarity import is_close_enough, similarity
from study_engine.services.sm2 import advance, due_indices, is_due, quality_from_score
from study_engine.services.stats import (
    accuracy_percent,
    current_streak,
    daily_stats,
    overview_stats,
)
from study_engine.services.word_bank import build_word_bank, pick_hint

__all__ = [
    "InvalidInputError",
    "StudyEngineError",
    "accuracy_percent",
    "advance",
    "apply_smart_order",
    "blank_fraction_for",
    "build_word_bank",
    "check",
    "count_blanks",
    "current_streak",
    "daily_stats",
    "due_indices",
    "get_correct_answers",
    "is_close_enough",
    "is_due",
    "is_passing",
    "overview_stats",
    "pick_hint",
    "pick_next",
    "quality_from_score",
    "render_masked",
    "review_answer",
    "selection_weight",
    "session_score",
    "similarity",
    "smart_order",
    "summarize_session",
    "tokenize",
    "weighted_random_index",
    "weighted_score",
]
