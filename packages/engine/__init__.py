from .scoring import (
    WORD_LEN, NUM_PATTERNS, WINNING_GUESS, LetterColor, GuessMatch, FeedbackError,
    calc_guess_match, parse_feedback, format_pattern,
)
from .constraints import filter_candidates, filter_history
from .validation import is_valid_word

__all__ = [
    "WORD_LEN", "NUM_PATTERNS", "WINNING_GUESS", "LetterColor", "GuessMatch", "FeedbackError",
    "calc_guess_match", "parse_feedback", "format_pattern",
    "filter_candidates", "filter_history", "is_valid_word",
]
