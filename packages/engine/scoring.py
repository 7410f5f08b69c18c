"""
Feedback patterns for a single (guess, actual) word pair.

Conventions:
  - GREEN  : letter in the correct position
  - YELLOW : letter present elsewhere
  - GRAY   : letter absent

Rendered as text, a pattern uses 'g', 'y' and '-' (the same characters the
player types back at the prompt).

The marking rule is a counting rule, NOT the two-pass Wordle marker:
  1) Count every letter of the actual word.
  2) Walk the guess left to right keeping a RUNNING count per letter.
  3) Position i is green on an exact match, else yellow when the actual
     word's total count for that letter is >= the running count so far,
     else gray.

A green later in the word does not "consume" the letter, so duplicates are
marked by running-count-vs-total only. The candidate filter and the guess
scorer both depend on this exact rule; do not swap in the textbook marker.

Examples:
  calc_guess_match("aabbb", "ababa") -> (G, Y, Y, G, -)
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

# Fixed word length everywhere in the solver.
WORD_LEN = 5

# 3 colors per position -> 3**5 distinct patterns.
NUM_PATTERNS = 3 ** WORD_LEN


class LetterColor(Enum):
    GRAY = 0
    YELLOW = 1
    GREEN = 2


GuessMatch = Tuple[LetterColor, ...]

WINNING_GUESS: GuessMatch = (LetterColor.GREEN,) * WORD_LEN

_FEEDBACK_CHARS = {"g": LetterColor.GREEN, "y": LetterColor.YELLOW}
_RENDER_CHARS = {LetterColor.GREEN: "g", LetterColor.YELLOW: "y", LetterColor.GRAY: "-"}


class FeedbackError(ValueError):
    """Typed feedback of the wrong length."""


def _letter_index(ch: str) -> int:
    return ord(ch) - ord("a")


def calc_guess_match(guess_word: str, actual_word: str) -> GuessMatch:
    """
    Compute the feedback pattern produced by playing `guess_word` when the
    hidden word is `actual_word`.

    Both words are expected to be 5 lowercase a-z letters; nothing is checked.
    """
    actual_letter_count = [0] * 26
    for ch in actual_word:
        actual_letter_count[_letter_index(ch)] += 1

    # Running count, accumulated left to right
    guess_letter_count = [0] * 26
    pattern = [LetterColor.GRAY] * WORD_LEN

    for i, (g, a) in enumerate(zip(guess_word, actual_word)):
        key = _letter_index(g)
        guess_letter_count[key] += 1

        if g == a:
            pattern[i] = LetterColor.GREEN
        elif actual_letter_count[key] >= guess_letter_count[key]:
            pattern[i] = LetterColor.YELLOW

    return tuple(pattern)


def parse_feedback(text: str) -> GuessMatch:
    """
    Turn a typed feedback line (e.g. "gy--g") into a GuessMatch.

    'g' is green, 'y' is yellow and every other character is gray; unknown
    characters are not rejected. Raises FeedbackError if the stripped line is
    not exactly WORD_LEN characters long.
    """
    line = text.strip()
    if len(line) != WORD_LEN:
        raise FeedbackError(
            f"Input must be {WORD_LEN} characters long. Length was {len(line)}"
        )
    return tuple(_FEEDBACK_CHARS.get(ch, LetterColor.GRAY) for ch in line)


def format_pattern(match: GuessMatch) -> str:
    """Render a GuessMatch as 'g'/'y'/'-' text."""
    return "".join(_RENDER_CHARS[c] for c in match)
