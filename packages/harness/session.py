"""
Interactive solving session.

Loop:
  suggest a word -> read one line of feedback -> win? stop
  else narrow the pool with that feedback and pick the next suggestion.

Input and output are injected (`read_line`, `write`) so the loop can be driven
from a terminal, a test, or anything else that produces lines of text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from packages.engine import (
    WINNING_GUESS, FeedbackError, GuessMatch, filter_candidates, parse_feedback,
)
from packages.solvers import DEFAULT_OPENER, select_best_guess

INTRO = (
    "WORDLE SOLVER",
    "I'll tell you what word to play. You'll reply back with the color match result.",
    "Green tiles are 'g'. Yellow tiles are 'y'. Miss tiles are '-'",
    "For example, a match result with the first two as green, the 3rd as yellow,",
    "and the others as blank, would look like:",
    "ggy--",
    "\n\nReady to play?\n",
)


@dataclass
class SessionResult:
    success: bool
    guesses: List[Tuple[str, GuessMatch]] = field(default_factory=list)
    remaining: int = 0


def read_stdin_line() -> str:
    """One line from stdin; EOFError when the stream is exhausted."""
    line = sys.stdin.readline()
    if not line:
        raise EOFError("no more input")
    return line


def run_session(
        all_words: Sequence[str],
        *,
        first_guess: str = DEFAULT_OPENER,
        read_line: Callable[[], str] = read_stdin_line,
        write: Callable[[str], None] = print,
        progress: Optional[Callable[[int, int], None]] = None,
        workers: Optional[int] = None,
) -> SessionResult:
    """
    Run one interactive game until the player reports all-green, or until no
    dictionary word is consistent with the feedback.

    A feedback line of the wrong length is reported and re-prompted without
    using up the guess. EOFError / OSError from `read_line` propagate.
    """
    all_words = list(all_words)
    words = list(all_words)
    suggestion = first_guess
    history: List[Tuple[str, GuessMatch]] = []

    for line in INTRO:
        write(line)

    while True:
        write(f"You should play the word '{suggestion}'.")
        write("What was your color match result?\n")

        try:
            guess_match = parse_feedback(read_line())
        except FeedbackError as e:
            write(f"{e} Try again...")
            continue

        history.append((suggestion, guess_match))

        if guess_match == WINNING_GUESS:
            write("Yippie! You got it!")
            return SessionResult(True, history, len(words))

        words = filter_candidates(suggestion, guess_match, words)
        write(f"Word pool reduced to {len(words)}")
        if not words:
            write("No word in the dictionary matches that feedback.")
            return SessionResult(False, history, 0)

        suggestion, _ = select_best_guess(words, all_words, progress=progress, workers=workers)
