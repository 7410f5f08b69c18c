"""
Self-play harness.

- run_case:  play one game against a known hidden answer with a given solver.
- run_batch: run many games in sequence (optionally a sample prefix).

The hidden answer is scored with the same pattern engine the solver uses, so
these functions double as an end-to-end check of filter + selection. They are
UI-agnostic and reused by the CLI and the tests.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple
from packages.engine import WINNING_GUESS, calc_guess_match, filter_candidates, format_pattern
from packages.solvers import DEFAULT_OPENER

# Default turn budget for self-play games.
WORDLE_MAX_TURNS = 6


def run_case(
        solver,
        answer: str,
        *,
        words: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        opener: Optional[str] = DEFAULT_OPENER,
        progress: Optional[Callable[[int, int], None]] = None,
        workers: Optional[int] = None,
) -> Dict:
    """
    Execute one game until the solver wins, the turn budget is exhausted, or
    no dictionary word is consistent with the feedback.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        answer:    the hidden word for this case
        words:     the dictionary (candidate pool and guess universe)
        max_turns: turn budget (>= 1)
        opener:    fixed first guess (None lets the solver score turn 1 too)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern_text)]), answer (str)
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")

    words = list(words)
    solver.reset(words=words, opener=opener, progress=progress, workers=workers)

    history: List[Tuple[str, str]] = []
    candidates = list(words)

    t0 = time.time()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "allowed": words,
        }

        guess = solver.next_guess(state)
        patt = calc_guess_match(guess, answer)
        history.append((guess, format_pattern(patt)))

        if patt == WINNING_GUESS:
            dt = (time.time() - t0) * 1000.0
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "answer": answer
            }

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_candidates(guess, patt, candidates)
        if not candidates:
            break

    dt = (time.time() - t0) * 1000.0
    return {
        "success": False, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": answer
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        words: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        opener: Optional[str] = DEFAULT_OPENER,
        sample: int | None = None,
        workers: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are played.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(solver, ans, words=words, max_turns=max_turns, opener=opener, workers=workers)
        for ans in pool
    ]
