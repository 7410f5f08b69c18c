"""
Pattern-spread solver (minimum standard deviation over feedback buckets).

Idea:
  - For each guess g in the dictionary, partition the CURRENT candidates by
    the pattern g would produce against each of them.
  - Score g by the standard deviation of the bucket sizes, taken over all
    NUM_PATTERNS (243) possible patterns. Low spread = even partition = more
    information from the next reply.
  - If g is itself still a candidate (its bucket table holds the all-green
    pattern), subtract 1/|candidates| so words that might win right away are
    preferred, more so as the pool shrinks.
  - Pick the smallest score; the first word in `all_words` order wins ties.

Estimator:
    mean     = |candidates| / 243
    variance = sum over OBSERVED buckets of (count - mean)^2 / 243
Empty buckets contribute no term even though the divisor counts them. Changing
this changes which word gets recommended.

Parallel scoring:
  Every guess is scored independently, so `workers > 1` splits `all_words`
  into ordered chunks and scores them in a process pool. Chunks are reduced
  in their original order, which keeps the tie-break identical to the
  sequential loop.
"""

from __future__ import annotations

import math
from collections import defaultdict
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .base import BaseSolver, register
from packages.engine import NUM_PATTERNS, WINNING_GUESS, GuessMatch, calc_guess_match

# progress(done, total), called after each scored guess (or chunk of guesses)
ProgressFn = Callable[[int, int], None]

DEFAULT_OPENER = "rales"


def partition_counts(guess: str, candidates: Sequence[str]) -> Dict[GuessMatch, int]:
    """Bucket candidates by the pattern `guess` produces; only observed patterns appear."""
    buckets: Dict[GuessMatch, int] = defaultdict(int)
    _calc = calc_guess_match  # localize for speed
    for actual in candidates:
        buckets[_calc(guess, actual)] += 1
    return buckets


def pattern_std(guess: str, candidates: Sequence[str]) -> float:
    """Adjusted spread score for one guess. Lower is better."""
    n = len(candidates)
    buckets = partition_counts(guess, candidates)

    mean = n / float(NUM_PATTERNS)
    counts = np.fromiter(buckets.values(), dtype=np.float64, count=len(buckets))
    variance = float(np.sum((counts - mean) ** 2)) / NUM_PATTERNS
    std = math.sqrt(variance)

    if WINNING_GUESS in buckets:
        std -= 1.0 / n
    return std


def _score_chunk(guesses: List[str], candidates: List[str]) -> List[float]:
    return [pattern_std(g, candidates) for g in guesses]


def _chunked(words: List[str], workers: int) -> List[List[str]]:
    size = max(50, len(words) // (workers * 4))
    return [words[i:i + size] for i in range(0, len(words), size)]


def select_best_guess(
        candidates: Sequence[str],
        all_words: Sequence[str],
        *,
        progress: Optional[ProgressFn] = None,
        workers: Optional[int] = None,
) -> Tuple[str, float]:
    """
    Score every word of `all_words` against `candidates` and return
    (best_word, best_score).

    Raises ValueError if either collection is empty; the score is undefined
    without candidates.
    """
    candidates = list(candidates)
    all_words = list(all_words)
    if not candidates:
        raise ValueError("cannot select a guess from an empty candidate pool")
    if not all_words:
        raise ValueError("cannot select a guess from an empty dictionary")

    total = len(all_words)
    best_word: Optional[str] = None
    best_std = math.inf

    if workers is not None and workers > 1 and total > 1:
        chunks = _chunked(all_words, workers)
        done = 0
        with ProcessPoolExecutor(max_workers=workers) as executor:
            for chunk, scores in zip(chunks, executor.map(_score_chunk, chunks, repeat(candidates))):
                for g, std in zip(chunk, scores):
                    if std < best_std:
                        best_word, best_std = g, std
                done += len(chunk)
                if progress is not None:
                    progress(done, total)
        return best_word, best_std

    for index, g in enumerate(all_words):
        std = pattern_std(g, candidates)
        if std < best_std:
            best_word, best_std = g, std
        if progress is not None:
            progress(index + 1, total)

    return best_word, best_std


@register
class PatternStdSolver(BaseSolver):
    id = "pattern_std"
    name = "Minimum Pattern Spread"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Fixed opener on turn 1, then the minimum-spread word.

        Args:
            state: dict with keys:
                - "turn":       1-based turn number
                - "candidates": words still consistent with all feedback
                - "allowed":    full dictionary (guess universe)
        """
        if state["turn"] == 1 and self.opener:
            return self.opener
        word, _ = select_best_guess(
            state["candidates"], state["allowed"],
            progress=self.progress, workers=self.workers,
        )
        return word
