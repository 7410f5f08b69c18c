"""
Candidate filtering given observed feedback.

Given:
  - the word that was played
  - the pattern the game reported for it
  - the current pool of words

Return:
  - the words that would have produced exactly that pattern.

This is the step that turns feedback into a shrinking candidate pool. The
pool never grows; an empty result means no dictionary word is consistent
with what was observed, and the caller decides what to do about it.
"""

from typing import Iterable, List, Tuple
from .scoring import GuessMatch, calc_guess_match

# History is a sequence of (played_word, pattern) pairs.
History = Iterable[Tuple[str, GuessMatch]]


def filter_candidates(chosen_word: str, observed_pattern: GuessMatch,
                      words: Iterable[str]) -> List[str]:
    """
    Keep only the words `w` for which calc_guess_match(chosen_word, w)
    equals `observed_pattern`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    observed = tuple(observed_pattern)
    return [w for w in words if calc_guess_match(chosen_word, w) == observed]


def filter_history(words: Iterable[str], history: History) -> List[str]:
    """Apply every (played_word, pattern) pair in turn."""
    out = list(words)
    for played, patt in history:
        out = filter_candidates(played, patt, out)
        if not out:
            break
    return out
