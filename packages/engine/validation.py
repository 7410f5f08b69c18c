"""
Word shape checks.

A word is usable by the solver iff:
  - it is a string
  - it is lowercase ASCII a–z only
  - it has exact length WORD_LEN

The pattern engine indexes letters by `ord(ch) - ord('a')`, so anything
outside a–z would land in the wrong counter slot (or off the end of it).
Dictionary membership is not checked here; the loaded list is the dictionary.
"""

from .scoring import WORD_LEN

_ALPHABET = frozenset("abcdefghijklmnopqrstuvwxyz")


def is_valid_word(word) -> bool:
    """Return True if `word` has the shape the pattern engine expects."""
    if not isinstance(word, str):
        return False
    return len(word) == WORD_LEN and all(ch in _ALPHABET for ch in word)
