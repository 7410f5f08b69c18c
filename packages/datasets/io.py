from __future__ import annotations
from pathlib import Path
from typing import List, Tuple

from packages.engine import is_valid_word


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8", errors="replace").splitlines()]


def load_words(p: Path | str) -> Tuple[List[str], int]:
    """
    Load a newline-delimited dictionary.

    Blank lines are ignored and duplicates collapse, keeping the first
    occurrence so iteration order (and therefore tie-breaking) follows the
    file. Lines that are not 5 lowercase a–z letters are dropped.

    Returns:
      (words, skipped) where `skipped` counts the dropped non-blank lines.
    Raises:
      FileNotFoundError / OSError if the file can't be read.
    """
    seen = set()
    words: List[str] = []
    skipped = 0
    for ln in read_lines(p):
        w = ln.strip()
        if not w:
            continue
        if not is_valid_word(w):
            skipped += 1
            continue
        if w not in seen:
            seen.add(w)
            words.append(w)
    return words, skipped
