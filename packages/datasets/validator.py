"""
Dictionary validator.

What this module does:
- Validate a word list (one word per line) against the solver's rules:
  lowercase, a–z only, exact length WORD_LEN.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Blank lines are NOT counted as invalid here; the loader ignores them.

Typical use:
    from packages.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import WORD_LEN, is_valid_word


# -----------------------------
# Dataclass for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words (duplicates included)
    unique_count: int    # unique valid words
    invalid_lines: int   # non-blank lines that are not WORD_LEN a–z letters
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], List[str]]:
    """
    Returns:
      (valid_words, invalid_examples)
    """
    valid: List[str] = []
    invalid: List[str] = []

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if is_valid_word(w):
                valid.append(w)
            else:
                invalid.append(w)

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate the dictionary file at `path`.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport) with counts,
        SHA-256, a strict `passed` flag (non-empty, no invalid lines) and
        `issues` (list of strings) describing any problems. Duplicates are
        reported but don't fail validation; the loader collapses them.
    """
    p = Path(path)
    if not p.exists():
        rep = DictionaryReport(path, False, 0, 0, 0, "", False,
                               [f"dictionary file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = len(set(words))
    issues: List[str] = []

    if not words:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        # Surface a few examples to debug quickly
        issues.append(
            f"{len(invalid)} invalid line(s), expected {WORD_LEN} lowercase letters "
            f"(e.g., {invalid[:5]})"
        )
    if unique != len(words):
        issues.append(f"{len(words) - unique} duplicate word(s)")

    rep = DictionaryReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=len(invalid),
        sha256=_sha256_file(p),
        passed=bool(words) and not invalid,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console output.

    Example:
        words.txt | words=12972 (uniq=12972, sha=abc123def456) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{report['path']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
