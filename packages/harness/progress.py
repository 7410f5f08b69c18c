"""
Progress indicators for guess scoring.

The selector reports progress through a plain callable `progress(done, total)`
so it stays UI-agnostic. This module builds those callables:

- "bar":   tqdm bar on stderr
- "plain": fixed-width text bar, e.g. "[========            ] 40% 2 of 5"
- "off":   no indicator (None)
- "auto":  "bar" when stderr is a TTY, else "plain"
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from tqdm import tqdm

ProgressFn = Callable[[int, int], None]

BAR_CHAR_LENGTH = 20

PROGRESS_MODES = ("auto", "bar", "plain", "off")


def render_bar(numer: int, denom: int, width: int = BAR_CHAR_LENGTH) -> str:
    """Text bar for `numer` of `denom` (no carriage return, no newline)."""
    fraction = numer / denom if denom else 1.0
    loaded = int(fraction * width)
    pct = int(fraction * 100.0)
    return "[" + "=" * loaded + " " * (width - loaded) + f"] {pct}% {numer} of {denom}"


class PlainProgress:
    """Redraws a text bar in place; ends the line when the run completes."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stderr

    def __call__(self, done: int, total: int) -> None:
        self.stream.write("\r" + render_bar(done, total))
        if done >= total:
            self.stream.write("\n")
        self.stream.flush()


class TqdmProgress:
    """One tqdm bar per scoring run, opened on the first update."""

    def __init__(self, stream: Optional[TextIO] = None, desc: str = "Scoring"):
        self.stream = stream or sys.stderr
        self.desc = desc
        self._bar = None

    def __call__(self, done: int, total: int) -> None:
        if self._bar is None:
            self._bar = tqdm(total=total, ncols=80, desc=self.desc, unit="word",
                             file=self.stream, leave=False)
        self._bar.update(done - self._bar.n)
        if done >= total:
            self._bar.close()
            self._bar = None


def make_progress(mode: str, stream: Optional[TextIO] = None) -> Optional[ProgressFn]:
    if mode not in PROGRESS_MODES:
        raise ValueError(f"Unknown progress mode: {mode}. Available: {list(PROGRESS_MODES)}")
    stream = stream or sys.stderr
    if mode == "auto":
        mode = "bar" if stream.isatty() else "plain"
    if mode == "bar":
        return TqdmProgress(stream)
    if mode == "plain":
        return PlainProgress(stream)
    return None
