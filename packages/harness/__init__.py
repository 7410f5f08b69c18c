from .core import run_case, run_batch, WORDLE_MAX_TURNS
from .progress import make_progress, render_bar, PROGRESS_MODES
from .session import run_session, SessionResult

__all__ = [
    "run_case", "run_batch", "WORDLE_MAX_TURNS",
    "make_progress", "render_bar", "PROGRESS_MODES",
    "run_session", "SessionResult",
]
