from __future__ import annotations
from typing import Callable, Dict, List, Optional, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.words: List[str] = []
        self.opener: Optional[str] = None
        self.progress: Optional[Callable[[int, int], None]] = None
        self.workers: Optional[int] = None

    def reset(self, *, words: List[str], opener: Optional[str] = None,
              progress: Optional[Callable[[int, int], None]] = None,
              workers: Optional[int] = None) -> None:
        self.words = list(words)
        self.opener = opener
        self.progress = progress
        self.workers = workers

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
