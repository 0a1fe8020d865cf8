"""
Candidate space: the full universe of codes and history-based filtering.

Given:
  - a pool of codes (the universe, or the current candidates)
  - a history of (guess, exact, color) entries

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
Filtering always checks the whole history, never just the latest entry.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .config import GameConfig
from .scoring import Code, grade


class HistoryEntry(NamedTuple):
    guess: Code
    exact: int
    color: int


History = Iterable[HistoryEntry]


def generate_universe(config: GameConfig) -> List[Code]:
    """
    Every code over num_colors ** size, without repeats.

    Mixed-radix counting order starting from all zeros, with the FIRST
    position as the least significant digit: AAAA, BAAA, CAAA, ..., FFFF.
    """
    size, base = config.size, config.num_colors
    cur = [0] * size
    out: List[Code] = [Code(tuple(cur), base)]
    for _ in range(base ** size - 1):
        for dig in range(size):
            cur[dig] += 1
            if cur[dig] == base:
                cur[dig] = 0
            else:
                break
        out.append(Code(tuple(cur), base))
    return out


def is_consistent(code: Code, history: History) -> bool:
    """True if `code` as the secret would have produced every recorded rating."""
    for h in history:
        if grade(h.guess, code) != (h.exact, h.color):
            return False
    return True


def filter_candidates(candidates: Iterable[Code], history: History) -> List[Code]:
    """
    Keep only codes that reproduce exactly the recorded (exact, color) for
    every entry in `history`.

    Returns:
      List[Code] of consistent candidates (order preserved as in `candidates`).
    """
    history = list(history)
    return [c for c in candidates if is_consistent(c, history)]
