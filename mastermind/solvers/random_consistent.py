"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline to verify the pipeline; it does not try to split
    the candidates well.
"""

from __future__ import annotations

from typing import List

from mastermind.engine import Code
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> Code:
        candidates: List[Code] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates to choose from")
        return candidates[self.rng.randrange(len(candidates))]
