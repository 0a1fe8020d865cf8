"""
Minimax solver.

Same thresholds and parallel search as the pairwise solver, but a guess is
scored by the size of its LARGEST feedback bucket over the candidates
(smaller is better). This is Knuth-style worst-case minimisation; ties go
to the first guess in search order.
"""

from __future__ import annotations

from .base import register
from .pairwise import PairwiseSolver


@register
class MinimaxSolver(PairwiseSolver):
    id = "minimax"
    name = "Minimax (Worst-Case Bucket)"
    version = "1.0.0"

    scorer = "minimax"
