"""
Pairwise-distinguishability solver.

Strategy (by number of remaining candidates C):
  - |C| == 1                      : play it, no search
  - |C| <  loop_over_all_threshold : search the WHOLE universe (eliminated codes
                                     included, they may split C better)
  - |C| <  full_search_threshold   : search C itself
  - otherwise                      : uniform random candidate (search too costly)

The search picks the guess that separates the most candidate pairs, see
search.py. This approximates minimax (smallest worst-case bucket) but is
not guaranteed to equal it; `minimax` is the exact variant.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from mastermind.engine import Code
from .base import BaseSolver, register
from .search import find_best_guess

logger = logging.getLogger(__name__)


@register
class PairwiseSolver(BaseSolver):
    id = "pairwise"
    name = "Pairwise Distinguishability"
    version = "1.0.0"

    scorer = "pairwise"

    def next_guess(self, state: dict) -> Code:
        """
        Args:
            state: dict with keys:
                - "candidates": codes still consistent with the history (List[Code])
                - "universe":   every code of the configuration (Sequence[Code])
                - "turn":       1-based round number

        Returns:
            The next Code to play.
        """
        candidates: List[Code] = state["candidates"]
        universe: Sequence[Code] = state.get("universe") or self.universe
        cfg = self.config
        n = len(candidates)

        if n == 0:
            raise ValueError("no candidates to choose from")
        if n == 1:
            logger.debug("one candidate remaining")
            return candidates[0]
        if n < cfg.loop_over_all_threshold:
            logger.debug("loop over all %d codes for %d candidates", len(universe), n)
            packed = self.packed_universe if universe is self.universe else None
            return find_best_guess(universe, candidates, cfg, scorer=self.scorer,
                                   packed_guesses=packed)
        if n < cfg.full_search_threshold:
            logger.debug("full search over %d candidates", n)
            return find_best_guess(candidates, candidates, cfg, scorer=self.scorer)

        logger.debug("picking random candidate of %d", n)
        return candidates[self.rng.randrange(n)]
