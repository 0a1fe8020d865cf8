"""
Parallel best-guess search.

Score of a guess `a` over a pool P:
  - pairwise: number of unordered pairs {b, c} in P with grade(a, b) != grade(a, c)
  - minimax : minus the size of the largest feedback bucket of `a` over P

Both are computed from the feedback buckets of `a`: pairs that share a
bucket are exactly the pairs `a` fails to separate, so

  pairwise(a) = C(|P|, 2) - sum over buckets C(k, 2)

which is the same count as the explicit double loop over pairs, in
O(|P|) per guess instead of O(|P|^2).

Parallelism:
  The guess pool is split into at most `config.threads` contiguous chunks of
  ceil(len / threads) guesses. Each chunk is scored by one task on a fresh
  executor that lives only for the call. A task sees read-only arrays and
  returns its chunk-local (index, score). Results are reduced in chunk order,
  strictly-greater wins, so the answer is the first best guess in pool order
  no matter which task finishes first.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

from mastermind.engine import Code, GameConfig, grade_matrix, pack_codes

logger = logging.getLogger(__name__)

Packed = Tuple[np.ndarray, np.ndarray]


def chunk_bounds(n: int, parts: int) -> List[Tuple[int, int]]:
    """
    Contiguous (lo, hi) ranges covering range(n), at most `parts` of them.

    chunk_bounds(10, 4) -> [(0, 3), (3, 6), (6, 9), (9, 10)]
    chunk_bounds(3, 8)  -> [(0, 1), (1, 2), (2, 3)]
    """
    if n <= 0:
        return []
    step = (n + parts - 1) // parts
    return [(lo, min(lo + step, n)) for lo in range(0, n, step)]


def bucket_sizes(guesses: Packed, pool: Packed, size: int) -> np.ndarray:
    """
    Row i, column f = how many pool codes give feedback id f against guess i,
    where f = exact * (size + 1) + color.
    """
    exact, color = grade_matrix(guesses[0], guesses[1], pool[0], pool[1])
    width = (size + 1) ** 2
    rows = exact.shape[0]
    ids = exact.astype(np.int64) * (size + 1) + color
    ids += (np.arange(rows, dtype=np.int64) * width)[:, None]
    return np.bincount(ids.ravel(), minlength=rows * width).reshape(rows, width)


def pairwise_scores(buckets: np.ndarray) -> np.ndarray:
    n = buckets.sum(axis=1)
    return n * (n - 1) // 2 - (buckets * (buckets - 1) // 2).sum(axis=1)


def minimax_scores(buckets: np.ndarray) -> np.ndarray:
    return -buckets.max(axis=1)


SCORERS: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "pairwise": pairwise_scores,
    "minimax": minimax_scores,
}


def score_guesses(guesses: Packed, pool: Packed, size: int, scorer: str = "pairwise") -> np.ndarray:
    """Score every guess row against the pool (no parallelism)."""
    return SCORERS[scorer](bucket_sizes(guesses, pool, size))


def _best_in_chunk(scorer: str, guess_values: np.ndarray, guess_counts: np.ndarray,
                   pool_values: np.ndarray, pool_counts: np.ndarray,
                   size: int) -> Tuple[int, int]:
    """Worker: chunk-local (index, score) of the first best guess."""
    scores = score_guesses((guess_values, guess_counts), (pool_values, pool_counts), size, scorer)
    i = int(np.argmax(scores))  # first maximum
    return i, int(scores[i])


def find_best_guess(guesses: Sequence[Code], pool: Sequence[Code], config: GameConfig, *,
                    scorer: str = "pairwise", packed_guesses: Optional[Packed] = None) -> Code:
    """
    Return the guess in `guesses` with the highest score over `pool`.

    Args:
      guesses        : codes to choose from (the universe or the candidates)
      pool           : codes the score is measured against (the candidates)
      config         : supplies size, threads and backend
      scorer         : key of SCORERS
      packed_guesses : pack_codes(guesses) if the caller already has it

    Ties go to the guess that comes first in `guesses`.
    """
    if not guesses:
        raise ValueError("cannot search an empty guess pool")
    if not pool:
        raise ValueError("cannot score guesses against an empty pool")
    if scorer not in SCORERS:
        raise ValueError(f"Unknown scorer: {scorer}. Available: {sorted(SCORERS)}")

    gv, gc = packed_guesses if packed_guesses is not None else pack_codes(guesses, config.num_colors)
    pv, pc = pack_codes(pool, config.num_colors)
    bounds = chunk_bounds(len(guesses), config.threads)

    if len(bounds) == 1:
        results = [_best_in_chunk(scorer, gv, gc, pv, pc, config.size)]
    else:
        executor_cls = ProcessPoolExecutor if config.backend == "process" else ThreadPoolExecutor
        with executor_cls(max_workers=len(bounds)) as executor:
            futures = [
                executor.submit(_best_in_chunk, scorer, gv[lo:hi], gc[lo:hi], pv, pc, config.size)
                for lo, hi in bounds
            ]
            results = [f.result() for f in futures]

    best_index, best_score = 0, None
    for (lo, _), (i, s) in zip(bounds, results):
        if best_score is None or s > best_score:
            best_index, best_score = lo + i, s

    logger.debug("searched %d guesses x %d pool in %d chunk(s): best #%d score=%d",
                  len(guesses), len(pool), len(bounds), best_index, best_score)
    return guesses[best_index]
