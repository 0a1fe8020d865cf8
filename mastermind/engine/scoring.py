"""
Mastermind grading (feedback) for a (guess, target) pair.

Conventions:
  - exact : pegs with the right colour in the right position
  - color : pegs with the right colour in the wrong position

Exact matches take precedence and consume the colour they match, so guess
AABD against ADBC grades (2, 1), "xx.": A and B match in place, D is a
colour peg, and the second A gets nothing because the only A in the target
is already used by the positional match.

Algorithm (two-pass, Knuth's rule):
  1) color = sum over colours of min(guess.counts[v], target.counts[v])
  2) for every position where the symbols agree: exact += 1, color -= 1

Each Code carries its colour histogram, so step 1 is O(colours) rather than
O(size^2). grade_matrix is the same rule vectorised with numpy for the
search engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Sequence, Tuple

import numpy as np


class Feedback(NamedTuple):
    exact: int
    color: int


@dataclass(frozen=True)
class Code:
    """
    One combination: `values` are 0-based colour indices.

    `counts[v]` is how many times colour v occurs in `values`. It is derived
    once here and never set independently. Equality and hashing look at
    `values` only.
    """
    values: Tuple[int, ...]
    num_colors: int = field(compare=False, repr=False)
    counts: Tuple[int, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        values = tuple(int(v) for v in self.values)
        counts = [0] * self.num_colors
        for v in values:
            if not 0 <= v < self.num_colors:
                raise ValueError(f"colour index {v} out of range 0..{self.num_colors - 1}")
            counts[v] += 1
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "counts", tuple(counts))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)


def grade(guess: Code, target: Code) -> Feedback:
    """
    Compute (exact, color) for `guess` against `target`.

    Preconditions:
      - both codes have the same length and colour count

    Examples (A=0, B=1, ...):
      grade(AABD, ADBC) -> (2, 1)
      grade(AAAA, AAAA) -> (4, 0)
      grade(BBBB, AAAA) -> (0, 0)
    """
    assert len(guess.values) == len(target.values), "Codes must be the same length"

    color = 0
    for g, t in zip(guess.counts, target.counts):
        color += g if g < t else t

    exact = 0
    for g, t in zip(guess.values, target.values):
        if g == t:
            exact += 1
            color -= 1
    return Feedback(exact, color)


def pack_codes(codes: Sequence[Code], num_colors: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Pack codes into (values, counts) int8 matrices of shape (n, size) and
    (n, num_colors), the layout grade_matrix works on.
    """
    if not codes:
        return np.zeros((0, 0), dtype=np.int8), np.zeros((0, num_colors), dtype=np.int8)
    values = np.array([c.values for c in codes], dtype=np.int8)
    counts = np.array([c.counts for c in codes], dtype=np.int8)
    return values, counts


def grade_matrix(guess_values: np.ndarray, guess_counts: np.ndarray,
                 target_values: np.ndarray, target_counts: np.ndarray
                 ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Grade every guess row against every target row.

    Returns (exact, color), each an int16 array of shape (n_guesses, n_targets),
    element-wise equal to grade(guess_i, target_j).
    """
    exact = (guess_values[:, None, :] == target_values[None, :, :]).sum(axis=-1, dtype=np.int16)
    overlap = np.minimum(guess_counts[:, None, :], target_counts[None, :, :]).sum(
        axis=-1, dtype=np.int16)
    return exact, overlap - exact
