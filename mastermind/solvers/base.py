from __future__ import annotations
import random
from typing import Dict, Optional, Sequence, Tuple, Type

import numpy as np

from mastermind.engine import Code, GameConfig, pack_codes

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
        self.config: GameConfig = GameConfig()
        self.universe: Tuple[Code, ...] = ()
        self.rng = random.Random()
        self._packed_universe: Optional[Tuple[np.ndarray, np.ndarray]] = None

    def reset(self, *, config: GameConfig, universe: Sequence[Code],
              seed: int | None = None) -> None:
        self.config = config
        self.universe = tuple(universe)
        self._packed_universe = None
        if seed is not None:
            self.rng.seed(seed)

    @property
    def packed_universe(self) -> Tuple[np.ndarray, np.ndarray]:
        """Universe as numpy matrices, packed on first use and kept for the game."""
        if self._packed_universe is None:
            self._packed_universe = pack_codes(self.universe, self.config.num_colors)
        return self._packed_universe

    def next_guess(self, state: dict) -> Code:
        raise NotImplementedError("Override in subclass")
