"""
Game loop state and its four operations.

    state = new_game(4, 6)
    while not is_solved(state):
        guess = next_guess(state)
        exact, color = <rating from the secret keeper>
        state = apply_feedback(state, guess, exact, color)

GameState is a frozen snapshot: apply_feedback returns a new state with the
history extended by one entry and the candidates re-filtered against the
whole history. Candidates never grow. The solver instance is shared between
snapshots of one game (it owns the seeded RNG).
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from mastermind.engine import (
    Code,
    GameConfig,
    HistoryEntry,
    InconsistentFeedbackError,
    filter_candidates,
    generate_universe,
    validate_feedback,
)
from mastermind.solvers import BaseSolver, create_solver

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameState:
    config: GameConfig
    solver: BaseSolver = field(compare=False, repr=False)
    universe: Tuple[Code, ...] = field(repr=False)
    candidates: Tuple[Code, ...] = field(repr=False)
    history: Tuple[HistoryEntry, ...] = ()

    @property
    def turn(self) -> int:
        """1-based number of the round about to be played."""
        return len(self.history) + 1


def new_game(size: int = 4, num_colors: int = 6, *, config: GameConfig | None = None,
             solver_id: str = "pairwise", seed: int | None = None) -> GameState:
    """
    Start a game with every code as a candidate.

    Pass either (size, num_colors) or a full `config`; `config` wins.
    """
    if config is None:
        config = GameConfig(size=size, num_colors=num_colors)
    universe = tuple(generate_universe(config))
    solver = create_solver(solver_id)
    solver.reset(config=config, universe=universe, seed=seed)
    logger.debug("new game: size=%d colors=%d solver=%s universe=%d",
                 config.size, config.num_colors, solver.id, len(universe))
    return GameState(config=config, solver=solver, universe=universe, candidates=universe)


def next_guess(state: GameState) -> Code:
    """Ask the solver for the next guess given the current candidates."""
    return state.solver.next_guess({
        "turn": state.turn,
        "history": list(state.history),
        "candidates": list(state.candidates),
        "universe": state.universe,
    })


def apply_feedback(state: GameState, guess: Code, exact: int, color: int) -> GameState:
    """
    Record the rating of `guess` and drop candidates it rules out.

    Raises:
      ParseError                : the rating does not fit on the board
      InconsistentFeedbackError : no candidate matches the full history
    """
    validate_feedback(exact, color, state.config)
    history = state.history + (HistoryEntry(guess, exact, color),)
    candidates = tuple(filter_candidates(state.candidates, history))
    if not candidates:
        logger.warning("rating %d/%d for round %d leaves no candidates",
                       exact, color, len(history))
        raise InconsistentFeedbackError(history)
    logger.debug("round %d: %d -> %d candidates", len(history),
                 len(state.candidates), len(candidates))
    return replace(state, history=history, candidates=candidates)


def is_solved(state: GameState) -> bool:
    return bool(state.history) and state.history[-1].exact == state.config.size


def random_secret(config: GameConfig, rng: Optional[random.Random] = None) -> Code:
    """A uniformly random code (independent colour per peg)."""
    rng = rng or random.Random()
    return Code(tuple(rng.randrange(config.num_colors) for _ in range(config.size)),
                config.num_colors)
