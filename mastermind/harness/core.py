"""
Experiment harness core primitives.

- run_case:  play one auto-graded game (one hidden secret) with a given solver.
- run_batch: run many games in sequence (optionally a sample prefix).

The turn budget defaults to the universe size: the candidates shrink by at
least one code per wrong guess, so a consistent solver always finishes
within that many rounds.

These functions are intentionally UI-agnostic so they can be reused by
the CLI, a notebook, or the tests without changes.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List

from mastermind.engine import Code, GameConfig, generate_universe, grade
from .game import GameState, apply_feedback, is_solved, next_guess

logger = logging.getLogger(__name__)


def run_case(
        solver,
        secret: Code,
        *,
        config: GameConfig,
        universe: List[Code] | None = None,
        max_turns: int | None = None,
        seed: int | None = None,
) -> Dict:
    """
    Execute one game until the solver finds the secret or runs out of turns.

    Args:
        solver:    a BaseSolver instance
        secret:    the hidden code for this case
        config:    board and search configuration
        universe:  generate_universe(config), if the caller already has it
        max_turns: defaults to config.universe_size
        seed:      RNG seed to make the solver's random picks reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, exact, color)]), secret (Code)
    """
    universe = tuple(universe if universe is not None else generate_universe(config))
    max_turns = max_turns or config.universe_size

    solver.reset(config=config, universe=universe, seed=seed)
    state = GameState(config=config, solver=solver, universe=solver.universe,
                      candidates=solver.universe)

    t0 = time.perf_counter()
    while state.turn <= max_turns:
        guess = next_guess(state)
        exact, color = grade(guess, secret)
        state = apply_feedback(state, guess, exact, color)
        if is_solved(state):
            break

    dt = (time.perf_counter() - t0) * 1000.0
    success = is_solved(state)
    logger.info("secret %s: %s in %d guesses (%.1f ms)", secret.values,
                "solved" if success else "failed", len(state.history), dt)
    return {
        "success": success, "guesses": len(state.history), "time_ms": dt,
        "history": list(state.history), "secret": secret,
    }


def run_batch(
        solver,
        secrets: Iterable[Code],
        *,
        config: GameConfig,
        max_turns: int | None = None,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    universe = generate_universe(config)
    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, secret, config=config, universe=universe,
                     max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
