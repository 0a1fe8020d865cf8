from .core import run_case, run_batch
from .game import GameState, apply_feedback, is_solved, new_game, next_guess, random_secret
from .io import write_csv, write_manifest
from .log import setup_logging

__all__ = [
    "run_case", "run_batch",
    "GameState", "new_game", "next_guess", "apply_feedback", "is_solved", "random_secret",
    "write_csv", "write_manifest", "setup_logging",
]
