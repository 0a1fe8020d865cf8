"""
Text rendering of codes and ratings for the terminal.
"""

from __future__ import annotations

from .config import GameConfig
from .scoring import Code
from .validation import COLOR_MARK, EXACT_MARK

RESET = "\033[0m"
# red, green, blue, yellow, purple, cyan; reused cyclically past six colours
ANSI_COLORS = ("\033[31m", "\033[32m", "\033[34m", "\033[33m", "\033[35m", "\033[36m")


def format_code(code: Code, config: GameConfig) -> str:
    return "".join(config.alphabet[v] for v in code.values)


def format_rating(exact: int, color: int) -> str:
    """(2, 1) -> "xx." """
    return EXACT_MARK * exact + COLOR_MARK * color


def colorize(code: Code, config: GameConfig) -> str:
    """Return the code's letters, each wrapped in its colour's ANSI escape."""
    return "".join(
        f"{ANSI_COLORS[v % len(ANSI_COLORS)]}{config.alphabet[v]}{RESET}" for v in code.values)
