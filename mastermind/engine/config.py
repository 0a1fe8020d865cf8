"""
Game configuration.

A single frozen GameConfig is built once (usually by the CLI) and handed to
the solvers, the search engine and the game loop. Nothing in the package
keeps configuration in module globals.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Tuple

from .errors import ConfigError

# Classic Mastermind board: 4 pegs, 6 colours.
DEFAULT_SIZE = 4
DEFAULT_NUM_COLORS = 6
DEFAULT_THREADS = 8

# Below FULL_SEARCH_THRESHOLD candidates the next guess is searched among the
# candidates; below LOOP_OVER_ALL_THRESHOLD the whole universe is searched.
FULL_SEARCH_THRESHOLD = 1140
LOOP_OVER_ALL_THRESHOLD = 70

BACKENDS = ("thread", "process")

LETTERS = string.ascii_uppercase


@dataclass(frozen=True)
class GameConfig:
    size: int = DEFAULT_SIZE
    num_colors: int = DEFAULT_NUM_COLORS
    threads: int = DEFAULT_THREADS
    full_search_threshold: int = FULL_SEARCH_THRESHOLD
    loop_over_all_threshold: int = LOOP_OVER_ALL_THRESHOLD
    backend: str = "thread"
    alphabet: Tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.threads, int) or self.threads <= 0:
            raise ConfigError(f"threads must be a positive integer; got {self.threads!r}")
        if not isinstance(self.size, int) or self.size <= 0:
            raise ConfigError(f"size must be a positive integer; got {self.size!r}")
        if not isinstance(self.num_colors, int) or self.num_colors <= 1:
            raise ConfigError(f"num_colors must be at least 2; got {self.num_colors!r}")
        if self.num_colors > len(LETTERS):
            raise ConfigError(
                f"num_colors must be at most {len(LETTERS)} (one letter per colour); "
                f"got {self.num_colors}")
        if self.full_search_threshold < 1 or self.loop_over_all_threshold < 1:
            raise ConfigError("search thresholds must be >= 1")
        if self.backend not in BACKENDS:
            raise ConfigError(f"backend must be one of {BACKENDS}; got {self.backend!r}")
        object.__setattr__(self, "alphabet", tuple(LETTERS[: self.num_colors]))

    @property
    def universe_size(self) -> int:
        return self.num_colors ** self.size
