"""
Exception types raised by the engine and the game loop.

Everything derives from MastermindError so a front-end can catch one type.
ConfigError and ParseError are also ValueErrors, which is what callers of the
old free functions used to catch.
"""


class MastermindError(Exception):
    """Base class for all solver errors."""


class ConfigError(MastermindError, ValueError):
    """A GameConfig value is out of range; raised before any game starts."""


class ParseError(MastermindError, ValueError):
    """Malformed code or rating text."""


class InconsistentFeedbackError(MastermindError):
    """
    Filtering left no candidate consistent with the history.

    Some earlier rating contradicts a later one; the game cannot continue.
    """

    def __init__(self, history):
        self.history = list(history)
        super().__init__(
            f"no consistent candidates remain after {len(self.history)} rating(s)")
