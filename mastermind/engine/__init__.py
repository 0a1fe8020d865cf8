from .config import GameConfig
from .errors import ConfigError, InconsistentFeedbackError, MastermindError, ParseError
from .scoring import Code, Feedback, grade, grade_matrix, pack_codes
from .constraints import HistoryEntry, filter_candidates, generate_universe, is_consistent
from .validation import parse_code, parse_rating, validate_feedback
from .notation import colorize, format_code, format_rating

__all__ = [
    "GameConfig", "ConfigError", "InconsistentFeedbackError", "MastermindError", "ParseError",
    "Code", "Feedback", "grade", "grade_matrix", "pack_codes",
    "HistoryEntry", "filter_candidates", "generate_universe", "is_consistent",
    "parse_code", "parse_rating", "validate_feedback",
    "colorize", "format_code", "format_rating",
]
