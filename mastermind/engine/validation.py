"""
Parsing and validation of human-typed codes and ratings.

Codes are typed as letters, one per peg ("ADBC"). Case is ignored and any
character outside the alphabet (spaces, dashes, ...) is skipped, but the
number of valid letters must equal the code size.

Ratings are typed as one 'x' per exact peg followed by one '.' per colour
peg ("xx." == 2 exact, 1 colour). Trailing whitespace is stripped; any
other character is rejected so a typo cannot pass as a weaker rating.
"""

from __future__ import annotations

from typing import List

from .config import GameConfig
from .errors import ParseError
from .scoring import Code, Feedback

EXACT_MARK = "x"
COLOR_MARK = "."


def parse_code(text: str, config: GameConfig) -> Code:
    """
    Map letters back to colour indices.

    Raises ParseError if the line does not hold exactly `config.size` letters
    from the alphabet.
    """
    index = {ch: i for i, ch in enumerate(config.alphabet)}
    values: List[int] = [index[ch] for ch in text.upper() if ch in index]
    if len(values) != config.size:
        raise ParseError(
            f"expected {config.size} letters from {''.join(config.alphabet)}, "
            f"got {len(values)} in {text.strip()!r}")
    return Code(tuple(values), config.num_colors)


def validate_feedback(exact: int, color: int, config: GameConfig) -> Feedback:
    """Check a rating is representable on a board of `config.size` pegs."""
    if exact < 0 or color < 0:
        raise ParseError(f"rating counts must be non-negative; got ({exact}, {color})")
    if exact + color > config.size:
        raise ParseError(
            f"rating ({exact}, {color}) has more than {config.size} pegs")
    return Feedback(exact, color)


def parse_rating(text: str, config: GameConfig) -> Feedback:
    """
    Count exact and colour markers in `text`.

    Examples:
      "xx.\\n" -> (2, 1)
      ""       -> (0, 0)
      "xo"     -> ParseError
    """
    body = text.rstrip()
    exact = color = 0
    for pos, ch in enumerate(body):
        if ch == EXACT_MARK:
            exact += 1
        elif ch == COLOR_MARK:
            color += 1
        else:
            raise ParseError(
                f"unexpected character {ch!r} at position {pos} in rating {body!r}; "
                f"use '{EXACT_MARK}' and '{COLOR_MARK}' only")
    return validate_feedback(exact, color, config)
