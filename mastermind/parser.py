"""
Text <-> pattern glue for the terminal.

A guess line looks like `red-green-blue-pink-yellow`. Anything we cannot
read becomes Color.EMPTY instead of an error: an EMPTY peg simply never
matches the secret.
"""

from typing import Dict, Iterable

from .types import SIZE, Color, Pattern, PALETTE

DEFAULT_DELIMITER = "-"

# Only the real colors are accepted as input; "_" is display-only
COLOR_NAMES: Dict[str, Color] = {color.value: color for color in PALETTE}


def parse_color(token: str) -> Color:
    # lowercase only, "Red" is not a color
    return COLOR_NAMES.get(token, Color.EMPTY)


def parse_guess(line: str, delimiter: str = DEFAULT_DELIMITER, size: int = SIZE) -> Pattern:
    """
    Turn one input line into a pattern of exactly `size` colors.
    - surrounding whitespace is trimmed first
    - tokens after the `size`-th one are ignored
    - missing tokens leave the slot EMPTY
    """
    guess = [Color.EMPTY] * size
    tokens = line.strip().split(delimiter)
    for index, token in enumerate(tokens[:size]):
        guess[index] = parse_color(token)
    return guess


def format_pattern(pattern: Iterable[Color], delimiter: str = DEFAULT_DELIMITER) -> str:
    return delimiter.join(str(color) for color in pattern)
