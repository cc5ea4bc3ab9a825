"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal, Tuple

SIZE = 5  # pegs per pattern


class Color(str, Enum):
    """Peg colors. EMPTY stands in for a missing or unreadable guess token."""

    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    PINK = "pink"
    EMPTY = "_"

    def __str__(self) -> str:
        return self.value


# Colors a secret may be drawn from (EMPTY is never one of them)
PALETTE: Tuple[Color, ...] = (
    Color.RED,
    Color.GREEN,
    Color.YELLOW,
    Color.BLUE,
    Color.PINK,
)

Pattern = List[Color]  # SIZE colors
Score = Tuple[int, int]  # (exact, partial)
GameStatus = Literal["in_progress", "won"]
RandomSource = Literal["local", "random.org"]
