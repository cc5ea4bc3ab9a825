"""
Pure game logic (no terminal, no randomness).
We compute two feedback numbers for each guess:
- exact: how many positions hold the right color (black pegs)
- partial: how many other colors are present but misplaced (white pegs)

Each peg on either side is counted at most once, so exact + partial <= SIZE.
"""

import logging
from collections import Counter
from typing import Sequence

from .types import Color, Score

logger = logging.getLogger(__name__)


def _take(pool: Counter, color: Color) -> bool:
    # EMPTY is never in the secret pool, so it can never be taken
    if pool[color] > 0:
        pool[color] -= 1
        return True
    return False


def score_guess(secret: Sequence[Color], guess: Sequence[Color]) -> Score:
    """
    Example:
      secret = [blue, green, pink, red, yellow]
      guess  = [blue, yellow, green, red, pink]
      exact   = 2  (blue and red are in place)
      partial = 3  (green, pink and yellow are present elsewhere)
      Returns a tuple: (exact, partial)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    exact = 0
    partial = 0

    # Mismatched values seen so far on each side, waiting for a partner
    pool_secret: Counter = Counter()
    pool_guess: Counter = Counter()

    for wanted, given in zip(secret, guess):
        if wanted == given:
            exact += 1
            continue

        # Secret side first: an earlier misplaced guess peg may claim it
        if _take(pool_guess, wanted):
            partial += 1
        else:
            pool_secret[wanted] += 1

        # Then the guess side against the earlier unmatched secret pegs
        if _take(pool_secret, given):
            partial += 1
        else:
            pool_guess[given] += 1

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("scored %s: %d exact, %d partial", "-".join(map(str, guess)), exact, partial)
    return (exact, partial)


def is_win(secret: Sequence[Color], guess: Sequence[Color]) -> bool:
    """
    Win = every position matches and none of them is EMPTY.
    """
    n = len(secret)
    if n == 0 or len(guess) != n:
        return False

    for wanted, given in zip(secret, guess):
        if wanted != given or given is Color.EMPTY:
            return False
    return True
