"""
Game state.
Holds one secret and whether it has been cracked. Guesses are scored and
thrown away; only the round counter survives.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .config import Settings
from .engine import score_guess, is_win
from .random_client import generate_secret
from .types import SIZE, Color, GameStatus

logger = logging.getLogger(__name__)

WIN_MESSAGE = "You win!"


@dataclass(frozen=True)
class RoundResult:
    exact: int
    partial: int
    won: bool

    @property
    def message(self) -> str:
        if self.won:
            return WIN_MESSAGE
        return f"{self.exact} black, {self.partial} white"


@dataclass
class Game:
    secret: Tuple[Color, ...]
    status: GameStatus = "in_progress"
    rounds: int = 0

    def __post_init__(self) -> None:
        # the secret never changes once the game exists
        self.secret = tuple(self.secret)
        if len(self.secret) != SIZE:
            raise ValueError(f"Secret must have exactly {SIZE} colors.")
        if Color.EMPTY in self.secret:
            raise ValueError("Secret must not contain the EMPTY color.")

    @classmethod
    def new(cls, settings: Optional[Settings] = None, rng: Optional[random.Random] = None) -> "Game":
        settings = settings or Settings()
        return cls(secret=tuple(generate_secret(settings, rng=rng)))

    def guess(self, attempt: Sequence[Color]) -> RoundResult:
        # --- length guard ---
        if len(attempt) != len(self.secret):
            raise ValueError(f"Guess must have exactly {len(self.secret)} colors.")

        if self.status == "won":
            # Already solved: report the win again, do not count a round
            return RoundResult(exact=len(self.secret), partial=0, won=True)

        exact, partial = score_guess(self.secret, attempt)
        self.rounds += 1

        won = is_win(self.secret, attempt)
        if won:
            self.status = "won"
            logger.info("secret found after %d round(s)", self.rounds)

        return RoundResult(exact=exact, partial=partial, won=won)
