"""
Single place to:
- Read MASTERMIND_* settings from the environment (or a local .env)
- Validate them with Pydantic so a typo fails at startup, not mid-game
- Set up logging on stderr (stdout belongs to the game)

There are no game-rule settings here: size and palette are fixed.
"""

import logging
import os
import sys

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .types import RandomSource

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = Field("WARNING", description="Python logging level name")
    random_source: RandomSource = Field("local", description="Where secrets come from: local or random.org")
    delimiter: str = Field("-", description="Separator between colors in a guess line")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        level = level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {level!r}.")
        return level

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, delimiter: str) -> str:
        """
        One visible character. Whitespace would be trimmed away from the
        line ends and could never separate tokens reliably.
        """
        if len(delimiter) != 1 or delimiter.isspace():
            raise ValueError("Delimiter must be a single non-blank character.")
        return delimiter


def load_settings() -> Settings:
    # dev convenience; a .env next to where you run the game is picked up
    load_dotenv()
    return Settings(
        log_level=os.getenv("MASTERMIND_LOG_LEVEL", "WARNING"),
        random_source=os.getenv("MASTERMIND_RANDOM_SOURCE", "local"),
        delimiter=os.getenv("MASTERMIND_DELIMITER", "-"),
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    # requests' connection chatter is noise next to game logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
