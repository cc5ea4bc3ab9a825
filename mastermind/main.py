'''
Terminal Mastermind

Guess the 5 hidden colors (all different, picked from red, green, yellow,
blue, pink). Type one guess per line:

    red-green-blue-pink-yellow

Each guess is answered with "<n> black, <n> white":
  black -> right color, right place
  white -> right color, wrong place

The game ends with "You win!" once all five are in place.
'''

import logging
import sys
from typing import BinaryIO, TextIO

from .config import Settings, configure_logging, load_settings
from .game import Game
from .parser import DEFAULT_DELIMITER, format_pattern, parse_guess

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


def play(stdin: BinaryIO, stdout: TextIO, game: Game, delimiter: str = DEFAULT_DELIMITER) -> int:
    """
    Run rounds until the secret is found (returns 0) or input ends (returns 1).
    Lines are read as bytes and decoded one at a time, so a line that is not
    valid UTF-8 costs only its own round. A failing read is reported and the
    loop keeps waiting for the next line.
    """
    while True:
        try:
            line = stdin.readline().decode(ENCODING)
        except (OSError, UnicodeDecodeError) as error:
            logger.warning("could not read a guess: %s", error)
            print(f"error: {error}", file=stdout)
            continue

        # readline() gives b"" only at end of input; a blank line is b"\n"
        if line == "":
            logger.info(
                "input closed after %d round(s); secret was %s",
                game.rounds,
                format_pattern(game.secret, delimiter),
            )
            return 1

        guess = parse_guess(line, delimiter=delimiter)
        logger.debug("guess %s", format_pattern(guess, delimiter))

        result = game.guess(guess)
        print(result.message, file=stdout)
        if result.won:
            return 0


def main() -> int:
    settings: Settings = load_settings()
    configure_logging(settings.log_level)

    game = Game.new(settings)
    return play(sys.stdin.buffer, sys.stdout, game, delimiter=settings.delimiter)


if __name__ == "__main__":
    sys.exit(main())
