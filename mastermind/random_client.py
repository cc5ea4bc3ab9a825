"""
Secret generation.
- Local: sample distinct colors with Python's `random` (injectable for tests).
- random.org: ask for a random ordering of the palette. If anything goes wrong
  (no internet, timeout, bad response), we fall back to a local shuffle so the
  game still starts.
"""

import logging
import random
from typing import List, Optional, Sequence

import requests

from .config import Settings
from .parser import format_pattern
from .types import SIZE, Color, Pattern, PALETTE

logger = logging.getLogger(__name__)

SEQUENCE_URL = "https://www.random.org/sequences/"

# keep network quick; if it takes too long, we will just fallback
TIMEOUT_SECONDS = 3.0


def _check_palette(size: int, palette: Sequence[Color]) -> None:
    if Color.EMPTY in palette:
        raise ValueError("Palette must not contain the EMPTY color.")
    if len(set(palette)) != len(palette):
        raise ValueError("Palette colors must be distinct.")
    if len(palette) < size:
        raise ValueError(f"Palette has {len(palette)} colors, need at least {size} distinct ones.")


def new_secret(
    size: int = SIZE,
    palette: Sequence[Color] = PALETTE,
    rng: Optional[random.Random] = None,
) -> Pattern:
    """
    `size` distinct colors from `palette`, in random order.
    Pass a seeded random.Random to get the same secret every time.
    """
    _check_palette(size, palette)
    source = rng if rng is not None else random
    return list(source.sample(list(palette), k=size))


def fetch_order(n: int) -> List[int]:
    # Parameters to send to random.org
    params = {
        "min": 0,           # smallest index
        "max": n - 1,       # largest index
        "col": 1,           # one number per line
        "format": "plain",  # plain text response
        "rnd": "new",       # always generate a new sequence
    }

    try:
        response = requests.get(SEQUENCE_URL, params=params, timeout=TIMEOUT_SECONDS)

        # If the response was not 200 OK, this will raise an error
        response.raise_for_status()

        # The body looks like:
        #   3\n0\n4\n1\n2\n
        order = [int(token) for token in response.text.split()]

        # Must be every index exactly once
        if sorted(order) != list(range(n)):
            raise ValueError(f"random.org returned {order}, expected a permutation of 0..{n - 1}.")

        return order

    except (requests.RequestException, ValueError) as error:
        logger.warning("random.org unavailable (%s); using local shuffle", error)
        order = list(range(n))
        random.shuffle(order)
        return order


def fetch_secret(size: int = SIZE, palette: Sequence[Color] = PALETTE) -> Pattern:
    _check_palette(size, palette)
    order = fetch_order(len(palette))
    return [palette[index] for index in order[:size]]


def generate_secret(settings: Settings, rng: Optional[random.Random] = None) -> Pattern:
    if settings.random_source == "random.org":
        secret = fetch_secret()
    else:
        secret = new_secret(rng=rng)
    logger.debug("secret is %s", format_pattern(secret, settings.delimiter))
    return secret
