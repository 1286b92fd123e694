"""
Secret code generation.

- generate_code: 4 colors picked uniformly at random, with replacement
- fetch_code: HTTP call to random.org with clear fallback. If anything goes wrong
  (no internet, timeout, bad response), we fall back to the local secure
  generator so the game still works.
"""

import logging
import random
import secrets
from typing import Callable, Optional

import requests

from . import config
from .types import COLORS, CODE_LENGTH, Code

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

def generate_code(rng: Optional[random.Random] = None) -> Code:
    """
    Pick CODE_LENGTH colors from the palette. A color may repeat.
    Pass a seeded random.Random for reproducible secrets; by default
    the secrets module is used.
    """
    chooser = rng.choice if rng is not None else secrets.choice
    return [chooser(COLORS) for _ in range(CODE_LENGTH)]

def fetch_code(length: int = CODE_LENGTH) -> Code:
    # Parameters to send to random.org: one palette index per slot
    params = {
        "num": length,
        "min": 0,
        "max": len(COLORS) - 1,
        "col": 1,          # one number per line
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=config.RANDOM_ORG_TIMEOUT)
        response.raise_for_status()

        # The body looks like:
        #   0\n3\n5\n2\n
        indices = [int(line.strip()) for line in response.text.splitlines() if line.strip()]

        if len(indices) != length:
            raise ValueError(f"random.org returned {len(indices)} values, expected {length}.")

        for index in indices:
            if index < 0 or index >= len(COLORS):
                raise ValueError(f"random.org number {index} out of range 0..{len(COLORS) - 1}.")

        return [COLORS[index] for index in indices]

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org unavailable (%s); using local generator", exc)
        return [secrets.choice(COLORS) for _ in range(length)]

def default_generator() -> Callable[[], Code]:
    """The generator picked by MASTERMIND_RANDOM_SOURCE."""
    if config.RANDOM_SOURCE == "random.org":
        return fetch_code
    return generate_code
