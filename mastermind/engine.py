"""
Pure game logic (no HTTP, no storage).
We compute two feedback numbers for each guess:
- exact_matches: how many slots are exactly correct (right color, right place)
- color_matches: how many of the remaining colors appear in the secret
  at a different place

Each slot of the secret and of the guess is used at most once, so a color
that was already an exact match is never counted again as a color match.
Duplicates are allowed in the secret.
"""

from dataclasses import dataclass
from typing import List, Optional

from .types import Code

@dataclass(frozen=True)
class Feedback:
    exact_matches: int
    color_matches: int

def evaluate(secret: Code, guess: Code) -> Feedback:
    """
    Example:
      secret = ["red", "blue", "green", "yellow"]
      guess  = ["red", "green", "blue", "yellow"]
      exact_matches = 2  (red and yellow)
      color_matches = 2  (blue and green swapped)

    Works on local copies; the caller's lists are never changed.
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # Scratch copies: a consumed slot becomes None
    secret_left: List[Optional[str]] = list(secret)
    guess_left: List[Optional[str]] = list(guess)

    # 1. Exact position matches
    exact_matches = 0
    for i in range(n):
        if guess_left[i] == secret_left[i]:
            exact_matches += 1
            secret_left[i] = None
            guess_left[i] = None

    # 2. Right color, wrong place, among what is left
    color_matches = 0
    for color in guess_left:
        if color is None:
            continue
        if color in secret_left:
            color_matches += 1
            # consume the first remaining occurrence
            secret_left[secret_left.index(color)] = None

    return Feedback(exact_matches=exact_matches, color_matches=color_matches)

def is_win(secret: Code, guess: Code) -> bool:
    """
    Win = all colors match in order.
    """
    if len(secret) == 0 or len(guess) != len(secret):
        return False
    return evaluate(secret, guess).exact_matches == len(secret)

def score(guess_count: int) -> int:
    """
    Points for a win: 100, minus 10 per guess used (winning guess included).
    Never goes below zero.
    """
    return max(100 - 10 * guess_count, 0)
