"""
Game errors.

Every error here is recoverable: the caller shows the message and lets the
player try again. They subclass ValueError so a route can catch them the same
way it catches bad input.
"""


class GameError(ValueError):
    """Base class for all game rule violations."""


class InvalidInput(GameError):
    """Player name is empty or only whitespace."""


class IncompleteGuess(GameError):
    """A guess slot is empty, or holds something that is not a palette color."""


class NoAttemptsLeft(GameError):
    """Guess submitted after the round was lost."""


class SessionNotActive(GameError):
    """Guess submitted before a round started, or after it was won."""


class SecretConcealed(GameError):
    """Secret requested while the round is still being played."""
