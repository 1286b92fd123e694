"""
One round of Mastermind for one player.

States: not_started -> in_progress -> won | lost
- start() begins a round (from any state) and registers the player
- submit_guess() scores a guess and moves the state machine
- reset() goes back to not_started; scores in the registry are kept
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from .engine import Feedback, evaluate, is_win, score
from .errors import IncompleteGuess, InvalidInput, NoAttemptsLeft, SecretConcealed, SessionNotActive
from .random_client import generate_code
from .players import PlayerRegistry
from .types import COLORS, CODE_LENGTH, MAX_ATTEMPTS, Code, GameStatus

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GuessRecord:
    guess: Tuple[str, ...]
    feedback: Feedback

class GameSession:
    def __init__(
        self,
        registry: PlayerRegistry,
        code_generator: Callable[[], Code] = generate_code,
    ) -> None:
        self._registry = registry
        self._code_generator = code_generator
        self._secret: Optional[Code] = None
        self._history: List[GuessRecord] = []
        self._attempts_left = MAX_ATTEMPTS
        self._status: GameStatus = "not_started"
        self._player_name: Optional[str] = None
        self._last_points: Optional[int] = None

    # --- Read accessors (the secret is not one of them) ---

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def attempts_left(self) -> int:
        return self._attempts_left

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def player_name(self) -> Optional[str]:
        return self._player_name

    @property
    def last_points(self) -> Optional[int]:
        """Points awarded by the winning guess of this round, None otherwise."""
        return self._last_points

    @property
    def is_over(self) -> bool:
        return self._status in ("won", "lost")

    # --- Transitions ---

    def start(self, player_name: str) -> None:
        name = (player_name or "").strip()
        if not name:
            raise InvalidInput("Name cannot be empty or just spaces!")

        self._registry.register(name)
        self._player_name = name
        self._secret = list(self._code_generator())
        self._history = []
        self._attempts_left = MAX_ATTEMPTS
        self._status = "in_progress"
        self._last_points = None
        logger.info("Round started for %r", name)

    def play_again(self) -> None:
        """Start a new round for the player of the previous one."""
        if self._player_name is None:
            raise SessionNotActive("No player yet. Start a game first.")
        self.start(self._player_name)

    def submit_guess(self, guess: Sequence[Optional[str]]) -> Feedback:
        if self._status == "not_started":
            raise SessionNotActive("No round in progress. Start a game first.")
        if self._status == "won":
            raise SessionNotActive("You already cracked the code! Play again for a new round.")
        if self._attempts_left <= 0:
            raise NoAttemptsLeft("No attempts left! Game over.")

        # Every slot must hold a palette color
        if len(guess) != CODE_LENGTH:
            raise IncompleteGuess(f"A guess needs exactly {CODE_LENGTH} colors.")
        for color in guess:
            if not color:
                raise IncompleteGuess("Pick a color for every position!")
            if color not in COLORS:
                raise IncompleteGuess(f"Unknown color {color!r}. Allowed: {', '.join(COLORS)}.")

        feedback = evaluate(self._secret, list(guess))
        self._history.append(GuessRecord(guess=tuple(guess), feedback=feedback))

        # Win check comes first: a win on the last attempt is still a win
        if is_win(self._secret, list(guess)):
            self._status = "won"
            points = score(len(self._history))
            self._last_points = points
            self._registry.add_score(self._player_name, points)
            logger.info("%r won in %d guess(es), +%d points", self._player_name, len(self._history), points)
            return feedback

        self._attempts_left -= 1
        if self._attempts_left == 0:
            self._status = "lost"
            logger.info("%r lost the round", self._player_name)
        return feedback

    def reset(self) -> None:
        self._secret = None
        self._history = []
        self._attempts_left = MAX_ATTEMPTS
        self._status = "not_started"
        self._player_name = None
        self._last_points = None

    def reveal_secret(self) -> Code:
        """
        Post-game reveal. Only allowed once the round is won or lost,
        so a player cannot peek while guessing.
        """
        if not self.is_over:
            raise SecretConcealed("The secret is only revealed when the round is over.")
        return list(self._secret)
