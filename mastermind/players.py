"""
Player history: every distinct name seen, with its cumulative score.

Names are compared exactly after trimming ("Ana" and "ana" are two players).
Registration order is kept; dicts preserve insertion order.
"""

from typing import Dict, List, Tuple

from .errors import InvalidInput

class PlayerRegistry:
    def __init__(self) -> None:
        self._scores: Dict[str, int] = {}

    @staticmethod
    def _key(name: str) -> str:
        key = (name or "").strip()
        if not key:
            raise InvalidInput("Name cannot be empty or just spaces!")
        return key

    def register(self, name: str) -> None:
        """Add a player with 0 points. Registering again changes nothing."""
        key = self._key(name)
        if key not in self._scores:
            self._scores[key] = 0

    def add_score(self, name: str, points: int) -> None:
        # absent players start from 0
        key = self._key(name)
        self._scores[key] = self._scores.get(key, 0) + points

    def score_of(self, name: str) -> int:
        return self._scores.get(self._key(name), 0)

    def all_players(self) -> List[Tuple[str, int]]:
        return list(self._scores.items())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._scores

    def __len__(self) -> int:
        return len(self._scores)
