"""
In-memory store
Holds game sessions in memory, all sharing one player registry.
"""

from threading import RLock
from typing import Callable, Dict, Optional, Tuple
from uuid import uuid4

from .players import PlayerRegistry
from .random_client import generate_code
from .session import GameSession
from .types import Code

class SessionStore:
    def __init__(
        self,
        registry: Optional[PlayerRegistry] = None,
        code_generator: Callable[[], Code] = generate_code,
    ) -> None:
        self.registry = registry if registry is not None else PlayerRegistry()
        self._code_generator = code_generator
        self._sessions: Dict[str, GameSession] = {}
        # FastAPI runs sync routes in a thread pool; sessions share the registry
        self.lock = RLock()

    def create(self) -> Tuple[str, GameSession]:
        session_id = str(uuid4())
        session = GameSession(self.registry, code_generator=self._code_generator)
        with self.lock:
            self._sessions[session_id] = session
        return session_id, session

    def get(self, session_id: str) -> Optional[GameSession]:
        with self.lock:
            return self._sessions.get(session_id)

    def discard(self, session_id: str) -> None:
        with self.lock:
            self._sessions.pop(session_id, None)
