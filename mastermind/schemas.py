"""
Explicit validation & Pydantic models
- Define the structure of API requests and responses.
- Slot contents are checked by the game session itself, so an empty slot
  reaches the core and comes back as an "incomplete guess" error.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .engine import Feedback
from .session import GameSession, GuessRecord

Status = Literal["not_started", "in_progress", "won", "lost"]

# 1. Starting a round
class StartRequest(BaseModel):
    player_name: str = Field(..., description="Player name; surrounding spaces are ignored")

    model_config = {
        "json_schema_extra": {
            "examples": [{"player_name": "Ana"}]
        }
    }

# 2. Player's guess, one entry per slot ("" or null = not picked yet)
class GuessRequest(BaseModel):
    guess: List[Optional[str]] = Field(..., description="One color per position")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": ["red", "blue", "green", "yellow"]},
            ]
        }
    }

# 3. Feedback for a single guess
class FeedbackOut(BaseModel):
    exact_matches: int = Field(..., description="Right color, right position")
    color_matches: int = Field(..., description="Right color, wrong position")

    @classmethod
    def from_feedback(cls, feedback: Feedback) -> "FeedbackOut":
        return cls(exact_matches=feedback.exact_matches, color_matches=feedback.color_matches)

class GuessRecordOut(BaseModel):
    guess: List[str] = Field(..., description="The player's guess")
    feedback: FeedbackOut

    @classmethod
    def from_record(cls, record: GuessRecord) -> "GuessRecordOut":
        return cls(guess=list(record.guess), feedback=FeedbackOut.from_feedback(record.feedback))

# 4. Overall state of a game; the secret is never part of it
class GameState(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    player_name: Optional[str] = Field(None, description="Active player, if a round was started")
    status: Status = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many guesses remain")
    history: List[GuessRecordOut] = Field(..., description="All guesses made so far with feedback")

    @classmethod
    def from_session(cls, game_id: str, session: GameSession) -> "GameState":
        return cls(
            game_id=game_id,
            player_name=session.player_name,
            status=session.status,
            attempts_left=session.attempts_left,
            history=[GuessRecordOut.from_record(r) for r in session.history],
        )

# 5. Result of a guess
class GuessResponse(BaseModel):
    status: Status = Field(..., description="Current state of the game")
    attempts_left: int = Field(..., description="How many guesses remain")
    feedback: FeedbackOut = Field(..., description="Feedback for this guess")
    points: Optional[int] = Field(None, description="Points earned (only on a win)")
    secret: Optional[List[str]] = Field(None, description="The secret code (only revealed once the game is over)")
    note: Optional[str] = Field(None, description="Extra note (ex. 'Game over.')")

# 6. Player history
class PlayerOut(BaseModel):
    name: str
    score: int
