'''
Mastermind API (colors)

Endpoints:
POST /games                    -> create a game and start a round
GET  /games/{id}               -> read state & history
POST /games/{id}/start         -> start a new round (possibly a new player)
POST /games/{id}/guess         -> submit a guess
POST /games/{id}/play-again    -> new round for the same player
POST /games/{id}/reset         -> back to "not started"
DELETE /games/{id}             -> forget a finished or abandoned game

Extras:
GET  /players                  -> player history with scores
GET  /colors                   -> the palette

Everything lives in memory; restarting the server forgets all players.
'''

import logging
from typing import List

from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .errors import GameError, IncompleteGuess, InvalidInput
from .random_client import default_generator
from .session import GameSession
from .store import SessionStore
from .types import COLORS
from .schemas import (
    StartRequest,
    GuessRequest,
    GuessResponse,
    GameState,
    FeedbackOut,
    PlayerOut,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One store per process: sessions come and go, the player registry stays
_store = SessionStore(code_generator=default_generator())

def get_store() -> SessionStore:
    return _store

@app.on_event("startup")
def _log_settings():
    logger.info("Starting Mastermind API (env=%s, random source=%s)", config.APP_ENV, config.RANDOM_SOURCE)

def _to_http(error: GameError) -> HTTPException:
    # Bad input the player can fix -> 400, wrong moment in the game -> 409
    if isinstance(error, (InvalidInput, IncompleteGuess)):
        return HTTPException(status_code=400, detail=str(error))
    return HTTPException(status_code=409, detail=str(error))

def _get_session(store: SessionStore, game_id: str) -> GameSession:
    session = store.get(game_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return session

# ---------------- Routes ----------------

@app.post("/games", response_model=GameState, status_code=201, summary="Start a new game")
def create_game(
    payload: StartRequest,
    store: SessionStore = Depends(get_store),
) -> GameState:
    with store.lock:
        game_id, session = store.create()
        logger.info("Game %s created", game_id)
        try:
            session.start(payload.player_name)
        except GameError as ge:
            store.discard(game_id)
            raise _to_http(ge)
        return GameState.from_session(game_id, session)

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> GameState:
    with store.lock:
        session = _get_session(store, game_id)
        return GameState.from_session(game_id, session)

@app.post("/games/{game_id}/start", response_model=GameState, summary="Start a new round")
def start_round(
    game_id: str,
    payload: StartRequest,
    store: SessionStore = Depends(get_store),
) -> GameState:
    with store.lock:
        session = _get_session(store, game_id)
        try:
            session.start(payload.player_name)
        except GameError as ge:
            raise _to_http(ge)
        return GameState.from_session(game_id, session)

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: SessionStore = Depends(get_store),
) -> GuessResponse:
    with store.lock:
        session = _get_session(store, game_id)
        try:
            feedback = session.submit_guess(payload.guess)
        except GameError as ge:
            raise _to_http(ge)

        points = None
        secret = None
        note = None
        if session.status == "won":
            points = session.last_points
            note = "You cracked the code!"
        elif session.status == "lost":
            note = "Game over! You've used all your attempts."
        if session.is_over:
            secret = session.reveal_secret()

        return GuessResponse(
            status=session.status,
            attempts_left=session.attempts_left,
            feedback=FeedbackOut.from_feedback(feedback),
            points=points,
            secret=secret,
            note=note,
        )

@app.post("/games/{game_id}/play-again", response_model=GameState, summary="Play again with the same player")
def play_again(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> GameState:
    with store.lock:
        session = _get_session(store, game_id)
        try:
            session.play_again()
        except GameError as ge:
            raise _to_http(ge)
        return GameState.from_session(game_id, session)

@app.post("/games/{game_id}/reset", response_model=GameState, summary="Reset the game")
def reset_game(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> GameState:
    with store.lock:
        session = _get_session(store, game_id)
        session.reset()
        return GameState.from_session(game_id, session)

@app.get("/players", response_model=List[PlayerOut], summary="Player history")
def list_players(store: SessionStore = Depends(get_store)) -> List[PlayerOut]:
    with store.lock:
        return [PlayerOut(name=name, score=points) for name, points in store.registry.all_players()]

@app.get("/colors", response_model=List[str], summary="Available colors")
def list_colors() -> List[str]:
    return list(COLORS)

@app.delete("/games/{game_id}", status_code=204, summary="Delete a game")
def delete_game(
    game_id: str,
    store: SessionStore = Depends(get_store),
) -> None:
    # Players and their scores stay in the registry
    with store.lock:
        _get_session(store, game_id)
        store.discard(game_id)
