"""
Testing one game session
- Start a round, make guesses, and check status/attempts/history/scores.
"""

import random

import pytest

from mastermind.errors import IncompleteGuess, InvalidInput, NoAttemptsLeft, SecretConcealed, SessionNotActive
from mastermind.players import PlayerRegistry
from mastermind.random_client import generate_code
from mastermind.session import GameSession

SECRET = ["red", "blue", "green", "yellow"]
MISS = ["purple", "purple", "purple", "purple"]

def make_session(registry=None, secrets=None):
    """Session whose generator hands out the given secrets in order."""
    queue = list(secrets or [SECRET])
    def generator():
        return list(queue.pop(0)) if len(queue) > 1 else list(queue[0])
    return GameSession(registry if registry is not None else PlayerRegistry(), code_generator=generator)

def test_new_session_is_not_started():
    session = make_session()

    assert session.status == "not_started"
    assert session.attempts_left == 3
    assert session.history == ()
    assert session.player_name is None

def test_start_registers_player_with_zero_points():
    registry = PlayerRegistry()
    session = make_session(registry)

    session.start("  Ana ")

    assert session.status == "in_progress"
    assert session.player_name == "Ana"
    assert registry.all_players() == [("Ana", 0)]

def test_start_with_blank_name_changes_nothing():
    registry = PlayerRegistry()
    session = make_session(registry)

    with pytest.raises(InvalidInput):
        session.start("  ")

    assert session.status == "not_started"
    assert registry.all_players() == []

def test_blank_name_does_not_disturb_a_running_round():
    registry = PlayerRegistry()
    session = make_session(registry)
    session.start("Ana")
    session.submit_guess(MISS)

    with pytest.raises(InvalidInput):
        session.start("  ")

    assert session.status == "in_progress"
    assert session.player_name == "Ana"
    assert session.attempts_left == 2
    assert len(session.history) == 1
    assert session.history[0].guess == tuple(MISS)
    assert registry.all_players() == [("Ana", 0)]

def test_incomplete_guess_consumes_nothing():
    session = make_session()
    session.start("Ana")

    with pytest.raises(IncompleteGuess):
        session.submit_guess(["red", "", "blue", "green"])
    with pytest.raises(IncompleteGuess):
        session.submit_guess(["red", None, "blue", "green"])
    with pytest.raises(IncompleteGuess):
        session.submit_guess(["red", "blue", "green"])
    with pytest.raises(IncompleteGuess):
        session.submit_guess(["red", "blue", "green", "pink"])

    assert session.attempts_left == 3
    assert session.history == ()
    assert session.status == "in_progress"

def test_guess_feedback_is_recorded():
    session = make_session()
    session.start("Ana")

    feedback = session.submit_guess(["red", "green", "blue", "yellow"])

    assert (feedback.exact_matches, feedback.color_matches) == (2, 2)
    assert session.attempts_left == 2
    assert len(session.history) == 1
    assert session.history[0].guess == ("red", "green", "blue", "yellow")
    assert session.history[0].feedback == feedback

def test_three_misses_lose_the_round():
    registry = PlayerRegistry()
    session = make_session(registry)
    session.start("Ana")

    session.submit_guess(MISS)
    session.submit_guess(MISS)
    assert session.status == "in_progress"
    session.submit_guess(MISS)

    assert session.status == "lost"
    assert session.attempts_left == 0
    assert len(session.history) == 3
    assert registry.score_of("Ana") == 0

    with pytest.raises(NoAttemptsLeft):
        session.submit_guess(SECRET)
    assert len(session.history) == 3

def test_win_on_second_guess_awards_80():
    registry = PlayerRegistry()
    session = make_session(registry)
    session.start("Ana")

    session.submit_guess(MISS)
    feedback = session.submit_guess(SECRET)

    assert feedback.exact_matches == 4
    assert session.status == "won"
    # the winning guess does not use up an attempt
    assert session.attempts_left == 2
    assert registry.score_of("Ana") == 80
    assert session.last_points == 80

def test_win_on_last_guess_is_a_win():
    registry = PlayerRegistry()
    session = make_session(registry)
    session.start("Ana")

    session.submit_guess(MISS)
    session.submit_guess(MISS)
    session.submit_guess(SECRET)

    assert session.status == "won"
    assert session.attempts_left == 1
    assert registry.score_of("Ana") == 70
    assert session.last_points == 70

def test_no_guesses_after_a_win():
    session = make_session()
    session.start("Ana")
    session.submit_guess(SECRET)

    with pytest.raises(SessionNotActive):
        session.submit_guess(SECRET)
    assert len(session.history) == 1

def test_guess_before_start_is_rejected():
    session = make_session()

    with pytest.raises(SessionNotActive):
        session.submit_guess(SECRET)

def test_scores_accumulate_over_rounds():
    registry = PlayerRegistry()
    session = make_session(registry)

    session.start("Ana")
    session.submit_guess(SECRET)           # +90
    session.play_again()
    session.submit_guess(MISS)
    session.submit_guess(SECRET)           # +80

    assert session.status == "won"
    assert registry.all_players() == [("Ana", 170)]

def test_reset_keeps_scores_and_clears_round():
    registry = PlayerRegistry()
    other = ["orange", "orange", "blue", "red"]
    session = make_session(registry, secrets=[SECRET, other])

    session.start("Ana")
    session.submit_guess(SECRET)
    session.reset()

    assert session.status == "not_started"
    assert session.attempts_left == 3
    assert session.history == ()
    assert session.player_name is None

    session.start("Ana")
    assert registry.all_players() == [("Ana", 90)]
    assert session.history == ()
    # fresh secret: the old one is no longer a win
    assert session.submit_guess(SECRET).exact_matches != 4
    assert session.submit_guess(other).exact_matches == 4

def test_play_again_needs_a_player():
    session = make_session()

    with pytest.raises(SessionNotActive):
        session.play_again()

def test_secret_is_only_revealed_after_the_round():
    session = make_session()
    session.start("Ana")

    with pytest.raises(SecretConcealed):
        session.reveal_secret()

    session.submit_guess(SECRET)
    assert session.reveal_secret() == SECRET

def test_secret_is_generated_each_round():
    calls = []
    def generator():
        calls.append(1)
        return generate_code(random.Random(len(calls)))
    session = GameSession(PlayerRegistry(), code_generator=generator)

    session.start("Ana")
    session.start("Ana")
    session.play_again()

    assert len(calls) == 3

def test_last_points_only_after_a_win():
    session = make_session()
    session.start("Ana")
    assert session.last_points is None

    session.submit_guess(MISS)
    assert session.last_points is None

    session.submit_guess(SECRET)
    assert session.last_points == 80

    session.play_again()
    assert session.last_points is None

    session.submit_guess(SECRET)
    session.reset()
    assert session.last_points is None
