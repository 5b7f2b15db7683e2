"""
Pytest fixtures for scoreboard tests.
"""

import pytest

from ..api.service import APIService
from ..engine_core.selection import RoundSelection
from ..engine_core.state import GameState, PlayerState
from ..session import Scoreboard
from ..storage import MemoryStore


@pytest.fixture
def empty_game_state() -> GameState:
    """Create a game state before any players are entered."""
    return GameState()


@pytest.fixture
def two_player_state() -> GameState:
    """Create a started game with Alice and Bob at round 1."""
    return GameState(
        started=True,
        players=[PlayerState(name="Alice"), PlayerState(name="Bob")],
        current_round=1,
    )


@pytest.fixture
def state_with_rounds(two_player_state: GameState) -> GameState:
    """Create a game two rounds in."""
    alice = two_player_state.players[0]
    alice = alice.with_round(RoundSelection.of([5, 3, "x2"]))
    alice = alice.with_round(RoundSelection.from_points(12))

    bob = two_player_state.players[1]
    bob = bob.with_round(RoundSelection.bust())
    bob = bob.with_round(RoundSelection.of([10, "+4"]))

    return two_player_state._copy_with(players=[alice, bob], current_round=3)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def scoreboard(store: MemoryStore) -> Scoreboard:
    """Scoreboard over an in-memory store."""
    return Scoreboard(store=store)


@pytest.fixture
def started_scoreboard(scoreboard: Scoreboard) -> Scoreboard:
    """Scoreboard with Alice and Bob playing."""
    scoreboard.start_game("Alice, Bob")
    return scoreboard


@pytest.fixture
def service(scoreboard: Scoreboard) -> APIService:
    return APIService(scoreboard=scoreboard)
