"""
Tests for game state and its saved form.
"""

import pytest

from ..engine_core.selection import RoundSelection
from ..engine_core.state import GamePhase, GameState, PlayerState
from ..errors import InvalidCardError


class TestPlayerState:
    """Tests for PlayerState."""

    def test_with_round(self):
        player = PlayerState(name="Alice").with_round(RoundSelection.from_points(12))
        player = player.with_round(RoundSelection.of([5, 3, "x2"]))
        assert player.round_scores == [12, 16]
        assert player.total == 28

    def test_cleared(self):
        player = PlayerState(name="Alice").with_round(RoundSelection.from_points(12))
        assert player.cleared() == PlayerState(name="Alice")


class TestGameState:
    """Tests for GameState."""

    def test_empty(self, empty_game_state):
        assert empty_game_state.phase == GamePhase.NOT_STARTED
        assert empty_game_state.current_round == 1
        assert empty_game_state.rounds_played == 0
        assert empty_game_state.winner is None

    def test_get_player(self, state_with_rounds):
        assert state_with_rounds.get_player("Bob").total == 14
        assert state_with_rounds.get_player("Zed") is None

    def test_clone_is_deep(self, state_with_rounds):
        clone = state_with_rounds.clone()
        clone.players[0].rounds.append(RoundSelection.from_points(1))
        assert len(state_with_rounds.players[0].rounds) == 2


class TestSerialization:
    """Tests for the saved blob."""

    def test_to_dict(self, state_with_rounds):
        assert state_with_rounds.to_dict() == {
            "gameStarted": True,
            "players": [
                {"name": "Alice", "scores": [[5, 3, "x2"], 12], "total": 28},
                {"name": "Bob", "scores": ["BUST", [10, "+4"]], "total": 14},
            ],
            "currentRound": 3,
        }

    def test_round_trip(self, state_with_rounds):
        assert GameState.from_dict(state_with_rounds.to_dict()) == state_with_rounds

    def test_browser_blob(self):
        """A blob written by the browser scoreboard loads."""
        blob = {
            "gameStarted": True,
            "players": [
                {"name": "Ana", "scores": [12, "BUST", 30], "total": 42},
                {"name": "Ben", "scores": [0, 7, "BUST"], "total": 7},
            ],
            "currentRound": 4,
        }
        state = GameState.from_dict(blob)
        assert state.started
        assert state.roster == ["Ana", "Ben"]
        assert state.get_player("Ana").total == 42
        assert state.current_round == 4

    def test_derived_values_recomputed(self):
        """Stored totals and round counter are not trusted."""
        blob = {
            "gameStarted": True,
            "players": [{"name": "Ana", "scores": [10, 20], "total": 999}],
            "currentRound": 17,
        }
        state = GameState.from_dict(blob)
        assert state.players[0].total == 30
        assert state.current_round == 3

    def test_empty_blob(self):
        assert GameState.from_dict({}) == GameState()

    def test_malformed_blob(self):
        with pytest.raises(KeyError):
            GameState.from_dict({"players": [{"scores": []}]})
        with pytest.raises(InvalidCardError):
            GameState.from_dict({"players": [{"name": "Ana", "scores": [{"x": 1}]}]})

    def test_started_must_be_bool(self):
        """A string gameStarted is malformed, not truthy."""
        with pytest.raises(TypeError):
            GameState.from_dict({"gameStarted": "false", "players": []})

    def test_saved_hand_checked_against_card_rules(self):
        with pytest.raises(ValueError):
            GameState.from_dict({"players": [{"name": "Ana", "scores": [["BUST", 5]]}]})
        with pytest.raises(ValueError):
            GameState.from_dict({"players": [{"name": "Ana", "scores": [[5, 5, 5]]}]})
