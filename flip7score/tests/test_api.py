"""
Tests for the API service layer.
"""

from ..api.models import (
    ErrorResponse,
    GameStateResponse,
    GameStatus,
    RoundResultResponse,
    StartGameRequest,
    SubmitRoundRequest,
)
from ..api.service import APIService
from ..session import Scoreboard
from ..storage import MemoryStore


class TestGameState:
    """Tests for state responses."""

    def test_not_started(self, service):
        response = service.get_game_state()
        assert isinstance(response, GameStateResponse)
        assert response.status == GameStatus.NOT_STARTED
        assert response.players == []
        assert response.current_round == 1

    def test_start(self, service):
        response = service.start_game(StartGameRequest(player_names="Alice, Bob"))
        assert response.status == GameStatus.IN_PROGRESS
        assert [p.name for p in response.players] == ["Alice", "Bob"]

    def test_start_without_names(self, service):
        response = service.start_game(StartGameRequest(player_names=[]))
        assert isinstance(response, ErrorResponse)
        assert response.error_code == "NO_PLAYERS"

    def test_load_warnings_reported(self):
        store = MemoryStore({"players": "nope"})
        service = APIService(scoreboard=Scoreboard(store=store))
        assert service.get_game_state().warnings


class TestDrafts:
    """Tests for draft editing through the service."""

    def test_toggle_card(self, service):
        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        service.toggle_card("Alice", 5)
        response = service.toggle_card("Alice", "x2")
        alice = response.players[0]
        assert alice.draft == [5, "x2"]
        assert alice.draft_score == 10

    def test_points(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        alice = service.set_points("Alice", "33").players[0]
        assert alice.draft_points == "33"
        assert alice.draft_score == 33

    def test_bust(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        assert service.set_bust("Alice").players[0].draft == ["BUST"]

    def test_invalid_card(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        response = service.toggle_card("Alice", "x3")
        assert isinstance(response, ErrorResponse)
        assert response.error_code == "INVALID_CARD"

    def test_unknown_player(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        response = service.set_bust("Zed")
        assert response.error_code == "UNKNOWN_PLAYER"


class TestSubmitRound:
    """Tests for round submission."""

    def test_submit_drafts(self, service):
        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        for card in [5, 3, "x2"]:
            service.toggle_card("Alice", card)

        response = service.submit_round(SubmitRoundRequest())
        assert isinstance(response, RoundResultResponse)
        assert response.round_number == 1
        assert response.round_scores == {"Alice": 16, "Bob": 0}
        assert response.winner is None
        assert response.game_state.current_round == 2
        assert response.game_state.players[0].draft == []

    def test_submit_explicit(self, service):
        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        response = service.submit_round(
            SubmitRoundRequest(selections={"Alice": [10, "+2", "x2"]}, points={"Bob": "7"})
        )
        assert response.round_scores == {"Alice": 24, "Bob": 7}
        assert response.game_state.players[0].rounds == [[10, "+2", "x2"]]
        assert response.game_state.players[1].rounds == [7]

    def test_cards_and_points_for_same_player(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        response = service.submit_round(
            SubmitRoundRequest(selections={"Alice": [1]}, points={"Alice": "1"})
        )
        assert response.error_code == "VALIDATION_ERROR"
        assert response.details == {"players": ["Alice"]}

    def test_invalid_card_in_round(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        response = service.submit_round(SubmitRoundRequest(selections={"Alice": [99]}))
        assert response.error_code == "INVALID_CARD"

    def test_winner(self, service):
        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        response = service.submit_round(SubmitRoundRequest(points={"Bob": "205"}))
        assert response.winner == "Bob"
        state = response.game_state
        assert state.status == GameStatus.WON
        assert state.winner_total == 205
        assert [p.is_winner for p in state.players] == [False, True]

    def test_not_started(self, service):
        response = service.submit_round(SubmitRoundRequest())
        assert response.error_code == "GAME_NOT_STARTED"


class TestResetAndRestart:
    """Tests for reset and restart."""

    def test_reset_needs_confirm(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        assert service.reset_game().error_code == "CONFIRMATION_REQUIRED"
        assert service.reset_game(confirm=True).status == GameStatus.NOT_STARTED

    def test_restart(self, service):
        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        assert service.restart_game().error_code == "NO_WINNER"
        service.submit_round(SubmitRoundRequest(points={"Alice": "200"}))
        response = service.restart_game()
        assert response.status == GameStatus.IN_PROGRESS
        assert all(p.total == 0 for p in response.players)

    def test_table(self, service):
        service.start_game(StartGameRequest(player_names="Alice"))
        service.submit_round(SubmitRoundRequest(points={"Alice": "12"}))
        table = service.get_table()
        assert table.headers == ["Player", "R1", "Total"]
        assert table.rows[0].cells == ["12"]
        assert "Alice" in table.text
