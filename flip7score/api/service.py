"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to scoreboard calls
2. Turns engine failures into ErrorResponse objects
3. Formats state for display

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from .models import (
    # Requests
    StartGameRequest,
    SubmitRoundRequest,
    # Responses
    ErrorResponse,
    GameStateResponse,
    RoundResultResponse,
    TableResponse,
    # Shared
    PlayerInfo,
    TableRow,
    # Enums
    GameStatus,
)
from ..engine_core.action import ActionResult
from ..engine_core.scoring import parse_points_entry, score
from ..engine_core.selection import RoundSelection
from ..errors import Flip7Error
from ..render import format_table
from ..session import Scoreboard


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService(scoreboard=Scoreboard(store))

        service.start_game(StartGameRequest(player_names="Alice, Bob"))
        service.toggle_card("Alice", 7)
        response = service.submit_round(SubmitRoundRequest())
    """
    scoreboard: Scoreboard = field(default_factory=Scoreboard)

    def get_game_state(self) -> GameStateResponse:
        """
        Get current scoreboard state.
        """
        return self._build_game_state()

    def start_game(self, request: StartGameRequest) -> GameStateResponse | ErrorResponse:
        """
        Start a game with the given players.
        """
        result = self.scoreboard.start_game(request.player_names)
        if not result.success:
            return self._failure(result)
        return self._build_game_state(result.warnings)

    def toggle_card(self, player: str, card: Any) -> GameStateResponse | ErrorResponse:
        """
        Add or remove a card in a player's draft.
        """
        try:
            self.scoreboard.toggle_card(player, card)
        except Flip7Error as e:
            return ErrorResponse(error=e.message, error_code=e.code)
        return self._build_game_state()

    def set_bust(self, player: str) -> GameStateResponse | ErrorResponse:
        try:
            self.scoreboard.set_bust(player)
        except Flip7Error as e:
            return ErrorResponse(error=e.message, error_code=e.code)
        return self._build_game_state()

    def set_points(self, player: str, points: str) -> GameStateResponse | ErrorResponse:
        try:
            self.scoreboard.set_points(player, points)
        except Flip7Error as e:
            return ErrorResponse(error=e.message, error_code=e.code)
        return self._build_game_state()

    def submit_round(
        self, request: SubmitRoundRequest
    ) -> RoundResultResponse | ErrorResponse:
        """
        Submit the current round.

        Explicit selections/points take the place of the drafts.
        """
        selections = None
        if request.selections is not None or request.points is not None:
            overlap = set(request.selections or {}) & set(request.points or {})
            if overlap:
                return ErrorResponse(
                    error="Give either cards or points for a player, not both",
                    error_code="VALIDATION_ERROR",
                    details={"players": sorted(overlap)},
                )
            try:
                selections = {
                    name: RoundSelection.of(tokens)
                    for name, tokens in (request.selections or {}).items()
                }
            except Flip7Error as e:
                return ErrorResponse(error=e.message, error_code=e.code)
            for name, text in (request.points or {}).items():
                selections[name] = parse_points_entry(text)

        round_number = self.scoreboard.state.current_round
        result = self.scoreboard.submit_round(selections)
        if not result.success:
            return self._failure(result)

        return RoundResultResponse(
            round_number=round_number,
            round_scores=result.round_scores,
            winner=result.winner.name if result.winner else None,
            changes=result.state_changes,
            game_state=self._build_game_state(result.warnings),
        )

    def reset_game(self, confirm: bool = False) -> GameStateResponse | ErrorResponse:
        """
        Reset the scoreboard. Needs confirm=True.
        """
        result = self.scoreboard.reset_game(confirm=confirm)
        if not result.success:
            return self._failure(result)
        return self._build_game_state(result.warnings)

    def restart_game(self) -> GameStateResponse | ErrorResponse:
        """
        Start over with the same players after a win.
        """
        result = self.scoreboard.restart_with_same_players()
        if not result.success:
            return self._failure(result)
        return self._build_game_state(result.warnings)

    def get_table(self) -> TableResponse:
        """
        Get the rendered scoreboard.
        """
        table = self.scoreboard.table()
        return TableResponse(
            current_round=table.current_round,
            headers=table.headers,
            rows=[
                TableRow(name=r.name, cells=r.cells, total=r.total, is_winner=r.is_winner)
                for r in table.rows
            ],
            banner=table.banner,
            text=format_table(table),
        )

    # =========================================================================
    # Helper methods
    # =========================================================================

    def _failure(self, result: ActionResult) -> ErrorResponse:
        return ErrorResponse(
            error=result.error or "Request failed",
            error_code=result.error_code or "INTERNAL_ERROR",
        )

    def _build_game_state(self, warnings: list[str] | None = None) -> GameStateResponse:
        """Build complete game state response."""
        board = self.scoreboard
        state = board.state
        winner = board.winner

        players = []
        for player in state.players:
            draft = board.drafts.get(player.name)
            players.append(
                PlayerInfo(
                    name=player.name,
                    total=player.total,
                    rounds=[selection.to_json() for selection in player.rounds],
                    round_scores=player.round_scores,
                    draft=draft.to_tokens() if draft else [],
                    draft_points=draft.points_text if draft else None,
                    draft_score=score(draft.to_selection()) if draft else 0,
                    is_winner=winner is player,
                )
            )

        if not state.started:
            status = GameStatus.NOT_STARTED
        elif winner:
            status = GameStatus.WON
        else:
            status = GameStatus.IN_PROGRESS

        return GameStateResponse(
            status=status,
            started=state.started,
            current_round=state.current_round,
            players=players,
            winner=winner.name if winner else None,
            winner_total=winner.total if winner else None,
            win_threshold=board.reducer.win_threshold,
            warnings=board.load_warnings + (warnings or []),
        )
