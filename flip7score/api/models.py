"""
API Models - Request and response shapes for the service layer.

These are plain dataclasses so the service stays framework-agnostic.
The HTTP layer validates them into the pydantic schemas in schemas.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


API_VERSION = "v1"


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"


# =============================================================================
# Shared Models
# =============================================================================

@dataclass
class PlayerInfo:
    """Player row for display."""
    name: str
    total: int = 0
    rounds: list[Any] = field(default_factory=list)  # saved form per round
    round_scores: list[int] = field(default_factory=list)
    draft: list[Any] = field(default_factory=list)  # card tokens picked so far
    draft_points: str | None = None  # typed score, if any
    draft_score: int = 0
    is_winner: bool = False


@dataclass
class TableRow:
    name: str
    cells: list[str] = field(default_factory=list)
    total: int = 0
    is_winner: bool = False


# =============================================================================
# Request Models
# =============================================================================

@dataclass
class StartGameRequest:
    """
    Request to start a game.

    POST /api/v1/game
    """
    player_names: str | list[str]


@dataclass
class SubmitRoundRequest:
    """
    Request to submit the current round.

    POST /api/v1/game/rounds

    With neither field set, the drafts are submitted.
    """
    selections: dict[str, list[Any]] | None = None  # player -> card tokens
    points: dict[str, str] | None = None  # player -> typed score


# =============================================================================
# Response Models
# =============================================================================

@dataclass
class ErrorResponse:
    """
    Error response.

    Returned for any 4xx or 5xx status.
    """
    error: str
    error_code: str
    details: dict[str, Any] | None = None
    api_version: str = API_VERSION


@dataclass
class GameStateResponse:
    """
    Complete scoreboard state for display.

    Returned after every change.
    """
    status: GameStatus
    started: bool
    current_round: int
    players: list[PlayerInfo] = field(default_factory=list)
    winner: str | None = None
    winner_total: int | None = None
    win_threshold: int = 200
    warnings: list[str] = field(default_factory=list)
    api_version: str = API_VERSION


@dataclass
class RoundResultResponse:
    """
    Response after submitting a round.
    """
    round_number: int
    round_scores: dict[str, int] = field(default_factory=dict)
    winner: str | None = None
    changes: list[str] = field(default_factory=list)
    game_state: GameStateResponse | None = None
    api_version: str = API_VERSION


@dataclass
class TableResponse:
    """The rendered scoreboard."""
    current_round: int
    headers: list[str] = field(default_factory=list)
    rows: list[TableRow] = field(default_factory=list)
    banner: str | None = None
    text: str = ""
    api_version: str = API_VERSION
