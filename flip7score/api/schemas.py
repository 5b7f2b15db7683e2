"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a front end and the
scoreboard. Response schemas read straight from the service dataclasses
(from_attributes).

Error Codes:
- VALIDATION_ERROR: Request body is malformed
- NO_PLAYERS: No player names were given
- GAME_IN_PROGRESS: A game is already running
- GAME_NOT_STARTED: No game is running
- INVALID_CARD: A card token is not a Flip 7 card
- INVALID_SELECTION: A hand breaks the card rules
- UNKNOWN_PLAYER: No player with that name
- NO_WINNER: Restart requested before anyone won
- CONFIRMATION_REQUIRED: Reset requested without confirm=true
"""

from enum import Enum
from typing import Any, Optional, Union
from pydantic import BaseModel, Field

from .models import GameStatus


# =============================================================================
# Enums
# =============================================================================

class ErrorCode(str, Enum):
    """Structured error codes."""
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_PLAYERS = "NO_PLAYERS"
    GAME_IN_PROGRESS = "GAME_IN_PROGRESS"
    GAME_NOT_STARTED = "GAME_NOT_STARTED"
    INVALID_CARD = "INVALID_CARD"
    INVALID_SELECTION = "INVALID_SELECTION"
    UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
    NO_WINNER = "NO_WINNER"
    CONFIRMATION_REQUIRED = "CONFIRMATION_REQUIRED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


CardToken = Union[int, str]


# =============================================================================
# Shared Models
# =============================================================================

class PlayerInfo(BaseModel):
    """Player row for display."""
    name: str
    total: int = 0
    rounds: list[Any] = Field(
        default_factory=list,
        description='Per round: points, "BUST", or the list of card tokens',
    )
    round_scores: list[int] = Field(default_factory=list)
    draft: list[CardToken] = Field(default_factory=list, description="Cards picked this round")
    draft_points: Optional[str] = Field(None, description="Typed score for this round")
    draft_score: int = Field(0, description="What the draft would score if submitted now")
    is_winner: bool = False

    model_config = {"from_attributes": True}


class TableRow(BaseModel):
    name: str
    cells: list[str] = Field(default_factory=list)
    total: int = 0
    is_winner: bool = False

    model_config = {"from_attributes": True}


# =============================================================================
# Request Models
# =============================================================================

class StartGameRequest(BaseModel):
    """Request to start a game."""
    player_names: Union[str, list[str]] = Field(
        ..., description='Comma-separated names ("Alice, Bob") or a list'
    )


class CardRequest(BaseModel):
    """Toggle one card in a player's draft."""
    card: CardToken = Field(..., description='0-12, "x2", "+2".."+10" or "BUST"')


class PointsRequest(BaseModel):
    """Typed score for a player's draft."""
    points: str = Field(..., description='A number, or "BUST"')


class SubmitRoundRequest(BaseModel):
    """Submit the round. Leave both fields empty to submit the drafts."""
    selections: Optional[dict[str, list[CardToken]]] = Field(
        None, description="Player name -> card tokens in the order picked"
    )
    points: Optional[dict[str, str]] = Field(
        None, description="Player name -> typed score"
    )


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Complete scoreboard state for display."""
    status: GameStatus
    started: bool
    current_round: int
    players: list[PlayerInfo] = Field(default_factory=list)
    winner: Optional[str] = None
    winner_total: Optional[int] = None
    win_threshold: int = 200
    warnings: list[str] = Field(default_factory=list)
    api_version: str = "v1"

    model_config = {"from_attributes": True}


class RoundResultResponse(BaseModel):
    """Response after submitting a round."""
    round_number: int
    round_scores: dict[str, int] = Field(default_factory=dict)
    winner: Optional[str] = None
    changes: list[str] = Field(default_factory=list)
    game_state: Optional[GameStateResponse] = None
    api_version: str = "v1"

    model_config = {"from_attributes": True}


class TableResponse(BaseModel):
    """The rendered scoreboard."""
    current_round: int
    headers: list[str] = Field(default_factory=list)
    rows: list[TableRow] = Field(default_factory=list)
    banner: Optional[str] = None
    text: str = ""
    api_version: str = "v1"

    model_config = {"from_attributes": True}


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
