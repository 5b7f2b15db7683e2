"""
API Module - JSON interface for scoreboard front ends.

A front end:
1. Starts a game with player names
2. Builds each player's round (cards, bust or typed points)
3. Submits the round and shows totals
4. Announces the winner and offers a rematch or a reset

There is one scoreboard per server process.
"""

from .models import (
    # Requests
    StartGameRequest,
    SubmitRoundRequest,
    # Responses
    GameStateResponse,
    RoundResultResponse,
    TableResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    TableRow,
    GameStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "StartGameRequest",
    "SubmitRoundRequest",
    # Responses
    "GameStateResponse",
    "RoundResultResponse",
    "TableResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    "TableRow",
    "GameStatus",
    # Service
    "APIService",
    "create_app",
]
