"""
FastAPI Application - JSON API for a scoreboard front end.

Endpoints:
    GET    /api/v1/health                          Health check
    GET    /api/v1/game                            Current scoreboard
    POST   /api/v1/game                            Start a game
    DELETE /api/v1/game?confirm=true               Reset the scoreboard
    POST   /api/v1/game/restart                    Same players, new game (after a win)
    PUT    /api/v1/game/drafts/{player}/cards      Toggle a card in a draft
    PUT    /api/v1/game/drafts/{player}/bust       Mark a player bust
    PUT    /api/v1/game/drafts/{player}/points     Type a player's score
    POST   /api/v1/game/rounds                     Submit the round
    GET    /api/v1/game/table                      Rendered scoreboard

Round Flow:
    1. PUT drafts for each player (cards, bust or typed points)
    2. POST /rounds submits them; players with no draft bust
    3. The response names the winner once someone reaches the threshold

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import ALLOWED_ORIGINS, FLIP7_WIN_THRESHOLD, default_store
from ..session import Scoreboard
from .service import APIService
from .models import (
    ErrorResponse as ServiceError,
    StartGameRequest as StartGameCommand,
    SubmitRoundRequest as SubmitRoundCommand,
)
from .schemas import (
    # Request models
    StartGameRequest,
    CardRequest,
    PointsRequest,
    SubmitRoundRequest,
    # Response models
    ErrorResponse,
    GameStateResponse,
    RoundResultResponse,
    TableResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

ERROR_STATUS = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NO_PLAYERS: 400,
    ErrorCode.INVALID_CARD: 400,
    ErrorCode.INVALID_SELECTION: 400,
    ErrorCode.UNKNOWN_PLAYER: 404,
    ErrorCode.GAME_IN_PROGRESS: 409,
    ErrorCode.GAME_NOT_STARTED: 409,
    ErrorCode.NO_WINNER: 409,
    ErrorCode.CONFIRMATION_REQUIRED: 409,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates one over the
            configured file store if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Flip 7 Scoreboard API",
        description="""
Score tracker for the Flip 7 card game.

## Scoring

A round scores the sum of its number cards, then the modifiers in the
order they were picked (`x2` doubles, `+N` adds), then +15 if exactly
seven distinct number cards were banked. A bust scores 0.

## Error Codes

| Code | Description |
|------|-------------|
| `NO_PLAYERS` | No player names given |
| `GAME_IN_PROGRESS` | Reset before starting a new game |
| `GAME_NOT_STARTED` | Start a game first |
| `INVALID_CARD` | Not a Flip 7 card |
| `INVALID_SELECTION` | Hand breaks the card rules |
| `UNKNOWN_PLAYER` | No player with that name |
| `NO_WINNER` | Restart is only offered after a win |
| `CONFIRMATION_REQUIRED` | Reset needs `confirm=true` |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService(
        scoreboard=Scoreboard(store=default_store(), win_threshold=FLIP7_WIN_THRESHOLD)
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code or ERROR_STATUS.get(error_code, 400),
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def respond(response, schema):
        """Validate a service result into its schema, or an error response."""
        if isinstance(response, ServiceError):
            try:
                code = ErrorCode(response.error_code)
            except ValueError:
                code = ErrorCode.INTERNAL_ERROR
            return make_error_response(code, response.error, details=response.details)
        return schema.model_validate(response, from_attributes=True)

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="healthy", service="flip7score", version=__version__)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/game",
        response_model=GameStateResponse,
        tags=["Game"],
        summary="Get the scoreboard",
    )
    async def get_game() -> GameStateResponse:
        """Current players, rounds, totals, drafts and winner."""
        return respond(api_service.get_game_state(), GameStateResponse)

    @app.post(
        "/api/v1/game",
        response_model=GameStateResponse,
        responses={
            400: {"model": ErrorResponse, "description": "No player names"},
            409: {"model": ErrorResponse, "description": "Game already in progress"},
        },
        tags=["Game"],
        summary="Start a game",
    )
    async def start_game(
        body: StartGameRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """
        Start a game.

        `player_names` is either `"Alice, Bob"` or `["Alice", "Bob"]`.
        Blank names are dropped.
        """
        response = api_service.start_game(StartGameCommand(player_names=body.player_names))
        return respond(response, GameStateResponse)

    @app.delete(
        "/api/v1/game",
        response_model=GameStateResponse,
        responses={409: {"model": ErrorResponse, "description": "Not confirmed"}},
        tags=["Game"],
        summary="Reset the scoreboard",
    )
    async def reset_game(
        confirm: Annotated[bool, Query(description="Must be true to reset")] = False,
    ) -> Union[GameStateResponse, JSONResponse]:
        """Clear all players and scores and remove the saved game."""
        return respond(api_service.reset_game(confirm=confirm), GameStateResponse)

    @app.post(
        "/api/v1/game/restart",
        response_model=GameStateResponse,
        responses={409: {"model": ErrorResponse, "description": "Nobody has won"}},
        tags=["Game"],
        summary="Play again with the same players",
    )
    async def restart_game() -> Union[GameStateResponse, JSONResponse]:
        """Keep the players, clear every round. Only after a win."""
        return respond(api_service.restart_game(), GameStateResponse)

    @app.get(
        "/api/v1/game/table",
        response_model=TableResponse,
        tags=["Game"],
        summary="Get the rendered scoreboard",
    )
    async def get_table() -> TableResponse:
        return respond(api_service.get_table(), TableResponse)

    # =========================================================================
    # Round Endpoints
    # =========================================================================

    @app.put(
        "/api/v1/game/drafts/{player}/cards",
        response_model=GameStateResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Not a card"},
            404: {"model": ErrorResponse, "description": "Unknown player"},
        },
        tags=["Round"],
        summary="Toggle a card in a player's draft",
    )
    async def toggle_card(
        player: str,
        body: CardRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """
        Toggle one card for this round.

        Picking a card already in the draft removes it. `"BUST"` replaces
        the draft. An eighth number card is ignored.
        """
        return respond(api_service.toggle_card(player, body.card), GameStateResponse)

    @app.put(
        "/api/v1/game/drafts/{player}/bust",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse, "description": "Unknown player"}},
        tags=["Round"],
        summary="Mark a player bust for this round",
    )
    async def set_bust(player: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.set_bust(player), GameStateResponse)

    @app.put(
        "/api/v1/game/drafts/{player}/points",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse, "description": "Unknown player"}},
        tags=["Round"],
        summary="Type a player's score for this round",
    )
    async def set_points(
        player: str,
        body: PointsRequest,
    ) -> Union[GameStateResponse, JSONResponse]:
        """Unreadable or blank points count as a bust."""
        return respond(api_service.set_points(player, body.points), GameStateResponse)

    @app.post(
        "/api/v1/game/rounds",
        response_model=RoundResultResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid cards or hand"},
            409: {"model": ErrorResponse, "description": "Game not started"},
        },
        tags=["Round"],
        summary="Submit the round",
    )
    async def submit_round(
        body: Optional[SubmitRoundRequest] = None,
    ) -> Union[RoundResultResponse, JSONResponse]:
        """
        Submit the round for every player.

        Without a body the drafts are submitted. Players with nothing
        entered bust.
        """
        body = body or SubmitRoundRequest()
        command = SubmitRoundCommand(selections=body.selections, points=body.points)
        return respond(api_service.submit_round(command), RoundResultResponse)

    return app
