"""
Action System - Actions, payloads, and results.

Actions represent the four scoreboard transitions:
1. Start a game with a list of players
2. Submit a round for every player
3. Reset to an empty scoreboard
4. Restart with the same players after a win

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from .selection import RoundSelection


class ActionType(Enum):
    """Types of actions in the system."""
    START_GAME = "start_game"
    SUBMIT_ROUND = "submit_round"
    RESET_GAME = "reset_game"
    RESTART_GAME = "restart_game"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Validation happens in the reducer.
    """
    # For start_game: either the raw comma-separated text or a list
    names_text: str | None = None
    names: list[str] | None = None

    # For submit_round: player name -> selection
    selections: dict[str, RoundSelection] = field(default_factory=dict)


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are validated before application and applied atomically
    by the reducer.
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def start_game(cls, names: str | Iterable[str]) -> Action:
        """Factory for start action. Accepts "Alice, Bob" or ["Alice", "Bob"]."""
        if isinstance(names, str):
            payload = ActionPayload(names_text=names)
        else:
            payload = ActionPayload(names=list(names))
        return cls(action_type=ActionType.START_GAME, payload=payload)

    @classmethod
    def submit_round(cls, selections: Mapping[str, RoundSelection]) -> Action:
        """Factory for round submission."""
        return cls(
            action_type=ActionType.SUBMIT_ROUND,
            payload=ActionPayload(selections=dict(selections)),
        )

    @classmethod
    def reset_game(cls) -> Action:
        return cls(action_type=ActionType.RESET_GAME)

    @classmethod
    def restart_game(cls) -> Action:
        return cls(action_type=ActionType.RESTART_GAME)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - New state (if succeeded)
    - Errors (if failed)
    - Round scores and winner (for round submissions)
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)  # Human-readable changes
    warnings: list[str] = field(default_factory=list)

    # For round submissions
    round_scores: dict[str, int] = field(default_factory=dict)
    winner: Any | None = None  # PlayerState

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        warnings: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            warnings=warnings or [],
        )
