"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Validates before applying
- Returns ActionResult with success/failure, never raises for bad input
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .action import Action, ActionType, ActionResult
from .constants import WIN_THRESHOLD
from .scoring import score, validate_selection
from .selection import RoundSelection
from .state import GameState, PlayerState
from .. import errors

logger = logging.getLogger(__name__)


def split_player_names(text: str) -> list[str]:
    """Split comma-separated names, trimming and dropping blanks."""
    return [name.strip() for name in text.split(",") if name.strip()]


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """
    win_threshold: int = WIN_THRESHOLD

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            message, code = validation_error
            return ActionResult.failure(message, error_code=code)

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=errors.NO_HANDLER,
            )

        try:
            return handler(state, action)
        except Exception as e:
            logger.exception("Handler for %s failed", action.action_type.value)
            return ActionResult.failure(str(e), error_code=errors.HANDLER_ERROR)

    def _validate_action(
        self, state: GameState, action: Action
    ) -> tuple[str, str] | None:
        """
        Validate that an action is legal in the current state.

        Returns (message, error code) if invalid, None if valid.
        """
        if action.action_type == ActionType.START_GAME and state.started:
            return "Game already in progress - reset it first", errors.GAME_IN_PROGRESS

        if action.action_type in {ActionType.SUBMIT_ROUND, ActionType.RESTART_GAME}:
            if not state.started:
                return "Game not started - enter player names first", errors.GAME_NOT_STARTED

        if action.action_type == ActionType.RESTART_GAME:
            if state.find_winner(self.win_threshold) is None:
                return "Nobody has won yet - restart is only offered after a win", errors.NO_WINNER

        if action.action_type == ActionType.SUBMIT_ROUND:
            roster = set(state.roster)
            for name, selection in action.payload.selections.items():
                if name not in roster:
                    continue
                problem = validate_selection(selection)
                if problem:
                    return f"{name}: {problem}", errors.INVALID_SELECTION

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.START_GAME: self._handle_start_game,
            ActionType.SUBMIT_ROUND: self._handle_submit_round,
            ActionType.RESET_GAME: self._handle_reset_game,
            ActionType.RESTART_GAME: self._handle_restart_game,
        }
        return handlers.get(action_type)

    def _handle_start_game(self, state: GameState, action: Action) -> ActionResult:
        """Handle start of a new game."""
        payload = action.payload
        if payload.names is not None:
            names = [name.strip() for name in payload.names if name and name.strip()]
        else:
            names = split_player_names(payload.names_text or "")

        if not names:
            return ActionResult.failure(
                "Please enter at least one player name",
                error_code=errors.NO_PLAYERS,
            )

        new_state = GameState(
            started=True,
            players=[PlayerState(name=name) for name in names],
            current_round=1,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"Game started with {', '.join(names)}"],
        )

    def _handle_submit_round(self, state: GameState, action: Action) -> ActionResult:
        """
        Handle a round submission.

        Every player gets a round. A player with no selection busts.
        """
        selections = action.payload.selections
        roster = set(state.roster)
        warnings = [
            f"Ignored selection for unknown player {name!r}"
            for name in selections
            if name not in roster
        ]

        new_players = []
        round_scores: dict[str, int] = {}
        changes = []
        for player in state.players:
            selection = selections.get(player.name) or RoundSelection.bust()
            updated = player.with_round(selection)
            new_players.append(updated)

            points = score(selection)
            round_scores[player.name] = points
            if selection.is_bust:
                changes.append(f"{player.name} busted")
            else:
                changes.append(f"{player.name} scored {points} (total {updated.total})")

        new_state = state._copy_with(
            players=new_players,
            current_round=state.current_round + 1,
        )

        result = ActionResult.success_with_state(new_state, changes=changes, warnings=warnings)
        result.round_scores = round_scores
        result.winner = new_state.find_winner(self.win_threshold)
        if result.winner:
            result.state_changes.append(
                f"{result.winner.name} wins with {result.winner.total} points"
            )
        return result

    def _handle_reset_game(self, state: GameState, action: Action) -> ActionResult:
        """Handle reset back to an empty scoreboard."""
        return ActionResult.success_with_state(GameState(), changes=["Game reset"])

    def _handle_restart_game(self, state: GameState, action: Action) -> ActionResult:
        """Handle a rematch: same players, no rounds."""
        new_state = state._copy_with(
            players=[p.cleared() for p in state.players],
            current_round=1,
        )
        return ActionResult.success_with_state(
            new_state,
            changes=[f"New game with {', '.join(state.roster)}"],
        )


def apply_action(
    state: GameState, action: Action, win_threshold: int = WIN_THRESHOLD
) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(win_threshold=win_threshold)
    return reducer.apply(state, action)
