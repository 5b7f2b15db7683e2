"""
Scoreboard - The running game, its round drafts and its save slot.

LIFECYCLE:
1. Scoreboard is created -> saved game (if any) is loaded from the store
2. Players are entered -> game starts at round 1
3. Each round:
   - Per-player drafts are edited (cards, bust, or a typed score)
   - The round is submitted; every player gets an entry
   - Totals are recomputed, a winner is reported once someone reaches 200
4. After a win -> restart with the same players, or keep playing
5. Reset -> back to an empty scoreboard, save slot cleared

PERSISTENCE RULES:
- The whole GameState is written through after every committed change
- Drafts are never saved; they belong to the round being entered
- A failed save does not undo the change; it is reported as a warning
"""

from __future__ import annotations
import logging
from typing import Any, Mapping

from ..engine_core.action import Action, ActionResult
from ..engine_core.constants import WIN_THRESHOLD
from ..engine_core.draft import RoundDraft
from ..engine_core.reducer import Reducer
from ..engine_core.selection import RoundSelection
from ..engine_core.state import GamePhase, GameState, PlayerState
from ..errors import CONFIRMATION_REQUIRED, StorageError, UnknownPlayerError
from ..render import ScoreTable, build_table
from ..storage import MemoryStore, Store

logger = logging.getLogger(__name__)


class Scoreboard:
    """
    Owns the scoreboard state.

    Usage:
        board = Scoreboard(store=JsonFileStore("~/.flip7score"))
        board.start_game("Alice, Bob")

        board.toggle_card("Alice", 5)
        board.toggle_card("Alice", "x2")
        board.set_bust("Bob")
        result = board.submit_round()

        if result.winner:
            board.restart_with_same_players()
    """

    def __init__(self, store: Store | None = None, win_threshold: int = WIN_THRESHOLD):
        self.store = store if store is not None else MemoryStore()
        self.reducer = Reducer(win_threshold=win_threshold)
        self.drafts: dict[str, RoundDraft] = {}
        self.load_warnings: list[str] = []
        self.state = self._load()

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def winner(self) -> PlayerState | None:
        return self.state.find_winner(self.reducer.win_threshold)

    # =========================================================================
    # Transitions
    # =========================================================================

    def start_game(self, names) -> ActionResult:
        """Start a game from "Alice, Bob" or a list of names."""
        return self._dispatch(Action.start_game(names))

    def submit_round(
        self, selections: Mapping[str, RoundSelection] | None = None
    ) -> ActionResult:
        """
        Submit the current round.

        Uses the drafts unless explicit selections are given. Players
        without a selection bust.
        """
        if selections is None:
            selections = {
                name: draft.to_selection() for name, draft in self.drafts.items()
            }
        result = self._dispatch(Action.submit_round(selections))
        if result.success:
            self.drafts.clear()
        return result

    def reset_game(self, confirm: bool = False) -> ActionResult:
        """Clear everything. Needs explicit confirmation."""
        if not confirm:
            return ActionResult.failure(
                "Reset needs confirmation", error_code=CONFIRMATION_REQUIRED
            )
        result = self._dispatch(Action.reset_game())
        if result.success:
            self.drafts.clear()
        return result

    def restart_with_same_players(self) -> ActionResult:
        """Rematch after a win: same players, scores cleared."""
        result = self._dispatch(Action.restart_game())
        if result.success:
            self.drafts.clear()
        return result

    # =========================================================================
    # Round drafts
    # =========================================================================

    def draft_for(self, name: str) -> RoundDraft:
        self._require_player(name)
        return self.drafts.get(name, RoundDraft())

    def toggle_card(self, name: str, token: Any) -> RoundDraft:
        """Add or remove a card in a player's draft."""
        draft = self.draft_for(name).toggle_card(token)
        return self._set_draft(name, draft)

    def set_bust(self, name: str) -> RoundDraft:
        return self._set_draft(name, self.draft_for(name).set_bust())

    def set_points(self, name: str, text: str) -> RoundDraft:
        """Record a typed score for a player."""
        return self._set_draft(name, self.draft_for(name).set_points(text))

    def clear_draft(self, name: str):
        self._require_player(name)
        self.drafts.pop(name, None)

    def table(self) -> ScoreTable:
        return build_table(self.state, self.reducer.win_threshold)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _set_draft(self, name: str, draft: RoundDraft) -> RoundDraft:
        self.drafts[name] = draft
        logger.debug("Draft for %s: %s", name, draft.to_tokens() or draft.points_text)
        return draft

    def _require_player(self, name: str):
        if self.state.get_player(name) is None:
            raise UnknownPlayerError(name)

    def _dispatch(self, action: Action) -> ActionResult:
        """Apply an action, commit the new state and write it through."""
        result = self.reducer.apply(self.state, action)
        if not result.success:
            logger.info("%s rejected: %s", action.action_type.value, result.error)
            return result

        self.state = result.new_state
        for change in result.state_changes:
            logger.info(change)
        for warning in result.warnings:
            logger.warning(warning)

        problem = self._persist()
        if problem:
            result.warnings.append(problem)
        return result

    def _persist(self) -> str | None:
        """Write state to the store. Returns a warning on failure."""
        try:
            if self.state.started:
                self.store.save(self.state.to_dict())
            else:
                self.store.clear()
        except StorageError as e:
            logger.warning("Game state not saved: %s", e.message)
            return f"Game state not saved: {e.message}"
        # The slot now holds this game, not the one that failed to load
        self.load_warnings.clear()
        return None

    def _load(self) -> GameState:
        """Load the saved game, falling back to an empty scoreboard."""
        try:
            data = self.store.load()
        except StorageError as e:
            logger.warning("Ignoring saved game: %s", e.message)
            self.load_warnings.append(f"Ignoring saved game: {e.message}")
            return GameState()

        if data is None:
            return GameState()

        try:
            state = GameState.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring malformed saved game: %s", e)
            self.load_warnings.append(f"Ignoring malformed saved game: {e}")
            return GameState()

        logger.info(
            "Loaded saved game: %d player(s), round %d",
            state.num_players, state.current_round,
        )
        return state
