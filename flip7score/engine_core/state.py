"""
Game State - The scoreboard's single source of truth.

Design principles:
- Immutable-friendly: all mutations return new state
- Serializable: the whole state is one JSON blob
- Derived values (totals, round counter, winner) always agree with history

The blob uses the same keys the browser scoreboard wrote to localStorage
("gameStarted", "players", "currentRound"), so a saved game from there
loads unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum
from typing import Any

from .constants import WIN_THRESHOLD
from .scoring import score, total, validate_selection
from .selection import RoundSelection


class GamePhase(Enum):
    """High-level game phases."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"


@dataclass
class PlayerState:
    """
    A player and every round they have recorded.

    The total is derived from the round history and recomputed in full
    whenever a round is added.
    """
    name: str
    rounds: list[RoundSelection] = field(default_factory=list)
    total: int = 0

    @property
    def round_scores(self) -> list[int]:
        return [score(selection) for selection in self.rounds]

    def with_round(self, selection: RoundSelection) -> PlayerState:
        """Return new player state with a round appended."""
        rounds = self.rounds + [selection]
        return PlayerState(name=self.name, rounds=rounds, total=total(rounds))

    def cleared(self) -> PlayerState:
        """Return the same player with no rounds."""
        return PlayerState(name=self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "scores": [selection.to_json() for selection in self.rounds],
            "total": self.total,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerState:
        """Rebuild a player. Raises ValueError on a hand that breaks the card rules."""
        rounds = [RoundSelection.from_json(value) for value in data.get("scores", [])]
        for selection in rounds:
            problem = validate_selection(selection)
            if problem:
                raise ValueError(f"{data['name']}: {problem}")
        return cls(name=str(data["name"]), rounds=rounds, total=total(rounds))


@dataclass
class GameState:
    """
    Complete scoreboard state at a point in time.

    All state changes go through the reducer.
    """
    started: bool = False
    players: list[PlayerState] = field(default_factory=list)
    current_round: int = 1

    @property
    def phase(self) -> GamePhase:
        return GamePhase.IN_PROGRESS if self.started else GamePhase.NOT_STARTED

    @property
    def num_players(self) -> int:
        return len(self.players)

    @property
    def roster(self) -> list[str]:
        return [p.name for p in self.players]

    @property
    def rounds_played(self) -> int:
        return max((len(p.rounds) for p in self.players), default=0)

    def get_player(self, name: str) -> PlayerState | None:
        """Get player by name (first match)."""
        for p in self.players:
            if p.name == name:
                return p
        return None

    def find_winner(self, threshold: int = WIN_THRESHOLD) -> PlayerState | None:
        """First player in seat order at or above the threshold."""
        for p in self.players:
            if p.total >= threshold:
                return p
        return None

    @property
    def winner(self) -> PlayerState | None:
        return self.find_winner()

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return GameState(
            started=kwargs.get("started", self.started),
            players=kwargs.get("players", self.players),
            current_round=kwargs.get("current_round", self.current_round),
        )

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """The persisted blob."""
        return {
            "gameStarted": self.started,
            "players": [p.to_dict() for p in self.players],
            "currentRound": self.current_round,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GameState:
        """
        Rebuild state from a persisted blob.

        Totals and the round counter are recomputed from the round
        history rather than trusted. Raises AttributeError, KeyError,
        TypeError or ValueError on a malformed blob.
        """
        started = data.get("gameStarted", False)
        if not isinstance(started, bool):
            raise TypeError(f"gameStarted must be true or false, got {started!r}")

        players = [PlayerState.from_dict(p) for p in data.get("players", [])]
        rounds_played = max((len(p.rounds) for p in players), default=0)
        return cls(
            started=started,
            players=players,
            current_round=rounds_played + 1,
        )
