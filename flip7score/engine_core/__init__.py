"""
Engine Core - Round scoring and the scoreboard state machine.

The engine:
1. Parses cards into typed values
2. Scores a round from its cards (or a typed point value)
3. Manages GameState
4. Applies actions via the reducer
"""

from .cards import (
    Card,
    CardType,
    Modifier,
    NumberCard,
    ModifierCard,
    BustCard,
    BUST,
    parse_card,
    parse_cards,
)
from .selection import RoundSelection
from .scoring import score, total, parse_points_entry, validate_selection
from .draft import RoundDraft
from .state import GameState, GamePhase, PlayerState
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action, split_player_names

__all__ = [
    "Card",
    "CardType",
    "Modifier",
    "NumberCard",
    "ModifierCard",
    "BustCard",
    "BUST",
    "parse_card",
    "parse_cards",
    "RoundSelection",
    "score",
    "total",
    "parse_points_entry",
    "validate_selection",
    "RoundDraft",
    "GameState",
    "GamePhase",
    "PlayerState",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "split_player_names",
]
