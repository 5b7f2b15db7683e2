"""
Round Selection - What one player recorded for one round.

A selection is either:
- a hand of cards, in the order the player picked them, or
- a point value typed in directly (the quick numeric entry)

An empty hand counts as a bust, the same as a hand holding only the
bust marker.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable

from .cards import BUST, BustCard, Card, ModifierCard, NumberCard, parse_cards
from .constants import BUST_TOKEN
from ..errors import InvalidCardError


@dataclass(frozen=True)
class RoundSelection:
    """
    One player's result for one round.

    Examples:
        RoundSelection.of([5, 3, "x2"])
        RoundSelection.from_points(12)
        RoundSelection.bust()
    """
    cards: tuple[Card, ...] = ()
    points: int | None = None

    @classmethod
    def of(cls, tokens: Iterable[Any]) -> RoundSelection:
        """Build a card selection from card tokens or cards."""
        return cls(cards=parse_cards(tokens))

    @classmethod
    def from_points(cls, points: int) -> RoundSelection:
        """Build a numeric entry."""
        return cls(points=points)

    @classmethod
    def bust(cls) -> RoundSelection:
        return cls(cards=(BUST,))

    @property
    def is_numeric(self) -> bool:
        return self.points is not None

    @property
    def is_bust(self) -> bool:
        if self.is_numeric:
            return False
        return all(isinstance(card, BustCard) for card in self.cards)

    @property
    def number_cards(self) -> list[NumberCard]:
        return [c for c in self.cards if isinstance(c, NumberCard)]

    @property
    def modifier_cards(self) -> list[ModifierCard]:
        return [c for c in self.cards if isinstance(c, ModifierCard)]

    def to_json(self) -> Any:
        """Saved form: an int, "BUST", or a list of card tokens."""
        if self.is_numeric:
            return self.points
        if self.is_bust:
            return BUST_TOKEN
        return [card.to_token() for card in self.cards]

    @classmethod
    def from_json(cls, value: Any) -> RoundSelection:
        """Inverse of to_json. Raises InvalidCardError on anything else."""
        if isinstance(value, bool):
            raise InvalidCardError(value)
        if isinstance(value, int):
            return cls.from_points(value)
        if isinstance(value, str) and value.strip().upper() == BUST_TOKEN:
            return cls.bust()
        if isinstance(value, list):
            return cls.of(value)
        raise InvalidCardError(value)

    def __str__(self) -> str:
        if self.is_numeric:
            return str(self.points)
        if self.is_bust:
            return BUST_TOKEN
        return " ".join(str(card) for card in self.cards)
