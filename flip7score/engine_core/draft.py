"""
Round Draft - A player's selection while the round is still being entered.

Drafts are transient: they live outside GameState and are discarded once
the round is submitted. Every edit returns a new draft.

Editing rules:
- Picking bust replaces the whole draft with the bust marker
- Picking any other card while bust is active replaces bust with that card
- Picking a card that is already in the draft removes it
- An eighth number card is ignored
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from .cards import BUST, BustCard, Card, NumberCard, parse_card
from .constants import MAX_NUMBER_CARDS
from .scoring import parse_points_entry
from .selection import RoundSelection


@dataclass(frozen=True)
class RoundDraft:
    """
    Draft selection for one player.

    Holds either picked cards or the raw text of a typed score,
    never both.
    """
    cards: tuple[Card, ...] = ()
    points_text: str | None = None

    @property
    def is_bust(self) -> bool:
        return self.cards == (BUST,)

    @property
    def number_count(self) -> int:
        return sum(1 for c in self.cards if isinstance(c, NumberCard))

    @property
    def is_empty(self) -> bool:
        return not self.cards and not self.points_text

    def set_bust(self) -> RoundDraft:
        """Return draft holding only the bust marker."""
        return RoundDraft(cards=(BUST,))

    def toggle_card(self, token: Any) -> RoundDraft:
        """Return draft with the card added or removed."""
        card = parse_card(token)
        if isinstance(card, BustCard):
            return self.set_bust()
        if self.is_bust:
            return RoundDraft(cards=(card,))
        if card in self.cards:
            return RoundDraft(cards=tuple(c for c in self.cards if c != card))
        if isinstance(card, NumberCard) and self.number_count >= MAX_NUMBER_CARDS:
            return self
        return RoundDraft(cards=self.cards + (card,))

    def set_points(self, text: str) -> RoundDraft:
        """Return draft switched to a typed score."""
        return RoundDraft(points_text=text)

    def to_selection(self) -> RoundSelection:
        """The selection this draft submits."""
        if self.points_text is not None:
            return parse_points_entry(self.points_text)
        return RoundSelection(cards=self.cards)

    def to_tokens(self) -> list[Any]:
        return [card.to_token() for card in self.cards]
