"""
Cards - Typed values a player can bank in a round.

A card is one of three variants:
- NumberCard: a number card from 0 to 12
- ModifierCard: x2 or a flat +2/+4/+6/+8/+10
- BustCard: the bust marker (the round scores nothing)

Cards have no identity of their own. They only exist as values inside a
round selection, so all variants are frozen and compare by value.

Tokens are the wire form used by the API, the CLI and the saved game:
numbers are plain integers, modifiers are "x2", "+2" ... "+10", and the
bust marker is "BUST".
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Union

from .constants import BUST_TOKEN, MAX_NUMBER_CARD, MIN_NUMBER_CARD
from ..errors import InvalidCardError


class CardType(Enum):
    """Card variants."""
    NUMBER = "number"
    MODIFIER = "modifier"
    BUST = "bust"


class Modifier(Enum):
    """Modifier cards, valued by their token."""
    DOUBLE = "x2"
    PLUS_2 = "+2"
    PLUS_4 = "+4"
    PLUS_6 = "+6"
    PLUS_8 = "+8"
    PLUS_10 = "+10"

    @property
    def is_multiplier(self) -> bool:
        return self is Modifier.DOUBLE

    def apply(self, subtotal: int) -> int:
        """Apply this modifier to a running subtotal."""
        if self.is_multiplier:
            return subtotal * 2
        return subtotal + int(self.value)


_MODIFIER_ALIASES = {
    "x2": Modifier.DOUBLE,
    "×2": Modifier.DOUBLE,
    "*2": Modifier.DOUBLE,
    "double": Modifier.DOUBLE,
    "+2": Modifier.PLUS_2,
    "+4": Modifier.PLUS_4,
    "+6": Modifier.PLUS_6,
    "+8": Modifier.PLUS_8,
    "+10": Modifier.PLUS_10,
}


@dataclass(frozen=True)
class NumberCard:
    """
    A number card.

    Examples:
        NumberCard(7)
        NumberCard(0)
    """
    value: int

    def __post_init__(self):
        if not MIN_NUMBER_CARD <= self.value <= MAX_NUMBER_CARD:
            raise InvalidCardError(self.value)

    @property
    def card_type(self) -> CardType:
        return CardType.NUMBER

    def to_token(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ModifierCard:
    """
    A modifier card. Applied to the number sum in the order it was picked.

    Examples:
        ModifierCard(Modifier.DOUBLE)
        ModifierCard(Modifier.PLUS_4)
    """
    modifier: Modifier

    @property
    def card_type(self) -> CardType:
        return CardType.MODIFIER

    def to_token(self) -> str:
        return self.modifier.value

    def __str__(self) -> str:
        return self.modifier.value


@dataclass(frozen=True)
class BustCard:
    """The bust marker. A bust selection holds nothing else."""

    @property
    def card_type(self) -> CardType:
        return CardType.BUST

    def to_token(self) -> str:
        return BUST_TOKEN

    def __str__(self) -> str:
        return BUST_TOKEN


Card = Union[NumberCard, ModifierCard, BustCard]

BUST = BustCard()


def parse_card(token: Any) -> Card:
    """
    Parse a single card token.

    Accepts integers, digit strings, modifier tokens (with a few aliases
    for x2) and "BUST" in any case. Raises InvalidCardError otherwise.
    """
    if isinstance(token, (NumberCard, ModifierCard, BustCard)):
        return token
    if isinstance(token, bool):
        raise InvalidCardError(token)
    if isinstance(token, int):
        return NumberCard(token)
    if not isinstance(token, str):
        raise InvalidCardError(token)

    text = token.strip()
    if text.upper() == BUST_TOKEN:
        return BUST

    modifier = _MODIFIER_ALIASES.get(text.lower())
    if modifier is not None:
        return ModifierCard(modifier)

    if text.isascii() and text.isdigit():
        return NumberCard(int(text))

    raise InvalidCardError(token)


def parse_cards(tokens: Iterable[Any]) -> tuple[Card, ...]:
    """Parse a sequence of card tokens, keeping their order."""
    return tuple(parse_card(token) for token in tokens)
