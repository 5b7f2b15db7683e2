"""
Round Scoring - Points for a single round.

Scoring a hand of cards:
1. Sum the number cards
2. Apply the modifiers in the order they were picked
   (x2 doubles the running subtotal, +N adds N)
3. Add the Flip 7 bonus if exactly seven distinct number cards were banked

Modifier order matters: +2 then x2 on a base of 10 gives 24, x2 then +2
gives 22. The bonus is never doubled.
"""

from __future__ import annotations
import re
from typing import Iterable

from .constants import BUST_TOKEN, FLIP_SEVEN_BONUS, MAX_NUMBER_CARDS
from .cards import BustCard
from .selection import RoundSelection


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def score(selection: RoundSelection) -> int:
    """Points for one round. Pure, never fails."""
    if selection.is_numeric:
        return selection.points
    if selection.is_bust:
        return 0

    numbers = selection.number_cards
    subtotal = sum(card.value for card in numbers)

    for card in selection.modifier_cards:
        subtotal = card.modifier.apply(subtotal)

    if len({card.value for card in numbers}) == MAX_NUMBER_CARDS:
        subtotal += FLIP_SEVEN_BONUS

    return subtotal


def total(rounds: Iterable[RoundSelection]) -> int:
    """Sum of round scores, recomputed from the full history."""
    return sum(score(selection) for selection in rounds)


def parse_points_entry(text: str | None) -> RoundSelection:
    """
    Parse a typed score entry.

    Blank input and "BUST" (any case) are a bust. Otherwise the leading
    integer is used and anything after it is ignored, so "12 pts" is 12.
    Input with no leading integer falls back to a bust.
    """
    if text is None:
        return RoundSelection.bust()
    if text == "" or text.upper() == BUST_TOKEN:
        return RoundSelection.bust()

    match = _LEADING_INT.match(text)
    if not match:
        return RoundSelection.bust()
    return RoundSelection.from_points(int(match.group(1)))


def validate_selection(selection: RoundSelection) -> str | None:
    """
    Check a card selection is a hand a player could actually bank.

    Returns error message if invalid, None if valid.
    """
    if selection.is_numeric:
        return None

    has_bust = any(isinstance(card, BustCard) for card in selection.cards)
    if has_bust and len(selection.cards) > 1:
        return "Bust cannot be combined with other cards"

    values = [card.value for card in selection.number_cards]
    if len(values) > MAX_NUMBER_CARDS:
        return f"At most {MAX_NUMBER_CARDS} number cards per round, got {len(values)}"
    if len(set(values)) != len(values):
        return "Number cards in a round must be distinct"

    return None
