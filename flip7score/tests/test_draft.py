"""
Tests for round drafts.
"""

from ..engine_core.cards import BUST, Modifier, ModifierCard, NumberCard
from ..engine_core.draft import RoundDraft
from ..engine_core.selection import RoundSelection


class TestToggleCard:
    """Tests for card toggling."""

    def test_add_in_pick_order(self):
        """Cards keep the order they were picked in."""
        draft = RoundDraft().toggle_card(5).toggle_card("x2").toggle_card(3)
        assert draft.to_tokens() == [5, "x2", 3]

    def test_toggle_removes(self):
        """Picking a card twice removes it."""
        draft = RoundDraft().toggle_card(5).toggle_card(3).toggle_card(5)
        assert draft.cards == (NumberCard(3),)

    def test_bust_replaces_everything(self):
        """Bust clears the other cards."""
        draft = RoundDraft().toggle_card(5).toggle_card("+4").toggle_card("BUST")
        assert draft.is_bust
        assert draft.cards == (BUST,)

    def test_card_replaces_bust(self):
        """Picking a card while bust starts a fresh hand."""
        draft = RoundDraft().set_bust().toggle_card(7)
        assert not draft.is_bust
        assert draft.cards == (NumberCard(7),)

    def test_eighth_number_ignored(self):
        """An eighth number card is not added."""
        draft = RoundDraft()
        for value in range(7):
            draft = draft.toggle_card(value)
        assert draft.number_count == 7
        assert draft.toggle_card(8) is draft

    def test_modifiers_after_seven_numbers(self):
        """Modifiers can still be added to a full hand."""
        draft = RoundDraft()
        for value in range(7):
            draft = draft.toggle_card(value)
        draft = draft.toggle_card("x2")
        assert draft.cards[-1] == ModifierCard(Modifier.DOUBLE)

    def test_edits_return_new_drafts(self):
        """Drafts are immutable."""
        draft = RoundDraft()
        draft.toggle_card(5)
        assert draft.is_empty


class TestDraftSelection:
    """Tests for turning drafts into selections."""

    def test_cards(self):
        draft = RoundDraft().toggle_card(5).toggle_card(3).toggle_card("x2")
        assert draft.to_selection() == RoundSelection.of([5, 3, "x2"])

    def test_empty_draft_busts(self):
        """Untouched drafts submit as a bust."""
        assert RoundDraft().to_selection().is_bust

    def test_points_text(self):
        """Typed scores go through the points parser."""
        draft = RoundDraft().toggle_card(5).set_points("12 pts")
        assert draft.cards == ()
        assert draft.to_selection() == RoundSelection.from_points(12)
        assert RoundDraft().set_points("oops").to_selection().is_bust

    def test_card_after_points(self):
        """Picking a card drops the typed score."""
        draft = RoundDraft().set_points("12").toggle_card(4)
        assert draft.points_text is None
        assert draft.to_selection() == RoundSelection.of([4])
