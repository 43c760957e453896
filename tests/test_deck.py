"""Tests for the deck."""

import random

import pytest

from gin_rummy.errors import (
    EmptyDeckError,
    InsufficientCardsError,
    InvalidConfigurationError,
)
from gin_rummy.models.card import Card
from gin_rummy.models.deck import CARDS_PER_PACK, Deck, create_pack


class TestCreatePack:
    """Tests for create_pack function."""

    def test_pack_size(self):
        """Test a pack has 52 distinct cards."""
        pack = create_pack()
        assert len(pack) == CARDS_PER_PACK
        assert len(set(pack)) == CARDS_PER_PACK


class TestDeck:
    """Tests for Deck class."""

    def test_new_deck_is_permutation(self):
        """Test a shuffled deck holds every card exactly once."""
        deck = Deck(rng=random.Random(1))
        cards = deck.to_list()
        assert deck.remaining() == 52
        assert len(deck) == 52
        assert set(cards) == set(create_pack())

    def test_seeded_decks_match(self):
        """Test the same seed gives the same order."""
        first = Deck(rng=random.Random(42)).to_list()
        second = Deck(rng=random.Random(42)).to_list()
        assert first == second

    def test_shuffle_keeps_cards(self):
        """Test shuffling only reorders."""
        deck = Deck(rng=random.Random(3))
        deck.deal_hand(10)
        before = sorted(deck.to_list(), key=lambda c: (c.suit, c.rank))
        deck.shuffle()
        after = sorted(deck.to_list(), key=lambda c: (c.suit, c.rank))
        assert before == after
        assert deck.remaining() == 42

    def test_deal_from_top(self, ordered_deck):
        """Test dealing takes the top card."""
        assert ordered_deck.peek() == Card.from_code("KS")
        assert ordered_deck.deal_card() == Card.from_code("KS")
        assert ordered_deck.deal_card() == Card.from_code("QS")
        assert ordered_deck.remaining() == 50

    def test_deal_hand(self, ordered_deck):
        """Test dealing a hand."""
        hand = ordered_deck.deal_hand(10)
        assert len(hand) == 10
        assert hand[0] == Card.from_code("KS")
        assert ordered_deck.remaining() == 42

    def test_deal_zero(self, ordered_deck):
        """Test dealing zero cards."""
        assert ordered_deck.deal_hand(0) == []
        assert ordered_deck.remaining() == 52

    def test_deal_negative(self, ordered_deck):
        """Test negative hand sizes are rejected."""
        with pytest.raises(ValueError):
            ordered_deck.deal_hand(-1)

    def test_deal_hand_insufficient_leaves_deck(self, ordered_deck):
        """Test an oversize deal removes nothing."""
        ordered_deck.deal_hand(50)
        before = ordered_deck.to_list()

        with pytest.raises(InsufficientCardsError) as exc_info:
            ordered_deck.deal_hand(3)

        assert exc_info.value.requested == 3
        assert exc_info.value.remaining == 2
        assert ordered_deck.to_list() == before

    def test_deal_whole_deck(self, ordered_deck):
        """Test dealing exactly the remaining cards."""
        hand = ordered_deck.deal_hand(52)
        assert len(hand) == 52
        assert ordered_deck.is_empty()

    def test_deal_card_empty(self, empty_deck):
        """Test dealing from an empty deck."""
        assert empty_deck.is_empty()
        assert empty_deck.peek() is None
        with pytest.raises(EmptyDeckError):
            empty_deck.deal_card()

    def test_new_deck_refills(self, empty_deck):
        """Test rebuilding the deck."""
        empty_deck.new_deck()
        assert empty_deck.remaining() == 52

    @pytest.mark.parametrize("num_packs", [0, 2])
    def test_unsupported_packs(self, num_packs):
        """Test only a single pack is supported."""
        with pytest.raises(InvalidConfigurationError):
            Deck(num_packs=num_packs)
