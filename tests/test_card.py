"""Tests for card, hand and player models."""

import pytest

from gin_rummy.models.card import Card, Rank, Suit, parse_cards
from gin_rummy.models.hand import DiscardPile, Hand
from gin_rummy.models.player import Player


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a card."""
        card = Card(suit=Suit.SPADES, rank=Rank.ACE)
        assert card.suit == Suit.SPADES
        assert card.rank == Rank.ACE

    def test_equality(self):
        """Two cards are equal iff suit and rank match."""
        assert Card(suit=Suit.HEARTS, rank=Rank.SEVEN) == Card.from_code("7H")
        assert Card(suit=Suit.HEARTS, rank=Rank.SEVEN) != Card.from_code("7D")
        assert Card(suit=Suit.HEARTS, rank=Rank.SEVEN) != Card.from_code("8H")

    def test_hashable(self):
        """Test cards can be used in sets."""
        cards = {Card.from_code("AS"), Card.from_code("AS"), Card.from_code("2S")}
        assert len(cards) == 2

    def test_immutable(self):
        """Test cards cannot be changed after creation."""
        card = Card.from_code("AS")
        with pytest.raises(Exception):
            card.rank = Rank.TWO

    def test_points(self):
        """Test deadwood values."""
        assert Card.from_code("AC").points == 1
        assert Card.from_code("2C").points == 2
        assert Card.from_code("9D").points == 9
        assert Card.from_code("TH").points == 10
        assert Card.from_code("JS").points == 10
        assert Card.from_code("QS").points == 10
        assert Card.from_code("KS").points == 10

    def test_code(self):
        """Test card display codes."""
        assert Card(suit=Suit.SPADES, rank=Rank.ACE).code == "AS"
        assert Card(suit=Suit.DIAMONDS, rank=Rank.TEN).code == "TD"
        assert str(Card(suit=Suit.CLUBS, rank=Rank.KING)) == "KC"

    def test_from_code_accepts_ten_variants(self):
        """Test both T and 10 name the ten."""
        assert Card.from_code("10H") == Card.from_code("TH")
        assert Card.from_code(" qd ") == Card(suit=Suit.DIAMONDS, rank=Rank.QUEEN)

    @pytest.mark.parametrize("code", ["", "A", "1S", "AX", "11H", "ZZ"])
    def test_from_code_invalid(self, code):
        """Test invalid codes are rejected."""
        with pytest.raises(ValueError):
            Card.from_code(code)

    def test_parse_cards(self):
        """Test parsing a list of card codes."""
        cards = parse_cards("AS, 2S 3S")
        assert [c.code for c in cards] == ["AS", "2S", "3S"]


class TestHand:
    """Tests for Hand class."""

    def test_add_and_pop(self):
        """Test drawing appends and discarding removes by position."""
        hand = Hand(parse_cards("AS 2S"))
        hand.add(Card.from_code("KD"))

        assert hand.count() == 3
        assert hand.to_list()[2] == Card.from_code("KD")

        card = hand.pop(0)
        assert card == Card.from_code("AS")
        assert hand.to_list() == parse_cards("2S KD")

    def test_discard_by_position_only(self):
        """Test cards leave a hand only through a positional discard."""
        hand = Hand(parse_cards("AS 2S 3S"))
        for name in ("remove", "get", "clear"):
            assert not hasattr(hand, name)

        assert hand.pop(1) == Card.from_code("2S")
        assert Card.from_code("2S") not in hand
        assert len(hand) == 2

    def test_sorted(self):
        """Test sorting by suit then rank does not reorder the hand."""
        hand = Hand(parse_cards("KS 2C AS"))
        assert hand.sorted() == parse_cards("2C AS KS")
        assert hand.to_list() == parse_cards("KS 2C AS")

    def test_copy_is_independent(self):
        """Test copies do not share storage."""
        hand = Hand(parse_cards("AS"))
        copy = hand.copy()
        copy.add(Card.from_code("2S"))
        assert hand.count() == 1

    def test_empty(self):
        """Test empty hand."""
        hand = Hand()
        assert hand.is_empty()
        assert str(hand) == "[]"

    def test_str(self):
        """Test string representation."""
        assert str(Hand(parse_cards("AS 2S"))) == "[AS 2S]"


class TestDiscardPile:
    """Tests for DiscardPile class."""

    def test_top_and_pop(self):
        """Test only the top card is visible and taken."""
        pile = DiscardPile(parse_cards("5C 9H"))
        assert pile.top() == Card.from_code("9H")
        assert pile.pop() == Card.from_code("9H")
        assert pile.top() == Card.from_code("5C")

    def test_push(self):
        """Test discarding onto the pile."""
        pile = DiscardPile()
        pile.push(Card.from_code("AS"))
        assert len(pile) == 1
        assert pile.top() == Card.from_code("AS")

    def test_empty(self):
        """Test empty pile."""
        pile = DiscardPile()
        assert pile.is_empty()
        assert pile.top() is None
        with pytest.raises(IndexError):
            pile.pop()


class TestPlayer:
    """Tests for Player model."""

    def test_defaults(self):
        """Test new players start at zero."""
        player = Player(player_id=0, name="Alice")
        assert player.score == 0

    def test_add_points(self):
        """Test running score accumulates."""
        player = Player(player_id=1)
        player.add_points(25)
        player.add_points(9)
        assert player.score == 34

        player.reset_score()
        assert player.score == 0

    def test_add_negative_points(self):
        """Test scores never decrease."""
        player = Player(player_id=0)
        with pytest.raises(ValueError):
            player.add_points(-1)

    def test_str(self):
        """Test string representation."""
        assert str(Player(player_id=0, name="Alice", score=12)) == "Alice (12)"
