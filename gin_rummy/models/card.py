"""Card model."""

from enum import IntEnum

from pydantic import BaseModel


class Suit(IntEnum):
    """Card suit (Clubs, Diamonds, Hearts, Spades)."""

    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4


class Rank(IntEnum):
    """Card rank. Ace is low and ranks never wrap."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


# Map rank to display string
RANK_NAMES = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

SUIT_NAMES = {
    Suit.CLUBS: "C",
    Suit.DIAMONDS: "D",
    Suit.HEARTS: "H",
    Suit.SPADES: "S",
}

_RANKS_BY_NAME = {name: rank for rank, name in RANK_NAMES.items()}
_RANKS_BY_NAME["10"] = Rank.TEN
_SUITS_BY_NAME = {name: suit for suit, name in SUIT_NAMES.items()}


class Card(BaseModel, frozen=True):
    """Single playing card. Two cards are equal iff suit and rank match."""

    suit: Suit
    rank: Rank

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a card code such as ``"AS"``, ``"TD"`` or ``"10H"``.

        Args:
            code: Rank characters followed by a single suit character.

        Returns:
            Parsed card.

        Raises:
            ValueError: If the code does not name a card.
        """
        text = code.strip().upper()
        if len(text) < 2:
            raise ValueError(f"invalid card code '{code}'")
        rank = _RANKS_BY_NAME.get(text[:-1])
        suit = _SUITS_BY_NAME.get(text[-1])
        if rank is None or suit is None:
            raise ValueError(f"invalid card code '{code}'")
        return cls(suit=suit, rank=rank)

    @property
    def points(self) -> int:
        """Deadwood value: Ace 1, face cards and tens 10, else face value."""
        if self.rank == Rank.ACE:
            return 1
        if self.rank >= Rank.TEN:
            return 10
        return int(self.rank)

    @property
    def code(self) -> str:
        return f"{RANK_NAMES[self.rank]}{SUIT_NAMES[self.suit]}"

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return str(self)


def parse_cards(codes: str) -> list[Card]:
    """Parse whitespace or comma separated card codes."""
    return [Card.from_code(code) for code in codes.replace(",", " ").split()]
