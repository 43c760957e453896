"""Hand and discard pile models."""

from typing import Iterable, Iterator

from .card import Card


class Hand:
    """Cards held by one player.

    Order is the order cards were received; positions are presented to
    players 1-based.
    """

    def __init__(self, cards: Iterable[Card] | None = None):
        """Initialize hand.

        Args:
            cards: Initial cards.
        """
        self._cards: list[Card] = list(cards) if cards else []

    def add(self, card: Card) -> None:
        """Add a card (draw)."""
        self._cards.append(card)

    def pop(self, position: int) -> Card:
        """Remove and return the card at a 0-based position (discard)."""
        return self._cards.pop(position)

    def count(self) -> int:
        """Get number of cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if hand is empty."""
        return not self._cards

    def to_list(self) -> list[Card]:
        """Get cards in hand order."""
        return list(self._cards)

    def sorted(self) -> list[Card]:
        """Get cards sorted by suit, then rank."""
        return sorted(self._cards, key=lambda c: (c.suit, c.rank))

    def copy(self) -> "Hand":
        """Create a copy of this hand."""
        return Hand(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: Card) -> bool:
        return card in self._cards

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r})"


class DiscardPile:
    """Face-up pile of discarded cards. Only the top card may be taken."""

    def __init__(self, cards: Iterable[Card] | None = None):
        self._cards: list[Card] = list(cards) if cards else []

    def push(self, card: Card) -> None:
        """Place a card on top of the pile."""
        self._cards.append(card)

    def pop(self) -> Card:
        """Take the top card.

        Raises:
            IndexError: If the pile is empty.
        """
        if not self._cards:
            raise IndexError("discard pile is empty")
        return self._cards.pop()

    def top(self) -> Card | None:
        """Get the top card, or None if the pile is empty."""
        return self._cards[-1] if self._cards else None

    def is_empty(self) -> bool:
        return not self._cards

    def to_list(self) -> list[Card]:
        """Get cards bottom first."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"DiscardPile(top={self.top()!r}, size={len(self._cards)})"
