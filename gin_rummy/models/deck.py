"""Deck model."""

from __future__ import annotations

import logging
import random

from gin_rummy.errors import (
    EmptyDeckError,
    InsufficientCardsError,
    InvalidConfigurationError,
)

from .card import Card, Rank, Suit

logger = logging.getLogger(__name__)

CARDS_PER_PACK = 52
MAX_PACKS = 1


def create_pack() -> list[Card]:
    """Create one standard 52-card pack in suit/rank order."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]


class Deck:
    """Undealt cards in deal order.

    The top of the deck is the end of the sequence. Only a single pack is
    supported.
    """

    def __init__(self, num_packs: int = 1, rng: random.Random | None = None):
        """Build and shuffle a new deck.

        Args:
            num_packs: Number of 52-card packs (must be 1).
            rng: Random source. Defaults to the process-seeded ``random`` module.

        Raises:
            InvalidConfigurationError: If ``num_packs`` is not supported.
        """
        if num_packs < 1 or num_packs > MAX_PACKS:
            raise InvalidConfigurationError(
                f"unsupported number of packs: {num_packs} (max {MAX_PACKS})"
            )
        self.num_packs = num_packs
        self._rng = rng if rng is not None else random
        self._cards: list[Card] = []
        self.new_deck()

    def new_deck(self) -> None:
        """Rebuild the full deck and shuffle it."""
        self._cards = []
        for _ in range(self.num_packs):
            self._cards.extend(create_pack())
        self.shuffle()
        logger.debug(f"New deck built with {len(self._cards)} cards")

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place (Fisher-Yates)."""
        cards = self._cards
        n = len(cards)
        for i in range(n):
            r = self._rng.randrange(i, n)
            if r != i:
                cards[i], cards[r] = cards[r], cards[i]

    def remaining(self) -> int:
        """Get number of undealt cards."""
        return len(self._cards)

    def is_empty(self) -> bool:
        """Check if the deck has no cards left."""
        return not self._cards

    def peek(self) -> Card | None:
        """Get the top card without dealing it."""
        return self._cards[-1] if self._cards else None

    def deal_card(self) -> Card:
        """Remove and return the top card.

        Raises:
            EmptyDeckError: If no cards remain.
        """
        if not self._cards:
            raise EmptyDeckError()
        return self._cards.pop()

    def deal_hand(self, n: int) -> list[Card]:
        """Deal ``n`` cards, or none at all.

        Args:
            n: Number of cards to deal.

        Returns:
            Cards in deal order.

        Raises:
            InsufficientCardsError: If fewer than ``n`` cards remain. The deck
                is left untouched.
        """
        if n < 0:
            raise ValueError(f"hand size must not be negative: {n}")
        if n > len(self._cards):
            raise InsufficientCardsError(n, len(self._cards))
        return [self._cards.pop() for _ in range(n)]

    def to_list(self) -> list[Card]:
        """Get undealt cards, bottom first."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
