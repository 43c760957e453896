"""Meld detection.

Sets and runs are found independently and greedily. The result is not a
deadwood-minimizing partition of the hand: a card that fits both a set and a
run is reported in both, and no attempt is made to choose between them.
"""

from typing import Iterable

from gin_rummy.models.card import Card, Rank, Suit
from gin_rummy.models.meld import MIN_MELD_SIZE, Meld


def find_sets(hand: Iterable[Card]) -> list[Meld]:
    """Find sets (same rank, distinct suits) in a hand.

    Each rank with at least three distinct suits yields exactly one set made of
    the first card seen for each suit.

    Args:
        hand: Cards to inspect. Not modified.

    Returns:
        Sets ordered by rank.
    """
    by_rank: dict[Rank, dict[Suit, Card]] = {}
    for card in hand:
        suits = by_rank.setdefault(card.rank, {})
        # First seen wins for duplicate (suit, rank)
        suits.setdefault(card.suit, card)

    sets: list[Meld] = []
    for rank in sorted(by_rank):
        cards = list(by_rank[rank].values())
        if len(cards) >= MIN_MELD_SIZE:
            sets.append(Meld.set_of(cards))
    return sets


def find_runs(hand: Iterable[Card]) -> list[Meld]:
    """Find runs (same suit, consecutive ranks) in a hand.

    Within each suit the cards are sorted by rank and scanned once. A run grows
    while the next rank is exactly one above the last; any other rank (a gap or
    a duplicate) closes it. Closed runs of three or more cards are kept. Ace is
    low and K-A-2 never connects.

    Args:
        hand: Cards to inspect. Not modified.

    Returns:
        Runs ordered by suit, then by lowest rank.
    """
    by_suit: dict[Suit, list[Card]] = {}
    for card in hand:
        by_suit.setdefault(card.suit, []).append(card)

    runs: list[Meld] = []
    for suit in sorted(by_suit):
        cards = sorted(by_suit[suit], key=lambda c: c.rank)
        if len(cards) < MIN_MELD_SIZE:
            continue

        current = [cards[0]]
        for card in cards[1:]:
            if card.rank == current[-1].rank + 1:
                current.append(card)
                continue
            if len(current) >= MIN_MELD_SIZE:
                runs.append(Meld.run_of(current))
            current = [card]

        if len(current) >= MIN_MELD_SIZE:
            runs.append(Meld.run_of(current))
    return runs
