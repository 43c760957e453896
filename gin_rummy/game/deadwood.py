"""Deadwood calculation."""

from typing import Iterable

from gin_rummy.models.card import Card
from gin_rummy.models.meld import Meld


def card_points(card: Card) -> int:
    """Get the deadwood value of a card (A=1, 2-9 face, T/J/Q/K=10)."""
    return card.points


def melded_cards(*meld_groups: Iterable[Meld]) -> set[Card]:
    """Collect every card that appears in any of the given melds."""
    melded: set[Card] = set()
    for group in meld_groups:
        for meld in group:
            melded.update(meld.cards)
    return melded


def deadwood_cards(
    hand: Iterable[Card],
    sets: Iterable[Meld],
    runs: Iterable[Meld] = (),
) -> list[Card]:
    """Get the cards of ``hand`` that are not part of any meld."""
    melded = melded_cards(sets, runs)
    return [c for c in hand if c not in melded]


def deadwood(
    hand: Iterable[Card],
    sets: Iterable[Meld],
    runs: Iterable[Meld] = (),
) -> int:
    """Sum the point values of unmelded cards.

    A card that appears in several melds is still counted once as melded.

    Args:
        hand: Player's cards.
        sets: Sets found in the hand.
        runs: Runs found in the hand.

    Returns:
        Deadwood total.
    """
    return sum(card_points(c) for c in deadwood_cards(hand, sets, runs))
