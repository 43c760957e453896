"""Hand analysis: melds and deadwood for one snapshot of a hand."""

from dataclasses import dataclass, field
from typing import Iterable

from gin_rummy.models.card import Card
from gin_rummy.models.meld import Meld

from .deadwood import deadwood_cards, melded_cards
from .melds import find_runs, find_sets


@dataclass(frozen=True)
class HandAnalysis:
    """Result of analyzing a hand.

    Derived from the hand at one moment; recompute after every draw or
    discard instead of updating it.
    """

    cards: tuple[Card, ...]
    sets: list[Meld] = field(default_factory=list)
    runs: list[Meld] = field(default_factory=list)

    @property
    def melds(self) -> list[Meld]:
        """Sets followed by runs."""
        return self.sets + self.runs

    @property
    def melded_cards(self) -> set[Card]:
        return melded_cards(self.sets, self.runs)

    @property
    def deadwood_cards(self) -> list[Card]:
        return deadwood_cards(self.cards, self.sets, self.runs)

    @property
    def deadwood(self) -> int:
        """Deadwood total."""
        return sum(c.points for c in self.deadwood_cards)

    @property
    def has_melds(self) -> bool:
        return bool(self.sets or self.runs)

    @property
    def is_gin(self) -> bool:
        return self.deadwood == 0


def analyze_hand(hand: Iterable[Card]) -> HandAnalysis:
    """Find sets, runs and deadwood for a hand.

    Args:
        hand: Cards to analyze. Not modified.

    Returns:
        HandAnalysis snapshot.
    """
    cards = tuple(hand)
    return HandAnalysis(cards=cards, sets=find_sets(cards), runs=find_runs(cards))
