"""Round scoring: gin, undercut and normal knock."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from gin_rummy.models.card import Card
from gin_rummy.models.meld import Meld

from .deadwood import deadwood

GIN_BONUS = 25
UNDERCUT_BONUS = 25


class RoundOutcome(str, Enum):
    """How a knocked round was decided."""

    GIN = "gin"
    UNDERCUT = "undercut"
    KNOCK = "knock"


@dataclass
class RoundResult:
    """Result of scoring a knocked round."""

    outcome: RoundOutcome
    knocker_deadwood: int
    opponent_deadwood: int
    points: int  # Points awarded to the scoring side
    knocker_score: int = 0  # Running totals after this round
    opponent_score: int = 0

    @property
    def knocker_scored(self) -> bool:
        """True unless the opponent undercut the knocker."""
        return self.outcome != RoundOutcome.UNDERCUT


def resolve_knock(knocker_deadwood: int, opponent_deadwood: int) -> RoundResult:
    """Apply the scoring rules to a pair of deadwood totals.

    Rules in priority order:
      1. Knocker has 0 deadwood: gin, knocker gets opponent deadwood + 25.
      2. Opponent has less deadwood: undercut, opponent gets the difference + 25.
      3. Otherwise knocker gets the difference (may be 0).

    Returns:
        RoundResult with points set and running totals left at 0.
    """
    if knocker_deadwood == 0:
        return RoundResult(
            outcome=RoundOutcome.GIN,
            knocker_deadwood=knocker_deadwood,
            opponent_deadwood=opponent_deadwood,
            points=opponent_deadwood + GIN_BONUS,
        )
    if opponent_deadwood < knocker_deadwood:
        return RoundResult(
            outcome=RoundOutcome.UNDERCUT,
            knocker_deadwood=knocker_deadwood,
            opponent_deadwood=opponent_deadwood,
            points=knocker_deadwood - opponent_deadwood + UNDERCUT_BONUS,
        )
    return RoundResult(
        outcome=RoundOutcome.KNOCK,
        knocker_deadwood=knocker_deadwood,
        opponent_deadwood=opponent_deadwood,
        points=opponent_deadwood - knocker_deadwood,
    )


def score_round(
    knocker_hand: Iterable[Card],
    knocker_melds: Iterable[Meld],
    opponent_hand: Iterable[Card],
    opponent_melds: Iterable[Meld],
    knocker_score: int,
    opponent_score: int,
) -> RoundResult:
    """Score a knocked round and update both running totals.

    Args:
        knocker_hand: Final hand of the player who knocked.
        knocker_melds: Sets and runs of that hand.
        opponent_hand: Final hand of the other player.
        opponent_melds: Sets and runs of that hand.
        knocker_score: Knocker's running total before this round.
        opponent_score: Opponent's running total before this round.

    Returns:
        RoundResult carrying the updated running totals.
    """
    result = resolve_knock(
        deadwood(knocker_hand, knocker_melds),
        deadwood(opponent_hand, opponent_melds),
    )
    if result.knocker_scored:
        result.knocker_score = knocker_score + result.points
        result.opponent_score = opponent_score
    else:
        result.knocker_score = knocker_score
        result.opponent_score = opponent_score + result.points
    return result
