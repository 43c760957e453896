"""Validation of turn selections and knock eligibility."""

from enum import Enum

from gin_rummy.errors import IndexOutOfRangeError

# Maximum deadwood allowed for a voluntary knock
KNOCK_LIMIT = 10


class DrawSource(int, Enum):
    """Where a player draws from. Values match the menu numbers."""

    STOCK = 1
    DISCARD = 2


class KnockEligibility(str, Enum):
    """What a player may do after discarding."""

    GIN = "gin"  # Deadwood 0, knock is declared automatically
    OPTIONAL = "optional"  # Deadwood 1..10, player chooses
    NOT_ALLOWED = "not_allowed"  # Deadwood above the limit


def check_knock(deadwood: int) -> KnockEligibility:
    """Classify a post-discard deadwood total.

    Args:
        deadwood: Deadwood after the discard.

    Returns:
        KnockEligibility
    """
    if deadwood == 0:
        return KnockEligibility.GIN
    if deadwood <= KNOCK_LIMIT:
        return KnockEligibility.OPTIONAL
    return KnockEligibility.NOT_ALLOWED


def validate_draw_choice(choice: object) -> DrawSource:
    """Convert a draw selection to a DrawSource.

    Raises:
        IndexOutOfRangeError: If the selection is not a known source.
    """
    if isinstance(choice, DrawSource):
        return choice
    try:
        return DrawSource(choice)
    except ValueError:
        raise IndexOutOfRangeError(
            choice, DrawSource.STOCK.value, DrawSource.DISCARD.value
        ) from None


def validate_discard_index(index: object, hand_size: int) -> int:
    """Check a 1-based discard selection against the hand size.

    Out-of-range values are rejected, never clamped.

    Args:
        index: Selected position (1-based).
        hand_size: Current number of cards in hand.

    Returns:
        The 0-based position.

    Raises:
        IndexOutOfRangeError: If the selection is not in ``1..hand_size``.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRangeError(index, 1, hand_size)
    if index < 1 or index > hand_size:
        raise IndexOutOfRangeError(index, 1, hand_size)
    return index - 1
