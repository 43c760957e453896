"""Formatters for game log output."""

from typing import Iterable

from gin_rummy.models.card import Card
from gin_rummy.models.hand import Hand
from gin_rummy.models.meld import Meld


def format_card(card: Card | None) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Card code (e.g., "AS" for Ace of Spades, "TD" for Ten of Diamonds).
        Empty string if no card.
    """
    if card is None:
        return ""
    return card.code


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format, in the given order.

    Returns:
        Comma-separated card codes (e.g., "AS,2S,3S").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_melds(melds: Iterable[Meld]) -> list[str]:
    """Format melds to a list of comma-separated strings."""
    return [format_cards(m.cards) for m in melds]


def format_hands(hands: list[Hand]) -> dict[str, str]:
    """Format all players' hands to dict.

    Args:
        hands: List of hands indexed by player_id.

    Returns:
        Dict mapping player_id (as string) to formatted hand string.
    """
    return {str(i): format_cards(h) for i, h in enumerate(hands)}
