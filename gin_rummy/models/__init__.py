"""Game models."""

from .card import Card, Rank, Suit, parse_cards
from .deck import Deck
from .hand import DiscardPile, Hand
from .meld import Meld, MeldKind
from .player import Player

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_cards",
    "Deck",
    "DiscardPile",
    "Hand",
    "Meld",
    "MeldKind",
    "Player",
]
