"""Meld model."""

from enum import Enum

from pydantic import BaseModel, model_validator

from .card import Card

MIN_MELD_SIZE = 3


class MeldKind(str, Enum):
    """Type of meld."""

    SET = "set"  # Same rank, distinct suits
    RUN = "run"  # Same suit, consecutive ranks


class Meld(BaseModel, frozen=True):
    """A set or run of at least three cards."""

    kind: MeldKind
    cards: tuple[Card, ...]

    @model_validator(mode="after")
    def _check_rule(self) -> "Meld":
        if len(self.cards) < MIN_MELD_SIZE:
            raise ValueError(f"a meld needs at least {MIN_MELD_SIZE} cards")

        if self.kind == MeldKind.SET:
            if len({c.rank for c in self.cards}) != 1:
                raise ValueError("set cards must share a rank")
            if len({c.suit for c in self.cards}) != len(self.cards):
                raise ValueError("set cards must have distinct suits")
        else:
            if len({c.suit for c in self.cards}) != 1:
                raise ValueError("run cards must share a suit")
            for prev, card in zip(self.cards, self.cards[1:]):
                if card.rank != prev.rank + 1:
                    raise ValueError("run ranks must be consecutive")
        return self

    @classmethod
    def set_of(cls, cards: list[Card]) -> "Meld":
        return cls(kind=MeldKind.SET, cards=tuple(cards))

    @classmethod
    def run_of(cls, cards: list[Card]) -> "Meld":
        return cls(kind=MeldKind.RUN, cards=tuple(cards))

    @property
    def points(self) -> int:
        """Sum of card values in the meld."""
        return sum(c.points for c in self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self.cards) + "]"

    def __repr__(self) -> str:
        return f"Meld({self.kind.value}, {self})"
