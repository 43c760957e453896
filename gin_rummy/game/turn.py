"""Turn engine: one player's draw, discard and knock decision.

States::

    AWAITING_DRAW --draw()--> AWAITING_DISCARD --discard()--> (knock check)
        --resolve()--> RESOLVED

Decisions come from injected callables so the engine never touches an I/O
channel. Bad selections raise and leave the turn where it was; re-asking is
the caller's policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from gin_rummy.errors import TurnStateError
from gin_rummy.models.card import Card
from gin_rummy.models.deck import Deck
from gin_rummy.models.hand import DiscardPile, Hand

from .analyzer import HandAnalysis, analyze_hand
from .validator import (
    DrawSource,
    KnockEligibility,
    check_knock,
    validate_discard_index,
    validate_draw_choice,
)

logger = logging.getLogger(__name__)


class TurnPhase(str, Enum):
    """Turn state."""

    AWAITING_DRAW = "awaiting_draw"
    AWAITING_DISCARD = "awaiting_discard"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class TurnView:
    """Read-only snapshot handed to decision providers and displays."""

    phase: TurnPhase
    hand: tuple[Card, ...]
    analysis: HandAnalysis
    discard_top: Card | None
    stock_remaining: int

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    @property
    def deadwood(self) -> int:
        return self.analysis.deadwood


@dataclass(frozen=True)
class DrawEvent:
    """What happened during the draw step."""

    requested: DrawSource
    source: DrawSource  # Source actually used after fallbacks
    card: Card
    view: TurnView  # Post-draw snapshot

    @property
    def fell_back(self) -> bool:
        return self.requested != self.source


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a resolved turn."""

    draw: DrawEvent
    discarded: Card
    hand: tuple[Card, ...]
    analysis: HandAnalysis  # Post-discard snapshot
    eligibility: KnockEligibility
    knocked: bool

    @property
    def deadwood(self) -> int:
        return self.analysis.deadwood

    @property
    def gin(self) -> bool:
        return self.eligibility == KnockEligibility.GIN


DrawChoice = Callable[[TurnView], DrawSource | int]
DiscardChoice = Callable[[TurnView], int]
KnockChoice = Callable[[TurnView], bool]


class TurnEngine:
    """State machine for a single player turn."""

    def __init__(
        self,
        deck: Deck,
        hand: Hand,
        discard_pile: DiscardPile,
        on_draw: Callable[[DrawEvent], None] | None = None,
    ):
        """Initialize turn.

        Args:
            deck: Stock to draw from.
            hand: Hand of the player taking the turn (mutated in place).
            discard_pile: Shared discard pile (mutated in place).
            on_draw: Called with the post-draw snapshot.
        """
        self.deck = deck
        self.hand = hand
        self.discard_pile = discard_pile
        self._on_draw = on_draw

        self.phase = TurnPhase.AWAITING_DRAW
        self.analysis = analyze_hand(hand)
        self._draw_event: DrawEvent | None = None
        self._discarded: Card | None = None
        self._result: TurnResult | None = None

    @property
    def result(self) -> TurnResult | None:
        """Turn result once RESOLVED."""
        return self._result

    def view(self) -> TurnView:
        """Get a snapshot of the turn."""
        return TurnView(
            phase=self.phase,
            hand=tuple(self.hand),
            analysis=self.analysis,
            discard_top=self.discard_pile.top(),
            stock_remaining=self.deck.remaining(),
        )

    def _require(self, phase: TurnPhase) -> None:
        if self.phase != phase:
            raise TurnStateError(
                f"expected phase {phase.value}, turn is {self.phase.value}"
            )

    def draw(self, choice: DrawSource | int) -> DrawEvent:
        """Draw a card into the hand.

        An empty stock falls back to the discard pile, and an empty discard
        pile falls back to the stock.

        Args:
            choice: Requested source.

        Returns:
            DrawEvent

        Raises:
            IndexOutOfRangeError: If the choice is not a draw source.
            EmptyDeckError: If both the stock and the discard pile are empty.
        """
        self._require(TurnPhase.AWAITING_DRAW)
        requested = validate_draw_choice(choice)

        source = requested
        if source == DrawSource.STOCK and self.deck.is_empty():
            logger.info("Stock pile is empty, drawing from discard pile instead")
            source = DrawSource.DISCARD
        if source == DrawSource.DISCARD and self.discard_pile.is_empty():
            logger.warning("Discard pile is empty, drawing from stock instead")
            source = DrawSource.STOCK

        if source == DrawSource.STOCK:
            card = self.deck.deal_card()
        else:
            card = self.discard_pile.pop()

        self.hand.add(card)
        self.analysis = analyze_hand(self.hand)
        self.phase = TurnPhase.AWAITING_DISCARD

        event = DrawEvent(
            requested=requested, source=source, card=card, view=self.view()
        )
        self._draw_event = event
        logger.debug(f"Drew {card} from {source.name.lower()}")

        if self._on_draw:
            self._on_draw(event)
        return event

    def discard(self, index: int) -> Card:
        """Move a card from the hand to the top of the discard pile.

        Args:
            index: 1-based position in the hand.

        Returns:
            The discarded card.

        Raises:
            IndexOutOfRangeError: If ``index`` is outside ``1..len(hand)``. The
                hand and phase are left unchanged.
        """
        self._require(TurnPhase.AWAITING_DISCARD)
        if self._discarded is not None:
            raise TurnStateError("a card was already discarded this turn")
        position = validate_discard_index(index, self.hand.count())

        card = self.hand.pop(position)
        self.discard_pile.push(card)
        self.analysis = analyze_hand(self.hand)
        self._discarded = card

        logger.debug(f"Discarded {card}, deadwood now {self.analysis.deadwood}")
        return card

    def resolve(self, knock_choice: KnockChoice) -> TurnResult:
        """Evaluate knock eligibility and finish the turn.

        Gin is declared without asking. With deadwood up to the knock limit the
        player is asked; above it the knock is not offered.
        """
        self._require(TurnPhase.AWAITING_DISCARD)
        if self._discarded is None or self._draw_event is None:
            raise TurnStateError("cannot resolve a turn before discarding")

        eligibility = check_knock(self.analysis.deadwood)
        if eligibility == KnockEligibility.GIN:
            knocked = True
        elif eligibility == KnockEligibility.OPTIONAL:
            knocked = bool(knock_choice(self.view()))
        else:
            knocked = False

        self.phase = TurnPhase.RESOLVED
        self._result = TurnResult(
            draw=self._draw_event,
            discarded=self._discarded,
            hand=tuple(self.hand),
            analysis=self.analysis,
            eligibility=eligibility,
            knocked=knocked,
        )
        return self._result

    def play(
        self,
        draw_choice: DrawChoice,
        discard_choice: DiscardChoice,
        knock_choice: KnockChoice,
    ) -> TurnResult:
        """Run the whole turn with the given decision sources."""
        self.draw(draw_choice(self.view()))
        self.discard(discard_choice(self.view()))
        return self.resolve(knock_choice)


def run_turn(
    deck: Deck,
    hand: Hand,
    discard_pile: DiscardPile,
    draw_choice: DrawChoice,
    discard_choice: DiscardChoice,
    knock_choice: KnockChoice,
    on_draw: Callable[[DrawEvent], None] | None = None,
) -> TurnResult:
    """Play one turn.

    Args:
        deck: Stock pile.
        hand: Hand of the player taking the turn.
        discard_pile: Shared discard pile.
        draw_choice: Picks the draw source.
        discard_choice: Picks the 1-based card to discard.
        knock_choice: Decides whether to knock when allowed.
        on_draw: Receives the post-draw snapshot.

    Returns:
        TurnResult
    """
    engine = TurnEngine(deck, hand, discard_pile, on_draw=on_draw)
    return engine.play(draw_choice, discard_choice, knock_choice)
