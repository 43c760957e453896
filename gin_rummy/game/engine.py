"""Game engine for two-player Gin Rummy."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from gin_rummy.config import Config
from gin_rummy.errors import EmptyDeckError, InvalidConfigurationError, TurnStateError
from gin_rummy.logging import GameLogger
from gin_rummy.models.card import Card
from gin_rummy.models.deck import Deck
from gin_rummy.models.hand import DiscardPile, Hand
from gin_rummy.models.player import Player

from .analyzer import HandAnalysis, analyze_hand
from .scoring import RoundResult, score_round
from .turn import DrawEvent, TurnEngine, TurnResult, TurnView

if TYPE_CHECKING:
    from gin_rummy.providers.base import DecisionProvider

logger = logging.getLogger(__name__)

NUM_PLAYERS = 2


@dataclass
class RoundReport:
    """Summary of a finished round."""

    round_number: int
    turns: int
    knocker_id: int | None = None  # None for a drawn round
    result: RoundResult | None = None
    analyses: dict[int, HandAnalysis] = field(default_factory=dict)

    @property
    def is_draw(self) -> bool:
        return self.result is None


class GameEngine:
    """Runs rounds and turns, and keeps the running scores."""

    def __init__(
        self,
        players: list[Player],
        providers: list[DecisionProvider],
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            players: The two players in seat order (player 0 moves first)
            providers: Decision source for each player, same order
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling
        """
        if len(players) != NUM_PLAYERS or len(providers) != NUM_PLAYERS:
            raise InvalidConfigurationError(
                f"Gin Rummy needs exactly {NUM_PLAYERS} players"
            )
        if [p.player_id for p in players] != list(range(NUM_PLAYERS)):
            raise InvalidConfigurationError("player ids must match seat order (0, 1)")
        self.players = players
        self.providers = providers
        self.config = config or Config()
        self.game_logger = game_logger
        self.rng = rng

        self.round_number = 0
        self.turn_number = 0
        self.deck: Deck | None = None
        self.hands: list[Hand] = [Hand() for _ in players]
        self.discard_pile = DiscardPile()

        self._on_round_start: Callable[[int, list[Player], Card | None], None] | None = None
        self._on_turn_start: Callable[[Player, TurnView], None] | None = None
        self._on_draw: Callable[[Player, DrawEvent], None] | None = None
        self._on_turn_end: Callable[[Player, TurnResult], None] | None = None
        self._on_round_end: Callable[[RoundReport, list[Player]], None] | None = None

    def set_callbacks(
        self,
        on_round_start: Callable[[int, list[Player], Card | None], None] | None = None,
        on_turn_start: Callable[[Player, TurnView], None] | None = None,
        on_draw: Callable[[Player, DrawEvent], None] | None = None,
        on_turn_end: Callable[[Player, TurnResult], None] | None = None,
        on_round_end: Callable[[RoundReport, list[Player]], None] | None = None,
    ) -> None:
        """Set event callbacks.

        Args:
            on_round_start: Called after the deal (round_number, players, discard top)
            on_turn_start: Called before the draw (player, view)
            on_draw: Called after the draw (player, draw event)
            on_turn_end: Called after the turn resolves (player, result)
            on_round_end: Called when a round is decided (report, players)
        """
        self._on_round_start = on_round_start
        self._on_turn_start = on_turn_start
        self._on_draw = on_draw
        self._on_turn_end = on_turn_end
        self._on_round_end = on_round_end

    def run_game(
        self,
        play_again: Callable[[RoundReport], bool] | None = None,
    ) -> Player | None:
        """Play rounds until a player reaches the target score.

        Args:
            play_again: Asked after each round that does not end the game;
                returning False stops early.

        Returns:
            The winner, the leader when stopped early, or None on a tie.
        """
        target = self.config.game.target_score
        for player in self.players:
            player.reset_score()
        self.round_number = 0

        if self.game_logger:
            self.game_logger.log_session_start(self.players, target)

        winner: Player | None = None
        while True:
            report = self.play_round()

            reached = [p for p in self.players if p.score >= target]
            if reached:
                winner = max(reached, key=lambda p: p.score)
                logger.info(f"{winner.name} wins the game with {winner.score} points")
                break

            if play_again is not None and not play_again(report):
                winner = self.leader()
                break

        if self.game_logger:
            self.game_logger.log_session_end(
                self.round_number,
                self.players,
                winner.player_id if winner else None,
            )
        return winner

    def leader(self) -> Player | None:
        """Get the player with the higher score, or None if tied."""
        first, second = self.players
        if first.score == second.score:
            return None
        return first if first.score > second.score else second

    def start_round(self) -> Deck:
        """Shuffle a fresh deck, deal both hands and turn up the first discard.

        Raises:
            InvalidConfigurationError: If the configured pack count is unsupported.
            InsufficientCardsError: If the deck cannot supply both hands.

        Returns:
            The stock for the new round.
        """
        self.round_number += 1
        self.turn_number = 0

        deck = Deck(num_packs=self.config.game.num_packs, rng=self.rng)
        self.deck = deck
        hand_size = self.config.game.hand_size
        self.hands = [Hand(deck.deal_hand(hand_size)) for _ in self.players]
        self.discard_pile = DiscardPile([deck.deal_card()])

        logger.info(
            f"Round {self.round_number} dealt: {hand_size} cards each, "
            f"{deck.remaining()} in stock"
        )

        if self.game_logger:
            self.game_logger.log_round_start(
                self.round_number,
                self.hands,
                self.discard_pile.top(),
                deck.remaining(),
            )

        if self._on_round_start:
            self._on_round_start(self.round_number, self.players, self.discard_pile.top())
        return deck

    def play_round(self) -> RoundReport:
        """Play one round to a knock or an exhausted stock.

        The stock is checked before each pair of turns, so the second player
        of a pair may still draw after the last stock card is gone.

        Returns:
            RoundReport
        """
        deck = self.start_round()

        report: RoundReport | None = None
        while report is None and not deck.is_empty():
            for player in self.players:
                try:
                    result = self.play_turn(player)
                except EmptyDeckError:
                    logger.warning("No cards left to draw, round ends in a draw")
                    report = self._finish_draw()
                    break
                if result.knocked:
                    report = self._finish_knock(player)
                    break

        if report is None:
            logger.info(f"Round {self.round_number}: stock exhausted, round is a draw")
            report = self._finish_draw()

        if self.game_logger:
            self.game_logger.log_round_end(
                self.round_number,
                report.knocker_id,
                report.result,
                self.players,
                self.hands,
            )

        if self._on_round_end:
            self._on_round_end(report, self.players)
        return report

    def play_turn(self, player: Player) -> TurnResult:
        """Play one turn for ``player``.

        Raises:
            EmptyDeckError: If neither the stock nor the discard pile has a card.
            TurnStateError: If no round has been started.
        """
        if self.deck is None:
            raise TurnStateError("no round in progress, call start_round first")
        deck = self.deck
        self.turn_number += 1
        provider = self.providers[player.player_id]

        def on_draw(event: DrawEvent) -> None:
            if self._on_draw:
                self._on_draw(player, event)

        turn = TurnEngine(
            deck,
            self.hands[player.player_id],
            self.discard_pile,
            on_draw=on_draw,
        )
        if self._on_turn_start:
            self._on_turn_start(player, turn.view())

        result = turn.play(
            provider.choose_draw,
            provider.choose_discard,
            provider.choose_knock,
        )
        logger.debug(
            f"Turn {self.turn_number}: {player.name} drew {result.draw.card}, "
            f"discarded {result.discarded}, deadwood {result.deadwood}"
        )

        if self.game_logger:
            self.game_logger.log_turn(
                self.round_number,
                self.turn_number,
                player.player_id,
                result,
                self.discard_pile.top(),
                deck.remaining(),
            )

        if self._on_turn_end:
            self._on_turn_end(player, result)
        return result

    def _finish_knock(self, knocker: Player) -> RoundReport:
        """Score a knocked round and update both players' scores."""
        opponent = self.players[1 - knocker.player_id]
        knocker_analysis = analyze_hand(self.hands[knocker.player_id])
        opponent_analysis = analyze_hand(self.hands[opponent.player_id])

        result = score_round(
            knocker_analysis.cards,
            knocker_analysis.melds,
            opponent_analysis.cards,
            opponent_analysis.melds,
            knocker.score,
            opponent.score,
        )
        knocker.add_points(result.knocker_score - knocker.score)
        opponent.add_points(result.opponent_score - opponent.score)

        logger.info(
            f"Round {self.round_number}: {knocker.name} knocked, "
            f"{result.outcome.value} for {result.points} points"
        )
        return RoundReport(
            round_number=self.round_number,
            turns=self.turn_number,
            knocker_id=knocker.player_id,
            result=result,
            analyses={
                knocker.player_id: knocker_analysis,
                opponent.player_id: opponent_analysis,
            },
        )

    def _finish_draw(self) -> RoundReport:
        return RoundReport(
            round_number=self.round_number,
            turns=self.turn_number,
            analyses={
                p.player_id: analyze_hand(self.hands[p.player_id])
                for p in self.players
            },
        )
