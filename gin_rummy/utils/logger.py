"""Logging utilities and game state display."""

from __future__ import annotations

import logging
import sys
import time
from typing import TYPE_CHECKING, Callable, Iterable

from gin_rummy.game.scoring import RoundOutcome
from gin_rummy.game.validator import DrawSource, KnockEligibility

if TYPE_CHECKING:
    from gin_rummy.game.analyzer import HandAnalysis
    from gin_rummy.game.engine import RoundReport
    from gin_rummy.game.turn import DrawEvent, TurnResult, TurnView
    from gin_rummy.models.card import Card
    from gin_rummy.models.player import Player


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def format_hand(cards: Iterable["Card"], numbered: bool = False) -> str:
    """Format cards as ``[ AS 2S 3S ]`` or ``[ 1:AS 2:2S 3:3S ]``."""
    if numbered:
        items = [f"{i}:{c}" for i, c in enumerate(cards, 1)]
    else:
        items = [str(c) for c in cards]
    return "[ " + " ".join(items) + " ]" if items else "[ ]"


class GameDisplay:
    """Display game progress to stdout."""

    def __init__(
        self,
        enable_delays: bool = True,
        delay_ms: int = 800,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Initialize display.

        Args:
            enable_delays: Pause before each narrated message
            delay_ms: Pause length in milliseconds
            sleep: Sleep function (replaced in tests)
        """
        self.enable_delays = enable_delays
        self.delay_ms = delay_ms
        self._sleep = sleep

    def print_delayed(self, message: str = "") -> None:
        """Print a narrated message after the configured pause."""
        if self.enable_delays and self.delay_ms > 0:
            self._sleep(self.delay_ms / 1000)
        print(message, flush=True)

    def print_instant(self, message: str = "", end: str = "\n") -> None:
        """Print without pausing (prompts, menus)."""
        print(message, end=end, flush=True)

    def print_separator(self) -> None:
        """Print a separator line."""
        self.print_delayed("=" * 40)

    def print_title(self, target_score: int) -> None:
        self.print_delayed("=== GIN RUMMY ===")
        self.print_delayed(f"First to {target_score} points wins the game.")

    def print_welcome(self, players: list["Player"]) -> None:
        names = " and ".join(p.name for p in players)
        self.print_delayed(f"\nWelcome {names}!")
        self.print_delayed("Let's begin!")

    def print_melds(self, analysis: "HandAnalysis") -> None:
        """Print sets and runs of a hand."""
        if analysis.sets:
            self.print_instant("Sets found:")
            for meld in analysis.sets:
                self.print_instant(f"  {format_hand(meld.cards)}")
        if analysis.runs:
            self.print_instant("Runs found:")
            for meld in analysis.runs:
                self.print_instant(f"  {format_hand(meld.cards)}")
        if not analysis.has_melds:
            self.print_instant("No melds yet.")

    def print_round_start(
        self,
        round_num: int,
        players: list["Player"],
        discard_top: "Card | None",
    ) -> None:
        """Print round header with current scores."""
        self.print_delayed()
        self.print_separator()
        self.print_delayed(f"        ROUND {round_num}")
        self.print_separator()
        scores = " - ".join(f"{p.name} {p.score}" for p in players)
        self.print_delayed(f"Current Scores: {scores}")
        self.print_delayed(f"Starting discard: {discard_top or '(none)'}")

    def print_turn_start(self, player: "Player", view: "TurnView") -> None:
        """Print the state a player sees before drawing."""
        self.print_delayed()
        self.print_separator()
        self.print_delayed(f"{player.name}'s Turn")
        self.print_separator()
        self.print_instant(f"\nCards remaining in stock: {view.stock_remaining}")
        self.print_instant(f"Top of discard pile: {view.discard_top or '(empty)'}")
        self.print_instant(f"\n{player.name}'s hand:")
        self.print_instant(format_hand(view.hand))

    def print_draw(self, player: "Player", event: "DrawEvent") -> None:
        """Print the drawn card and the post-draw hand with its melds."""
        if event.fell_back:
            if event.requested == DrawSource.STOCK:
                self.print_delayed("Stock pile is empty! Drawing from discard instead.")
            else:
                self.print_delayed("Discard pile is empty! Drawing from stock instead.")
        if event.source == DrawSource.STOCK:
            self.print_delayed(f"{player.name} drew from stock: {event.card}")
        else:
            self.print_delayed(f"{player.name} took from discard: {event.card}")

        self.print_delayed("\nUpdated hand:")
        self.print_instant(format_hand(event.view.hand, numbered=True))
        self.print_melds(event.view.analysis)

    def print_turn_end(self, player: "Player", result: "TurnResult") -> None:
        """Print the discard, deadwood and knock decision."""
        self.print_delayed(f"{player.name} discarded: {result.discarded}")
        self.print_delayed(f"Deadwood: {result.deadwood} points")
        if result.gin:
            self.print_delayed(f"\n{player.name} has GIN!")
        elif result.knocked:
            self.print_delayed(f"\n{player.name} knocks!")
        elif result.eligibility == KnockEligibility.OPTIONAL:
            self.print_delayed(f"{player.name} chooses to continue playing.")

    def print_final_hand(self, player: "Player", analysis: "HandAnalysis") -> None:
        self.print_delayed(f"\n{player.name}'s final hand:")
        self.print_instant(format_hand(analysis.cards))
        self.print_melds(analysis)
        self.print_delayed(f"{player.name} deadwood: {analysis.deadwood} points")

    def print_round_end(self, report: "RoundReport", players: list["Player"]) -> None:
        """Print scoring details, or the drawn-round notice."""
        if report.result is None or report.knocker_id is None:
            self.print_delayed("\n========== ROUND ENDS ==========")
            self.print_delayed("Deck is empty! Round ends in a draw (no points awarded).")
            return

        knocker = players[report.knocker_id]
        opponent = players[1 - report.knocker_id]
        result = report.result

        self.print_delayed("\n========== SCORING ==========")
        self.print_final_hand(knocker, report.analyses[knocker.player_id])
        self.print_final_hand(opponent, report.analyses[opponent.player_id])

        if result.outcome == RoundOutcome.GIN:
            self.print_delayed(f"\nGIN! {knocker.name} scores {result.points} points!")
        elif result.outcome == RoundOutcome.UNDERCUT:
            self.print_delayed(
                f"\nUNDERCUT! {opponent.name} scores {result.points} points!"
            )
        else:
            self.print_delayed(f"\n{knocker.name} scores {result.points} points.")

        self.print_delayed("\n--- Current Scores ---")
        for p in players:
            self.print_delayed(f"{p.name}: {p.score}")

    def print_game_winner(self, winner: "Player", players: list["Player"]) -> None:
        scores = " - ".join(f"{p.name} {p.score}" for p in players)
        self.print_delayed(f"\n\n*** {winner.name} WINS THE GAME! ***")
        self.print_delayed(f"Final Score: {scores}")

    def print_final_results(self, players: list["Player"]) -> None:
        """Print final scores and the overall leader."""
        self.print_delayed("\n=== FINAL SCORES ===")
        for p in players:
            self.print_delayed(f"{p.name}: {p.score}")

        ranked = sorted(players, key=lambda p: p.score, reverse=True)
        if len(ranked) > 1 and ranked[0].score == ranked[1].score:
            self.print_delayed("\nIt's a tie!")
        else:
            self.print_delayed(f"\n{ranked[0].name} wins overall!")

    def print_goodbye(self) -> None:
        self.print_delayed("\nThanks for playing!")
