"""JSONL record of a game session, written for later replay."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

from pydantic import BaseModel

from gin_rummy.models.card import Card
from gin_rummy.models.hand import Hand
from gin_rummy.models.player import Player

from .formatters import format_card, format_cards, format_hands, format_melds

if TYPE_CHECKING:
    from gin_rummy.game.scoring import RoundResult
    from gin_rummy.game.turn import TurnResult


class GameLogConfig(BaseModel):
    """Where, and whether, to write the event log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Appends one JSON object per game event to a file.

    Use as a context manager; the file is opened on entry only when logging is
    enabled, and every ``log_*`` call is a no-op otherwise.
    """

    def __init__(self, config: GameLogConfig | None = None):
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        if self.config.enabled and self.config.output_path:
            log_path = Path(self.config.output_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = log_path.open("a", encoding="utf-8")
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file is None:
            return
        self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
        self._file.flush()

    def log_session_start(self, players: list[Player], target_score: int) -> None:
        """Record the seats and the score that ends the game."""
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(timespec="seconds"),
            "players": [{"id": p.player_id, "name": p.name} for p in players],
            "target_score": target_score,
        })

    def log_round_start(
        self,
        round_num: int,
        hands: list[Hand],
        discard_top: Card | None,
        stock_remaining: int,
    ) -> None:
        """Log round start with the dealt hands.

        Args:
            round_num: Round number.
            hands: Hands indexed by player_id.
            discard_top: Card turned up to start the discard pile.
            stock_remaining: Cards left in the stock after the deal.
        """
        self._write({
            "type": "round_start",
            "round": round_num,
            "hands": format_hands(hands),
            "discard_top": format_card(discard_top),
            "stock": stock_remaining,
        })

    def log_turn(
        self,
        round_num: int,
        turn_num: int,
        player_id: int,
        result: TurnResult,
        discard_top: Card | None,
        stock_remaining: int,
    ) -> None:
        """Log a single resolved turn.

        Args:
            round_num: Round number.
            turn_num: Turn number within the round.
            player_id: Player who took the turn.
            result: Resolved turn.
            discard_top: Top of the discard pile after the turn.
            stock_remaining: Cards left in the stock after the turn.
        """
        self._write({
            "type": "turn",
            "round": round_num,
            "turn": turn_num,
            "player": player_id,
            "draw_source": result.draw.source.name.lower(),
            "drawn": format_card(result.draw.card),
            "discarded": format_card(result.discarded),
            "hand": format_cards(result.hand),
            "melds": format_melds(result.analysis.melds),
            "deadwood": result.deadwood,
            "knocked": result.knocked,
            "discard_top": format_card(discard_top),
            "stock": stock_remaining,
        })

    def log_round_end(
        self,
        round_num: int,
        knocker_id: int | None,
        result: RoundResult | None,
        players: list[Player],
        hands: list[Hand],
    ) -> None:
        """Log round end.

        Args:
            round_num: Round number.
            knocker_id: Player who knocked, or None for a drawn round.
            result: Scoring result, or None for a drawn round.
            players: Players with updated scores.
            hands: Final hands indexed by player_id.
        """
        record: dict[str, Any] = {
            "type": "round_end",
            "round": round_num,
            "outcome": result.outcome.value if result else "draw",
            "hands": format_hands(hands),
            "scores": {str(p.player_id): p.score for p in players},
        }
        if result is not None:
            record["knocker"] = knocker_id
            record["knocker_deadwood"] = result.knocker_deadwood
            record["opponent_deadwood"] = result.opponent_deadwood
            record["points"] = result.points
        self._write(record)

    def log_session_end(
        self,
        total_rounds: int,
        players: list[Player],
        winner_id: int | None,
    ) -> None:
        """Record final scores and the winner.

        Args:
            total_rounds: Number of rounds played.
            players: Players with final scores.
            winner_id: Winning player, or None for a tie.
        """
        self._write({
            "type": "session_end",
            "total_rounds": total_rounds,
            "final_scores": {str(p.player_id): p.score for p in players},
            "winner": winner_id,
        })
