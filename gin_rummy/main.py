"""Main entry point for the terminal Gin Rummy game."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import ValidationError

from gin_rummy.config import Config, load_config
from gin_rummy.errors import GinRummyError, InvalidConfigurationError
from gin_rummy.game.engine import GameEngine, RoundReport
from gin_rummy.logging import GameLogConfig, GameLogger
from gin_rummy.models.player import Player
from gin_rummy.providers.interactive import TerminalProvider, ask_name, ask_yes_no
from gin_rummy.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str, players: list[Player]) -> str:
    """Build a game log path from the start time and both player names.

    Format: {ISO timestamp}_{player1}_{player2}.jsonl

    Args:
        log_dir: Directory that will hold the log.
        players: Players in seat order.

    Returns:
        Path of the JSONL file inside ``log_dir``.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    player_names = "_".join(p.name.replace(" ", "-") for p in players)
    filename = f"{timestamp}_{player_names}.jsonl"
    return str(Path(log_dir) / filename)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Two-player Gin Rummy in the terminal")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML settings file",
    )
    parser.add_argument(
        "-n",
        "--hand-size",
        type=int,
        help="Cards dealt to each player (overrides config)",
    )
    parser.add_argument(
        "-t",
        "--target-score",
        type=int,
        help="Score that wins the game (overrides config)",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Print messages without pauses",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log engine decisions at DEBUG level",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Write a JSONL replay log into this directory",
    )
    return parser.parse_args(argv)


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides to a loaded config.

    Raises:
        InvalidConfigurationError: If an override breaks a config constraint.
    """
    data = config.model_dump()
    if args.hand_size is not None:
        data["game"]["hand_size"] = args.hand_size
    if args.target_score is not None:
        data["game"]["target_score"] = args.target_score
    if args.no_delay:
        data["display"]["enable_delays"] = False
    if args.verbose:
        data["logging"]["level"] = "DEBUG"
    if args.game_log is not None:
        data["game_log"]["enabled"] = True
        data["game_log"]["output_path"] = str(args.game_log)

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigurationError(f"invalid setting: {e}") from e


def run(
    config: Config,
    display: GameDisplay,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Collect names, play the game and print the results.

    Returns:
        Exit code (0 for success)
    """
    display.print_title(config.game.target_score)
    players = [
        Player(player_id=0, name=ask_name("Player 1 name: ", "Player 1", input_fn)),
        Player(player_id=1, name=ask_name("Player 2 name: ", "Player 2", input_fn)),
    ]
    display.print_welcome(players)

    if config.game_log.enabled:
        log_path = generate_log_filename(config.game_log.output_path, players)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        logger.info(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    providers = [TerminalProvider(display, input_fn) for _ in players]

    with GameLogger(game_log_config) as game_logger:
        engine = GameEngine(players, providers, config, game_logger)
        engine.set_callbacks(
            on_round_start=display.print_round_start,
            on_turn_start=display.print_turn_start,
            on_draw=display.print_draw,
            on_turn_end=display.print_turn_end,
            on_round_end=display.print_round_end,
        )

        def play_again(report: RoundReport) -> bool:
            return ask_yes_no(display, "\nPlay another round? (1=Yes, 2=No): ", input_fn)

        winner = engine.run_game(play_again=play_again)

    if winner is not None and winner.score >= config.game.target_score:
        display.print_game_winner(winner, players)
    else:
        display.print_final_results(players)
    display.print_goodbye()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    try:
        config = apply_overrides(load_config(args.config), args)
    except (InvalidConfigurationError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Setup logging
    setup_logging(config.logging.level)

    display = GameDisplay(
        enable_delays=config.display.enable_delays,
        delay_ms=config.display.delay_ms,
    )

    try:
        return run(config, display)
    except (KeyboardInterrupt, EOFError):
        print("\nGame interrupted by user")
        return 1
    except GinRummyError as e:
        logger.error(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
