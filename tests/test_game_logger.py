"""Tests for JSONL game logging and config loading."""

import json

import pytest
from pydantic import ValidationError

from gin_rummy.config import Config, GameConfig, load_config
from gin_rummy.game.engine import GameEngine
from gin_rummy.game.validator import DrawSource
from gin_rummy.logging import (
    GameLogConfig,
    GameLogger,
    format_card,
    format_cards,
    format_hands,
    format_melds,
)
from gin_rummy.models.card import parse_cards
from gin_rummy.models.hand import Hand
from gin_rummy.models.meld import Meld
from gin_rummy.providers.scripted import ScriptedProvider


def read_events(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestFormatters:
    """Tests for log formatters."""

    def test_format_card(self):
        assert format_card(parse_cards("TD")[0]) == "TD"
        assert format_card(None) == ""

    def test_format_cards(self):
        assert format_cards(parse_cards("AS 2S 3S")) == "AS,2S,3S"
        assert format_cards([]) == ""

    def test_format_melds(self):
        melds = [Meld.set_of(parse_cards("7C 7D 7H"))]
        assert format_melds(melds) == ["7C,7D,7H"]

    def test_format_hands(self):
        hands = [Hand(parse_cards("AS")), Hand(parse_cards("KD QD"))]
        assert format_hands(hands) == {"0": "AS", "1": "KD,QD"}


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_disabled_writes_nothing(self, tmp_path, players):
        """Test a disabled logger creates no file."""
        path = tmp_path / "game.jsonl"
        with GameLogger(GameLogConfig(enabled=False, output_path=str(path))) as game_logger:
            game_logger.log_session_start(players, 100)
        assert not path.exists()

    def test_creates_parent_dirs(self, tmp_path, players):
        """Test the log directory is created on demand."""
        path = tmp_path / "logs" / "nested" / "game.jsonl"
        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            game_logger.log_session_start(players, 100)

        events = read_events(path)
        assert events[0]["type"] == "session_start"
        assert events[0]["players"] == [
            {"id": 0, "name": "Alice"},
            {"id": 1, "name": "Bob"},
        ]
        assert events[0]["target_score"] == 100

    def test_full_game_log(self, tmp_path, players, no_shuffle):
        """Test the events written for a one-round game."""
        path = tmp_path / "game.jsonl"
        first = ScriptedProvider(draws=[DrawSource.STOCK], discards=[5])
        config = Config(game=GameConfig(hand_size=4, target_score=25))

        with GameLogger(GameLogConfig(enabled=True, output_path=str(path))) as game_logger:
            engine = GameEngine(
                players, [first, ScriptedProvider()], config, game_logger, rng=no_shuffle
            )
            engine.run_game()

        events = read_events(path)
        assert [e["type"] for e in events] == [
            "session_start",
            "round_start",
            "turn",
            "round_end",
            "session_end",
        ]

        round_start = events[1]
        assert round_start["hands"] == {"0": "KS,QS,JS,TS", "1": "9S,8S,7S,6S"}
        assert round_start["discard_top"] == "5S"
        assert round_start["stock"] == 43

        turn = events[2]
        assert turn["player"] == 0
        assert turn["draw_source"] == "stock"
        assert turn["drawn"] == "4S"
        assert turn["discarded"] == "4S"
        assert turn["melds"] == ["TS,JS,QS,KS"]
        assert turn["deadwood"] == 0
        assert turn["knocked"] is True
        assert turn["stock"] == 42

        round_end = events[3]
        assert round_end["outcome"] == "gin"
        assert round_end["knocker"] == 0
        assert round_end["points"] == 25
        assert round_end["scores"] == {"0": 25, "1": 0}

        assert events[4]["winner"] == 0
        assert events[4]["total_rounds"] == 1


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults(self):
        """Test default configuration."""
        config = load_config()
        assert config.game.hand_size == 10
        assert config.game.target_score == 100
        assert config.game.num_packs == 1
        assert config.logging.level == "WARNING"
        assert not config.game_log.enabled

    def test_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(tmp_path / "missing.yaml")
        assert config == Config()

    def test_load_yaml(self, tmp_path):
        """Test values are read from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n  hand_size: 7\n  target_score: 50\n"
            "display:\n  enable_delays: false\n"
        )

        config = load_config(path)

        assert config.game.hand_size == 7
        assert config.game.target_score == 50
        assert not config.display.enable_delays
        assert config.display.delay_ms == 800

    def test_empty_yaml(self, tmp_path):
        """Test an empty file gives defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_invalid_value(self):
        """Test out of range settings are rejected."""
        with pytest.raises(ValidationError):
            GameConfig(hand_size=0)
