"""Settings for the terminal game, read from YAML."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class GameConfig(BaseModel):
    """Rules settings."""

    hand_size: int = Field(default=10, ge=1)
    target_score: int = Field(default=100, ge=1)
    num_packs: int = 1  # Only a single pack is supported


class DisplayConfig(BaseModel):
    """Terminal output settings."""

    enable_delays: bool = True
    delay_ms: int = Field(default=800, ge=0)


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    level: str = "WARNING"


class GameLogSettings(BaseModel):
    """JSONL game log settings."""

    enabled: bool = False
    output_path: str = "logs"  # Directory; filename is generated


class Config(BaseModel):
    """All settings, one section per concern."""

    game: GameConfig = GameConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogSettings = GameLogSettings()


def load_config(path: Path | str | None = None) -> Config:
    """Read settings from a YAML file.

    Sections and keys left out of the file keep their defaults.

    Args:
        path: YAML file. None or a missing file gives the defaults.

    Returns:
        Config object.
    """
    if path is None or not Path(path).exists():
        return Config()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Config(**data)
