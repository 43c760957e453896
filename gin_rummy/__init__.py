"""Two-player Gin Rummy rules engine and terminal game."""

__version__ = "0.1.0"
