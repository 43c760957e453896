"""Player model."""

from pydantic import BaseModel, Field


class Player(BaseModel):
    """Player state."""

    player_id: int  # 0 or 1 (seat order)
    name: str = "Player"

    # Running total, carried across rounds
    score: int = Field(default=0, ge=0)

    def add_points(self, points: int) -> None:
        """Add round points to the running score."""
        if points < 0:
            raise ValueError(f"round points must not be negative: {points}")
        self.score += points

    def reset_score(self) -> None:
        """Reset score for a new game."""
        self.score = 0

    def __str__(self) -> str:
        return f"{self.name} ({self.score})"

    def __repr__(self) -> str:
        return f"Player(id={self.player_id}, name={self.name!r}, score={self.score})"
