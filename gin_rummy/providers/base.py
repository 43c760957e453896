"""Base decision provider.

Defines the interface through which the turn engine asks a player for
decisions. Implementations may read a terminal, replay a script, or compute a
move; the engine does not know which.
"""

from abc import ABC, abstractmethod

from gin_rummy.game.turn import TurnView
from gin_rummy.game.validator import DrawSource


class DecisionProvider(ABC):
    """Abstract base class for player decision sources."""

    @abstractmethod
    def choose_draw(self, view: TurnView) -> DrawSource:
        """Select where to draw from.

        Args:
            view: Snapshot before the draw

        Returns:
            DrawSource.STOCK or DrawSource.DISCARD
        """
        pass

    @abstractmethod
    def choose_discard(self, view: TurnView) -> int:
        """Select the card to discard.

        Args:
            view: Snapshot after the draw

        Returns:
            1-based position in ``view.hand``
        """
        pass

    @abstractmethod
    def choose_knock(self, view: TurnView) -> bool:
        """Decide whether to knock.

        Only asked when deadwood is between 1 and the knock limit.

        Args:
            view: Snapshot after the discard

        Returns:
            True to knock
        """
        pass
