"""Terminal decision provider.

Reads numbered menu choices from stdin. Invalid input is rejected and the
question asked again here, so the engine only ever receives values in range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from gin_rummy.game.turn import TurnView
from gin_rummy.game.validator import DrawSource

from .base import DecisionProvider

if TYPE_CHECKING:
    from gin_rummy.utils.logger import GameDisplay


class TerminalProvider(DecisionProvider):
    """Asks a human player at the terminal."""

    def __init__(
        self,
        display: GameDisplay,
        input_fn: Callable[[str], str] = input,
    ):
        """Initialize provider.

        Args:
            display: Display used for menus and error messages
            input_fn: Line reader (replaced in tests)
        """
        self.display = display
        self._input = input_fn

    def get_valid_input(self, prompt: str, min_val: int, max_val: int) -> int:
        """Read an integer in ``min_val..max_val``, asking until one is given.

        Raises:
            EOFError: If input ends before a valid answer is read.
        """
        while True:
            raw = self._input(prompt).strip()
            try:
                choice = int(raw)
            except ValueError:
                self.display.print_delayed("Invalid input! Please enter a number.")
                continue
            if choice < min_val or choice > max_val:
                self.display.print_delayed(
                    f"Out of range! Enter a number between {min_val} and {max_val}."
                )
                continue
            return choice

    def choose_draw(self, view: TurnView) -> DrawSource:
        self.display.print_instant("\nChoose an action:")
        self.display.print_instant("1. Draw from stock pile")
        self.display.print_instant("2. Draw from discard pile")
        return DrawSource(self.get_valid_input("Your choice: ", 1, 2))

    def choose_discard(self, view: TurnView) -> int:
        return self.get_valid_input(
            f"\nWhich card to discard (1-{view.hand_size})? ", 1, view.hand_size
        )

    def choose_knock(self, view: TurnView) -> bool:
        self.display.print_delayed(f"\nYou can knock (deadwood = {view.deadwood})")
        choice = self.get_valid_input("Do you want to knock? (1=Yes, 2=No): ", 1, 2)
        return choice == 1


def ask_name(prompt: str, default: str, input_fn: Callable[[str], str] = input) -> str:
    """Read a player name, falling back to ``default`` when blank."""
    name = input_fn(prompt).strip()
    return name or default


def ask_yes_no(
    display: GameDisplay,
    prompt: str,
    input_fn: Callable[[str], str] = input,
) -> bool:
    """Ask a 1=Yes/2=No question."""
    provider = TerminalProvider(display, input_fn)
    return provider.get_valid_input(prompt, 1, 2) == 1
