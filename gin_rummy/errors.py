"""Engine error types.

The engine raises these and never prints them; presentation code decides how
to surface them to a player.
"""


class GinRummyError(Exception):
    """Base class for all engine errors."""


class EmptyDeckError(GinRummyError):
    """No cards left to deal. Fatal to the current round (no-score draw)."""

    def __init__(self, message: str = "cannot deal from an empty deck"):
        super().__init__(message)


class InsufficientCardsError(GinRummyError):
    """Requested hand size exceeds the cards remaining in the deck."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"cannot deal {requested} cards, only {remaining} remaining"
        )


class InvalidConfigurationError(GinRummyError):
    """Unsupported setup, e.g. more than one pack requested."""


class IndexOutOfRangeError(GinRummyError):
    """A draw or discard selection outside the valid bounds."""

    def __init__(self, value: object, low: int, high: int):
        self.value = value
        self.low = low
        self.high = high
        super().__init__(f"selection {value!r} is outside {low}..{high}")


class TurnStateError(GinRummyError):
    """A turn operation was called in the wrong phase."""


class ScriptExhaustedError(GinRummyError):
    """A scripted decision provider ran out of recorded choices."""
