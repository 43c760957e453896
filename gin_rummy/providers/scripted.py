"""Scripted decision provider for tests and replays."""

from collections import deque
from typing import Iterable

from gin_rummy.errors import ScriptExhaustedError
from gin_rummy.game.turn import TurnView
from gin_rummy.game.validator import DrawSource

from .base import DecisionProvider


class ScriptedProvider(DecisionProvider):
    """Replays pre-recorded decisions in order.

    Each decision kind has its own queue. Asking for a decision whose queue is
    empty raises ScriptExhaustedError, unless a default was given for it.
    """

    def __init__(
        self,
        draws: Iterable[DrawSource | int] = (),
        discards: Iterable[int] = (),
        knocks: Iterable[bool] = (),
        default_draw: DrawSource | None = None,
        default_discard: int | None = None,
        default_knock: bool | None = None,
    ):
        self._draws: deque = deque(draws)
        self._discards: deque = deque(discards)
        self._knocks: deque = deque(knocks)
        self.default_draw = default_draw
        self.default_discard = default_discard
        self.default_knock = default_knock

        # Views received, for assertions in tests
        self.draw_views: list[TurnView] = []
        self.discard_views: list[TurnView] = []
        self.knock_views: list[TurnView] = []

    @staticmethod
    def _next(queue: deque, default, kind: str):
        if queue:
            return queue.popleft()
        if default is not None:
            return default
        raise ScriptExhaustedError(f"no scripted {kind} decision left")

    def choose_draw(self, view: TurnView) -> DrawSource:
        self.draw_views.append(view)
        return self._next(self._draws, self.default_draw, "draw")

    def choose_discard(self, view: TurnView) -> int:
        self.discard_views.append(view)
        return self._next(self._discards, self.default_discard, "discard")

    def choose_knock(self, view: TurnView) -> bool:
        self.knock_views.append(view)
        return self._next(self._knocks, self.default_knock, "knock")
