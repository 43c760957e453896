"""Shared fixtures for gin_rummy tests."""

import pytest

from gin_rummy.models.deck import Deck
from gin_rummy.models.player import Player
from gin_rummy.utils.logger import GameDisplay


class NoShuffle:
    """Random source that leaves the pack in suit/rank order.

    The top of an unshuffled deck is KS, followed by QS, JS, ... AS, KH, ...
    """

    def randrange(self, start, stop=None):
        return start


@pytest.fixture
def no_shuffle():
    return NoShuffle()


@pytest.fixture
def ordered_deck(no_shuffle):
    return Deck(rng=no_shuffle)


@pytest.fixture
def empty_deck(no_shuffle):
    deck = Deck(rng=no_shuffle)
    deck.deal_hand(deck.remaining())
    return deck


@pytest.fixture
def players():
    return [Player(player_id=0, name="Alice"), Player(player_id=1, name="Bob")]


@pytest.fixture
def quiet_display():
    return GameDisplay(enable_delays=False)
