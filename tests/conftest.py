import random

import pytest
from channels.layers import channel_layers

from clue_play import session_store
from clue_play.engine.game_session import GameSession


class PinnedRandom(random.Random):
    """Random source whose choice() always picks the given cards."""

    def __init__(self, *cards):
        super().__init__(0)
        self.cards = set(cards)

    def choice(self, seq):
        return next(card for card in seq if card in self.cards)


def make_session(*cards, key='main'):
    cards = cards or ('Mike', 'Knife', 'Kitchen')
    return GameSession(key, rng=PinnedRandom(*cards))


@pytest.fixture
def game():
    """A standalone session whose solution is Mike / Knife / Kitchen."""
    return make_session()


@pytest.fixture
def seated_game(game):
    """Master 'gm' plus players A, B, C (in that join order)."""
    game.join('gm', 'Greta', is_game_master=True)
    for conn_id, name in (('A', 'Alice'), ('B', 'Bob'), ('C', 'Cleo')):
        game.join(conn_id, name)
    return game


@pytest.fixture
def live_session(settings):
    """Fresh session registered in the store, plus a fresh channel layer."""
    channel_layers.backends = {}
    session = make_session(key=settings.CLUE_SESSION_KEY)
    session_store.create_session(settings.CLUE_SESSION_KEY, session)
    yield session
    session_store.delete_session(settings.CLUE_SESSION_KEY)
