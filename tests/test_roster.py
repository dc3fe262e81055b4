"""Player registry, turn scheduler, authority guard and solution draw."""

import random

import pytest

from clue_play.engine.authority import AuthorityGuard
from clue_play.engine.errors import AlreadyJoined, AuthorityConflict, InvalidName, NotAuthorized
from clue_play.engine.player_registry import PlayerRegistry
from clue_play.engine.scoring import Guess
from clue_play.engine.solution import (
    ROOMS, SUSPECT_NAMES, WEAPONS, candidates_payload, generate_solution,
)
from clue_play.engine.turn_scheduler import TurnScheduler


# ---------------------------------------------------------------------------
# PlayerRegistry
# ---------------------------------------------------------------------------

class TestPlayerRegistry:

    def test_join_creates_fresh_player(self):
        registry = PlayerRegistry()
        player = registry.join('c1', '  Alice ')
        assert player.name == 'Alice'
        assert (player.score, player.guess, player.has_guessed) == (0, None, False)
        assert 'c1' in registry

    @pytest.mark.parametrize('name', ['', '   ', None, 42])
    def test_blank_name_is_rejected(self, name):
        registry = PlayerRegistry()
        with pytest.raises(InvalidName):
            registry.join('c1', name)
        assert len(registry) == 0

    def test_overlong_name_is_rejected(self):
        with pytest.raises(InvalidName):
            PlayerRegistry(name_max_len=5).join('c1', 'Bartholomew')

    def test_same_connection_cannot_join_twice(self):
        registry = PlayerRegistry()
        registry.join('c1', 'Alice')
        with pytest.raises(AlreadyJoined):
            registry.join('c1', 'Alice again')

    def test_remove_is_idempotent(self):
        registry = PlayerRegistry()
        registry.join('c1', 'Alice')
        assert registry.remove('c1').name == 'Alice'
        assert registry.remove('c1') is None

    def test_ids_keep_join_order(self):
        registry = PlayerRegistry()
        for conn_id in ('z', 'a', 'm'):
            registry.join(conn_id, conn_id.upper())
        assert registry.ids() == ['z', 'a', 'm']

    def test_snapshot_shape(self):
        registry = PlayerRegistry()
        registry.join('c1', 'Alice').record_guess(
            Guess('Mike', 'Knife', 'Office', 't0'), 2)
        assert registry.snapshot() == {
            'c1': {
                'name': 'Alice',
                'score': 2,
                'guess': {'suspect': 'Mike', 'weapon': 'Knife', 'room': 'Office',
                          'timestamp': 't0'},
                'hasGuessed': True,
            },
        }


# ---------------------------------------------------------------------------
# TurnScheduler
# ---------------------------------------------------------------------------

class TestTurnScheduler:

    def test_advance_wraps(self):
        turns = TurnScheduler(lambda: ['A', 'B', 'C'])
        assert turns.advance('A') == 'B'
        assert turns.advance('C') == 'A'

    def test_unknown_current_advances_to_first(self):
        turns = TurnScheduler(lambda: ['A', 'B'])
        assert turns.advance(None) == 'A'
        assert turns.advance('gone') == 'A'

    def test_empty_ordering(self):
        turns = TurnScheduler(lambda: [])
        assert turns.advance('A') is None
        assert turns.first() is None

    def test_follows_live_ordering(self):
        ids = ['A', 'B']
        turns = TurnScheduler(lambda: ids)
        ids.append('C')
        assert turns.advance('B') == 'C'


# ---------------------------------------------------------------------------
# AuthorityGuard
# ---------------------------------------------------------------------------

class TestAuthorityGuard:

    def test_first_claim_wins(self):
        guard = AuthorityGuard()
        guard.request_game_master('m1', 'Greta')
        assert guard.game_master_id == 'm1'

    def test_second_claim_conflicts(self):
        guard = AuthorityGuard()
        guard.request_game_master('m1')
        with pytest.raises(AuthorityConflict):
            guard.request_game_master('m2')
        with pytest.raises(AuthorityConflict):
            guard.request_game_master('m2', passphrase_ok=False)
        assert guard.game_master_id == 'm1'

    def test_failed_passphrase_leaves_slot_open(self):
        guard = AuthorityGuard()
        with pytest.raises(NotAuthorized):
            guard.request_game_master('m1', passphrase_ok=False)
        assert not guard.has_game_master

    def test_require_game_master(self):
        guard = AuthorityGuard()
        guard.request_game_master('m1')
        guard.require_game_master('m1', 'start a new game')
        with pytest.raises(NotAuthorized):
            guard.require_game_master('p1', 'start a new game')

    def test_require_with_no_master(self):
        with pytest.raises(NotAuthorized):
            AuthorityGuard().require_game_master(None, 'end the game')

    def test_release_only_for_holder(self):
        guard = AuthorityGuard()
        guard.request_game_master('m1')
        assert guard.release('p1') is False
        assert guard.release('m1') is True
        guard.request_game_master('m2')
        assert guard.game_master_id == 'm2'


# ---------------------------------------------------------------------------
# Solution draw
# ---------------------------------------------------------------------------

def test_generated_solution_draws_from_candidate_sets():
    rng = random.Random(1234)
    for _ in range(50):
        solution = generate_solution(rng)
        assert solution.suspect in SUSPECT_NAMES
        assert solution.weapon in WEAPONS
        assert solution.room in ROOMS


def test_candidate_sets_are_disjoint():
    assert not set(SUSPECT_NAMES) & set(WEAPONS)
    assert not set(WEAPONS) & set(ROOMS)
    assert not set(SUSPECT_NAMES) & set(ROOMS)


def test_candidates_payload_lists_every_card():
    cards = candidates_payload()
    assert [s['name'] for s in cards['suspects']] == SUSPECT_NAMES
    assert cards['suspects'][3] == {'name': 'Mike', 'description': 'Tech Wizard'}
    assert [w['name'] for w in cards['weapons']] == WEAPONS
    assert [r['name'] for r in cards['rooms']] == ROOMS
