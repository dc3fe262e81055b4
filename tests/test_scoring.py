import itertools

import pytest

from clue_play.engine.errors import InvalidGuess
from clue_play.engine.scoring import Guess, score_guess
from clue_play.engine.solution import ROOMS, SUSPECT_NAMES, WEAPONS, Solution

SOLUTION = Solution('Mike', 'Knife', 'Kitchen')


def make_guess(suspect='Mike', weapon='Knife', room='Kitchen'):
    return Guess(suspect, weapon, room, '2024-01-01T00:00:00Z')


def test_partial_match_scores_matching_fields():
    result = score_guess(make_guess(weapon='Stapler'), SOLUTION)
    assert result.total == 2
    assert result.correct == {'suspect': True, 'weapon': False, 'room': True}


def test_exact_match_scores_three():
    assert score_guess(make_guess(), SOLUTION).total == 3


def test_no_match_scores_zero():
    result = score_guess(make_guess('Su', 'Stapler', 'Office'), SOLUTION)
    assert result.total == 0
    assert not any(result.correct.values())


def test_score_is_count_of_correct_fields_for_every_card_combination():
    for suspect, weapon, room in itertools.product(SUSPECT_NAMES, WEAPONS, ROOMS):
        result = score_guess(make_guess(suspect, weapon, room), SOLUTION)
        assert 0 <= result.total <= 3
        assert result.total == sum(1 for hit in result.correct.values() if hit)


def test_scoring_is_case_sensitive():
    assert score_guess(make_guess(suspect='mike'), SOLUTION).correct['suspect'] is False


class TestGuessFromPayload:

    def test_keeps_client_timestamp(self):
        guess = Guess.from_payload({
            'suspect': 'Mike', 'weapon': 'Knife', 'room': 'Kitchen',
            'timestamp': '2024-05-01T12:00:00.000Z',
        })
        assert guess.timestamp == '2024-05-01T12:00:00.000Z'

    def test_stamps_missing_timestamp(self):
        guess = Guess.from_payload({'suspect': 'Mike', 'weapon': 'Knife', 'room': 'Kitchen'})
        assert guess.timestamp

    @pytest.mark.parametrize('payload', [
        None,
        'Mike',
        {'suspect': 'Mike', 'weapon': 'Knife'},
        {'suspect': 'Mike', 'weapon': '', 'room': 'Kitchen'},
        {'suspect': 3, 'weapon': 'Knife', 'room': 'Kitchen'},
    ])
    def test_rejects_malformed_payloads(self, payload):
        with pytest.raises(InvalidGuess):
            Guess.from_payload(payload)
