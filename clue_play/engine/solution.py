"""
clue_play/engine/solution.py

Candidate cards and the hidden solution for one round.

The three candidate sets are closed and disjoint.  A new ``Solution`` is
drawn uniformly at random from them every time the game master starts a
game; the random source is injectable so tests can pin the draw.
"""

import random
from typing import NamedTuple, Optional

# ---------------------------------------------------------------------------
# Candidate cards
# ---------------------------------------------------------------------------

SUSPECTS = [
    {'name': 'Gerard',  'description': 'Legal Counsel'},
    {'name': 'Gordon',  'description': 'Creative Genius'},
    {'name': 'Justin',  'description': 'Account Executive'},
    {'name': 'Mike',    'description': 'Tech Wizard'},
    {'name': 'Shalini', 'description': 'Data Analyst'},
    {'name': 'Su',      'description': 'Social Media Manager'},
]
WEAPONS = ['Stapler', 'Keyboard', 'Coffee Mug', 'USB Cable', 'Knife']
ROOMS   = ['Meeting room', "Men's bathroom", 'Office', 'Kitchen',
           'Carpark', 'Reception']

SUSPECT_NAMES = [s['name'] for s in SUSPECTS]


class Solution(NamedTuple):
    """The hidden suspect / weapon / room triple for one round."""

    suspect: str
    weapon:  str
    room:    str

    def to_dict(self) -> dict:
        return {'suspect': self.suspect, 'weapon': self.weapon, 'room': self.room}


def generate_solution(rng: Optional[random.Random] = None) -> Solution:
    """Pick one suspect, one weapon and one room independently."""
    rng = rng or random
    return Solution(
        suspect=rng.choice(SUSPECT_NAMES),
        weapon=rng.choice(WEAPONS),
        room=rng.choice(ROOMS),
    )


def candidates_payload() -> dict:
    """Card lists as sent to clients so they can build their guess forms."""
    return {
        'suspects': [dict(s) for s in SUSPECTS],
        'weapons':  [{'name': w} for w in WEAPONS],
        'rooms':    [{'name': r} for r in ROOMS],
    }
