"""
clue_play/engine/scoring.py

Guess parsing and scoring.

``score_guess`` is pure: the same guess and solution always give the same
result, and nothing is mutated.  One point per field that names the hidden
card exactly, so a score is always between 0 and 3.
"""

from datetime import datetime, timezone
from typing import Dict, NamedTuple

from .errors import InvalidGuess
from .solution import Solution

FIELDS = ('suspect', 'weapon', 'room')


class Guess(NamedTuple):
    suspect:   str
    weapon:    str
    room:      str
    timestamp: str

    @classmethod
    def from_payload(cls, payload) -> 'Guess':
        """Build a Guess from an inbound JSON dict.

        Raises:
            InvalidGuess: if the payload is not a dict, or a field is
                          missing, empty or not a string.
        """
        if not isinstance(payload, dict):
            raise InvalidGuess()
        values = {}
        for field in FIELDS:
            value = payload.get(field)
            if not isinstance(value, str) or not value.strip():
                raise InvalidGuess(f'Guess is missing a {field}.')
            values[field] = value.strip()
        timestamp = payload.get('timestamp')
        if timestamp is None or timestamp == '':
            timestamp = datetime.now(timezone.utc).isoformat()
        return cls(timestamp=str(timestamp), **values)

    def to_dict(self) -> dict:
        return self._asdict()


class ScoreResult(NamedTuple):
    total:   int
    correct: Dict[str, bool]


def score_guess(guess: Guess, solution: Solution) -> ScoreResult:
    """Compare ``guess`` with ``solution`` field by field."""
    correct = {
        field: getattr(guess, field) == getattr(solution, field)
        for field in FIELDS
    }
    return ScoreResult(total=sum(correct.values()), correct=correct)
