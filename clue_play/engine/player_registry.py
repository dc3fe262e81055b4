"""
clue_play/engine/player_registry.py

Tracks the seated (non-master) players of the session.

A player's id is the Channels ``channel_name`` of the connection that
joined.  The id lives exactly as long as that connection: a reconnect
produces a new channel name and therefore a brand-new player.

Players are kept in join order; the Turn Scheduler relies on that order.
"""

from typing import Dict, List, Optional

from .errors import AlreadyJoined, InvalidName
from .scoring import Guess

DEFAULT_NAME_MAX_LEN = 24


class Player:
    """Mutable record for one seated player."""

    __slots__ = ('id', 'name', 'score', 'guess', 'has_guessed')

    def __init__(self, id: str, name: str):
        self.id          = id
        self.name        = name
        self.score       = 0
        self.guess: Optional[Guess] = None
        self.has_guessed = False

    def record_guess(self, guess: Guess, points: int) -> None:
        self.score      += points
        self.guess       = guess
        self.has_guessed = True

    def reset_round(self) -> None:
        self.score       = 0
        self.guess       = None
        self.has_guessed = False

    def to_dict(self) -> dict:
        return {
            'name':       self.name,
            'score':      self.score,
            'guess':      self.guess.to_dict() if self.guess else None,
            'hasGuessed': self.has_guessed,
        }


class PlayerRegistry:
    """Seated players, keyed by connection id, in join order."""

    def __init__(self, name_max_len: int = DEFAULT_NAME_MAX_LEN):
        self.name_max_len = name_max_len
        self._players: Dict[str, Player] = {}

    # ------------------------------------------------------------------
    # Player lifecycle
    # ------------------------------------------------------------------

    def clean_name(self, name) -> str:
        """Return the stripped name, or raise InvalidName."""
        name = name.strip() if isinstance(name, str) else ''
        if not name:
            raise InvalidName()
        if len(name) > self.name_max_len:
            raise InvalidName(f'Names can be at most {self.name_max_len} characters.')
        return name

    def join(self, conn_id: str, name) -> Player:
        """Seat a new player and return it.

        Raises:
            InvalidName:   if the name is blank or too long.
            AlreadyJoined: if this connection already has a seat.
        """
        name = self.clean_name(name)
        if conn_id in self._players:
            raise AlreadyJoined()
        player = Player(conn_id, name)
        self._players[conn_id] = player
        return player

    def remove(self, conn_id: str) -> Optional[Player]:
        """Drop a player.  Removing an unknown id is a no-op."""
        return self._players.pop(conn_id, None)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, conn_id: Optional[str]) -> Optional[Player]:
        if conn_id is None:
            return None
        return self._players.get(conn_id)

    def __contains__(self, conn_id) -> bool:
        return conn_id in self._players

    def __len__(self) -> int:
        return len(self._players)

    def ids(self) -> List[str]:
        """Player ids in join order."""
        return list(self._players)

    def all(self) -> List[Player]:
        return list(self._players.values())

    # ------------------------------------------------------------------
    # Bulk updates
    # ------------------------------------------------------------------

    def reset_round(self) -> None:
        for player in self._players.values():
            player.reset_round()

    def reset_scores(self) -> None:
        for player in self._players.values():
            player.score = 0

    def snapshot(self) -> dict:
        """Serialise the roster for sending over WebSocket."""
        return {pid: p.to_dict() for pid, p in self._players.items()}
