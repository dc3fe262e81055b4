"""
clue_play/engine/authority.py

Game-master authority for one session.

The role is taken by an explicit claim and held by exactly one connection
at a time.  It is never inferred from who joined first.  When the holder
disconnects the slot opens up again; a round in progress keeps running.
"""

import logging
from typing import Optional

from .errors import AuthorityConflict, NotAuthorized

logger = logging.getLogger(__name__)


class AuthorityGuard:

    def __init__(self):
        self.game_master_id: Optional[str] = None
        self.game_master_name = ''

    @property
    def has_game_master(self) -> bool:
        return self.game_master_id is not None

    def is_game_master(self, conn_id: str) -> bool:
        return conn_id is not None and conn_id == self.game_master_id

    def request_game_master(
        self, conn_id: str, name: str = '', passphrase_ok: bool = True,
    ) -> None:
        """Give ``conn_id`` the game-master role.

        Raises:
            AuthorityConflict: if a connection already holds the role
                               (this one included).
            NotAuthorized:     if the passphrase check failed.
        """
        if self.game_master_id is not None:
            raise AuthorityConflict()
        if not passphrase_ok:
            raise NotAuthorized('Incorrect game master passphrase.')
        self.game_master_id   = conn_id
        self.game_master_name = name
        logger.info("Game master claimed by %s (%s)", name or '?', conn_id)

    def require_game_master(self, conn_id: str, action: str) -> None:
        """Raise NotAuthorized unless ``conn_id`` holds the role."""
        if not self.is_game_master(conn_id):
            raise NotAuthorized(f'Only the game master can {action}.')

    def release(self, conn_id: str) -> bool:
        """Clear the role if ``conn_id`` holds it.  Returns True if it did."""
        if not self.is_game_master(conn_id):
            return False
        logger.info("Game master %s (%s) left; role is open",
                    self.game_master_name or '?', conn_id)
        self.game_master_id   = None
        self.game_master_name = ''
        return True
