"""
clue_play/engine/turn_scheduler.py

Whose turn is shown next.

The turn is a label for clients, not a gate: the session accepts a guess
from any seated player who has not guessed yet this round, whoever holds
the turn.
"""

from typing import Callable, List, Optional


class TurnScheduler:
    """Cycles through player ids in the order supplied by ``order_func``."""

    def __init__(self, order_func: Callable[[], List[str]]):
        self._order = order_func

    def first(self) -> Optional[str]:
        ids = self._order()
        return ids[0] if ids else None

    def advance(self, current_id: Optional[str]) -> Optional[str]:
        """Return the id after ``current_id``, wrapping to the first.

        An id that is not in the ordering (or None) advances to the first
        id.  An empty ordering gives None.
        """
        ids = self._order()
        if not ids:
            return None
        try:
            index = ids.index(current_id)
        except ValueError:
            return ids[0]
        return ids[(index + 1) % len(ids)]
