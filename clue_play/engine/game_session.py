"""
clue_play/engine/game_session.py

The session state machine: one shared whodunit game.

Owns the phase, the hidden solution, the roster, the game-master slot and
the displayed turn, and applies client intents to them.

Usage (inside a Django Channels consumer):

    session = session_store.get_session(session_key)
    try:
        outbox = session.guess(self.channel_name, content)
    except GameError as exc:
        outbox = [broadcaster.error(self.channel_name, exc)]
    await deliver(outbox)

Every public method is synchronous and finishes its mutation before it
returns, so events handled on the event loop never see each other's
half-applied state.  A method either raises ``GameError`` without touching
anything, or mutates and returns the notices to deliver, in order.

Delivery awaits the channel layer, so consumers hold ``session.lock`` from
the call until the last notice is sent.  Otherwise the notices of two
events could interleave on a layer that yields (Redis).

Phases:
    idle         no solution yet; guesses rejected
    in_progress  solution drawn; guesses accepted
    ended        solution revealed; guesses rejected until the next start
"""

import asyncio
import logging
import random
from typing import Optional

from . import broadcaster
from .authority import AuthorityGuard
from .broadcaster import Outbox
from .errors import (
    AlreadyGuessed, AlreadyJoined, AuthorityConflict, NotInProgress, UnknownPlayer,
)
from .player_registry import DEFAULT_NAME_MAX_LEN, PlayerRegistry
from .scoring import Guess, score_guess
from .solution import Solution, candidates_payload, generate_solution
from .turn_scheduler import TurnScheduler

logger = logging.getLogger(__name__)

PHASE_IDLE        = 'idle'
PHASE_IN_PROGRESS = 'in_progress'
PHASE_ENDED       = 'ended'


class GameSession:
    """State for one game room."""

    def __init__(
        self,
        session_key: str = 'main',
        rng: Optional[random.Random] = None,
        name_max_len: int = DEFAULT_NAME_MAX_LEN,
    ):
        self.session_key = session_key
        self.phase       = PHASE_IDLE
        self.solution: Optional[Solution] = None
        self.current_player_id: Optional[str] = None
        self.players     = PlayerRegistry(name_max_len=name_max_len)
        self.authority   = AuthorityGuard()
        self.turns       = TurnScheduler(self.players.ids)
        self._rng        = rng or random.Random()
        self.lock        = asyncio.Lock()  # held by consumers across apply + deliver

    @property
    def game_master_id(self) -> Optional[str]:
        return self.authority.game_master_id

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self, conn_id: str) -> Outbox:
        """Sync a fresh connection with the current shared state."""
        return [
            broadcaster.connected(conn_id),
            broadcaster.candidates(conn_id, candidates_payload()),
            broadcaster.session_state(
                conn_id,
                phase=self.phase,
                players=self.players.snapshot(),
                current_player=self.current_player_id,
                has_game_master=self.authority.has_game_master,
            ),
        ]

    def join(
        self,
        conn_id: str,
        name,
        is_game_master: bool = False,
        passphrase_ok: bool = True,
    ) -> Outbox:
        """Seat a player, or hand the game-master role to this connection.

        Raises:
            AlreadyJoined, InvalidName, AuthorityConflict, NotAuthorized
        """
        if conn_id in self.players or self.authority.is_game_master(conn_id):
            raise AlreadyJoined()

        if is_game_master:
            if self.authority.has_game_master:
                raise AuthorityConflict()
            name = self.players.clean_name(name)
            self.authority.request_game_master(conn_id, name, passphrase_ok=passphrase_ok)
            outbox = [broadcaster.set_game_master(conn_id, True)]
            if self.solution is not None:
                outbox.append(broadcaster.update_solution(conn_id, self.solution.to_dict()))
            outbox.append(broadcaster.update_players(self.players.snapshot()))
            return outbox

        player = self.players.join(conn_id, name)
        logger.info("Player %s joined session %s (%s)", player.name, self.session_key, conn_id)
        outbox = [broadcaster.set_game_master(conn_id, False)]
        if len(self.players) == 1:
            self.current_player_id = conn_id
            outbox.append(broadcaster.update_current_player(conn_id))
        outbox.append(broadcaster.update_players(self.players.snapshot()))
        return outbox

    def disconnect(self, conn_id: str) -> Outbox:
        """Unwind whatever this connection held.  Never raises."""
        was_master = self.authority.release(conn_id)
        player     = self.players.remove(conn_id)
        if not was_master and player is None:
            return []

        outbox = []
        turn_moved = False
        if player is not None:
            logger.info("Player %s left session %s", player.name, self.session_key)
            if self.current_player_id == conn_id:
                self.current_player_id = self.turns.first()
                turn_moved = True
        outbox.append(broadcaster.update_players(self.players.snapshot()))
        if turn_moved:
            outbox.append(broadcaster.update_current_player(self.current_player_id))
        return outbox

    # ------------------------------------------------------------------
    # Round lifecycle (game master only)
    # ------------------------------------------------------------------

    def start_new_game(self, conn_id: str) -> Outbox:
        """Draw a new solution, clear the round and open guessing."""
        self.authority.require_game_master(conn_id, 'start a new game')

        self.solution = generate_solution(self._rng)
        self.players.reset_round()
        self.phase = PHASE_IN_PROGRESS
        self.current_player_id = self.turns.first()
        logger.info("New game started in session %s with %d player(s)",
                    self.session_key, len(self.players))
        logger.debug("Solution for session %s: %s", self.session_key, self.solution)

        return [
            broadcaster.update_players(self.players.snapshot()),
            broadcaster.update_solution(conn_id, self.solution.to_dict()),
            broadcaster.new_game_started(),
            broadcaster.update_current_player(self.current_player_id),
        ]

    def end_game(self, conn_id: str) -> Outbox:
        """Close the round and reveal the solution to everyone."""
        self.authority.require_game_master(conn_id, 'end the game')
        if self.phase != PHASE_IN_PROGRESS:
            raise NotInProgress()

        self.phase = PHASE_ENDED
        self.current_player_id = None
        logger.info("Game ended in session %s", self.session_key)

        scoreboard = self.players.snapshot()
        return [
            broadcaster.game_over(self.solution.to_dict(), scoreboard),
            broadcaster.update_players(scoreboard),
            broadcaster.update_current_player(None),
        ]

    def reset_scores(self, conn_id: str) -> Outbox:
        """Zero every score.  Phase, solution and guesses are untouched."""
        self.authority.require_game_master(conn_id, 'reset scores')
        self.players.reset_scores()
        logger.info("Scores reset in session %s", self.session_key)
        return [broadcaster.update_players(self.players.snapshot())]

    # ------------------------------------------------------------------
    # Guessing
    # ------------------------------------------------------------------

    def guess(self, conn_id: str, payload) -> Outbox:
        """Score one guess from a seated player.

        The turn moves on from the current turn holder, not from the
        guesser: any seated player may guess once per round whether or not
        it is their turn.

        Raises:
            NotInProgress, UnknownPlayer, AlreadyGuessed, InvalidGuess
        """
        if self.phase != PHASE_IN_PROGRESS:
            raise NotInProgress()
        player = self.players.get(conn_id)
        if player is None:
            raise UnknownPlayer()
        if player.has_guessed:
            raise AlreadyGuessed()
        guess = Guess.from_payload(payload)

        result = score_guess(guess, self.solution)
        player.record_guess(guess, result.total)
        self.current_player_id = self.turns.advance(self.current_player_id)
        logger.debug("%s guessed %s/%s/%s for %d point(s)",
                     player.name, guess.suspect, guess.weapon, guess.room, result.total)

        return [
            broadcaster.guess_result(conn_id, result.total, result.correct, guess.timestamp),
            broadcaster.update_players(self.players.snapshot()),
            broadcaster.update_current_player(self.current_player_id),
        ]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def status(self) -> dict:
        """Public summary of the session (never includes the solution)."""
        return {
            'session_key':     self.session_key,
            'phase':           self.phase,
            'player_count':    len(self.players),
            'has_game_master': self.authority.has_game_master,
            'current_player':  self.current_player_id,
        }
