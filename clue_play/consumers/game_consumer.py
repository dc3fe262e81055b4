"""
clue_play/consumers/game_consumer.py

Game WebSocket consumer.

One instance per browser connection.  The connection's Channels
``channel_name`` is its identity in the session: player ids, the
game-master slot and the turn all refer to it.

Handles:
  - Syncing a new connection with the shared state on connect.
  - Joining as a player, or claiming the game-master role.
  - Guesses, and the master's start / end / reset commands.
  - Unwinding the connection's seat or role on disconnect.

Each inbound message is applied to the GameSession synchronously; the
notices it returns are then delivered through the channel layer, the
sender's own ones included, while the session lock is held.  Every
connection therefore sees them in the order the session emitted them,
and never interleaved with another event's notices.

WebSocket URL:  ws://<host>/ws/game/

── Messages from client ──────────────────────────────────────────────────
  {type: "join",         name: "<player name>", isGameMaster: bool, password?: "…"}
  {type: "guess",        suspect, weapon, room, timestamp?}
  {type: "startNewGame"}                                     (master only)
  {type: "endGame"}                                          (master only)
  {type: "resetScores"}                                      (master only)

── Messages to client ────────────────────────────────────────────────────
  See clue_play/engine/broadcaster.py.
"""

import hmac
import logging

from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.conf import settings

from clue_play import session_store
from clue_play.engine import broadcaster
from clue_play.engine.errors import GameError, InvalidMessage

logger = logging.getLogger(__name__)


class GameConsumer(AsyncJsonWebsocketConsumer):

    # ----------------------------------------------------------------
    # Connection lifecycle
    # ----------------------------------------------------------------

    async def connect(self):
        self.session_key = settings.CLUE_SESSION_KEY
        session = session_store.get_session(self.session_key)
        if session is None:
            await self.close(code=4404)
            return

        self.group_name = f"clue_{self.session_key}"
        async with session.lock:
            await self.channel_layer.group_add(self.group_name, self.channel_name)
            await self.accept()
            logger.debug("Connection %s opened on session %s", self.channel_name, self.session_key)
            await self._deliver(session.connect(self.channel_name))

    async def disconnect(self, close_code):
        await self._unwind()

    async def _unwind(self):
        """Release this connection's seat and role.  Safe to call twice."""
        if not hasattr(self, 'group_name'):
            return
        await self.channel_layer.group_discard(self.group_name, self.channel_name)
        session = session_store.get_session(self.session_key)
        if session is None:
            return
        async with session.lock:
            await self._deliver(session.disconnect(self.channel_name))

    # ----------------------------------------------------------------
    # Message dispatch
    # ----------------------------------------------------------------

    async def receive(self, text_data=None, bytes_data=None, **kwargs):
        # Binary and empty frames reach receive_json as None and are
        # reported as InvalidMessage.  If handling fails unexpectedly the
        # consumer dies without a websocket.disconnect, so unwind here.
        try:
            content = await self.decode_json(text_data) if text_data else None
            await self.receive_json(content, **kwargs)
        except Exception:
            logger.exception("Unhandled error on connection %s", self.channel_name)
            await self._unwind()
            raise

    @classmethod
    async def decode_json(cls, text_data):
        # A garbled frame is reported back instead of closing the socket.
        try:
            return await super().decode_json(text_data)
        except ValueError:
            return None

    async def receive_json(self, content, **kwargs):
        session = session_store.get_session(self.session_key)
        if session is None:
            await self.send_json({'type': 'error', 'code': 'SessionNotFound',
                                  'message': 'Session not found.'})
            return

        async with session.lock:
            try:
                outbox = self._apply(session, content)
            except GameError as exc:
                logger.debug("Rejected %r from %s: %s",
                             _message_type(content), self.channel_name, exc.code)
                outbox = [broadcaster.error(self.channel_name, exc)]
            await self._deliver(outbox)

    def _apply(self, session, content):
        """Apply one client message to the session and return its notices."""
        if not isinstance(content, dict):
            raise InvalidMessage('Messages must be JSON objects.')

        msg_type = content.get('type')
        conn_id  = self.channel_name
        if msg_type == 'join':
            is_game_master = content.get('isGameMaster', False)
            if not isinstance(is_game_master, bool):
                raise InvalidMessage('isGameMaster must be true or false.')
            return session.join(
                conn_id,
                content.get('name'),
                is_game_master=is_game_master,
                passphrase_ok=(not is_game_master) or _passphrase_ok(content.get('password')),
            )
        elif msg_type == 'guess':
            guess = content.get('guess', content)
            return session.guess(conn_id, guess)
        elif msg_type == 'startNewGame': return session.start_new_game(conn_id)
        elif msg_type == 'endGame':      return session.end_game(conn_id)
        elif msg_type == 'resetScores':  return session.reset_scores(conn_id)
        raise InvalidMessage(f'Unknown message type: {msg_type!r}')

    # ----------------------------------------------------------------
    # Delivery
    # ----------------------------------------------------------------

    async def _deliver(self, outbox):
        for notice in outbox:
            message = {'type': 'session.event', 'payload': notice.payload}
            if notice.is_broadcast:
                await self.channel_layer.group_send(self.group_name, message)
            else:
                await self.channel_layer.send(notice.to, message)

    # ----------------------------------------------------------------
    # Channel layer message handlers (called by group_send / send)
    # ----------------------------------------------------------------

    async def session_event(self, event):
        await self.send_json(event['payload'])


# ---------------------------------------------------------------------------
# Module-level sync helpers
# ---------------------------------------------------------------------------

def _passphrase_ok(password) -> bool:
    """Check a master claim against GAME_MASTER_PASSPHRASE.

    An empty setting means no passphrase is configured and every claim
    passes this check.
    """
    expected = settings.GAME_MASTER_PASSPHRASE
    if not expected:
        return True
    if not isinstance(password, str):
        return False
    return hmac.compare_digest(password.encode(), expected.encode())


def _message_type(content):
    return content.get('type') if isinstance(content, dict) else None
