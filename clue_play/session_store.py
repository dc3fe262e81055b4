"""
clue_play/session_store.py

In-process registry of game sessions, keyed by session key.

The server hosts one session (``settings.CLUE_SESSION_KEY``), created by
``CluePlayConfig.ready()`` at process start and dropped with the process.
Consumers and views look it up here and hand it to the engine explicitly;
nothing in the engine reaches for module-level state.

Sessions are kept in a module-level dict protected by a threading.Lock().
Lock acquisition is fast (microseconds), making it safe to call from both
sync (HTTP views) and async (WS consumers) code without blocking the
event loop.
"""

import threading

from clue_play.engine.game_session import GameSession

_sessions: dict = {}
_lock = threading.Lock()


def create_session(session_key: str, session: GameSession) -> GameSession:
    """Register ``session`` under ``session_key``, replacing any previous one."""
    with _lock:
        _sessions[session_key] = session
    return session


def get_session(session_key: str) -> GameSession | None:
    """Return the session, or None if not found."""
    with _lock:
        return _sessions.get(session_key)


def get_or_create_session(session_key: str, factory) -> GameSession:
    """Return the session for ``session_key``, building it with ``factory`` if absent."""
    with _lock:
        session = _sessions.get(session_key)
        if session is None:
            session = factory(session_key)
            _sessions[session_key] = session
        return session


def delete_session(session_key: str) -> None:
    """Remove a session from the store."""
    with _lock:
        _sessions.pop(session_key, None)
