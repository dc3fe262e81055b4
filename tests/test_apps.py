from django.apps import apps

from clue_play import session_store
from clue_play.apps import build_session
from clue_play.engine.game_session import PHASE_IDLE, GameSession


def test_build_session_uses_settings(settings):
    settings.PLAYER_NAME_MAX_LEN = 8
    session = build_session('spare')
    assert isinstance(session, GameSession)
    assert session.session_key == 'spare'
    assert session.phase == PHASE_IDLE
    assert session.players.name_max_len == 8


def test_ready_registers_the_configured_session(settings):
    session_store.delete_session(settings.CLUE_SESSION_KEY)
    apps.get_app_config('clue_play').ready()
    session = session_store.get_session(settings.CLUE_SESSION_KEY)
    assert session is not None
    assert session.session_key == settings.CLUE_SESSION_KEY


def test_ready_keeps_an_existing_session(settings):
    existing = session_store.create_session(settings.CLUE_SESSION_KEY, GameSession('main'))
    apps.get_app_config('clue_play').ready()
    assert session_store.get_session(settings.CLUE_SESSION_KEY) is existing
