from django.apps import AppConfig
from django.conf import settings


def build_session(session_key):
    from clue_play.engine.game_session import GameSession
    return GameSession(session_key, name_max_len=settings.PLAYER_NAME_MAX_LEN)


class CluePlayConfig(AppConfig):
    name = 'clue_play'
    label = 'clue_play'
    verbose_name = 'Whodunit Play Engine'

    def ready(self):
        from clue_play import session_store
        session_store.get_or_create_session(settings.CLUE_SESSION_KEY, build_session)
