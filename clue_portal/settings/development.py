"""
clue_portal/settings/development.py

Development-environment settings.
Uses the in-memory channel layer so no Redis is needed to get started.
Switch to Redis by setting USE_REDIS=true in .env.
"""

from .base import *
from decouple import config

DEBUG = True
ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0']

# ---------------------------------------------------------------------------
# Channel Layer
# ---------------------------------------------------------------------------

_use_redis = config('USE_REDIS', default=False, cast=bool)

if _use_redis:
    CHANNEL_LAYERS = {
        'default': {
            'BACKEND': 'channels_redis.core.RedisChannelLayer',
            'CONFIG': {
                'hosts': [config('REDIS_URL', default='redis://127.0.0.1:6379')],
            },
        },
    }

# ---------------------------------------------------------------------------
# Logging: show engine debug output (including each round's solution)
# ---------------------------------------------------------------------------

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {'class': 'logging.StreamHandler'},
    },
    'root': {
        'handlers': ['console'],
        'level': 'DEBUG',
    },
    'loggers': {
        'daphne': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'asyncio': {
            'level': 'WARNING',
        },
    },
}
