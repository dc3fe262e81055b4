"""
clue_portal/settings/test.py

Settings for the pytest suite: in-memory channel layer and a fixed
game-master passphrase.
"""

from .base import *

DEBUG = False
SECRET_KEY = 'test-secret-key'
ALLOWED_HOSTS = ['localhost', 'testserver']

GAME_MASTER_PASSPHRASE = 'clue-master'
CLUE_SESSION_KEY = 'main'

CHANNEL_LAYERS = {
    'default': {
        'BACKEND': 'channels.layers.InMemoryChannelLayer',
    },
}
