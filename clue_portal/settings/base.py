"""
clue_portal/settings/base.py

Base settings shared by all environments.
Environment-specific overrides live in development.py, production.py
and test.py.  Sensitive values are read from a .env file via
python-decouple.
"""

from pathlib import Path
from decouple import config, Csv

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

BASE_DIR = Path(__file__).resolve().parent.parent.parent   # repository root

# ---------------------------------------------------------------------------
# Security
# ---------------------------------------------------------------------------

SECRET_KEY = config('DJANGO_SECRET_KEY', default='CHANGE-ME-IN-PRODUCTION')
DEBUG = config('DJANGO_DEBUG', default=False, cast=bool)
ALLOWED_HOSTS = config('DJANGO_ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

# ---------------------------------------------------------------------------
# Game session
# ---------------------------------------------------------------------------

# Shared passphrase for claiming the game-master role.  Empty = no check.
GAME_MASTER_PASSPHRASE = config('GAME_MASTER_PASSPHRASE', default='')

# Key of the single session hosted by this process.
CLUE_SESSION_KEY = config('CLUE_SESSION_KEY', default='main')

PLAYER_NAME_MAX_LEN = config('PLAYER_NAME_MAX_LEN', default=24, cast=int)

# ---------------------------------------------------------------------------
# Application definition
# ---------------------------------------------------------------------------

INSTALLED_APPS = [
    # ASGI server (must precede staticfiles/runserver overrides)
    'daphne',

    # Third-party
    'channels',

    # Whodunit apps
    'clue_play',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'clue_portal.urls'

# ASGI application (Daphne uses this entry point)
ASGI_APPLICATION = 'clue_portal.asgi.application'

# No database: session state lives in process memory only.
DATABASES = {}

# ---------------------------------------------------------------------------
# Internationalisation
# ---------------------------------------------------------------------------

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

# ---------------------------------------------------------------------------
# Channel Layer
# ---------------------------------------------------------------------------

# In-memory channel layer: works without Redis, single-process only.
CHANNEL_LAYERS = {
    'default': {
        'BACKEND': 'channels.layers.InMemoryChannelLayer',
    },
}
