"""
clue_play/routing.py

WebSocket URL routing for the whodunit session.
"""

from django.urls import re_path
from .consumers import game_consumer

websocket_urlpatterns = [
    re_path(r'ws/game/$', game_consumer.GameConsumer.as_asgi()),
]
