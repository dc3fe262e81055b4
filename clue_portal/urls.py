"""
clue_portal/urls.py  –  Root URL configuration
"""

from django.urls import path, include

from clue_play import views as play_views

urlpatterns = [
    # Liveness probe
    path('health/', play_views.health, name='health'),

    # Play component: session status
    path('play/', include('clue_play.urls')),
]
