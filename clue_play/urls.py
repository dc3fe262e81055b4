"""clue_play/urls.py  –  HTTP views (session status)."""

from django.urls import path
from . import views

app_name = 'clue_play'

urlpatterns = [
    path('status/', views.session_status, name='status'),
]
