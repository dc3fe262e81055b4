"""clue_play/views.py  –  HTTP views for the play component."""

from django.conf import settings
from django.http import JsonResponse
from django.views.decorators.http import require_GET

from clue_play import session_store


@require_GET
def session_status(request):
    """Public summary of the running session.

    Reports the phase, how many players are seated, whether the
    game-master slot is taken and whose turn is shown.  The solution is
    never included.
    """
    session = session_store.get_session(settings.CLUE_SESSION_KEY)
    if session is None:
        return JsonResponse({'status': 'error', 'message': 'Session not found.'}, status=404)
    return JsonResponse(session.status())


@require_GET
def health(request):
    """Health check endpoint."""
    return JsonResponse({'status': 'ok', 'service': 'clue-portal'})
