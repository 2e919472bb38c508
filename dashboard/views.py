from django.views.decorators.http import require_http_methods

from core.backend import Backend
from core.http import page_response
from core.gate import protected

from . import services


@require_http_methods(["GET"])
@protected()
async def dashboard_summary(request):
    session = request.desk_session
    principal = session.principal

    stats, tickets = await services.load_stats(Backend(), principal, request.notifier)

    return page_response(request, {
        "user": principal.as_dict(),
        "stats": stats,
        "quick_actions": services.quick_actions(session),
        "navigation": services.navigation(session, request.path),
        "recent_tickets": services.recent_tickets(tickets),
    })
