import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.backend import Backend
from core.errors import DeskError
from core.gate import protected
from core.http import page_response, read_json
from core.listing import TicketListView
from core.mutations import MutationFlow
from core.notifications import MESSAGES
from core.roles import Role

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
@protected()
async def list_tickets(request):
    principal = request.desk_session.principal
    async with TicketListView(Backend(), request.notifier, principal) as view:
        view.set_query(request.GET.get("q", ""))
        return page_response(request, view.render())


@csrf_exempt
@require_http_methods(["POST"])
@protected()
async def create_ticket(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    principal = request.desk_session.principal
    try:
        ticket = await Backend().create_ticket(
            principal.id,
            title=data.get("title"),
            description=data.get("description"),
            priority=data.get("priority", "MEDIUM"),
            category=data.get("category", "Other"),
        )
    except DeskError as exc:
        logger.warning("Create ticket failed: %s", exc)
        request.notifier.error(MESSAGES["TICKET_ERROR"], str(exc))
        return page_response(request, {"error": str(exc)}, status=exc.status)

    request.notifier.success(MESSAGES["TICKET_CREATED"])
    return page_response(request, {
        "message": MESSAGES["TICKET_CREATED"],
        "ticket_id": ticket["id"],
    }, status=201)


@csrf_exempt
@require_http_methods(["PUT"])
@protected(required_role=Role.ADMIN)
async def update_ticket_status(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    ticket_id = data.get("ticket_id")
    new_status = data.get("status")
    if not ticket_id or not new_status:
        return JsonResponse({"error": "ticket_id and status are required"}, status=400)

    principal = request.desk_session.principal
    async with TicketListView(Backend(), request.notifier, principal) as view:
        view.set_query(data.get("q", ""))
        updated = await MutationFlow(view, request.notifier).change_ticket_status(ticket_id, new_status)
        payload = view.render()
        payload["updated"] = updated
        return page_response(request, payload, status=200 if updated else 400)


@csrf_exempt
@require_http_methods(["PUT"])
@protected(required_role=Role.ADMIN)
async def assign_ticket(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    ticket_id = data.get("ticket_id")
    if not ticket_id or "assignee_id" not in data:
        return JsonResponse({"error": "ticket_id and assignee_id are required"}, status=400)

    principal = request.desk_session.principal
    async with TicketListView(Backend(), request.notifier, principal) as view:
        view.set_query(data.get("q", ""))
        updated = await MutationFlow(view, request.notifier).assign_ticket(ticket_id, data["assignee_id"])
        payload = view.render()
        payload["updated"] = updated
        return page_response(request, payload, status=200 if updated else 400)


@require_http_methods(["GET"])
@protected(required_role=Role.ADMIN)
async def search_tickets(request):
    query = request.GET.get("q", "")
    try:
        results = await Backend().search_tickets(query)
    except Exception as exc:
        logger.exception("Ticket search failed for %r", query)
        request.notifier.error("Search failed", str(exc))
        results = []
    return page_response(request, {"query": query, "total": len(results), "tickets": results})
