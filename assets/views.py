import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.backend import Backend
from core.errors import DeskError
from core.gate import protected
from core.http import page_response, read_json
from core.listing import AssetListView
from core.mutations import MutationFlow
from core.notifications import MESSAGES
from core.roles import Role

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
@protected()
async def list_assets(request):
    principal = request.desk_session.principal
    async with AssetListView(Backend(), request.notifier, principal) as view:
        view.set_query(request.GET.get("q", ""))
        return page_response(request, view.render())


@csrf_exempt
@require_http_methods(["POST"])
@protected()
async def create_asset(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    try:
        asset = await Backend().create_asset(
            name=data.get("name"),
            asset_type=data.get("asset_type"),
            serial_number=data.get("serial_number"),
            description=data.get("description", ""),
            purchase_date=data.get("purchase_date"),
        )
    except DeskError as exc:
        logger.warning("Create asset failed: %s", exc)
        request.notifier.error(MESSAGES["ASSET_ERROR"], str(exc))
        return page_response(request, {"error": str(exc)}, status=exc.status)

    request.notifier.success(MESSAGES["ASSET_CREATED"])
    return page_response(request, {
        "message": MESSAGES["ASSET_CREATED"],
        "asset_id": asset["id"],
    }, status=201)


@csrf_exempt
@require_http_methods(["PUT"])
@protected(required_role=Role.ADMIN)
async def assign_asset(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    asset_id = data.get("asset_id")
    if not asset_id or "assignee_id" not in data:
        return JsonResponse({"error": "asset_id and assignee_id are required"}, status=400)

    principal = request.desk_session.principal
    async with AssetListView(Backend(), request.notifier, principal) as view:
        view.set_query(data.get("q", ""))
        updated = await MutationFlow(view, request.notifier).assign_asset(asset_id, data["assignee_id"])
        payload = view.render()
        payload["updated"] = updated
        return page_response(request, payload, status=200 if updated else 400)
