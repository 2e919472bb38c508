import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.backend import Backend
from core.errors import DeskError
from core.gate import protected
from core.http import page_response, read_json
from core.listing import UserListView
from core.mutations import MutationFlow
from core.notifications import MESSAGES
from core.roles import Role

from . import services

logger = logging.getLogger(__name__)


@csrf_exempt
@require_http_methods(["POST"])
async def login_user(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    user = await services.authenticate(data.get("email"), data.get("password"))
    if user is None:
        request.notifier.error(MESSAGES["LOGIN_ERROR"])
        return page_response(request, {"error": MESSAGES["LOGIN_ERROR"]}, status=401)

    try:
        principal = await request.desk_session.login(user)
    except ValueError:
        logger.warning("Login refused for user %s with role %r", user.id, user.role)
        request.notifier.error(MESSAGES["LOGIN_ERROR"])
        return page_response(request, {"error": MESSAGES["LOGIN_ERROR"]}, status=401)

    request.notifier.success(MESSAGES["LOGIN_SUCCESS"])

    return page_response(request, {
        "message": "Login successful",
        "user": principal.as_dict(),
        "redirect_url": "/dashboard/",
    })


@csrf_exempt
@require_http_methods(["POST"])
@protected()
async def logout_user(request):
    await request.desk_session.logout()
    request.notifier.success(MESSAGES["LOGOUT_SUCCESS"])
    return page_response(request, {"message": "Logged out"})


@require_http_methods(["GET"])
@protected()
async def current_user(request):
    return page_response(request, {"user": request.desk_session.principal.as_dict()})


@require_http_methods(["GET"])
@protected(required_role=Role.ADMIN)
async def list_users(request):
    principal = request.desk_session.principal
    async with UserListView(Backend(), request.notifier, principal) as view:
        view.set_query(request.GET.get("q", ""))
        return page_response(request, view.render())


@csrf_exempt
@require_http_methods(["POST"])
@protected(required_role=Role.ADMIN)
async def create_user(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    try:
        user = await Backend().create_user(
            name=data.get("name"),
            email=data.get("email"),
            password=data.get("password"),
            role=data.get("role", Role.END_USER.value),
        )
    except DeskError as exc:
        logger.warning("Create user failed: %s", exc)
        request.notifier.error(MESSAGES["USER_ERROR"], str(exc))
        return page_response(request, {"error": str(exc)}, status=exc.status)

    request.notifier.success(MESSAGES["USER_CREATED"])
    return page_response(request, {"message": MESSAGES["USER_CREATED"], "user": user}, status=201)


@csrf_exempt
@require_http_methods(["PUT"])
@protected(required_role=Role.ADMIN)
async def update_user_role(request):
    data = read_json(request)
    if data is None:
        return JsonResponse({"error": "Invalid JSON"}, status=400)

    user_id = data.get("user_id")
    role = data.get("role")
    if not user_id or not role:
        return JsonResponse({"error": "user_id and role are required"}, status=400)

    principal = request.desk_session.principal
    async with UserListView(Backend(), request.notifier, principal) as view:
        updated = await MutationFlow(view, request.notifier).change_user_role(user_id, role)
        payload = view.render()
        payload["updated"] = updated
        return page_response(request, payload, status=200 if updated else 400)
