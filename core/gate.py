import functools
from enum import Enum

from django.http import JsonResponse

from .roles import Role
from .strings import COMMON


class GateDecision(str, Enum):
    LOADING = "loading"
    LOGIN_REQUIRED = "login_required"
    ACCESS_DENIED = "access_denied"
    ALLOWED = "allowed"


PLACEHOLDER_MESSAGES = {
    GateDecision.LOADING: COMMON["loading"],
    GateDecision.LOGIN_REQUIRED: COMMON["login_required"],
    GateDecision.ACCESS_DENIED: COMMON["access_denied"],
}

PLACEHOLDER_STATUS = {
    GateDecision.LOADING: 503,
    GateDecision.LOGIN_REQUIRED: 401,
    GateDecision.ACCESS_DENIED: 403,
}


def evaluate(session, required_role=None):
    """Decide what a gated view may show for ``session``."""
    if session.is_loading:
        return GateDecision.LOADING

    principal = session.principal
    if principal is None:
        return GateDecision.LOGIN_REQUIRED

    if required_role is not None and principal.role is not Role.parse(required_role):
        return GateDecision.ACCESS_DENIED

    return GateDecision.ALLOWED


def placeholder(decision):
    return {"gate": decision.value, "message": str(PLACEHOLDER_MESSAGES[decision])}


def render(session, children, required_role=None, fallback=None):
    """
    Return ``children`` when the gate opens, otherwise a fallback.

    ``children`` may be a callable so that protected content is only built
    when it is going to be shown. While the session is pending the loading
    placeholder is returned even if a fallback is given.
    """
    decision = evaluate(session, required_role)
    if decision is GateDecision.ALLOWED:
        return children() if callable(children) else children
    if decision is GateDecision.LOADING:
        return placeholder(decision)
    if fallback is not None:
        return fallback
    return placeholder(decision)


def protected(required_role=None):
    """Gate an async view on the caller's session and, optionally, role."""

    def decorator(view):
        @functools.wraps(view)
        async def wrapper(request, *args, **kwargs):
            session = request.desk_session
            await session.resolve()

            decision = evaluate(session, required_role)
            if decision is not GateDecision.ALLOWED:
                return JsonResponse(placeholder(decision), status=PLACEHOLDER_STATUS[decision])

            return await view(request, *args, **kwargs)

        return wrapper

    return decorator
