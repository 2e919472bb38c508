import logging

from django.db import IntegrityError
from django.db.models import Count

from core.errors import NotFound, ValidationError, text
from core.roles import Role

from .models import User

logger = logging.getLogger(__name__)


def user_ref(user):
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "email": user.email}


def user_record(user):
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "role": user.role,
        "created_at": user.created_at,
        "ticket_count": getattr(user, "ticket_count", 0),
        "asset_count": getattr(user, "asset_count", 0),
    }


def _parse_id(value, what="user"):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {what} id: {value!r}") from None


async def get_user(user_id):
    try:
        return await User.objects.aget(id=_parse_id(user_id))
    except User.DoesNotExist:
        raise NotFound("User not found") from None


async def fetch_users():
    users = User.objects.annotate(
        ticket_count=Count("tickets", distinct=True),
        asset_count=Count("assets", distinct=True),
    ).order_by("-created_at", "-id")
    return [user_record(u) async for u in users]


async def fetch_assignees(role=None):
    users = User.objects.order_by("name", "id")
    if role is not None:
        users = users.filter(role=Role.parse(role).value)
    return [user_ref(u) async for u in users]


async def update_user_role(user_id, role):
    try:
        role = Role.parse(role)
    except ValueError as exc:
        raise ValidationError(str(exc)) from None

    user = await get_user(user_id)
    user.role = role.value
    await user.asave(update_fields=["role"])
    logger.info("User %s role set to %s", user.id, role.value)
    return user_record(user)


async def create_user(name, email, password, role=Role.END_USER.value):
    name = text(name, "name")
    email = text(email, "email").lower()
    if password is not None and not isinstance(password, str):
        raise ValidationError("password must be a string")
    if not name or not email or not password:
        raise ValidationError("name, email and password are required")
    try:
        role = Role.parse(role)
    except ValueError as exc:
        raise ValidationError(str(exc)) from None

    if await User.objects.filter(email=email).aexists():
        raise ValidationError("A user with this email already exists")

    user = User(name=name, email=email, role=role.value)
    user.set_password(password)
    try:
        await user.asave()
    except IntegrityError:
        raise ValidationError("A user with this email already exists") from None
    logger.info("Created user %s (%s)", user.id, role.value)
    return user_record(user)


async def authenticate(email, password):
    """Return the matching user, or None when the credentials are wrong."""
    if not isinstance(email, str) or not isinstance(password, str):
        return None
    email = email.strip().lower()
    if not email or not password:
        return None
    user = await User.objects.filter(email=email).afirst()
    if user is None or not user.check_password(password):
        return None
    return user
