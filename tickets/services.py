import logging

from asgiref.sync import sync_to_async
from django.db.models import Q

from core import constants
from core.errors import NotFound, ValidationError, text
from core.roles import Role
from users.models import User
from users.services import user_ref

from .models import Ticket
from .tasks import queue_ticket_update

logger = logging.getLogger(__name__)


def ticket_record(ticket):
    return {
        "id": ticket.id,
        "title": ticket.title,
        "description": ticket.description,
        "priority": ticket.priority,
        "category": ticket.category,
        "status": ticket.status,
        "created_at": ticket.created_at,
        "creator": user_ref(ticket.creator),
        "assignee": user_ref(ticket.assignee),
    }


def _tickets():
    return Ticket.objects.select_related("creator", "assignee").order_by("-created_at", "-id")


async def _get_ticket(ticket_id):
    try:
        ticket_id = int(ticket_id)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid ticket id: {ticket_id!r}") from None
    try:
        return await _tickets().aget(id=ticket_id)
    except Ticket.DoesNotExist:
        raise NotFound("Ticket not found") from None


async def fetch_tickets(caller_id, caller_role):
    """Tickets visible to the caller: everything for admins, their own otherwise."""
    role = Role.parse(caller_role)
    tickets = _tickets()
    if role is Role.ADMIN:
        pass
    elif role is Role.END_USER:
        tickets = tickets.filter(creator_id=caller_id)
    else:
        raise ValueError(f"Unhandled role: {role!r}")
    return [ticket_record(t) async for t in tickets]


async def update_ticket_status(ticket_id, status):
    if not isinstance(status, str) or status not in constants.TICKET_STATUSES:
        valid_statuses = list(constants.TICKET_STATUSES)
        raise ValidationError(f"Invalid status. Valid statuses are {valid_statuses}")

    ticket = await _get_ticket(ticket_id)
    if ticket.status == status:
        return ticket_record(ticket)

    ticket.status = status
    await ticket.asave(update_fields=["status", "updated_at"])
    logger.info("Ticket %s status set to %s", ticket.id, status)
    await sync_to_async(queue_ticket_update)(
        ticket.id, f"Status changed to {constants.TICKET_STATUSES[status]['label']}."
    )
    return ticket_record(ticket)


async def assign_ticket(ticket_id, assignee_id):
    """Assign a ticket; ``""`` as ``assignee_id`` unassigns it."""
    if assignee_id is None:
        raise ValidationError('assignee_id must be a user id, or "" to unassign')

    ticket = await _get_ticket(ticket_id)
    if assignee_id == constants.UNASSIGNED:
        assignee = None
    else:
        try:
            assignee = await User.objects.aget(id=int(assignee_id))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid assignee id: {assignee_id!r}") from None
        except User.DoesNotExist:
            raise NotFound("Assignee not found") from None

    ticket.assignee = assignee
    await ticket.asave(update_fields=["assignee", "updated_at"])

    if assignee is None:
        logger.info("Ticket %s unassigned", ticket.id)
        message = "Your ticket is no longer assigned."
    else:
        logger.info("Ticket %s assigned to user %s", ticket.id, assignee.id)
        message = f"Your ticket was assigned to {assignee.name}."
    await sync_to_async(queue_ticket_update)(ticket.id, message)
    return ticket_record(ticket)


async def search_tickets(query):
    """Server-side search; a blank query finds nothing."""
    needle = (query or "").strip()
    if not needle:
        return []
    tickets = _tickets().filter(
        Q(title__icontains=needle)
        | Q(description__icontains=needle)
        | Q(category__icontains=needle)
        | Q(creator__name__icontains=needle)
    )
    return [ticket_record(t) async for t in tickets]


async def create_ticket(creator_id, title, description, priority="MEDIUM", category="Other"):
    title = text(title, "title")
    description = text(description, "description")
    priority = text(priority, "priority", "MEDIUM")
    category = text(category, "category", "Other")
    if not title or not description:
        raise ValidationError("title and description are required")
    if priority not in constants.PRIORITIES:
        raise ValidationError(f"Invalid priority. Valid priorities are {list(constants.PRIORITIES)}")
    if category not in constants.TICKET_CATEGORIES:
        raise ValidationError(f"Invalid category. Valid categories are {constants.TICKET_CATEGORIES}")

    try:
        creator = await User.objects.aget(id=creator_id)
    except User.DoesNotExist:
        raise NotFound("Creator not found") from None

    ticket = await Ticket.objects.acreate(
        creator=creator,
        title=title,
        description=description,
        priority=priority,
        category=category,
    )
    logger.info("Ticket %s created by user %s", ticket.id, creator.id)
    return ticket_record(ticket)
