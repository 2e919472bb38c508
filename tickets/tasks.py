import logging

from celery import shared_task
from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

from .models import Ticket

logger = logging.getLogger(__name__)


@shared_task
def notify_ticket_update(ticket_id, message):
    """E-mail the ticket's creator about a change made by the desk."""
    ticket = Ticket.objects.select_related("creator").filter(id=ticket_id).first()
    if ticket is None:
        return "Ticket gone"

    email = (ticket.creator.email or "").strip()
    if not email:
        return "No recipient"

    send_mail(
        f"Ticket #{ticket.id} updated",
        f"{message}\n\nTitle: {ticket.title}\nStatus: {ticket.get_status_display()}",
        getattr(settings, "DEFAULT_FROM_EMAIL", None),
        [email],
        fail_silently=False
    )
    return f"Notified {email}"


def queue_ticket_update(ticket_id, message):
    """Send ``notify_ticket_update`` once the current transaction commits."""

    def _send():
        try:
            notify_ticket_update.delay(ticket_id, message)
        except Exception:
            logger.exception("Could not queue update e-mail for ticket %s", ticket_id)

    transaction.on_commit(_send)
