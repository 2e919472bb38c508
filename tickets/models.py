from django.db import models

from core import constants
from users.models import User


class Ticket(models.Model):

    PRIORITY_CHOICES = constants.choices(constants.PRIORITIES)
    STATUS_CHOICES = constants.choices(constants.TICKET_STATUSES)
    CATEGORY_CHOICES = [(c, c) for c in constants.TICKET_CATEGORIES]

    creator = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='tickets'
    )
    assignee = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_tickets'
    )

    title = models.CharField(max_length=200)
    description = models.TextField()
    priority = models.CharField(max_length=20, choices=PRIORITY_CHOICES, default='MEDIUM')
    category = models.CharField(max_length=50, choices=CATEGORY_CHOICES, default='Other')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='OPEN')

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"#{self.id} {self.title} ({self.status})"
