from django.db import models

from core import constants
from users.models import User


class Asset(models.Model):

    STATUS_CHOICES = constants.choices(constants.ASSET_STATUSES)
    TYPE_CHOICES = [(t, t) for t in constants.ASSET_TYPES]

    name = models.CharField(max_length=100)
    asset_type = models.CharField(max_length=50, choices=TYPE_CHOICES)
    serial_number = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default='AVAILABLE'
    )
    assignee = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assets'
    )

    purchase_date = models.DateField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.serial_number} - {self.name}"
