from django.contrib import admin
from .models import Ticket


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ("id", "title", "priority", "category", "status", "creator", "assignee", "created_at")
    list_filter = ("priority", "category", "status")
    search_fields = ("title", "description", "creator__name", "creator__email")
