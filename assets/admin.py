from django.contrib import admin
from .models import Asset


@admin.register(Asset)
class AssetAdmin(admin.ModelAdmin):
    list_display = ("serial_number", "name", "asset_type", "status", "assignee", "created_at")
    list_filter = ("asset_type", "status")
    search_fields = ("name", "serial_number", "assignee__name")
