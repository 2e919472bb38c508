from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "role", "created_at")
    search_fields = ("email", "name")
    list_filter = ("role",)
    exclude = ("password",)
