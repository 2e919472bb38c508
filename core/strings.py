"""
User-facing strings for pages and placeholders.

Translated through Django's i18n machinery; the active language follows
``LocaleMiddleware``.
"""
from django.utils.translation import gettext_lazy as _

COMMON = {
    "search": _("Search"),
    "loading": _("Loading..."),
    "login_required": _("Please log in to continue"),
    "access_denied": _("Access denied. Insufficient permissions."),
    "unassigned": _("Unassigned"),
}

TICKETS = {
    "loading": _("Loading tickets..."),
    "empty": _("No tickets found. Create your first ticket to get started."),
    "no_match": _("No tickets match your search."),
    "search_placeholder": _("Search tickets by title, description, category, or user..."),
    "clear_search": _("Clear search"),
}

ASSETS = {
    "loading": _("Loading assets..."),
    "empty": _("No assets found. Add your first asset to get started."),
    "no_match": _("No assets match your search."),
    "search_placeholder": _("Search assets by name, type, serial number, or user..."),
    "clear_search": _("Clear search"),
}

USERS = {
    "loading": _("Loading users..."),
    "empty": _("No users found. Add your first user to get started."),
    "no_match": _("No users match your search."),
    "search_placeholder": _("Search users by name, email, or role..."),
    "clear_search": _("Clear search"),
}
