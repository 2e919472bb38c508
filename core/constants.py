"""
Display metadata for the closed value sets used across the desk.

Each table maps a stored value to its label and badge colour. Lookups go
through ``badge()`` so that a value the table does not know (old rows, bad
imports) degrades to a grey badge instead of failing.
"""

DEFAULT_COLOR = "bg-gray-100 text-gray-800"

PRIORITIES = {
    "LOW": {"label": "Low", "color": "bg-green-100 text-green-800"},
    "MEDIUM": {"label": "Medium", "color": "bg-yellow-100 text-yellow-800"},
    "HIGH": {"label": "High", "color": "bg-orange-100 text-orange-800"},
    "CRITICAL": {"label": "Critical", "color": "bg-red-100 text-red-800"},
}

TICKET_STATUSES = {
    "OPEN": {"label": "Open", "color": "bg-blue-100 text-blue-800"},
    "IN_PROGRESS": {"label": "In Progress", "color": "bg-yellow-100 text-yellow-800"},
    "RESOLVED": {"label": "Resolved", "color": "bg-green-100 text-green-800"},
    "CLOSED": {"label": "Closed", "color": "bg-gray-100 text-gray-800"},
}

ASSET_STATUSES = {
    "AVAILABLE": {"label": "Available", "color": "bg-green-100 text-green-800"},
    "ASSIGNED": {"label": "Assigned", "color": "bg-blue-100 text-blue-800"},
    "UNDER_MAINTENANCE": {"label": "Under Maintenance", "color": "bg-yellow-100 text-yellow-800"},
    "RETIRED": {"label": "Retired", "color": "bg-gray-100 text-gray-800"},
}

TICKET_CATEGORIES = [
    "Hardware",
    "Software",
    "Network",
    "Access",
    "Other",
]

ASSET_TYPES = [
    "Computer",
    "Monitor",
    "Keyboard",
    "Mouse",
    "Network Equipment",
    "Printer",
    "Other",
]

# Sentinel the assignment selects send for "nobody"
UNASSIGNED = ""


def badge(table, value):
    meta = table.get(value)
    if meta is None:
        return {"value": value, "label": value, "color": DEFAULT_COLOR}
    return {"value": value, "label": meta["label"], "color": meta["color"]}


def choices(table):
    """Django ``choices`` for a metadata table."""
    return [(value, meta["label"]) for value, meta in table.items()]


def options(table):
    return [{"value": value, "label": meta["label"]} for value, meta in table.items()]
