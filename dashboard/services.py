import asyncio
import logging

from core import gate
from core.listing import ticket_row
from core.roles import Role

logger = logging.getLogger(__name__)

RECENT_TICKETS = 5

NAVIGATION = [
    {"name": "Dashboard", "href": "/dashboard/", "admin_only": False},
    {"name": "Tickets", "href": "/tickets/list/", "admin_only": False},
    {"name": "Assets", "href": "/assets/list/", "admin_only": False},
    {"name": "Users", "href": "/users/list/", "admin_only": True},
    {"name": "Settings", "href": "/settings/", "admin_only": True},
]

QUICK_ACTIONS = [
    {"name": "Create Ticket", "action": "/tickets/create/", "admin_only": False},
    {"name": "Add Asset", "action": "/assets/create/", "admin_only": False},
    {"name": "Add User", "action": "/users/create/", "admin_only": True},
]


def _visible(items, session):
    out = []
    for item in items:
        required = Role.ADMIN if item["admin_only"] else None
        if gate.evaluate(session, required) is gate.GateDecision.ALLOWED:
            out.append({k: v for k, v in item.items() if k != "admin_only"})
    return out


def navigation(session, current_path=""):
    return [
        dict(item, active=item["href"] == current_path)
        for item in _visible(NAVIGATION, session)
    ]


def quick_actions(session):
    return _visible(QUICK_ACTIONS, session)


def _caption(count, when_zero, otherwise):
    return when_zero if count == 0 else otherwise


def empty_stats():
    return summarize([], [])


def summarize(tickets, assets):
    total_tickets = len(tickets)
    open_tickets = sum(1 for t in tickets if t["status"] == "OPEN")
    total_assets = len(assets)
    assigned_assets = sum(1 for a in assets if a["status"] == "ASSIGNED")
    return {
        "total_tickets": {
            "value": total_tickets,
            "caption": _caption(total_tickets, "No tickets yet", f"{open_tickets} open"),
        },
        "open_tickets": {
            "value": open_tickets,
            "caption": _caption(open_tickets, "No open tickets", "Requires attention"),
        },
        "total_assets": {
            "value": total_assets,
            "caption": _caption(total_assets, "No assets yet", "Hardware & software"),
        },
        "assigned_assets": {
            "value": assigned_assets,
            "caption": _caption(assigned_assets, "No assigned assets", "Currently in use"),
        },
    }


async def load_stats(backend, principal, notifier):
    """Ticket and asset counters for the dashboard; zeroes if either fetch fails."""
    results = await asyncio.gather(
        backend.fetch_tickets(principal.id, principal.role),
        backend.fetch_assets(),
        return_exceptions=True,
    )
    failures = [r for r in results if isinstance(r, Exception)]
    if failures:
        for exc in failures:
            logger.error("Failed to load dashboard stats for user %s", principal.id, exc_info=exc)
        notifier.error("Failed to load dashboard statistics", "Please refresh the page to try again")
        return empty_stats(), []
    tickets, assets = results
    return summarize(tickets, assets), tickets


def recent_tickets(tickets, limit=RECENT_TICKETS):
    return [ticket_row(t) for t in tickets[:limit]]
