"""
List pages with a live text filter.

A ``ListView`` fetches its collection once per mount (or per change of
principal), keeps the result, and filters it in memory as the query changes.
States::

    LOADING -> LOADED | EMPTY | NO_MATCH

Fetches run as asyncio tasks owned by the view. ``unmount()`` cancels the
one in flight, and a fetch that was superseded or outlived its view never
writes state.
"""
import asyncio
import logging
from enum import Enum

from django.utils.timesince import timesince

from . import constants, strings
from .notifications import MESSAGES
from .roles import Role

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


class ViewState(str, Enum):
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    NO_MATCH = "no_match"


def lookup(record, path):
    """Follow a dotted ``path`` through nested dicts; missing links give None."""
    value = record
    for key in path.split("."):
        if value is None:
            return None
        value = value.get(key)
    return value


def matches(record, query, fields):
    needle = query.strip().lower()
    if not needle:
        return True
    for field in fields:
        value = lookup(record, field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_records(records, query, fields):
    """Records where ``query`` is a case-insensitive substring of any of ``fields``."""
    if not (query or "").strip():
        return list(records)
    return [r for r in records if matches(r, query, fields)]


def preview(text, length=PREVIEW_LENGTH):
    text = text or ""
    if len(text) > length:
        return f"{text[:length]}..."
    return text


def since(moment):
    if moment is None:
        return ""
    return f"{timesince(moment)} ago"


class ListView:
    search_fields = ()
    texts = strings.COMMON
    load_error = MESSAGES["GENERIC_ERROR"]
    label = "records"

    def __init__(self, backend, notifier, principal=None):
        self.backend = backend
        self.notifier = notifier
        self.principal = principal
        self.query = ""
        self._items = []
        self._loading = True
        self._mounted = False
        self._generation = 0
        self._task = None

    async def fetch(self):
        raise NotImplementedError

    # lifecycle

    def mount(self):
        self._mounted = True
        return self._start_fetch()

    def unmount(self):
        self._mounted = False
        if self._task is not None and not self._task.done():
            self._task.cancel()

    def rescope(self, principal):
        """Switch to another principal; refetch if it actually changed."""
        if principal == self.principal:
            return self._task
        self.principal = principal
        if not self._mounted:
            return None
        return self._start_fetch()

    async def load(self):
        self.mount()
        await self._settle()

    async def refresh(self):
        if not self._mounted:
            self._mounted = True
        self._start_fetch()
        await self._settle()

    async def __aenter__(self):
        await self.load()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.unmount()
        return False

    def _start_fetch(self):
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._generation += 1
        self._loading = True
        self._task = asyncio.ensure_future(self._run_fetch(self._generation))
        return self._task

    def _is_current(self, generation):
        return self._mounted and generation == self._generation

    async def _run_fetch(self, generation):
        try:
            items = await self.fetch()
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if not self._is_current(generation):
                return
            logger.exception("Failed to load %s", self.label)
            self.notifier.error(self.load_error, str(exc))
            items = []

        if not self._is_current(generation):
            logger.debug("Dropping stale %s fetch #%s", self.label, generation)
            return
        self._items = list(items)
        self._loading = False

    async def _settle(self):
        # wait out superseded fetches until the newest one finishes
        while self._task is not None and not self._task.done():
            task = self._task
            try:
                await task
            except asyncio.CancelledError:
                if task is self._task:
                    raise

    # derived state

    def set_query(self, query):
        self.query = query if isinstance(query, str) else ""

    @property
    def items(self):
        return list(self._items)

    @property
    def visible(self):
        return filter_records(self._items, self.query, self.search_fields)

    @property
    def state(self):
        if self._loading:
            return ViewState.LOADING
        if not self._items:
            return ViewState.EMPTY
        if self.query.strip() and not self.visible:
            return ViewState.NO_MATCH
        return ViewState.LOADED

    def message(self, state):
        if state is ViewState.LOADING:
            return str(self.texts["loading"])
        if state is ViewState.EMPTY:
            return str(self.texts["empty"])
        if state is ViewState.NO_MATCH:
            return str(self.texts["no_match"])
        return ""

    def serialize(self, item):
        return dict(item)

    def controls(self):
        return None

    def render(self):
        state = self.state
        payload = {
            "state": state.value,
            "message": self.message(state),
            "query": self.query,
            "search_placeholder": str(self.texts.get("search_placeholder", "")),
            "total": len(self._items),
            "items": [],
        }
        if state in (ViewState.LOADED, ViewState.NO_MATCH):
            payload["items"] = [self.serialize(item) for item in self.visible]
        controls = self.controls()
        if controls is not None:
            payload["controls"] = controls
        return payload


def ticket_row(item):
    """A ticket record with the display fields the list and dashboard show."""
    data = dict(item)
    data["description_preview"] = preview(item.get("description"))
    data["priority_badge"] = constants.badge(constants.PRIORITIES, item.get("priority"))
    data["status_badge"] = constants.badge(constants.TICKET_STATUSES, item.get("status"))
    data["created_since"] = since(item.get("created_at"))
    assignee = item.get("assignee")
    data["assignee_value"] = str(assignee["id"]) if assignee else constants.UNASSIGNED
    return data


def _assignee_options(refs):
    return [{"value": constants.UNASSIGNED, "label": str(strings.COMMON["unassigned"])}] + [
        {"value": str(ref["id"]), "label": ref["name"]} for ref in refs
    ]


async def _load_assignees(view, role=None):
    """Assignee refs for an admin's controls; empty (Unassigned only) if loading fails."""
    try:
        return await view.backend.fetch_assignees(role=role)
    except Exception as exc:
        logger.exception("Failed to load assignees for %s", view.label)
        view.notifier.error("Failed to load assignees", str(exc))
        return []


class TicketListView(ListView):
    search_fields = ("title", "description", "category", "creator.name")
    texts = strings.TICKETS
    load_error = "Failed to load tickets"
    label = "tickets"

    def __init__(self, backend, notifier, principal=None):
        super().__init__(backend, notifier, principal)
        self.assignees = []

    async def fetch(self):
        principal = self.principal
        tickets = await self.backend.fetch_tickets(principal.id, principal.role)
        if principal.is_admin:
            self.assignees = await _load_assignees(self, role="ADMIN")
        else:
            self.assignees = []
        return tickets

    def serialize(self, item):
        return ticket_row(item)

    def controls(self):
        if self.principal is None or not self.principal.is_admin:
            return None
        return {
            "statuses": constants.options(constants.TICKET_STATUSES),
            "assignees": _assignee_options(self.assignees),
        }


class AssetListView(ListView):
    search_fields = ("name", "asset_type", "serial_number", "assignee.name")
    texts = strings.ASSETS
    load_error = "Failed to load assets"
    label = "assets"

    def __init__(self, backend, notifier, principal=None):
        super().__init__(backend, notifier, principal)
        self.assignees = []

    async def fetch(self):
        assets = await self.backend.fetch_assets()
        if self.principal is not None and self.principal.is_admin:
            self.assignees = await _load_assignees(self)
        else:
            self.assignees = []
        return assets

    def serialize(self, item):
        data = dict(item)
        data["status_badge"] = constants.badge(constants.ASSET_STATUSES, item.get("status"))
        data["created_since"] = since(item.get("created_at"))
        assignee = item.get("assignee")
        data["assignee_value"] = str(assignee["id"]) if assignee else constants.UNASSIGNED
        return data

    def controls(self):
        if self.principal is None or not self.principal.is_admin:
            return None
        return {"assignees": _assignee_options(self.assignees)}


class UserListView(ListView):
    search_fields = ("name", "email", "role")
    texts = strings.USERS
    load_error = "Failed to load users"
    label = "users"

    async def fetch(self):
        return await self.backend.fetch_users()

    def serialize(self, item):
        data = dict(item)
        try:
            role = Role.parse(item.get("role"))
            data["role_badge"] = {"value": role.value, "label": role.label, "color": role.color}
        except ValueError:
            data["role_badge"] = {"value": item.get("role"), "label": item.get("role"), "color": constants.DEFAULT_COLOR}
        data["created_since"] = since(item.get("created_at"))
        return data

    def controls(self):
        if self.principal is None or not self.principal.is_admin:
            return None
        return {"roles": [{"value": value, "label": label} for value, label in Role.choices()]}
