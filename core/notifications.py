import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger("servicedesk.notifications")


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


MESSAGES = {
    "TICKET_CREATED": "Ticket created successfully",
    "TICKET_UPDATED": "Ticket updated successfully",
    "TICKET_ASSIGNED": "Ticket assigned successfully",
    "TICKET_ERROR": "Failed to update ticket",

    "ASSET_CREATED": "Asset created successfully",
    "ASSET_UPDATED": "Asset updated successfully",
    "ASSET_ASSIGNED": "Asset assigned successfully",
    "ASSET_ERROR": "Failed to update asset",

    "USER_CREATED": "User created successfully",
    "USER_UPDATED": "User updated successfully",
    "USER_ERROR": "Failed to update user",

    "LOGIN_ERROR": "Invalid email or password",
    "LOGIN_SUCCESS": "Successfully logged in",
    "LOGOUT_SUCCESS": "Successfully logged out",

    "GENERIC_ERROR": "An error occurred. Please try again.",
    "LOADING": "Loading...",
}


@dataclass(frozen=True)
class Notification:
    severity: Severity
    message: str
    detail: Optional[str] = None

    def as_dict(self):
        return {"severity": self.severity.value, "message": self.message, "detail": self.detail}


class Notifier:
    """
    Collects the toasts produced while serving one request.

    ``notify`` is fire-and-forget: it logs, records and returns. Endpoints
    drain ``as_list()`` into the JSON payload.
    """

    def __init__(self):
        self._items = []

    def notify(self, severity, message, detail=None):
        severity = Severity(severity)
        note = Notification(severity, str(message), None if detail is None else str(detail))
        self._items.append(note)
        level = logging.ERROR if severity is Severity.ERROR else logging.INFO
        logger.log(level, "%s: %s%s", severity.value, note.message, f" ({note.detail})" if note.detail else "")
        return note

    def success(self, message, detail=None):
        return self.notify(Severity.SUCCESS, message, detail)

    def error(self, message, detail=None):
        return self.notify(Severity.ERROR, message, detail)

    def info(self, message, detail=None):
        return self.notify(Severity.INFO, message, detail)

    def warning(self, message, detail=None):
        return self.notify(Severity.WARNING, message, detail)

    @property
    def items(self):
        return list(self._items)

    def as_list(self):
        return [n.as_dict() for n in self._items]

    def __len__(self):
        return len(self._items)
