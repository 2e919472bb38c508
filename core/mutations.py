import logging

from .errors import PermissionDenied
from .notifications import MESSAGES

logger = logging.getLogger(__name__)


class MutationFlow:
    """
    Admin edits against a list page.

    Each edit is a single backend call followed by a wholesale refresh of the
    owning view; nothing is patched locally. A failed edit is logged, reported
    with one error toast, and leaves the view as it was.
    """

    def __init__(self, view, notifier):
        self.view = view
        self.notifier = notifier

    @property
    def backend(self):
        return self.view.backend

    async def change_ticket_status(self, ticket_id, status):
        return await self._mutate(
            self.backend.update_ticket_status, ticket_id, status,
            success=MESSAGES["TICKET_UPDATED"],
            failure=MESSAGES["TICKET_ERROR"],
        )

    async def assign_ticket(self, ticket_id, assignee_id):
        # "" is the unassign sentinel and is passed through untouched
        return await self._mutate(
            self.backend.assign_ticket, ticket_id, assignee_id,
            success=MESSAGES["TICKET_ASSIGNED"],
            failure=MESSAGES["TICKET_ERROR"],
        )

    async def change_user_role(self, user_id, role):
        return await self._mutate(
            self.backend.update_user_role, user_id, role,
            success=MESSAGES["USER_UPDATED"],
            failure=MESSAGES["USER_ERROR"],
        )

    async def assign_asset(self, asset_id, assignee_id):
        return await self._mutate(
            self.backend.assign_asset, asset_id, assignee_id,
            success=MESSAGES["ASSET_ASSIGNED"],
            failure=MESSAGES["ASSET_ERROR"],
        )

    def _authorize(self):
        principal = self.view.principal
        if principal is None or not principal.is_admin:
            raise PermissionDenied("Administrator role required")
        return principal

    async def _mutate(self, call, *args, success, failure):
        try:
            principal = self._authorize()
            await call(*args)
        except Exception as exc:
            logger.exception("%s%r failed", call.__name__, args)
            self.notifier.error(failure, str(exc))
            return False

        logger.info("%s%r by user %s", call.__name__, args, principal.id)
        await self.view.refresh()
        self.notifier.success(success)
        return True
