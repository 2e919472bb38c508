import logging

from asgiref.sync import sync_to_async

from users.models import User

from .roles import Principal

logger = logging.getLogger(__name__)

SESSION_KEY = "desk_user_id"


class DeskSession:
    """
    Session state for one request: who is calling, and whether that is known yet.

    Starts pending. ``resolve()`` settles it from the Django session,
    ``login()`` starts a new one and ``logout()`` tears it down. Views hand
    the instance to view-models explicitly.
    """

    def __init__(self, request):
        self._request = request
        self.principal = None
        self.is_loading = True

    async def resolve(self):
        if not self.is_loading:
            return self.principal

        user_id = await sync_to_async(self._request.session.get)(SESSION_KEY)
        principal = None
        if user_id is not None:
            user = await User.objects.filter(id=user_id).afirst()
            if user is None:
                logger.info("Session refers to missing user %s", user_id)
            else:
                try:
                    principal = Principal.from_user(user)
                except ValueError:
                    logger.warning("User %s has unrecognised role %r", user.id, user.role)

        self.principal = principal
        self.is_loading = False
        return principal

    async def login(self, user):
        """Start a session for ``user``; ValueError if their role is unrecognised."""
        principal = Principal.from_user(user)
        session = self._request.session
        await sync_to_async(session.cycle_key)()
        await sync_to_async(session.__setitem__)(SESSION_KEY, user.id)
        self.principal = principal
        self.is_loading = False
        logger.info("User %s logged in as %s", user.id, self.principal.role.value)
        return self.principal

    async def logout(self):
        await sync_to_async(self._request.session.flush)()
        if self.principal is not None:
            logger.info("User %s logged out", self.principal.id)
        self.principal = None
        self.is_loading = False
