from django.utils.deprecation import MiddlewareMixin

from .notifications import Notifier
from .session import DeskSession


class DeskSessionMiddleware(MiddlewareMixin):
    """Attach a pending ``DeskSession`` and an empty ``Notifier`` to every request."""

    def process_request(self, request):
        request.desk_session = DeskSession(request)
        request.notifier = Notifier()
