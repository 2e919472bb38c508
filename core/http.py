import json

from django.http import JsonResponse


def read_json(request):
    """The request body as a dict, or None when it is not a JSON object."""
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def page_response(request, payload, status=200):
    """JsonResponse for a page payload, with the request's toasts attached."""
    body = dict(payload)
    notifier = getattr(request, "notifier", None)
    body["notifications"] = notifier.as_list() if notifier is not None else []
    return JsonResponse(body, status=status)
