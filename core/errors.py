class DeskError(Exception):
    """Base class for errors raised by the desk service layer."""

    status = 400


class ValidationError(DeskError):
    pass


class NotFound(DeskError):
    status = 404


class PermissionDenied(DeskError):
    status = 403


def text(value, field, default=""):
    """``value`` stripped; None gives ``default``, anything but a string is invalid."""
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip()
