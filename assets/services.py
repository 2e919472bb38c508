import datetime
import logging

from core import constants
from core.errors import NotFound, ValidationError, text
from users.models import User
from users.services import user_ref

from .models import Asset

logger = logging.getLogger(__name__)


def asset_record(asset):
    return {
        "id": asset.id,
        "name": asset.name,
        "asset_type": asset.asset_type,
        "serial_number": asset.serial_number,
        "description": asset.description,
        "status": asset.status,
        "purchase_date": asset.purchase_date,
        "created_at": asset.created_at,
        "assignee": user_ref(asset.assignee),
    }


def _assets():
    return Asset.objects.select_related("assignee").order_by("-created_at", "-id")


async def fetch_assets():
    return [asset_record(a) async for a in _assets()]


async def create_asset(name, asset_type, serial_number, description="", purchase_date=None):
    name = text(name, "name")
    serial_number = text(serial_number, "serial_number")
    asset_type = text(asset_type, "asset_type")
    description = text(description, "description")
    if not name or not serial_number:
        raise ValidationError("name and serial_number are required")
    if asset_type not in constants.ASSET_TYPES:
        raise ValidationError(f"Invalid asset type. Valid types are {constants.ASSET_TYPES}")
    if purchase_date:
        try:
            purchase_date = datetime.date.fromisoformat(purchase_date)
        except (TypeError, ValueError):
            raise ValidationError("purchase_date must be YYYY-MM-DD") from None
    else:
        purchase_date = None

    if await Asset.objects.filter(serial_number=serial_number).aexists():
        raise ValidationError("An asset with this serial number already exists")

    asset = await Asset.objects.acreate(
        name=name,
        asset_type=asset_type,
        serial_number=serial_number,
        description=description or "",
        purchase_date=purchase_date,
    )
    logger.info("Asset %s created (%s)", asset.id, serial_number)
    return asset_record(asset)


async def assign_asset(asset_id, assignee_id):
    """Hand an asset to a user; ``""`` returns it to the pool."""
    if assignee_id is None:
        raise ValidationError('assignee_id must be a user id, or "" to unassign')
    try:
        asset = await _assets().aget(id=int(asset_id))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid asset id: {asset_id!r}") from None
    except Asset.DoesNotExist:
        raise NotFound("Asset not found") from None

    if asset.status in ("RETIRED", "UNDER_MAINTENANCE"):
        label = constants.ASSET_STATUSES[asset.status]["label"]
        raise ValidationError(f"Asset is {label.lower()} and cannot be reassigned")

    if assignee_id == constants.UNASSIGNED:
        asset.assignee = None
        asset.status = "AVAILABLE"
    else:
        try:
            asset.assignee = await User.objects.aget(id=int(assignee_id))
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid assignee id: {assignee_id!r}") from None
        except User.DoesNotExist:
            raise NotFound("Assignee not found") from None
        asset.status = "ASSIGNED"

    await asset.asave(update_fields=["assignee", "status", "updated_at"])
    logger.info("Asset %s assignee set to %s", asset.id, asset.assignee_id)
    return asset_record(asset)
