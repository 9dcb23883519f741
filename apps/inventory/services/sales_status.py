"""
Vehicle sales-status state machine.

Available -> Pending (sale created) -> Reserved | Sold (sale details added),
and back to Available when the sale is deleted, unless a later sale has since
taken the vehicle. Only the vehicle named on the sale is ever touched.
"""

import logging
from typing import Optional

from django.db import models

from ..models import SalesStatus, Vehicle

logger = logging.getLogger(__name__)


class SaleEvent(models.TextChoices):
    CREATED = 'created', 'Sale created'
    DETAILS_ADDED = 'details_added', 'Sale details added'
    DELETED = 'deleted', 'Sale deleted'
    RELEASED = 'released', 'Vehicle removed from sale'


def derive_vehicle_sales_status(event: str, *, is_reserved: bool = False) -> str:
    """
    Sales status a vehicle moves to after a sale lifecycle event.

    Raises:
        ValueError: For an unknown event
    """
    if event == SaleEvent.CREATED:
        return SalesStatus.PENDING
    if event == SaleEvent.DETAILS_ADDED:
        return SalesStatus.RESERVED if is_reserved else SalesStatus.SOLD
    if event in (SaleEvent.DELETED, SaleEvent.RELEASED):
        return SalesStatus.AVAILABLE
    raise ValueError(f"Unknown sale event: {event}")


def apply_sale_event(
    *, vehicle_id, event: str, sale=None, sale_id=None, is_reserved: bool = False,
) -> Optional[Vehicle]:
    """
    Move the vehicle to the status derived for ``event``.

    A created sale becomes the vehicle's current sale. A deleted or released
    sale (``sale_id``) only frees the vehicle while it is still the current
    one; a vehicle already taken by another sale is left alone. A missing
    vehicle is not an error.

    Returns:
        The vehicle, or None if it does not exist
    """
    if not vehicle_id:
        return None

    vehicle = Vehicle.objects.filter(pk=vehicle_id).first()
    if vehicle is None:
        logger.warning("Sale event %s for missing vehicle %s", event, vehicle_id)
        return None

    releasing = event in (SaleEvent.DELETED, SaleEvent.RELEASED)
    if releasing and sale_id is not None and vehicle.sales_id not in (None, sale_id):
        logger.info(
            "Vehicle %s kept on sale %s; sale %s no longer holds it",
            vehicle.stock_id, vehicle.sales_id, sale_id,
        )
        return vehicle

    vehicle.sales_status = derive_vehicle_sales_status(event, is_reserved=is_reserved)
    update_fields = ['sales_status', 'updated_at']

    if event == SaleEvent.CREATED and sale is not None:
        vehicle.sales = sale
        update_fields.append('sales')
    elif releasing:
        vehicle.sales = None
        update_fields.append('sales')

    vehicle.save(update_fields=update_fields)
    logger.info("Vehicle %s is now %s", vehicle.stock_id, vehicle.sales_status)
    return vehicle
