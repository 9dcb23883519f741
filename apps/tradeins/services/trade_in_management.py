"""Net trade-in CRUD and inventory ingestion service."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction

from apps.inventory.services import create_vehicle, update_vehicle
from apps.sales.models import Sales
from ..models import NetTradeIn
from .exceptions import NetTradeInNotFoundError, MissingVehicleInfoError

logger = logging.getLogger(__name__)

TRADE_IN_FIELDS = [
    'is_buy_here_pay_here', 'amount_allowed', 'actual_cash_value',
    'previous_sold_vehicle', 'vendor_info', 'vehicle_info',
]


def _payoff(applicable: bool, information: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    return dict(information or {}) if applicable else {}


def _ingest_vehicle(trade_in: NetTradeIn, created_by=None):
    """Create the traded-in vehicle in inventory and link it to the trade-in."""
    if not trade_in.vehicle_info or not trade_in.vehicle_info.get('vehicle_type'):
        raise MissingVehicleInfoError("Vehicle type is required to add a trade-in to inventory")

    vehicle = create_vehicle(
        vendor_info=trade_in.vendor_info or {},
        created_by=created_by,
        **trade_in.vehicle_info
    )
    trade_in.linked_vehicle = vehicle
    logger.info("Trade-in %s added to inventory as %s", trade_in.pk, vehicle.stock_id)
    return vehicle


@transaction.atomic
def create_trade_in(*, created_by=None, **data) -> NetTradeIn:
    """
    Record a trade-in; optionally add the vehicle to inventory.

    Payoff information is only kept when a payoff applies.

    Raises:
        MissingVehicleInfoError: If added to inventory without a vehicle type
        VendorNotFoundError / DuplicateVendorError: From vendor resolution
    """
    fields = {k: v for k, v in data.items() if k in TRADE_IN_FIELDS and v is not None}
    payoff_applicable = bool(data.get('payoff_applicable'))

    trade_in = NetTradeIn(
        payoff_applicable=payoff_applicable,
        payoff_information=_payoff(payoff_applicable, data.get('payoff_information')),
        add_to_inventory=bool(data.get('add_to_inventory')),
        created_by=created_by,
        **fields
    )
    if trade_in.add_to_inventory:
        _ingest_vehicle(trade_in, created_by=created_by)

    trade_in.save()
    return trade_in


def get_trade_in(*, pk: UUID) -> NetTradeIn:
    try:
        return NetTradeIn.objects.get(pk=pk)
    except NetTradeIn.DoesNotExist:
        raise NetTradeInNotFoundError(f"Trade-in {pk} not found")


@transaction.atomic
def update_trade_in(*, pk: UUID, data: Dict[str, Any], updated_by=None) -> NetTradeIn:
    """
    Edit a trade-in.

    Switching ``add_to_inventory`` on ingests the vehicle if it is not linked
    yet; new vehicle details are pushed to an already linked vehicle.
    """
    try:
        trade_in = NetTradeIn.objects.select_for_update().get(pk=pk)
    except NetTradeIn.DoesNotExist:
        raise NetTradeInNotFoundError(f"Trade-in {pk} not found")

    for field, value in data.items():
        if field in TRADE_IN_FIELDS:
            setattr(trade_in, field, value)

    if 'payoff_applicable' in data:
        trade_in.payoff_applicable = bool(data['payoff_applicable'])
    if 'payoff_information' in data or 'payoff_applicable' in data:
        trade_in.payoff_information = _payoff(
            trade_in.payoff_applicable,
            data.get('payoff_information', trade_in.payoff_information),
        )

    if 'add_to_inventory' in data:
        trade_in.add_to_inventory = bool(data['add_to_inventory'])

    if trade_in.add_to_inventory:
        if trade_in.linked_vehicle_id is None:
            _ingest_vehicle(trade_in, created_by=updated_by)
        elif data.get('vehicle_info'):
            update_vehicle(pk=trade_in.linked_vehicle_id, data=data['vehicle_info'])

    trade_in.save()
    return trade_in


@transaction.atomic
def delete_trade_in(*, pk: UUID) -> None:
    """Delete a trade-in and drop it from any sale that references it."""
    deleted, _ = NetTradeIn.objects.filter(pk=pk).delete()
    if not deleted:
        raise NetTradeInNotFoundError(f"Trade-in {pk} not found")

    Sales.objects.filter(net_trade_in_id=pk).update(net_trade_in=None, net_trade_in_enabled=False)
    logger.info("Trade-in %s deleted", pk)
