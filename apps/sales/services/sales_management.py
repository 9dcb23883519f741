"""
Sales lifecycle service.

A sale is created with just a customer (and optionally a vehicle), priced by
a second call, optionally linked to a trade-in and finally deleted. Every step
that touches the vehicle also drives its sales status and re-runs the floor
plan reconciler for the vehicle's floor plan.

Vehicle status and floor plan status are follow-ups: they run after the sale
itself is saved and report failures as warnings on the returned result.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction

from apps.core.results import ServiceResult, best_effort
from apps.customers.services import resolve_customer
from apps.floorplans.services import reconcile_best_effort
from apps.inventory.models import Vehicle
from apps.inventory.services import SaleEvent, VehicleNotFoundError, apply_sale_event
from apps.sequences.services import generate_receipt_id
from apps.tradeins.models import NetTradeIn
from ..models import Sales, SalesType, SCHEDULE_FIELDS, PAYMENT_DETAIL_FIELDS
from .exceptions import SaleNotFoundError, InvalidSaleDetailsError, TradeInNotFoundError

logger = logging.getLogger(__name__)

_UNSET = object()


def _check_vehicle(vehicle_id):
    if vehicle_id and not Vehicle.objects.filter(pk=vehicle_id, is_deleted=False).exists():
        raise VehicleNotFoundError(f"Vehicle {vehicle_id} not found")


def _lock_sale(pk) -> Sales:
    try:
        return Sales.objects.select_for_update().get(pk=pk)
    except Sales.DoesNotExist:
        raise SaleNotFoundError(f"Sale {pk} not found")


def get_sale(*, pk: UUID) -> Sales:
    try:
        return Sales.objects.select_related('customer').get(pk=pk)
    except Sales.DoesNotExist:
        raise SaleNotFoundError(f"Sale {pk} not found")


def get_sale_by_receipt(*, receipt_id: str) -> Sales:
    try:
        return Sales.objects.get(receipt_id=receipt_id)
    except Sales.DoesNotExist:
        raise SaleNotFoundError(f"Sale {receipt_id} not found")


def list_sales(*, customer_id: Optional[str] = None, sales_type: Optional[str] = None):
    """All sales, newest first, optionally narrowed to a customer code or sales type."""
    queryset = Sales.objects.select_related('customer')
    if customer_id:
        queryset = queryset.filter(customer__customer_id=customer_id)
    if sales_type:
        queryset = queryset.filter(sales_type=sales_type)
    return queryset


def create_sale(
    *,
    customer_info: Dict[str, Any],
    vehicle_id: Optional[UUID] = None,
    created_by=None,
) -> ServiceResult:
    """
    Create a sale for an existing or new customer and mint its receipt ID.

    A linked vehicle moves to Pending and records this sale as its current one.

    Raises:
        CustomerNotFoundError: If an existing customer is referenced but missing
        DuplicateCustomerError: If a new customer reuses a registered email
        VehicleNotFoundError: If the vehicle does not exist
    """
    with transaction.atomic():
        _check_vehicle(vehicle_id)
        customer = resolve_customer(customer_info=customer_info)

        sale = Sales.objects.create(
            receipt_id=generate_receipt_id(),
            is_existing_customer=bool(customer_info.get('is_existing_customer')),
            customer=customer,
            vehicle_id=vehicle_id,
            created_by=created_by,
        )

    logger.info("Sale %s created for customer %s", sale.receipt_id, customer.customer_id)

    result = ServiceResult(sale)
    if vehicle_id:
        best_effort(
            result, 'Vehicle status update', apply_sale_event,
            vehicle_id=vehicle_id, event=SaleEvent.CREATED, sale=sale,
        )
        reconcile_best_effort(result, vehicle_id=vehicle_id)
    return result


def add_sales_details(*, pk: UUID, data: Dict[str, Any]) -> ServiceResult:
    """
    Store a sale's pricing, schedule and payment details.

    A cash sale drops any financing it had. A financed sale must carry a
    number of payments; its next due date starts at the given value or the
    first payment date. The vehicle moves to Reserved or Sold and its floor
    plan is reconciled.

    Raises:
        SaleNotFoundError: If the sale does not exist
        InvalidSaleDetailsError: If a financed sale has no payment schedule
    """
    with transaction.atomic():
        sale = _lock_sale(pk)

        is_cash_sale = data.get('is_cash_sale')
        if is_cash_sale is None:
            is_cash_sale = data.get('sales_type') == SalesType.CASH

        sale.is_cash_sale = is_cash_sale
        sale.is_reserved = bool(data.get('is_reserved', False))
        if data.get('sales_type'):
            sale.sales_type = data['sales_type']
        else:
            sale.sales_type = SalesType.CASH if is_cash_sale else SalesType.BUY_HERE_PAY_HERE
        if 'sales_details' in data:
            sale.sales_details = data.get('sales_details') or {}

        if is_cash_sale:
            sale.clear_financing()
        else:
            if not data.get('number_of_payments'):
                raise InvalidSaleDetailsError("Financed sales require a payment schedule with number of payments")
            previous_first_payment = sale.schedule_first_payment_date
            for field in SCHEDULE_FIELDS + PAYMENT_DETAIL_FIELDS:
                if field in data:
                    setattr(sale, field, data[field])
            # A moved first payment restarts the schedule unless a next due date was sent
            first_payment_moved = sale.schedule_first_payment_date != previous_first_payment
            if not data.get('next_payment_due_date') and (first_payment_moved or not sale.next_payment_due_date):
                sale.next_payment_due_date = sale.schedule_first_payment_date

        sale.save()

    logger.info(
        "Sale %s priced as %s (%s)",
        sale.receipt_id, sale.sales_type, 'reserved' if sale.is_reserved else 'sold',
    )

    result = ServiceResult(sale)
    if sale.vehicle_id:
        best_effort(
            result, 'Vehicle status update', apply_sale_event,
            vehicle_id=sale.vehicle_id, event=SaleEvent.DETAILS_ADDED, is_reserved=sale.is_reserved,
        )
        reconcile_best_effort(result, vehicle_id=sale.vehicle_id)
    return result


def update_sale(
    *,
    pk: UUID,
    customer_info: Optional[Dict[str, Any]] = None,
    sales_type: Optional[str] = None,
    vehicle_id=_UNSET,
) -> ServiceResult:
    """
    Change a sale's customer, sales type or vehicle.

    Swapping the vehicle releases the old one back to Available and moves the
    new one to Pending.

    Raises:
        SaleNotFoundError: If the sale does not exist
        CustomerNotFoundError / DuplicateCustomerError: From customer resolution
        VehicleNotFoundError: If the new vehicle does not exist
    """
    with transaction.atomic():
        sale = _lock_sale(pk)
        previous_vehicle_id = sale.vehicle_id

        if customer_info:
            sale.customer = resolve_customer(customer_info=customer_info)
            sale.is_existing_customer = bool(customer_info.get('is_existing_customer'))
        if sales_type:
            sale.sales_type = sales_type
        if vehicle_id is not _UNSET:
            _check_vehicle(vehicle_id)
            sale.vehicle_id = vehicle_id

        sale.save()

    result = ServiceResult(sale)
    if vehicle_id is not _UNSET and sale.vehicle_id != previous_vehicle_id:
        if previous_vehicle_id:
            best_effort(
                result, 'Vehicle status update', apply_sale_event,
                vehicle_id=previous_vehicle_id, event=SaleEvent.RELEASED, sale_id=sale.pk,
            )
            reconcile_best_effort(result, vehicle_id=previous_vehicle_id)
        if sale.vehicle_id:
            best_effort(
                result, 'Vehicle status update', apply_sale_event,
                vehicle_id=sale.vehicle_id, event=SaleEvent.CREATED, sale=sale,
            )
            reconcile_best_effort(result, vehicle_id=sale.vehicle_id)
        logger.info("Sale %s moved from vehicle %s to %s", sale.receipt_id, previous_vehicle_id, sale.vehicle_id)
    return result


@transaction.atomic
def set_net_trade_in(*, pk: UUID, enabled: bool, net_trade_in_id: Optional[UUID] = None) -> Sales:
    """
    Turn trade-in linkage on or off for a sale.

    The trade-in gets a back-link to the sale; turning linkage off removes it.

    Raises:
        SaleNotFoundError: If the sale does not exist
        TradeInNotFoundError: If the trade-in does not exist
    """
    sale = _lock_sale(pk)

    if enabled and net_trade_in_id:
        trade_in = NetTradeIn.objects.filter(pk=net_trade_in_id).first()
        if trade_in is None:
            raise TradeInNotFoundError(f"Trade-in {net_trade_in_id} not found")
        if sale.net_trade_in_id and sale.net_trade_in_id != trade_in.pk:
            NetTradeIn.objects.filter(pk=sale.net_trade_in_id, linked_sales_id=sale.pk).update(linked_sales=None)
        trade_in.linked_sales = sale
        trade_in.save(update_fields=['linked_sales', 'updated_at'])
        sale.net_trade_in = trade_in
    elif not enabled and sale.net_trade_in_id:
        NetTradeIn.objects.filter(pk=sale.net_trade_in_id, linked_sales_id=sale.pk).update(linked_sales=None)
        sale.net_trade_in = None

    sale.net_trade_in_enabled = enabled
    sale.save()
    return sale


def delete_sale(*, pk: UUID) -> ServiceResult:
    """
    Delete a sale, release its vehicle and reconcile the vehicle's floor plan.

    Installments recorded against the receipt are kept.

    Raises:
        SaleNotFoundError: If the sale does not exist
    """
    with transaction.atomic():
        sale = _lock_sale(pk)
        sale_id = sale.pk
        vehicle_id = sale.vehicle_id
        receipt_id = sale.receipt_id
        NetTradeIn.objects.filter(linked_sales_id=sale.pk).update(linked_sales=None)
        sale.delete()

    logger.info("Sale %s deleted", receipt_id)

    result = ServiceResult(receipt_id)
    if vehicle_id:
        best_effort(
            result, 'Vehicle status update', apply_sale_event,
            vehicle_id=vehicle_id, event=SaleEvent.DELETED, sale_id=sale_id,
        )
        reconcile_best_effort(result, vehicle_id=vehicle_id)
    return result
