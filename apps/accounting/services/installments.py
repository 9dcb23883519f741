"""Installment posting service."""

import logging
from typing import Any, Dict

from django.db import transaction
from django.utils import timezone

from apps.core.results import ServiceResult, best_effort
from apps.customers.models import Customer
from apps.floorplans.services import reconcile_best_effort
from apps.inventory.models import Vehicle
from apps.sales.models import Sales
from ..models import Accounting
from .due_dates import project_due_date
from .exceptions import (
    AccountingEntryNotFoundError,
    InstallmentLimitReachedError,
    ReceiptNotFoundError,
)

logger = logging.getLogger(__name__)

ENTRY_FIELDS = [
    'customer_code', 'vin', 'stock_id', 'make', 'sales_type',
    'payment_schedule', 'financing_calculation_method', 'loan_term',
    'bill_type', 'payment_date', 'amount', 'payment_type', 'note',
]


def _sale_snapshot(sale: Sales) -> Dict[str, Any]:
    """Descriptive fields copied from the sale onto a new entry."""
    snapshot = {
        'sales_type': sale.sales_type or '',
        'payment_schedule': sale.payment_schedule or '',
        'financing_calculation_method': sale.financing_calculation_method or '',
    }

    customer = Customer.objects.filter(pk=sale.customer_id).first() if sale.customer_id else None
    if customer is not None:
        snapshot['customer_code'] = customer.customer_id

    vehicle = Vehicle.objects.filter(pk=sale.vehicle_id).first() if sale.vehicle_id else None
    if vehicle is not None:
        snapshot.update(vin=vehicle.vin, stock_id=vehicle.stock_id, make=vehicle.make)

    return snapshot


def get_entry(*, pk) -> Accounting:
    try:
        return Accounting.objects.get(pk=pk)
    except Accounting.DoesNotExist:
        raise AccountingEntryNotFoundError(f"Accounting entry {pk} not found")


def _propagate_next_due_date(sale_pk, due_date):
    Sales.objects.filter(pk=sale_pk).update(next_payment_due_date=due_date, updated_at=timezone.now())


def create_installment(*, receipt_number: str, data: Dict[str, Any]) -> ServiceResult:
    """
    Record the next installment for a sale.

    The installment number is the count of earlier entries plus one. The total
    number of payments comes from the request or the sale's schedule; once it
    is reached further installments are rejected. The due date is projected
    from the schedule and written back to the sale as its next due date, then
    the sale's floor plan is reconciled.

    Args:
        receipt_number: Receipt ID of the sale being paid
        data: Entry fields, optionally ``due_date`` and ``total_number_of_payments``

    Returns:
        ServiceResult wrapping the new Accounting entry

    Raises:
        ReceiptNotFoundError: If no sale has this receipt number
        InstallmentLimitReachedError: If all installments are already recorded
    """
    with transaction.atomic():
        # Lock the sale so concurrent postings for one receipt serialise
        sale = Sales.objects.select_for_update().filter(receipt_id=receipt_number).first()
        if sale is None:
            raise ReceiptNotFoundError(f"No sale with receipt {receipt_number}")

        existing = Accounting.objects.filter(receipt_number=receipt_number)
        existing_count = existing.count()
        installment_number = existing_count + 1

        total = data.get('total_number_of_payments')
        if total is None:
            total = sale.number_of_payments
        if total is not None and installment_number > total:
            raise InstallmentLimitReachedError(
                f"All {total} installments already recorded for {receipt_number}"
            )

        previous = existing.order_by('-installment_number', '-created_at').first()
        schedule = data.get('payment_schedule') or sale.payment_schedule

        due_date = project_due_date(
            installment_number=installment_number,
            schedule=schedule,
            today=timezone.localdate(),
            explicit_due_date=data.get('due_date'),
            first_payment_date=sale.schedule_first_payment_date,
            second_payment_date=sale.second_payment_date,
            next_payment_due_date=sale.next_payment_due_date,
            previous_due_date=previous.due_date if previous else None,
        )

        fields = _sale_snapshot(sale)
        fields.update({k: v for k, v in data.items() if k in ENTRY_FIELDS and v not in (None, '')})
        if schedule:
            fields['payment_schedule'] = schedule

        entry = Accounting.objects.create(
            receipt_number=receipt_number,
            installment_number=installment_number,
            total_number_of_payments=total,
            due_date=due_date,
            **fields
        )

    logger.info(
        "Installment %s/%s recorded for %s, due %s",
        installment_number, total if total is not None else '?', receipt_number, due_date,
    )

    result = ServiceResult(entry)
    best_effort(result, 'Next due date update', _propagate_next_due_date, sale.pk, due_date)
    reconcile_best_effort(result, receipt_number=receipt_number)
    return result
