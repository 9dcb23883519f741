"""Read-side projections over sales and their installments."""

from typing import Any, Dict

from django.db.models import BooleanField, Case, Count, F, IntegerField, OuterRef, Q, Subquery, Value, When

from apps.customers.models import Customer
from apps.inventory.models import Vehicle
from apps.sales.models import Sales
from ..models import Accounting
from .exceptions import CustomerSalesNotFoundError

STATUS_CLEARED = 'cleared'
STATUS_PENDING = 'pending'


def remaining_payments(total_number_of_payments, installment_count: int):
    """
    Normalised schedule total and payments still owed.

    The total is never reported below the number of installments already
    recorded, so the remainder is never negative.

    An unknown schedule total reports the installment count.

    Returns:
        (total, remaining)
    """
    total = max(total_number_of_payments or 0, installment_count)
    return total, max(total - installment_count, 0)


def customer_sales_summary(*, customer_id: str) -> Dict[str, Any]:
    """
    Latest sale of a customer with its installment progress.

    Raises:
        CustomerSalesNotFoundError: If the customer or any sale of theirs is missing
    """
    customer = Customer.objects.filter(customer_id=customer_id).first()
    if customer is None:
        raise CustomerSalesNotFoundError(f"Customer {customer_id} not found")

    sale = Sales.objects.filter(customer_id=customer.pk).order_by('-created_at').first()
    if sale is None:
        raise CustomerSalesNotFoundError(f"No sales found for customer {customer_id}")

    vehicle = Vehicle.objects.filter(pk=sale.vehicle_id).first() if sale.vehicle_id else None

    entries = Accounting.objects.filter(receipt_number=sale.receipt_id)
    installment_count = entries.count()
    latest = entries.order_by('-installment_number', '-created_at').first()

    total, remaining = remaining_payments(sale.number_of_payments, installment_count)

    return {
        'receipt_id': sale.receipt_id,
        'stock_id': vehicle.stock_id if vehicle else None,
        'vin': (vehicle.vin or None) if vehicle else None,
        'make': (vehicle.make or None) if vehicle else None,
        'sales_type': sale.sales_type or None,
        'payment_schedule': sale.payment_schedule,
        'financing_calculation_method': sale.financing_calculation_method,
        'total_number_of_payments': total,
        'next_payment_due_date': sale.next_payment_due_date,
        'installment_count': installment_count,
        'latest_due_date': latest.due_date if latest else None,
        'remaining_payments': remaining,
    }


def latest_installments():
    """
    One row per receipt: the entry with the highest installment number.

    Rows are annotated with ``installment_count`` and a derived ``status``
    that is ``cleared`` once a known schedule total has been reached.
    """
    per_receipt = Accounting.objects.filter(receipt_number=OuterRef('receipt_number'))

    latest_pk = per_receipt.order_by('-installment_number', '-created_at').values('pk')[:1]
    count = (
        per_receipt
        .order_by()
        .values('receipt_number')
        .annotate(total=Count('pk'))
        .values('total')
    )

    return (
        Accounting.objects
        .filter(pk=Subquery(latest_pk))
        .annotate(installment_count=Subquery(count, output_field=IntegerField()))
        .annotate(
            is_cleared=Case(
                When(
                    Q(total_number_of_payments__gt=0)
                    & Q(total_number_of_payments__lte=F('installment_count')),
                    then=Value(True),
                ),
                default=Value(False),
                output_field=BooleanField(),
            )
        )
        .order_by('-created_at')
    )


def installment_status(entry) -> str:
    return STATUS_CLEARED if getattr(entry, 'is_cleared', False) else STATUS_PENDING
