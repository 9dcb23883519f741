"""Services for installment accounting."""

from .exceptions import (
    AccountingServiceError,
    AccountingEntryNotFoundError,
    InstallmentLimitReachedError,
    ReceiptNotFoundError,
    CustomerSalesNotFoundError,
)
from .due_dates import normalize_schedule, add_months, advance_due_date, project_due_date
from .installments import create_installment, get_entry
from .summaries import (
    remaining_payments,
    customer_sales_summary,
    latest_installments,
    installment_status,
)

__all__ = [
    # Exceptions
    'AccountingServiceError',
    'AccountingEntryNotFoundError',
    'InstallmentLimitReachedError',
    'ReceiptNotFoundError',
    'CustomerSalesNotFoundError',
    # Due dates
    'normalize_schedule',
    'add_months',
    'advance_due_date',
    'project_due_date',
    # Installments
    'create_installment',
    'get_entry',
    # Read side
    'remaining_payments',
    'customer_sales_summary',
    'latest_installments',
    'installment_status',
]
