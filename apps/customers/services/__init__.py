"""Services for customer business logic."""

from .exceptions import CustomersServiceError, CustomerNotFoundError, DuplicateCustomerError
from .customer_management import (
    create_customer,
    get_customer,
    get_customer_by_code,
    update_customer,
    delete_customer,
    resolve_customer,
)

__all__ = [
    # Exceptions
    'CustomersServiceError',
    'CustomerNotFoundError',
    'DuplicateCustomerError',
    # Services
    'create_customer',
    'get_customer',
    'get_customer_by_code',
    'update_customer',
    'delete_customer',
    'resolve_customer',
]
