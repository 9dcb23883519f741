"""Domain-specific exceptions for customer services."""


class CustomersServiceError(Exception):
    """Base exception for customer services."""
    pass


class CustomerNotFoundError(CustomersServiceError):
    """Raised when customer does not exist."""
    pass


class DuplicateCustomerError(CustomersServiceError):
    """Raised when a customer with the same email already exists."""
    pass
