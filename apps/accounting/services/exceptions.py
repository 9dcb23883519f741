"""Domain-specific exceptions for accounting services."""


class AccountingServiceError(Exception):
    """Base exception for accounting services."""
    pass


class AccountingEntryNotFoundError(AccountingServiceError):
    """Raised when an accounting entry does not exist."""
    pass


class InstallmentLimitReachedError(AccountingServiceError):
    """Raised when every scheduled installment is already recorded."""
    pass


class CustomerSalesNotFoundError(AccountingServiceError):
    """Raised when a customer or their sale cannot be found."""
    pass


class ReceiptNotFoundError(AccountingServiceError):
    """Raised when no sale carries the given receipt number."""
    pass
