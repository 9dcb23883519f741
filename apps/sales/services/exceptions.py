"""Domain-specific exceptions for sales services."""


class SalesServiceError(Exception):
    """Base exception for sales services."""
    pass


class SaleNotFoundError(SalesServiceError):
    """Raised when a sale does not exist."""
    pass


class InvalidSaleDetailsError(SalesServiceError):
    """Raised when pricing details are inconsistent with the sale type."""
    pass


class TradeInNotFoundError(SalesServiceError):
    """Raised when a sale is linked to a missing trade-in."""
    pass
