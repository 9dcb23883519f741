"""Domain-specific exceptions for vendor services."""


class VendorsServiceError(Exception):
    """Base exception for vendor services."""
    pass


class VendorNotFoundError(VendorsServiceError):
    """Raised when vendor does not exist."""
    pass


class DuplicateVendorError(VendorsServiceError):
    """Raised when a vendor with the same email already exists."""
    pass
