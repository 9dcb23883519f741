"""Services for vendor business logic."""

from .exceptions import VendorsServiceError, VendorNotFoundError, DuplicateVendorError
from .vendor_management import (
    create_vendor,
    get_vendor,
    get_vendor_by_code,
    update_vendor,
    delete_vendor,
    resolve_vendor,
)

__all__ = [
    # Exceptions
    'VendorsServiceError',
    'VendorNotFoundError',
    'DuplicateVendorError',
    # Services
    'create_vendor',
    'get_vendor',
    'get_vendor_by_code',
    'update_vendor',
    'delete_vendor',
    'resolve_vendor',
]
