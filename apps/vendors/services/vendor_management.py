"""Vendor CRUD operations service."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction

from apps.sequences.services import extract_category_code, generate_vendor_id
from ..models import Vendor
from .exceptions import VendorNotFoundError, DuplicateVendorError

logger = logging.getLogger(__name__)

VENDOR_FIELDS = [
    'category', 'name', 'street', 'city', 'state', 'zip', 'email',
    'primary_contact_number', 'alternative_contact_number', 'contact_person',
    'account_number', 'tax_id_or_ssn', 'bill_of_sales', 'note',
]


@transaction.atomic
def create_vendor(*, created_by=None, **data) -> Vendor:
    """
    Create a vendor and mint its vendor ID from the category code.

    Raises:
        DuplicateVendorError: If the email is already registered
    """
    email = (data.get('email') or '').strip().lower()
    if Vendor.objects.filter(email=email).exists():
        raise DuplicateVendorError(f"Vendor with email {email} already exists")

    fields = {k: v for k, v in data.items() if k in VENDOR_FIELDS and v is not None}
    fields['email'] = email

    vendor = Vendor.objects.create(
        vendor_id=generate_vendor_id(extract_category_code(data.get('category'))),
        created_by=created_by,
        **fields
    )
    logger.info("Vendor %s created", vendor.vendor_id)
    return vendor


def get_vendor(*, pk: UUID) -> Vendor:
    try:
        return Vendor.objects.get(pk=pk)
    except Vendor.DoesNotExist:
        raise VendorNotFoundError(f"Vendor {pk} not found")


def get_vendor_by_code(*, vendor_id: str) -> Vendor:
    """Look a vendor up by its human-readable ID (e.g. VEN-AU-0001)."""
    try:
        return Vendor.objects.get(vendor_id=vendor_id)
    except Vendor.DoesNotExist:
        raise VendorNotFoundError(f"Vendor {vendor_id} not found")


@transaction.atomic
def update_vendor(*, pk: UUID, data: Dict[str, Any]) -> Vendor:
    try:
        vendor = Vendor.objects.select_for_update().get(pk=pk)
    except Vendor.DoesNotExist:
        raise VendorNotFoundError(f"Vendor {pk} not found")

    new_email = data.get('email')
    if new_email:
        new_email = new_email.strip().lower()
        if Vendor.objects.filter(email=new_email).exclude(pk=pk).exists():
            raise DuplicateVendorError(f"Vendor with email {new_email} already exists")
        data = {**data, 'email': new_email}

    for field, value in data.items():
        if field in VENDOR_FIELDS:
            setattr(vendor, field, value)

    vendor.save()
    return vendor


@transaction.atomic
def delete_vendor(*, pk: UUID) -> None:
    deleted, _ = Vendor.objects.filter(pk=pk).delete()
    if not deleted:
        raise VendorNotFoundError(f"Vendor {pk} not found")
    logger.info("Vendor %s deleted", pk)


def resolve_vendor(
    *,
    vendor_info: Dict[str, Any],
    created_by=None,
    bill_of_sales: Optional[str] = None,
) -> Vendor:
    """
    Return the vendor described by an inline ``vendor_info`` block.

    Existing vendors are looked up by ``vendor_id``; otherwise a new vendor
    is created from the remaining fields.

    Raises:
        VendorNotFoundError: If an existing vendor is referenced but missing
        DuplicateVendorError: If a new vendor reuses a registered email
    """
    if vendor_info.get('is_existing_vendor'):
        vendor = get_vendor_by_code(vendor_id=vendor_info.get('vendor_id', ''))
        if bill_of_sales:
            vendor.bill_of_sales = bill_of_sales
            vendor.save(update_fields=['bill_of_sales', 'updated_at'])
        return vendor

    data = {k: v for k, v in vendor_info.items() if k in VENDOR_FIELDS}
    if bill_of_sales:
        data['bill_of_sales'] = bill_of_sales
    return create_vendor(created_by=created_by, **data)
