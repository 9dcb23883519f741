"""Customer CRUD operations service."""

import logging
from typing import Any, Dict
from uuid import UUID

from django.db import transaction

from apps.sequences.services import generate_customer_id
from ..models import Customer
from .exceptions import CustomerNotFoundError, DuplicateCustomerError

logger = logging.getLogger(__name__)

CUSTOMER_FIELDS = [
    'first_name', 'middle_name', 'last_name', 'email',
    'primary_contact_number', 'secondary_contact_number',
    'street', 'city', 'state', 'zip_code', 'country',
    'date_of_birth', 'gender', 'ssn', 'driver_license', 'license_expiration',
    'spouse_name', 'vehicle_use', 'is_home_owner', 'hear_about_us', 'hear_about_us_other',
    'employment_status', 'employment_length', 'employment_type',
    'gross_monthly_income', 'preferred_income_verification',
]


@transaction.atomic
def create_customer(**data) -> Customer:
    """
    Create a customer and mint its customer ID from the first name.

    Raises:
        DuplicateCustomerError: If the email is already registered
    """
    email = (data.get('email') or '').strip().lower()
    if Customer.objects.filter(email=email).exists():
        raise DuplicateCustomerError(f"Customer with email {email} already exists")

    fields = {k: v for k, v in data.items() if k in CUSTOMER_FIELDS}
    fields['email'] = email

    customer = Customer.objects.create(
        customer_id=generate_customer_id(data.get('first_name', '')),
        **fields
    )
    logger.info("Customer %s created", customer.customer_id)
    return customer


def get_customer(*, pk: UUID) -> Customer:
    try:
        return Customer.objects.get(pk=pk)
    except Customer.DoesNotExist:
        raise CustomerNotFoundError(f"Customer {pk} not found")


def get_customer_by_code(*, customer_id: str) -> Customer:
    """Look a customer up by its human-readable ID (e.g. CUS-JANE-1001)."""
    try:
        return Customer.objects.get(customer_id=customer_id)
    except Customer.DoesNotExist:
        raise CustomerNotFoundError(f"Customer {customer_id} not found")


@transaction.atomic
def update_customer(*, pk: UUID, data: Dict[str, Any]) -> Customer:
    try:
        customer = Customer.objects.select_for_update().get(pk=pk)
    except Customer.DoesNotExist:
        raise CustomerNotFoundError(f"Customer {pk} not found")

    new_email = data.get('email')
    if new_email:
        new_email = new_email.strip().lower()
        if Customer.objects.filter(email=new_email).exclude(pk=pk).exists():
            raise DuplicateCustomerError(f"Customer with email {new_email} already exists")
        data = {**data, 'email': new_email}

    for field, value in data.items():
        if field in CUSTOMER_FIELDS:
            setattr(customer, field, value)

    customer.save()
    return customer


@transaction.atomic
def delete_customer(*, pk: UUID) -> None:
    deleted, _ = Customer.objects.filter(pk=pk).delete()
    if not deleted:
        raise CustomerNotFoundError(f"Customer {pk} not found")
    logger.info("Customer %s deleted", pk)


def resolve_customer(*, customer_info: Dict[str, Any]) -> Customer:
    """
    Return the customer described by an inline ``customer_info`` block.

    Raises:
        CustomerNotFoundError: If an existing customer is referenced but missing
        DuplicateCustomerError: If a new customer reuses a registered email
    """
    if customer_info.get('is_existing_customer'):
        return get_customer_by_code(customer_id=customer_info.get('customer_id', ''))
    return create_customer(**customer_info)
