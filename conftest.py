import pytest
from django.core.cache import cache
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


@pytest.fixture(autouse=True)
def clear_cache():
    """OTP codes and request counters live in the cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a verified staff user."""
    return User.objects.create_user(
        email='testuser@example.com',
        password='TestPass123!',
        full_name='Test User',
        is_verified=True,
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


# =============================================================================
# Domain fixtures shared by the dealership apps
# =============================================================================

@pytest.fixture
def vendor(db):
    from apps.vendors.services import create_vendor
    return create_vendor(
        category='Auction - AU',
        name='Copart Dallas',
        email='dallas@copart.example.com',
        city='Dallas',
        tax_id_or_ssn='12-3456789',
    )


@pytest.fixture
def customer(db):
    from apps.customers.services import create_customer
    return create_customer(first_name='Jane', last_name='Doe', email='jane@example.com')


@pytest.fixture
def floor_plan(db):
    from apps.floorplans.services import create_floor_plan
    return create_floor_plan(
        company_name='NextGear Capital',
        street='1320 City Center Dr',
        city='Carmel',
        state='IN',
        zip='46032',
        phone='555-0100',
        contact_person='Sam Lender',
    )


@pytest.fixture
def make_vehicle(db, vendor):
    """Factory for inventory vehicles bought from the ``vendor`` fixture."""
    from apps.inventory.services import create_vehicle

    def _make(vehicle_type='SUV', **data):
        data.setdefault('make', 'Toyota')
        data.setdefault('model', 'RAV4')
        data.setdefault('vin', '1HGCM82633A004352')
        return create_vehicle(
            vendor_info={'is_existing_vendor': True, 'vendor_id': vendor.vendor_id},
            vehicle_type=vehicle_type,
            **data
        )
    return _make


@pytest.fixture
def vehicle(make_vehicle):
    return make_vehicle()


@pytest.fixture
def make_financed_sale(db, customer):
    """Factory: a priced Buy Here Pay Here sale for a vehicle."""
    from datetime import date
    from apps.sales.services import create_sale, add_sales_details

    def _make(vehicle, number_of_payments=2, payment_schedule='Monthly', **details):
        sale = create_sale(
            customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
            vehicle_id=vehicle.pk,
        ).value
        data = {
            'is_cash_sale': False,
            'sales_type': 'Buy Here Pay Here',
            'payment_schedule': payment_schedule,
            'number_of_payments': number_of_payments,
            'first_payment_date': date(2025, 1, 15),
        }
        data.update(details)
        return add_sales_details(pk=sale.pk, data=data).value
    return _make


@pytest.fixture
def attach(db):
    """Attach a vehicle to a floor plan through the inventory service."""
    from apps.inventory.services import update_vehicle_costs

    def _attach(vehicle, floor_plan):
        return update_vehicle_costs(
            pk=vehicle.pk,
            floor_plan={'floor_plan': floor_plan.pk, 'is_floor_planned': True},
        )
    return _attach


@pytest.fixture
def pay(db):
    """Post the next installment for a sale."""
    from decimal import Decimal
    from apps.accounting.services import create_installment

    def _pay(sale, amount=Decimal('250.00'), **data):
        return create_installment(receipt_number=sale.receipt_id, data={'amount': amount, **data})
    return _pay
