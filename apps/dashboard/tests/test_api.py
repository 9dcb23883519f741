import pytest
from decimal import Decimal
from django.urls import reverse
from rest_framework import status
from apps.customers.services import create_customer
from apps.dashboard.queries import DashboardQueries
from apps.inventory.services import update_vehicle_costs, delete_vehicle
from apps.sales.services import create_sale, add_sales_details


@pytest.fixture
def priced_cash_sale(vehicle, customer, pay):
    update_vehicle_costs(pk=vehicle.pk, costs={'purchase_price': Decimal('8000.00')})
    sale = create_sale(
        customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
        vehicle_id=vehicle.pk,
    ).value
    sale = add_sales_details(pk=sale.pk, data={
        'is_cash_sale': True,
        'sales_details': {'vehicle_price': '10000.00'},
    }).value
    pay(sale, amount=Decimal('1000.00'))
    pay(sale, amount=Decimal('1000.00'))
    return sale


@pytest.mark.django_db
class TestDashboardQueries:

    def test_empty(self):
        summary = DashboardQueries.summary()

        assert summary['total_vehicles'] == 0
        assert summary['total_sales'] == Decimal('0.00')
        assert summary['profit_margin'] == Decimal('0.00')
        assert summary['outstanding_balance'] == Decimal('0.00')

    def test_totals(self, priced_cash_sale):
        create_customer(first_name='Idle', email='idle@example.com')

        summary = DashboardQueries.summary()

        assert summary['total_vehicles'] == 1
        assert summary['total_sales'] == Decimal('10000.00')
        assert summary['vendor_payments'] == Decimal('8000.00')
        assert summary['total_payments'] == Decimal('2000.00')
        assert summary['outstanding_balance'] == Decimal('8000.00')
        assert summary['gross_profit'] == Decimal('2000.00')
        assert summary['profit_margin'] == Decimal('20.00')
        assert summary['active_customers'] == 1
        assert summary['inactive_customers'] == 1

    def test_deleted_vehicles_excluded(self, make_vehicle):
        make_vehicle()
        delete_vehicle(pk=make_vehicle().pk)

        assert DashboardQueries.totals()['total_vehicles'] == 1


@pytest.mark.django_db
class TestDashboardEndpoint:
    """Tests for GET /api/dashboard/summary/"""

    def test_summary(self, authenticated_client, priced_cash_sale):
        response = authenticated_client.get(reverse('dashboard:summary'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total_sales'] == '10000.00'
        assert response.data['profit_margin'] == '20.00'

    def test_requires_auth(self, api_client, db):
        response = api_client.get(reverse('dashboard:summary'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
