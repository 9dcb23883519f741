import pytest
from datetime import date
from decimal import Decimal
from unittest import mock
from apps.customers.models import Customer
from apps.customers.services import CustomerNotFoundError, DuplicateCustomerError
from apps.floorplans.models import FloorPlanStatus
from apps.inventory.services import VehicleNotFoundError
from apps.sales.models import Sales, SalesType
from apps.sales.services import (
    create_sale,
    get_sale,
    add_sales_details,
    update_sale,
    set_net_trade_in,
    delete_sale,
    list_sales,
    SaleNotFoundError,
    InvalidSaleDetailsError,
    TradeInNotFoundError,
)
from apps.tradeins.services import create_trade_in


NEW_CUSTOMER = {
    'is_existing_customer': False,
    'first_name': 'Mary Ann',
    'last_name': 'Lopez',
    'email': 'maryann@example.com',
}


@pytest.fixture
def sale(customer, vehicle):
    return create_sale(
        customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
        vehicle_id=vehicle.pk,
    ).value


class TestCalculateTotalAmount:

    def test_components_minus_deposit(self):
        sale = Sales(is_cash_sale=True, sales_details={
            'vehicle_price': '12000', 'government_fees': 300, 'sales_tax': '960.50',
            'deposit': '1000', 'service_contract': '500',
        })

        assert sale.calculate_total_amount() == Decimal('12760.50')

    def test_financed_adds_ert_fee(self):
        sale = Sales(is_cash_sale=False, ert_fee=Decimal('150.00'), sales_details={
            'vehicle_price': '9000', 'service_contract': '500',
        })

        assert sale.calculate_total_amount() == Decimal('9150.00')

    def test_client_total_wins(self):
        sale = Sales(is_cash_sale=True, sales_details={'vehicle_price': '9000', 'total': '8800'})

        assert sale.calculate_total_amount() == Decimal('8800')

    def test_never_negative(self):
        sale = Sales(is_cash_sale=True, sales_details={'vehicle_price': '100', 'deposit': '500'})

        assert sale.calculate_total_amount() == Decimal('0.00')

    def test_non_numeric_values_ignored(self):
        sale = Sales(is_cash_sale=True, sales_details={'vehicle_price': 'n/a', 'sales_tax': '10'})

        assert sale.calculate_total_amount() == Decimal('10')


@pytest.mark.django_db
class TestCreateSale:

    def test_existing_customer(self, customer):
        result = create_sale(customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id})

        assert result.ok
        assert result.value.customer_id == customer.pk
        assert result.value.receipt_id.startswith('RC-')
        assert result.value.is_existing_customer is True

    def test_new_customer_created(self, db):
        result = create_sale(customer_info=NEW_CUSTOMER)

        customer = Customer.objects.get(email='maryann@example.com')
        assert result.value.customer_id == customer.pk
        assert customer.customer_id.startswith('CUS-MARYANN-')

    def test_receipt_ids_are_unique(self, customer):
        info = {'is_existing_customer': True, 'customer_id': customer.customer_id}

        first = create_sale(customer_info=info).value
        second = create_sale(customer_info=info).value

        assert first.receipt_id != second.receipt_id

    def test_duplicate_new_customer(self, customer):
        with pytest.raises(DuplicateCustomerError):
            create_sale(customer_info={**NEW_CUSTOMER, 'email': customer.email})

    def test_unknown_customer(self, db):
        with pytest.raises(CustomerNotFoundError):
            create_sale(customer_info={'is_existing_customer': True, 'customer_id': 'CUS-NOBODY-1001'})

    def test_unknown_vehicle(self, customer):
        with pytest.raises(VehicleNotFoundError):
            create_sale(
                customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
                vehicle_id='00000000-0000-0000-0000-000000000000',
            )
        assert not Sales.objects.exists()


@pytest.mark.django_db
class TestAddSalesDetails:

    def test_cash_sale_drops_financing(self, sale):
        add_sales_details(pk=sale.pk, data={
            'is_cash_sale': False,
            'payment_schedule': 'Monthly',
            'number_of_payments': 12,
            'first_payment_date': date(2025, 2, 1),
        })

        result = add_sales_details(pk=sale.pk, data={
            'is_cash_sale': True,
            'sales_details': {'vehicle_price': '15000'},
        })

        sale = result.value
        assert sale.sales_type == SalesType.CASH
        assert sale.payment_schedule is None
        assert sale.number_of_payments is None
        assert sale.next_payment_due_date is None
        assert sale.has_financing is False
        assert sale.total_amount == Decimal('15000.00')

    def test_financed_requires_number_of_payments(self, sale):
        with pytest.raises(InvalidSaleDetailsError):
            add_sales_details(pk=sale.pk, data={'is_cash_sale': False, 'payment_schedule': 'Monthly'})

    def test_next_due_date_defaults_to_first_payment(self, sale):
        result = add_sales_details(pk=sale.pk, data={
            'is_cash_sale': False,
            'sales_type': SalesType.BUY_HERE_PAY_HERE,
            'payment_schedule': 'Bi-Weekly',
            'number_of_payments': 24,
            'first_payment_date': date(2025, 3, 7),
        })

        assert result.value.next_payment_due_date == date(2025, 3, 7)
        assert result.value.sales_type == SalesType.BUY_HERE_PAY_HERE

    def test_explicit_next_due_date_kept(self, sale):
        result = add_sales_details(pk=sale.pk, data={
            'is_cash_sale': False,
            'payment_schedule': 'Monthly',
            'number_of_payments': 6,
            'first_payment_date': date(2025, 3, 7),
            'next_payment_due_date': date(2025, 4, 7),
        })

        assert result.value.next_payment_due_date == date(2025, 4, 7)

    def test_moved_first_payment_resets_next_due_date(self, sale):
        schedule = {
            'is_cash_sale': False,
            'payment_schedule': 'Monthly',
            'number_of_payments': 6,
            'first_payment_date': date(2025, 3, 7),
        }
        add_sales_details(pk=sale.pk, data=schedule)

        result = add_sales_details(pk=sale.pk, data={**schedule, 'first_payment_date': date(2025, 5, 1)})

        assert result.value.next_payment_due_date == date(2025, 5, 1)

    def test_repricing_keeps_next_due_date_when_first_payment_unchanged(self, sale):
        schedule = {
            'is_cash_sale': False,
            'payment_schedule': 'Monthly',
            'number_of_payments': 6,
            'first_payment_date': date(2025, 3, 7),
        }
        add_sales_details(pk=sale.pk, data={**schedule, 'next_payment_due_date': date(2025, 4, 7)})

        result = add_sales_details(pk=sale.pk, data={**schedule, 'number_of_payments': 8})

        assert result.value.next_payment_due_date == date(2025, 4, 7)

    def test_missing_sale(self, db):
        with pytest.raises(SaleNotFoundError):
            add_sales_details(pk='00000000-0000-0000-0000-000000000000', data={'is_cash_sale': True})

    def test_reconciles_floor_plan(self, sale, vehicle, floor_plan, attach):
        attach(vehicle, floor_plan)
        floor_plan.refresh_from_db()
        assert floor_plan.status == FloorPlanStatus.ACTIVE

        result = add_sales_details(pk=sale.pk, data={'is_cash_sale': True})

        assert result.ok
        floor_plan.refresh_from_db()
        assert floor_plan.status == FloorPlanStatus.ACTIVE


@pytest.mark.django_db
class TestUpdateSale:

    def test_change_customer(self, sale):
        result = update_sale(pk=sale.pk, customer_info=NEW_CUSTOMER)

        assert result.value.customer.email == 'maryann@example.com'
        assert result.value.is_existing_customer is False

    def test_change_sales_type(self, sale):
        result = update_sale(pk=sale.pk, sales_type=SalesType.BUY_HERE_PAY_HERE)

        assert get_sale(pk=sale.pk).sales_type == SalesType.BUY_HERE_PAY_HERE
        assert result.warnings == []

    def test_unknown_new_vehicle(self, sale):
        with pytest.raises(VehicleNotFoundError):
            update_sale(pk=sale.pk, vehicle_id='00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestNetTradeInLink:

    def test_link_sets_back_reference(self, sale):
        trade_in = create_trade_in(amount_allowed=Decimal('3000.00'))

        updated = set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=trade_in.pk)

        trade_in.refresh_from_db()
        assert updated.net_trade_in_enabled is True
        assert updated.net_trade_in_id == trade_in.pk
        assert trade_in.linked_sales_id == sale.pk

    def test_unlink_clears_back_reference(self, sale):
        trade_in = create_trade_in(amount_allowed=Decimal('3000.00'))
        set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=trade_in.pk)

        updated = set_net_trade_in(pk=sale.pk, enabled=False)

        trade_in.refresh_from_db()
        assert updated.net_trade_in_id is None
        assert trade_in.linked_sales_id is None

    def test_relink_releases_previous(self, sale):
        first = create_trade_in(amount_allowed=Decimal('1000.00'))
        second = create_trade_in(amount_allowed=Decimal('2000.00'))
        set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=first.pk)

        set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=second.pk)

        first.refresh_from_db()
        second.refresh_from_db()
        assert first.linked_sales_id is None
        assert second.linked_sales_id == sale.pk

    def test_missing_trade_in(self, sale):
        with pytest.raises(TradeInNotFoundError):
            set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id='00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestDeleteSale:

    def test_delete_returns_receipt(self, sale):
        result = delete_sale(pk=sale.pk)

        assert result.value == sale.receipt_id
        assert not Sales.objects.filter(pk=sale.pk).exists()

    def test_delete_unlinks_trade_in(self, sale):
        trade_in = create_trade_in(amount_allowed=Decimal('500.00'))
        set_net_trade_in(pk=sale.pk, enabled=True, net_trade_in_id=trade_in.pk)

        delete_sale(pk=sale.pk)

        trade_in.refresh_from_db()
        assert trade_in.linked_sales_id is None

    def test_vehicle_update_failure_is_a_warning(self, sale):
        with mock.patch(
            'apps.sales.services.sales_management.apply_sale_event',
            side_effect=RuntimeError('vehicle store unavailable'),
        ):
            result = delete_sale(pk=sale.pk)

        assert not Sales.objects.filter(pk=sale.pk).exists()
        assert result.warnings == ['Vehicle status update failed: vehicle store unavailable']

    def test_missing_sale(self, db):
        with pytest.raises(SaleNotFoundError):
            delete_sale(pk='00000000-0000-0000-0000-000000000000')


@pytest.mark.django_db
class TestListSales:

    def test_filters(self, customer, make_vehicle, make_financed_sale):
        make_financed_sale(make_vehicle())
        create_sale(customer_info=NEW_CUSTOMER)

        assert list_sales(customer_id=customer.customer_id).count() == 1
        assert list_sales(sales_type=SalesType.BUY_HERE_PAY_HERE).count() == 1
        assert list_sales().count() == 2
