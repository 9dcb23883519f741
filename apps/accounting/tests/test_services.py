import pytest
from datetime import date
from decimal import Decimal
from unittest import mock
from apps.accounting.models import Accounting
from apps.accounting.services import (
    create_installment,
    customer_sales_summary,
    latest_installments,
    installment_status,
    remaining_payments,
    InstallmentLimitReachedError,
    ReceiptNotFoundError,
    CustomerSalesNotFoundError,
)
from apps.floorplans.models import FloorPlanStatus
from apps.sales.services import create_sale, add_sales_details


class TestRemainingPayments:

    @pytest.mark.parametrize('total,count,expected', [
        (None, 0, (0, 0)),
        (None, 4, (4, 0)),
        (5, 2, (5, 3)),
        (3, 3, (3, 0)),
        (2, 3, (3, 0)),
    ])
    def test_never_negative(self, total, count, expected):
        assert remaining_payments(total, count) == expected


@pytest.mark.django_db
class TestCreateInstallment:

    def test_first_installment(self, vehicle, customer, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)

        result = pay(sale)

        entry = result.value
        assert result.ok
        assert entry.installment_number == 1
        assert entry.total_number_of_payments == 2
        assert entry.due_date == date(2025, 1, 15)
        assert entry.customer_code == customer.customer_id
        assert entry.stock_id == vehicle.stock_id
        assert entry.sales_type == 'Buy Here Pay Here'
        assert entry.payment_schedule == 'Monthly'
        assert entry.amount == Decimal('250.00')

    def test_numbers_and_due_dates_advance(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)

        pay(sale)
        second = pay(sale).value

        sale.refresh_from_db()
        assert second.installment_number == 2
        assert second.due_date == date(2025, 2, 15)
        assert sale.next_payment_due_date == date(2025, 2, 15)

    def test_limit_reached(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)
        pay(sale)
        pay(sale)

        with pytest.raises(InstallmentLimitReachedError):
            pay(sale)
        assert Accounting.objects.filter(receipt_number=sale.receipt_id).count() == 2

    def test_request_total_overrides_schedule(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle, number_of_payments=1)

        pay(sale, total_number_of_payments=2)
        entry = pay(sale, total_number_of_payments=2).value

        assert entry.installment_number == 2
        assert entry.total_number_of_payments == 2

    def test_zero_total_rejects(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)

        with pytest.raises(InstallmentLimitReachedError):
            pay(sale, total_number_of_payments=0)

    def test_explicit_due_date(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle, payment_schedule='Weekly')

        entry = pay(sale, due_date=date(2025, 1, 20)).value

        sale.refresh_from_db()
        assert entry.due_date == date(2025, 1, 20)
        assert sale.next_payment_due_date == date(2025, 1, 20)

    def test_cash_sale_has_no_limit(self, customer, pay):
        sale = create_sale(
            customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
        ).value
        add_sales_details(pk=sale.pk, data={'is_cash_sale': True})

        pay(sale)
        entry = pay(sale).value

        assert entry.installment_number == 2
        assert entry.total_number_of_payments is None

    def test_unknown_receipt(self, db):
        with pytest.raises(ReceiptNotFoundError):
            create_installment(receipt_number='RC-1999-0001', data={'amount': Decimal('10.00')})

    def test_payoff_deactivates_floor_plan(self, vehicle, floor_plan, attach, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)
        attach(vehicle, floor_plan)

        pay(sale)
        floor_plan.refresh_from_db()
        assert floor_plan.status == FloorPlanStatus.ACTIVE

        pay(sale)
        floor_plan.refresh_from_db()
        assert floor_plan.status == FloorPlanStatus.INACTIVE

    def test_propagation_failure_is_a_warning(self, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)

        with mock.patch(
            'apps.accounting.services.installments._propagate_next_due_date',
            side_effect=RuntimeError('database is locked'),
        ):
            result = pay(sale)

        assert Accounting.objects.filter(receipt_number=sale.receipt_id).count() == 1
        assert result.warnings == ['Next due date update failed: database is locked']


@pytest.mark.django_db
class TestCustomerSalesSummary:

    def test_progress(self, vehicle, customer, make_financed_sale, pay):
        sale = make_financed_sale(vehicle, number_of_payments=3)
        pay(sale)

        summary = customer_sales_summary(customer_id=customer.customer_id)

        assert summary['receipt_id'] == sale.receipt_id
        assert summary['stock_id'] == vehicle.stock_id
        assert summary['total_number_of_payments'] == 3
        assert summary['installment_count'] == 1
        assert summary['remaining_payments'] == 2
        assert summary['latest_due_date'] == date(2025, 1, 15)
        assert summary['next_payment_due_date'] == date(2025, 1, 15)

    def test_without_installments(self, vehicle, customer, make_financed_sale):
        make_financed_sale(vehicle)

        summary = customer_sales_summary(customer_id=customer.customer_id)

        assert summary['installment_count'] == 0
        assert summary['latest_due_date'] is None
        assert summary['remaining_payments'] == 2

    def test_cash_sale_reports_installment_count_as_total(self, vehicle, customer, pay):
        sale = create_sale(
            customer_info={'is_existing_customer': True, 'customer_id': customer.customer_id},
            vehicle_id=vehicle.pk,
        ).value
        sale = add_sales_details(pk=sale.pk, data={'is_cash_sale': True}).value
        pay(sale)
        pay(sale)

        summary = customer_sales_summary(customer_id=customer.customer_id)

        assert summary['total_number_of_payments'] == 2
        assert summary['installment_count'] == 2
        assert summary['remaining_payments'] == 0

    def test_unknown_customer(self, db):
        with pytest.raises(CustomerSalesNotFoundError):
            customer_sales_summary(customer_id='CUS-NOBODY-1001')

    def test_customer_without_sales(self, customer):
        with pytest.raises(CustomerSalesNotFoundError):
            customer_sales_summary(customer_id=customer.customer_id)


@pytest.mark.django_db
class TestLatestInstallments:

    def test_one_row_per_receipt(self, make_vehicle, make_financed_sale, pay):
        cleared = make_financed_sale(make_vehicle(), number_of_payments=2)
        pending = make_financed_sale(make_vehicle(), number_of_payments=3)
        pay(cleared)
        pay(cleared)
        pay(pending)

        rows = {row.receipt_number: row for row in latest_installments()}

        assert set(rows) == {cleared.receipt_id, pending.receipt_id}
        assert rows[cleared.receipt_id].installment_number == 2
        assert rows[cleared.receipt_id].installment_count == 2
        assert installment_status(rows[cleared.receipt_id]) == 'cleared'
        assert rows[pending.receipt_id].installment_count == 1
        assert installment_status(rows[pending.receipt_id]) == 'pending'
