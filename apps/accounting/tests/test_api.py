import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestInstallmentCreate:
    """Tests for POST /api/accounting/"""

    def test_record_installment(self, authenticated_client, vehicle, make_financed_sale):
        sale = make_financed_sale(vehicle)
        data = {'receipt_number': sale.receipt_id, 'amount': '300.00', 'payment_type': 'Card'}

        response = authenticated_client.post(reverse('accounting:accounting-list'), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['installment_number'] == 1
        assert response.data['due_date'] == '2025-01-15'
        assert response.data['amount'] == '300.00'
        assert response.data['warnings'] == []

    def test_limit_reached(self, authenticated_client, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle, number_of_payments=1)
        pay(sale)
        data = {'receipt_number': sale.receipt_id, 'amount': '300.00'}

        response = authenticated_client.post(reverse('accounting:accounting-list'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_unknown_receipt(self, authenticated_client, db):
        data = {'receipt_number': 'RC-1999-0001', 'amount': '300.00'}

        response = authenticated_client.post(reverse('accounting:accounting-list'), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_amount_required(self, authenticated_client, db):
        response = authenticated_client.post(
            reverse('accounting:accounting-list'), {'receipt_number': 'RC-2025-0001'}, format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'amount' in response.data


@pytest.mark.django_db
class TestAccountingReads:

    def test_list_latest_per_receipt(self, authenticated_client, vehicle, make_financed_sale, pay):
        sale = make_financed_sale(vehicle)
        pay(sale)
        pay(sale)

        response = authenticated_client.get(reverse('accounting:accounting-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        row = response.data['results'][0]
        assert row['installment_number'] == 2
        assert row['installment_count'] == 2
        assert row['status'] == 'cleared'

    def test_retrieve(self, authenticated_client, vehicle, make_financed_sale, pay):
        entry = pay(make_financed_sale(vehicle)).value

        response = authenticated_client.get(reverse('accounting:accounting-detail', args=[entry.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['receipt_number'] == entry.receipt_number

    def test_customer_summary(self, authenticated_client, vehicle, customer, make_financed_sale, pay):
        pay(make_financed_sale(vehicle, number_of_payments=4))

        response = authenticated_client.get(
            reverse('accounting:customer-summary'), {'customer_id': customer.customer_id},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['installment_count'] == 1
        assert response.data['remaining_payments'] == 3
        assert response.data['latest_due_date'] == '2025-01-15'

    def test_customer_summary_not_found(self, authenticated_client, db):
        response = authenticated_client.get(reverse('accounting:customer-summary'), {'customer_id': 'CUS-X-1001'})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_customer_summary_requires_id(self, authenticated_client, db):
        response = authenticated_client.get(reverse('accounting:customer-summary'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
