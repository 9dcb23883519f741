import pytest
from concurrent.futures import ThreadPoolExecutor
from django.db import connection
from django.utils import timezone
from apps.inventory.models import Vehicle
from apps.customers.models import Customer
from apps.sequences.models import Counter
from apps.sequences.services import (
    next_sequence,
    extract_category_code,
    generate_vendor_id,
    generate_customer_id,
    generate_receipt_id,
    generate_stock_id,
    reset_counter,
    get_current_counter,
    get_counters_by_type,
    get_counter_stats,
    sync_counter_with_data,
    bulk_sync_counters,
    UnknownModelError,
)


class TestExtractCategoryCode:

    @pytest.mark.parametrize('category,code', [
        ('Auction - AU', 'AU'),
        ('Company - COM', 'COM'),
        ('Trade-In - TI', 'TI'),
        ('  Dealer - dl ', 'DL'),
        ('Auction', 'XX'),
        ('', 'XX'),
        (None, 'XX'),
    ])
    def test_codes(self, category, code):
        assert extract_category_code(category) == code


@pytest.mark.django_db
class TestNextSequence:

    def test_starts_at_one(self):
        assert next_sequence('fresh') == 1
        assert Counter.objects.get(key='fresh').seq == 1

    def test_strictly_increasing(self):
        values = [next_sequence('customer') for _ in range(5)]

        assert values == [1, 2, 3, 4, 5]

    def test_namespaces_are_independent(self):
        next_sequence('vendor:AU')
        next_sequence('vendor:AU')

        assert next_sequence('vendor:DL') == 1
        assert next_sequence('vendor:AU') == 3


def _next_in_thread(namespace):
    try:
        return next_sequence(namespace)
    finally:
        connection.close()


@pytest.mark.django_db(transaction=True)
class TestConcurrentNextSequence:

    def test_concurrent_callers_get_distinct_values(self):
        calls = 20
        with ThreadPoolExecutor(max_workers=5) as executor:
            values = list(executor.map(_next_in_thread, ['receipt:race'] * calls))

        assert sorted(values) == list(range(1, calls + 1))
        assert Counter.objects.get(key='receipt:race').seq == calls


@pytest.mark.django_db
class TestIdentifierFormats:

    def test_vendor_id(self):
        assert generate_vendor_id('AU') == 'VEN-AU-0001'
        assert generate_vendor_id('AU') == 'VEN-AU-0002'

    def test_customer_id_offsets_and_cleans_name(self):
        assert generate_customer_id("Mary-Jane O'Neil") == 'CUS-MARYJANEONEIL-1001'
        assert generate_customer_id('bob') == 'CUS-BOB-1002'

    def test_receipt_id_per_year(self):
        assert generate_receipt_id(2024) == 'RC-2024-0001'
        assert generate_receipt_id(2025) == 'RC-2025-0001'
        assert generate_receipt_id(2024) == 'RC-2024-0002'

    def test_receipt_id_defaults_to_current_year(self):
        year = timezone.now().year

        assert generate_receipt_id() == f'RC-{year}-0001'

    def test_stock_id(self):
        assert generate_stock_id('AU-SUV') == 'AU-SUV-0001'
        assert generate_stock_id('AU-SUV') == 'AU-SUV-0002'
        assert generate_stock_id('DL-SEDAN') == 'DL-SEDAN-0001'

    def test_stock_id_heals_behind_counter(self):
        Vehicle.objects.create(stock_id='AU-SUV-0007', vehicle_type='SUV')
        Vehicle.objects.create(stock_id='AU-SUV-0003', vehicle_type='SUV')

        assert generate_stock_id('AU-SUV') == 'AU-SUV-0008'
        assert get_current_counter('stock:AU-SUV') == 8
        assert generate_stock_id('AU-SUV') == 'AU-SUV-0009'

    def test_stock_id_ignores_other_prefixes(self):
        Vehicle.objects.create(stock_id='AU-SUVX-0050', vehicle_type='SUVX')

        assert generate_stock_id('AU-SUV') == 'AU-SUV-0001'


@pytest.mark.django_db
class TestCounterAdministration:

    def test_get_current_counter_absent(self):
        assert get_current_counter('missing') == 0

    def test_reset_counter_upserts(self):
        reset_counter('vendor:AU', 10)
        assert get_current_counter('vendor:AU') == 10

        reset_counter('vendor:AU')
        assert get_current_counter('vendor:AU') == 0

    def test_counters_by_type(self):
        next_sequence('vendor:AU')
        next_sequence('vendor:DL')
        next_sequence('stock:AU-SUV')

        keys = list(get_counters_by_type('vendor').values_list('key', flat=True))

        assert keys == ['vendor:AU', 'vendor:DL']

    def test_counter_stats(self):
        reset_counter('vendor:AU', 3)
        reset_counter('vendor:DL', 2)
        reset_counter('customer', 5)

        stats = get_counter_stats()

        assert stats['total'] == 3
        assert stats['total_sequences'] == 10
        assert stats['by_type']['vendor'] == {'count': 2, 'total_seq': 5}
        assert stats['by_type']['customer'] == {'count': 1, 'total_seq': 5}

    def test_sync_customer_counter_removes_offset(self):
        Customer.objects.create(customer_id='CUS-ANN-1004', first_name='Ann', email='ann@example.com')
        Customer.objects.create(customer_id='CUS-BOB-1012', first_name='Bob', email='bob@example.com')

        counter = sync_counter_with_data('customer', 'customers.Customer')

        assert counter.seq == 12
        assert generate_customer_id('Cy') == 'CUS-CY-1013'

    def test_sync_unknown_model(self):
        with pytest.raises(UnknownModelError):
            sync_counter_with_data('x', 'accounts.User')

    def test_bulk_sync_reports_each_task(self):
        Vehicle.objects.create(stock_id='AU-SUV-0004', vehicle_type='SUV')

        results = bulk_sync_counters()

        assert all(r['success'] for r in results)
        stock = next(r for r in results if r['key'] == 'stock:AU-SUV')
        assert stock['new_value'] == 4
        assert {r['key'] for r in results} >= {'customer', 'vendor:AU', 'vendor:TI'}
