"""Atomic counters and the identifier formats built on them."""

import logging
import re
from typing import Dict, List, Optional

from django.apps import apps
from django.db import transaction
from django.db.models import F
from django.utils import timezone

from ..models import Counter
from .exceptions import UnknownModelError

logger = logging.getLogger(__name__)

CUSTOMER_ID_OFFSET = 1000
UNKNOWN_CATEGORY_CODE = 'XX'

# model label -> field holding the minted identifier
SEQUENCED_MODELS = {
    'vendors.Vendor': 'vendor_id',
    'customers.Customer': 'customer_id',
    'sales.Sales': 'receipt_id',
    'inventory.Vehicle': 'stock_id',
}

_CATEGORY_CODE_RE = re.compile(r'- (\w{2,3})$')
_TRAILING_DIGITS_RE = re.compile(r'(\d+)$')


@transaction.atomic
def next_sequence(namespace: str) -> int:
    """
    Atomically increment and return the counter for ``namespace``.

    The counter row is created on first use. The increment is a single
    ``UPDATE ... SET seq = seq + 1`` on a locked row, so concurrent callers
    always receive distinct consecutive values.

    Args:
        namespace: Counter key, e.g. 'customer', 'receipt:2025', 'stock:AU-SUV'

    Returns:
        The new sequence value (1 on first use)
    """
    counter, _ = Counter.objects.select_for_update().get_or_create(key=namespace)
    Counter.objects.filter(pk=counter.pk).update(seq=F('seq') + 1)
    counter.refresh_from_db(fields=['seq'])
    return counter.seq


def extract_category_code(category: Optional[str]) -> str:
    """Return the short code of a vendor category such as 'Auction - AU'."""
    if not category:
        return UNKNOWN_CATEGORY_CODE
    match = _CATEGORY_CODE_RE.search(category.strip())
    return match.group(1).upper() if match else UNKNOWN_CATEGORY_CODE


def generate_vendor_id(category_code: str) -> str:
    sequence = next_sequence(f'vendor:{category_code}')
    return f"VEN-{category_code}-{sequence:04d}"


def generate_customer_id(first_name: str) -> str:
    sequence = next_sequence('customer')
    clean_name = re.sub(r'[^a-zA-Z0-9]', '', first_name or '').upper()
    return f"CUS-{clean_name}-{CUSTOMER_ID_OFFSET + sequence}"


def generate_receipt_id(year: Optional[int] = None) -> str:
    year = year or timezone.now().year
    sequence = next_sequence(f'receipt:{year}')
    return f"RC-{year}-{sequence:04d}"


def _max_stock_suffix(prefix: str) -> int:
    """Highest 4-digit suffix among existing stock IDs that share ``prefix``."""
    Vehicle = apps.get_model('inventory', 'Vehicle')
    stock_ids = (
        Vehicle.objects
        .filter(stock_id__iregex=rf'^{re.escape(prefix)}-[0-9]{{4}}$')
        .values_list('stock_id', flat=True)
    )
    suffixes = [int(stock_id.rsplit('-', 1)[-1]) for stock_id in stock_ids]
    return max(suffixes, default=0)


@transaction.atomic
def generate_stock_id(prefix: str) -> str:
    """
    Mint the next stock ID for ``prefix`` (e.g. 'AU-SUV' -> 'AU-SUV-0007').

    The counter is reconciled against the highest stock ID already present
    for the prefix, so counters that fell behind imported or hand-inserted
    vehicles heal themselves instead of issuing a duplicate.
    """
    key = f'stock:{prefix}'
    sequence = next_sequence(key)
    target = max(sequence, _max_stock_suffix(prefix) + 1)

    if target > sequence:
        logger.info("Counter %s behind existing data, advancing %s -> %s", key, sequence, target)
        Counter.objects.filter(key=key, seq__lt=target).update(seq=target)
        sequence = Counter.objects.get(key=key).seq

    return f"{prefix}-{sequence:04d}"


def reset_counter(key: str, value: int = 0) -> Counter:
    counter, _ = Counter.objects.update_or_create(key=key, defaults={'seq': value})
    return counter


def get_current_counter(key: str) -> int:
    return Counter.objects.filter(key=key).values_list('seq', flat=True).first() or 0


def get_all_counters():
    return Counter.objects.order_by('key')


def get_counters_by_type(counter_type: str):
    return Counter.objects.filter(key__istartswith=f'{counter_type}:').order_by('key')


def get_counter_stats() -> Dict:
    """Summarise counters grouped by their namespace type."""
    stats = {'total': 0, 'by_type': {}, 'total_sequences': 0}

    for counter in get_all_counters():
        bucket = stats['by_type'].setdefault(counter.counter_type, {'count': 0, 'total_seq': 0})
        bucket['count'] += 1
        bucket['total_seq'] += counter.seq
        stats['total'] += 1
        stats['total_sequences'] += counter.seq

    return stats


def sync_counter_with_data(
    key: str,
    model_label: str,
    id_field: Optional[str] = None,
    prefix: str = '',
) -> Counter:
    """
    Set a counter to the highest numeric suffix found in existing records.

    Args:
        key: Counter key to reset
        model_label: 'app_label.ModelName' of a model carrying minted IDs
        id_field: Field holding the ID (defaults to the model's known field)
        prefix: Only consider IDs starting with this prefix

    Raises:
        UnknownModelError: If the model does not carry sequence IDs
    """
    if model_label not in SEQUENCED_MODELS:
        raise UnknownModelError(f"Unknown model: {model_label}")

    id_field = id_field or SEQUENCED_MODELS[model_label]
    model = apps.get_model(model_label)

    values = model.objects.exclude(**{f'{id_field}__isnull': True})
    if prefix:
        values = values.filter(**{f'{id_field}__startswith': prefix})

    max_number = 0
    for value in values.values_list(id_field, flat=True):
        match = _TRAILING_DIGITS_RE.search(str(value))
        if match:
            max_number = max(max_number, int(match.group(1)))

    # Customer IDs carry the offset, the counter does not
    if model_label == 'customers.Customer' and max_number:
        max_number = max(max_number - CUSTOMER_ID_OFFSET, 0)

    return reset_counter(key, max_number)


def _sync_tasks() -> List[Dict]:
    Vendor = apps.get_model('vendors', 'Vendor')
    Vehicle = apps.get_model('inventory', 'Vehicle')
    year = timezone.now().year

    tasks = [
        {'key': 'customer', 'model_label': 'customers.Customer', 'prefix': 'CUS-'},
        {'key': f'receipt:{year}', 'model_label': 'sales.Sales', 'prefix': f'RC-{year}-'},
    ]

    for category, _ in Vendor._meta.get_field('category').choices:
        code = extract_category_code(category)
        tasks.append({'key': f'vendor:{code}', 'model_label': 'vendors.Vendor', 'prefix': f'VEN-{code}-'})

    prefixes = {
        stock_id.rsplit('-', 1)[0]
        for stock_id in Vehicle.objects.exclude(stock_id='').values_list('stock_id', flat=True)
        if '-' in stock_id
    }
    for prefix in sorted(prefixes):
        tasks.append({'key': f'stock:{prefix}', 'model_label': 'inventory.Vehicle', 'prefix': f'{prefix}-'})

    return tasks


def bulk_sync_counters() -> List[Dict]:
    """Sync every known counter with existing data, reporting per task."""
    results = []

    for task in _sync_tasks():
        try:
            counter = sync_counter_with_data(task['key'], task['model_label'], prefix=task['prefix'])
            results.append({**task, 'success': True, 'new_value': counter.seq})
        except Exception as e:
            logger.error("Counter sync failed for %s: %s", task['key'], e)
            results.append({**task, 'success': False, 'error': str(e)})

    return results
