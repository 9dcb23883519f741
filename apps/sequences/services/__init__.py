"""Services for identifier sequences."""

from .exceptions import SequenceServiceError, UnknownModelError
from .counters import (
    next_sequence,
    extract_category_code,
    generate_vendor_id,
    generate_customer_id,
    generate_receipt_id,
    generate_stock_id,
    reset_counter,
    get_current_counter,
    get_all_counters,
    get_counters_by_type,
    get_counter_stats,
    sync_counter_with_data,
    bulk_sync_counters,
)

__all__ = [
    # Exceptions
    'SequenceServiceError',
    'UnknownModelError',
    # Services
    'next_sequence',
    'extract_category_code',
    'generate_vendor_id',
    'generate_customer_id',
    'generate_receipt_id',
    'generate_stock_id',
    'reset_counter',
    'get_current_counter',
    'get_all_counters',
    'get_counters_by_type',
    'get_counter_stats',
    'sync_counter_with_data',
    'bulk_sync_counters',
]
