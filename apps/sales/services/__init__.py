"""Services for sales business logic."""

from .exceptions import (
    SalesServiceError,
    SaleNotFoundError,
    InvalidSaleDetailsError,
    TradeInNotFoundError,
)
from .sales_management import (
    get_sale,
    get_sale_by_receipt,
    list_sales,
    create_sale,
    add_sales_details,
    update_sale,
    set_net_trade_in,
    delete_sale,
)

__all__ = [
    # Exceptions
    'SalesServiceError',
    'SaleNotFoundError',
    'InvalidSaleDetailsError',
    'TradeInNotFoundError',
    # Services
    'get_sale',
    'get_sale_by_receipt',
    'list_sales',
    'create_sale',
    'add_sales_details',
    'update_sale',
    'set_net_trade_in',
    'delete_sale',
]
