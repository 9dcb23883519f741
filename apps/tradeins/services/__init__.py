"""Services for trade-in business logic."""

from .exceptions import TradeInsServiceError, NetTradeInNotFoundError, MissingVehicleInfoError
from .trade_in_management import (
    create_trade_in,
    get_trade_in,
    update_trade_in,
    delete_trade_in,
)

__all__ = [
    # Exceptions
    'TradeInsServiceError',
    'NetTradeInNotFoundError',
    'MissingVehicleInfoError',
    # Services
    'create_trade_in',
    'get_trade_in',
    'update_trade_in',
    'delete_trade_in',
]
