"""Domain-specific exceptions for trade-in services."""


class TradeInsServiceError(Exception):
    """Base exception for trade-in services."""
    pass


class NetTradeInNotFoundError(TradeInsServiceError):
    """Raised when trade-in does not exist."""
    pass


class MissingVehicleInfoError(TradeInsServiceError):
    """Raised when a trade-in is added to inventory without vehicle details."""
    pass
