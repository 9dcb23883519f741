"""Domain-specific exceptions for inventory services."""


class InventoryServiceError(Exception):
    """Base exception for inventory services."""
    pass


class VehicleNotFoundError(InventoryServiceError):
    """Raised when vehicle does not exist or is deleted."""
    pass


class InvalidFloorPlanError(InventoryServiceError):
    """Raised when a vehicle is attached to a missing or archived floor plan."""
    pass
