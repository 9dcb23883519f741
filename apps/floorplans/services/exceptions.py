"""Domain-specific exceptions for floor plan services."""


class FloorPlansServiceError(Exception):
    """Base exception for floor plan services."""
    pass


class FloorPlanNotFoundError(FloorPlansServiceError):
    """Raised when floor plan does not exist."""
    pass


class DuplicateFloorPlanError(FloorPlansServiceError):
    """Raised when a floor plan with the same company name already exists."""
    pass
