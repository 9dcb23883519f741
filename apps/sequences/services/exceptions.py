"""Domain-specific exceptions for sequence services."""


class SequenceServiceError(Exception):
    """Base exception for sequence services."""
    pass


class UnknownModelError(SequenceServiceError):
    """Raised when a counter sync targets a model that carries no sequence IDs."""
    pass
