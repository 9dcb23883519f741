"""
Primary result + warnings return type for services with side effects.

Mutations such as posting an installment or deleting a sale have a primary
write (the record itself) and derived follow-ups (vehicle status, floor plan
status, due date propagation). Follow-ups are best-effort: a failure is logged
and reported as a warning, never raised to the caller.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List

from django.db import transaction

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Outcome of a service call: the primary value plus side-effect warnings."""

    value: Any
    warnings: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings

    def merge(self, other: 'ServiceResult') -> 'ServiceResult':
        """Absorb another result's warnings and return self."""
        self.warnings.extend(other.warnings)
        return self


def best_effort(result: ServiceResult, label: str, func: Callable, *args, **kwargs):
    """
    Run a side effect without letting it fail the primary operation.

    The call runs inside its own savepoint so a database error only rolls back
    the side effect. Any exception is logged and recorded on ``result``.

    Args:
        result: ServiceResult collecting warnings
        label: Short description used in the warning text
        func: Side-effect callable

    Returns:
        Whatever ``func`` returned, or None if it raised
    """
    try:
        with transaction.atomic():
            outcome = func(*args, **kwargs)
    except Exception as e:
        logger.warning("Side effect '%s' failed: %s", label, e, exc_info=True)
        result.warnings.append(f"{label} failed: {e}")
        return None

    # Nested service results bubble their warnings up
    if isinstance(outcome, ServiceResult):
        result.merge(outcome)
    return outcome
