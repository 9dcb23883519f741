"""Services for floor plan business logic."""

from .exceptions import FloorPlansServiceError, FloorPlanNotFoundError, DuplicateFloorPlanError
from .floor_plan_management import (
    create_floor_plan,
    get_floor_plan,
    update_floor_plan,
    archive_floor_plan,
    delete_floor_plan,
)
from .reconciler import (
    StatusChange,
    is_vehicle_complete,
    derive_floor_plan_status,
    vehicle_installments_complete,
    reconcile_floor_plan,
    reconcile_for_receipt,
    reconcile_for_vehicle,
    reconcile,
    reconcile_best_effort,
)

__all__ = [
    # Exceptions
    'FloorPlansServiceError',
    'FloorPlanNotFoundError',
    'DuplicateFloorPlanError',
    # Floor plans
    'create_floor_plan',
    'get_floor_plan',
    'update_floor_plan',
    'archive_floor_plan',
    'delete_floor_plan',
    # Reconciler
    'StatusChange',
    'is_vehicle_complete',
    'derive_floor_plan_status',
    'vehicle_installments_complete',
    'reconcile_floor_plan',
    'reconcile_for_receipt',
    'reconcile_for_vehicle',
    'reconcile',
    'reconcile_best_effort',
]
