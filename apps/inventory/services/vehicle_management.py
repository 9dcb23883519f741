"""Vehicle CRUD and floor plan attachment service."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from django.db import transaction

from apps.core.results import ServiceResult
from apps.floorplans.models import FloorPlan
from apps.floorplans.services.reconciler import reconcile_best_effort
from apps.sales.models import Sales
from apps.sequences.services import extract_category_code, generate_stock_id
from apps.vendors.services import resolve_vendor
from ..models import SalesStatus, Vehicle
from .exceptions import VehicleNotFoundError, InvalidFloorPlanError

logger = logging.getLogger(__name__)

BASIC_FIELDS = [
    'vehicle_title', 'vin', 'make', 'model', 'style', 'body_type',
    'manufacturing_year', 'vehicle_type', 'condition', 'certified',
]
DETAIL_GROUPS = [
    'specifications', 'exterior_interior', 'title_registration',
    'inspection', 'key_security', 'features', 'images',
]
COST_FIELDS = ['purchase_price', 'added_costs']
FLOOR_PLAN_FIELDS = ['floor_plan', 'is_floor_planned', 'floor_plan_date_opened']


def vehicle_type_code(vehicle_type: Optional[str]) -> str:
    """'suv' -> 'SUV', 'Pick Up' -> 'PICKUP'."""
    return ''.join((vehicle_type or '').split()).upper()


def stock_prefix_for(*, category: Optional[str], vehicle_type: Optional[str]) -> str:
    return f"{extract_category_code(category)}-{vehicle_type_code(vehicle_type)}"


def _get_vehicle(pk, *, for_update=False) -> Vehicle:
    queryset = Vehicle.objects.filter(is_deleted=False)
    if for_update:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(pk=pk)
    except Vehicle.DoesNotExist:
        raise VehicleNotFoundError(f"Vehicle {pk} not found")


@transaction.atomic
def create_vehicle(*, vendor_info: Dict[str, Any], created_by=None, **data) -> Vehicle:
    """
    Create a vehicle, resolving (or creating) its vendor and minting a stock ID.

    Raises:
        VendorNotFoundError: If an existing vendor is referenced but missing
        DuplicateVendorError: If a new vendor reuses a registered email
    """
    vendor = resolve_vendor(
        vendor_info=vendor_info,
        created_by=created_by,
        bill_of_sales=data.pop('bill_of_sales', None),
    )

    fields = {k: v for k, v in data.items() if k in BASIC_FIELDS + DETAIL_GROUPS and v is not None}
    prefix = stock_prefix_for(category=vendor.category, vehicle_type=fields.get('vehicle_type'))

    vehicle = Vehicle.objects.create(
        stock_id=generate_stock_id(prefix),
        vendor=vendor,
        created_by=created_by,
        **fields
    )
    logger.info("Vehicle %s created for vendor %s", vehicle.stock_id, vendor.vendor_id)
    return vehicle


def get_vehicle(*, pk: UUID) -> Vehicle:
    return _get_vehicle(pk)


@transaction.atomic
def update_vehicle(*, pk: UUID, data: Dict[str, Any], vendor_info: Optional[Dict[str, Any]] = None,
                   updated_by=None) -> Vehicle:
    """
    Edit a vehicle's vendor, basic details and detail groups.

    The stock ID is re-minted when the vendor category or vehicle type changes.
    """
    vehicle = _get_vehicle(pk, for_update=True)
    old_prefix = stock_prefix_for(
        category=vehicle.vendor.category if vehicle.vendor_id else None,
        vehicle_type=vehicle.vehicle_type,
    )

    if vendor_info:
        vehicle.vendor = resolve_vendor(vendor_info=vendor_info, created_by=updated_by)

    for field, value in data.items():
        if field in BASIC_FIELDS + DETAIL_GROUPS + ['notes', 'previous_owner']:
            setattr(vehicle, field, value)

    new_prefix = stock_prefix_for(
        category=vehicle.vendor.category if vehicle.vendor_id else None,
        vehicle_type=vehicle.vehicle_type,
    )
    if new_prefix.upper() != old_prefix.upper():
        old_stock_id = vehicle.stock_id
        vehicle.stock_id = generate_stock_id(new_prefix)
        logger.info("Vehicle stock ID changed %s -> %s", old_stock_id, vehicle.stock_id)

    vehicle.save()
    return vehicle


def update_vehicle_costs(
    *,
    pk: UUID,
    costs: Optional[Dict[str, Any]] = None,
    floor_plan: Optional[Dict[str, Any]] = None,
    curtailments: Optional[Dict[str, Any]] = None,
) -> ServiceResult:
    """
    Update a vehicle's costs, floor plan attachment and curtailments.

    Omitted groups are left alone. When the floor plan attachment changes, the
    reconciler runs for both the new and the previous floor plan.

    Raises:
        VehicleNotFoundError: If the vehicle does not exist
        InvalidFloorPlanError: If the target floor plan is missing or archived
    """
    with transaction.atomic():
        vehicle = _get_vehicle(pk, for_update=True)
        previous_floor_plan_id = vehicle.floor_plan_id
        previous_attached = vehicle.is_floor_planned

        if costs:
            for field in COST_FIELDS:
                if field in costs and costs[field] is not None:
                    setattr(vehicle, field, costs[field])
            vehicle.recalculate_costs()

        if floor_plan:
            if 'floor_plan' in floor_plan:
                target = floor_plan['floor_plan']
                target_id = getattr(target, 'pk', target)
                if target_id and not FloorPlan.objects.filter(pk=target_id, is_deleted=False).exists():
                    raise InvalidFloorPlanError(f"Floor plan {target_id} not found")
                vehicle.floor_plan_id = target_id
            if floor_plan.get('is_floor_planned') is not None:
                vehicle.is_floor_planned = floor_plan['is_floor_planned']
            if 'floor_plan_date_opened' in floor_plan:
                vehicle.floor_plan_date_opened = floor_plan['floor_plan_date_opened']
            if not vehicle.floor_plan_id:
                vehicle.is_floor_planned = False

        if curtailments is not None:
            vehicle.curtailments = {**(vehicle.curtailments or {}), **curtailments}

        vehicle.save()

    result = ServiceResult(vehicle)
    attachment_changed = (
        vehicle.floor_plan_id != previous_floor_plan_id
        or vehicle.is_floor_planned != previous_attached
    )
    if attachment_changed:
        reconcile_best_effort(result, vehicle_id=vehicle.pk, previous_floor_plan_id=previous_floor_plan_id)
    return result


@transaction.atomic
def mark_completed(*, pk: UUID, completed: bool = True) -> Vehicle:
    vehicle = _get_vehicle(pk, for_update=True)
    vehicle.mark_as_completed = completed
    vehicle.save(update_fields=['mark_as_completed', 'updated_at'])
    return vehicle


def delete_vehicle(*, pk: UUID) -> ServiceResult:
    """
    Soft-delete a vehicle and release its floor plan.

    Raises:
        VehicleNotFoundError: If the vehicle does not exist
    """
    with transaction.atomic():
        vehicle = _get_vehicle(pk, for_update=True)
        previous_floor_plan_id = vehicle.floor_plan_id

        vehicle.is_deleted = True
        vehicle.floor_plan = None
        vehicle.is_floor_planned = False
        vehicle.save(update_fields=['is_deleted', 'floor_plan', 'is_floor_planned', 'updated_at'])

    logger.info("Vehicle %s deleted", vehicle.stock_id)
    result = ServiceResult(None)
    if previous_floor_plan_id:
        reconcile_best_effort(result, vehicle_id=vehicle.pk, previous_floor_plan_id=previous_floor_plan_id)
    return result


# =============================================================================
# Queries
# =============================================================================

def get_sold_vehicles():
    return Vehicle.objects.filter(is_deleted=False, sales_status=SalesStatus.SOLD, sales__isnull=False)


def get_available_vehicles():
    return Vehicle.objects.filter(is_deleted=False, sales_status=SalesStatus.AVAILABLE, sales__isnull=True)


def get_vehicle_by_sale(*, sale_id: UUID) -> Optional[Vehicle]:
    """The vehicle whose current sale is ``sale_id``, if any."""
    return Vehicle.objects.filter(sales_id=sale_id, is_deleted=False).first()


def get_sale_by_vehicle(*, vehicle_id: UUID) -> Optional[Sales]:
    """Latest sale recorded for the vehicle, if any."""
    return Sales.objects.filter(vehicle_id=vehicle_id).order_by('-created_at').first()
