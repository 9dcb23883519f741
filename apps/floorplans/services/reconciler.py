"""
Floor plan activity reconciler.

A floor plan is Active while at least one vehicle attached to it still owes
installments, and Inactive once every attached vehicle has paid in full or
when nothing is attached. Archived plans are never touched.

The decision itself lives in two pure functions (``is_vehicle_complete`` and
``derive_floor_plan_status``); everything else gathers their inputs from the
database and writes the result only on an actual transition. Every mutation
path goes through ``reconcile``, so re-running it is always safe: it converges
on the same status no matter how often or in which order it is triggered.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional
from uuid import UUID

from apps.accounting.models import Accounting
from apps.core.results import ServiceResult, best_effort
from apps.inventory.models import Vehicle
from apps.sales.models import Sales
from ..models import FloorPlan, FloorPlanStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StatusChange:
    """A floor plan status transition that was written."""

    floor_plan_id: UUID
    old_status: str
    new_status: str


# =============================================================================
# Pure derivations
# =============================================================================

def is_vehicle_complete(*, total_installments: Optional[int], paid_installments: int) -> bool:
    """
    Whether a vehicle's sale has been paid in full.

    A sale without a schedule (no or zero installments) is never complete.
    """
    if not total_installments:
        return False
    return paid_installments >= total_installments


def derive_floor_plan_status(
    *,
    current_status: str,
    is_deleted: bool,
    vehicle_completions: Iterable[bool],
) -> str:
    """
    Status a floor plan should have.

    Args:
        current_status: Status stored now
        is_deleted: Archived plans keep ``current_status``
        vehicle_completions: One flag per attached vehicle

    Returns:
        FloorPlanStatus value
    """
    if is_deleted:
        return current_status

    completions = list(vehicle_completions)
    if not completions or all(completions):
        return FloorPlanStatus.INACTIVE
    return FloorPlanStatus.ACTIVE


# =============================================================================
# Data gathering
# =============================================================================

def _attached_vehicles(floor_plan_id):
    return Vehicle.objects.filter(floor_plan_id=floor_plan_id, is_floor_planned=True)


def _sale_for_vehicle(vehicle: Vehicle) -> Optional[Sales]:
    """The vehicle's current sale; a dangling link falls back to the latest sale."""
    if vehicle.sales_id:
        sale = Sales.objects.filter(pk=vehicle.sales_id).first()
        if sale is not None:
            return sale
    return Sales.objects.filter(vehicle_id=vehicle.pk).order_by('-created_at').first()


def vehicle_installments_complete(vehicle: Vehicle) -> bool:
    """Whether the vehicle's sale has all scheduled installments recorded."""
    sale = _sale_for_vehicle(vehicle)
    if sale is None:
        return False

    paid = Accounting.objects.filter(receipt_number=sale.receipt_id).count()
    return is_vehicle_complete(total_installments=sale.number_of_payments, paid_installments=paid)


def _apply_status(floor_plan: FloorPlan, new_status: str) -> Optional[StatusChange]:
    """Persist ``new_status`` if it differs from what is stored."""
    if floor_plan.status == new_status:
        return None

    old_status = floor_plan.status
    # Compare-and-set so two concurrent runs write at most once
    updated = FloorPlan.objects.filter(pk=floor_plan.pk, status=old_status).update(status=new_status)
    if not updated:
        return None

    floor_plan.status = new_status
    logger.info("Floor plan %s (%s): %s -> %s", floor_plan.company_name, floor_plan.pk, old_status, new_status)
    return StatusChange(floor_plan_id=floor_plan.pk, old_status=old_status, new_status=new_status)


# =============================================================================
# Reconciliation runs
# =============================================================================

def reconcile_floor_plan(floor_plan_id) -> Optional[StatusChange]:
    """
    Full check of one floor plan against all of its attached vehicles.

    Returns:
        The transition written, or None when the status was already right
        (or the plan is missing or archived)
    """
    floor_plan = FloorPlan.objects.filter(pk=floor_plan_id).first()
    if floor_plan is None or floor_plan.is_deleted:
        return None

    completions = (vehicle_installments_complete(v) for v in _attached_vehicles(floor_plan_id))
    new_status = derive_floor_plan_status(
        current_status=floor_plan.status,
        is_deleted=floor_plan.is_deleted,
        vehicle_completions=completions,
    )
    return _apply_status(floor_plan, new_status)


def reconcile_for_receipt(receipt_number: str) -> Optional[StatusChange]:
    """
    Reconcile after an installment was posted for ``receipt_number``.

    Only the paying vehicle is inspected first. If it still owes installments
    its floor plan must be Active and no other vehicle matters; the full scan
    runs only when this vehicle has just completed.
    """
    sale = Sales.objects.filter(receipt_id=receipt_number).first()
    if sale is None or not sale.vehicle_id:
        return None

    vehicle = Vehicle.objects.filter(pk=sale.vehicle_id).first()
    if vehicle is None or not vehicle.floor_plan_id:
        return None

    if not vehicle.is_floor_planned or vehicle_installments_complete(vehicle):
        return reconcile_floor_plan(vehicle.floor_plan_id)

    floor_plan = FloorPlan.objects.filter(pk=vehicle.floor_plan_id).first()
    if floor_plan is None:
        return None

    new_status = derive_floor_plan_status(
        current_status=floor_plan.status,
        is_deleted=floor_plan.is_deleted,
        vehicle_completions=[False],
    )
    return _apply_status(floor_plan, new_status)


def reconcile_for_vehicle(vehicle_id, previous_floor_plan_id=None) -> List[StatusChange]:
    """
    Reconcile after a vehicle's floor plan attachment changed.

    Checks the vehicle's current plan and the plan it left (if known), then
    sweeps every Active plan so none stays Active with nothing attached.
    """
    changes = []
    plan_ids = []

    vehicle = Vehicle.objects.filter(pk=vehicle_id).first()
    if vehicle is not None and vehicle.floor_plan_id:
        plan_ids.append(vehicle.floor_plan_id)
    if previous_floor_plan_id and previous_floor_plan_id not in plan_ids:
        plan_ids.append(previous_floor_plan_id)

    for plan_id in plan_ids:
        change = reconcile_floor_plan(plan_id)
        if change:
            changes.append(change)

    orphaned = (
        FloorPlan.objects
        .filter(status=FloorPlanStatus.ACTIVE, is_deleted=False)
        .exclude(pk__in=plan_ids)
    )
    for floor_plan in orphaned:
        if not _attached_vehicles(floor_plan.pk).exists():
            change = _apply_status(floor_plan, FloorPlanStatus.INACTIVE)
            if change:
                changes.append(change)

    return changes


def reconcile(
    *,
    floor_plan_id=None,
    receipt_number: Optional[str] = None,
    vehicle_id=None,
    previous_floor_plan_id=None,
) -> List[StatusChange]:
    """
    Single entry point for every floor plan status recomputation.

    Exactly one trigger should be given:
        floor_plan_id: a floor plan was created or edited
        receipt_number: an installment was posted
        vehicle_id: a vehicle's attachment changed, or a sale was linked to or removed from it
    """
    if receipt_number:
        change = reconcile_for_receipt(receipt_number)
        return [change] if change else []
    if vehicle_id:
        return reconcile_for_vehicle(vehicle_id, previous_floor_plan_id=previous_floor_plan_id)
    if floor_plan_id:
        change = reconcile_floor_plan(floor_plan_id)
        return [change] if change else []
    return []


def reconcile_best_effort(result: ServiceResult, **trigger) -> List[StatusChange]:
    """Run ``reconcile`` as a side effect of ``result``'s primary operation."""
    return best_effort(result, 'Floor plan reconciliation', reconcile, **trigger) or []
