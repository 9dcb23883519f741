"""Floor plan CRUD operations service."""

import logging
from typing import Any, Dict
from uuid import UUID

from django.db import transaction

from apps.core.results import ServiceResult
from apps.inventory.models import Vehicle
from ..models import FloorPlan, FloorPlanStatus
from .exceptions import FloorPlanNotFoundError, DuplicateFloorPlanError
from .reconciler import reconcile_best_effort

logger = logging.getLogger(__name__)

# status is derived and never written from input
FLOOR_PLAN_FIELDS = [
    'company_name', 'street', 'city', 'state', 'zip', 'phone', 'contact_person',
    'apr', 'interest_calculation_days',
    'fee_type', 'admin_fee', 'set_up_fee', 'additional_fee',
    'term_length_in_days', 'days_until_first_curtailment', 'percent_principal_reduction',
    'days_until_second_curtailment', 'percent_principal_reduction_2',
    'interest_and_fees_with_each_curtailment', 'additional_notes',
]


def _check_company_name(name, exclude_pk=None):
    queryset = FloorPlan.objects.filter(company_name__iexact=name)
    if exclude_pk:
        queryset = queryset.exclude(pk=exclude_pk)
    if queryset.exists():
        raise DuplicateFloorPlanError(f"Floor plan for {name} already exists")


@transaction.atomic
def create_floor_plan(**data) -> FloorPlan:
    """
    Create a floor plan. New plans start Inactive.

    Raises:
        DuplicateFloorPlanError: If the company name is taken
    """
    _check_company_name(data.get('company_name', ''))

    fields = {k: v for k, v in data.items() if k in FLOOR_PLAN_FIELDS}
    floor_plan = FloorPlan.objects.create(status=FloorPlanStatus.INACTIVE, **fields)
    logger.info("Floor plan %s created", floor_plan.company_name)
    return floor_plan


def get_floor_plan(*, pk: UUID) -> FloorPlan:
    try:
        return FloorPlan.objects.get(pk=pk)
    except FloorPlan.DoesNotExist:
        raise FloorPlanNotFoundError(f"Floor plan {pk} not found")


def update_floor_plan(*, pk: UUID, data: Dict[str, Any]) -> ServiceResult:
    """
    Edit a floor plan's terms, then recompute its status.

    Raises:
        FloorPlanNotFoundError: If the floor plan does not exist
        DuplicateFloorPlanError: If the new company name is taken
    """
    with transaction.atomic():
        try:
            floor_plan = FloorPlan.objects.select_for_update().get(pk=pk)
        except FloorPlan.DoesNotExist:
            raise FloorPlanNotFoundError(f"Floor plan {pk} not found")

        if data.get('company_name'):
            _check_company_name(data['company_name'], exclude_pk=pk)

        for field, value in data.items():
            if field in FLOOR_PLAN_FIELDS:
                setattr(floor_plan, field, value)
        floor_plan.save()

    result = ServiceResult(floor_plan)
    reconcile_best_effort(result, floor_plan_id=floor_plan.pk)
    floor_plan.refresh_from_db(fields=['status'])
    return result


@transaction.atomic
def archive_floor_plan(*, pk: UUID) -> FloorPlan:
    """Soft-delete a floor plan. Its status is frozen from now on."""
    floor_plan = get_floor_plan(pk=pk)
    floor_plan.is_deleted = True
    floor_plan.save(update_fields=['is_deleted', 'updated_at'])
    logger.info("Floor plan %s archived with status %s", floor_plan.company_name, floor_plan.status)
    return floor_plan


@transaction.atomic
def delete_floor_plan(*, pk: UUID) -> int:
    """
    Detach every vehicle from the floor plan, then delete it.

    Returns:
        Number of vehicles detached
    """
    floor_plan = get_floor_plan(pk=pk)

    detached = Vehicle.objects.filter(floor_plan_id=floor_plan.pk).update(
        floor_plan=None,
        is_floor_planned=False,
    )
    floor_plan.delete()

    logger.info("Floor plan %s deleted, %d vehicles detached", floor_plan.company_name, detached)
    return detached
