from django.db import models
from decimal import Decimal
import uuid


class FloorPlanStatus(models.TextChoices):
    ACTIVE = 'Active', 'Active'
    INACTIVE = 'Inactive', 'Inactive'


class FeeType(models.TextChoices):
    ONE_TIME = 'One Time', 'One Time'
    PER_CURTAILMENT = 'Plus for each Curtailment', 'Plus for each Curtailment'


class FloorPlan(models.Model):
    """
    Inventory financing arrangement with a lender.

    ``status`` is maintained by the floor plan reconciler: Active while any
    attached vehicle still owes installments. Archived (``is_deleted``) plans
    keep whatever status they had.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Company details
    company_name = models.CharField(max_length=200, unique=True)
    street = models.CharField(max_length=200)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    zip = models.CharField(max_length=20)
    phone = models.CharField(max_length=30)
    contact_person = models.CharField(max_length=100)
    status = models.CharField(
        max_length=10,
        choices=FloorPlanStatus.choices,
        default=FloorPlanStatus.INACTIVE,
        db_index=True,
    )

    # Rate
    apr = models.DecimalField(max_digits=6, decimal_places=3, default=Decimal('0'))
    interest_calculation_days = models.PositiveIntegerField(default=0)

    # Fees
    fee_type = models.CharField(max_length=40, choices=FeeType.choices, default=FeeType.PER_CURTAILMENT)
    admin_fee = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    set_up_fee = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))
    additional_fee = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal('0'))

    # Term
    term_length_in_days = models.PositiveIntegerField(default=0)
    days_until_first_curtailment = models.PositiveIntegerField(default=0)
    percent_principal_reduction = models.DecimalField(max_digits=6, decimal_places=3, default=Decimal('0'))
    days_until_second_curtailment = models.PositiveIntegerField(default=0)
    percent_principal_reduction_2 = models.DecimalField(max_digits=6, decimal_places=3, default=Decimal('0'))
    interest_and_fees_with_each_curtailment = models.BooleanField(default=False)

    additional_notes = models.TextField(blank=True)
    is_deleted = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'floor_plans'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', 'is_deleted'], name='floor_plans_status_4e1a9c_idx'),
        ]

    def __str__(self):
        return f"{self.company_name} ({self.status})"
