from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from decimal import Decimal
import uuid


class SalesStatus(models.TextChoices):
    AVAILABLE = 'Available', 'Available'
    PENDING = 'Pending', 'Pending'
    RESERVED = 'Reserved', 'Reserved'
    SOLD = 'Sold', 'Sold'


class Vehicle(models.Model):
    """
    Inventory vehicle.

    ``sales_status`` is derived from the sale lifecycle and never written by
    clients. ``floor_plan`` and ``sales`` are soft references: no database
    constraint, and the referenced row may be gone, so code reads the raw
    ``*_id`` values and treats a missing row as "no link".
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    stock_id = models.CharField(max_length=40, unique=True, db_index=True)
    vendor = models.ForeignKey(
        'vendors.Vendor',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vehicles',
    )

    # Basic details
    vehicle_title = models.CharField(max_length=200, blank=True)
    vin = models.CharField(max_length=17, blank=True, db_index=True)
    make = models.CharField(max_length=100, blank=True)
    model = models.CharField(max_length=100, blank=True)
    style = models.CharField(max_length=100, blank=True)
    body_type = models.CharField(max_length=100, blank=True)
    manufacturing_year = models.PositiveIntegerField(null=True, blank=True)
    vehicle_type = models.CharField(max_length=20)
    condition = models.CharField(max_length=50, blank=True)
    certified = models.CharField(max_length=50, blank=True)

    # Descriptive groups, not used by any business rule
    specifications = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    exterior_interior = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    title_registration = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    inspection = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    key_security = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    features = models.JSONField(default=list, blank=True, encoder=DjangoJSONEncoder)
    images = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)

    # Cost details
    purchase_price = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    added_costs = models.JSONField(default=list, blank=True, encoder=DjangoJSONEncoder)
    added_costs_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    # Floor plan attachment
    floor_plan = models.ForeignKey(
        'floorplans.FloorPlan',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='vehicles',
    )
    is_floor_planned = models.BooleanField(default=False)
    floor_plan_date_opened = models.DateField(null=True, blank=True)
    curtailments = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)

    # Sale linkage
    sales_status = models.CharField(
        max_length=20,
        choices=SalesStatus.choices,
        default=SalesStatus.AVAILABLE,
        db_index=True,
    )
    sales = models.ForeignKey(
        'sales.Sales',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='+',
    )

    notes = models.TextField(blank=True)
    previous_owner = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    mark_as_completed = models.BooleanField(default=False)
    is_deleted = models.BooleanField(default=False)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='vehicles',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'vehicles'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['floor_plan', 'is_floor_planned'], name='vehicles_floor_p_3c8e2b_idx'),
            models.Index(fields=['is_deleted', 'sales_status'], name='vehicles_is_dele_9a4f1d_idx'),
        ]

    def __str__(self):
        return f"{self.stock_id} {self.make} {self.model}".strip()

    @property
    def stock_prefix(self):
        """Stock ID without its numeric suffix, e.g. 'AU-SUV'."""
        return self.stock_id.rsplit('-', 1)[0] if self.stock_id else ''

    def recalculate_costs(self):
        """Refresh ``added_costs_total`` and ``total_cost`` from the cost lines."""
        added_total = Decimal('0.00')
        for item in self.added_costs or []:
            cost = item.get('cost') if isinstance(item, dict) else None
            if isinstance(cost, (int, float, str, Decimal)):
                try:
                    added_total += Decimal(str(cost))
                except ArithmeticError:
                    continue
        self.added_costs_total = added_total
        self.total_cost = (self.purchase_price or Decimal('0.00')) + added_total
