from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from decimal import Decimal
import uuid


class NetTradeIn(models.Model):
    """Vehicle taken in as part payment on a sale."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    is_buy_here_pay_here = models.BooleanField(default=False)

    # Trade-in details
    amount_allowed = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    actual_cash_value = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    previous_sold_vehicle = models.BooleanField(default=False)

    # Only kept when a payoff applies
    payoff_applicable = models.BooleanField(default=False)
    payoff_information = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)

    vendor_info = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    vehicle_info = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    add_to_inventory = models.BooleanField(default=False)

    linked_sales = models.ForeignKey(
        'sales.Sales',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='+',
    )
    linked_vehicle = models.ForeignKey(
        'inventory.Vehicle',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='+',
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='trade_ins',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'net_trade_ins'
        ordering = ['-created_at']

    def __str__(self):
        make = (self.vehicle_info or {}).get('make', '')
        return f"Trade-in {make} ({self.amount_allowed})".strip()

    @property
    def net_value(self):
        """Allowed amount minus any payoff still owed."""
        payoff = Decimal('0.00')
        if self.payoff_applicable:
            try:
                payoff = Decimal(str((self.payoff_information or {}).get('payoff_amount') or 0))
            except ArithmeticError:
                payoff = Decimal('0.00')
        return self.amount_allowed - payoff
