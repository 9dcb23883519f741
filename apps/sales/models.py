from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from decimal import Decimal, InvalidOperation
import uuid


class SalesType(models.TextChoices):
    CASH = 'Cash Sales', 'Cash Sales'
    BUY_HERE_PAY_HERE = 'Buy Here Pay Here', 'Buy Here Pay Here'


# Fields that only exist on financed (non-cash) sales
SCHEDULE_FIELDS = [
    'payment_schedule',
    'financing_calculation_method',
    'number_of_payments',
    'first_payment_starts',
    'first_payment_date',
    'second_payment_date',
]
PAYMENT_DETAIL_FIELDS = [
    'total_loan_amount',
    'down_payment',
    'amount_to_finance',
    'details_first_payment_date',
    'next_payment_due_date',
    'apr',
    'ert_fee',
    'payment_note',
]

# salesDetails amounts that add up to the sale total
_TOTAL_COMPONENTS = ['vehicle_price', 'government_fees', 'sales_tax', 'other_taxes', 'dealer_service_fee']


def _to_decimal(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


class Sales(models.Model):
    """
    A vehicle sale, identified to humans by ``receipt_id``.

    Pricing is filled in by a second call after creation. Financed sales carry
    a payment schedule and payment details; cash sales never do. ``customer``,
    ``vehicle`` and ``net_trade_in`` are soft references.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    receipt_id = models.CharField(max_length=32, unique=True, db_index=True)
    is_existing_customer = models.BooleanField(null=True, blank=True)

    customer = models.ForeignKey(
        'customers.Customer',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        related_name='sales',
    )
    vehicle = models.ForeignKey(
        'inventory.Vehicle',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='sale_records',
    )

    # Pricing
    is_cash_sale = models.BooleanField(null=True, blank=True)
    is_reserved = models.BooleanField(default=False)
    sales_type = models.CharField(max_length=30, choices=SalesType.choices, blank=True)
    sales_details = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    net_trade_in_enabled = models.BooleanField(default=False)
    net_trade_in = models.ForeignKey(
        'tradeins.NetTradeIn',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='+',
    )

    # Payment schedule (financed sales only)
    payment_schedule = models.CharField(max_length=30, null=True, blank=True)
    financing_calculation_method = models.CharField(max_length=40, null=True, blank=True)
    number_of_payments = models.PositiveIntegerField(null=True, blank=True)
    first_payment_starts = models.DateField(null=True, blank=True)
    first_payment_date = models.DateField(null=True, blank=True)
    second_payment_date = models.DateField(null=True, blank=True)

    # Payment details (financed sales only)
    total_loan_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    down_payment = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    amount_to_finance = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    details_first_payment_date = models.DateField(null=True, blank=True)
    next_payment_due_date = models.DateField(null=True, blank=True)
    apr = models.DecimalField(max_digits=6, decimal_places=3, null=True, blank=True)
    ert_fee = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    payment_note = models.TextField(null=True, blank=True)

    total_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='sales',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sales'
        ordering = ['-created_at']
        verbose_name_plural = 'sales'
        indexes = [
            models.Index(fields=['customer', 'vehicle', 'sales_type'], name='sales_custome_6d1b8e_idx'),
        ]

    def __str__(self):
        return self.receipt_id

    @property
    def has_financing(self):
        return any(getattr(self, f) is not None for f in SCHEDULE_FIELDS + PAYMENT_DETAIL_FIELDS)

    @property
    def schedule_first_payment_date(self):
        """Earliest known anchor for the first installment."""
        return self.first_payment_date or self.first_payment_starts or self.details_first_payment_date

    def clear_financing(self):
        for field in SCHEDULE_FIELDS + PAYMENT_DETAIL_FIELDS:
            setattr(self, field, None)

    def calculate_total_amount(self):
        """
        Sale total from the pricing details.

        A numeric client-provided ``total`` wins. Otherwise the priced
        components are summed, the deposit subtracted and the service contract
        (cash) or ERT fee (financed) added. Never negative.
        """
        details = self.sales_details or {}

        client_total = _to_decimal(details.get('total'))
        if client_total is not None:
            return max(Decimal('0.00'), client_total)

        total = Decimal('0.00')
        for key in _TOTAL_COMPONENTS:
            total += _to_decimal(details.get(key)) or Decimal('0.00')
        total -= _to_decimal(details.get('deposit')) or Decimal('0.00')

        if self.is_cash_sale is True:
            total += _to_decimal(details.get('service_contract')) or Decimal('0.00')
        elif self.is_cash_sale is False:
            total += self.ert_fee or Decimal('0.00')

        return max(Decimal('0.00'), total)

    def save(self, *args, **kwargs):
        if self.is_cash_sale:
            self.clear_financing()
        self.total_amount = self.calculate_total_amount()
        super().save(*args, **kwargs)
