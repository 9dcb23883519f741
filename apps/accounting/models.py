from django.db import models
from decimal import Decimal
import uuid


class Accounting(models.Model):
    """
    One installment payment against a sale.

    Linked to its sale by value through ``receipt_number`` (the sale's
    ``receipt_id``), not by a foreign key. Entries are append-only;
    ``installment_number`` is assigned as the count of earlier entries for
    the receipt plus one.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Accounting details
    receipt_number = models.CharField(max_length=32, db_index=True)
    customer_code = models.CharField(max_length=64, blank=True)
    vin = models.CharField(max_length=17, blank=True)
    stock_id = models.CharField(max_length=40, blank=True)
    make = models.CharField(max_length=100, blank=True)
    sales_type = models.CharField(max_length=30, blank=True)
    payment_schedule = models.CharField(max_length=30, blank=True)
    financing_calculation_method = models.CharField(max_length=40, blank=True)
    loan_term = models.PositiveIntegerField(null=True, blank=True)
    total_number_of_payments = models.PositiveIntegerField(null=True, blank=True)
    installment_number = models.PositiveIntegerField()
    due_date = models.DateField(null=True, blank=True)

    # Bill details
    bill_type = models.CharField(max_length=50, blank=True)
    payment_date = models.DateField(null=True, blank=True)
    amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    payment_type = models.CharField(max_length=30, blank=True)
    note = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'accounting_entries'
        ordering = ['-created_at']
        verbose_name = 'accounting entry'
        verbose_name_plural = 'accounting entries'
        indexes = [
            models.Index(fields=['receipt_number', '-installment_number'], name='accounting__receipt_7d2f3a_idx'),
        ]

    def __str__(self):
        return f"{self.receipt_number} #{self.installment_number:02d}"
