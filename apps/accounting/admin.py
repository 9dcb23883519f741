# ==========================================
# apps/accounting/admin.py
# ==========================================

from django.contrib import admin
from .models import Accounting


@admin.register(Accounting)
class AccountingAdmin(admin.ModelAdmin):
    """Admin interface for installment entries. Entries are append-only."""

    list_display = ['receipt_number', 'installment_number', 'total_number_of_payments', 'due_date', 'amount', 'payment_date']
    list_filter = ['payment_schedule', 'payment_type', 'created_at']
    search_fields = ['receipt_number', 'customer_code', 'stock_id', 'vin']
    ordering = ['receipt_number', '-installment_number']
    date_hierarchy = 'due_date'

    def get_readonly_fields(self, request, obj=None):
        if obj:
            return [f.name for f in self.model._meta.fields]
        return []

    def has_delete_permission(self, request, obj=None):
        return False
