# ==========================================
# apps/sales/admin.py
# ==========================================

from django.contrib import admin
from .models import Sales


@admin.register(Sales)
class SalesAdmin(admin.ModelAdmin):
    """Admin interface for sales."""

    list_display = ['receipt_id', 'customer_id', 'vehicle_id', 'sales_type', 'is_reserved', 'total_amount', 'created_at']
    list_filter = ['sales_type', 'is_cash_sale', 'is_reserved', 'created_at']
    search_fields = ['receipt_id']
    readonly_fields = ['receipt_id', 'total_amount', 'next_payment_due_date', 'created_at', 'updated_at']
    raw_id_fields = ['customer', 'vehicle', 'net_trade_in']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Sale', {
            'fields': ('receipt_id', 'customer', 'vehicle', 'sales_type', 'is_cash_sale', 'is_reserved', 'total_amount')
        }),
        ('Pricing', {
            'fields': ('sales_details', 'net_trade_in_enabled', 'net_trade_in'),
        }),
        ('Payment schedule', {
            'fields': (
                'payment_schedule', 'financing_calculation_method', 'number_of_payments',
                'first_payment_starts', 'first_payment_date', 'second_payment_date',
            ),
            'classes': ('collapse',),
        }),
        ('Payment details', {
            'fields': (
                'total_loan_amount', 'down_payment', 'amount_to_finance',
                'details_first_payment_date', 'next_payment_due_date', 'apr', 'ert_fee', 'payment_note',
            ),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
