# ==========================================
# apps/vendors/admin.py
# ==========================================

from django.contrib import admin
from .models import Vendor


@admin.register(Vendor)
class VendorAdmin(admin.ModelAdmin):
    """Admin interface for vendors."""

    list_display = ['vendor_id', 'name', 'category', 'email', 'contact_person', 'created_at']
    list_filter = ['category', 'created_at']
    search_fields = ['vendor_id', 'name', 'email', 'contact_person']
    readonly_fields = ['vendor_id', 'created_at', 'updated_at']
    ordering = ['-created_at']

    fieldsets = (
        ('Vendor', {
            'fields': ('vendor_id', 'category', 'name', 'email', 'contact_person')
        }),
        ('Address', {
            'fields': ('street', 'city', 'state', 'zip'),
        }),
        ('Contact', {
            'fields': ('primary_contact_number', 'alternative_contact_number'),
        }),
        ('Billing', {
            'fields': ('account_number', 'tax_id_or_ssn', 'bill_of_sales'),
            'classes': ('collapse',),
        }),
        ('Notes', {
            'fields': ('note',),
            'classes': ('collapse',),
        }),
        ('Metadata', {
            'fields': ('created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )
