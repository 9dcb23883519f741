# ==========================================
# apps/customers/admin.py
# ==========================================

from django.contrib import admin
from .models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    """Admin interface for customers."""

    list_display = ['customer_id', 'first_name', 'last_name', 'email', 'primary_contact_number', 'created_at']
    list_filter = ['employment_status', 'is_home_owner', 'created_at']
    search_fields = ['customer_id', 'first_name', 'last_name', 'email']
    readonly_fields = ['customer_id', 'created_at', 'updated_at']
    ordering = ['-created_at']
