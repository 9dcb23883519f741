# ==========================================
# apps/inventory/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Vehicle, SalesStatus

STATUS_COLORS = {
    SalesStatus.AVAILABLE: 'green',
    SalesStatus.PENDING: 'orange',
    SalesStatus.RESERVED: 'blue',
    SalesStatus.SOLD: 'gray',
}


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    """Admin interface for vehicles."""

    list_display = ['stock_id', 'make', 'model', 'vin', 'status_badge', 'is_floor_planned', 'is_deleted', 'created_at']
    list_filter = ['sales_status', 'is_floor_planned', 'mark_as_completed', 'is_deleted', 'vehicle_type']
    search_fields = ['stock_id', 'vin', 'make', 'model']
    readonly_fields = ['stock_id', 'sales_status', 'added_costs_total', 'total_cost', 'created_at', 'updated_at']
    raw_id_fields = ['vendor', 'floor_plan']
    ordering = ['-created_at']

    fieldsets = (
        ('Vehicle', {
            'fields': ('stock_id', 'vendor', 'vehicle_title', 'vin', 'make', 'model', 'manufacturing_year', 'vehicle_type')
        }),
        ('Costs', {
            'fields': ('purchase_price', 'added_costs', 'added_costs_total', 'total_cost'),
        }),
        ('Floor plan', {
            'fields': ('floor_plan', 'is_floor_planned', 'floor_plan_date_opened', 'curtailments'),
        }),
        ('Sale', {
            'fields': ('sales_status',),
        }),
        ('Metadata', {
            'fields': ('mark_as_completed', 'is_deleted', 'created_by', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def status_badge(self, obj):
        return format_html(
            '<span style="color: {};">{}</span>',
            STATUS_COLORS.get(obj.sales_status, 'black'),
            obj.sales_status,
        )
    status_badge.short_description = 'Sales status'
