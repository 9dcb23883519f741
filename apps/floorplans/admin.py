# ==========================================
# apps/floorplans/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import FloorPlan, FloorPlanStatus
from .services import reconcile_floor_plan


@admin.register(FloorPlan)
class FloorPlanAdmin(admin.ModelAdmin):
    """Admin interface for floor plans."""

    list_display = ['company_name', 'contact_person', 'status_badge', 'apr', 'is_deleted', 'created_at']
    list_filter = ['status', 'is_deleted', 'fee_type']
    search_fields = ['company_name', 'contact_person']
    readonly_fields = ['status', 'created_at', 'updated_at']
    ordering = ['company_name']
    actions = ['reconcile_status']

    fieldsets = (
        ('Company', {
            'fields': ('company_name', 'contact_person', 'phone', 'status')
        }),
        ('Address', {
            'fields': ('street', 'city', 'state', 'zip'),
            'classes': ('collapse',),
        }),
        ('Rate & fees', {
            'fields': ('apr', 'interest_calculation_days', 'fee_type', 'admin_fee', 'set_up_fee', 'additional_fee'),
        }),
        ('Term', {
            'fields': (
                'term_length_in_days',
                'days_until_first_curtailment', 'percent_principal_reduction',
                'days_until_second_curtailment', 'percent_principal_reduction_2',
                'interest_and_fees_with_each_curtailment',
            ),
        }),
        ('Metadata', {
            'fields': ('additional_notes', 'is_deleted', 'created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def status_badge(self, obj):
        color = 'green' if obj.status == FloorPlanStatus.ACTIVE else 'gray'
        return format_html('<span style="color: {};">{}</span>', color, obj.status)
    status_badge.short_description = 'Status'

    def reconcile_status(self, request, queryset):
        changed = sum(1 for floor_plan in queryset if reconcile_floor_plan(floor_plan.pk))
        self.message_user(request, f"Recomputed {queryset.count()} floor plans, {changed} changed status.")
    reconcile_status.short_description = 'Recompute status from vehicle installments'
