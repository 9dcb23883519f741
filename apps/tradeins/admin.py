# ==========================================
# apps/tradeins/admin.py
# ==========================================

from django.contrib import admin
from .models import NetTradeIn


@admin.register(NetTradeIn)
class NetTradeInAdmin(admin.ModelAdmin):
    """Admin interface for trade-ins."""

    list_display = ['id', 'amount_allowed', 'actual_cash_value', 'payoff_applicable', 'add_to_inventory', 'created_at']
    list_filter = ['payoff_applicable', 'add_to_inventory', 'is_buy_here_pay_here']
    exclude = ['linked_sales', 'linked_vehicle']
    readonly_fields = ['linked_sales_id', 'linked_vehicle_id', 'created_at', 'updated_at']
    ordering = ['-created_at']
