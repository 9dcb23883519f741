from rest_framework import serializers


class DashboardSummarySerializer(serializers.Serializer):
    """Response serializer for the dashboard summary."""
    total_vehicles = serializers.IntegerField()
    total_sales = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_payments = serializers.DecimalField(max_digits=14, decimal_places=2)
    vendor_payments = serializers.DecimalField(max_digits=14, decimal_places=2)
    outstanding_balance = serializers.DecimalField(max_digits=14, decimal_places=2)
    gross_profit = serializers.DecimalField(max_digits=14, decimal_places=2)
    profit_margin = serializers.DecimalField(max_digits=8, decimal_places=2)
    active_customers = serializers.IntegerField()
    inactive_customers = serializers.IntegerField()
