"""
Dashboard Queries
=================

Read-only aggregates over vehicles, sales, installments and customers for the
dashboard summary card.

Example:
    Getting the summary::

        from apps.dashboard.queries import DashboardQueries

        summary = DashboardQueries.summary()
        print(f"Outstanding: {summary['outstanding_balance']}")

Note:
    Every method returns plain dictionaries with Decimal amounts, so results
    can be handed straight to a response serializer.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db.models import DecimalField, Sum, Value
from django.db.models.functions import Coalesce

from apps.accounting.models import Accounting
from apps.customers.models import Customer
from apps.inventory.models import Vehicle
from apps.sales.models import Sales

ZERO = Decimal('0.00')


def _sum(queryset, field):
    return queryset.aggregate(
        total=Coalesce(Sum(field), Value(ZERO), output_field=DecimalField(max_digits=14, decimal_places=2))
    )['total']


class DashboardQueries:
    """
    Aggregate queries for the dashboard.

    Methods:
        totals: Vehicle count and money sums
        customer_activity: Customers with and without a sale
        summary: All dashboard metrics in one dictionary
    """

    @staticmethod
    def totals():
        """
        Count and money totals.

        Returns:
            dict with total_vehicles, total_sales (sum of sale totals),
            total_payments (sum of installment amounts) and vendor_payments
            (sum of vehicle costs)
        """
        live_vehicles = Vehicle.objects.filter(is_deleted=False)
        return {
            'total_vehicles': live_vehicles.count(),
            'total_sales': _sum(Sales.objects.all(), 'total_amount'),
            'total_payments': _sum(Accounting.objects.all(), 'amount'),
            'vendor_payments': _sum(live_vehicles, 'total_cost'),
        }

    @staticmethod
    def customer_activity():
        """Customers with at least one sale count as active."""
        active_ids = set(
            Sales.objects.filter(customer__isnull=False).values_list('customer_id', flat=True).distinct()
        )
        total_customers = Customer.objects.count()
        active = Customer.objects.filter(pk__in=active_ids).count()
        return {
            'active_customers': active,
            'inactive_customers': max(0, total_customers - active),
        }

    @staticmethod
    def summary():
        totals = DashboardQueries.totals()

        total_sales = totals['total_sales']
        gross_profit = total_sales - totals['vendor_payments']
        if total_sales > 0:
            profit_margin = (gross_profit / total_sales * 100).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        else:
            profit_margin = ZERO

        return {
            **totals,
            'outstanding_balance': max(ZERO, total_sales - totals['total_payments']),
            'gross_profit': gross_profit,
            'profit_margin': profit_margin,
            **DashboardQueries.customer_activity(),
        }
