# ==========================================
# apps/sequences/admin.py
# ==========================================

from django.contrib import admin
from .models import Counter
from .services import bulk_sync_counters, reset_counter


@admin.register(Counter)
class CounterAdmin(admin.ModelAdmin):
    """
    Admin interface for identifier counters.

    Counters are normally only touched by the ID generators; the actions here
    exist for repairing drift after data imports.
    """

    list_display = ['key', 'counter_type', 'seq', 'updated_at']
    search_fields = ['key']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['key']

    actions = ['reset_to_zero', 'sync_all_with_data']

    @admin.action(description='Reset selected counters to 0')
    def reset_to_zero(self, request, queryset):
        """Reset selected counters."""
        for counter in queryset:
            reset_counter(counter.key, 0)
        self.message_user(request, f'Reset {queryset.count()} counter(s).')

    @admin.action(description='Sync ALL counters with existing records')
    def sync_all_with_data(self, request, queryset):
        """Run the bulk sync regardless of selection."""
        results = bulk_sync_counters()
        failed = [r['key'] for r in results if not r['success']]
        msg = f'Synced {len(results) - len(failed)} counter(s).'
        if failed:
            msg += f' Failed: {", ".join(failed)}.'
        self.message_user(request, msg)
