# ==========================================
# apps/journeys/admin.py
# ==========================================

from django.contrib import admin
from .models import Journey


@admin.register(Journey)
class JourneyAdmin(admin.ModelAdmin):
    """
    Admin interface for archived journeys.

    Journeys are immutable: they can be browsed and, as an administrative
    action, deleted, but never created or edited here.
    """

    list_display = [
        'name',
        'owner',
        'date',
        'total_amount',
        'expense_count',
        'people_count',
    ]
    list_filter = ['date']
    search_fields = ['name', 'owner']
    ordering = ['-timestamp']

    readonly_fields = [
        'owner',
        'name',
        'date',
        'timestamp',
        'expenses',
        'settlements',
        'total_amount',
        'expense_count',
        'people_count',
        'created_at',
    ]

    fieldsets = (
        ('Journey', {
            'fields': ('owner', 'name', 'date', 'timestamp', 'created_at')
        }),
        ('Summary', {
            'fields': ('total_amount', 'expense_count', 'people_count')
        }),
        ('Snapshot', {
            'fields': ('expenses', 'settlements'),
            'classes': ('collapse',),
        }),
    )

    def has_add_permission(self, request):
        """Journeys are created by archiving a ledger."""
        return False

    def has_change_permission(self, request, obj=None):
        """Journeys are immutable."""
        return False

    def has_delete_permission(self, request, obj=None):
        """Allow deletion for cleanup purposes."""
        return True
