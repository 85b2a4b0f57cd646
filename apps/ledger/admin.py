# ==========================================
# apps/ledger/admin.py
# ==========================================

from django.contrib import admin
from .models import Friend, Group, Expense


@admin.register(Friend)
class FriendAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'created_at']
    list_filter = ['created_at']
    search_fields = ['name', 'owner']
    ordering = ['owner', 'name']


@admin.register(Group)
class GroupAdmin(admin.ModelAdmin):
    list_display = ['name', 'owner', 'get_member_count', 'created_at']
    search_fields = ['name', 'owner']
    ordering = ['-created_at']

    def get_member_count(self, obj):
        return len(obj.members)
    get_member_count.short_description = 'Members'


@admin.register(Expense)
class ExpenseAdmin(admin.ModelAdmin):
    """
    Admin interface for current expenses.

    Expenses are facts once recorded, so they can be inspected and removed
    but not edited.
    """

    list_display = [
        'payer',
        'amount',
        'split_type',
        'description',
        'owner',
        'date',
    ]
    list_filter = ['split_type', 'date']
    search_fields = ['payer', 'description', 'owner']
    ordering = ['-timestamp']

    readonly_fields = [
        'owner',
        'payer',
        'amount',
        'description',
        'beneficiaries',
        'split_type',
        'splits',
        'date',
        'timestamp',
    ]

    def has_add_permission(self, request):
        """Expenses are recorded through the API."""
        return False
