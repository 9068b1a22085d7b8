from django.contrib import admin
from apps.participants.models import Participant, ReorderHistoryEntry


@admin.register(Participant)
class ParticipantAdmin(admin.ModelAdmin):
    """Admin interface for Participants."""

    list_display = ['name', 'order_position', 'purchase_count', 'created_at']
    search_fields = ['name']
    readonly_fields = ['created_at']
    ordering = ['order_position', 'id']

    def purchase_count(self, obj):
        return obj.coffee_purchases.count()
    purchase_count.short_description = 'Purchases'


@admin.register(ReorderHistoryEntry)
class ReorderHistoryEntryAdmin(admin.ModelAdmin):
    """Read-only admin interface for the reorder audit trail."""

    list_display = ['id', 'timestamp', 'old_order', 'new_order']
    readonly_fields = ['timestamp', 'old_order', 'new_order']
    ordering = ['-id']

    def has_add_permission(self, request):
        return False
