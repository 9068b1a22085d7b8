from django.contrib import admin

from apps.core.models import IdempotencyKey


@admin.register(IdempotencyKey)
class IdempotencyKeyAdmin(admin.ModelAdmin):
    """Admin interface for stored idempotency keys."""

    list_display = ['scope', 'key', 'status_code', 'created_at', 'expires_at']
    list_filter = ['scope', 'created_at']
    search_fields = ['key']
    readonly_fields = ['scope', 'key', 'status_code', 'response_body', 'created_at', 'expires_at']
    ordering = ['-created_at']
