from django.contrib import admin
from .models import CoffeePurchase, ExternalPurchase


@admin.register(CoffeePurchase)
class CoffeePurchaseAdmin(admin.ModelAdmin):
    """Admin interface for participant purchases."""

    list_display = ['id', 'participant', 'purchase_date']
    list_filter = ['purchase_date']
    search_fields = ['participant__name']
    raw_id_fields = ['participant']
    date_hierarchy = 'purchase_date'
    ordering = ['-purchase_date', '-id']


@admin.register(ExternalPurchase)
class ExternalPurchaseAdmin(admin.ModelAdmin):
    """Admin interface for external purchases."""

    list_display = ['id', 'name', 'purchase_date']
    list_filter = ['purchase_date']
    search_fields = ['name']
    date_hierarchy = 'purchase_date'
    ordering = ['-purchase_date', '-id']
