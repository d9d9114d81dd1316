from django.contrib import admin
from providers.models import Provider, Manufacturer

@admin.register(Provider)
class ProviderAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'kind', 'contact_name', 'phone', 'city', 'state', 'is_active', 'created_at']
    list_filter = ['kind', 'state', 'is_active', 'created_at']
    search_fields = ['company_name', 'contact_name', 'phone', 'city', 'district']
    readonly_fields = ['created_at', 'updated_at']

@admin.register(Manufacturer)
class ManufacturerAdmin(admin.ModelAdmin):
    list_display = ['company_name', 'name', 'phone', 'district', 'state', 'status', 'created_at']
    list_filter = ['status', 'state', 'created_at']
    search_fields = ['company_name', 'name', 'phone', 'district']
    readonly_fields = ['created_at', 'updated_at']
