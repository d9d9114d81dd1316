from django.contrib import admin
from quotations.models import Quotation

@admin.register(Quotation)
class QuotationAdmin(admin.ModelAdmin):
    list_display = ['id', 'manufacturer', 'provider', 'item_type', 'quantity', 'unit', 'total_amount', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['item_type', 'manufacturer__name', 'manufacturer__phone_number', 'provider__company_name']
    readonly_fields = ['provider_response_date', 'created_at', 'updated_at']
