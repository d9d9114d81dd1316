from django.contrib import admin
from inquiries.models import Inquiry, InquiryResponseHistory

@admin.register(Inquiry)
class InquiryAdmin(admin.ModelAdmin):
    list_display = ['id', 'manufacturer', 'provider', 'item_type', 'quantity', 'unit', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['message', 'manufacturer__name', 'manufacturer__phone_number', 'provider__company_name']
    readonly_fields = ['provider_response_date', 'created_at', 'updated_at']

@admin.register(InquiryResponseHistory)
class InquiryResponseHistoryAdmin(admin.ModelAdmin):
    list_display = ['inquiry', 'response_number', 'response_type', 'is_current_response', 'responded_by', 'created_at']
    list_filter = ['response_type', 'is_current_response', 'created_at']
    readonly_fields = ['created_at']
