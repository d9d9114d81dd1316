from django.contrib import admin
from customers.models import CustomerProfile, CustomerInquiry, ProductQuotation, CustomerOrder


@admin.register(CustomerProfile)
class CustomerProfileAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'phone', 'company_name', 'state', 'district', 'category', 'created_at']
    list_filter = ['state', 'category']
    search_fields = ['name', 'phone', 'company_name']


@admin.register(CustomerInquiry)
class CustomerInquiryAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'manufacturer', 'subject', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['subject', 'customer__name', 'manufacturer__name']


@admin.register(ProductQuotation)
class ProductQuotationAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'manufacturer', 'product', 'quantity', 'total_amount', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    readonly_fields = ['responded_at', 'created_at', 'updated_at']


@admin.register(CustomerOrder)
class CustomerOrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'customer', 'manufacturer', 'product', 'quantity', 'total_amount', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['tracking_number', 'customer__name', 'manufacturer__name']
