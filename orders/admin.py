from django.contrib import admin
from orders.models import Order, OrderStatusHistory

@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['order_number', 'manufacturer', 'provider', 'item_type', 'order_status', 'payment_status', 'total_amount', 'created_at']
    list_filter = ['order_status', 'payment_status', 'created_at']
    search_fields = ['order_number', 'manufacturer__name', 'manufacturer__phone_number', 'provider__company_name', 'tracking_number']
    readonly_fields = ['order_number', 'created_at', 'updated_at']

@admin.register(OrderStatusHistory)
class OrderStatusHistoryAdmin(admin.ModelAdmin):
    list_display = ['order', 'axis', 'previous_status', 'new_status', 'updated_by', 'timestamp']
    list_filter = ['axis', 'new_status', 'timestamp']
    readonly_fields = ['timestamp']
