from django.contrib import admin
from products.models import Product

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'manufacturer', 'category', 'price', 'price_unit', 'stock_quantity', 'is_available']
    list_filter = ['category', 'is_available', 'created_at']
    search_fields = ['name', 'manufacturer__name', 'manufacturer__phone_number']
    readonly_fields = ['created_at', 'updated_at']
