from django.contrib import admin
from ratings.models import Rating

@admin.register(Rating)
class RatingAdmin(admin.ModelAdmin):
    list_display = ['provider', 'manufacturer', 'order', 'rating', 'would_recommend', 'is_verified', 'created_at']
    list_filter = ['rating', 'would_recommend', 'is_verified', 'created_at']
    search_fields = ['provider__company_name', 'manufacturer__name', 'order__order_number', 'review_title']
    readonly_fields = ['created_at', 'updated_at']
