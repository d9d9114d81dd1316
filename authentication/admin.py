from django.contrib import admin
from authentication.models import CustomUser, PhoneOTP

@admin.register(CustomUser)
class CustomUserAdmin(admin.ModelAdmin):
    list_display = ['phone_number', 'name', 'email', 'role', 'is_active', 'date_joined']
    list_filter = ['role', 'is_active', 'date_joined']
    search_fields = ['phone_number', 'name', 'email']
    readonly_fields = ['date_joined', 'last_login']
    exclude = ['password']

@admin.register(PhoneOTP)
class PhoneOTPAdmin(admin.ModelAdmin):
    list_display = ['phone_number', 'expires_at', 'attempts', 'is_used', 'created_at']
    list_filter = ['is_used', 'created_at']
    search_fields = ['phone_number']
    readonly_fields = ['code', 'gateway_session', 'created_at']
