from django.db import models


class UserRole(models.TextChoices):
    MANUFACTURER = 'manufacturer', 'Manufacturer'
    COAL_PROVIDER = 'coal_provider', 'Coal Provider'
    TRANSPORT_PROVIDER = 'transport_provider', 'Transport Provider'
    LABOUR_CONTRACTOR = 'labour_contractor', 'Labour Contractor'
    CUSTOMER = 'customer', 'Customer'
    ADMIN = 'admin', 'Admin'


PROVIDER_ROLES = (
    UserRole.COAL_PROVIDER,
    UserRole.TRANSPORT_PROVIDER,
    UserRole.LABOUR_CONTRACTOR,
)

# Roles a visitor may pick for themselves on first login
SELF_SERVICE_ROLES = (UserRole.MANUFACTURER, UserRole.CUSTOMER) + PROVIDER_ROLES


class OTPMessages:
    SENT = "OTP sent successfully"
    VERIFIED = "OTP verified successfully"
    INVALID = "Invalid or expired OTP"
    TOO_MANY_ATTEMPTS = "Too many incorrect attempts. Request a new OTP"
    SEND_FAILED = "Failed to send OTP. Please try again."
    INVALID_PHONE = "Invalid phone number format. Please include country code (e.g., +918008009560)"
