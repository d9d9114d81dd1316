"""
Enums and choices for quotations app.
Centralizes status choices, business rules and messages.
"""
from django.db import models


class QuotationStatus(models.TextChoices):
    """Stored status of a Quotation"""
    PENDING = 'pending', 'Pending Provider Response'
    QUOTED = 'quoted', 'Quoted by Provider'
    ACCEPTED = 'accepted', 'Accepted'
    REJECTED = 'rejected', 'Rejected'
    CANCELLED = 'cancelled', 'Cancelled'


class BusinessRules:
    """Business rules and constants"""

    # Statuses the manufacturer may set on its own quotations
    MANUFACTURER_STATUSES = [QuotationStatus.ACCEPTED, QuotationStatus.REJECTED, QuotationStatus.CANCELLED]
    FINAL_STATUSES = [QuotationStatus.REJECTED, QuotationStatus.CANCELLED]
    DEFAULT_UNIT = 'MT'

    @staticmethod
    def is_final_status(status):
        """Check if status is final (no further changes allowed)"""
        return status in BusinessRules.FINAL_STATUSES


class ErrorMessages:
    """Centralized error messages for consistency"""
    QUOTATION_NOT_FOUND = "Quotation not found"
    NOT_ADDRESSED_TO_YOU = "This quotation request was not sent to you"
    NOT_YOUR_QUOTATION = "You can only update your own quotations"
    INVALID_MANUFACTURER_STATUS = "Status must be one of: accepted, rejected, cancelled"
    FINAL_STATUS = "Quotation is already {status} and cannot be changed"
    NON_POSITIVE_PRICE = "Price per unit must be greater than zero"


class ResponseMessages:
    """Centralized success messages"""
    QUOTATION_SENT = "Quotation sent to the manufacturer"
    STATUS_UPDATED = "Quotation marked as {status}"
