"""
Enums and choices for the end customer side of the marketplace.
Centralizes status choices, business rules and messages.
"""
from django.db import models


class CustomerInquiryStatus(models.TextChoices):
    NEW = 'new', 'New'
    IN_PROGRESS = 'in_progress', 'In Progress'
    RESOLVED = 'resolved', 'Resolved'
    CLOSED = 'closed', 'Closed'


class ProductQuotationStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    ACCEPTED = 'accepted', 'Accepted'
    REJECTED = 'rejected', 'Rejected'


class CustomerOrderStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    PROCESSING = 'processing', 'Processing'
    SHIPPED = 'shipped', 'Shipped'
    DELIVERED = 'delivered', 'Delivered'
    CANCELLED = 'cancelled', 'Cancelled'
    RETURNED = 'returned', 'Returned'


class BusinessRules:
    """Business rules and constants"""

    # Statuses a manufacturer may move a customer order to, by current status
    ORDER_TRANSITIONS = {
        CustomerOrderStatus.PENDING: [CustomerOrderStatus.PROCESSING, CustomerOrderStatus.CANCELLED],
        CustomerOrderStatus.PROCESSING: [CustomerOrderStatus.SHIPPED, CustomerOrderStatus.CANCELLED],
        CustomerOrderStatus.SHIPPED: [CustomerOrderStatus.DELIVERED, CustomerOrderStatus.RETURNED],
        CustomerOrderStatus.DELIVERED: [CustomerOrderStatus.RETURNED],
        CustomerOrderStatus.CANCELLED: [],
        CustomerOrderStatus.RETURNED: [],
    }

    @staticmethod
    def can_transition(current, new):
        return new in BusinessRules.ORDER_TRANSITIONS.get(current, [])


class ErrorMessages:
    """Centralized error messages for consistency"""
    PROFILE_MISSING = "Complete your customer profile first"
    INQUIRY_NOT_FOUND = "Inquiry not found"
    QUOTATION_NOT_FOUND = "Quotation not found"
    ORDER_NOT_FOUND = "Order not found"
    NOT_A_MANUFACTURER = "Inquiries can only be sent to manufacturers"
    PRODUCT_UNAVAILABLE = "This product is not available"
    QUOTATION_ALREADY_ANSWERED = "Quotation is already {status}"
    QUOTATION_NOT_ACCEPTED = "Only accepted quotations can be ordered"
    OFFER_EXPIRED = "Offer expired"
    ALREADY_ORDERED = "An order was already placed for this quotation"
    ORDER_NOT_PENDING = "Only pending orders can be changed"
    INVALID_TRANSITION = "Cannot move an order from {current} to {new}"
    NON_POSITIVE_PRICE = "Price must be greater than zero"


class ResponseMessages:
    """Centralized success messages"""
    PROFILE_SAVED = "Customer profile saved"
    INQUIRY_SENT = "Inquiry sent to the manufacturer"
    INQUIRY_RESPONDED = "Response sent to the customer"
    INQUIRY_STATUS_UPDATED = "Inquiry marked as {status}"
    QUOTATION_REQUESTED = "Quotation request sent to the manufacturer"
    QUOTATION_ACCEPTED = "Offer sent to the customer"
    QUOTATION_REJECTED = "Quotation request rejected"
    ORDER_PLACED = "Order placed"
    ORDER_UPDATED = "Order updated"
    ORDER_CANCELLED = "Order cancelled"
    ORDER_STATUS_UPDATED = "Order marked as {status}"
