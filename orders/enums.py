"""
Enums and choices for orders app.
"""
from django.db import models


class OrderStatus(models.TextChoices):
    """Fulfilment axis of an Order"""
    PENDING = 'pending', 'Pending'
    CONFIRMED = 'confirmed', 'Confirmed'
    PROCESSING = 'processing', 'Processing'
    DELIVERED = 'delivered', 'Delivered'
    COMPLETED = 'completed', 'Completed'
    CANCELLED = 'cancelled', 'Cancelled'


class PaymentStatus(models.TextChoices):
    """Financial axis of an Order, independent of OrderStatus"""
    PENDING = 'pending', 'Pending'
    PROCESSING = 'processing', 'Processing'
    PAID = 'paid', 'Paid'
    COMPLETED = 'completed', 'Completed'
    FAILED = 'failed', 'Failed'
    REFUNDED = 'refunded', 'Refunded'


class StatusAxis(models.TextChoices):
    ORDER = 'order', 'Order Status'
    PAYMENT = 'payment', 'Payment Status'


class ErrorMessages:
    ORDER_NOT_FOUND = "Order not found"
    NOT_YOUR_ORDER = "You can only modify your own orders"
    CANNOT_CONFIRM = "Cannot confirm an order that is {status}"
    ROLE_CANNOT_SET = "User role '{role}' cannot set status to '{status}'"
    INVALID_TRANSITION = "Invalid status transition from '{current}' to '{new}'. Valid transitions: {valid}"
    INVALID_PAYMENT_STATUS = "Invalid payment status '{status}'"


class ResponseMessages:
    ORDER_CONFIRMED = "Order confirmed"
    STATUS_UPDATED = "Order status updated to {status}"
    PAYMENT_UPDATED = "Payment status updated to {status}"
