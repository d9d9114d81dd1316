from django.db import models
from django.conf import settings
from django.utils import timezone

from providers.models import Provider
from quotations.models import Quotation
from .enums import OrderStatus, PaymentStatus, StatusAxis


def generate_order_number():
    return f"ORD-{int(timezone.now().timestamp() * 1000)}"


class Order(models.Model):
    # Order identification
    order_number = models.CharField(max_length=30, unique=True)
    quotation = models.ForeignKey(
        Quotation,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='orders'
    )

    # Participants
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='orders',
        limit_choices_to={'role': 'manufacturer'}
    )
    provider = models.ForeignKey(Provider, on_delete=models.CASCADE, related_name='orders')

    # Order details
    item_type = models.CharField(max_length=100, help_text="Coal type, transport type or service type")
    quantity = models.DecimalField(max_digits=12, decimal_places=2)
    unit = models.CharField(max_length=20, default='MT')
    price_per_unit = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    delivery_location = models.CharField(max_length=255)
    expected_delivery_date = models.DateField(null=True, blank=True)
    payment_terms = models.CharField(max_length=255, blank=True)
    special_instructions = models.TextField(blank=True)

    # Two independent status axes
    order_status = models.CharField(max_length=20, choices=OrderStatus.choices, default=OrderStatus.PENDING)
    payment_status = models.CharField(max_length=20, choices=PaymentStatus.choices, default=PaymentStatus.PENDING)

    # Provider-only evidence
    provider_confirmation_date = models.DateTimeField(null=True, blank=True)
    confirmed_by_provider = models.BooleanField(default=False)
    provider_order_number = models.CharField(max_length=50, blank=True)
    tracking_number = models.CharField(max_length=50, blank=True)
    actual_delivery_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Order {self.order_number}"

    def save(self, *args, **kwargs):
        if not self.order_number:
            self.order_number = generate_order_number()
        super().save(*args, **kwargs)


class OrderStatusHistory(models.Model):
    """Track changes of either status axis"""
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='status_history')
    axis = models.CharField(max_length=10, choices=StatusAxis.choices, default=StatusAxis.ORDER)
    previous_status = models.CharField(max_length=20, blank=True)
    new_status = models.CharField(max_length=20)
    updated_by = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE)
    notes = models.TextField(blank=True)
    timestamp = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['timestamp', 'id']
        verbose_name_plural = 'order status history'

    def __str__(self):
        return f"Order {self.order.order_number} [{self.axis}]: {self.previous_status} → {self.new_status}"
