from django.db import models
from django.conf import settings

from inquiries.models import Inquiry
from providers.models import Provider
from .enums import QuotationStatus


class Quotation(models.Model):
    """
    Standalone price proposal between a manufacturer and a provider.

    ``inquiry`` exists as a column but the request flow always leaves it
    empty: quotations are not chained to the inquiry that may have preceded
    them.
    """
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='quotations',
        limit_choices_to={'role': 'manufacturer'}
    )
    provider = models.ForeignKey(Provider, on_delete=models.CASCADE, related_name='quotations')
    inquiry = models.ForeignKey(
        Inquiry,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='quotations'
    )

    # Requested goods or service
    item_type = models.CharField(max_length=100, help_text="Coal type, transport type or service type")
    quantity = models.DecimalField(max_digits=12, decimal_places=2)
    unit = models.CharField(max_length=20, default='MT')
    delivery_location = models.CharField(max_length=255, blank=True)

    # Pricing
    price_per_unit = models.DecimalField(max_digits=12, decimal_places=2, default=0)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2, default=0)

    status = models.CharField(max_length=20, choices=QuotationStatus.choices, default=QuotationStatus.PENDING)

    # Provider response
    delivery_timeline = models.CharField(max_length=255, blank=True)
    payment_terms = models.CharField(max_length=255, blank=True)
    additional_notes = models.TextField(blank=True)
    validity_period = models.PositiveIntegerField(null=True, blank=True, help_text="Validity in days")
    provider_response_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Quotation #{self.pk} - {self.item_type} ₹{self.total_amount}"
