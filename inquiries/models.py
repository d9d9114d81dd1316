from django.db import models
from django.conf import settings

from providers.models import Provider
from .enums import InquiryStatus, InquiryType, ResponseType


class Inquiry(models.Model):
    """A manufacturer's message to a provider, optionally about a specific item."""
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='inquiries',
        limit_choices_to={'role': 'manufacturer'}
    )
    provider = models.ForeignKey(Provider, on_delete=models.CASCADE, related_name='inquiries')

    # Request details
    inquiry_type = models.CharField(max_length=30, choices=InquiryType.choices, default=InquiryType.GENERAL)
    item_type = models.CharField(max_length=100, blank=True, help_text="Coal type, transport type or service type")
    message = models.TextField()
    quantity = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    unit = models.CharField(max_length=20, default='MT')
    delivery_location = models.CharField(max_length=255, blank=True)
    expected_delivery_date = models.DateField(null=True, blank=True)
    budget_range_min = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)
    budget_range_max = models.DecimalField(max_digits=14, decimal_places=2, null=True, blank=True)

    status = models.CharField(max_length=20, choices=InquiryStatus.choices, default=InquiryStatus.PENDING)

    # Latest provider answer
    provider_response = models.TextField(blank=True)
    provider_response_date = models.DateTimeField(null=True, blank=True)
    responded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='inquiry_responses'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'inquiries'

    def __str__(self):
        return f"Inquiry #{self.pk} to {self.provider.company_name}"


class InquiryResponseHistory(models.Model):
    """Every answer a provider gave to an inquiry, numbered from 1"""
    inquiry = models.ForeignKey(Inquiry, on_delete=models.CASCADE, related_name='response_history')
    provider = models.ForeignKey(Provider, on_delete=models.CASCADE, related_name='inquiry_response_history')
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='received_inquiry_responses'
    )
    response_number = models.PositiveIntegerField()
    response_text = models.TextField()
    response_type = models.CharField(max_length=30, choices=ResponseType.choices, default=ResponseType.TEXT_RESPONSE)
    is_current_response = models.BooleanField(default=True)
    responded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='+'
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-response_number']
        unique_together = ['inquiry', 'response_number']
        verbose_name_plural = 'inquiry response history'

    def __str__(self):
        return f"Inquiry #{self.inquiry_id} response {self.response_number}"
