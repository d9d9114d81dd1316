from django.db import models
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator

from orders.models import Order
from providers.models import Provider
from .enums import BusinessRules, ErrorMessages

RATING_VALIDATORS = [
    MinValueValidator(BusinessRules.MIN_RATING),
    MaxValueValidator(BusinessRules.MAX_RATING),
]


class Rating(models.Model):
    """Manufacturer feedback on a provider, always tied to one of their orders"""
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='ratings_given',
        limit_choices_to={'role': 'manufacturer'}
    )
    provider = models.ForeignKey(Provider, on_delete=models.CASCADE, related_name='ratings')
    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='ratings')

    rating = models.PositiveSmallIntegerField(validators=RATING_VALIDATORS)
    review_title = models.CharField(max_length=200, blank=True)
    review_text = models.TextField(blank=True)
    quality_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    delivery_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    service_rating = models.PositiveSmallIntegerField(null=True, blank=True, validators=RATING_VALIDATORS)
    would_recommend = models.BooleanField(null=True, blank=True)
    is_verified = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.rating}★ for {self.provider.company_name} (order {self.order.order_number})"

    def clean(self):
        if not self.order_id:
            raise ValidationError({'order': [ErrorMessages.ORDER_REQUIRED]})
        if self.order.manufacturer_id != self.manufacturer_id or self.order.provider_id != self.provider_id:
            raise ValidationError({'order': [ErrorMessages.ORDER_MISMATCH]})
