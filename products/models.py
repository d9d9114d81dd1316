from django.db import models
from django.conf import settings

from .enums import ProductCategory, BusinessRules


class Product(models.Model):
    """An item a manufacturer sells to end customers."""
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='products',
        limit_choices_to={'role': 'manufacturer'}
    )
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=30, choices=ProductCategory.choices)
    description = models.TextField(blank=True)
    dimensions = models.CharField(max_length=100, blank=True)

    price = models.DecimalField(max_digits=12, decimal_places=2)
    price_unit = models.CharField(max_length=30, default=BusinessRules.DEFAULT_PRICE_UNIT)
    stock_quantity = models.PositiveIntegerField(null=True, blank=True)
    is_available = models.BooleanField(default=True)

    specifications = models.JSONField(default=dict, blank=True)
    image_url = models.URLField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ₹{self.price} {self.price_unit}"
