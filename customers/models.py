from django.db import models
from django.conf import settings
from django.utils import timezone

from products.models import Product
from .enums import CustomerInquiryStatus, ProductQuotationStatus, CustomerOrderStatus


class CustomerProfile(models.Model):
    """Builder, contractor or household buying bricks from manufacturers."""
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='customer_profile',
        limit_choices_to={'role': 'customer'}
    )
    name = models.CharField(max_length=150)
    email = models.EmailField(blank=True)
    phone = models.CharField(max_length=16)
    company_name = models.CharField(max_length=200, blank=True)
    state = models.CharField(max_length=100, blank=True)
    district = models.CharField(max_length=100, blank=True)
    category = models.CharField(max_length=100, blank=True, help_text="Builder, contractor, individual ...")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.state or 'unknown state'})"


class CustomerInquiry(models.Model):
    """Free text question from a customer to a manufacturer."""
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_customer_inquiries',
        limit_choices_to={'role': 'customer'}
    )
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='customer_inquiries',
        limit_choices_to={'role': 'manufacturer'}
    )
    subject = models.CharField(max_length=200)
    message = models.TextField()
    status = models.CharField(max_length=20, choices=CustomerInquiryStatus.choices, default=CustomerInquiryStatus.NEW)
    response = models.TextField(blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']
        verbose_name_plural = 'customer inquiries'

    def __str__(self):
        return f"Inquiry #{self.pk} - {self.subject}"


class ProductQuotation(models.Model):
    """Customer's price request for a product and the manufacturer's offer."""
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='product_quotation_requests',
        limit_choices_to={'role': 'customer'}
    )
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='product_quotations',
        limit_choices_to={'role': 'manufacturer'}
    )
    product = models.ForeignKey(Product, on_delete=models.CASCADE, related_name='quotations')

    quantity = models.PositiveIntegerField()
    quoted_price = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2)
    message = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=ProductQuotationStatus.choices, default=ProductQuotationStatus.PENDING)

    # Manufacturer offer
    response_message = models.TextField(blank=True)
    response_quantity = models.PositiveIntegerField(null=True, blank=True)
    response_price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    offer_expiry = models.DateTimeField(null=True, blank=True)
    responded_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Quotation #{self.pk} - {self.product} x {self.quantity}"

    @property
    def offer_expired(self):
        return self.offer_expiry is not None and self.offer_expiry < timezone.now()

    @property
    def offered_price(self):
        return self.response_price if self.response_price is not None else self.quoted_price

    @property
    def offered_quantity(self):
        return self.response_quantity if self.response_quantity is not None else self.quantity


class CustomerOrder(models.Model):
    """Purchase placed by a customer from an accepted quotation."""
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='placed_customer_orders',
        limit_choices_to={'role': 'customer'}
    )
    manufacturer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='customer_orders',
        limit_choices_to={'role': 'manufacturer'}
    )
    product = models.ForeignKey(Product, on_delete=models.RESTRICT, related_name='orders')
    quotation = models.OneToOneField(
        ProductQuotation,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='order'
    )

    quantity = models.PositiveIntegerField()
    price = models.DecimalField(max_digits=12, decimal_places=2)
    total_amount = models.DecimalField(max_digits=14, decimal_places=2)
    delivery_address = models.TextField()
    contact_number = models.CharField(max_length=16)
    status = models.CharField(max_length=20, choices=CustomerOrderStatus.choices, default=CustomerOrderStatus.PENDING)
    tracking_number = models.CharField(max_length=100, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"Order #{self.pk} - {self.product} x {self.quantity} ({self.status})"
