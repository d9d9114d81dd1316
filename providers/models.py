from django.db import models
from django.conf import settings

from .enums import ProviderKind, ManufacturerStatus


class Manufacturer(models.Model):
    """Brick kiln owner profile."""
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='manufacturer_profile',
        limit_choices_to={'role': 'manufacturer'}
    )
    name = models.CharField(max_length=150)
    company_name = models.CharField(max_length=200)
    phone = models.CharField(max_length=16)
    email = models.EmailField(blank=True)
    kiln_type = models.CharField(max_length=100, blank=True)

    # Location
    city = models.CharField(max_length=100, blank=True)
    district = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    pincode = models.CharField(max_length=10, blank=True)
    country = models.CharField(max_length=60, default='India')

    status = models.CharField(max_length=20, choices=ManufacturerStatus.choices, default=ManufacturerStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.company_name} ({self.district}, {self.state})"


class Provider(models.Model):
    """
    A coal/fuel provider, transport provider or labour contractor.

    ``capabilities`` holds fuel types, transport types or labour service
    types depending on ``kind``; ``capacity`` is the matching supply capacity,
    vehicle capacity or workforce size as free text.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='provider_profile'
    )
    kind = models.CharField(max_length=20, choices=ProviderKind.choices)

    # Identity and contact
    company_name = models.CharField(max_length=200)
    contact_name = models.CharField(max_length=150)
    phone = models.CharField(max_length=16)
    email = models.EmailField(blank=True)

    # Location
    city = models.CharField(max_length=100)
    district = models.CharField(max_length=100)
    state = models.CharField(max_length=100)
    pincode = models.CharField(max_length=10)
    country = models.CharField(max_length=60, default='India')
    service_area = models.CharField(max_length=255, blank=True)

    # Capabilities
    capabilities = models.JSONField(default=list, blank=True)
    capacity = models.CharField(max_length=100, blank=True)
    experience_years = models.PositiveIntegerField(null=True, blank=True)

    # Business registration
    category = models.CharField(max_length=100, blank=True)
    biz_gst = models.CharField(max_length=20, blank=True)
    pan_no = models.CharField(max_length=20, blank=True)
    additional_info = models.TextField(blank=True)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.company_name} - {self.get_kind_display()}"

    def offers(self, capability):
        wanted = capability.strip().lower()
        return any(str(c).strip().lower() == wanted for c in self.capabilities or [])
