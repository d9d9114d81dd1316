"""
Provider kinds and the vocabulary used on provider profiles.
"""
from django.db import models


class ProviderKind(models.TextChoices):
    COAL = 'coal', 'Coal / Fuel Provider'
    TRANSPORT = 'transport', 'Transport Provider'
    LABOUR = 'labour', 'Labour Contractor'


class ManufacturerStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    INACTIVE = 'inactive', 'Inactive'


# Which provider kind a user role is allowed to register
KIND_FOR_ROLE = {
    'coal_provider': ProviderKind.COAL,
    'transport_provider': ProviderKind.TRANSPORT,
    'labour_contractor': ProviderKind.LABOUR,
}

# Suggested capability values per kind, shown to clients registering a profile
CAPABILITY_SUGGESTIONS = {
    'coal': [
        'high_low_gcv_us_coal', 'imported_coal', 'indian_coal',
        'g1_g2_assam_coal', 'biomass_fuel', 'alternate_fuel',
    ],
    'transport': [
        'road_transport', 'rail_freight',
    ],
    'labour': [
        'molders', 'green_brick_movers', 'stackers', 'insulation', 'coal_loading',
        'firemen', 'withdrawers', 'jcb_driver', 'tractor_driver', 'manager',
        'welder', 'general_labour',
    ],
}


class ProviderMessages:
    REGISTERED = "Provider profile registered successfully"
    UPDATED = "Provider profile updated successfully"
    NOT_FOUND = "Provider not found"
    PROFILE_MISSING = "You have not registered a provider profile yet"
    ALREADY_REGISTERED = "A provider profile already exists for this account"
    KIND_MISMATCH = "Your account role cannot register a provider of this kind"
    MANUFACTURER_REGISTERED = "Manufacturer profile registered successfully"
    MANUFACTURER_MISSING = "You have not registered a manufacturer profile yet"
