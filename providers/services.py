"""
Provider and manufacturer profile management and provider search.
"""
import logging
from typing import Dict, Any, List, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.contrib.auth import get_user_model

from .enums import KIND_FOR_ROLE, ProviderMessages
from .models import Provider, Manufacturer

User = get_user_model()
logger = logging.getLogger(__name__)


def clean_capabilities(values) -> List[str]:
    """Strip blanks and duplicates while keeping the submitted order."""
    cleaned = []
    for value in values or []:
        value = str(value).strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return cleaned


class ProviderProfileService:

    @staticmethod
    def _validate_kind(user: User, kind: str) -> None:
        expected = KIND_FOR_ROLE.get(str(user.role))
        if expected is None or expected != kind:
            raise ValidationError({'kind': [ProviderMessages.KIND_MISMATCH]})

    @staticmethod
    @transaction.atomic
    def register_provider(user: User, **data) -> Provider:
        """
        Create the provider profile of ``user``.

        The account role decides which kind may be registered: a coal
        provider account registers a coal provider and so on.
        """
        kind = data.get('kind') or KIND_FOR_ROLE.get(str(user.role))
        ProviderProfileService._validate_kind(user, kind)

        if Provider.objects.filter(user=user).exists():
            raise ValidationError(ProviderMessages.ALREADY_REGISTERED)

        data['kind'] = kind
        data['capabilities'] = clean_capabilities(data.get('capabilities'))
        data.setdefault('phone', user.phone_number)
        provider = Provider.objects.create(user=user, **data)
        logger.info("Registered %s provider %s for user %s", kind, provider.pk, user.pk)
        return provider

    @staticmethod
    def update_provider(provider: Provider, **data) -> Provider:
        # kind follows the account role and never changes after registration
        data.pop('kind', None)
        if 'capabilities' in data:
            data['capabilities'] = clean_capabilities(data['capabilities'])
        for field, value in data.items():
            setattr(provider, field, value)
        provider.save()
        return provider

    @staticmethod
    def get_for_user(user: User) -> Provider:
        try:
            return Provider.objects.get(user=user)
        except Provider.DoesNotExist:
            raise ValidationError(ProviderMessages.PROFILE_MISSING)


class ManufacturerProfileService:

    @staticmethod
    @transaction.atomic
    def register_manufacturer(user: User, **data) -> Manufacturer:
        if user.role != 'manufacturer':
            raise ValidationError("Only manufacturer accounts can register a kiln profile")
        if Manufacturer.objects.filter(user=user).exists():
            raise ValidationError("A manufacturer profile already exists for this account")

        data.setdefault('phone', user.phone_number)
        manufacturer = Manufacturer.objects.create(user=user, **data)
        logger.info("Registered manufacturer %s for user %s", manufacturer.pk, user.pk)
        return manufacturer

    @staticmethod
    def get_for_user(user: User) -> Manufacturer:
        try:
            return Manufacturer.objects.get(user=user)
        except Manufacturer.DoesNotExist:
            raise ValidationError(ProviderMessages.MANUFACTURER_MISSING)


class ProviderSearchService:
    """Public browsing of provider profiles."""

    LOCATION_FIELDS = ('city', 'district', 'state')

    @staticmethod
    def search(
        kind: Optional[str] = None,
        query: Optional[str] = None,
        capability: Optional[str] = None,
        **location: Any
    ) -> List[Provider]:
        """
        Filter active providers.

        Args:
            kind: coal, transport or labour
            query: free text matched against company and contact name
            capability: one fuel type / transport type / service type
            **location: city, district or state, matched case-insensitively

        Returns:
            List of matching providers, newest first
        """
        queryset = Provider.objects.filter(is_active=True)

        if kind:
            queryset = queryset.filter(kind=kind)

        if query:
            queryset = queryset.filter(
                Q(company_name__icontains=query) | Q(contact_name__icontains=query)
            )

        for field in ProviderSearchService.LOCATION_FIELDS:
            value = location.get(field)
            if value:
                queryset = queryset.filter(**{f'{field}__iexact': value.strip()})

        providers = list(queryset)
        # JSON containment lookups are not available on every backend
        if capability:
            providers = [p for p in providers if p.offers(capability)]
        return providers

    @staticmethod
    def summary(provider: Provider) -> Dict[str, Any]:
        ratings = list(provider.ratings.values_list('rating', flat=True))
        return {
            'rating_count': len(ratings),
            'average_rating': round(sum(ratings) / len(ratings), 2) if ratings else None,
        }
