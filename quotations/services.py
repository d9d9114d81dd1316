"""
Quotation Services
Provider responses to quotation requests and manufacturer status decisions.
"""
import logging
from decimal import Decimal
from typing import Dict, Any, Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone
from django.contrib.auth import get_user_model

from providers.models import Provider
from .enums import QuotationStatus, BusinessRules, ErrorMessages
from .models import Quotation

User = get_user_model()
logger = logging.getLogger(__name__)


def quotation_total(quantity: Decimal, price_per_unit: Decimal) -> Decimal:
    return (Decimal(quantity) * Decimal(price_per_unit)).quantize(Decimal('0.01'))


class QuotationResponseService:
    """Service class for the provider side of a quotation"""

    RESPONSE_FIELDS = (
        'delivery_timeline', 'payment_terms', 'additional_notes',
        'delivery_location', 'validity_period',
    )

    @staticmethod
    @transaction.atomic
    def respond(
        quotation: Quotation,
        provider: Provider,
        price_per_unit: Decimal,
        total_amount: Optional[Decimal] = None,
        **response: Any
    ) -> Dict[str, Any]:
        """
        Fill in the provider's price and terms.

        Args:
            quotation: quotation request addressed to ``provider``
            provider: responding provider
            price_per_unit: quoted unit price
            total_amount: quoted total, computed from quantity when omitted
            **response: delivery_timeline, payment_terms, additional_notes,
                delivery_location, validity_period

        Returns:
            Dict with the updated quotation and the previous stored status

        Raises:
            ValidationError: if the quotation belongs to another provider
        """
        if quotation.provider_id != provider.pk:
            raise ValidationError(ErrorMessages.NOT_ADDRESSED_TO_YOU)
        if price_per_unit is None or Decimal(price_per_unit) <= 0:
            raise ValidationError({'price_per_unit': [ErrorMessages.NON_POSITIVE_PRICE]})

        previous_status = quotation.status
        quotation.price_per_unit = price_per_unit
        quotation.total_amount = (
            total_amount if total_amount is not None
            else quotation_total(quotation.quantity, price_per_unit)
        )
        for field in QuotationResponseService.RESPONSE_FIELDS:
            if field in response and response[field] is not None:
                setattr(quotation, field, response[field])

        quotation.provider_response_date = timezone.now()
        quotation.status = QuotationStatus.QUOTED
        quotation.save()

        logger.info("Provider %s quoted ₹%s on quotation %s", provider.pk, quotation.total_amount, quotation.pk)
        return {
            'quotation': quotation,
            'previous_status': previous_status,
        }


class QuotationStatusService:
    """Manufacturer decisions on its own quotations"""

    @staticmethod
    def update_status(quotation: Quotation, new_status: str, user: User) -> Dict[str, Any]:
        if quotation.manufacturer_id != user.pk:
            raise ValidationError(ErrorMessages.NOT_YOUR_QUOTATION)
        if new_status not in BusinessRules.MANUFACTURER_STATUSES:
            raise ValidationError({'status': [ErrorMessages.INVALID_MANUFACTURER_STATUS]})
        if BusinessRules.is_final_status(quotation.status):
            raise ValidationError(ErrorMessages.FINAL_STATUS.format(status=quotation.status))

        old_status = quotation.status
        quotation.status = new_status
        quotation.save(update_fields=['status', 'updated_at'])

        logger.info("Quotation %s moved from %s to %s by %s", quotation.pk, old_status, new_status, user.pk)
        return {
            'quotation': quotation,
            'old_status': old_status,
            'new_status': new_status,
        }
