"""
Inquiry Services
Provider side handling of inquiries: listing, answering and response history.
"""
import logging
from typing import Dict, Any

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Max
from django.utils import timezone
from django.contrib.auth import get_user_model

from providers.models import Provider
from .enums import InquiryStatus, ResponseType, ErrorMessages
from .models import Inquiry, InquiryResponseHistory

User = get_user_model()
logger = logging.getLogger(__name__)


class InquiryResponseService:
    """
    Records provider answers to an inquiry.

    Every answer is kept in InquiryResponseHistory with a running number;
    only the newest row is flagged as the current response and its text is
    mirrored onto the inquiry itself.
    """

    @staticmethod
    def add_response(inquiry: Inquiry, provider: Provider, response_text: str, responded_by: User) -> Dict[str, Any]:
        return InquiryResponseService._record_response(
            inquiry, provider, response_text, responded_by, ResponseType.TEXT_RESPONSE
        )

    @staticmethod
    def edit_response(inquiry: Inquiry, provider: Provider, response_text: str, responded_by: User) -> Dict[str, Any]:
        if not inquiry.response_history.exists() and not inquiry.provider_response:
            raise ValidationError(ErrorMessages.NOTHING_TO_EDIT)
        return InquiryResponseService._record_response(
            inquiry, provider, response_text, responded_by, ResponseType.TEXT_RESPONSE_EDITED
        )

    @staticmethod
    @transaction.atomic
    def _record_response(
        inquiry: Inquiry,
        provider: Provider,
        response_text: str,
        responded_by: User,
        response_type: str
    ) -> Dict[str, Any]:
        InquiryResponseService._validate_response(inquiry, provider, response_text)
        response_text = response_text.strip()

        last_number = inquiry.response_history.aggregate(last=Max('response_number'))['last'] or 0
        next_number = last_number + 1
        if last_number:
            inquiry.response_history.update(is_current_response=False)

        history = InquiryResponseHistory.objects.create(
            inquiry=inquiry,
            provider=provider,
            manufacturer=inquiry.manufacturer,
            response_number=next_number,
            response_text=response_text,
            response_type=response_type,
            is_current_response=True,
            responded_by=responded_by,
        )

        inquiry.provider_response = response_text
        inquiry.provider_response_date = timezone.now()
        inquiry.responded_by = responded_by
        inquiry.status = InquiryStatus.RESPONDED
        inquiry.save()

        logger.info("Provider %s answered inquiry %s (response %s)", provider.pk, inquiry.pk, next_number)
        return {
            'inquiry': inquiry,
            'history': history,
            'response_number': next_number,
        }

    @staticmethod
    def _validate_response(inquiry: Inquiry, provider: Provider, response_text: str) -> None:
        if inquiry.provider_id != provider.pk:
            raise ValidationError(ErrorMessages.NOT_ADDRESSED_TO_YOU)
        if not response_text or not response_text.strip():
            raise ValidationError({'response': [ErrorMessages.EMPTY_RESPONSE]})


class InquiryQueryService:

    @staticmethod
    def for_provider(provider: Provider):
        return Inquiry.objects.filter(provider=provider).select_related('manufacturer', 'provider')

    @staticmethod
    def history_for_provider(provider: Provider):
        return (
            InquiryResponseHistory.objects
            .filter(provider=provider)
            .select_related('inquiry')
            .order_by('-created_at')
        )
