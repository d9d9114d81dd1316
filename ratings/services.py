import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction

from orders.models import Order
from providers.models import Provider
from .enums import BusinessRules, ErrorMessages
from .models import Rating

logger = logging.getLogger(__name__)


class RatingService:

    @staticmethod
    def would_recommend(rating: int) -> bool:
        return rating >= BusinessRules.RECOMMEND_THRESHOLD

    @staticmethod
    def validate_order(order: Optional[Order], manufacturer, provider: Provider) -> Order:
        if order is None:
            raise ValidationError({'order': [ErrorMessages.ORDER_REQUIRED]})
        if order.manufacturer_id != manufacturer.pk or order.provider_id != provider.pk:
            raise ValidationError({'order': [ErrorMessages.ORDER_MISMATCH]})
        return order

    @staticmethod
    @transaction.atomic
    def create_rating(manufacturer, provider: Provider, order: Order, rating: int, **review) -> Rating:
        """
        Record a manufacturer's rating of a provider for one of their orders.

        Sub-ratings default to the overall rating and ``would_recommend``
        follows the recommendation threshold unless given explicitly.
        """
        RatingService.validate_order(order, manufacturer, provider)
        for field in ('quality_rating', 'delivery_rating', 'service_rating'):
            if review.get(field) is None:
                review[field] = rating
        if review.get('would_recommend') is None:
            review['would_recommend'] = RatingService.would_recommend(rating)

        instance = Rating(manufacturer=manufacturer, provider=provider, order=order, rating=rating, **review)
        instance.full_clean()
        instance.save()
        logger.info("Rating %s (%s) recorded for provider %s", instance.pk, rating, provider.pk)
        return instance

    @staticmethod
    def for_provider(provider: Provider):
        return Rating.objects.filter(provider=provider).select_related('manufacturer', 'order')
