"""
Validation of the request forms a manufacturer submits to a provider.

Each builder checks one form and returns the values of exactly one new row.
Quotations and orders are standalone: their inquiry / quotation links are
always left empty even when the form was opened from a related record.
"""
from typing import Any, Dict, Iterable

from inquiries.api.serializers import InquiryCreateSerializer
from inquiries.enums import InquiryStatus
from orders.api.serializers import OrderRequestSerializer
from orders.enums import OrderStatus, PaymentStatus
from orders.models import generate_order_number
from quotations.api.serializers import QuotationRequestSerializer
from quotations.enums import QuotationStatus
from quotations.services import quotation_total
from ratings.api.serializers import RatingCreateSerializer
from ratings.enums import ErrorMessages as RatingErrors
from ratings.services import RatingService
from .exceptions import SubmissionValidationError
from .store import INQUIRIES, QUOTATIONS, ORDERS, RATINGS

INQUIRY = 'inquiry'
QUOTATION = 'quotation'
ORDER = 'order'
RATING = 'rating'

# interaction type -> list the new row lands in
INTERACTION_LISTS = {
    INQUIRY: INQUIRIES,
    QUOTATION: QUOTATIONS,
    ORDER: ORDERS,
    RATING: RATINGS,
}


def _validated(serializer_class: type, form: Dict[str, Any]) -> Dict[str, Any]:
    serializer = serializer_class(data=form)
    if not serializer.is_valid():
        raise SubmissionValidationError(_error_dict(serializer.errors))
    return dict(serializer.validated_data)


def _error_dict(errors) -> Dict[str, list]:
    flattened = {}
    for field, messages in errors.items():
        if isinstance(messages, dict):
            messages = [str(m) for value in messages.values() for m in value]
        flattened[field] = [str(m) for m in messages]
    return flattened


def build_inquiry(manufacturer, provider, form: Dict[str, Any]) -> Dict[str, Any]:
    data = _validated(InquiryCreateSerializer, form)
    return {
        **data,
        'manufacturer': manufacturer,
        'provider': provider,
        'status': InquiryStatus.PENDING,
    }


def build_quotation(manufacturer, provider, form: Dict[str, Any]) -> Dict[str, Any]:
    data = _validated(QuotationRequestSerializer, form)
    return {
        **data,
        'manufacturer': manufacturer,
        'provider': provider,
        'inquiry': None,
        'total_amount': quotation_total(data['quantity'], data['price_per_unit']),
        'status': QuotationStatus.PENDING,
    }


def build_order(manufacturer, provider, form: Dict[str, Any]) -> Dict[str, Any]:
    data = _validated(OrderRequestSerializer, form)
    return {
        **data,
        'order_number': data.get('order_number') or generate_order_number(),
        'manufacturer': manufacturer,
        'provider': provider,
        'quotation': None,
        'total_amount': quotation_total(data['quantity'], data['price_per_unit']),
        'order_status': OrderStatus.PENDING,
        'payment_status': PaymentStatus.PENDING,
    }


def build_rating(manufacturer, provider, form: Dict[str, Any], orders: Iterable = ()) -> Dict[str, Any]:
    """
    Ratings must point at one of the loaded orders with ``provider``.

    The single score is copied into the quality, delivery and service
    sub-ratings.
    """
    provider_orders = [order for order in orders if order.provider_id == provider.pk]
    if not provider_orders:
        raise SubmissionValidationError({'order_number': [RatingErrors.ORDER_REQUIRED]})

    data = _validated(RatingCreateSerializer, form)
    order = next((o for o in provider_orders if o.order_number == data['order_number']), None)
    if order is None:
        raise SubmissionValidationError({'order_number': [RatingErrors.ORDER_REQUIRED]})

    rating = data['rating']
    return {
        'manufacturer': manufacturer,
        'provider': provider,
        'order': order,
        'rating': rating,
        'review_title': data['review_title'],
        'review_text': data['comment'],
        'quality_rating': rating,
        'delivery_rating': rating,
        'service_rating': rating,
        'would_recommend': RatingService.would_recommend(rating),
    }


def build_submission(interaction_type: str, manufacturer, provider, form: Dict[str, Any], orders: Iterable = ()):
    """Return ``(list_type, values)`` for one validated form."""
    if interaction_type == INQUIRY:
        values = build_inquiry(manufacturer, provider, form)
    elif interaction_type == QUOTATION:
        values = build_quotation(manufacturer, provider, form)
    elif interaction_type == ORDER:
        values = build_order(manufacturer, provider, form)
    elif interaction_type == RATING:
        values = build_rating(manufacturer, provider, form, orders)
    else:
        raise SubmissionValidationError({'interaction_type': [f"\"{interaction_type}\" is not a valid request type"]})
    return INTERACTION_LISTS[interaction_type], values
