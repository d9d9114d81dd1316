from rest_framework import serializers

from dashboard.store import INQUIRIES, QUOTATIONS, ORDERS, RATINGS
from inquiries.api.serializers import InquirySerializer
from orders.api.serializers import OrderSerializer
from quotations.api.serializers import QuotationSerializer
from ratings.api.serializers import RatingSerializer

LIST_SERIALIZERS = {
    INQUIRIES: InquirySerializer,
    QUOTATIONS: QuotationSerializer,
    ORDERS: OrderSerializer,
    RATINGS: RatingSerializer,
}


def serialize_lists(lists):
    """Render every loaded dashboard list with its row serializer."""
    return {
        list_type: LIST_SERIALIZERS[list_type](rows, many=True).data
        for list_type, rows in lists.items()
    }


class SubmitRequestSerializer(serializers.Serializer):
    provider = serializers.IntegerField(min_value=1)


class BulkDeleteSerializer(serializers.Serializer):
    ids = serializers.ListField(child=serializers.IntegerField(min_value=1), allow_empty=False)
