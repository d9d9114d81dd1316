from decimal import Decimal
from rest_framework import serializers
from dashboard.status import status_badge
from quotations.enums import BusinessRules
from quotations.models import Quotation


class QuotationSerializer(serializers.ModelSerializer):
    provider_name = serializers.CharField(source='provider.company_name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    status_badge = serializers.SerializerMethodField()

    class Meta:
        model = Quotation
        fields = [
            'id', 'manufacturer', 'manufacturer_name', 'provider', 'provider_name', 'inquiry',
            'item_type', 'quantity', 'unit', 'delivery_location',
            'price_per_unit', 'total_amount', 'status', 'status_badge',
            'delivery_timeline', 'payment_terms', 'additional_notes', 'validity_period',
            'provider_response_date', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_status_badge(self, obj):
        return status_badge('quotation', obj)


class QuotationRequestSerializer(serializers.Serializer):
    """Form payload of a new quotation request"""
    item_type = serializers.CharField(max_length=100)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True, default=BusinessRules.DEFAULT_UNIT)
    price_per_unit = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, default=Decimal('0'), min_value=Decimal('0')
    )
    delivery_location = serializers.CharField(max_length=255)
    delivery_timeline = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    payment_terms = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    additional_notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_unit(self, value):
        return value or BusinessRules.DEFAULT_UNIT


class QuotationResponseSerializer(serializers.Serializer):
    """Provider's answer to a quotation request"""
    price_per_unit = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    total_amount = serializers.DecimalField(
        max_digits=14, decimal_places=2, required=False, allow_null=True, min_value=Decimal('0')
    )
    delivery_timeline = serializers.CharField(max_length=255, required=False, allow_blank=True)
    payment_terms = serializers.CharField(max_length=255, required=False, allow_blank=True)
    additional_notes = serializers.CharField(required=False, allow_blank=True)
    delivery_location = serializers.CharField(max_length=255, required=False, allow_blank=True)
    validity_period = serializers.IntegerField(required=False, allow_null=True, min_value=1)


class QuotationStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[(s.value, s.label) for s in BusinessRules.MANUFACTURER_STATUSES])
