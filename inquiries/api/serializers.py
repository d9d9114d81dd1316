from decimal import Decimal
from rest_framework import serializers
from dashboard.status import status_badge
from inquiries.enums import InquiryType
from inquiries.models import Inquiry, InquiryResponseHistory


class InquirySerializer(serializers.ModelSerializer):
    provider_name = serializers.CharField(source='provider.company_name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    manufacturer_phone = serializers.CharField(source='manufacturer.phone_number', read_only=True)
    status_badge = serializers.SerializerMethodField()

    class Meta:
        model = Inquiry
        fields = [
            'id', 'manufacturer', 'manufacturer_name', 'manufacturer_phone',
            'provider', 'provider_name', 'inquiry_type', 'item_type', 'message', 'quantity', 'unit',
            'delivery_location', 'expected_delivery_date', 'budget_range_min', 'budget_range_max',
            'status', 'status_badge', 'provider_response', 'provider_response_date',
            'responded_by', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_status_badge(self, obj):
        return status_badge('inquiry', obj)


class InquiryCreateSerializer(serializers.Serializer):
    """Form payload of a new inquiry"""
    message = serializers.CharField(trim_whitespace=True)
    inquiry_type = serializers.ChoiceField(choices=InquiryType.choices, required=False, default=InquiryType.GENERAL)
    item_type = serializers.CharField(max_length=100, required=False, allow_blank=True, default='')
    quantity = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True, min_value=Decimal('0.01')
    )
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True, default='MT')
    delivery_location = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    expected_delivery_date = serializers.DateField(required=False, allow_null=True)
    budget_range_min = serializers.DecimalField(max_digits=14, decimal_places=2, required=False, allow_null=True, min_value=Decimal('0'))
    budget_range_max = serializers.DecimalField(max_digits=14, decimal_places=2, required=False, allow_null=True, min_value=Decimal('0'))

    def validate_unit(self, value):
        return value or 'MT'

    def validate(self, data):
        low, high = data.get('budget_range_min'), data.get('budget_range_max')
        if low is not None and high is not None and low > high:
            raise serializers.ValidationError({'budget_range_max': ['Maximum budget must not be below the minimum']})
        return data


class InquiryResponseSerializer(serializers.Serializer):
    response = serializers.CharField(trim_whitespace=True)


class InquiryResponseHistorySerializer(serializers.ModelSerializer):
    responded_by_name = serializers.CharField(source='responded_by.name', read_only=True, default=None)

    class Meta:
        model = InquiryResponseHistory
        fields = [
            'id', 'inquiry', 'provider', 'manufacturer', 'response_number', 'response_text',
            'response_type', 'is_current_response', 'responded_by', 'responded_by_name', 'created_at'
        ]
        read_only_fields = fields
