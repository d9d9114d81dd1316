from decimal import Decimal
from rest_framework import serializers
from dashboard.status import status_badge
from orders.enums import OrderStatus, PaymentStatus
from orders.models import Order, OrderStatusHistory


class OrderSerializer(serializers.ModelSerializer):
    provider_name = serializers.CharField(source='provider.company_name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    order_status_badge = serializers.SerializerMethodField()
    payment_status_badge = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'quotation', 'manufacturer', 'manufacturer_name',
            'provider', 'provider_name', 'item_type', 'quantity', 'unit', 'price_per_unit',
            'total_amount', 'delivery_location', 'expected_delivery_date', 'payment_terms',
            'special_instructions', 'order_status', 'order_status_badge',
            'payment_status', 'payment_status_badge', 'provider_confirmation_date',
            'confirmed_by_provider', 'provider_order_number', 'tracking_number',
            'actual_delivery_date', 'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_order_status_badge(self, obj):
        return status_badge('order', obj)

    def get_payment_status_badge(self, obj):
        return status_badge('payment', obj)


class OrderRequestSerializer(serializers.Serializer):
    """Form payload of a new order"""
    item_type = serializers.CharField(max_length=100)
    quantity = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    unit = serializers.CharField(max_length=20, required=False, allow_blank=True, default='MT')
    price_per_unit = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, default=Decimal('0'), min_value=Decimal('0')
    )
    delivery_location = serializers.CharField(max_length=255)
    order_number = serializers.CharField(max_length=30, required=False, allow_blank=True, default='')
    expected_delivery_date = serializers.DateField(required=False, allow_null=True)
    payment_terms = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    special_instructions = serializers.CharField(required=False, allow_blank=True, default='')

    def validate_unit(self, value):
        return value or 'MT'

    def validate_order_number(self, value):
        if value and Order.objects.filter(order_number=value).exists():
            raise serializers.ValidationError("An order with this number already exists")
        return value


class OrderConfirmSerializer(serializers.Serializer):
    provider_order_number = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default='')
    tracking_number = serializers.CharField(max_length=50, required=False, allow_blank=True)


class PaymentStatusUpdateSerializer(serializers.Serializer):
    payment_status = serializers.ChoiceField(choices=PaymentStatus.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default='')


class OrderStatusHistorySerializer(serializers.ModelSerializer):
    updated_by_name = serializers.CharField(source='updated_by.name', read_only=True)
    updated_by_role = serializers.CharField(source='updated_by.role', read_only=True)

    class Meta:
        model = OrderStatusHistory
        fields = [
            'id', 'axis', 'previous_status', 'new_status', 'updated_by',
            'updated_by_name', 'updated_by_role', 'notes', 'timestamp'
        ]
        read_only_fields = fields
