from decimal import Decimal
from rest_framework import serializers
from customers.enums import CustomerInquiryStatus, CustomerOrderStatus
from customers.models import CustomerProfile, CustomerInquiry, ProductQuotation, CustomerOrder


class CustomerProfileSerializer(serializers.ModelSerializer):
    class Meta:
        model = CustomerProfile
        fields = ['id', 'name', 'email', 'phone', 'company_name', 'state', 'district', 'category', 'created_at']
        read_only_fields = ['id', 'created_at']
        extra_kwargs = {
            'name': {'required': False},
            'phone': {'required': False},
        }


class CustomerInquirySerializer(serializers.ModelSerializer):
    customer_name = serializers.CharField(source='customer.name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)

    class Meta:
        model = CustomerInquiry
        fields = [
            'id', 'customer', 'customer_name', 'manufacturer', 'manufacturer_name',
            'subject', 'message', 'status', 'response', 'responded_at', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class CustomerInquiryCreateSerializer(serializers.Serializer):
    manufacturer = serializers.IntegerField(min_value=1)
    subject = serializers.CharField(max_length=200)
    message = serializers.CharField()


class CustomerInquiryRespondSerializer(serializers.Serializer):
    response = serializers.CharField()


class CustomerInquiryStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CustomerInquiryStatus.choices)


class ProductQuotationSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    customer_name = serializers.CharField(source='customer.name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    offer_expired = serializers.BooleanField(read_only=True)

    class Meta:
        model = ProductQuotation
        fields = [
            'id', 'customer', 'customer_name', 'manufacturer', 'manufacturer_name',
            'product', 'product_name', 'quantity', 'quoted_price', 'total_amount', 'message', 'status',
            'response_message', 'response_quantity', 'response_price', 'offer_expiry', 'offer_expired',
            'responded_at', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class ProductQuotationRequestSerializer(serializers.Serializer):
    product = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1)
    message = serializers.CharField(required=False, allow_blank=True, default='')


class ProductQuotationRespondSerializer(serializers.Serializer):
    """Manufacturer's offer on a product quotation request"""
    response_price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))
    response_quantity = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    response_message = serializers.CharField(required=False, allow_blank=True, default='')
    offer_expiry = serializers.DateTimeField(required=False, allow_null=True)


class ProductQuotationRejectSerializer(serializers.Serializer):
    response_message = serializers.CharField(required=False, allow_blank=True, default='')


class CustomerOrderSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True)
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)

    class Meta:
        model = CustomerOrder
        fields = [
            'id', 'customer', 'manufacturer', 'manufacturer_name', 'product', 'product_name', 'quotation',
            'quantity', 'price', 'total_amount', 'delivery_address', 'contact_number',
            'status', 'tracking_number', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PlaceOrderSerializer(serializers.Serializer):
    quotation = serializers.IntegerField(min_value=1)
    delivery_address = serializers.CharField()
    contact_number = serializers.CharField(max_length=16)


class CustomerOrderUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(required=False, min_value=1)
    delivery_address = serializers.CharField(required=False)
    contact_number = serializers.CharField(required=False, max_length=16)


class CustomerOrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=CustomerOrderStatus.choices)
    tracking_number = serializers.CharField(required=False, allow_blank=True, max_length=100)
