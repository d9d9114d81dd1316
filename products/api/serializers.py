from decimal import Decimal
from rest_framework import serializers
from products.enums import BusinessRules, ErrorMessages, ProductCategory
from products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    price = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0.01'))

    class Meta:
        model = Product
        fields = [
            'id', 'manufacturer', 'manufacturer_name', 'name', 'category', 'description',
            'dimensions', 'price', 'price_unit', 'stock_quantity', 'is_available',
            'specifications', 'image_url', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'manufacturer', 'manufacturer_name', 'created_at', 'updated_at']
        extra_kwargs = {'price_unit': {'required': False, 'allow_blank': True}}

    def validate_name(self, value):
        value = value.strip()
        if len(value) < BusinessRules.MIN_NAME_LENGTH:
            raise serializers.ValidationError(ErrorMessages.NAME_TOO_SHORT)
        return value


class ProductAvailabilitySerializer(serializers.Serializer):
    """Omit ``is_available`` to flip the current value"""
    is_available = serializers.BooleanField(required=False, allow_null=True, default=None)


class ProductBrowseSerializer(serializers.Serializer):
    manufacturer = serializers.IntegerField(required=False, min_value=1)
    category = serializers.ChoiceField(choices=ProductCategory.choices, required=False)
    q = serializers.CharField(required=False, allow_blank=True)
