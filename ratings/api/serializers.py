from rest_framework import serializers
from ratings.enums import BusinessRules
from ratings.models import Rating


class RatingSerializer(serializers.ModelSerializer):
    manufacturer_name = serializers.CharField(source='manufacturer.name', read_only=True)
    provider_name = serializers.CharField(source='provider.company_name', read_only=True)
    order_number = serializers.CharField(source='order.order_number', read_only=True)

    class Meta:
        model = Rating
        fields = [
            'id', 'manufacturer', 'manufacturer_name', 'provider', 'provider_name',
            'order', 'order_number', 'rating', 'review_title', 'review_text',
            'quality_rating', 'delivery_rating', 'service_rating',
            'would_recommend', 'is_verified', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class RatingCreateSerializer(serializers.Serializer):
    """Rating form: one overall score, the order it refers to and a comment"""
    order_number = serializers.CharField(max_length=50)
    rating = serializers.IntegerField(min_value=BusinessRules.MIN_RATING, max_value=BusinessRules.MAX_RATING)
    review_title = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    comment = serializers.CharField()

    def validate_comment(self, value):
        if not value.strip():
            raise serializers.ValidationError("Please write a short review")
        return value.strip()
