from rest_framework import serializers
from providers.enums import ProviderKind
from providers.models import Provider, Manufacturer
from providers.services import ProviderSearchService


class ProviderListSerializer(serializers.ModelSerializer):
    """Serializer for listing providers (basic info)"""
    kind_display = serializers.CharField(source='get_kind_display', read_only=True)

    class Meta:
        model = Provider
        fields = [
            'id', 'kind', 'kind_display', 'company_name', 'contact_name', 'phone',
            'city', 'district', 'state', 'service_area', 'capabilities', 'capacity',
        ]


class ProviderDetailSerializer(serializers.ModelSerializer):
    """Serializer for the full provider profile, also used for registration"""
    kind = serializers.ChoiceField(choices=ProviderKind.choices, required=False)
    kind_display = serializers.CharField(source='get_kind_display', read_only=True)
    capabilities = serializers.ListField(
        child=serializers.CharField(max_length=100), allow_empty=False
    )
    rating_summary = serializers.SerializerMethodField()

    class Meta:
        model = Provider
        fields = [
            'id', 'kind', 'kind_display', 'company_name', 'contact_name', 'phone', 'email',
            'city', 'district', 'state', 'pincode', 'country', 'service_area',
            'capabilities', 'capacity', 'experience_years',
            'category', 'biz_gst', 'pan_no', 'additional_info',
            'rating_summary', 'is_active', 'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'is_active', 'created_at', 'updated_at']
        extra_kwargs = {
            'phone': {'required': False},
        }

    def get_rating_summary(self, obj):
        return ProviderSearchService.summary(obj)

    def validate(self, data):
        # Nepal registrations carry a PAN number instead of a GST number
        country = data.get('country', getattr(self.instance, 'country', 'India'))
        if country == 'Nepal' and not data.get('pan_no', getattr(self.instance, 'pan_no', '')):
            raise serializers.ValidationError({'pan_no': ["PAN No is required for Nepal"]})
        return data


class ProviderSearchSerializer(serializers.Serializer):
    """Serializer for provider search parameters"""
    kind = serializers.ChoiceField(choices=ProviderKind.choices, required=False)
    q = serializers.CharField(required=False, allow_blank=True, help_text="Company or contact name")
    capability = serializers.CharField(required=False, allow_blank=True, help_text="Fuel, transport or service type")
    city = serializers.CharField(required=False, allow_blank=True)
    district = serializers.CharField(required=False, allow_blank=True)
    state = serializers.CharField(required=False, allow_blank=True)


class ManufacturerSerializer(serializers.ModelSerializer):
    class Meta:
        model = Manufacturer
        fields = [
            'id', 'name', 'company_name', 'phone', 'email', 'kiln_type',
            'city', 'district', 'state', 'pincode', 'country', 'status',
            'created_at', 'updated_at'
        ]
        read_only_fields = ['id', 'status', 'created_at', 'updated_at']
        extra_kwargs = {
            'phone': {'required': False},
        }
